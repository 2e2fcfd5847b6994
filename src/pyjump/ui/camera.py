from __future__ import annotations

from dataclasses import dataclass, replace

from pyjump.domain.vec import Vec


@dataclass(frozen=True)
class Camera:
    """
    Viewport offset in pixels.

    Scrolls only when the followed point leaves the middle of the view; the margin
    is a third of the viewport width on both axes.
    """
    left: float
    top: float
    width: float
    height: float

    def follow(self, center: Vec, content_width: float, content_height: float) -> Camera:
        margin = self.width / 3
        left, top = self.left, self.top

        if center.x < left + margin:
            left = center.x - margin
        elif center.x > left + self.width - margin:
            left = center.x + margin - self.width

        if center.y < top + margin:
            top = center.y - margin
        elif center.y > top + self.height - margin:
            top = center.y + margin - self.height

        left = _clamp(left, 0.0, max(0.0, content_width - self.width))
        top = _clamp(top, 0.0, max(0.0, content_height - self.height))
        return replace(self, left=left, top=top)


def _clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))
