from __future__ import annotations
import tkinter as tk
from pyjump.domain.input_state import KeyState


_ARROWS = {"Left": "left", "Right": "right", "Up": "up", "Down": "down"}


class TkInputMapper:
    """Tracks which arrow keys are held; sampled once per frame."""

    def __init__(self, root: tk.Tk) -> None:
        self._down: dict[str, bool] = {}

        for keysym in _ARROWS:
            root.bind(f"<KeyPress-{keysym}>", self._on_key)
            root.bind(f"<KeyRelease-{keysym}>", self._on_key)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_key(self, evt: tk.Event) -> None:
        name = _ARROWS.get(evt.keysym)
        if name is None:
            return
        self._down[name] = evt.type == tk.EventType.KeyPress

    def sample(self) -> KeyState:
        # "Held" semantics: the key stays pressed until its release event.
        return KeyState.from_mapping(self._down)
