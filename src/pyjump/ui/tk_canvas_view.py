import tkinter as tk

from pyjump.domain.actors import Actor
from pyjump.domain.kinds import ActorKind, CellKind, Status
from pyjump.domain.level import Level
from pyjump.domain.world import World
from pyjump.ui.camera import Camera


_CELL_COLORS = {CellKind.WALL: "#fff", CellKind.LAVA: "#ff6464"}
_ACTOR_COLORS = {
    ActorKind.PLAYER: "#404040",
    ActorKind.COLLECTIBLE: "#f1e559",
    ActorKind.HAZARD: "#ff6464",
}
_BACKGROUNDS = {
    Status.IN_PROGRESS: "#3485db",
    Status.WON: "#44b24c",
    Status.LOST: "#2c1a32",
}


class TkCanvasView:
    def __init__(self, root: tk.Misc, *, width: int, height: int, scale: int) -> None:
        self._w = width
        self._h = height
        self._scale = scale
        self._camera = Camera(left=0.0, top=0.0, width=width, height=height)
        self._level: Level | None = None

        self.canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0)
        self.canvas.pack(fill="both", expand=True)

    def show_level(self, level: Level) -> None:
        """Draw the static grid once; actors are redrawn every frame."""
        s = self._scale
        self._level = level
        self._camera = Camera(left=0.0, top=0.0, width=self._w, height=self._h)

        self.canvas.delete("all")
        for y, row in enumerate(level.rows):
            for x, cell in enumerate(row):
                color = _CELL_COLORS.get(cell)
                if color is None:
                    continue
                self.canvas.create_rectangle(
                    x * s, y * s, (x + 1) * s, (y + 1) * s, outline="", fill=color, tags=("grid",)
                )
        self.canvas.configure(scrollregion=(0, 0, level.width * s, level.height * s))

    def render_world(self, world: World) -> None:
        if world.level is not self._level:
            self.show_level(world.level)

        self.canvas.configure(background=_BACKGROUNDS[world.status])
        self.canvas.delete("actor")
        for actor in world.actors:
            self._draw_actor(actor)

        self._scroll_to(world)

    def _draw_actor(self, actor: Actor) -> None:
        s = self._scale
        p, size = actor.position, actor.size
        self.canvas.create_rectangle(
            p.x * s, p.y * s, (p.x + size.x) * s, (p.y + size.y) * s,
            outline="", fill=_ACTOR_COLORS[actor.kind], tags=("actor",),
        )

    def _scroll_to(self, world: World) -> None:
        s = self._scale
        player = world.player
        center = player.position.add(player.size.scale(0.5)).scale(s)
        content_w, content_h = world.level.width * s, world.level.height * s
        self._camera = self._camera.follow(center, content_w, content_h)

        self.canvas.xview_moveto(self._camera.left / content_w)
        self.canvas.yview_moveto(self._camera.top / content_h)
