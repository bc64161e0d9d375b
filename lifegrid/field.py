"""Pan and zoom state of the visible part of the grid."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Field:
    """Offset and scale of the grid on screen, with a home position."""

    scale_down: float
    scale_up: float
    homex: float
    homey: float
    scale: float = field(init=False, default=1.0)
    xpos: float = field(init=False, default=0.0)
    ypos: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        self.home()

    def home(self) -> None:
        """Return to the home position at scale 1."""
        self.scale = 1.0
        self.xpos = self.homex
        self.ypos = self.homey

    def shift(self, xrel: float, yrel: float) -> None:
        self.xpos += xrel
        self.ypos += yrel

    def zoom(self, x: float, y: float, scale_inc: float) -> None:
        """Scale by (1 + scale_inc), keeping the screen point (x, y) fixed."""
        new_scale = self.scale + self.scale * scale_inc
        ratio = new_scale / self.scale
        self.xpos = (self.xpos - x) * ratio + x
        self.ypos = (self.ypos - y) * ratio + y
        self.scale = new_scale