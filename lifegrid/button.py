"""Toolbar buttons and the icons they show."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Texture(IntEnum):
    """Icon indices, in the order the icon images are loaded."""

    PLAY = 0
    PAUSE = 1
    PENCIL = 2
    PAINT = 3
    BROOM = 4
    SWAP = 5
    HOME = 6
    HELP = 7


@dataclass
class Button:
    """A rectangular area that raises an event when clicked."""

    x: int
    y: int
    w: int
    h: int
    event_id: int

    def rect(self) -> tuple[int, int, int, int]:
        return self.x, self.y, self.w, self.h

    def on_button(self, mousex: int, mousey: int) -> bool:
        """True when the point lies strictly inside the button."""
        return (
            self.x < mousex < self.x + self.w
            and self.y < mousey < self.y + self.h
        )

    def switch_state(self) -> None:
        """Toggle the button; plain press buttons have no state."""

    def texture(self) -> Texture:
        raise NotImplementedError


@dataclass
class PressButton(Button):
    icon: Texture

    def texture(self) -> Texture:
        return self.icon


@dataclass
class SwitchButton(Button):
    texture_1: Texture
    texture_2: Texture
    pressed: bool = False

    def switch_state(self) -> None:
        self.pressed = not self.pressed

    def texture(self) -> Texture:
        return self.texture_2 if self.pressed else self.texture_1