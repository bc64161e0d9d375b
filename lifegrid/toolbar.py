"""A horizontal row of buttons along the top of the window."""

from __future__ import annotations

from collections.abc import Iterator

from .button import Button, PressButton, SwitchButton, Texture

TOOLBAR_HEIGHT = 40
TOOLBAR_BUTTON_INDENT = 5
TOOLBAR_BUTTON_WIDTH = 30


class Toolbar:
    """Buttons laid out left to right; the add methods return the toolbar."""

    def __init__(self) -> None:
        self._buttons: list[Button] = []

    def _next_x(self) -> int:
        step = TOOLBAR_BUTTON_WIDTH + TOOLBAR_BUTTON_INDENT
        return TOOLBAR_BUTTON_INDENT + step * len(self._buttons)

    def add_switch_button(
        self, event_id: int, texture_1: Texture, texture_2: Texture
    ) -> Toolbar:
        self._buttons.append(
            SwitchButton(
                self._next_x(),
                TOOLBAR_BUTTON_INDENT,
                TOOLBAR_BUTTON_WIDTH,
                TOOLBAR_BUTTON_WIDTH,
                event_id,
                texture_1,
                texture_2,
            )
        )
        return self

    def add_press_button(self, event_id: int, texture: Texture) -> Toolbar:
        self._buttons.append(
            PressButton(
                self._next_x(),
                TOOLBAR_BUTTON_INDENT,
                TOOLBAR_BUTTON_WIDTH,
                TOOLBAR_BUTTON_WIDTH,
                event_id,
                texture,
            )
        )
        return self

    def __iter__(self) -> Iterator[Button]:
        return iter(self._buttons)

    def __len__(self) -> int:
        return len(self._buttons)

    def __getitem__(self, index: int) -> Button:
        return self._buttons[index]