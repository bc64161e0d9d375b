"""Colour themes and the currently selected palette."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Color = tuple[int, int, int]


class Theme(Enum):
    DARK = "dark"
    LIGHT = "light"


@dataclass(frozen=True)
class Palette:
    """The colours used to draw one theme."""

    background: Color
    theme: Color
    element: Color
    select: Color
    active: Color
    active_select: Color
    border: Color
    cell_alive: Color
    cell_dead: Color
    cell_border: Color
    text: Color


DARK_PALETTE = Palette(
    background=(50, 50, 50),
    theme=(50, 50, 50),
    element=(127, 86, 231),
    select=(133, 94, 230),
    active=(133, 0, 0),
    active_select=(133, 0, 0),
    border=(10, 10, 10),
    cell_alive=(140, 140, 140),
    cell_dead=(70, 70, 70),
    cell_border=(30, 30, 30),
    text=(240, 240, 240),
)

LIGHT_PALETTE = Palette(
    background=(240, 240, 240),
    theme=(230, 230, 230),
    element=(127, 86, 231),
    select=(133, 94, 230),
    active=(133, 0, 0),
    active_select=(133, 0, 0),
    border=(100, 100, 100),
    cell_alive=(140, 140, 140),
    cell_dead=(220, 220, 220),
    cell_border=(80, 80, 80),
    text=(40, 40, 40),
)

_PALETTES = {Theme.DARK: DARK_PALETTE, Theme.LIGHT: LIGHT_PALETTE}


class _Selection:
    theme = Theme.DARK


def current() -> Palette:
    """Return the palette of the selected theme."""
    return _PALETTES[_Selection.theme]


def set_dark() -> None:
    _Selection.theme = Theme.DARK


def set_light() -> None:
    _Selection.theme = Theme.LIGHT


def set_other() -> None:
    """Switch between the dark and the light theme."""
    if _Selection.theme is Theme.DARK:
        set_light()
    else:
        set_dark()