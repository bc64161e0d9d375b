"""Drawing of the grid and the toolbar onto a pygame surface."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from . import palette
from .button import Button
from .field import Field
from .grid import Cell, Grid
from .toolbar import TOOLBAR_HEIGHT, Toolbar

_TOOLBAR_OUTLINING = 2
_CELL_OUTLINING = 1


class Renderer:
    """Draws one frame of the game onto a surface using the current palette."""

    def __init__(self, width: int, height: int, surface: pygame.Surface) -> None:
        self.width = width
        self.height = height
        self.surface = surface

    def clear(self) -> None:
        """Fill the whole surface with the background colour."""
        self.surface.fill(palette.current().background)

    def present(self) -> None:
        """Show the frame when the surface is the display surface."""
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()

    def draw_button(self, button: Button, textures: Sequence[pygame.Surface]) -> None:
        """Draw the button's icon stretched over its rectangle."""
        x, y, w, h = button.rect()
        image = textures[button.texture()]
        if image.get_size() != (w, h):
            image = pygame.transform.scale(image, (w, h))
        self.surface.blit(image, (x, y))

    def draw_toolbar(self, toolbar: Toolbar, textures: Sequence[pygame.Surface]) -> None:
        """Draw the toolbar strip, its border and all of its buttons."""
        colours = palette.current()
        strip = pygame.Rect(0, 0, self.width, TOOLBAR_HEIGHT)
        self.surface.fill(colours.theme, strip)
        pygame.draw.rect(self.surface, colours.border, strip, 1)
        self.surface.fill(
            colours.border,
            pygame.Rect(0, TOOLBAR_HEIGHT, self.width, _TOOLBAR_OUTLINING),
        )
        for button in toolbar:
            self.draw_button(button, textures)

    def _draw_cell(self, cell: Cell, field: Field, size: int, row: int, col: int) -> None:
        colours = palette.current()
        side = int(size * field.scale)
        left = row * side + int(field.xpos)
        top = col * side + int(field.ypos)

        self.surface.fill(colours.cell_border, pygame.Rect(left, top, side, side))

        inner = max(0, side - 2 * _CELL_OUTLINING)
        fill = colours.cell_alive if cell is Cell.ALIVE else colours.cell_dead
        self.surface.fill(
            fill,
            pygame.Rect(left + _CELL_OUTLINING, top + _CELL_OUTLINING, inner, inner),
        )

    def draw_grid(self, grid: Grid, field: Field, size: int) -> None:
        """Draw every cell; rows run along x and columns along y."""
        rows, cols = grid.size()
        for col in range(cols):
            for row in range(rows):
                self._draw_cell(grid.get(row, col), field, size, row, col)