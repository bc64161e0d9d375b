"""Conway's Game of Life: the simulation, input handling and main loop."""

from __future__ import annotations

import math
import time
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum, auto

import pygame

from .double_buf import DoubleBuf
from .field import Field
from .grid import Cell, Grid
from .renderer import Renderer
from .toolbar import TOOLBAR_HEIGHT, Toolbar
from .button import Texture

CELL_SIZE = 60
PRESS_VALUATE = 3
SIM_THRESHOLD = 10
FPS = 60
SMALLEST_SCALE = 0.5
LARGEST_SCALE = 10.0
WHEEL_SCALE_STEP = 0.05

LEFT_BUTTON = 1
UNKNOWN_BUTTON = 0
_WHEEL_BUTTONS = frozenset({4, 5, 6, 7})


class Ret(Enum):
    """What the game loop asks its caller to do next."""

    CHANGE_COLOR_THEME = auto()
    CONTINUE = auto()
    START = auto()
    HELP = auto()
    QUIT = auto()


@dataclass
class Lastdown:
    """Where and with which button the mouse was last pressed."""

    x: int = -1
    y: int = -1
    b: int = UNKNOWN_BUTTON


@dataclass(frozen=True)
class UserEvents:
    """Event types raised by the toolbar buttons and shortcut keys."""

    play: int
    draw: int
    clear: int
    change_color_theme: int
    home_field: int
    call_help: int

    @classmethod
    def register(cls) -> UserEvents:
        """Allocate a fresh pygame event type for every action."""
        return cls(*(pygame.event.custom_type() for _ in range(6)))


def count_of_alive(grid: Grid, row: int, col: int) -> int:
    """Number of living neighbours of the cell at (row, col)."""
    return sum(
        1 for r, c in grid.neighbours(row, col) if grid.get(r, c) is Cell.ALIVE
    )


def _advance(source: Grid, target: Grid) -> None:
    rows, cols = source.size()
    for row in range(rows):
        for col in range(cols):
            alive = count_of_alive(source, row, col)
            if source.get(row, col) is Cell.ALIVE:
                new_cell = Cell.ALIVE if 2 <= alive <= 3 else Cell.DEAD
            else:
                new_cell = Cell.ALIVE if alive == 3 else Cell.DEAD
            target.set(new_cell, row, col)


def next_generation(grid: Grid) -> Grid:
    """Return the generation that follows the given grid."""
    rows, cols = grid.size()
    result = Grid(rows, cols)
    _advance(grid, result)
    return result


def _push_event(event_type: int) -> None:
    pygame.event.post(pygame.event.Event(event_type, code=456))


def _poll() -> Iterator[pygame.event.Event]:
    """Yield queued events one at a time, leaving the rest queued if stopped."""
    while True:
        event = pygame.event.poll()
        if event.type == pygame.NOEVENT:
            return
        yield event


_KEY_ACTIONS = {
    pygame.K_SPACE: "play",
    pygame.K_d: "draw",
    pygame.K_c: "clear",
    pygame.K_t: "change_color_theme",
    pygame.K_h: "home_field",
    pygame.K_F1: "call_help",
}


class GameOfLife:
    """The game state: the grid, the toolbar, the view and the mouse."""

    def __init__(self, width: int, height: int, rows: int, cols: int) -> None:
        self.width = width
        self.height = height
        self.events = UserEvents.register()
        grid = Grid(rows, cols)
        self.buf: DoubleBuf[Grid] = DoubleBuf(grid, grid.copy())
        self.toolbar = (
            Toolbar()
            .add_switch_button(self.events.play, Texture.PLAY, Texture.PAUSE)
            .add_switch_button(self.events.draw, Texture.PENCIL, Texture.PAINT)
            .add_press_button(self.events.clear, Texture.BROOM)
            .add_press_button(self.events.change_color_theme, Texture.SWAP)
            .add_press_button(self.events.home_field, Texture.HOME)
            .add_press_button(self.events.call_help, Texture.HELP)
        )
        self.field = Field(SMALLEST_SCALE, LARGEST_SCALE, 0.0, float(TOOLBAR_HEIGHT))
        self.mousex = 0
        self.mousey = 0
        self.lastdown = Lastdown()
        self.play_state = False
        self.draw_state = False
        self.selection_button: int | None = None
        self.selection_cell: int | None = None

    def clear_grid(self) -> None:
        """Kill every cell of the current generation."""
        grid = self.buf.current()
        rows, cols = grid.size()
        for row in range(rows):
            for col in range(cols):
                grid.set(Cell.DEAD, row, col)

    def step(self) -> None:
        """Compute the next generation into the back buffer and show it."""
        _advance(self.buf.current(), self.buf.back())
        self.buf.switch()

    def render(self, surface: pygame.Surface, textures: Sequence[pygame.Surface]) -> None:
        renderer = Renderer(self.width, self.height, surface)
        renderer.clear()
        renderer.draw_grid(self.buf.current(), self.field, CELL_SIZE)
        renderer.draw_toolbar(self.toolbar, textures)
        renderer.present()

    def get_pressed_cell(self, x: int, y: int) -> tuple[int, int] | None:
        """Grid coordinates of the cell under the screen point, if any."""
        rows, cols = self.buf.current().size()
        side = CELL_SIZE * self.field.scale
        xn = math.floor((x - self.field.xpos) / side)
        yn = math.floor((y - self.field.ypos) / side)
        if not 0 <= xn < rows or not 0 <= yn < cols:
            return None
        return xn, yn

    def is_grid_area(self, x: int, y: int) -> bool:
        return TOOLBAR_HEIGHT < y

    def handle_event(self, event: pygame.event.Event) -> Ret:
        """React to one event; return CONTINUE unless the loop must stop."""
        kind = event.type
        if kind == pygame.QUIT:
            return Ret.QUIT
        if kind == pygame.KEYDOWN:
            if event.key == pygame.K_q:
                return Ret.QUIT
            action = _KEY_ACTIONS.get(event.key)
            if action is not None:
                _push_event(getattr(self.events, action))
            return Ret.CONTINUE
        if kind == self.events.play:
            self.play_state = not self.play_state
            self.toolbar[0].switch_state()
        elif kind == self.events.draw:
            self.draw_state = not self.draw_state
            self.toolbar[1].switch_state()
        elif kind == self.events.clear:
            self.clear_grid()
        elif kind == self.events.change_color_theme:
            return Ret.CHANGE_COLOR_THEME
        elif kind == self.events.home_field:
            self.field.home()
        elif kind == self.events.call_help:
            return Ret.HELP
        elif kind == pygame.MOUSEBUTTONDOWN:
            if event.button not in _WHEEL_BUTTONS:
                x, y = event.pos
                self.lastdown = Lastdown(x, y, event.button)
        elif kind == pygame.MOUSEBUTTONUP:
            if event.button not in _WHEEL_BUTTONS:
                self._mouse_up(*event.pos, event.button)
        elif kind == pygame.MOUSEMOTION:
            x, y = event.pos
            xrel, yrel = event.rel
            if event.buttons[0] and self.is_grid_area(x - xrel, y - yrel):
                self.field.shift(float(xrel), float(yrel))
            self.mousex, self.mousey = x, y
        elif kind == pygame.MOUSEWHEEL:
            if self.is_grid_area(self.mousex, self.mousey):
                amount = getattr(event, "precise_y", event.y)
                self.field.zoom(
                    float(self.mousex), float(self.mousey), WHEEL_SCALE_STEP * amount
                )
        return Ret.CONTINUE

    def _mouse_up(self, x: int, y: int, button: int) -> None:
        down = self.lastdown
        if (
            abs(x - down.x) <= PRESS_VALUATE
            and abs(y - down.y) <= PRESS_VALUATE
            and button == down.b
        ):
            self.process_press_toolbar(x, y, button)
            self.process_press_grid(x, y, button)
        self.lastdown = Lastdown()

    def process_events(self, events: Iterable[pygame.event.Event]) -> Ret:
        """Handle events in order, stopping at the first that ends the loop."""
        for event in events:
            ret = self.handle_event(event)
            if ret is not Ret.CONTINUE:
                return ret
        return Ret.CONTINUE

    def process_press_toolbar(self, x: int, y: int, button: int) -> None:
        """Raise the event of every toolbar button clicked with the left button."""
        for item in self.toolbar:
            if (
                item.on_button(self.lastdown.x, self.lastdown.y)
                and item.on_button(x, y)
                and button == LEFT_BUTTON
            ):
                _push_event(item.event_id)

    def process_press_grid(self, x: int, y: int, button: int) -> None:
        """Toggle the clicked cell while drawing is switched on."""
        if not (self.draw_state and self.is_grid_area(x, y) and button == LEFT_BUTTON):
            return
        pressed = self.get_pressed_cell(x, y)
        if pressed is None:
            return
        row, col = pressed
        grid = self.buf.current()
        toggled = Cell.DEAD if grid.get(row, col) is Cell.ALIVE else Cell.ALIVE
        grid.set(toggled, row, col)

    def selection(self) -> None:
        """Record which button and which cell are under the mouse."""
        self.selection_button = None
        for index, item in enumerate(self.toolbar):
            if item.on_button(self.mousex, self.mousey):
                self.selection_button = index
        pressed = self.get_pressed_cell(self.mousex, self.mousey)
        if pressed is None:
            self.selection_cell = None
        else:
            row, col = pressed
            self.selection_cell = row * self.buf.current().size()[0] + col

    def game_loop(self, surface: pygame.Surface, textures: Sequence[pygame.Surface]) -> Ret:
        """Run frames until an event asks to stop; return what it asked for."""
        counter = 0
        while True:
            ret = self.process_events(_poll())
            if ret is not Ret.CONTINUE:
                return ret
            self.selection()
            if self.play_state and counter > SIM_THRESHOLD:
                self.step()
                counter = 0
            counter += 1
            self.render(surface, textures)
            time.sleep(1 / FPS)