"""The help screen that shows usage text until the user leaves it."""

from __future__ import annotations

import os

import pygame

from . import palette

FONT_PATH = "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"
FONT_SIZE = 36
_FPS = 60

HELLO_STRING = """\
This realization of 'Game Of Life' of John Horton Conway.


You can use shell args: 
    '-x<NUMBER>' where x is on of:
        w: window width,
        h: window height,
        x: grid columns count,
        y: grid rows count.
"""


def render_hello_text(font: pygame.font.Font) -> pygame.Surface:
    """Render the help text, one line under another, in the palette's text colour."""
    lines = HELLO_STRING.splitlines()
    colour = palette.current().text
    line_height = font.get_linesize()
    width = max((font.size(line)[0] for line in lines), default=0)
    surface = pygame.Surface((max(width, 1), max(line_height * len(lines), 1)), pygame.SRCALPHA)
    for number, line in enumerate(lines):
        if line.strip():
            surface.blit(font.render(line, True, colour), (0, number * line_height))
    return surface


def _load_font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    path = FONT_PATH if os.path.exists(FONT_PATH) else None
    return pygame.font.Font(path, FONT_SIZE)


def draw_hello_screen(screen: pygame.Surface) -> None:
    """Show the help text until the window is closed or Q is pressed."""
    text = render_hello_text(_load_font())
    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key == pygame.K_q
            ):
                return
        screen.fill(palette.current().background)
        screen.blit(text, (0, 0))
        pygame.display.flip()
        clock.tick(_FPS)