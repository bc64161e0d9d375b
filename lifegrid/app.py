"""Application entry point: window setup, icon loading and the top-level loop."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

import pygame

from . import palette
from .args import Settings, read_command_line_args
from .button import Texture
from .double_buf import DoubleBuf
from .game import GameOfLife, Ret
from .hello_screen import draw_hello_screen

WINDOW_TITLE = "Game of life"
ASSETS_DIR = "assets"
THEME_DIRS = ("dark", "light")


def _icon_file(texture: Texture) -> str:
    return f"icon-{texture.name.lower()}.png"


def _load_theme(directory: Path) -> list[pygame.Surface]:
    icons = []
    for texture in Texture:
        path = directory / _icon_file(texture)
        if not path.is_file():
            raise FileNotFoundError(f"icon not found: {path}")
        image = pygame.image.load(str(path))
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        icons.append(image)
    return icons


def load_textures(
    assets_dir: str | os.PathLike[str] = ASSETS_DIR,
) -> DoubleBuf[list[pygame.Surface]]:
    """Load the dark icon set as current and the light one as the alternative."""
    root = Path(assets_dir)
    dark, light = (_load_theme(root / name) for name in THEME_DIRS)
    return DoubleBuf(dark, light)


def run(
    settings: Settings,
    screen: pygame.Surface,
    textures: DoubleBuf[Sequence[pygame.Surface]],
) -> None:
    """Play the game until it is quit, switching themes and showing help on request."""
    game = GameOfLife(settings.width, settings.height, settings.cellx, settings.celly)
    ret = Ret.START
    while ret is not Ret.QUIT:
        if ret is Ret.START:
            ret = game.game_loop(screen, textures.current())
        elif ret is Ret.CHANGE_COLOR_THEME:
            textures.switch()
            palette.set_other()
            ret = Ret.START
        elif ret is Ret.HELP:
            draw_hello_screen(screen)
            ret = Ret.START
        else:
            raise RuntimeError(f"unexpected loop result: {ret}")


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window, load the icons and run the game."""
    settings = read_command_line_args(argv)
    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    pygame.init()
    try:
        screen = pygame.display.set_mode((settings.width, settings.height))
        pygame.display.set_caption(WINDOW_TITLE)
        textures = load_textures(ASSETS_DIR)
        palette.set_dark()
        run(settings, screen, textures)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())