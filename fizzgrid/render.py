"""Drawing the board in a window, one texture per cell."""

from __future__ import annotations

import os
from itertools import islice
from pathlib import Path
from typing import Dict, Optional, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from fizzgrid.grid import ACTIVE_COLUMNS, ACTIVE_ROWS, ALT_BALL, BALL, EMPTY, Grid  # noqa: E402

TILE_SIZE = 64
STATUS_HEIGHT = 90
WINDOW_WIDTH = ACTIVE_COLUMNS * TILE_SIZE
WINDOW_HEIGHT = ACTIVE_ROWS * TILE_SIZE + STATUS_HEIGHT
WINDOW_TITLE = "FizzBuzz"

TEXTURE_NAMES = {EMPTY: "floor", BALL: "balls", ALT_BALL: "balls_2"}
TEXTURE_EXTENSIONS = (".xpm", ".png", ".bmp")


def _find_texture(directory: Path, name: str) -> Path:
    for extension in TEXTURE_EXTENSIONS:
        candidate = directory / f"{name}{extension}"
        if candidate.is_file():
            return candidate
    raise FileNotFoundError(f"no texture named {name!r} in {directory}")


def load_textures(directory: Union[str, os.PathLike] = "textures") -> Dict[str, "pygame.Surface"]:
    """Load the floor and ball textures from ``directory``.

    Returns a mapping from cell character to image. Each texture is looked
    up by name with the extensions .xpm, .png and .bmp, in that order.
    """
    root = Path(directory)
    return {
        value: pygame.image.load(str(_find_texture(root, name)))
        for value, name in TEXTURE_NAMES.items()
    }


class Renderer:
    """Blits the active area of a grid onto a surface, or onto its own window."""

    def __init__(
        self,
        textures: Dict[str, "pygame.Surface"],
        surface: Optional["pygame.Surface"] = None,
        tile_size: int = TILE_SIZE,
        title: str = WINDOW_TITLE,
    ) -> None:
        if tile_size <= 0:
            raise ValueError("tile size must be positive")
        self.textures = dict(textures)
        self.tile_size = tile_size
        self._owns_window = surface is None
        if surface is None:
            pygame.display.init()
            surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(title)
        self.surface: Optional["pygame.Surface"] = surface

    @property
    def owns_window(self) -> bool:
        """True when this renderer opened the window it draws into."""
        return self._owns_window

    @property
    def closed(self) -> bool:
        return self.surface is None

    def draw(self, grid: Grid) -> int:
        """Draw every active cell that has a texture; return how many were drawn."""
        if self.surface is None:
            raise RuntimeError("renderer is closed")
        drawn = 0
        for y, row in enumerate(islice(grid, grid.active_rows)):
            for x, value in enumerate(row[: grid.active_columns]):
                texture = self.textures.get(value)
                if texture is None:
                    continue
                self.surface.blit(texture, (x * self.tile_size, y * self.tile_size))
                drawn += 1
        if self._owns_window:
            pygame.display.flip()
            pygame.event.pump()
        return drawn

    def close(self) -> None:
        """Release the textures and, if this renderer opened it, the window."""
        if self.surface is None:
            return
        self.textures.clear()
        if self._owns_window:
            pygame.display.quit()
        self.surface = None

    def __enter__(self) -> "Renderer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()