"""Named fonts and textures loaded from disk."""

from __future__ import annotations

from os import PathLike

import pygame

_DEFAULT_FONT_SIZE = 20


class AssetManager:
    """Keeps loaded fonts and textures under names chosen by the caller.

    A load that fails leaves whatever was stored under the name untouched.
    """

    def __init__(self) -> None:
        self._fonts: dict[str, pygame.font.Font] = {}
        self._textures: dict[str, pygame.Surface] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._fonts or name in self._textures

    def load_font(
        self,
        name: str,
        file_path: str | PathLike[str] | None,
        size: int = _DEFAULT_FONT_SIZE,
    ) -> bool:
        """Load a font file under a name; None means the built-in font."""
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            font = pygame.font.Font(file_path, size)
        except (OSError, pygame.error):
            return False
        self._fonts[name] = font
        return True

    def font(self, name: str) -> pygame.font.Font:
        """The font stored under a name; KeyError if there is none."""
        return self._fonts[name]

    def load_texture(self, name: str, file_path: str | PathLike[str]) -> bool:
        """Load an image file under a name."""
        try:
            texture = pygame.image.load(file_path)
        except (OSError, pygame.error):
            return False
        self._textures[name] = texture
        return True

    def texture(self, name: str) -> pygame.Surface:
        """The texture stored under a name; KeyError if there is none."""
        return self._textures[name]