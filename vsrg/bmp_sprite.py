"""A sprite drawn from an image file."""

from __future__ import annotations

from os import PathLike, fspath

import pygame

from vsrg.sprite import Sprite


def _load_image(bmp_name: str | PathLike[str]) -> pygame.Surface:
    try:
        return pygame.image.load(fspath(bmp_name))
    except (pygame.error, OSError) as exc:
        raise RuntimeError(f"Failed to load image: {exc}") from exc


class BmpSprite(Sprite):
    """Sprite showing an image, stretched to its rectangle when drawn.

    ``renderer`` is the surface the sprite is blitted onto.
    """

    def __init__(self, renderer: pygame.Surface | None, bmp_name: str | PathLike[str], x: float, y: float) -> None:
        image = _load_image(bmp_name)
        width, height = image.get_size()
        super().__init__(renderer, x, y, width, height)
        self._texture = image
        self._scaled: pygame.Surface = image
        self._scaled_size = (width, height)

    def _texture_for_rect(self) -> pygame.Surface:
        size = (int(self.rect.w), int(self.rect.h))
        if size != self._scaled_size:
            self._scaled = pygame.transform.scale(self._texture, size)
            self._scaled_size = size
        return self._scaled

    def draw_self(self) -> None:
        """Blit the image at the sprite's position and size if visible."""
        if not self.is_visible():
            return
        if self.renderer is None:
            raise RuntimeError("Failed to render texture: no render target")
        try:
            self.renderer.blit(self._texture_for_rect(), (int(self.rect.x), int(self.rect.y)))
        except pygame.error as exc:
            raise RuntimeError(f"Failed to render texture: {exc}") from exc

    def resize_self(self, width: float, height: float) -> None:
        """Set the drawn size; the image is scaled when drawn."""
        if width <= 0 or height <= 0:
            raise ValueError("Width and height must be positive")
        self.rect.w = width
        self.rect.h = height