"""A scene: an integer rectangle holding a flat list of sprites it does not own."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from vsrg.sprite import Sprite


@dataclass
class Rect:
    """Rectangle with integer position and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


class Scene(ABC):
    """Holds sprites, children included, and draws them in insertion order."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.rect = Rect(x, y, width, height)
        self.visible = True
        self._sprites: list[Sprite] = []

    @property
    def sprites(self) -> tuple[Sprite, ...]:
        """The sprites in the scene, in insertion order."""
        return tuple(self._sprites)

    def add_sprite(self, sprite: Sprite) -> None:
        if sprite is None:
            raise ValueError("Sprite cannot be null")
        self._sprites.append(sprite)

    def remove_sprite(self, sprite: Sprite) -> bool:
        """Remove the last occurrence of ``sprite``; return whether it was present."""
        if sprite is None:
            raise ValueError("Sprite cannot be null")
        for position in range(len(self._sprites) - 1, -1, -1):
            if self._sprites[position] is sprite:
                del self._sprites[position]
                return True
        return False

    def draw(self) -> None:
        """Draw every sprite with ``draw_self`` unless the scene is hidden."""
        if not self.visible:
            return
        for sprite in self._sprites:
            sprite.draw_self()

    @abstractmethod
    def update(self) -> None:
        """Advance the scene by one frame."""

    def resize(self, width_multiplier: float, height_multiplier: float) -> None:
        """Scale the scene and every sprite in it by the given multipliers."""
        if width_multiplier <= 0 or height_multiplier <= 0:
            raise ValueError("Width and height multipliers must be positive")

        self.rect.w = int(self.rect.w * width_multiplier)
        self.rect.h = int(self.rect.h * height_multiplier)

        for sprite in self._sprites:
            sprite.resize_self(
                int(sprite.rect.w * width_multiplier),
                int(sprite.rect.h * height_multiplier),
            )

    def resize_to(self, width: int, height: int) -> None:
        """Scale the scene so that it becomes ``width`` by ``height``."""
        if width <= 0 or height <= 0:
            raise ValueError("Width and height must be positive")
        self.resize(width / self.rect.w, height / self.rect.h)