"""Base sprite with a float rectangle, visibility and a flat list of children."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any


@dataclass
class FRect:
    """Rectangle with float position and size."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


def _require_positive_multipliers(width_multiplier: float, height_multiplier: float) -> None:
    if width_multiplier <= 0 or height_multiplier <= 0:
        raise ValueError("Width and height multipliers must be positive")


class Sprite(ABC):
    """A drawable object that may carry child sprites.

    Children are not owned; operations that act on "all" reach the sprite
    itself and its direct children only.
    """

    def __init__(self, renderer: Any, x: float, y: float, width: float, height: float) -> None:
        self.renderer = renderer
        self.rect = FRect(float(x), float(y), float(width), float(height))
        self.original_rect = replace(self.rect)
        self._visible = True
        self._children: list[Sprite] = []

    @property
    def children(self) -> tuple[Sprite, ...]:
        """The direct children, in the order they were added."""
        return tuple(self._children)

    def is_visible(self) -> bool:
        return self._visible

    def show_self(self) -> None:
        self._visible = True

    def hide_self(self) -> None:
        self._visible = False

    def show_all(self) -> None:
        """Show this sprite and its direct children."""
        self._visible = True
        for child in self._children:
            child.show_self()

    def hide_all(self) -> None:
        """Hide this sprite and its direct children."""
        self._visible = False
        for child in self._children:
            child.hide_self()

    @abstractmethod
    def draw_self(self) -> None:
        """Draw only this sprite."""

    def draw_all(self) -> None:
        """Draw this sprite and then each direct child, unless this one is hidden."""
        if not self._visible:
            return
        self.draw_self()
        for child in self._children:
            child.draw_self()

    def add_child(self, child: Sprite) -> None:
        if child is None:
            raise ValueError("Child sprite is null")
        self._children.append(child)

    def remove_child(self, child: Sprite) -> bool:
        """Remove ``child``; return whether it was a child."""
        if child is None:
            raise ValueError("Child sprite is null")
        for position, existing in enumerate(self._children):
            if existing is child:
                del self._children[position]
                return True
        return False

    @abstractmethod
    def resize_self(self, width: float, height: float) -> None:
        """Give this sprite a new width and height."""

    def scale_self(self, width_multiplier: float, height_multiplier: float) -> None:
        """Resize this sprite by multiplying its current size."""
        _require_positive_multipliers(width_multiplier, height_multiplier)
        self.resize_self(self.rect.w * width_multiplier, self.rect.h * height_multiplier)

    def resize_all(self, width_multiplier: float, height_multiplier: float) -> None:
        """Pass the given values to ``resize_self`` of this sprite and each child."""
        _require_positive_multipliers(width_multiplier, height_multiplier)
        self.resize_self(width_multiplier, height_multiplier)
        for child in self._children:
            child.resize_self(width_multiplier, height_multiplier)

    def move_self_by(self, x_offset: float, y_offset: float) -> None:
        self.rect.x += x_offset
        self.rect.y += y_offset

    def move_by_all(self, x_offset: float, y_offset: float) -> None:
        """Move this sprite and each direct child by the same offset."""
        self.move_self_by(x_offset, y_offset)
        for child in self._children:
            child.move_self_by(x_offset, y_offset)