"""A sizeless sprite used only to group and move other sprites."""

from __future__ import annotations

from vsrg.sprite import Sprite


class PreFab(Sprite):
    """Invisible grouping sprite: it draws nothing and ignores resizing."""

    def __init__(self, x: float, y: float) -> None:
        super().__init__(None, x, y, 0, 0)

    def draw_self(self) -> None:
        """Draw nothing; children are drawn by ``draw_all``."""

    def resize_self(self, width: float, height: float) -> None:
        """Ignore resizing; children are resized by ``resize_all``."""