"""The game script: builds the play scene and drives it every frame."""

from __future__ import annotations

from os import PathLike
from typing import Any

from vsrg.game import update_renderer
from vsrg.play_scene import PlayScene


class MainScript:
    """Called once at start and then once per frame by the game loop."""

    def __init__(
        self,
        map_file: str | PathLike[str] = "ex.bms",
        skin_name: str = "simple",
        *,
        skins_dir: str | PathLike[str] = "skins",
    ) -> None:
        self.map_file = map_file
        self.skin_name = skin_name
        self.skins_dir = skins_dir
        self.renderer: Any = None
        self.play_scene: PlayScene | None = None

    def start(self, window: Any) -> None:
        """Use ``window`` as the render target and create the play scene."""
        if window is None:
            raise RuntimeError("Game window is not initialized.")
        self.renderer = window
        self.play_scene = PlayScene(
            window, self.map_file, self.skin_name, 0, 0, 800, 800, skins_dir=self.skins_dir
        )

    def update(self) -> None:
        """Advance, draw and present one frame."""
        if self.play_scene is None:
            raise RuntimeError("Main script has not been started.")
        self.play_scene.update()
        self.play_scene.draw()
        update_renderer(self.renderer)