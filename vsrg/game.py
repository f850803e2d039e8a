"""Game configuration, window set-up and the main loop."""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass
from os import PathLike
from typing import Any

import pygame

from vsrg.json_util import get_if_exists, get_mandatory

DEFAULT_CONFIG_FILE = "../../config.json"

# Events polled in the current frame; other code may read or change it.
events: list[Any] = []


@dataclass
class GameConfig:
    """Window and frame-rate settings."""

    title: str
    width: int
    height: int
    is_resizable: bool = True
    is_fullscreen: bool = False
    is_fps_capped: bool = False
    fps: int = 0


def _typed(value: Any, kind: type, key: str) -> Any:
    if kind is int and isinstance(value, float):
        return int(value)
    if kind is int and isinstance(value, bool) or not isinstance(value, kind):
        raise TypeError(f"'{key}' must be of type {kind.__name__}")
    return value


def load_game_config(config_file: str | PathLike[str]) -> GameConfig:
    """Read a JSON game configuration file."""
    try:
        with open(config_file, encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError as exc:
        raise RuntimeError("Failed to open config file") from exc

    config = GameConfig(
        title=_typed(get_mandatory(data, "title"), str, "title"),
        width=_typed(get_mandatory(data, "width"), int, "width"),
        height=_typed(get_mandatory(data, "height"), int, "height"),
    )
    config.is_resizable = _typed(get_if_exists(data, "is_resizable", config.is_resizable), bool, "is_resizable")
    config.is_fullscreen = _typed(get_if_exists(data, "is_fullscreen", config.is_fullscreen), bool, "is_fullscreen")
    config.is_fps_capped = _typed(get_if_exists(data, "is_fps_capped", config.is_fps_capped), bool, "is_fps_capped")
    if config.is_fps_capped:
        config.fps = _typed(get_mandatory(data, "fps"), int, "fps")
        if config.fps <= 0:
            raise ValueError("'fps' must be positive")
    return config


def update_renderer(renderer: Any) -> None:
    """Present the frame drawn on ``renderer`` and clear it for the next one."""
    if renderer is None:
        raise RuntimeError("Renderer is not initialized")
    if pygame.display.get_init() and pygame.display.get_surface() is renderer:
        pygame.display.flip()
    renderer.fill((0, 0, 0))


def run_game(config_file: str | PathLike[str]) -> None:
    """Open the window described by ``config_file`` and run until it is closed."""
    from vsrg.main_script import MainScript

    config = load_game_config(config_file)

    try:
        pygame.display.init()
    except pygame.error as exc:
        raise RuntimeError("Failed to initialize display") from exc

    try:
        flags = pygame.RESIZABLE if config.is_resizable else 0
        try:
            window = pygame.display.set_mode((config.width, config.height), flags)
        except pygame.error as exc:
            raise RuntimeError("Failed to create window") from exc
        pygame.display.set_caption(config.title)

        script = MainScript()
        script.start(window)

        running = True
        while running:
            events[:] = pygame.event.get()
            if any(event.type == pygame.QUIT for event in events):
                running = False
            script.update()
            if config.is_fps_capped:
                pygame.time.delay(1000 // config.fps)
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Run the rhythm game.")
    parser.add_argument("config", nargs="?", default=DEFAULT_CONFIG_FILE, help="path of the JSON config file")
    args = parser.parse_args(argv)
    run_game(args.config)
    return 0