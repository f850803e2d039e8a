import json

import pygame
import pytest

from vsrg.game import GameConfig, load_game_config, main, run_game, update_renderer


def _write(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_minimal_config_uses_defaults(tmp_path):
    config = load_game_config(_write(tmp_path, {"title": "VSRG", "width": 640, "height": 480}))
    assert config == GameConfig(title="VSRG", width=640, height=480)
    assert config.is_resizable is True
    assert config.is_fullscreen is False
    assert config.is_fps_capped is False


def test_load_full_config(tmp_path):
    data = {
        "title": "Game",
        "width": 800,
        "height": 600,
        "is_resizable": False,
        "is_fullscreen": True,
        "is_fps_capped": True,
        "fps": 60,
    }
    config = load_game_config(_write(tmp_path, data))
    assert (config.is_resizable, config.is_fullscreen, config.is_fps_capped) == (False, True, True)
    assert config.fps == 60


@pytest.mark.parametrize("missing", ["title", "width", "height"])
def test_mandatory_keys(tmp_path, missing):
    data = {"title": "Game", "width": 800, "height": 600}
    del data[missing]
    with pytest.raises(KeyError, match=missing):
        load_game_config(_write(tmp_path, data))


def test_null_mandatory_key_is_missing(tmp_path):
    with pytest.raises(KeyError, match="title"):
        load_game_config(_write(tmp_path, {"title": None, "width": 1, "height": 1}))


def test_fps_required_when_capped(tmp_path):
    data = {"title": "Game", "width": 800, "height": 600, "is_fps_capped": True}
    with pytest.raises(KeyError, match="fps"):
        load_game_config(_write(tmp_path, data))


def test_wrong_type_rejected(tmp_path):
    with pytest.raises(TypeError):
        load_game_config(_write(tmp_path, {"title": "Game", "width": "wide", "height": 600}))


def test_unopenable_config(tmp_path):
    with pytest.raises(RuntimeError, match="Failed to open config file"):
        load_game_config(tmp_path / "absent.json")


def test_run_game_and_main_fail_on_missing_config(tmp_path):
    with pytest.raises(RuntimeError):
        run_game(tmp_path / "absent.json")
    with pytest.raises(RuntimeError):
        main([str(tmp_path / "absent.json")])


def test_update_renderer_requires_renderer():
    with pytest.raises(RuntimeError, match="Renderer is not initialized"):
        update_renderer(None)


def test_update_renderer_clears_target():
    surface = pygame.Surface((8, 8))
    surface.fill((200, 100, 50))
    update_renderer(surface)
    assert tuple(surface.get_at((3, 3)))[:3] == (0, 0, 0)