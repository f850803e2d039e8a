import pygame
import pytest

from vsrg.bmp_sprite import BmpSprite
from vsrg.sprite import FRect

RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)


@pytest.fixture
def red_image(tmp_path):
    surface = pygame.Surface((2, 2))
    surface.fill(RED[:3])
    path = tmp_path / "note.bmp"
    pygame.image.save(surface, str(path))
    return path


@pytest.fixture
def wide_image(tmp_path):
    surface = pygame.Surface((4, 3))
    surface.fill((0, 255, 0))
    path = tmp_path / "wide.bmp"
    pygame.image.save(surface, str(path))
    return path


def make_target():
    target = pygame.Surface((8, 8))
    target.fill(BLACK[:3])
    return target


def test_size_comes_from_image(wide_image):
    sprite = BmpSprite(None, wide_image, 5, 6)
    assert sprite.rect == FRect(5.0, 6.0, 4.0, 3.0)
    assert sprite.original_rect == sprite.rect


def test_missing_file_raises(tmp_path):
    with pytest.raises(RuntimeError):
        BmpSprite(None, tmp_path / "missing.bmp", 0, 0)


def test_draw_self_blits_at_position(red_image):
    target = make_target()
    sprite = BmpSprite(target, red_image, 1, 1)
    sprite.draw_self()
    assert tuple(target.get_at((1, 1))) == RED
    assert tuple(target.get_at((2, 2))) == RED
    assert tuple(target.get_at((0, 0))) == BLACK
    assert tuple(target.get_at((3, 3))) == BLACK


def test_resize_then_draw_stretches_image(red_image):
    target = make_target()
    sprite = BmpSprite(target, red_image, 0, 0)
    sprite.resize_self(4, 4)
    sprite.draw_self()
    assert (sprite.rect.w, sprite.rect.h) == (4, 4)
    assert tuple(target.get_at((3, 3))) == RED
    assert tuple(target.get_at((4, 4))) == BLACK


def test_hidden_sprite_is_not_drawn(red_image):
    target = make_target()
    sprite = BmpSprite(target, red_image, 0, 0)
    sprite.hide_self()
    sprite.draw_self()
    assert tuple(target.get_at((0, 0))) == BLACK


def test_draw_without_target_raises(red_image):
    sprite = BmpSprite(None, red_image, 0, 0)
    with pytest.raises(RuntimeError):
        sprite.draw_self()


@pytest.mark.parametrize("size", [(0, 1), (1, 0), (-2, 2)])
def test_resize_rejects_non_positive(red_image, size):
    sprite = BmpSprite(None, red_image, 0, 0)
    with pytest.raises(ValueError):
        sprite.resize_self(*size)
    assert (sprite.rect.w, sprite.rect.h) == (2.0, 2.0)


def test_scale_self_uses_current_size(wide_image):
    sprite = BmpSprite(None, wide_image, 0, 0)
    sprite.scale_self(2.0, 2.0)
    assert (sprite.rect.w, sprite.rect.h) == (4.0 * 2.0, 3.0 * 2.0)
    assert sprite.original_rect == FRect(0.0, 0.0, 4.0, 3.0)


def test_move_then_draw(red_image):
    target = make_target()
    sprite = BmpSprite(target, red_image, 0, 0)
    sprite.move_self_by(5, 5)
    sprite.draw_self()
    assert tuple(target.get_at((5, 5))) == RED
    assert tuple(target.get_at((0, 0))) == BLACK