import pygame
import pytest

from render_surface import PygameSurface


@pytest.fixture
def target():
    return pygame.Surface((100, 80))


def test_clear_area_fills_with_background(target):
    target.fill((255, 255, 255))
    surface = PygameSurface(target, (10, 20, 30))
    surface.clear_area(100, 80)
    assert tuple(target.get_at((0, 0)))[:3] == (10, 20, 30)
    assert tuple(target.get_at((99, 79)))[:3] == (10, 20, 30)


def test_clear_area_only_touches_the_requested_region(target):
    target.fill((255, 255, 255))
    PygameSurface(target, (0, 0, 0)).clear_area(50, 40)
    assert tuple(target.get_at((10, 10)))[:3] == (0, 0, 0)
    assert tuple(target.get_at((75, 60)))[:3] == (255, 255, 255)


def test_opaque_disk_is_filled_and_stroked(target):
    surface = PygameSurface(target, (0, 0, 0))
    surface.clear_area(100, 80)
    surface.draw_disk(50, 40, 20, (255, 0, 0), (255, 255, 255))

    assert tuple(target.get_at((50, 40)))[:3] == (255, 0, 0)
    outline_row = [tuple(target.get_at((x, 40)))[:3] for x in range(64, 72)]
    assert (255, 255, 255) in outline_row
    assert tuple(target.get_at((5, 5)))[:3] == (0, 0, 0)


def test_translucent_disk_blends_with_background(target):
    surface = PygameSurface(target, (0, 0, 200))
    surface.clear_area(100, 80)
    surface.draw_disk(50, 40, 20, (255, 0, 0, 128), (255, 255, 255))

    r, g, b = tuple(target.get_at((50, 40)))[:3]
    assert 100 < r < 160
    assert 70 < b < 130


def test_lighten_keeps_the_brighter_channel(target):
    surface = PygameSurface(target, (0, 0, 0))
    surface.clear_area(100, 80)
    surface.draw_disk(50, 40, 20, (0, 0, 250, 255), (255, 255, 255))
    surface.draw_disk(50, 40, 10, (200, 0, 0, 255), (255, 255, 255), lighten=True)

    assert tuple(target.get_at((50, 40)))[:3] == (200, 0, 250)


def test_sub_pixel_radius_still_draws(target):
    surface = PygameSurface(target, (0, 0, 0))
    surface.clear_area(100, 80)
    surface.draw_disk(30.4, 30.4, 0.2, (0, 255, 0), (0, 255, 0))
    assert tuple(target.get_at((30, 30)))[:3] == (0, 255, 0)


def test_target_can_be_swapped(target):
    surface = PygameSurface(target, (9, 9, 9))
    replacement = pygame.Surface((10, 10))
    surface.target = replacement
    surface.clear_area(10, 10)
    assert tuple(replacement.get_at((5, 5)))[:3] == (9, 9, 9)
