import random

import pygame
import pytest

from fantasia.enums import ResourceName
from fantasia.resources import Resources
from fantasia.shapes import Texture, Vector2
from fantasia.widgets import (
    DamageBubble,
    EnemyGUI,
    InventoryGUI,
    Money,
    PlayerGUI,
    StaticGUI,
)


@pytest.fixture(scope="module")
def resources(tmp_path_factory):
    return Resources(tmp_path_factory.mktemp("res"))


@pytest.fixture
def surface():
    return pygame.Surface((4, 4))


# Damage bubbles


def test_damage_bubble_offset_is_within_range(resources):
    for seed in range(20):
        bubble = DamageBubble(5, resources, rng=random.Random(seed))
        assert -4.0 <= bubble.x_offset <= 4.0


def test_damage_bubble_starts_with_all_frames(resources):
    bubble = DamageBubble(5, resources)
    assert bubble.remaining_frames == bubble.total_frames == 30
    assert bubble.has_more_frames()


def test_damage_bubble_shows_abbreviated_damage(resources):
    assert DamageBubble(50, resources).damage_text.string == "50"
    assert DamageBubble(123456, resources).damage_text.string == "123.45k"


def test_damage_bubble_text_is_placed_relative_to_position(resources):
    bubble = DamageBubble(5, resources, position=(100, 200))
    assert bubble.damage_text.position == Vector2(80.0, 160.0)


def test_damage_bubble_loses_a_frame_per_draw(resources, surface):
    bubble = DamageBubble(5, resources)
    bubble.draw(surface)
    assert bubble.remaining_frames == bubble.total_frames - 1


def test_damage_bubble_moves_after_draw(resources, surface):
    bubble = DamageBubble(5, resources, rng=random.Random(3))
    rect_start = bubble.bubble_rect.position
    text_start = bubble.damage_text.position
    bubble.draw(surface)
    assert bubble.bubble_rect.position.x == pytest.approx(rect_start.x + bubble.x_offset)
    assert bubble.bubble_rect.position.y == pytest.approx(rect_start.y - 4.0)
    assert bubble.damage_text.position.x == pytest.approx(text_start.x + bubble.x_offset)
    assert bubble.damage_text.position.y == pytest.approx(text_start.y - 4.0)


def test_damage_bubble_does_nothing_without_frames(resources, surface):
    bubble = DamageBubble(5, resources)
    bubble.remaining_frames = 0
    rect_start = bubble.bubble_rect.position
    text_start = bubble.damage_text.position
    bubble.draw(surface)
    assert bubble.bubble_rect.position == rect_start
    assert bubble.damage_text.position == text_start
    assert bubble.remaining_frames == 0
    assert not bubble.has_more_frames()


# Money


@pytest.mark.parametrize("seed", range(5))
def test_money_initial_state_is_randomised_within_limits(resources, seed):
    money = Money(1.0, resources, rng=random.Random(seed))
    assert 40 <= money.total_frames <= 160
    assert money.total_frames % 2 == 0
    assert money.remaining_frames == money.total_frames
    assert 1045.0 <= money.start_point.x <= 1065.0
    assert 700.0 <= money.start_point.y <= 720.0
    assert 905.0 <= money.mid_point.x <= 1505.0
    assert 700.0 <= money.mid_point.y <= 1300.0
    assert money.end_point == Vector2(1621.0, 255.0)
    assert money.sprite.position == money.start_point


@pytest.mark.parametrize(
    "value, key",
    [
        (1.0, ResourceName.COIN_TEXTURE_1),
        (15.0, ResourceName.COIN_TEXTURE_2),
        (25.0, ResourceName.COIN_TEXTURE_3),
        (45.0, ResourceName.COIN_TEXTURE_4),
        (100.0, ResourceName.COIN_TEXTURE_6),
        (200.0, ResourceName.COIN_TEXTURE_5),
    ],
)
def test_money_texture_depends_on_value(resources, value, key):
    money = Money(value, resources)
    assert money.sprite.texture is resources.texture(key)


def test_money_scale_grows_in_first_half(resources, surface):
    money = Money(1.0, resources, rng=random.Random(1))
    last = money.sprite.scale
    for _ in range(money.total_frames // 2):
        money.draw(surface)
        current = money.sprite.scale
        assert current.x > last.x
        assert current.y > last.y
        last = current


def test_money_scale_shrinks_in_second_half(resources, surface):
    money = Money(1.0, resources, rng=random.Random(2))
    half = money.total_frames // 2
    for _ in range(half):
        money.draw(surface)
    last = money.sprite.scale
    for _ in range(half):
        money.draw(surface)
        current = money.sprite.scale
        assert current.x < last.x
        assert current.y < last.y
        last = current
    assert not money.has_more_frames()


def test_money_draw_without_frames_does_nothing(resources, surface):
    money = Money(1.0, resources, rng=random.Random(4))
    for _ in range(money.total_frames):
        money.draw(surface)
    scale = money.sprite.scale
    position = money.sprite.position
    money.draw(surface)
    assert money.sprite.scale == scale
    assert money.sprite.position == position
    assert money.remaining_frames == 0


def test_money_bezier_curve(resources):
    money = Money(1.0, resources)
    money.start_point = Vector2(1000.0, 350.0)
    money.mid_point = Vector2(750.0, 1750.0)
    money.end_point = Vector2(1750.0, 750.0)
    assert money.bezier_point(0.25).x == pytest.approx(953.125)
    assert money.bezier_point(0.25).y == pytest.approx(900.0)
    assert money.bezier_point(0.50).x == pytest.approx(1062.5)
    assert money.bezier_point(0.50).y == pytest.approx(1150.0)
    assert money.bezier_point(0.75).x == pytest.approx(1328.125)
    assert money.bezier_point(0.75).y == pytest.approx(1100.0)


def test_money_bezier_endpoints(resources):
    money = Money(1.0, resources)
    assert money.bezier_point(0.0) == money.start_point
    assert money.bezier_point(1.0) == money.end_point


# Enemy panel


def test_enemy_gui_info_text(resources):
    gui = EnemyGUI(resources)
    gui.set_info("Shroomy", 3)
    assert gui.info.string == "Lv. 3 Shroomy"
    assert gui.info.position.y == 832.0
    assert gui.info.position.x <= 1098.0


def test_enemy_gui_hp_bar(resources):
    gui = EnemyGUI(resources)
    gui.set_max_hp(100)
    gui.set_hp(50)
    assert gui.hp_bar.foreground.size.x == pytest.approx(203.5)


def test_enemy_gui_texture_placement_and_bounds(resources):
    gui = EnemyGUI(resources)
    texture = Texture(100, 200)
    gui.set_texture(texture)
    assert gui.sprite.texture is texture
    assert gui.sprite.origin.x == pytest.approx(50.0)
    assert gui.sprite.origin.y > 100.0
    assert gui.sprite.position == Vector2(1095.0, 760.0)
    assert gui.sprite.scale == Vector2(0.8, 0.8)
    assert gui.boundaries_contain((1095.0, 760.0))
    assert not gui.boundaries_contain((0.0, 0.0))


def test_enemy_gui_empty_texture_has_no_bounds(resources):
    gui = EnemyGUI(resources)
    gui.set_texture(Texture(0, 0))
    assert gui.sprite.origin == Vector2(0.0, 0.0)
    assert not gui.boundaries_contain((1095.0, 760.0))


# Inventory panel


@pytest.mark.parametrize("money, text", [(0, "0"), (12.9, "12"), (-3.7, "-3"), (1e6, "1000000")])
def test_inventory_gui_shows_whole_money(resources, money, text):
    gui = InventoryGUI(resources)
    gui.set_money(money)
    assert gui.money_text.string == text
    assert gui.money_text.position.y == 285.0


# Player panel


def test_player_gui_fever_bar_max_is_100(resources):
    gui = PlayerGUI(resources)
    assert gui.fever_bar.max_value == 100
    gui.set_fever(50)
    assert gui.fever_bar.foreground.size.x == pytest.approx(344.5)


def test_player_gui_bars(resources):
    gui = PlayerGUI(resources)
    gui.set_required_xp(250)
    gui.set_xp(125)
    gui.set_max_hp(500)
    gui.set_hp(500)
    assert gui.xp_bar.foreground.size.x == pytest.approx(344.5)
    assert gui.hp_bar.foreground.size.x == pytest.approx(169.0)


def test_player_gui_info_text(resources):
    gui = PlayerGUI(resources)
    gui.set_info("Rogue", 1)
    assert gui.info.string == "Lv. 1 Rogue"
    assert gui.info.position.y == 832.0
    assert gui.info.position.x <= 697.0


# Static panels


def test_static_gui_contents(resources):
    gui = StaticGUI(resources)
    assert gui.title_text.string == "Fantasia"
    assert gui.inventory_text.string == "Inventory"
    assert gui.coin_icon.texture is resources.texture(ResourceName.COIN_TEXTURE_1)
    assert gui.coin_icon.texture.smooth is True


def test_static_gui_draws_dark_panels(resources):
    gui = StaticGUI(resources)
    target = pygame.Surface((1920, 1080))
    target.fill((255, 255, 255))
    gui.draw(target)
    assert target.get_at((600, 700)).r < 100
    assert target.get_at((5, 5)).r == 255