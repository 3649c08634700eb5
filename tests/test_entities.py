import random

import pytest

from fantasia.enums import EnemyName, StageLevelStatus, StageName
from fantasia.enemy_generator import EnemyGenerator
from fantasia.entities import Enemy, Inventory, Player, Stage
from fantasia.resources import Resources


@pytest.fixture(scope="module")
def resources(tmp_path_factory):
    return Resources(tmp_path_factory.mktemp("res"))


class _LowestLevel(random.Random):
    """Always picks the lowest level of a range."""

    def randint(self, a, b):
        return a


# Enemy


def test_enemy_receives_damage(resources):
    enemy = Enemy(resources)
    enemy.receive_damage(5)
    assert enemy.hp == enemy.max_hp - 5


def test_enemy_dies_when_health_is_below_zero(resources):
    enemy = Enemy(resources)
    enemy.receive_damage(enemy.max_hp + 1)
    assert enemy.dead
    assert enemy.hp == 0


def test_enemy_regenerates_correctly(resources):
    enemy = Enemy(resources)
    enemy.receive_damage(enemy.max_hp + 1)
    enemy.regenerating = True
    enemy.regenerate(StageName.GREEN_FOREST, 1, False)
    assert not enemy.dead
    assert not enemy.regenerating
    assert enemy.hp == enemy.max_hp
    assert 1 <= enemy.level <= 3


def test_enemy_kind_belongs_to_stage(resources):
    enemy = Enemy(resources)
    generator = EnemyGenerator()
    enemy.regenerate(StageName.INFERNO, 4, True)
    assert enemy.boss
    assert enemy.kind in generator.stage_bosses[StageName.INFERNO]
    assert 4 <= enemy.level <= 6


def test_enemy_info_shows_level_and_name(resources):
    enemy = Enemy(resources)
    expected = f"Lv. {enemy.level} {resources.name(enemy.kind)}"
    assert enemy.gui.info.string == expected


def test_boss_multipliers(resources):
    normal = Enemy(resources, rng=_LowestLevel())
    boss = Enemy(resources, rng=_LowestLevel())
    normal.regenerate(StageName.DARK_FOREST, 3, False)
    boss.regenerate(StageName.DARK_FOREST, 3, True)
    assert normal.level == boss.level == 3
    assert boss.max_hp == pytest.approx(normal.max_hp * 5)
    assert boss.damage == pytest.approx(normal.damage * 20)
    assert boss.xp_held == pytest.approx(normal.xp_held * 3)
    assert boss.coins_held == pytest.approx(normal.coins_held * 4)


def test_enemy_stats_grow_with_level(resources):
    enemy = Enemy(resources, rng=_LowestLevel())
    enemy.regenerate(StageName.GREEN_FOREST, 1, False)
    low = (enemy.max_hp, enemy.damage, enemy.xp_held, enemy.coins_held)
    enemy.regenerate(StageName.GREEN_FOREST, 10, False)
    high = (enemy.max_hp, enemy.damage, enemy.xp_held, enemy.coins_held)
    assert all(h > lo for h, lo in zip(high, low))


# Inventory


def test_money_is_added_to_total(resources):
    inventory = Inventory(resources)
    inventory.add_money(5)
    inventory.add_money(5)
    assert inventory.money == 10
    assert inventory.gui.money_text.string == "10"


# Player


def test_player_receives_damage(resources):
    player = Player(resources)
    player.receive_damage(5)
    assert player.hp == player.max_hp - 5


def test_player_dies_when_health_is_below_zero(resources):
    player = Player(resources)
    player.receive_damage(player.max_hp + 1)
    assert player.dead
    assert player.hp == 0


def test_player_receives_xp(resources):
    player = Player(resources)
    player.receive_xp(5)
    assert player.xp == 5


def test_player_level_increases_when_required_xp_is_reached(resources):
    player = Player(resources)
    player.receive_xp(player.required_xp)
    assert player.level == 2


def test_player_keeps_excess_xp_on_level_up(resources):
    player = Player(resources)
    player.receive_xp(player.required_xp + 1)
    assert player.xp == 1


def test_player_regenerates_correctly(resources):
    player = Player(resources)
    player.receive_damage(player.max_hp + 1)
    player.fever = 30
    player.regenerating = True
    player.regenerate()
    assert not player.dead
    assert not player.regenerating
    assert player.hp == player.max_hp
    assert player.fever == 0


def test_player_rank_stays_rogue_at_low_levels(resources):
    player = Player(resources)
    player.receive_xp(1)
    assert player.rank.name == "Rogue"
    assert player.gui.info.string == f"Lv. {player.level} Rogue"


def test_player_rank_advances(resources):
    player = Player(resources)
    while player.level < 19:
        player.increment_level()
    assert player.rank.name == "Hunter"


def test_level_up_refills_health(resources):
    player = Player(resources)
    player.receive_damage(100)
    player.increment_level()
    assert player.hp == player.max_hp
    assert player.max_hp > player.base_max_hp


def test_click_damage_is_within_range(resources):
    player = Player(resources, rng=random.Random(7))
    for _ in range(50):
        assert 40.0 <= player.click_damage() <= 60.0


# Stage


def _kill(stage, count):
    for _ in range(count):
        stage.record_enemy_death(False)


def test_next_level_locked_until_boss_killed(resources):
    stage = Stage(resources)
    _kill(stage, stage.ENEMIES_PER_STAGE)
    assert not stage.is_next_level_unlocked()


def test_next_level_locked_with_extra_kills_while_boss_available(resources):
    stage = Stage(resources)
    _kill(stage, stage.ENEMIES_PER_STAGE + 3)
    assert not stage.is_next_level_unlocked()


def test_boss_not_available_before_all_kills(resources):
    stage = Stage(resources)
    _kill(stage, stage.ENEMIES_PER_STAGE - 1)
    assert not stage.boss_available


def test_next_level_unlocked_after_boss_killed(resources):
    stage = Stage(resources)
    _kill(stage, stage.ENEMIES_PER_STAGE)
    stage.record_enemy_death(True)
    assert stage.is_next_level_unlocked()


def test_boss_not_available_after_killed(resources):
    stage = Stage(resources)
    _kill(stage, stage.ENEMIES_PER_STAGE)
    stage.record_enemy_death(True)
    assert not stage.boss_available


def test_boss_cannot_be_unlocked_twice(resources):
    stage = Stage(resources)
    _kill(stage, stage.ENEMIES_PER_STAGE)
    stage.record_enemy_death(True)
    _kill(stage, stage.ENEMIES_PER_STAGE)
    assert not stage.boss_available


def test_increment_level_resets_enemies_left(resources):
    stage = Stage(resources)
    _kill(stage, 2)
    stage.increment_level()
    assert stage.enemies_left == stage.ENEMIES_PER_STAGE


def test_increment_level_boss_not_available(resources):
    stage = Stage(resources)
    stage.increment_level()
    assert not stage.boss_available


def test_gui_counter_updated_on_kill(resources):
    stage = Stage(resources)
    for _ in range(stage.ENEMIES_PER_STAGE - 1):
        stage.record_enemy_death(False)
        expected = stage.ENEMIES_PER_STAGE - stage.enemies_left
        actual = int(stage.gui.enemy_counter.text.string[0])
        assert actual == expected


def test_gui_shows_fight_boss_after_boss_unlocked(resources):
    stage = Stage(resources)
    _kill(stage, stage.ENEMIES_PER_STAGE)
    stage.record_enemy_death(True)
    assert stage.gui.boss_button.text.string == "Fight boss?"


def test_gui_shows_quit_fight_during_boss_fight(resources):
    stage = Stage(resources)
    _kill(stage, stage.ENEMIES_PER_STAGE)
    stage.record_enemy_death(True)
    stage.set_boss_fight(True)
    assert stage.gui.boss_button.text.string == "Quit fight?"


def test_gui_shows_fight_boss_after_quitting(resources):
    stage = Stage(resources)
    _kill(stage, stage.ENEMIES_PER_STAGE)
    stage.record_enemy_death(True)
    stage.set_boss_fight(True)
    stage.set_boss_fight(False)
    assert stage.gui.boss_button.text.string == "Fight boss?"


def test_stage_advances_every_ten_levels(resources):
    stage = Stage(resources)
    for _ in range(10):
        stage.increment_level()
    assert stage.name == StageName(1)


def test_background_changes_with_stage(resources):
    stage = Stage(resources)
    for _ in range(10):
        stage.increment_level()
    assert stage.sprite.texture is resources.texture(StageName(1))


def test_gui_next_level_unlocked(resources):
    stage = Stage(resources)
    _kill(stage, stage.ENEMIES_PER_STAGE)
    stage.record_enemy_death(True)
    assert stage.gui.next_level().status is StageLevelStatus.UNLOCKED


def test_increment_level_selects_next_level_in_gui(resources):
    stage = Stage(resources)
    initial = stage.gui.next_level().value
    stage.increment_level()
    assert stage.gui.next_level().value != initial


def test_increment_level_locks_following_level(resources):
    stage = Stage(resources)
    _kill(stage, stage.ENEMIES_PER_STAGE)
    stage.record_enemy_death(True)
    stage.increment_level()
    assert stage.gui.next_level().status is StageLevelStatus.LOCKED


def test_next_level_bounds_hit(resources):
    stage = Stage(resources)
    bounds = stage.gui.next_level_bounds()
    centre = (bounds.left + bounds.width / 2, bounds.top + bounds.height / 2)
    assert stage.is_next_level_in_bounds(centre)
    assert not stage.is_next_level_in_bounds((0.0, 0.0))


def test_enemy_name_enum_unchanged_by_regenerate(resources):
    enemy = Enemy(resources)
    enemy.regenerate(StageName.MAGIC_FOREST, 1, False)
    assert isinstance(enemy.kind, EnemyName)
    assert enemy.kind in EnemyGenerator().stage_enemies[StageName.MAGIC_FOREST]