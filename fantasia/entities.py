"""Game entities: the enemy, the player, their inventory and the stage."""

from __future__ import annotations

import random
from typing import Any

import pygame

from fantasia.enemy_generator import EnemyGenerator
from fantasia.enums import EnemyName, PlayerRank, ResourceName, StageName
from fantasia.resources import Resources
from fantasia.shapes import Sprite, Vector2
from fantasia.stage_gui import ENEMIES_PER_LEVEL, StageGUI
from fantasia.widgets import EnemyGUI, InventoryGUI, PlayerGUI

_RNG = random.Random()


class Enemy:
    """The creature being fought; its stats grow with its level."""

    base_max_hp = 500.0
    base_damage = 100.0
    base_xp_held = 25.0
    base_coins_held = 25.0

    def __init__(self, resources: Resources, rng: random.Random | None = None) -> None:
        self.resources = resources
        self._rng = rng if rng is not None else _RNG
        self.generator = EnemyGenerator(self._rng)
        self.gui = EnemyGUI(resources)
        self.kind: EnemyName | None = None
        self.level = 0
        self._hp = 0.0
        self._max_hp = 0.0
        self.damage = 0.0
        self.xp_held = 0.0
        self.coins_held = 0.0
        self.dead = False
        self.regenerating = False
        self.boss = False
        self.regenerate(StageName.GREEN_FOREST, 1, False)

    @property
    def hp(self) -> float:
        return self._hp

    @hp.setter
    def hp(self, value: float) -> None:
        self._hp = value
        self.gui.set_hp(value)

    @property
    def max_hp(self) -> float:
        return self._max_hp

    @max_hp.setter
    def max_hp(self, value: float) -> None:
        self._max_hp = value
        self.gui.set_max_hp(value)

    @property
    def sprite(self) -> Sprite:
        return self.gui.sprite

    def contains(self, pos: Any) -> bool:
        """Whether ``pos`` falls on the enemy's sprite."""
        return self.gui.boundaries_contain(pos)

    def receive_damage(self, damage: float) -> None:
        """Lose ``damage`` health; at zero or below the enemy dies."""
        self.hp = self.hp - damage
        if self.hp <= 0:
            self.hp = 0
            self.dead = True

    def regenerate(self, stage_name: StageName, min_level: int, is_boss: bool) -> None:
        """Replace this enemy with a fresh one of ``stage_name``.

        The level is random in [min_level, min_level + 2]; bosses have
        multiplied damage, health, experience and coins.
        """
        kind = (
            self.generator.random_boss(stage_name)
            if is_boss
            else self.generator.random_enemy(stage_name)
        )
        self.level = self._rng.randint(min_level, min_level + 2)

        damage_multiplier = 20 if is_boss else 1
        hp_multiplier = 5 if is_boss else 1
        xp_multiplier = 3 if is_boss else 1
        coins_multiplier = 4 if is_boss else 1

        self.damage = self.base_damage * damage_multiplier * 1.045**self.level
        self.xp_held = self.base_xp_held * xp_multiplier * 1.08**self.level
        self.coins_held = self.base_coins_held * coins_multiplier * 1.05**self.level
        self.max_hp = self.base_max_hp * hp_multiplier * 1.12**self.level
        self.hp = self.max_hp
        self.kind = kind
        self.gui.set_texture(self.resources.texture(kind))
        self.gui.set_info(self.resources.name(kind), self.level)

        self.dead = False
        self.regenerating = False
        self.boss = is_boss

    def draw(self, target: pygame.Surface) -> None:
        self.gui.draw(target)


class Inventory:
    """The player's money."""

    def __init__(self, resources: Resources) -> None:
        self.resources = resources
        self.gui = InventoryGUI(resources)
        self.money = 0.0
        self.gui.set_money(self.money)

    def add_money(self, amount: float) -> None:
        self.money += amount
        self.gui.set_money(self.money)

    def draw(self, target: pygame.Surface) -> None:
        self.gui.draw(target)


class Player:
    """The hero: health, experience, level and rank."""

    base_max_hp = 500.0
    base_required_xp = 250.0
    base_click_damage = 50.0

    def __init__(self, resources: Resources, rng: random.Random | None = None) -> None:
        self.resources = resources
        self._rng = rng if rng is not None else _RNG
        self.sprite = Sprite(resources.texture(ResourceName.PLAYER_TEXTURE))
        self.rank = PlayerRank()
        self.gui = PlayerGUI(resources)
        self._hp = 0.0
        self._max_hp = 0.0
        self._xp = 0.0
        self._required_xp = 0.0
        self._fever = 0.0
        self.dead = False
        self.regenerating = False

        self.regenerate()
        self.xp = 0.0
        self.rank.name = "Rogue"
        self.level = 1
        self.damage_per_click = self.base_click_damage
        self.gui.set_info(self.rank.name, self.level)

    @property
    def hp(self) -> float:
        return self._hp

    @hp.setter
    def hp(self, value: float) -> None:
        self._hp = value
        self.gui.set_hp(value)

    @property
    def max_hp(self) -> float:
        return self._max_hp

    @max_hp.setter
    def max_hp(self, value: float) -> None:
        self._max_hp = value
        self.gui.set_max_hp(value)

    @property
    def xp(self) -> float:
        return self._xp

    @xp.setter
    def xp(self, value: float) -> None:
        self._xp = value
        self.gui.set_xp(value)

    @property
    def required_xp(self) -> float:
        return self._required_xp

    @required_xp.setter
    def required_xp(self, value: float) -> None:
        self._required_xp = value
        self.gui.set_required_xp(value)

    @property
    def fever(self) -> float:
        return self._fever

    @fever.setter
    def fever(self, value: float) -> None:
        self._fever = value
        self.gui.set_fever(value)

    def receive_damage(self, damage: float) -> None:
        """Lose ``damage`` health; at zero or below the player dies."""
        self.hp = self.hp - damage
        if self.hp <= 0:
            self.hp = 0
            self.dead = True

    def receive_xp(self, amount: float) -> None:
        """Gain experience, levelling up as many times as it allows."""
        self.xp = self.xp + amount
        while self.xp >= self.required_xp:
            self.increment_level()

    def regenerate(self) -> None:
        """Bring the player back to base health with no fever."""
        self.dead = False
        self.regenerating = False
        self.hp = self.base_max_hp
        self.max_hp = self.base_max_hp
        self.fever = 0.0
        self.sprite.position = Vector2(655.0, 680.0)
        self.sprite.scale = Vector2(0.6, 0.6)

    def increment_level(self) -> None:
        """Advance one level, keeping leftover experience and refilling health."""
        self.level += 1
        self.xp = self.xp - self.required_xp
        self.required_xp = self.base_required_xp * 1.1**self.level
        self.max_hp = self.base_max_hp * 1.12**self.level
        self.hp = self.max_hp
        self.rank.name = self.rank.rank_for(self.level)
        self.gui.set_info(self.rank.name, self.level)

    def click_damage(self) -> float:
        """Damage of one click: the base value scaled by a factor in [0.8, 1.2]."""
        return self.damage_per_click * self._rng.uniform(0.8, 1.2)

    def draw(self, target: pygame.Surface) -> None:
        self.sprite.draw(target)
        self.gui.draw(target)


class Stage:
    """Progress through levels and stages, with a boss at the end of each level."""

    ENEMIES_PER_STAGE = ENEMIES_PER_LEVEL

    def __init__(self, resources: Resources) -> None:
        self.resources = resources
        self.gui = StageGUI(resources)
        self.name = StageName.GREEN_FOREST
        self.level = 1
        self.boss_available = False
        self.enemies_left = self.ENEMIES_PER_STAGE
        self.sprite = Sprite(
            resources.texture(StageName.GREEN_FOREST),
            position=(0.0, 0.0),
            scale=(1.0, 1.0),
        )

    def record_enemy_death(self, is_boss: bool) -> None:
        """Count a kill; killing the boss unlocks the next level."""
        if is_boss:
            self.gui.set_next_level_unlocked()
            self.boss_available = False
        elif self.enemies_left > 0:
            self.enemies_left -= 1
            self.gui.set_enemies_killed(self.ENEMIES_PER_STAGE - self.enemies_left)
            if self.enemies_left == 0:
                self.boss_available = True

    def increment_level(self) -> None:
        """Move to the next level; every tenth level starts the next stage."""
        self.level += 1
        self.enemies_left = self.ENEMIES_PER_STAGE
        self.gui.set_next_level_selected()
        self.gui.set_enemies_killed(0)
        if self.level % 10 == 0:
            self._increment_stage()

    def _increment_stage(self) -> None:
        self.name = StageName(self.name.value + 1)
        self.sprite.texture = self.resources.texture(self.name)

    def set_boss_fight(self, boss_fight: bool) -> None:
        self.gui.set_boss_fight(boss_fight)

    def is_next_level_unlocked(self) -> bool:
        return self.enemies_left == 0 and not self.boss_available

    def is_next_level_in_bounds(self, pos: Any) -> bool:
        return self.gui.next_level_bounds().contains(pos)

    def is_boss_button_in_bounds(self, pos: Any) -> bool:
        return self.gui.boss_button_bounds().contains(pos)

    def draw(self, target: pygame.Surface) -> None:
        self.sprite.draw(target)
        self.gui.draw(target)