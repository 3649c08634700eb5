"""The game loop: input, combat rules and rendering."""

from __future__ import annotations

import argparse
import random
from typing import Any, Sequence

import pygame

from fantasia.animator import Animator
from fantasia.entities import Enemy, Inventory, Player, Stage
from fantasia.resources import DEFAULT_RESOURCES_PATH, Resources
from fantasia.shapes import Vector2
from fantasia.widgets import StaticGUI

WINDOW_SIZE = (1920, 1080)
FRAME_RATE = 60
ATTACK_INTERVAL_MS = 1000


def _as_vector(pos: Any) -> Vector2:
    if isinstance(pos, Vector2):
        return pos
    x, y = pos
    return Vector2(float(x), float(y))


class Game:
    """Owns every entity and widget and applies the rules of play."""

    def __init__(
        self, resources: Resources | None = None, rng: random.Random | None = None
    ) -> None:
        self.resources = resources if resources is not None else Resources()
        self.screen = pygame.Surface(WINDOW_SIZE)
        self.static_gui = StaticGUI(self.resources)
        self.inventory = Inventory(self.resources)
        self.player = Player(self.resources, rng)
        self.enemy = Enemy(self.resources, rng)
        self.stage = Stage(self.resources)
        self.animator = Animator(
            self.screen,
            self.resources,
            self.inventory,
            self.player,
            self.enemy,
            self.stage,
            rng=rng,
        )
        self.running = True
        self.attack_timer_ms = 0.0
        self.last_click = Vector2(0.0, 0.0)

    def run(self) -> None:
        """Open a full-screen window and play until it is closed."""
        pygame.init()
        try:
            self.screen = pygame.display.set_mode(WINDOW_SIZE, pygame.FULLSCREEN, 32)
            pygame.display.set_caption("Fantasia")
            clock = pygame.time.Clock()
            self.running = True
            while self.running:
                for event in pygame.event.get():
                    self.process_event(event)
                elapsed_ms = clock.tick(FRAME_RATE)
                self.update(elapsed_ms)
                self.render(self.screen, elapsed_ms / 1000.0, pygame.mouse.get_pos())
                pygame.display.flip()
        finally:
            pygame.quit()

    def process_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        if event.type == pygame.MOUSEBUTTONDOWN:
            self.process_click(event.pos)

    def process_click(self, pos: Any) -> None:
        """Dispatch a click to the enemy, the next-level square or the boss button."""
        point = _as_vector(pos)
        self.last_click = point
        if self.enemy.contains(point):
            self.handle_enemy_click()
        elif self.stage.is_next_level_in_bounds(point):
            self.handle_next_level_click()
        elif self.stage.is_boss_button_in_bounds(point):
            self.handle_boss_button_click()

    def handle_next_level_click(self) -> None:
        if self.stage.is_next_level_unlocked():
            self.stage.increment_level()
            self.enemy.regenerate(self.stage.name, self.stage.level, False)

    def handle_boss_button_click(self) -> None:
        """Start the boss fight, or leave it if one is under way."""
        if not self.stage.boss_available:
            return
        if self.enemy.boss:
            self.enemy.regenerate(self.stage.name, self.stage.level, False)
            self.stage.set_boss_fight(False)
        else:
            self.player.hp = self.player.max_hp
            self.enemy.regenerate(self.stage.name, self.stage.level, True)
            self.stage.set_boss_fight(self.enemy.boss)

    def handle_enemy_click(self) -> None:
        """Hit the enemy with a click, handling its death if it falls."""
        if self.enemy.regenerating:
            return
        if not self.enemy.dead:
            self.animator.set_clicked_state(self.enemy.sprite)
            damage = self.player.click_damage()
            self.animator.add_damage_bubble(damage, self.last_click)
            self.enemy.receive_damage(damage)
        if self.enemy.dead:
            self.process_enemy_death()

    def process_enemy_death(self) -> None:
        """Count the kill and hand out its coins and experience."""
        if not self.stage.is_next_level_unlocked():
            self.stage.record_enemy_death(self.enemy.boss)
        self.animator.set_dead_state(self.enemy.sprite)
        self.animator.add_dropped_money(self.enemy.coins_held)
        self.player.receive_xp(self.enemy.xp_held)
        self.player.hp = self.player.max_hp

    def process_player_attacked(self) -> None:
        """Let the enemy strike the player once."""
        if not self.player.regenerating:
            self.player.receive_damage(self.enemy.damage)
        if self.player.dead and not self.player.regenerating:
            self.animator.set_dead_state(self.player.sprite)
        self.attack_timer_ms = 0.0

    def update(self, elapsed_ms: float) -> None:
        """Advance the attack timer; the enemy strikes once a second."""
        self.attack_timer_ms += elapsed_ms
        if self.attack_timer_ms >= ATTACK_INTERVAL_MS:
            self.process_player_attacked()
        if self.player.regenerating or self.enemy.regenerating:
            self.attack_timer_ms = 0.0

    def render(self, target: pygame.Surface, delta_time: float, mouse_pos: Any) -> None:
        """Draw the whole scene onto ``target`` and advance the animations."""
        target.fill((0, 0, 0))
        self.stage.draw(target)
        self.static_gui.draw(target)
        self.inventory.draw(target)
        self.player.draw(target)
        self.enemy.draw(target)
        self.animator.target = target
        self.animator.animate(delta_time, mouse_pos)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="fantasia", description="Play Fantasia.")
    parser.add_argument(
        "--resources",
        default=str(DEFAULT_RESOURCES_PATH),
        help="directory holding the fonts and images",
    )
    args = parser.parse_args(argv)
    Game(Resources(args.resources)).run()
    return 0