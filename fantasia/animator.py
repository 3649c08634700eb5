"""Frame-by-frame animation of sprites, damage bubbles and coin drops."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any

import pygame

from fantasia.entities import Enemy, Inventory, Player, Stage
from fantasia.resources import Resources
from fantasia.shapes import Sprite, Vector2
from fantasia.widgets import DamageBubble, Money

_RNG = random.Random()


def _as_vector(pos: Any) -> Vector2:
    if isinstance(pos, Vector2):
        return pos
    x, y = pos
    return Vector2(float(x), float(y))


@dataclass(eq=False)
class _SpriteAnimation:
    """Animation state of one sprite."""

    sprite: Sprite
    original_scale: Vector2
    hovered: bool = False
    click_frames_left: int = 0
    death_frames_left: int = 0
    hover_scale_increase: float = 0.0
    click_scale_increase: float = 0.0


class Animator:
    """Animates hover, click and death effects, damage bubbles and money drops.

    Each step runs once per fixed frame of 1/60 s, however long the real
    frames take.
    """

    time_per_frame = 1.0 / 60.0
    hover_animation_frames = 8
    click_animation_frames = 8
    death_animation_frames = 24

    def __init__(
        self,
        target: pygame.Surface,
        resources: Resources,
        inventory: Inventory,
        player: Player,
        enemy: Enemy,
        stage: Stage,
        rng: random.Random | None = None,
    ) -> None:
        self.target = target
        self.resources = resources
        self.inventory = inventory
        self.player = player
        self.enemy = enemy
        self.stage = stage
        self._rng = rng if rng is not None else _RNG
        self.elapsed_time = 0.0
        self.damage_bubbles: list[DamageBubble] = []
        self.dropped_money: list[Money] = []
        self.sprite_animations: list[_SpriteAnimation] = []
        self._animation(enemy.sprite)
        self._animation(player.sprite)

    def _animation(self, sprite: Sprite) -> _SpriteAnimation:
        for animation in self.sprite_animations:
            if animation.sprite is sprite:
                return animation
        scale = sprite.scale
        animation = _SpriteAnimation(sprite, Vector2(scale.x, scale.y))
        self.sprite_animations.append(animation)
        return animation

    def animate(self, delta_time: float, mouse_pos: Any) -> None:
        """Advance every animation by as many fixed frames as ``delta_time`` covers."""
        self.elapsed_time += delta_time
        while self.elapsed_time >= self.time_per_frame:
            self.refresh_hover_states(mouse_pos)
            self.scale_hovered()
            self.scale_clicked()
            self.draw_damage_bubbles()
            self.draw_dead_sprites()
            self.draw_dropped_money()
            self.elapsed_time -= self.time_per_frame

    def refresh_hover_states(self, mouse_pos: Any) -> None:
        """Mark each sprite as hovered when the mouse lies inside it."""
        point = _as_vector(mouse_pos)
        for animation in self.sprite_animations:
            animation.hovered = animation.sprite.global_bounds().contains(point)

    def scale(self, sprite: Sprite, increment: float) -> None:
        """Grow ``sprite`` by ``2 * increment``, shifting it to stay anchored."""
        bounds = sprite.local_bounds()
        sprite.move(bounds.width * -increment, bounds.height * -(increment * 2))
        current = sprite.scale
        sprite.scale = Vector2(current.x + increment * 2, current.y + increment * 2)

    def scale_hovered(self) -> None:
        """Scale hovered sprites up to a limit, and others back to their baseline."""
        max_scale = 0.01
        increment = max_scale / self.hover_animation_frames
        for animation in self.sprite_animations:
            if animation.hovered and animation.hover_scale_increase < max_scale:
                animation.hover_scale_increase += increment
                self.scale(animation.sprite, increment)
            elif not animation.hovered and animation.hover_scale_increase > 0.0:
                animation.hover_scale_increase -= increment
                self.scale(animation.sprite, -increment)

    def scale_clicked(self) -> None:
        """Scale clicked sprites up in the first half of the frames, down after."""
        max_scale = 0.06
        increment = max_scale / self.click_animation_frames
        half = self.click_animation_frames // 2
        for animation in self.sprite_animations:
            if animation.click_frames_left == 0:
                continue
            if (
                animation.click_frames_left > half
                and animation.click_scale_increase < max_scale
            ):
                animation.click_scale_increase += increment
                self.scale(animation.sprite, increment)
            else:
                animation.click_scale_increase -= increment
                self.scale(animation.sprite, -increment)
            animation.click_frames_left -= 1

    def add_damage_bubble(self, damage: float, position: Any) -> None:
        """Add a bubble showing ``damage`` near ``position``."""
        vector = _as_vector(position)
        self.damage_bubbles.append(
            DamageBubble(damage, self.resources, (vector.x, vector.y), rng=self._rng)
        )

    def add_dropped_money(self, value: float) -> None:
        """Split ``value`` among two to seven coins.

        The first coin is worth less and the last more than the rest, so that
        the coins do not all look the same.
        """
        coin_count = self._rng.randint(2, 7)
        for i in range(coin_count):
            coin_value = value / coin_count
            if i == 0:
                coin_value *= 0.7
            if i == coin_count - 1:
                coin_value /= 0.7
            self.dropped_money.append(Money(coin_value, self.resources, rng=self._rng))

    def draw_damage_bubbles(self) -> None:
        """Draw one frame of every bubble and drop those that have finished."""
        remaining = []
        for bubble in self.damage_bubbles:
            if bubble.has_more_frames():
                bubble.draw(self.target)
                remaining.append(bubble)
        self.damage_bubbles = remaining

    def draw_dropped_money(self) -> None:
        """Draw one frame of every coin; finished coins go into the inventory."""
        remaining = []
        for coin in self.dropped_money:
            if coin.has_more_frames():
                coin.draw(self.target)
                remaining.append(coin)
            else:
                self.inventory.add_money(coin.value)
        self.dropped_money = remaining

    def draw_dead_sprites(self) -> None:
        """Advance death animations; the last frame regenerates the entity.

        For the first 70% of the frames the sprite rises, grows and turns;
        for the rest it sinks and shrinks.
        """
        start_frames = self.death_animation_frames * 70 // 100
        for animation in self.sprite_animations:
            frames_left = animation.death_frames_left
            if frames_left == 0:
                continue
            sprite = animation.sprite
            if frames_left == 1:
                if sprite is self.enemy.sprite:
                    self.enemy.regenerate(self.stage.name, self.stage.level, False)
                if sprite is self.player.sprite:
                    self.player.regenerate()
                sprite.rotation = 0.0
            elif self.death_animation_frames - frames_left < start_frames:
                sprite.rotate(2.0)
                sprite.move(10.5, -7.5)
                self.scale(sprite, 0.015)
            else:
                sprite.move(-3.5, 3.5)
                self.scale(sprite, -0.1035)
            animation.death_frames_left -= 1

    def set_clicked_state(self, sprite: Sprite) -> None:
        """Start the click animation of ``sprite``."""
        self._animation(sprite).click_frames_left = self.click_animation_frames

    def set_dead_state(self, sprite: Sprite) -> None:
        """Start the death animation of ``sprite`` unless one is running."""
        animation = self._animation(sprite)
        if animation.death_frames_left != 0:
            return
        animation.death_frames_left = self.death_animation_frames
        if sprite is self.enemy.sprite:
            self.enemy.regenerating = True
        if sprite is self.player.sprite:
            self.player.regenerating = True