"""On-screen widgets: damage bubbles, money drops and the entity panels."""

from __future__ import annotations

import random
from typing import Any

import pygame

from fantasia.enums import ResourceName
from fantasia.number_formatter import abbreviate
from fantasia.resources import Resources
from fantasia.shapes import (
    Color,
    ProgressBar,
    RoundedRect,
    Sprite,
    Text,
    Texture,
    Vector2,
)

_RNG = random.Random()

_TRANSLUCENT_WHITE = Color(255, 255, 255, 230)
_TRANSLUCENT_BLACK = Color(0, 0, 0, 230)
_HP_COLOR = Color(207, 63, 46)


class DamageBubble:
    """A floating bubble showing a damage value for a fixed number of frames."""

    total_frames = 30

    def __init__(
        self,
        damage: float,
        resources: Resources,
        position: Any = (0.0, 0.0),
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else _RNG
        self.remaining_frames = self.total_frames
        self.x_offset = rng.uniform(-4.0, 4.0)

        mouse_x, mouse_y = position
        self.damage_text = Text(
            abbreviate(damage),
            resources.font(ResourceName.SKRANJI_FONT),
            18,
            fill_color=_TRANSLUCENT_WHITE,
            position=(float(mouse_x) - 20.0, float(mouse_y) - 40.0),
        )
        text_bounds = self.damage_text.local_bounds()
        text_pos = self.damage_text.position
        self.bubble_rect = RoundedRect(
            Vector2(text_bounds.width * 2, text_bounds.height * 2.5),
            15,
            30,
            fill_color=_TRANSLUCENT_BLACK,
            outline_color=_TRANSLUCENT_WHITE,
            outline_thickness=3,
            position=(
                text_pos.x - text_bounds.width / 2,
                text_pos.y - text_bounds.height / 2.5,
            ),
        )

    def draw(self, target: pygame.Surface) -> None:
        """Draw one frame, then drift upwards; does nothing once frames run out."""
        if self.remaining_frames == 0:
            return
        self.bubble_rect.draw(target)
        self.damage_text.draw(target)
        self.bubble_rect.move(self.x_offset, -4.0)
        self.damage_text.move(self.x_offset, -4.0)
        self.remaining_frames -= 1

    def has_more_frames(self) -> bool:
        return self.remaining_frames > 0


class EnemyGUI:
    """The enemy's sprite, name plate and health bar."""

    def __init__(self, resources: Resources) -> None:
        self.resources = resources
        self.hp_bar = ProgressBar(407, _HP_COLOR, 907.0, 871.0)
        self.sprite = Sprite()
        self.info = Text(
            "",
            resources.font(ResourceName.RIGHTEOUS_FONT),
            20,
            fill_color=Color.WHITE,
        )

    def set_max_hp(self, max_hp: float) -> None:
        self.hp_bar.set_max_value(max_hp)

    def set_hp(self, hp: float) -> None:
        self.hp_bar.set_value(hp)

    def set_info(self, name: str, level: int) -> None:
        """Show ``Lv. <level> <name>`` centred under the enemy."""
        self.info.string = f"Lv. {level} {name}"
        width = self.info.local_bounds().width
        self.info.position = Vector2(1098.0 - int(width / 2), 832.0)

    def set_texture(self, texture: Texture) -> None:
        """Show ``texture`` as the enemy, anchored near its feet."""
        self.sprite.texture = texture
        bounds = self.sprite.local_bounds()
        if bounds.height > 0:
            origin_y = bounds.height / (2 * bounds.height ** -0.082)
        else:
            origin_y = 0.0
        self.sprite.origin = Vector2(bounds.width / 2, origin_y)
        self.sprite.position = Vector2(1095.0, 760.0)
        self.sprite.scale = Vector2(0.8, 0.8)

    def boundaries_contain(self, pos: Any) -> bool:
        return self.sprite.global_bounds().contains(pos)

    def draw(self, target: pygame.Surface) -> None:
        self.hp_bar.draw(target)
        self.info.draw(target)
        self.sprite.draw(target)


class InventoryGUI:
    """The money counter in the inventory panel."""

    def __init__(self, resources: Resources) -> None:
        self.resources = resources
        self.money_text = Text(
            "",
            resources.font(ResourceName.RIGHTEOUS_FONT),
            16,
            fill_color=Color.WHITE,
        )

    def set_money(self, money: float) -> None:
        """Show the whole part of ``money``, centred in the panel."""
        self.money_text.string = str(int(money))
        width = self.money_text.local_bounds().width
        self.money_text.position = Vector2(1633.0 - int(width / 2), 285.0)

    def draw(self, target: pygame.Surface) -> None:
        self.money_text.draw(target)


def _coin_texture(value: float) -> ResourceName:
    if value <= 10:
        return ResourceName.COIN_TEXTURE_1
    if value <= 20:
        return ResourceName.COIN_TEXTURE_2
    if value <= 40:
        return ResourceName.COIN_TEXTURE_3
    if value <= 80:
        return ResourceName.COIN_TEXTURE_4
    if value > 150:
        return ResourceName.COIN_TEXTURE_5
    if value <= 500:
        return ResourceName.COIN_TEXTURE_6
    if value <= 2000:
        return ResourceName.COIN_TEXTURE_7
    if value <= 10000:
        return ResourceName.COIN_TEXTURE_8
    return ResourceName.COIN_TEXTURE_9


class Money:
    """A coin that flies along a quadratic Bezier curve into the inventory."""

    def __init__(
        self,
        value: float,
        resources: Resources,
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else _RNG
        self.value = value

        frames = rng.randint(40, 160)
        self.total_frames = frames if frames % 2 == 0 else frames + 1
        self.remaining_frames = self.total_frames

        self.start_point = Vector2(
            1055.0 + rng.uniform(-10.0, 10.0), 710.0 + rng.uniform(-10.0, 10.0)
        )
        self.mid_point = Vector2(
            1205.0 + rng.uniform(-300.0, 300.0), 1000.0 + rng.uniform(-300.0, 300.0)
        )
        self.end_point = Vector2(1621.0, 255.0)

        self.sprite = Sprite(
            resources.texture(_coin_texture(value)),
            position=self.start_point,
            scale=(0.8, 0.8),
        )

    def draw(self, target: pygame.Surface) -> None:
        """Draw one frame, then grow or shrink and advance along the curve."""
        if self.remaining_frames == 0:
            return
        self.sprite.draw(target)

        factor = 1.003 if self.remaining_frames > self.total_frames // 2 else 0.987
        scale = self.sprite.scale
        self.sprite.scale = Vector2(scale.x * factor, scale.y * factor)

        t = (self.total_frames - self.remaining_frames) / self.total_frames
        self.sprite.position = self.bezier_point(t)
        self.remaining_frames -= 1

    def bezier_point(self, t: float) -> Vector2:
        """Return the point at ``t`` on the curve through start, mid and end."""
        s, m, e = self.start_point, self.mid_point, self.end_point
        u = 1 - t
        return Vector2(
            u * u * s.x + 2 * (u * t * m.x) + t * t * e.x,
            u * u * s.y + 2 * (u * t * m.y) + t * t * e.y,
        )

    def has_more_frames(self) -> bool:
        return self.remaining_frames > 0


class PlayerGUI:
    """The player's name plate and health, fever and experience bars."""

    def __init__(self, resources: Resources) -> None:
        self.resources = resources
        self.hp_bar = ProgressBar(169, _HP_COLOR, 625.0, 871.0)
        self.fever_bar = ProgressBar(689, Color(141, 102, 241), 625.0, 896.0)
        self.xp_bar = ProgressBar(689, Color(166, 255, 17), 625.0, 921.0)
        self.info = Text(
            "",
            resources.font(ResourceName.RIGHTEOUS_FONT),
            20,
            fill_color=Color.WHITE,
        )
        self.fever_bar.set_max_value(100)

    def set_info(self, rank: str, level: int) -> None:
        """Show ``Lv. <level> <rank>`` centred under the player."""
        self.info.string = f"Lv. {level} {rank}"
        width = self.info.local_bounds().width
        self.info.position = Vector2(697.0 - int(width / 2), 832.0)

    def set_hp(self, hp: float) -> None:
        self.hp_bar.set_value(hp)

    def set_max_hp(self, max_hp: float) -> None:
        self.hp_bar.set_max_value(max_hp)

    def set_xp(self, xp: float) -> None:
        self.xp_bar.set_value(xp)

    def set_required_xp(self, required_xp: float) -> None:
        self.xp_bar.set_max_value(required_xp)

    def set_fever(self, fever: float) -> None:
        self.fever_bar.set_value(fever)

    def draw(self, target: pygame.Surface) -> None:
        self.hp_bar.draw(target)
        self.xp_bar.draw(target)
        self.fever_bar.draw(target)
        self.info.draw(target)


class StaticGUI:
    """Panels, labels and icons that never change during play."""

    def __init__(self, resources: Resources) -> None:
        self.resources = resources
        righteous = resources.font(ResourceName.RIGHTEOUS_FONT)

        self.title_text = Text(
            "Fantasia",
            resources.font(ResourceName.GREAT_VIBES_FONT),
            38,
            fill_color=Color.WHITE,
            outline_color=Color.WHITE,
            outline_thickness=0.2,
            position=(900.0, 50.0),
        )

        def label(string: str, size: int, x: float, y: float) -> Text:
            return Text(string, righteous, size, fill_color=Color.WHITE, position=(x, y))

        self.player_hp_text = label("HP", 16, 603.0, 865.0)
        self.player_fever_text = label("FV", 16, 603.0, 891.0)
        self.player_xp_text = label("XP", 16, 603.0, 916.0)
        self.enemy_hp_text = label("HP", 16, 885.0, 866.0)
        self.inventory_text = label("Inventory", 20, 1600.0, 210.0)

        def panel(
            width: float, height: float, radius: float, points: int, x: float, y: float
        ) -> RoundedRect:
            return RoundedRect(
                Vector2(width, height),
                radius,
                points,
                fill_color=_TRANSLUCENT_BLACK,
                position=(x, y),
            )

        self.title_rect = panel(275.0, 50.0, 25, 50, 822.5, 50.0)
        self.battle_area_rect = panel(746.0, 464.0, 25, 50, 585.0, 500.0)
        self.player_info_rect = panel(192, 25, 12, 20, 603.0, 831.0)
        self.enemy_info_rect = panel(435, 25, 12, 20, 880.0, 831.0)
        self.inventory_rect = panel(480, 432, 12, 20, 1392.0, 190.0)

        coin_texture = resources.texture(ResourceName.COIN_TEXTURE_1)
        coin_texture.smooth = True
        self.coin_icon = Sprite(coin_texture, position=(1621.0, 255.0), scale=(0.68, 0.68))

    def draw(self, target: pygame.Surface) -> None:
        for drawable in (
            self.title_rect,
            self.battle_area_rect,
            self.player_info_rect,
            self.enemy_info_rect,
            self.player_info_rect,
            self.enemy_info_rect,
            self.inventory_rect,
            self.title_text,
            self.player_hp_text,
            self.player_xp_text,
            self.player_fever_text,
            self.enemy_hp_text,
            self.inventory_text,
            self.coin_icon,
        ):
            drawable.draw(target)