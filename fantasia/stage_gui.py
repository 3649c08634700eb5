"""The stage panel: level squares, enemy counter and boss button."""

from __future__ import annotations

import math
from typing import Any

import pygame

from fantasia.enums import ResourceName, StageLevelStatus, StageName
from fantasia.resources import Resources
from fantasia.shapes import Color, FloatRect, RoundedRect, Sprite, Text, Vector2

_TRANSLUCENT_WHITE = Color(255, 255, 255, 230)
_TRANSLUCENT_BLACK = Color(0, 0, 0, 230)

ENEMIES_PER_LEVEL = 5

# Fill colour, outline colour, corner radius and text colour for each status.
_STATUS_STYLES: dict[StageLevelStatus, tuple[Color, Color, float, Color]] = {
    StageLevelStatus.LOCKED: (
        Color(0, 0, 0, 255),
        Color(255, 255, 255, 30),
        15,
        Color(255, 255, 255, 50),
    ),
    StageLevelStatus.UNLOCKED: (
        Color(0, 120, 0, 200),
        Color(0, 170, 0, 170),
        15,
        Color(255, 255, 255, 250),
    ),
    StageLevelStatus.ACTIVE: (
        Color(0, 0, 0, 255),
        Color(255, 255, 255, 230),
        4,
        Color(255, 255, 255, 250),
    ),
    StageLevelStatus.COMPLETED: (
        Color(0, 30, 0, 250),
        Color(0, 50, 0, 250),
        15,
        Color(255, 255, 255, 100),
    ),
}


class StageBossButton:
    """A button that starts or quits the boss fight; hidden until needed."""

    _TEXT_POSITION = Vector2(930.0, 410.0)

    def __init__(self, resources: Resources) -> None:
        self.resources = resources
        self.text = Text(
            "",
            resources.font(ResourceName.RIGHTEOUS_FONT),
            18,
            fill_color=_TRANSLUCENT_WHITE,
        )
        self.rect = RoundedRect(radius=5, corner_point_count=10, outline_thickness=3)
        self.visible = False

    def _layout(self, label: str, fill: Color, outline: Color) -> None:
        self.text.position = self._TEXT_POSITION
        self.text.string = label
        bounds = self.text.local_bounds()
        self.rect.size = Vector2(bounds.width * 2, bounds.height * 2)
        self.rect.position = Vector2(
            self.text.position.x - bounds.width / 2,
            self.text.position.y - bounds.height / 3,
        )
        self.rect.fill_color = fill
        self.rect.outline_color = outline

    def set_boss_available(self) -> None:
        """Show the invitation to start the boss fight."""
        self._layout("Fight boss?", Color(150, 0, 0, 200), Color(170, 0, 0, 200))

    def set_boss_active(self) -> None:
        """Show the offer to leave the current boss fight."""
        self._layout("Quit fight?", Color(0, 153, 230, 150), Color(0, 160, 240, 150))

    def boundaries_contain(self, pos: Any) -> bool:
        return self.rect.global_bounds().contains(pos)

    def bounds(self) -> FloatRect:
        return self.rect.global_bounds()

    def draw(self, target: pygame.Surface) -> None:
        if self.visible:
            self.rect.draw(target)
            self.text.draw(target)


class StageEnemyCounter:
    """A skull icon with the number of enemies killed on the current level."""

    def __init__(self, resources: Resources) -> None:
        self.resources = resources
        self.sprite = Sprite(
            resources.texture(ResourceName.PIERCED_SKULL_TEXTURE),
            position=(930.0, 410.0),
            scale=(0.7, 0.7),
        )
        self.text = Text(
            "",
            resources.font(ResourceName.RIGHTEOUS_FONT),
            14,
            fill_color=_TRANSLUCENT_WHITE,
            position=(960.0, 412.0),
        )
        self.set_enemies_killed(0)
        self.visible = True

    def set_enemies_killed(self, n: int) -> None:
        self.text.string = f"{n} / {ENEMIES_PER_LEVEL}"

    def draw(self, target: pygame.Surface) -> None:
        if self.visible:
            self.sprite.draw(target)
            self.text.draw(target)


class StageLevel:
    """A numbered square showing one level and its status."""

    def __init__(
        self,
        resources: Resources,
        level: int,
        x: float,
        y: float,
        status: StageLevelStatus = StageLevelStatus.LOCKED,
    ) -> None:
        self.resources = resources
        self.value = level
        self.pos_x = float(x)
        self.pos_y = float(y)
        self.rect = RoundedRect(
            Vector2(30.0, 30.0),
            4,
            10,
            fill_color=_TRANSLUCENT_BLACK,
            outline_color=_TRANSLUCENT_WHITE,
            outline_thickness=1,
            position=(x, y),
        )
        self.text = Text(
            "",
            resources.font(ResourceName.RIGHTEOUS_FONT),
            14,
            fill_color=_TRANSLUCENT_WHITE,
        )
        self._set_text(str(level))
        self.status = status

    @property
    def status(self) -> StageLevelStatus:
        return self._status

    @status.setter
    def status(self, status: StageLevelStatus) -> None:
        self._status = status
        fill, outline, radius, text_color = _STATUS_STYLES[status]
        self.rect.fill_color = fill
        self.rect.outline_color = outline
        self.rect.radius = float(radius)
        self.text.fill_color = text_color

    def _set_text(self, string: str) -> None:
        self.text.string = string
        width = self.text.local_bounds().width
        self.text.position = Vector2(
            self.pos_x + 15 - math.floor(width / 2), self.pos_y + 7
        )

    def increment_value(self) -> None:
        """Advance the displayed level number by one."""
        self.value += 1
        self._set_text(str(self.value))

    def bounds(self) -> FloatRect:
        return self.rect.global_bounds()

    def draw(self, target: pygame.Surface) -> None:
        self.rect.draw(target)
        self.text.draw(target)


class StageGUI:
    """The stage panel with its name, five level squares, counter and boss button."""

    def __init__(self, resources: Resources) -> None:
        self.resources = resources
        self.enemies_killed = 0
        self.boss_fight = False
        self.enemy_counter = StageEnemyCounter(resources)
        self.boss_button = StageBossButton(resources)
        self.main_rect = RoundedRect(
            Vector2(320.0, 165.0),
            25,
            50,
            fill_color=_TRANSLUCENT_BLACK,
            position=(800.0, 300.0),
        )
        self.levels = [
            StageLevel(resources, number, 845.0 + 50.0 * (number - 1), 320.0)
            for number in range(1, 6)
        ]
        self.levels[0].status = StageLevelStatus.ACTIVE

        self.stage_name_text = Text(
            "",
            resources.font(ResourceName.RIGHTEOUS_FONT),
            18,
            fill_color=_TRANSLUCENT_WHITE,
        )
        self.stage_name = StageName.GREEN_FOREST
        self._set_stage_name_text(self.stage_name)

    def _set_stage_name_text(self, stage_name: StageName) -> None:
        self.stage_name_text.string = self.resources.name(stage_name)
        width = self.stage_name_text.local_bounds().width
        self.stage_name_text.position = Vector2(960 - math.floor(width / 2), 370.0)

    def next_level(self) -> StageLevel:
        """Return the square of the level after the active one."""
        first, second, third, fourth = self.levels[:4]
        if first.status is StageLevelStatus.ACTIVE:
            return second
        if second.status is StageLevelStatus.ACTIVE:
            return third
        return fourth

    def next_level_bounds(self) -> FloatRect:
        return self.next_level().bounds()

    def boss_button_bounds(self) -> FloatRect:
        return self.boss_button.bounds()

    def set_enemies_killed(self, n: int) -> None:
        """Update the counter, or offer the boss fight once all enemies are down."""
        self.enemies_killed = n
        if n == ENEMIES_PER_LEVEL:
            self.boss_button.set_boss_available()
            self.boss_button.visible = True
            self.enemy_counter.visible = False
        else:
            self.enemy_counter.set_enemies_killed(n)

    def set_boss_fight(self, boss_fight: bool) -> None:
        self.boss_fight = boss_fight
        if boss_fight:
            self.boss_button.set_boss_active()
        else:
            self.boss_button.set_boss_available()

    def set_next_level_unlocked(self) -> None:
        """Mark the next level as reachable and hide the counter and boss button."""
        self.next_level().status = StageLevelStatus.UNLOCKED
        self.enemy_counter.visible = False
        self.boss_button.visible = False

    def set_next_level_selected(self) -> None:
        """Move the active square forward, shifting the numbers once past the middle."""
        self.boss_button.visible = False
        self.enemy_counter.visible = True

        first, second, third, fourth, _ = self.levels
        if third.value == 3 and third.status is not StageLevelStatus.ACTIVE:
            if first.status is StageLevelStatus.ACTIVE:
                first.status = StageLevelStatus.COMPLETED
                second.status = StageLevelStatus.ACTIVE
            elif second.status is StageLevelStatus.ACTIVE:
                second.status = StageLevelStatus.COMPLETED
                third.status = StageLevelStatus.ACTIVE
        else:
            for level in self.levels:
                level.increment_value()
            second.status = StageLevelStatus.COMPLETED
            third.status = StageLevelStatus.ACTIVE
            fourth.status = StageLevelStatus.LOCKED

    def draw(self, target: pygame.Surface) -> None:
        self.main_rect.draw(target)
        self.stage_name_text.draw(target)
        for level in self.levels:
            level.draw(target)
        self.enemy_counter.draw(target)
        self.boss_button.draw(target)