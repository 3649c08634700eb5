"""Random choice of enemies and bosses for a stage."""

from __future__ import annotations

import random

from fantasia.enums import EnemyName as E
from fantasia.enums import StageName as S

_STAGE_ENEMIES: dict[S, tuple[E, ...]] = {
    S.GREEN_FOREST: (
        E.FAIRY_FILIA, E.GRASSHOPPER, E.GREEN_SPIDER, E.IMPERIAL_WIDOW,
        E.MOTHY, E.SHROOMY, E.SPORA,
    ),
    S.DARK_FOREST: (
        E.DARK_ANGEL, E.REAPER, E.BANSHEE, E.IMP, E.GHAUL, E.SEEKER,
        E.SUCCUBUS, E.OGRE,
    ),
    S.MAGIC_FOREST: (
        E.EARTH_BULL, E.BUSH_WISP, E.LEAF_IMP, E.EARTH_LION, E.MANDRAKE,
        E.ROCK_GOLEM, E.EARTH_SNAKE, E.EARTH_SPAWN, E.EARTH_TURTLE,
        E.EARTH_WISP,
    ),
    S.CITY_ENTRANCE: (
        E.GOBLIN_ARCHER, E.GOBLIN_ELITE, E.GOBLIN_GRUNT, E.GOBLIN_MAGE,
        E.GOBLIN_RAIDER, E.ROGUE_SWORDMAN, E.ROGUE_MONK, E.ROGUE_ASSASSIN,
    ),
    S.FORGOTTEN_ROAD: (
        E.ELF_ARCHER, E.ELF_ASSASSIN, E.CROSSBOW_ELF, E.DUAL_SWORD_ELF,
        E.ELF_MAGE, E.SPEAR_ELF, E.SWORD_ELF, E.NATURE_LINKER, E.ROGUE_ELF,
        E.SPELLCASTER,
    ),
    S.HAUNTED_MARKETPLACE: (
        E.GAZERS_EYEWING, E.GAZERS_SKULL, E.TENTEYE, E.GHOSTUS,
        E.KNIGHT_DESTRAND, E.KNIGHT_GALPHA, E.KNIGHT_GOLIATH,
        E.GHOST_PUPPET_PAILO, E.GHOST_REVELATOR,
    ),
    S.GOLDEN_TEMPLE: (
        E.AXE_KNIGHT, E.GOLDEN_AXE_KNIGHT, E.GUNNER_KNIGHT,
        E.GOLDEN_GUNNER_KNIGHT, E.SPEAR_KNIGHT, E.GOLDEN_SPEAR_KNIGHT,
        E.SWORD_KNIGHT, E.GOLDEN_SWORD_KNIGHT,
    ),
    # Two inferno enemies are listed twice, which makes them twice as common.
    S.INFERNO: (
        E.FIRE_BULL, E.FIRE_DRAGONSPAWN, E.FIRE_LION, E.FIRE_OGRE,
        E.FIRE_SABRETOOTH, E.FIRE_SALAMANDER, E.FIRE_TURTLE,
        E.VOLCANIC_MAIDEN, E.FIRE_VULTURE, E.VOLCANIC_MAIDEN,
        E.FIRE_VULTURE, E.FIRE_WISP,
    ),
}

_STAGE_BOSSES: dict[S, tuple[E, ...]] = {
    S.GREEN_FOREST: (E.RUKKHA, E.DAIDARABOTCHI, E.TELLIA),
    S.DARK_FOREST: (E.BLOOD_FERAL, E.DARK_QUEEN_YOA, E.KNIGHT_REMMENT),
    S.MAGIC_FOREST: (E.QUEEN_RAFFLESIA, E.QUEEN_YGGDRASIL, E.GEMSTONE_GOLEM),
    S.CITY_ENTRANCE: (E.BONEMASK, E.THE_FALLEN, E.ANCIENT_AUTOMATON),
    S.FORGOTTEN_ROAD: (E.CELESTIAL_BEATRIX, E.ALFADRIEL, E.SON_OF_VALHALLA),
    S.HAUNTED_MARKETPLACE: (E.ASTRAL_LICH, E.ELDRITCH_GOD, E.REAPER_NIHILO),
    S.GOLDEN_TEMPLE: (E.GOLDEN_HUANGLONG, E.GOLDEN_LADON, E.GOLDEN_EMPEROR),
    S.INFERNO: (E.NUCKELAVEE, E.ILNOCT, E.HELLHOUND_GARM),
}


class EnemyGenerator:
    """Picks a uniformly random enemy or boss belonging to a stage."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.stage_enemies: dict[S, tuple[E, ...]] = dict(_STAGE_ENEMIES)
        self.stage_bosses: dict[S, tuple[E, ...]] = dict(_STAGE_BOSSES)

    def random_enemy(self, stage_name: S) -> E:
        """Return a random ordinary enemy of ``stage_name``."""
        return self._rng.choice(self.stage_enemies[stage_name])

    def random_boss(self, stage_name: S) -> E:
        """Return a random boss of ``stage_name``."""
        return self._rng.choice(self.stage_bosses[stage_name])