"""Enumerations and rank data shared across the game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

_INT64_MAX = 2**63 - 1


class EnemyName(Enum):
    """Every enemy and boss that can appear, grouped by stage."""

    # Stage 1
    FAIRY_FILIA = auto()
    GRASSHOPPER = auto()
    GREEN_SPIDER = auto()
    IMPERIAL_WIDOW = auto()
    MOTHY = auto()
    SHROOMY = auto()
    SPORA = auto()
    RUKKHA = auto()
    DAIDARABOTCHI = auto()
    TELLIA = auto()

    # Stage 2
    DARK_ANGEL = auto()
    REAPER = auto()
    BANSHEE = auto()
    IMP = auto()
    GHAUL = auto()
    SEEKER = auto()
    SUCCUBUS = auto()
    OGRE = auto()
    BLOOD_FERAL = auto()
    DARK_QUEEN_YOA = auto()
    KNIGHT_REMMENT = auto()

    # Stage 3
    EARTH_BULL = auto()
    BUSH_WISP = auto()
    LEAF_IMP = auto()
    EARTH_LION = auto()
    MANDRAKE = auto()
    ROCK_GOLEM = auto()
    EARTH_SNAKE = auto()
    EARTH_SPAWN = auto()
    EARTH_TURTLE = auto()
    EARTH_WISP = auto()
    QUEEN_RAFFLESIA = auto()
    QUEEN_YGGDRASIL = auto()
    GEMSTONE_GOLEM = auto()

    # Stage 4
    GOBLIN_ARCHER = auto()
    GOBLIN_ELITE = auto()
    GOBLIN_GRUNT = auto()
    GOBLIN_MAGE = auto()
    GOBLIN_RAIDER = auto()
    ROGUE_SWORDMAN = auto()
    ROGUE_MONK = auto()
    ROGUE_ASSASSIN = auto()
    BONEMASK = auto()
    THE_FALLEN = auto()
    ANCIENT_AUTOMATON = auto()

    # Stage 5
    ELF_ARCHER = auto()
    ELF_ASSASSIN = auto()
    CROSSBOW_ELF = auto()
    DUAL_SWORD_ELF = auto()
    ELF_MAGE = auto()
    SPEAR_ELF = auto()
    SWORD_ELF = auto()
    NATURE_LINKER = auto()
    ROGUE_ELF = auto()
    SPELLCASTER = auto()
    CELESTIAL_BEATRIX = auto()
    ALFADRIEL = auto()
    SON_OF_VALHALLA = auto()

    # Stage 6
    GAZERS_EYEWING = auto()
    GAZERS_SKULL = auto()
    TENTEYE = auto()
    GHOSTUS = auto()
    KNIGHT_DESTRAND = auto()
    KNIGHT_GALPHA = auto()
    KNIGHT_GOLIATH = auto()
    GHOST_PUPPET_PAILO = auto()
    GHOST_REVELATOR = auto()
    ASTRAL_LICH = auto()
    ELDRITCH_GOD = auto()
    REAPER_NIHILO = auto()

    # Stage 7
    AXE_KNIGHT = auto()
    GOLDEN_AXE_KNIGHT = auto()
    GUNNER_KNIGHT = auto()
    GOLDEN_GUNNER_KNIGHT = auto()
    SPEAR_KNIGHT = auto()
    GOLDEN_SPEAR_KNIGHT = auto()
    SWORD_KNIGHT = auto()
    GOLDEN_SWORD_KNIGHT = auto()
    GOLDEN_HUANGLONG = auto()
    GOLDEN_LADON = auto()
    GOLDEN_EMPEROR = auto()

    # Stage 8
    FIRE_BULL = auto()
    FIRE_DRAGONSPAWN = auto()
    FIRE_LION = auto()
    FIRE_OGRE = auto()
    FIRE_SABRETOOTH = auto()
    FIRE_SALAMANDER = auto()
    FIRE_TURTLE = auto()
    VOLCANIC_MAIDEN = auto()
    FIRE_VULTURE = auto()
    FIRE_WISP = auto()
    NUCKELAVEE = auto()
    ILNOCT = auto()
    HELLHOUND_GARM = auto()


class StageName(Enum):
    """The stages in the order they are played; values are consecutive from 0."""

    GREEN_FOREST = 0
    DARK_FOREST = 1
    MAGIC_FOREST = 2
    CITY_ENTRANCE = 3
    FORGOTTEN_ROAD = 4
    HAUNTED_MARKETPLACE = 5
    GOLDEN_TEMPLE = 6
    INFERNO = 7


class ResourceName(Enum):
    """Fonts and textures that are not tied to a stage or an enemy."""

    RIGHTEOUS_FONT = auto()
    SKRANJI_FONT = auto()
    GREAT_VIBES_FONT = auto()
    PLAYER_TEXTURE = auto()
    COIN_TEXTURE_1 = auto()
    COIN_TEXTURE_2 = auto()
    COIN_TEXTURE_3 = auto()
    COIN_TEXTURE_4 = auto()
    COIN_TEXTURE_5 = auto()
    COIN_TEXTURE_6 = auto()
    COIN_TEXTURE_7 = auto()
    COIN_TEXTURE_8 = auto()
    COIN_TEXTURE_9 = auto()
    PIERCED_SKULL_TEXTURE = auto()


class StageLevelStatus(Enum):
    """Display state of a level square in the stage panel."""

    ACTIVE = 0
    COMPLETED = 1
    LOCKED = 2
    UNLOCKED = 3


_RANK_REQUIREMENTS: tuple[tuple[int, str], ...] = (
    (19, "Rogue"),
    (49, "Hunter"),
    (79, "Mercenary"),
    (99, "Fighter"),
    (119, "Soldier"),
    (149, "Assassin"),
    (179, "Champion"),
    (199, "Knight"),
    (229, "Templar"),
    (249, "Slayer"),
    (269, "Berserker"),
    (299, "Hero"),
    (_INT64_MAX, "Legend"),
)


@dataclass
class PlayerRank:
    """The player's rank title and the level thresholds that decide it."""

    name: str = ""
    requirements: tuple[tuple[int, str], ...] = _RANK_REQUIREMENTS

    def rank_for(self, level: int) -> str:
        """Return the title of the first threshold greater than ``level``."""
        for threshold, title in self.requirements:
            if threshold > level:
                return title
        return self.name