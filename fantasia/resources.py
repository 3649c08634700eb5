"""Loading and lookup of the game's textures, fonts and display names."""

from __future__ import annotations

from pathlib import Path

import pygame

from fantasia.enums import EnemyName as E
from fantasia.enums import ResourceName as R
from fantasia.enums import StageName as S
from fantasia.shapes import Font, Texture

DEFAULT_RESOURCES_PATH = Path("../res")

_FONT_FILES: dict[R, tuple[str, str]] = {
    R.SKRANJI_FONT: ("skranji_regular.ttf", "Skranji"),
    R.RIGHTEOUS_FONT: ("odibee_sans_regular.ttf", "Righteous"),
    R.GREAT_VIBES_FONT: ("great_vibes.ttf", "Great Vibes"),
}

_OTHER_TEXTURE_FILES: dict[R, str] = {
    R.PIERCED_SKULL_TEXTURE: "img/pierced_skull.png",
    R.PLAYER_TEXTURE: "img/player.png",
    **{
        R[f"COIN_TEXTURE_{i}"]: f"img/money/money_{i}.png"
        for i in range(1, 10)
    },
}

_ENEMIES_BY_STAGE: tuple[tuple[E, ...], ...] = (
    (E.FAIRY_FILIA, E.GRASSHOPPER, E.GREEN_SPIDER, E.IMPERIAL_WIDOW, E.MOTHY,
     E.SHROOMY, E.SPORA, E.RUKKHA, E.DAIDARABOTCHI, E.TELLIA),
    (E.DARK_ANGEL, E.REAPER, E.BANSHEE, E.IMP, E.GHAUL, E.SEEKER, E.SUCCUBUS,
     E.OGRE, E.BLOOD_FERAL, E.DARK_QUEEN_YOA, E.KNIGHT_REMMENT),
    (E.EARTH_BULL, E.BUSH_WISP, E.LEAF_IMP, E.EARTH_LION, E.MANDRAKE,
     E.ROCK_GOLEM, E.EARTH_SNAKE, E.EARTH_SPAWN, E.EARTH_TURTLE, E.EARTH_WISP,
     E.QUEEN_RAFFLESIA, E.QUEEN_YGGDRASIL, E.GEMSTONE_GOLEM),
    (E.GOBLIN_ARCHER, E.GOBLIN_ELITE, E.GOBLIN_GRUNT, E.GOBLIN_MAGE,
     E.GOBLIN_RAIDER, E.ROGUE_SWORDMAN, E.ROGUE_MONK, E.ROGUE_ASSASSIN,
     E.BONEMASK, E.THE_FALLEN, E.ANCIENT_AUTOMATON),
    (E.ELF_ARCHER, E.ELF_ASSASSIN, E.CROSSBOW_ELF, E.DUAL_SWORD_ELF,
     E.ELF_MAGE, E.SPEAR_ELF, E.SWORD_ELF, E.NATURE_LINKER, E.ROGUE_ELF,
     E.SPELLCASTER, E.CELESTIAL_BEATRIX, E.ALFADRIEL, E.SON_OF_VALHALLA),
    (E.GAZERS_EYEWING, E.GAZERS_SKULL, E.TENTEYE, E.GHOSTUS,
     E.KNIGHT_DESTRAND, E.KNIGHT_GALPHA, E.KNIGHT_GOLIATH,
     E.GHOST_PUPPET_PAILO, E.GHOST_REVELATOR, E.ASTRAL_LICH, E.ELDRITCH_GOD,
     E.REAPER_NIHILO),
    (E.AXE_KNIGHT, E.GOLDEN_AXE_KNIGHT, E.GUNNER_KNIGHT,
     E.GOLDEN_GUNNER_KNIGHT, E.SPEAR_KNIGHT, E.GOLDEN_SPEAR_KNIGHT,
     E.SWORD_KNIGHT, E.GOLDEN_SWORD_KNIGHT, E.GOLDEN_HUANGLONG,
     E.GOLDEN_LADON, E.GOLDEN_EMPEROR),
    (E.FIRE_BULL, E.FIRE_DRAGONSPAWN, E.FIRE_LION, E.FIRE_OGRE,
     E.FIRE_SABRETOOTH, E.FIRE_SALAMANDER, E.FIRE_TURTLE, E.VOLCANIC_MAIDEN,
     E.FIRE_VULTURE, E.FIRE_WISP, E.NUCKELAVEE, E.ILNOCT, E.HELLHOUND_GARM),
)

_ENEMY_NAMES: dict[E, str] = {
    E.FAIRY_FILIA: "Fairy Filia",
    E.GRASSHOPPER: "Grasshopper",
    E.GREEN_SPIDER: "Green Spider",
    E.IMPERIAL_WIDOW: "Imperial Widow",
    E.MOTHY: "Mothy",
    E.SHROOMY: "Shroomy",
    E.SPORA: "Spora",
    E.RUKKHA: "Rukkha",
    E.DAIDARABOTCHI: "Daidarabotchi",
    E.TELLIA: "Tellia",
    E.DARK_ANGEL: "Dark Angel",
    E.REAPER: "Reaper",
    E.BANSHEE: "Banshee",
    E.IMP: "Imp",
    E.GHAUL: "Ghaul",
    E.SEEKER: "Seeker",
    E.SUCCUBUS: "Succubus",
    E.OGRE: "Ogre",
    E.BLOOD_FERAL: "Blood Feral",
    E.DARK_QUEEN_YOA: "Dark Queen Yoa",
    E.KNIGHT_REMMENT: "Fairy Filia",
    E.EARTH_BULL: "Earth Bull",
    E.BUSH_WISP: "Bush Wisp",
    E.LEAF_IMP: "Leaf Imp",
    E.EARTH_LION: "Earth Lion",
    E.MANDRAKE: "Mandrake",
    E.ROCK_GOLEM: "Rock Golem",
    E.EARTH_SNAKE: "Earth Snake",
    E.EARTH_SPAWN: "Earth Spawn",
    E.EARTH_TURTLE: "Earth Turtle",
    E.EARTH_WISP: "Earth Wisp",
    E.QUEEN_RAFFLESIA: "Queen Rafflesia",
    E.QUEEN_YGGDRASIL: "Queen Yggdrasil",
    E.GEMSTONE_GOLEM: "Gemstone Golem",
    E.GOBLIN_ARCHER: "Goblin Archer",
    E.GOBLIN_ELITE: "Goblin Elite",
    E.GOBLIN_GRUNT: "Goblin Grunt",
    E.GOBLIN_MAGE: "Goblin Mage",
    E.GOBLIN_RAIDER: "Goblin Raider",
    E.ROGUE_SWORDMAN: "Rogue Swordman",
    E.ROGUE_MONK: "Rogue Monk",
    E.ROGUE_ASSASSIN: "Rogue Assassin",
    E.BONEMASK: "Bonemask",
    E.THE_FALLEN: "The Fallen",
    E.ANCIENT_AUTOMATON: "Ancient Automaton",
    E.ELF_ARCHER: "Elf Archer",
    E.ELF_ASSASSIN: "Elf Assassin",
    E.CROSSBOW_ELF: "Crossbow Elf",
    E.DUAL_SWORD_ELF: "Dual Sword Elf",
    E.ELF_MAGE: "Elf Mage",
    E.SPEAR_ELF: "Spear Elf",
    E.SWORD_ELF: "Sword Elf",
    E.NATURE_LINKER: "Nature Linker",
    E.ROGUE_ELF: "Rogue Elf",
    E.SPELLCASTER: "Spellcaster",
    E.CELESTIAL_BEATRIX: "Celestial Beatrix",
    E.ALFADRIEL: "Alfadriel",
    E.SON_OF_VALHALLA: "Son of Valhalla",
    E.GAZERS_EYEWING: "Gazers Eyewing",
    E.GAZERS_SKULL: "Gazers Skull",
    E.TENTEYE: "Tenteye",
    E.GHOSTUS: "Ghostus",
    E.KNIGHT_DESTRAND: "Knight Destrand",
    E.KNIGHT_GALPHA: "Knight Galpha",
    E.KNIGHT_GOLIATH: "Knight Goliath",
    E.GHOST_PUPPET_PAILO: "Ghost Puppet Pailo",
    E.GHOST_REVELATOR: "Ghost Revelator",
    E.ASTRAL_LICH: "Astral Lich",
    E.ELDRITCH_GOD: "Eldritch God",
    E.REAPER_NIHILO: "Reaper Nihilo",
    E.AXE_KNIGHT: "Axe Knight",
    E.GOLDEN_AXE_KNIGHT: "Golden Axe Knight",
    E.GUNNER_KNIGHT: "Gunner Knight",
    E.GOLDEN_GUNNER_KNIGHT: "Golden Gunner Knight",
    E.SPEAR_KNIGHT: "Spear Knight",
    E.GOLDEN_SPEAR_KNIGHT: "Golden Spear Knight",
    E.SWORD_KNIGHT: "Sword Knight",
    E.GOLDEN_SWORD_KNIGHT: "Golden Sword Knight",
    E.GOLDEN_HUANGLONG: "Golden Huanglong",
    E.GOLDEN_LADON: "GOlden Ladon",
    E.GOLDEN_EMPEROR: "Golden Emperor",
    E.FIRE_BULL: "Fire Bull",
    E.FIRE_DRAGONSPAWN: "Fire Dragonspawn",
    E.FIRE_LION: "Fire Lion",
    E.FIRE_OGRE: "Fire Ogre",
    E.FIRE_SABRETOOTH: "Fire Sabretooth",
    E.FIRE_SALAMANDER: "Fire Salamander",
    E.FIRE_TURTLE: "Fire Turtle",
    E.VOLCANIC_MAIDEN: "Volcanic Maiden",
    E.FIRE_VULTURE: "Fire Vulture",
    E.FIRE_WISP: "Fire Wisp",
    E.NUCKELAVEE: "Nuckelavee",
    E.ILNOCT: "Ilnoct",
    E.HELLHOUND_GARM: "Hellhound Garm",
}

_STAGE_NAMES: dict[S, str] = {
    S.GREEN_FOREST: "Green Forest",
    S.DARK_FOREST: "Dark Forest",
    S.MAGIC_FOREST: "Magic Forest",
    S.CITY_ENTRANCE: "City Entrance",
    S.FORGOTTEN_ROAD: "Forgotten Road",
    S.HAUNTED_MARKETPLACE: "Haunted Marketplace",
    S.GOLDEN_TEMPLE: "Golden Temple",
    S.INFERNO: "Inferno",
}


def _load_texture(path: Path, smooth: bool) -> Texture:
    """Load an image; a missing or unreadable file gives an empty texture."""
    try:
        surface = pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError, OSError):
        return Texture(0, 0, smooth=smooth)
    width, height = surface.get_size()
    return Texture(width, height, smooth=smooth, surface=surface)


class Resources:
    """All fonts, textures and display names, loaded once from a directory."""

    def __init__(self, resources_path: str | Path = DEFAULT_RESOURCES_PATH) -> None:
        self.resources_path = Path(resources_path)
        base = self.resources_path

        self._fonts: dict[R, Font] = {}
        for key, (file_name, family) in _FONT_FILES.items():
            path = base / "font" / file_name
            self._fonts[key] = Font(family, str(path) if path.is_file() else None)

        self._background_textures: dict[S, Texture] = {
            stage: _load_texture(
                base / "img" / "background" / f"{stage.name.lower()}.jpg", False
            )
            for stage in S
        }

        self._enemy_textures: dict[E, Texture] = {
            enemy: _load_texture(
                base / "img" / "enemies" / f"stage_{number}" / f"{enemy.name.lower()}.png",
                True,
            )
            for number, enemies in enumerate(_ENEMIES_BY_STAGE, start=1)
            for enemy in enemies
        }

        self._other_textures: dict[R, Texture] = {
            key: _load_texture(base / file_name, True)
            for key, file_name in _OTHER_TEXTURE_FILES.items()
        }

        self._enemy_names = dict(_ENEMY_NAMES)
        self._stage_names = dict(_STAGE_NAMES)

    def texture(self, key: S | E | R) -> Texture:
        """Return the texture for a stage background, an enemy or another resource."""
        if isinstance(key, S):
            return self._background_textures[key]
        if isinstance(key, E):
            return self._enemy_textures[key]
        if isinstance(key, R):
            return self._other_textures[key]
        raise TypeError(f"no texture is keyed by {type(key).__name__}")

    def font(self, key: R) -> Font:
        """Return the font registered under ``key``."""
        if not isinstance(key, R):
            raise TypeError(f"no font is keyed by {type(key).__name__}")
        return self._fonts[key]

    def name(self, key: E | S) -> str:
        """Return the display name of an enemy or a stage."""
        if isinstance(key, E):
            return self._enemy_names[key]
        if isinstance(key, S):
            return self._stage_names[key]
        raise TypeError(f"no name is keyed by {type(key).__name__}")