from pathlib import Path

import pygame
import pytest

from fantasia.enums import EnemyName, ResourceName, StageName
from fantasia.resources import Resources


def _save_image(path: Path, size: tuple[int, int]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    surface = pygame.Surface(size)
    surface.fill((10, 120, 30))
    pygame.image.save(surface, str(path))


@pytest.fixture
def resource_dir(tmp_path: Path) -> Path:
    _save_image(tmp_path / "img" / "background" / "green_forest.jpg", (1920, 1080))
    _save_image(tmp_path / "img" / "enemies" / "stage_1" / "fairy_filia.png", (40, 30))
    _save_image(
        tmp_path / "img" / "enemies" / "stage_8" / "fire_salamander.png", (12, 18)
    )
    _save_image(tmp_path / "img" / "money" / "money_1.png", (8, 9))
    _save_image(tmp_path / "img" / "player.png", (20, 25))
    return tmp_path


def test_enemy_names():
    resources = Resources("nonexistent-directory")
    assert resources.name(EnemyName.FAIRY_FILIA) == "Fairy Filia"
    assert resources.name(EnemyName.DAIDARABOTCHI) == "Daidarabotchi"
    assert resources.name(EnemyName.FIRE_SALAMANDER) == "Fire Salamander"
    assert resources.name(EnemyName.SON_OF_VALHALLA) == "Son of Valhalla"


def test_stage_names():
    resources = Resources("nonexistent-directory")
    assert resources.name(StageName.GREEN_FOREST) == "Green Forest"
    assert resources.name(StageName.HAUNTED_MARKETPLACE) == "Haunted Marketplace"
    assert resources.name(StageName.INFERNO) == "Inferno"


def test_every_enemy_and_stage_has_name():
    resources = Resources("nonexistent-directory")
    assert all(resources.name(enemy) for enemy in EnemyName)
    assert all(resources.name(stage) for stage in StageName)


def test_textures_loaded_with_their_sizes(resource_dir):
    resources = Resources(resource_dir)
    background = resources.texture(StageName.GREEN_FOREST)
    assert (background.width, background.height) == (1920, 1080)
    fairy = resources.texture(EnemyName.FAIRY_FILIA)
    assert (fairy.width, fairy.height) == (40, 30)
    salamander = resources.texture(EnemyName.FIRE_SALAMANDER)
    assert (salamander.width, salamander.height) == (12, 18)
    coin = resources.texture(ResourceName.COIN_TEXTURE_1)
    assert (coin.width, coin.height) == (8, 9)
    player = resources.texture(ResourceName.PLAYER_TEXTURE)
    assert (player.width, player.height) == (20, 25)


def test_smoothing_flags(resource_dir):
    resources = Resources(resource_dir)
    assert resources.texture(StageName.GREEN_FOREST).smooth is False
    assert resources.texture(EnemyName.FAIRY_FILIA).smooth is True
    assert resources.texture(ResourceName.PLAYER_TEXTURE).smooth is True


def test_missing_files_give_empty_textures(resource_dir):
    resources = Resources(resource_dir)
    dark = resources.texture(StageName.DARK_FOREST)
    assert (dark.width, dark.height) == (0, 0)
    assert dark.surface is None
    ogre = resources.texture(EnemyName.OGRE)
    assert (ogre.width, ogre.height) == (0, 0)


def test_every_key_has_a_texture():
    resources = Resources("nonexistent-directory")
    for stage in StageName:
        assert resources.texture(stage).width == 0
    for enemy in EnemyName:
        assert resources.texture(enemy).height == 0


def test_font_families():
    resources = Resources("nonexistent-directory")
    assert resources.font(ResourceName.GREAT_VIBES_FONT).family == "Great Vibes"
    assert resources.font(ResourceName.RIGHTEOUS_FONT).family == "Righteous"
    assert resources.font(ResourceName.SKRANJI_FONT).family == "Skranji"


def test_missing_font_falls_back_to_builtin():
    resources = Resources("nonexistent-directory")
    assert resources.font(ResourceName.RIGHTEOUS_FONT).path is None


def test_font_for_texture_key_raises():
    resources = Resources("nonexistent-directory")
    with pytest.raises(KeyError):
        resources.font(ResourceName.PLAYER_TEXTURE)


def test_texture_for_font_key_raises():
    resources = Resources("nonexistent-directory")
    with pytest.raises(KeyError):
        resources.texture(ResourceName.RIGHTEOUS_FONT)


def test_wrong_key_types_raise():
    resources = Resources("nonexistent-directory")
    with pytest.raises(TypeError):
        resources.name(ResourceName.PLAYER_TEXTURE)
    with pytest.raises(TypeError):
        resources.texture("player")
    with pytest.raises(TypeError):
        resources.font(StageName.INFERNO)