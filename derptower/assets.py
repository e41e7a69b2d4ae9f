"""Loading of the images and sounds the game uses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

import pygame

PathLike = Union[str, Path]

CHICKEN_RUN_FILES = (
    "monsters/chicken/chicken_run1.png",
    "monsters/chicken/chicken_run2.png",
)
COOL_CHICKEN_FILE = "monsters/cool_chicken/cool_chicken.png"
MONSTER_HURT_FILE = "monsters/chicken_hurt.ogg"
TOWER_FILE = "tower2.png"
TOWER_NINJA_FILE = "tower_ninja.png"
TOWER_ATTACK_SOUND_FILE = "tower_attack_pop.ogg"
GOLD_FILE = "gold_pile.png"
GOLD_SOUND_FILE = "gold.ogg"
BASE_FILE = "base.png"
UI_TOWER_FILE = "ui/tower.png"
UI_TOWER_SELECTED_FILE = "ui/tower_selected.png"
UI_NINJA_TOWER_FILE = "ui/ninja_tower.png"
UI_NINJA_TOWER_SELECTED_FILE = "ui/ninja_tower_selected.png"

REQUIRED_FILES = (
    *CHICKEN_RUN_FILES,
    COOL_CHICKEN_FILE,
    MONSTER_HURT_FILE,
    TOWER_FILE,
    TOWER_NINJA_FILE,
    TOWER_ATTACK_SOUND_FILE,
    GOLD_FILE,
    GOLD_SOUND_FILE,
    BASE_FILE,
    UI_TOWER_FILE,
    UI_TOWER_SELECTED_FILE,
    UI_NINJA_TOWER_FILE,
    UI_NINJA_TOWER_SELECTED_FILE,
)


@dataclass
class SoundEffect:
    """A sound file, decoded on first play.

    Playing is silent when no audio device can be opened.
    """

    path: Path
    _sound: Optional[pygame.mixer.Sound] = field(
        default=None, init=False, repr=False, compare=False
    )

    def play(self) -> None:
        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error:
                return
        if self._sound is None:
            self._sound = pygame.mixer.Sound(str(self.path))
        self._sound.play()


def _resolve(resource_dir: PathLike, name: str) -> Path:
    path = Path(resource_dir) / name
    if not path.is_file():
        raise FileNotFoundError(f"missing resource: {path}")
    return path


def _image(resource_dir: PathLike, name: str) -> pygame.Surface:
    return pygame.image.load(str(_resolve(resource_dir, name)))


def _sound(resource_dir: PathLike, name: str) -> SoundEffect:
    return SoundEffect(_resolve(resource_dir, name))


@dataclass
class ChickenAssets:
    walking_sprites: list[pygame.Surface]


@dataclass
class MonsterAssets:
    chicken_assets: ChickenAssets
    cool_chicken_sprite: pygame.Surface
    monster_hurt_sound: SoundEffect


@dataclass
class TowerAssets:
    tower_sprite: pygame.Surface
    tower_ninja_sprite: pygame.Surface
    tower_attack_sound: SoundEffect
    ninja_tower_strong_attack_sound: SoundEffect


@dataclass
class ItemAssets:
    gold_sprite: pygame.Surface
    gold_sound: SoundEffect


@dataclass
class BaseAssets:
    base_sprite: pygame.Surface


@dataclass
class BuilderUIAssets:
    tower_sprite: pygame.Surface
    tower_selected_sprite: pygame.Surface
    ninja_tower_sprite: pygame.Surface
    ninja_tower_selected_sprite: pygame.Surface


@dataclass
class AssetManager:
    tower_assets: TowerAssets
    monster_assets: MonsterAssets
    item_assets: ItemAssets
    base_assets: BaseAssets
    builder_ui_assets: BuilderUIAssets


def load_monster_assets(resource_dir: PathLike) -> MonsterAssets:
    """Load the monster sprites and sounds from a resource directory."""
    return MonsterAssets(
        chicken_assets=ChickenAssets(
            walking_sprites=[_image(resource_dir, name) for name in CHICKEN_RUN_FILES]
        ),
        cool_chicken_sprite=_image(resource_dir, COOL_CHICKEN_FILE),
        monster_hurt_sound=_sound(resource_dir, MONSTER_HURT_FILE),
    )


def load_assets(resource_dir: PathLike) -> AssetManager:
    """Load every asset the game needs from a resource directory."""
    tower_assets = TowerAssets(
        tower_sprite=_image(resource_dir, TOWER_FILE),
        tower_ninja_sprite=_image(resource_dir, TOWER_NINJA_FILE),
        tower_attack_sound=_sound(resource_dir, TOWER_ATTACK_SOUND_FILE),
        ninja_tower_strong_attack_sound=_sound(resource_dir, TOWER_ATTACK_SOUND_FILE),
    )
    item_assets = ItemAssets(
        gold_sprite=_image(resource_dir, GOLD_FILE),
        gold_sound=_sound(resource_dir, GOLD_SOUND_FILE),
    )
    base_assets = BaseAssets(base_sprite=_image(resource_dir, BASE_FILE))
    builder_ui_assets = BuilderUIAssets(
        tower_sprite=_image(resource_dir, UI_TOWER_FILE),
        tower_selected_sprite=_image(resource_dir, UI_TOWER_SELECTED_FILE),
        ninja_tower_sprite=_image(resource_dir, UI_NINJA_TOWER_FILE),
        ninja_tower_selected_sprite=_image(resource_dir, UI_NINJA_TOWER_SELECTED_FILE),
    )
    return AssetManager(
        tower_assets=tower_assets,
        monster_assets=load_monster_assets(resource_dir),
        item_assets=item_assets,
        base_assets=base_assets,
        builder_ui_assets=builder_ui_assets,
    )