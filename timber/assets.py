"""Finding and loading the images, fonts and sounds each stage of the game needs."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

import pygame

from timber.game import Chapter

DEFAULT_ROOT = Path("..")


class _Kind(enum.Enum):
    TEXTURE = "texture"
    FONT = "font"
    SOUND = "sound"


@dataclass(frozen=True)
class _Spec:
    name: str
    kind: _Kind
    relative: str
    message: str
    required: bool = True


class AssetError(Exception):
    """An asset the game cannot run without could not be loaded."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


def _texture(name: str, relative: str, label: str, required: bool = True) -> _Spec:
    return _Spec(name, _Kind.TEXTURE, relative, f"Could not load {label}!", required)


_BACKGROUND_STAGE = (
    _texture("background", "graphics/background.jpg", "background image"),
)

_SCENE_STAGE = (
    _texture("background", "graphics/background.png", "background image"),
    _texture("tree", "graphics/tree.png", "tree image"),
    _texture("bee", "graphics/bee.png", "bee image"),
    _texture("cloud", "graphics/cloud.png", "cloud image"),
)

_BRANCHES_STAGE = _SCENE_STAGE + (
    _Spec("font", _Kind.FONT, "fonts/KOMIKAP_.ttf", "Could not load font!"),
    _texture("branch", "graphics/branch.png", "branch image"),
)


def _player_textures(required: bool) -> tuple[_Spec, ...]:
    return (
        _texture("player", "graphics/player.png", "player image", required),
        _texture("rip", "graphics/rip.png", "gravestone image", required),
        _texture("axe", "graphics/axe.png", "axe image", required),
        _texture("log", "graphics/log.png", "log image", required),
    )


_PLAYER_STAGE = _BRANCHES_STAGE + _player_textures(required=True)

# The full game loads the player's images without checking them.
_FULL_STAGE = (
    _BRANCHES_STAGE
    + _player_textures(required=False)
    + (
        _Spec("chop", _Kind.SOUND, "sound/chop.wav", "Could not load chop sound!"),
        _Spec("death", _Kind.SOUND, "sound/death.wav", "Could not load death sound!"),
        _Spec(
            "out_of_time",
            _Kind.SOUND,
            "sound/out_of_time.wav",
            "Could not load out of time sound!",
        ),
        _Spec(
            "fps_font",
            _Kind.FONT,
            "fonts/arial.ttf",
            "Failed to load font for FPS counter",
        ),
    )
)

_STAGES: dict[str, tuple[_Spec, ...]] = {
    "background": _BACKGROUND_STAGE,
    "scene": _SCENE_STAGE,
    Chapter.BRANCHES.value: _BRANCHES_STAGE,
    Chapter.PLAYER.value: _PLAYER_STAGE,
    Chapter.FULL.value: _FULL_STAGE,
}

ChapterLike = Union[Chapter, str]


def _specs(chapter: ChapterLike) -> tuple[_Spec, ...]:
    key = chapter.value if isinstance(chapter, Chapter) else str(chapter).lower()
    try:
        return _STAGES[key]
    except KeyError:
        known = ", ".join(_STAGES)
        raise ValueError(f"unknown chapter {chapter!r}; expected one of: {known}") from None


@dataclass
class Assets:
    """Everything loaded for one stage of the game.

    Textures are loaded surfaces; fonts and sounds are checked paths, to be
    opened at the size or on the mixer the caller wants. A texture that the
    stage loads without checking is simply absent when it failed to load.
    """

    root: Path
    textures: dict[str, pygame.Surface] = field(default_factory=dict)
    fonts: dict[str, Path] = field(default_factory=dict)
    sounds: dict[str, Path] = field(default_factory=dict)


def asset_paths(chapter: ChapterLike, root: Union[str, Path] = DEFAULT_ROOT) -> dict[str, Path]:
    """Paths of every asset ``chapter`` loads, by name, in loading order."""
    base = Path(root)
    return {spec.name: base / spec.relative for spec in _specs(chapter)}


def load_assets(chapter: ChapterLike, root: Union[str, Path] = DEFAULT_ROOT) -> Assets:
    """Load the assets of ``chapter``; raise AssetError at the first one missing."""
    base = Path(root)
    assets = Assets(root=base)
    for spec in _specs(chapter):
        path = base / spec.relative
        if spec.kind is _Kind.TEXTURE:
            try:
                assets.textures[spec.name] = pygame.image.load(str(path))
            except (pygame.error, OSError) as exc:
                if spec.required:
                    raise AssetError(spec.message, path) from exc
            continue
        if not path.is_file():
            raise AssetError(spec.message, path)
        target = assets.fonts if spec.kind is _Kind.FONT else assets.sounds
        target[spec.name] = path
    return assets