from pathlib import Path

import pygame
import pytest

from timber.assets import AssetError, asset_paths, load_assets
from timber.game import Chapter


def _save_image(path: Path, size=(4, 3)) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    pygame.image.save(pygame.Surface(size), str(path))


def _write(path: Path, data: bytes = b"data") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


def _scene(root: Path) -> dict[str, tuple[int, int]]:
    sizes = {"background": (8, 6), "tree": (3, 9), "bee": (2, 2), "cloud": (5, 1)}
    for name, size in sizes.items():
        _save_image(root / "graphics" / f"{name}.png", size)
    return sizes


def test_background_stage_uses_jpg(tmp_path):
    paths = asset_paths("background", tmp_path)
    assert paths == {"background": tmp_path / "graphics" / "background.jpg"}


def test_full_stage_paths_and_order(tmp_path):
    paths = asset_paths(Chapter.FULL, tmp_path)
    relative = [p.relative_to(tmp_path).as_posix() for p in paths.values()]
    assert relative[0] == "graphics/background.png"
    assert relative[-1] == "fonts/arial.ttf"
    assert "fonts/KOMIKAP_.ttf" in relative
    assert "sound/out_of_time.wav" in relative
    assert relative.index("sound/chop.wav") < relative.index("sound/death.wav")


def test_branches_stage_is_prefix_of_later_stages(tmp_path):
    branches = list(asset_paths(Chapter.BRANCHES, tmp_path).items())
    for later in (Chapter.PLAYER, Chapter.FULL):
        assert list(asset_paths(later, tmp_path).items())[: len(branches)] == branches


def test_player_stage_has_no_sounds(tmp_path):
    relative = [p.relative_to(tmp_path).as_posix() for p in asset_paths(Chapter.PLAYER, tmp_path).values()]
    assert "graphics/log.png" in relative
    assert not any(r.startswith("sound/") for r in relative)


def test_string_chapter_matches_enum(tmp_path):
    assert asset_paths("FULL", tmp_path) == asset_paths(Chapter.FULL, tmp_path)


def test_unknown_chapter_raises(tmp_path):
    with pytest.raises(ValueError):
        asset_paths("nonexistent", tmp_path)


def test_load_scene_textures(tmp_path):
    sizes = _scene(tmp_path)
    assets = load_assets("scene", tmp_path)
    assert {name: s.get_size() for name, s in assets.textures.items()} == sizes
    assert assets.fonts == {}
    assert assets.sounds == {}


def test_missing_tree_is_reported(tmp_path):
    _scene(tmp_path)
    (tmp_path / "graphics" / "tree.png").unlink()
    with pytest.raises(AssetError, match="tree image") as info:
        load_assets("scene", tmp_path)
    assert info.value.path == tmp_path / "graphics" / "tree.png"


def test_first_missing_asset_is_reported(tmp_path):
    with pytest.raises(AssetError, match="background image"):
        load_assets(Chapter.FULL, tmp_path)


def test_corrupt_image_raises(tmp_path):
    _scene(tmp_path)
    _write(tmp_path / "graphics" / "bee.png", b"not an image")
    with pytest.raises(AssetError, match="bee image"):
        load_assets("scene", tmp_path)


def test_missing_font_raises(tmp_path):
    _scene(tmp_path)
    _save_image(tmp_path / "graphics" / "branch.png")
    with pytest.raises(AssetError) as info:
        load_assets(Chapter.BRANCHES, tmp_path)
    assert info.value.path == tmp_path / "fonts" / "KOMIKAP_.ttf"


def test_player_stage_requires_player_image(tmp_path):
    _scene(tmp_path)
    _save_image(tmp_path / "graphics" / "branch.png")
    _write(tmp_path / "fonts" / "KOMIKAP_.ttf")
    with pytest.raises(AssetError, match="player image"):
        load_assets(Chapter.PLAYER, tmp_path)


def test_full_stage_tolerates_missing_player_images(tmp_path):
    _scene(tmp_path)
    _save_image(tmp_path / "graphics" / "branch.png")
    _write(tmp_path / "fonts" / "KOMIKAP_.ttf")
    _write(tmp_path / "fonts" / "arial.ttf")
    for name in ("chop", "death", "out_of_time"):
        _write(tmp_path / "sound" / f"{name}.wav")
    assets = load_assets(Chapter.FULL, tmp_path)
    assert "player" not in assets.textures
    assert "branch" in assets.textures
    assert assets.sounds["death"] == tmp_path / "sound" / "death.wav"
    assert assets.fonts["fps_font"] == tmp_path / "fonts" / "arial.ttf"


def test_full_stage_missing_sound_raises(tmp_path):
    _scene(tmp_path)
    _save_image(tmp_path / "graphics" / "branch.png")
    _write(tmp_path / "fonts" / "KOMIKAP_.ttf")
    _write(tmp_path / "sound" / "chop.wav")
    with pytest.raises(AssetError, match="death sound"):
        load_assets(Chapter.FULL, tmp_path)