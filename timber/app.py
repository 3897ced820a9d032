"""Command line entry point: open the window and run a stage of the game."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

from timber.actors import Bee, Cloud
from timber.assets import DEFAULT_ROOT, AssetError, Assets, asset_paths, load_assets
from timber.branches import BranchPlacement, Side
from timber.game import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TIME_BAR_HEIGHT,
    TIME_BAR_POSITION,
    Chapter,
    Sound,
    TimberGame,
)

TITLE = "Timber!!!"
STAGES = ("background", "scene") + tuple(chapter.value for chapter in Chapter)
DEFAULT_STAGE = Chapter.FULL.value

TREE_POSITION = (810.0, 0.0)
BRANCH_ORIGIN = (220.0, 20.0)
SCORE_POSITION = (20, 20)
FPS_POSITION = (10, 10)
MESSAGE_SIZE = 75
SCORE_SIZE = 100
FPS_SIZE = 20

WHITE = (255, 255, 255)
RED = (255, 0, 0)
BLACK = (0, 0, 0)

# (start x, seed factor, initial y) of the clouds in the moving scene.
_SCENE_CLOUDS = ((-200.0, 10, 0.0), (-150.0, 20, 250.0), (-200.0, 30, 500.0))

StageLike = Union[Chapter, str]


def build_parser() -> argparse.ArgumentParser:
    """The command line parser."""
    parser = argparse.ArgumentParser(prog="timber", description="Chop the tree, dodge the branches.")
    parser.add_argument(
        "--chapter",
        choices=STAGES,
        default=DEFAULT_STAGE,
        help="how much of the game to run (default: %(default)s)",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=DEFAULT_ROOT,
        help="directory holding graphics/, fonts/ and sound/ (default: %(default)s)",
    )
    return parser


def _stage_name(chapter: StageLike) -> str:
    return chapter.value if isinstance(chapter, Chapter) else str(chapter).lower()


def _size(surface: pygame.Surface) -> str:
    width, height = surface.get_size()
    return f"{width}x{height}"


def _quit_requested(event: pygame.event.Event) -> bool:
    return event.type == pygame.QUIT or (
        event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
    )


def _blit_branch(screen: pygame.Surface, image: pygame.Surface, placement: BranchPlacement) -> None:
    """Draw a branch rotated about its origin point, placed at its position."""
    rotation = placement.rotation or 0.0
    width, height = image.get_size()
    to_center = pygame.math.Vector2(width / 2 - BRANCH_ORIGIN[0], height / 2 - BRANCH_ORIGIN[1])
    center = pygame.math.Vector2(placement.x, placement.y) + to_center.rotate(rotation)
    rotated = pygame.transform.rotate(image, -rotation)
    screen.blit(rotated, rotated.get_rect(center=(round(center.x), round(center.y))))


def _load_sounds(assets: Assets) -> dict[Sound, pygame.mixer.Sound]:
    if not assets.sounds:
        return {}
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        return {Sound(name): pygame.mixer.Sound(str(path)) for name, path in assets.sounds.items()}
    except pygame.error:
        return {}


def _run_scene(screen: pygame.Surface, assets: Assets, moving: bool) -> None:
    """The scenery stages: the background, or the tree with bee and clouds."""
    textures = assets.textures
    for name in ("tree", "bee"):
        if name in textures:
            label = "Tree texture size" if name == "tree" else "The bee size"
            print(f"{label}: {_size(textures[name])}")

    bee = Bee()
    clouds = [Cloud(start_x=start, seed_factor=factor, x=0.0, y=y) for start, factor, y in _SCENE_CLOUDS]
    clock = pygame.time.Clock()
    running = True
    while running:
        for event in pygame.event.get():
            if _quit_requested(event):
                running = False
        dt = clock.tick() / 1000.0
        if moving:
            bee.update(dt)
            for cloud in clouds:
                cloud.update(dt)

        screen.fill(BLACK)
        screen.blit(textures["background"], (0, 0))
        if "tree" in textures:
            screen.blit(textures["tree"], TREE_POSITION)
            screen.blit(textures["bee"], bee.position)
            for cloud in clouds:
                screen.blit(textures["cloud"], cloud.position)
        pygame.display.flip()


def _run_game(screen: pygame.Surface, chapter: Chapter, assets: Assets) -> None:
    """The playable stages: timer, score, branches and, later, the player."""
    textures = assets.textures
    print(f"Screen size: {SCREEN_WIDTH}x{SCREEN_HEIGHT}")
    for name, label in (
        ("background", "Background texture size"),
        ("tree", "Tree texture size"),
        ("bee", "The bee size"),
        ("cloud", "Cloud texture size"),
    ):
        print(f"{label}: {_size(textures[name])}")
    print(f"Font file path: {assets.fonts['font']}")

    message_font = pygame.font.Font(str(assets.fonts["font"]), MESSAGE_SIZE)
    score_font = pygame.font.Font(str(assets.fonts["font"]), SCORE_SIZE)
    fps_font = (
        pygame.font.Font(str(assets.fonts["fps_font"]), FPS_SIZE) if "fps_font" in assets.fonts else None
    )
    sounds = _load_sounds(assets)

    game = TimberGame(chapter)
    center = (SCREEN_WIDTH / 2.0, SCREEN_HEIGHT / 2.0)
    print(f"Message text: {game.message}")
    print(f"Message text position: ({center[0]:g}, {center[1]:g})")
    print(f"Message text size: {MESSAGE_SIZE}")
    print(f"Score text: {game.score_text()}")
    print(f"Score text position: ({SCORE_POSITION[0]}, {SCORE_POSITION[1]})")
    print(f"Score text size: {SCORE_SIZE}")

    clock = pygame.time.Clock()
    running = True
    while running:
        for event in pygame.event.get():
            if _quit_requested(event):
                running = False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
                game.toggle_pause()
            if event.type == pygame.KEYUP:
                game.release_key()

        dt = clock.tick() / 1000.0
        if not game.paused:
            pressed = pygame.key.get_pressed()
            if pressed[pygame.K_RIGHT]:
                game.chop(Side.RIGHT)
            if pressed[pygame.K_LEFT]:
                game.chop(Side.LEFT)
        game.update(dt)

        for sound in game.sounds:
            if sound in sounds:
                sounds[sound].play()
        game.sounds.clear()

        screen.fill(BLACK)
        screen.blit(textures["background"], (0, 0))
        screen.blit(textures["tree"], TREE_POSITION)
        screen.blit(textures["bee"], game.bee.position)
        for cloud in game.clouds:
            screen.blit(textures["cloud"], cloud.position)

        bar_width = max(0, round(game.time_bar_width()))
        bar = pygame.Rect(round(TIME_BAR_POSITION[0]), round(TIME_BAR_POSITION[1]), bar_width, round(TIME_BAR_HEIGHT))
        pygame.draw.rect(screen, RED, bar)

        screen.blit(score_font.render(game.score_text(), True, WHITE), SCORE_POSITION)
        if game.paused:
            message = message_font.render(game.message, True, WHITE)
            screen.blit(message, message.get_rect(center=center))

        for placement in game.branch_sprites:
            _blit_branch(screen, textures["branch"], placement)

        if chapter.has_player:
            for name, position in (
                ("player", game.player_position),
                ("axe", game.axe_position),
                ("log", game.log.position),
                ("rip", game.rip_position),
            ):
                if name in textures:
                    screen.blit(textures[name], position)

        if fps_font is not None and game.fps.text:
            screen.blit(fps_font.render(game.fps.text, True, WHITE), FPS_POSITION)

        pygame.display.flip()


def run(chapter: StageLike = DEFAULT_STAGE, root: Union[str, Path] = DEFAULT_ROOT) -> None:
    """Load the stage's assets, open a full-screen window and play until closed.

    Raises AssetError when a required asset cannot be loaded and ValueError
    for an unknown stage; nothing is opened in either case.
    """
    assets = load_assets(chapter, root)
    stage = _stage_name(chapter)
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.FULLSCREEN)
        pygame.display.set_caption(TITLE)
        if stage in {member.value for member in Chapter}:
            _run_game(screen, Chapter(stage), assets)
        else:
            _run_scene(screen, assets, moving=stage == "scene")
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game from the command line; return the exit status."""
    args = build_parser().parse_args(argv)
    try:
        run(args.chapter, args.root)
    except AssetError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    return 0


__all__ = ["asset_paths", "build_parser", "main", "run"]