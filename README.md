# timber

A small full-screen arcade game built on pygame. A lumberjack stands beside
a tree. You chop from the left or the right to send logs flying and to earn
points, and each chop adds a little time to the clock. Branches keep coming
down the trunk. If one reaches the bottom on your side, you are squished. A
bee and some clouds drift across the sky behind the tree.

## Installing

```
pip install .
```

## Playing

```
timber
timber --chapter full --root path/to/assets
timber --help
```

The window opens full screen at 1920x1080 with the title "Timber!!!".

### Options

- `--chapter` picks how much of the game runs. The default is `full`.
  - `background`: only the background picture.
  - `scene`: the background and tree, with a bee and three clouds moving.
  - `branches`: adds the timer bar, the score and the branches. In this
    chapter the score goes up by one every frame.
  - `player`: adds the player, the axe, the gravestone and chopping. There
    is no key-release step here, so only the first chop is taken.
  - `full`: the whole game. Adds squishing, the flying log, sounds, six
    clouds and a frame-rate counter.
- `--root` is the directory that holds `graphics/`, `fonts/` and `sound/`.
  The default is `..`.

### Asset files

The package ships no images, fonts or sounds. Each chapter reads these
files from `--root`:

| Chapter      | Files                                                                          |
|--------------|--------------------------------------------------------------------------------|
| `background` | `graphics/background.jpg`                                                      |
| `scene`      | `graphics/background.png`, `tree.png`, `bee.png`, `cloud.png`                  |
| `branches`   | the `scene` files, plus `fonts/KOMIKAP_.ttf` and `graphics/branch.png`         |
| `player`     | the `branches` files, plus `graphics/player.png`, `rip.png`, `axe.png`, `log.png` |
| `full`       | the `player` files, plus `sound/chop.wav`, `death.wav`, `out_of_time.wav` and `fonts/arial.ttf` |

In the `full` chapter the four player images are optional. If one of them
is missing, it is not drawn. Any other missing file makes `timber` print
`Error: ...` on standard error and exit with status 1, and no window is
opened.

Startup prints some diagnostic lines on standard output: texture sizes, the
font path, and the start text with its position and size.

### Controls

| Key         | Action                                                   |
|-------------|----------------------------------------------------------|
| Enter       | Pause or resume. In `full`, resuming starts a new round. |
| Left arrow  | Chop from the left                                       |
| Right arrow | Chop from the right                                      |
| Escape      | Quit                                                     |

In the full game you must release the key between chops. Releasing a key
also hides the axe. The red bar at the bottom shows the time that is left.
When it runs out, the game pauses, the score goes back to zero and
"Out of time!! Press Enter to restart." appears.

## Using it as a library

You can drive the game rules from code without a window:

- `timber.game.TimberGame(chapter)` holds one game. It has the methods
  `toggle_pause()`, `chop(side)`, `release_key()`, `update(dt)`,
  `time_bar_width()` and `score_text()`.
  - `chop` returns whether the chop was taken. It raises `ValueError` for
    `Side.NONE`.
  - The sounds the game asks for are collected in `game.sounds` as
    `timber.game.Sound` members.
- `timber.game.Chapter` has the members `BRANCHES`, `PLAYER` and `FULL`.
- `timber.branches.BranchColumn` has `update(seed, rng_factory)`, `clear()`
  and `placements()`. The module also has `Side`, `side_for_roll(roll)` and
  `branch_placement(side, index)`.
- `timber.actors.Bee` and `timber.actors.Cloud` are the background actors.
  Each has an `update` method that takes a time step and an optional source
  of random numbers.
- `timber.flight.Log` has `launch(speed_x)` and `update(dt)`.
  `timber.flight.FpsCounter` has `tick(dt)`, which returns text such as
  `"FPS: 60.00"` once at least a second has passed.
- `timber.assets.asset_paths(chapter, root)` lists the files a chapter
  reads. `timber.assets.load_assets(chapter, root)` loads them and raises
  `timber.assets.AssetError` for the first required file that is missing.
- `timber.app.run(chapter, root)` opens the window and plays.
  `timber.app.main(argv)` is the `timber` command.

## What it does not do

There are no high scores and no saved settings, and nothing persists
between runs. The screen size is fixed, and the window always opens full
screen. The assets must be supplied separately.

## Tests

```
pip install .[test]
pytest
```