# derptower

A small real-time tower defence game built on pygame. Chickens walk along a
winding path towards your base; place towers beside the path to stop them.
Every chicken a tower kills drops a pile of gold, which you pick up by moving
the mouse over it.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
derptower
```

Options:

| Option | Meaning |
|--------|---------|
| `--resources DIR` | Directory holding the game's images and sounds (default: `./resources`) |
| `-v`, `--verbose` | Log debug output |

If a resource file is missing, `derptower` prints the missing path to
standard error and exits with status 1. The resource directory must hold:

```
monsters/chicken/chicken_run1.png
monsters/chicken/chicken_run2.png
monsters/cool_chicken/cool_chicken.png
monsters/chicken_hurt.ogg
tower2.png
tower_ninja.png
tower_attack_pop.ogg
gold_pile.png
gold.ogg
base.png
ui/tower.png
ui/tower_selected.png
ui/ninja_tower.png
ui/ninja_tower_selected.png
```

Sounds are played only when an audio device can be opened; otherwise the game
runs silently.

### Starting state

- You start with 100 health and 300 gold.
- The game area is 800 × 600. The window can be resized; the game is scaled
  to fit it.
- Nine chickens arrive in the first nine seconds, followed by a cool chicken
  at fourteen seconds.
- Each monster that reaches the end of the path costs you 1 health.

### Controls

| Input | Action |
|-------|--------|
| Mouse over the board | Highlights the tile under the cursor and picks up gold piles within 20 pixels |
| Mouse over the build bar | Highlights a tower icon |
| Click on a tower icon | Selects that tower type |
| Click on a free tile | Builds the selected tower there, if you can afford it |
| `1` | Selects the basic tower |
| `2` | Selects the ninja tower |

A tower cannot go on the path, on the base, or on a tile that already has a
tower.

### Towers

- **Basic tower** (costs 10 gold): hits every monster within 100 pixels for
  10 damage, then waits one second.
- **Ninja tower** (costs 20 gold): hits every monster within 100 pixels for
  10 damage every two seconds. Five seconds after it is built, and every ten
  seconds after that, it also strikes one random monster anywhere on the board
  for 1000 damage.

### Monsters

Chickens and cool chickens have 100 health each and walk at 100 pixels per
second. Each one drops 10 gold when killed.

## What the game does not do

There is a single fixed level: `Board.generate` always builds the same path
whatever seed and length it is given, and the monster schedule ends after the
cool chicken. There is no game-over or victory screen; health can drop below
zero and the game keeps running until the window is closed. Nothing is saved.

## Using the game from code

- `derptower.assets.load_assets(resource_dir)` loads every image and sound
  into an `AssetManager`; it raises `FileNotFoundError` for a missing file.
- `derptower.game.Game(assets)` holds the whole game state: `player`,
  `board`, `spawner`, `ui` and `screen_size` (the window size in pixels).
- `Game.update(elapsed)` advances the game by `elapsed` seconds.
- `Game.draw(surface)` renders the game onto an 800 × 600 pygame surface.
- `Game.mouse_motion(x, y)`, `Game.mouse_button_down(x, y)` and
  `Game.key_down(key)` pass input to the game; mouse positions are in window
  pixels, keys are pygame key codes.
- `derptower.game.run(resource_dir)` opens a window and runs the game loop
  until the window is closed.

The building blocks live in their own modules: `derptower.board.Board`,
`derptower.towers` (`BasicTower`, `NinjaTower`), `derptower.monsters`
(`Chicken`, `CoolChicken`), `derptower.views` (`ChickenView`,
`CoolChickenView`), `derptower.spawner.MonsterSpawner` and
`derptower.ui.UI`. Tower and monster updates accept an optional
`random.Random` for repeatable results, and work without assets, in which case
no sounds are played.