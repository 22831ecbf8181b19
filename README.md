# lawnsiege

A lane-defence game model. Zombies walk in from the right along the rows
of a lawn. You spend sun on cards to put plants on a grid of cells. The
plants shoot, block, explode or make more sun. Every object in the game
advances by one step on each timer tick. A level's tick stands for 20 ms
of game time.

The package has no dependencies outside the standard library. All of the
game rules are plain Python objects, so you can drive them from a script,
a test or a front end of your own.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The command

```
lawnsiege [--scene {lawn,dark}] [--ticks N] [--seed S] [--keys "1 8 9"] [--user-file PATH]
```

The command plays a game with no window. It creates a `MainDialog` and
ticks the splash screen until the title scene appears. Then it clicks the
button for the chosen level, presses the given keys and runs the given
number of ticks on the level. After that it prints a summary:

```
scene: lawn
sun: 150
threat: 500
zombies: 0
plants: 0
lost: no
```

The lines after `scene:` appear only when the game ends on a level. If a
key or a loss takes the game back to the title, only `scene: title` is
printed.

| Option        | Meaning                                                        |
|---------------|----------------------------------------------------------------|
| `--scene`     | `lawn` (default) or `dark`                                     |
| `--ticks`     | how many ticks to run on the level (default 500; must not be negative) |
| `--seed`      | seed for the random number generator, so that runs repeat      |
| `--keys`      | space-separated keys to press before ticking: `1` to `9` or `escape` |
| `--user-file` | profile file for the title scene; its first line is `<name> <best time>` |

An unknown key or a negative tick count is a usage error. If the profile
file cannot be read, or its first line does not hold two fields, the
command prints the error and exits with status 1.

## The pieces

| Module                  | What it holds                                                     |
|-------------------------|-------------------------------------------------------------------|
| `lawnsiege.entity`      | `Point`, `Rect`, `Movie` and the `Entity` base every object shares |
| `lawnsiege.anims`       | Short-lived effects such as `PeaHit`, `Boom` and `ZombieDie`      |
| `lawnsiege.bonus`       | `Sun` and `SunFall`; calling `click()` on one adds 25 sun          |
| `lawnsiege.zombies`     | `CommonZombie` (kinds 0 to 4: plain, flag, cone, bucket, shield), `PoleZombie`, `NewsZombie` |
| `lawnsiege.projectiles` | `Pea`, `Ball`, `FirePea`, `FireBall`, `IcePea`, `Mush`            |
| `lawnsiege.plants`      | `SunFlower`, `PeaShooter`, `WallNut`, `Repeater`, `PotatoMine`, `FireTree`, `CherryBomb`, `IcePeaShooter`, `Mushroom`, `KunShooter`, and `plant_for_index` |
| `lawnsiege.cards`       | The seed cards and the `Shovel`, with their cost and recharge      |
| `lawnsiege.scene`       | `Scene` (the grid, the object lists, placing, spawning and judging), `MouseButton`, `Signal` |
| `lawnsiege.levels`      | `LawnScene`, `DarkScene`, `StartScene`, `StartScreen`, and `Key`  |
| `lawnsiege.app`         | `MainDialog` and the `main` entry point                           |

### Levels

- `LawnScene`: the daytime lawn. Sun sometimes falls from the sky. The
  card bar includes the `KunShooterCard`. A `KunShooter` on the lawn
  blasts a wide area when you call its `click(MouseButton.LEFT)`.
- `DarkScene`: the night lawn. No sun falls. The card bar includes the
  `MushroomCard`, which costs no sun.

Both levels also have a `Shovel`, which digs up a planted cell.

## Driving a level by hand

```python
import random

from lawnsiege.entity import Point
from lawnsiege.levels import Key, LawnScene
from lawnsiege.scene import MouseButton

level = LawnScene(rng=random.Random(1))
level.key_press(Key.KEY_8)              # +100 sun
level.key_press(Key.KEY_1)              # send a plain zombie down a random row

for _ in range(100):                    # let the cards recharge
    level.on_timer()

card = level.cards[1]                   # the pea shooter card
card.click(MouseButton.LEFT)            # select it if charged and affordable
level.mouse_move(Point(300, 300))
level.mouse_press(Point(300, 300), MouseButton.LEFT)   # plant in that cell

print(level.sun_point, len(level.zombies), len(level.plants))
print(level.played_sounds[-2:])
```

Any other button cancels the selected card. `Scene.get_cell()` gives the
lawn cell under the last mouse position, or `Point(-1, -1)` when the mouse
is off the lawn.

Scenes report where the game should go next through signals. Register a
handler with `scene.connect(Signal.TO_TITLE, handler)`. `MainDialog` does
this for you: it swaps in the title scene, the lawn or the night lawn,
and sets its `size` to match.

### Cheat keys in a level

| Key      | Effect                                                          |
|----------|-----------------------------------------------------------------|
| 1 to 5   | Send a plain, flag, cone, bucket or shield zombie               |
| 6        | Send a pole-vaulting zombie                                     |
| 7        | Send a newspaper zombie                                         |
| 8        | Add 100 sun                                                     |
| 9        | Raise the threat: `LawnScene` adds 6001, `DarkScene` sets it to 6001 |
| Escape   | Emit `Signal.TO_TITLE`                                          |

Every tick adds one to the threat, up to 9001. The level sends another
zombie whenever it holds fewer than one zombie per 600 threat. Below a
threat of 5000 it sends only plain zombies. From 5000 on it picks any kind.

## How a level is lost

When a zombie gets past the edge of the house, the cards are cleared,
the sun display is hidden and `Lose.wav` is played. About 100 ticks later
the scene emits `Signal.TO_TITLE`.

## What the package does not do

The package draws nothing and plays no audio. There is no window, no mouse
and no keyboard input. You drive a scene by calling `on_timer`,
`key_press`, `mouse_move`, `mouse_press` and the `click` methods yourself.
`Movie` only counts frames and does not load any image. Sounds are recorded
by name in `Scene.played_sounds`. If you pass a `sound_player` callable to
a scene or to `MainDialog`, it is handed each name as well. A real front
end has to supply the rendering and the audio.