# desertrun

desertrun is a small side-scrolling platformer set in the desert. Brick
platforms climb towards the sky. Each one carries a hazard, and twenty water
droplets are spread across the level.

## Installing

```
pip install .
```

This installs `pygame`, which opens the window and reads the keyboard.

## Playing

```
desertrun
```

This opens an 800×600 window titled "Desert Adventure Game". Add
`--seed N` to make the random choice of hazards repeat from one run to the
next:

```
desertrun --seed 42
```

| Key            | Action                                        |
|----------------|-----------------------------------------------|
| Right / Left   | run; the scene scrolls at x ≥ 600 and x ≤ 100 |
| Up or Space    | jump                                          |
| Down           | crouch                                        |
| A              | attack (changes the pose only)                |
| R              | reset the current level                       |
| N              | go to the next level                          |

Level 1 has six brick platforms. Each platform gets one hazard, chosen at
random:

- `Fire`: its `handle_collision` deals 10 damage.
- `Cactus`: its `handle_collision` deals 20 damage.
- `Quicksand`: its `handle_collision` resets its level.

A green bar near the top right shows your health. A counter of the form
`collected/20` shows how many droplets you have gathered. If you fall below
the bottom of the window, the level resets. Later levels place droplets and
the player, but no platforms or hazards.

## Using the pieces

The game logic does not need a window, so you can drive it from code:

```python
from desertrun.scene import Scene
from desertrun.player import Player, Key
from desertrun.level import Level

scene = Scene()
player = Player()
level = Level(1, scene, player)
level.setup_level()

player.key_press(Key.UP)
while player.jumping:
    player.tick_jump()
```

- `desertrun.scene` provides `Rect`, `Item`, `TextItem` and `Scene`. Together
  they form a small scene graph with overlap tests and `colliding_items()`.
- `desertrun.player.Player` handles movement, jumping (`tick_jump()`),
  health (`take_damage`, `heal`) and `droplets_collected`.
- `desertrun.obstacles` provides `Obstacle`, `Fire`, `Cactus` and
  `Quicksand`.
- `desertrun.droplet.WaterDroplet.check_collision(player)` removes the
  droplet and counts it when the player touches it.
- `desertrun.level.Level` lays out a level. It also has
  `reset_level()`, `next_level()` and helpers that add rows of fire, cactus
  or quicksand.
- `desertrun.display.Display` is a text-and-bar read-out of health and level.
- `desertrun.game.Game` adds a game loop on top of these pieces:
  - `update()` pushes the player out of overlapping items and collects
    droplets.
  - P pauses and resumes.
  - N advances a level and adds 1000 to the score.
  - R restarts.
  - At zero health it shows a game-over screen.
- `desertrun.app.MainWindow` is the windowless state of the playable window.
  `desertrun.app.main` and `desertrun.app.run` open that window.

## What it does not do

The window draws coloured shapes in place of images, and it loads no picture
files. Its frame update scrolls the scene and refreshes the read-outs. It
never calls the hazards' `handle_collision` or the droplets'
`check_collision`, so in the window nothing hurts you and the droplet counter
stays at 0. `Game.update` does collect droplets, but `Game` is not connected
to the window. There is no saving, no score table and no sound.

## Running the tests

```
pip install .[test]
pytest
```