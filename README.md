# raycube

raycube reads `.cub` scene files and renders them with a grid raycaster. It
casts one ray per screen column and draws a textured wall slice for each one
over a flat ceiling and floor. The result goes into an in-memory frame buffer.

## Scene files

A scene file holds six settings and then a single map:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100001
10N001
111111
```

* `NO`, `SO`, `WE` and `EA` name the wall textures. A path needs at least five
  characters and must end in `.xpm`. Each side may appear only once.
* `F` and `C` give the floor and ceiling colours as `R,G,B`. Each component
  has at most three digits and lies in the range 0–255.
* The map uses these characters:
  * `1` for walls.
  * `0` for floor.
  * Spaces for void.
  * Exactly one of `N`, `S`, `W` or `E`, which sets the player's start cell
    and facing.
* The map needs at least three rows. All six settings must come before it,
  and it must be the only map block in the file.
* Every floor cell must be enclosed. A floor cell may not lie on the map's
  edge, and it may not sit next to a void cell.

Any violation raises `raycube.errors.CubError`. Its `message` (and `str()`) is
one of the `raycube.errors.ErrorMessage` values, such as
`Error: borders in map`. Its `kind` holds the matching enum member, and its
`exit_code` is `1`.

## Using the library

```python
from raycube.constants import Key
from raycube.game import Game, MoveMode, check_file_extension
from raycube.textures import load_texture
from raycube.tokens import read_lines

path = "maps/level.cub"
check_file_extension(path)          # raises CubError unless it ends in ".cub"
with open(path, encoding="utf-8") as stream:
    tokens = read_lines(stream)

game = Game.from_tokens(tokens, load_texture, MoveMode.COLLIDE)
frame = game.render()               # a raycube.raycast.Frame, 1000x800 by default

game.handle_key(Key.MOVE_AHEAD)     # moves, then re-renders into game.frame
game.handle_key(Key.ROTATE_LEFT)
game.handle_key(Key.ESC)            # sets game.running to False
```

The frame's `pixels` attribute is a flat, row-by-row list of `0xRRGGBB`
integers. `Frame.get(x, y)` reads a single pixel.

### Movement modes

`MoveMode` decides how the player is kept inside the level:

* `MoveMode.BOUNDS` accepts a step along an axis only while the player stays
  more than 1.1 cells inside the map's outer frame.
* `MoveMode.COLLIDE` accepts a step along an axis only when the target cell is
  a floor cell.

`Game.move(dx, dy)` shifts the player directly under these rules.
`Game.rotate(angle)` turns the view by `angle` radians. Both methods re-render
the frame afterwards.

### Lower-level pieces

Each of these modules can also be used on its own:

* `raycube.tokens` classifies lines as settings, separators or map rows. It
  provides `read_lines`, `validate_tokens`, `map_lines`, `count_tokens` and
  `find_token`.
* `raycube.colors` turns text into `Rgb` values with `parse_rgb` and
  `parse_color_line`. `Rgb.packed()` gives the `0xRRGGBB` integer.
* `raycube.textures` handles the setting lines:
  * `parse_textures` turns them into `SceneSettings`. It takes any loader
    callable that returns a `Texture`.
  * `load_texture` uses Pillow to read an image file. The image must be
    exactly 64×64.
* `raycube.gamemap` handles the map:
  * `parse_map` builds a `GameMap` and the starting `Hero`.
  * `GameMap.close_gaps()` turns void cells into walls.
* `raycube.raycast` draws the view:
  * `cast_ray` finds where the ray of one column meets a wall and returns a
    `RayHit`.
  * `texture_column` gives the texture column that the ray hits.
  * `render` draws a full view into a `Frame`.
* `raycube.constants` holds the window size, the step sizes, the `Key` codes
  and the `WallSide` identifiers.

## Controls

| `Key` member          | Code | Action       |
|-----------------------|------|--------------|
| `Key.MOVE_AHEAD`      | 13   | step forward |
| `Key.MOVE_BACKWARD`   | 1    | step back    |
| `Key.MOVE_LEFT`       | 0    | strafe left  |
| `Key.MOVE_RIGHT`      | 2    | strafe right |
| `Key.ROTATE_LEFT`     | 12   | turn left    |
| `Key.ROTATE_RIGHT`    | 14   | turn right   |
| `Key.ESC`             | 53   | stop running |

`Game.handle_key` ignores any other code.

## What it does not do

raycube has no window, no display and no keyboard event loop, and it installs
no command-line program. To build an interactive game around it, you need to
do two things yourself:

* Show `game.frame.pixels` in a window of your choice.
* Pass key presses to `Game.handle_key`, and stop once `game.running` is
  `False`.