# cubscene

`cubscene` reads `.cub` scene files, which describe a grid-based map for a
first-person maze game. It checks them thoroughly and, once a scene is
valid, opens an empty game window.

## Scene file format

A scene file starts with a header. The header gives the four wall textures
and the floor and ceiling colours. The map grid comes after the header and
must be the last thing in the file.

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100101
1000N1
111111
```

The rules:

- `NO`, `SO`, `WE` and `EA` each give one path to an existing, readable
  file ending in `.xpm`. A path cannot be a directory. Each may appear
  only once.
- `F` (floor) and `C` (ceiling) each give exactly three comma-separated
  numbers, each between 0 and 255. Each may appear only once.
- Every header entry must appear before the map starts. The map starts at
  the first line whose first non-blank character is a digit, and runs as
  long as lines begin (after blanks) with `1`.
- The map may contain only `0` (floor), `1` (wall), spaces and exactly one
  player start: `N`, `S`, `E` or `W`, the direction the player faces.
- The map must be at least three lines high, and every floor or player cell
  must be surrounded by floor, wall or player cells.
- Nothing but blank lines may follow the map.
- The scene file name must end in `.cub`.

## Command line

```
cubscene path/to/scene.cub
```

If the file is valid, a 1000×600 window titled "Cub3D" opens. Press Escape
or close the window to quit. If the arguments or the file are invalid, an
error message is printed to standard error and the command exits with
status 1.

## Library use

```python
from cubscene.errors import CubError
from cubscene.loader import load_scene

try:
    scene = load_scene("maps/level.cub")
except CubError as exc:
    print(exc)
else:
    print(scene.player.dir, scene.player.pos_x, scene.player.pos_y)
    print(hex(scene.textures.floor_hex), hex(scene.textures.ceiling_hex))
    for row in scene.grid:
        print(row)
```

`load_scene` returns a `Scene` (from `cubscene.config`) holding the file's
lines, the map `grid` with its `height` and `width`, the `textures`
(paths, RGB tuples and packed `0xRRGGBB` colours) and the `player`. The
player's start cell is replaced by `0` in the grid, and its position is the
centre of that cell. `Player.init_direction()` sets the direction and
camera-plane vectors from the facing letter.

The individual steps are also available:

- `cubscene.arguments`: `parse_args`, `check_file_name`, `check_file`
- `cubscene.header`: `extract_map_info`, `build_map`,
  `parse_texture_path`, `parse_color_line`
- `cubscene.mapcheck`: `parse_map`, `is_map_closed`, `check_valid_chars`,
  `find_player`, `check_map_at_eof`
- `cubscene.textures`: `validate_textures`, `check_texture_file`,
  `is_xpm_file`, `validate_rgb`, `rgb_to_hex`
- `cubscene.textutil`: `read_lines`, `atoi`, `split_fields`, `is_space`

Every validation failure raises `CubError` with a message describing the
problem. `format_error` formats a message the way the command prints it.

## What it does not do

The window is only a blank surface that waits to be closed. The package
does not load the texture images, draw the scene or move the player.

## Running the tests

```
pip install -e .[test]
pytest
```