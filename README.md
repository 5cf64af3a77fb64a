# cubcaster

cubcaster reads a `.cub` scene file and checks that it describes a
playable map. It then opens a 600×600 window titled "Mini-Map". The window
shows a tile mini-map of the level, with a red dot for the player. A
textured first-person view built by raycasting is drawn over it.

## Installing

```
pip install .
```

This also installs `pygame`. cubcaster uses it to open the window and
read the keyboard.

## Running

```
cubcaster path/to/level.cub
```

`python -m cubcaster.app path/to/level.cub` does the same.

Give exactly one argument. With none, or with more than one, cubcaster
prints a usage line and exits with status 1.

If the scene cannot be loaded, cubcaster prints one error message to
standard error and exits with status 1. These are the messages:

- `Is a directory`
- `Invalid file entered`
- `Invalid texture`
- `Texture missing`
- `Invalid color`
- `Color is missing or Invalid color`
- `Invalid letter`
- `Error player position`
- `Map element has to be last and empty line`
- `Player is not surrounded by walls`

### Controls

| Key         | Action                          |
|-------------|---------------------------------|
| W           | move forward 8 pixels           |
| S           | move backward 8 pixels          |
| A / D       | move sideways 8 pixels          |
| Left arrow  | turn by 15° one way             |
| Right arrow | turn by 15° the other way       |
| Esc         | quit                            |

Closing the window also quits. A move that would end inside a wall tile
does nothing. Keys repeat while held down.

## The `.cub` format

A scene file must end in `.cub`. It has two parts: a header, then the map.

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

### Header

- Each of the four wall textures `NO`, `SO`, `WE` and `EA` must appear
  exactly once.
- The path is checked from the first `.` after the key, so write it
  starting with `./` or `../`.
- The path must name an existing, readable `.xpm` file that is not a
  directory.
- `F` gives the floor colour and `C` the ceiling colour, each as `R,G,B`.
- Every component must be in the range 0–255.

### Map

- The map must be the last element of the file. Any header line after it
  is an error.
- `1` is a wall and `0` is open floor.
- Exactly one of `N`, `S`, `E` or `W` marks where the player starts and
  which way they face.
- In the first and last map rows, spaces become walls.
- In the other rows, a leading character or a space becomes a wall.
- Short rows are padded, and every row is closed with a wall.
- The area the player can reach must be walled in.

## Using it as a library

- `cubcaster.scene.load_scene(path)` validates a path, reads the file and
  returns a `Scene`. The `Scene` holds `textures`, `colors` and `layout`.
- `cubcaster.scene.parse_scene(text)` parses text that is already in
  memory.
- `cubcaster.header.parse_textures(lines)` and
  `cubcaster.header.parse_colors(lines)` parse the header on its own.
- `cubcaster.layout.build_layout(lines)` parses the map on its own and
  returns a `MapLayout`.
- `cubcaster.xpm.load_xpm(path)` decodes an XPM image into an `XpmImage`.
  `parse_xpm_text(text)` does the same for text in memory. Read one pixel
  with `XpmImage.pixel(x, y)`.
- `cubcaster.colornames.lookup_color(name)` looks up an X11 colour name.
- `cubcaster.canvas.Canvas` is an in-memory frame buffer of 0xRRGGBB
  pixels.
- In `cubcaster.raycast`, `cast_ray`, `wall_slice`, `texture_column` and
  `render_view` run the raycaster over a sequence of map rows. They draw
  into a `Canvas`.
- `cubcaster.game.Game` ties a scene, a player and a canvas together.
  - `Game.handle_key(keycode)` takes the codes in `Key`. It returns
    `False` when the game should end.
  - `Game.render()` draws a frame.
- Invalid input raises `cubcaster.errors.CubError`. Its `kind` is an
  `ErrorKind` that says which check failed.

## Limitations

- Wall textures must be XPM files. No other image format is read.
- A scene file is read through one 1000-byte buffer, so keep scene files
  under 1000 bytes. With a longer file, later parts overwrite the start of
  the text.
- A map too large to fit tiles of at least one pixel in the window is
  rejected.

## Running the tests

```
pip install ".[test]"
pytest
```