# vsrg

A vertical scrolling rhythm game built on pygame. Notes are read from a BMS
chart and fall down eight lanes (seven keys plus scratch), each drawn with an
image taken from a skin.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Running the game

    vsrg [CONFIG]

`CONFIG` is the path of a JSON configuration file; it defaults to
`../../config.json`, relative to the directory the command is started in.
The file is a JSON object:

```json
{
  "title": "VSRG",
  "width": 800,
  "height": 800,
  "is_resizable": true,
  "is_fullscreen": false,
  "is_fps_capped": true,
  "fps": 60
}
```

- `title`, `width` and `height` are required. A missing or `null` required
  key raises `KeyError`.
- `is_resizable` defaults to `true` and makes the window resizable.
- `is_fullscreen` defaults to `false`. It is read and checked but does not
  change the window.
- `is_fps_capped` defaults to `false`. When it is `true`, `fps` is required
  and must be positive. The loop then waits `1000 // fps` milliseconds after
  each frame.
- Values of the wrong type raise `TypeError`. A float given for an integer
  setting is truncated. A file that cannot be opened raises `RuntimeError`.

The game plays the chart `ex.bms` with the skin `simple`. Both are looked up
relative to the directory the command is started in. The skin's settings come
from `skins/simple/play/config.json`, a JSON object with a `presets` list (or
object). The game uses the preset whose `key` is `8`. Its `regular_notes`
list must name exactly eight image files, one for each lane, and they are
loaded from `skins/simple/play/`.

The window is 800 by 800 pixels for the play area. The game runs until the
window is closed.

The same can be done from Python:

```python
from vsrg.game import load_game_config, run_game

config = load_game_config("config.json")   # a GameConfig
run_game("config.json")
```

`vsrg.main_script.MainScript(map_file="ex.bms", skin_name="simple", skins_dir="skins")`
is the per-frame script behind `run_game`. `start(window)` builds the play
scene on the given surface. `update()` advances the scene, draws it, and
presents the frame with `vsrg.game.update_renderer`, which flips the display
when given the display surface and then clears the surface to black. The
events polled in the current frame are kept in `vsrg.game.events`.

## Using the chart parser

```python
from vsrg.map_parser import parse_map_file

chart = parse_map_file("ex.bms")
print(chart.header.metadata["TITLE"])
for note in chart.notes:
    print(note.lane_index, note.start_time, note.end_time, note.is_hidden)
```

`parse_map(lines)` does the same for a list of lines already in memory. It
returns a `Map` holding a `Header` and a list of `Note`s.

- A chart needs sections opened by the lines `*---------------------- HEADER`,
  `*---------------------- EXPANSION` and `*---------------------- MAIN DATA`.
  It also needs a numeric `#BPM` header entry. Otherwise `ValueError` is raised.
- Header lines of the form `#KEY value` go into `header.metadata`.
  `#WAVxx` entries go into `header.audios`, keyed by `xx`. In the
  EXPANSION section, a line without a value is stored with an empty string.
- Main data lines `#mmmcc:objects` are split into two-character objects.
  Lines for the same measure and channel that follow each other are joined.
  Objects `00` are skipped.
- Only note channels 11–19, 21–29, 31–39, 41–49, 51–59 and 61–69 produce
  notes. Times are in milliseconds, computed from the measure number and the
  position within the measure at the header BPM, with four beats per measure.
- Lane 0 is the scratch lane (key digit 6). Key digits 1–5 are lanes 1–5, and
  digits 8 and 9 are lanes 6 and 7. Any other digit raises `ValueError`.
- Channels 11–29 give regular notes, with the end time equal to the start
  time. The other note channels are paired per lane: the first object starts
  a note and the next one ends it. Notes from channels 31–49 are marked
  `is_hidden`.

The individual steps (`find_field_range`, `parse_header_line`, `parse_header`,
`parse_main_data_line`, `concat_main_data`, `get_channel_type`,
`get_note_type`, `get_lane_index`, `parse_main_data`) are public too.

## Using the sprite engine

- `vsrg.sprite.Sprite` is the abstract base for anything drawn. It has a
  float rectangle `rect` (an `FRect`) and a visibility flag. Its list of
  children is not owned by it. `show_all`, `hide_all`, `draw_all`,
  `resize_all` and `move_by_all` act on the sprite and its direct children.
  Subclasses implement `draw_self` and `resize_self`.
- `vsrg.prefab.PreFab` is a sizeless sprite that draws nothing and ignores
  resizing. It is used to group and move other sprites.
- `vsrg.bmp_sprite.BmpSprite(renderer, bmp_name, x, y)` loads an image file
  and blits it, scaled to its rectangle, onto the pygame surface `renderer`.
  Images that cannot be loaded raise `RuntimeError`.
- `vsrg.scene.Scene` holds a flat list of sprites in an integer rectangle (a
  `Rect`). `draw()` draws each sprite with `draw_self`. `resize(...)`
  scales the scene and its sprites by multipliers, and `resize_to(width, height)`
  scales it to a size. Subclasses implement `update()`.
- `vsrg.play_scene.PlayScene` is the scene that plays a chart. Each frame,
  `update()` spawns the next note of each lane once its start time is less
  than one note height (in milliseconds) ahead of `map_play_duration()`.
  It then moves all spawned notes down by `scroll_speed * elapsed_ms / 10`
  pixels. Its clock can be replaced through the `clock` keyword argument.

## What it does not do

The game only scrolls notes down the screen. It does not read key presses,
judge hits, keep a score or play sounds. Note sprites are never removed once
they pass the bottom of the play area. The chart parser ignores BPM changes,
background music, background animation and `#BMPxx` entries: `Map.bgms` and
`Header.bitmaps` are always empty. Only the 7-key-plus-scratch lane layout is
supported.