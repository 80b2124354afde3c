# towerengine

The core of a 2D game engine for tower defense games, built on pygame. It gives a game
its scene management, main loop, object and control containers, geometry helpers,
resource caching, audio helpers, logging and a plain-text score board.

## Modules

- `towerengine.point`: `Point`, a 2D point and vector dataclass (`x`, `y`, both default
  `0.0`). It supports `+`, `-`, multiplication by a scalar on either side and division by a
  scalar, and has `normalize()` (a zero vector normalizes to the origin), `dot()`,
  `magnitude()` and `magnitude_squared()`.
- `towerengine.collider`: the checks `is_point_in_rect` (a half-open rectangle given by its
  top-left corner and size), `is_rect_overlap` and `is_circle_overlap` (both strict), and
  `is_point_in_bitmap`, which reports whether a pixel is not fully transparent. It works on
  anything with a `get_at((x, y))` method, a pygame surface for example.
- `towerengine.logger`: `set_config(enabled, log_verbose, file_path)` switches logging on
  or off and clears the log file. `log(log_type, *args)` writes one line such as
  `[INFO] message` to standard output and appends it to the log file. Logging is off by
  default, and `LogType.VERBOSE` lines are written only when `log_verbose` is set.
  `LogType` has the levels `VERBOSE`, `DEBUGGING`, `INFO`, `WARN` and `ERROR`.
- `towerengine.scoreboard`: `ScoreBoard(path)` works on a whitespace-separated file of
  score, time and name records. The default path is `../Resource/scoreboard.txt`.
  - `write(fields)` appends each field to the file with a space in front of it.
  - `read()` returns the records as `ScoreEntry` objects (`score`, `time`, `name`).
  - `sort(descending=True)` prints each record, then rewrites the file with one record
    per line, ordered by score.
- `towerengine.objects`: the base classes.
  - `GameObject` has `visible`, `position`, `size` and `anchor`. Its default `draw()`
    counts calls in `draw_count`, and its default `update()` adds the elapsed time to
    `age`.
  - `Control` has input handlers (`on_key_down`, `on_key_up`, `on_mouse_down`,
    `on_mouse_up`, `on_mouse_move`, `on_mouse_scroll`). By default they record the latest
    event in `last_event`.
- `towerengine.group`:
  - `Group` holds objects and controls. It updates and draws the visible objects in
    order, and passes every input event on to its controls. An object or control may
    remove itself while this is going on. The methods are `add_object`, `insert_object`,
    `add_control`, `add_control_object`, `remove_object`, `remove_control`,
    `remove_control_object`, `clear`, `objects()` and `controls()`.
  - `Scene` is an abstract `Group` with `initialize()` and `terminate()`, which clears the
    scene. Its `draw()` fills the display with black, if there is a display, before
    drawing.
- `towerengine.errors`: `EngineError`, raised when an image, font or sound cannot be loaded
  or controlled.
- `towerengine.resources`: `Resources` loads and caches resources.
  - `get_bitmap(name, width=None, height=None)` returns an image, scaled when a width and
    a height are given.
  - `get_font(name, font_size)` returns a font.
  - `get_sample(name)` returns a sound.
  - `get_sample_instance(name)` returns an independently playable instance of a sound.
  - `release_unused()` drops cached entries that nothing else refers to.
  - `Resources.get_instance()` returns the shared instance.

  Files are looked up under `Resource/images/`, `Resource/fonts/` and `Resource/audios/`,
  relative to the working directory.
- `towerengine.audio`:
  - `play_audio` plays a sound once, at `settings.sfx`.
  - `play_bgm` loops a sound, at `settings.bgm`, and `stop_bgm` stops it.
  - `play_sample` can loop, and takes a volume and a start position in seconds.
  - `stop_sample`, `change_sample_volume`, `change_sample_position` and
    `get_sample_length` act on sample instances.

  `settings` is a module-level `VolumeSettings`.
- `towerengine.game_engine`: `GameEngine` keeps scenes by name and runs the main loop.
  - `add_new_scene` registers a scene.
  - `change_scene` switches scenes at the next update.
  - `start(...)` opens the window and runs until it is closed. Frame times are capped at
    `delta_time_threshold`.
  - `active_scene()`, `get_scene()`, `screen_size()`, `screen_width()`, `screen_height()`,
    `mouse_position()` and `is_key_down()` report on the engine and its input.
  - `GameEngine.get_instance()` returns the shared engine.

## Installing

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Example

```python
from towerengine.point import Point
from towerengine.collider import is_circle_overlap
from towerengine.group import Scene
from towerengine.game_engine import GameEngine


class PlayScene(Scene):
    def initialize(self):
        ...


a = Point(0, 0)
b = Point(3, 4)
print((b - a).magnitude())                  # 5.0
print(is_circle_overlap(a, 3, b, 3))        # True

engine = GameEngine.get_instance()
engine.add_new_scene("play", PlayScene())
engine.start("play", 60, 800, 600, 1000, "Tower Defense", "icon.png", False, 0.05)
```

`start` loads the window icon through `Resources`, from `Resource/images/icon.png` in
this example. Pass `icon=None` to skip it.

## What it does not do

This package is the engine layer only. It has no towers, enemies, bullets, maps, path
finding, sprites or user-interface widgets. It also has no ready-made scenes and no
command to launch a game. You write the scenes by subclassing `Scene`, and you start
them with `GameEngine.start`.

## Running the tests

```
pytest
```