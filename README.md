# towerengine

A small scene-based 2D game engine for tower defense style games, built on
pygame. It gives you vector maths, collision helpers, object and control
groups, scenes, a cache for images, fonts and sounds, audio helpers, and a
game loop that sends frame and input events to the active scene.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `towerengine.point.Point`: a 2D point or vector with `+`, `-`, unary `-`,
  `*` and `/` by a scalar, `normalize()` (a zero vector gives `(0, 0)`),
  `dot()`, `magnitude()` and `magnitude_squared()`. It can be unpacked as
  `x, y = point`.
- `towerengine.collider`: `is_point_in_rect` (left and top edges inside,
  right and bottom outside), `is_rect_overlap` and `is_circle_overlap`
  (touching does not count as overlap), and `is_point_in_bitmap`, which checks
  that a pixel of a surface is not fully transparent.
- `towerengine.gameobject.GameObject`: the base class for things that are
  drawn and updated. It has `position`, `size`, `anchor` and `visible`;
  its `draw(surface)` and `update(delta_time)` do nothing until overridden.
- `towerengine.control.Control`: the base class for things that react to
  input: `on_key_down`, `on_key_up`, `on_mouse_down`, `on_mouse_up`,
  `on_mouse_move` and `on_mouse_scroll`, all empty until overridden.
- `towerengine.group.Group`: both a `GameObject` and a `Control`. It holds
  objects and controls, updates and draws the visible objects in order and
  passes every input event to every control. Children may be removed while an
  event is being passed on. Use `add_object`, `insert_object(obj, before)`,
  `add_control`, `add_control_object` (for something that is both),
  `remove_object`, `remove_control`, `remove_control_object`, `clear`,
  `objects()` and `controls()`. Removing something that is not in the group
  raises `ValueError`.
- `towerengine.scene.Scene`: an abstract group that the engine makes active.
  You write `initialize()`; `terminate()` removes all children by default.
  `draw(surface)` fills the surface with black and then draws the children.
- `towerengine.resources`: `Resources` loads files from `<root>/images`,
  `<root>/fonts` and `<root>/audios` (the root is `Resource` by default) with
  `get_bitmap(name, width, height)`, `get_font(name, font_size)`,
  `get_sample(name)` and `get_sample_instance(name)`, and caches them.
  `release_unused()` forgets cached items that nothing else still refers to.
  `get_resources()` returns the shared cache.
- `towerengine.audio`: `AudioPlayer` plays one-shot sounds (`play_audio`,
  at `sfx_volume`), looping music (`play_bgm`, at `bgm_volume`; stop it with
  `stop_bgm`), and `SampleInstance`s through `play_sample(audio, loop, volume,
  position)`, `stop_sample`, `change_sample_volume`,
  `change_sample_position` and `get_sample_length` (whole seconds).
- `towerengine.engine`: `GameEngine` opens the window, runs the loop and
  drives the active scene. `get_engine()` returns the shared engine.
- `towerengine.log`: `set_config(enabled, log_verbose, file_path)` turns
  logging on or off and empties the log file; `log(level, *args)` writes a
  line labelled with a `LogType` to standard output and to the file. Logging
  is off by default, and `VERBOSE` lines are written only when `log_verbose`
  is set.
- `towerengine.errors.EngineError`: raised when a resource cannot be loaded
  or the window or audio cannot be set up.

## The game engine

Register scenes by name with `add_new_scene`, then call `start`. `start`
blocks until the window is closed; it raises `ValueError` if the first scene
has not been added.

`change_scene(name)` only records the request: the old scene is terminated
and the new one initialised at the start of the next `update`, so a scene may
ask to leave from inside its own handlers. When `free_memory_on_scene_changed`
is set, unused resources are released on each change. `update` caps the
frame time at `delta_time_threshold` (0.05 s by default).

`dispatch(event)` passes one pygame event on to the active scene and returns
`False` for a quit event. Mouse buttons reach the scene numbered 1 for left,
2 for right and 3 for middle; leaving the window is reported as a mouse move
to `(-1, -1)`. `screen_size()`, `mouse_position()` and `is_key_down()` give
the window size, the mouse position and the state of a key.

## Example

```python
from towerengine.engine import get_engine
from towerengine.scene import Scene
from towerengine.gameobject import GameObject


class Title(Scene):
    def initialize(self):
        self.add_object(GameObject(100, 100, 50, 50))


engine = get_engine()
engine.add_new_scene("title", Title())
engine.start("title", 60, 800, 600, 1000, "My Game", None, False, 0.05)
```

## What it does not do

The package is the engine only. It has no objects that draw images or text
(`GameObject` draws nothing by itself), no game content such as enemies,
towers or bullets, no ready-made scenes, and no command to run: you write
the scenes and objects and call `start` yourself.