import pygame
import pytest

from towerengine.control import Control
from towerengine.engine import GameEngine, get_engine
from towerengine.gameobject import GameObject
from towerengine.group import Group
from towerengine.point import Point
from towerengine.resources import Resources
from towerengine.scene import Scene


class Recorder(GameObject, Control):
    def __init__(self):
        super().__init__()
        self.calls = []

    def update(self, delta_time):
        self.calls.append(("update", delta_time))

    def draw(self, surface):
        self.calls.append(("draw", surface))

    def on_key_down(self, key_code):
        self.calls.append(("key_down", key_code))

    def on_key_up(self, key_code):
        self.calls.append(("key_up", key_code))

    def on_mouse_down(self, button, mx, my):
        self.calls.append(("mouse_down", button, mx, my))

    def on_mouse_up(self, button, mx, my):
        self.calls.append(("mouse_up", button, mx, my))

    def on_mouse_move(self, mx, my):
        self.calls.append(("mouse_move", mx, my))

    def on_mouse_scroll(self, mx, my, delta):
        self.calls.append(("mouse_scroll", mx, my, delta))


class RecordingScene(Scene):
    def __init__(self):
        super().__init__()
        self.events = []
        self.recorder = Recorder()

    def initialize(self):
        self.events.append("initialize")
        self.add_control_object(self.recorder)

    def terminate(self):
        self.events.append("terminate")
        super().terminate()


def make_engine(surface=None):
    engine = GameEngine(surface=surface)
    scene = RecordingScene()
    engine.add_new_scene("play", scene)
    engine.change_scene("play")
    engine.update(0.0)
    return engine, scene


def test_add_duplicate_scene_raises():
    engine = GameEngine()
    engine.add_new_scene("a", RecordingScene())
    with pytest.raises(ValueError):
        engine.add_new_scene("a", RecordingScene())


def test_get_scene_returns_registered_and_rejects_unknown():
    engine = GameEngine()
    scene = RecordingScene()
    engine.add_new_scene("a", scene)
    assert engine.get_scene("a") is scene
    with pytest.raises(ValueError):
        engine.get_scene("missing")


def test_change_scene_applies_on_next_update():
    engine = GameEngine()
    scene = RecordingScene()
    engine.add_new_scene("a", scene)
    engine.change_scene("a")
    assert engine.active_scene is None
    engine.update(0.01)
    assert engine.active_scene is scene
    assert scene.events == ["initialize"]


def test_change_scene_terminates_old_scene():
    engine, first = make_engine()
    second = RecordingScene()
    engine.add_new_scene("other", second)
    engine.change_scene("other")
    engine.update(0.01)
    assert first.events == ["initialize", "terminate"]
    assert second.events == ["initialize"]
    assert engine.active_scene is second
    assert first.objects() == []


def test_change_to_unknown_scene_raises_on_update():
    engine, _ = make_engine()
    engine.change_scene("missing")
    with pytest.raises(ValueError):
        engine.update(0.01)


def test_update_without_scene_raises():
    with pytest.raises(RuntimeError):
        GameEngine().update(0.01)


def test_update_caps_delta_time():
    engine, scene = make_engine()
    scene.recorder.calls.clear()
    engine.update(1.0)
    engine.update(0.01)
    assert scene.recorder.calls == [("update", 0.05), ("update", 0.01)]


def test_update_respects_custom_threshold():
    engine, scene = make_engine()
    engine.delta_time_threshold = 0.2
    scene.recorder.calls.clear()
    engine.update(0.5)
    assert scene.recorder.calls == [("update", 0.2)]


def test_draw_clears_and_draws_objects():
    surface = pygame.Surface((8, 6))
    surface.fill((200, 10, 10))
    engine, scene = make_engine(surface)
    engine.draw()
    assert tuple(surface.get_at((3, 3)))[:3] == (0, 0, 0)
    assert ("draw", surface) in scene.recorder.calls


def test_screen_size_follows_surface():
    engine = GameEngine(surface=pygame.Surface((32, 24)))
    assert engine.screen_size() == Point(32, 24)


def test_dispatch_quit_returns_false():
    engine, _ = make_engine()
    assert engine.dispatch(pygame.event.Event(pygame.QUIT)) is False


def test_dispatch_keys():
    engine, scene = make_engine()
    assert engine.dispatch(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)) is True
    engine.dispatch(pygame.event.Event(pygame.KEYUP, key=pygame.K_a))
    assert scene.recorder.calls == [("key_down", pygame.K_a), ("key_up", pygame.K_a)]


def test_dispatch_mouse_buttons_swaps_middle_and_right():
    engine, scene = make_engine()
    engine.dispatch(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(4, 5)))
    engine.dispatch(pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(4, 5)))
    engine.dispatch(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=2, pos=(4, 5)))
    assert scene.recorder.calls == [
        ("mouse_down", 2, 4, 5),
        ("mouse_up", 1, 4, 5),
        ("mouse_down", 3, 4, 5),
    ]


def test_dispatch_motion_without_movement_is_ignored():
    engine, scene = make_engine()
    engine.dispatch(pygame.event.Event(pygame.MOUSEMOTION, pos=(7, 8), rel=(0, 0)))
    engine.dispatch(pygame.event.Event(pygame.MOUSEMOTION, pos=(9, 10), rel=(2, 2)))
    assert scene.recorder.calls == [("mouse_move", 9, 10)]


def test_dispatch_scroll_uses_last_mouse_position():
    engine, scene = make_engine()
    engine.dispatch(pygame.event.Event(pygame.MOUSEMOTION, pos=(5, 6), rel=(1, 0)))
    engine.dispatch(pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=-1))
    assert scene.recorder.calls[-1] == ("mouse_scroll", 5, 6, -1)
    assert engine.mouse_position() == Point(5, 6)


def test_dispatch_window_leave_fakes_mouse_out():
    engine, scene = make_engine()
    engine.dispatch(pygame.event.Event(pygame.WINDOWLEAVE))
    assert scene.recorder.calls == [("mouse_move", -1, -1)]


class _Image:
    pass


def test_free_memory_on_scene_change_releases_resources():
    loads = []

    def loader(path):
        loads.append(path)
        return _Image()

    resources = Resources("res", image_loader=loader)
    engine = GameEngine(resources=resources)
    engine.free_memory_on_scene_changed = True
    engine.add_new_scene("a", RecordingScene())
    engine.add_new_scene("b", RecordingScene())
    engine.change_scene("a")
    engine.update(0.0)
    first_id = id(resources.get_bitmap("x.png"))
    second = resources.get_bitmap("x.png")
    assert id(second) == first_id
    assert len(loads) == 1
    del second
    engine.change_scene("b")
    engine.update(0.0)
    reloaded = resources.get_bitmap("x.png")
    assert isinstance(reloaded, _Image)
    assert len(loads) == 2


def test_start_with_unknown_scene_raises():
    engine = GameEngine()
    with pytest.raises(ValueError):
        engine.start("missing")


def test_get_engine_is_shared():
    first = get_engine()
    second = get_engine()
    assert isinstance(first, GameEngine)
    assert first is second
    with pytest.raises(ValueError):
        first.get_scene("no-such-scene")


def test_group_scene_nested_update_through_engine():
    engine, scene = make_engine()
    inner = Group()
    child = Recorder()
    inner.add_object(child)
    scene.add_object(inner)
    engine.update(0.02)
    assert child.calls == [("update", 0.02)]