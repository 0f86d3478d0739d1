from towerengine.control import Control
from towerengine.gameobject import GameObject
from towerengine.point import Point


class Recorder(Control):
    def __init__(self):
        self.events = []

    def on_key_down(self, key_code):
        self.events.append(("key_down", key_code))

    def on_mouse_scroll(self, mx, my, delta):
        self.events.append(("scroll", mx, my, delta))


class Button(GameObject, Control):
    def __init__(self, x, y, w, h):
        super().__init__(x, y, w, h)
        self.clicks = 0

    def on_mouse_down(self, button, mx, my):
        if self.position.x <= mx < self.position.x + self.size.x:
            self.clicks += 1


def test_base_handlers_return_none():
    ctrl = Control()
    results = [
        ctrl.on_key_down(1),
        ctrl.on_key_up(1),
        ctrl.on_mouse_down(1, 2, 3),
        ctrl.on_mouse_up(1, 2, 3),
        ctrl.on_mouse_move(2, 3),
        ctrl.on_mouse_scroll(2, 3, 1),
    ]
    assert results == [None] * 6


def test_overridden_handlers_receive_arguments():
    rec = Recorder()
    rec.on_key_down(65)
    rec.on_mouse_scroll(4, 5, -1)
    inherited = [Control.on_key_up(rec, 65), Control.on_mouse_move(rec, 4, 5)]
    assert inherited == [None, None]
    assert rec.events == [("key_down", 65), ("scroll", 4, 5, -1)]


def test_control_object_combines_both_bases():
    button = Button(10, 10, 20, 20)
    button.on_mouse_down(1, 15, 15)
    button.on_mouse_down(1, 50, 15)
    button.on_key_down(32)
    assert button.clicks == 1
    assert button.position == Point(10, 10)