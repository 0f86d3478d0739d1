import pytest

from towerengine.control import Control
from towerengine.gameobject import GameObject
from towerengine.scene import Scene


class FakeSurface:
    def __init__(self):
        self.calls = []

    def fill(self, colour):
        self.calls.append(("fill", colour))


class Marker(GameObject):
    def draw(self, surface):
        surface.calls.append(("draw", self))


class DemoScene(Scene):
    def __init__(self):
        super().__init__()
        self.initialized = 0

    def initialize(self):
        self.initialized += 1
        self.marker = Marker()
        self.add_object(self.marker)
        self.add_control(Control())


def test_scene_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        Scene()


def test_initialize_builds_contents():
    scene = DemoScene()
    scene.initialize()
    assert scene.initialized == 1
    assert Scene.objects(scene) == [scene.marker]
    assert len(Scene.controls(scene)) == 1


def test_terminate_clears_children():
    scene = DemoScene()
    scene.initialize()
    Scene.terminate(scene)
    assert Scene.objects(scene) == []
    assert Scene.controls(scene) == []


def test_scene_can_be_reentered():
    scene = DemoScene()
    scene.initialize()
    Scene.terminate(scene)
    scene.initialize()
    assert scene.initialized == 2
    assert Scene.objects(scene) == [scene.marker]


def test_draw_clears_to_black_before_objects():
    scene = DemoScene()
    scene.initialize()
    surface = FakeSurface()
    Scene.draw(scene, surface)
    assert surface.calls == [("fill", (0, 0, 0)), ("draw", scene.marker)]


def test_draw_skips_hidden_objects_but_still_clears():
    scene = DemoScene()
    scene.initialize()
    scene.marker.visible = False
    surface = FakeSurface()
    Scene.draw(scene, surface)
    assert surface.calls == [("fill", (0, 0, 0))]