from towerengine.objects import Control, GameObject
from towerengine.point import Point


def test_game_object_defaults():
    obj = GameObject()
    assert obj.visible is True
    assert obj.position == Point(0, 0)
    assert obj.size == Point(0, 0)
    assert obj.anchor == Point(0, 0)


def test_game_object_stores_geometry():
    obj = GameObject(3, 4, 10, 20, 0.5, 1)
    assert obj.position == Point(3, 4)
    assert obj.size == Point(10, 20)
    assert obj.anchor == Point(0.5, 1)


def test_game_object_update_leaves_position():
    obj = GameObject(7, 8)
    obj.update(1.0)
    assert obj.position == Point(7, 8)


def test_game_objects_have_independent_points():
    a = GameObject(1, 1)
    b = GameObject(1, 1)
    a.position.x = 5
    assert b.position == Point(1, 1)


def test_control_default_handlers_return_none():
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