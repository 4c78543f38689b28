import re

import pytest

from minirt.colors import Color
from minirt.scene import (
    Ambient,
    Camera,
    Light,
    Scene,
    SceneError,
    Sphere,
    Triangle,
)
from minirt.vectors import Vec3


def _sphere(x):
    return Sphere(Vec3(x, 0, 0), 1.0, Color(255, 0, 0))


def test_objects_are_kept_newest_first():
    scene = Scene()
    first, second, third = _sphere(1), _sphere(2), _sphere(3)
    for obj in (first, second, third):
        scene.add_object(obj)
    assert scene.objects == [third, second, first]


def test_mixed_objects_prepend():
    scene = Scene()
    sphere = _sphere(0)
    tri = Triangle(Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0), Color(1, 2, 3))
    scene.add_object(sphere)
    scene.add_object(tri)
    assert scene.objects[0] is tri
    assert scene.objects[1] is sphere


def test_lights_are_kept_newest_first():
    scene = Scene()
    a = Light(Vec3(0, 0, 0), 0.5, Color(1, 1, 1))
    b = Light(Vec3(1, 1, 1), 0.7, Color(2, 2, 2))
    scene.add_light(a)
    scene.add_light(b)
    assert scene.lights == [b, a]


def test_cameras_keep_given_order():
    scene = Scene()
    cams = [Camera(Vec3(i, 0, 0), Vec3(0, 0, 1), 70) for i in range(3)]
    for cam in cams:
        scene.add_camera(cam)
    assert scene.cameras == cams


def test_validate_requires_resolution():
    with pytest.raises(SceneError, match=re.escape("No Resolution in the scene.")):
        Scene().validate()


def test_validate_single_resolution_component_is_enough():
    scene = Scene(width=100)
    with pytest.raises(SceneError, match=re.escape("No ambient lighting in the scene.")):
        scene.validate()


def test_validate_requires_camera():
    scene = Scene(width=10, height=10, ambient=Ambient(0.2, Color(255, 255, 255)))
    with pytest.raises(
        SceneError, match=re.escape("You must specify at least one camera.")
    ):
        scene.validate()


def test_validate_complete_scene_returns_itself():
    scene = Scene(width=10, height=10, ambient=Ambient(0.2, Color(255, 255, 255)))
    scene.add_camera(Camera(Vec3(), Vec3(0, 0, 1), 70))
    assert scene.validate() is scene


def test_scenes_do_not_share_lists():
    a, b = Scene(), Scene()
    a.add_object(_sphere(1))
    assert b.objects == []
    assert len(a.objects) == 1