"""Scene elements and the scene that collects them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from minirt.colors import Color
from minirt.vectors import Vec3


class SceneError(Exception):
    """Raised when a scene description is invalid."""


@dataclass(frozen=True)
class Sphere:
    center: Vec3
    radius: float
    color: Color


@dataclass(frozen=True)
class Plane:
    point: Vec3
    normal: Vec3
    color: Color


@dataclass(frozen=True)
class Square:
    center: Vec3
    normal: Vec3
    side: float
    color: Color


@dataclass(frozen=True)
class Triangle:
    first: Vec3
    second: Vec3
    third: Vec3
    color: Color


@dataclass(frozen=True)
class Cylinder:
    position: Vec3
    normal: Vec3
    diameter: float
    height: float
    color: Color


@dataclass(frozen=True)
class Light:
    """A point light; ``ratio`` is its brightness in 0..1."""

    position: Vec3
    ratio: float
    color: Color


@dataclass(frozen=True)
class Camera:
    """A camera at ``eye`` looking along ``look_at`` with ``fov`` degrees."""

    eye: Vec3
    look_at: Vec3
    fov: float


@dataclass(frozen=True)
class Ambient:
    """Ambient lighting; ``ratio`` is in 0..1."""

    ratio: float
    color: Color


SceneObject = Union[Sphere, Plane, Square, Triangle, Cylinder]


@dataclass
class Scene:
    """Everything a scene file describes.

    Lights and objects are kept newest first; cameras in the order given.
    """

    width: float = 0.0
    height: float = 0.0
    ambient: Optional[Ambient] = None
    lights: List[Light] = field(default_factory=list)
    objects: List[SceneObject] = field(default_factory=list)
    cameras: List[Camera] = field(default_factory=list)

    def add_light(self, light: Light) -> None:
        self.lights.insert(0, light)

    def add_object(self, obj: SceneObject) -> None:
        self.objects.insert(0, obj)

    def add_camera(self, camera: Camera) -> None:
        self.cameras.append(camera)

    def validate(self) -> Scene:
        """Check that the mandatory elements are present and return the scene."""
        if not self.width and not self.height:
            raise SceneError("No Resolution in the scene.")
        if self.ambient is None:
            raise SceneError("No ambient lighting in the scene.")
        if not self.cameras:
            raise SceneError("You must specify at least one camera.")
        return self