"""Camera viewport set-up and primary ray generation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from minirt.scene import Camera
from minirt.vectors import Ray, Vec3


@dataclass(frozen=True)
class Viewport:
    """The image plane of a camera, in world space.

    ``width`` and ``height`` are the viewport's extents (negative, so that
    pixel row 0 is at the top); ``x_res`` and ``y_res`` the image size.
    """

    origin: Vec3
    lower_left: Vec3
    u: Vec3
    v: Vec3
    width: float
    height: float
    x_res: float
    y_res: float

    def ray(self, i: int, j: int) -> Ray:
        """Return the primary ray through the centre of pixel ``(i, j)``."""
        pixel = (
            self.lower_left
            + self.u * ((i + 0.5) * self.width / self.x_res)
            + self.v * ((j + 0.5) * self.height / self.y_res)
        )
        return Ray(self.origin, (pixel - self.origin).normalized())


def make_viewport(camera: Camera, width: float, height: float) -> Viewport:
    """Build the viewport of ``camera`` for an image of ``width`` x ``height``."""
    look = camera.look_at
    v_up = Vec3(0, 1, 0)
    if look.y != 0 and look.x == 0 and look.z == 0:
        v_up = Vec3(0, 0, -1)
    theta = math.radians(camera.fov)
    view_height = 2.0 * math.tan(-theta / 2)
    view_width = (width / height) * view_height
    w = (-look).normalized()
    u = v_up.cross(w).normalized()
    v = w.cross(u)
    centre = camera.eye - w
    lower_left = centre - u * (view_width / 2) - v * (view_height / 2.0)
    return Viewport(
        origin=camera.eye,
        lower_left=lower_left,
        u=u,
        v=v,
        width=view_width,
        height=view_height,
        x_res=width,
        y_res=height,
    )