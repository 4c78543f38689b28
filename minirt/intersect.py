"""Ray intersections with scene objects and surface normals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from minirt.scene import Cylinder, Plane, SceneObject, Sphere, Square, Triangle
from minirt.vectors import Ray, Vec3

_EPSILON = 1e-7


@dataclass(frozen=True)
class Hit:
    """An intersection of a ray with ``obj`` at distance ``t``.

    ``m`` is the position along a cylinder's axis of the hit point; it is
    zero for every other kind of object.
    """

    obj: SceneObject
    t: float
    m: float = 0.0


def _quadratic_roots(a: float, b: float, c: float) -> Optional[Tuple[float, float]]:
    """Return the two roots of ``a*t^2 + b*t + c``, nearest formula first."""
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0 or a == 0.0:
        return None
    root = math.sqrt(discriminant)
    return (-b - root) / (2.0 * a), (-b + root) / (2.0 * a)


def intersect_sphere(sphere: Sphere, ray: Ray) -> Optional[Hit]:
    """Intersect ``ray`` with ``sphere``, preferring the nearer positive root."""
    direction = ray.direction
    oc = ray.origin - sphere.center
    roots = _quadratic_roots(
        direction.dot(direction),
        2.0 * direction.dot(oc),
        oc.dot(oc) - sphere.radius * sphere.radius,
    )
    if roots is None:
        return None
    near, far = roots
    t = near if near > 0 else far
    if t < 0:
        return None
    return Hit(sphere, t)


def intersect_plane(plane: Plane, ray: Ray) -> Optional[Hit]:
    """Intersect ``ray`` with an infinite plane.

    The ray must start strictly off the plane and head towards it.
    """
    dist_dot_n = (ray.origin - plane.point).dot(plane.normal)
    d_dot_n = ray.direction.dot(plane.normal)
    if d_dot_n == 0.0:
        return None
    if not ((d_dot_n > 0 and dist_dot_n < 0) or (d_dot_n < 0 and dist_dot_n > 0)):
        return None
    t = -(dist_dot_n / d_dot_n)
    if t < 0.0:
        return None
    return Hit(plane, t)


def _support_plane_t(point: Vec3, normal: Vec3, ray: Ray) -> Optional[float]:
    d_dot_n = ray.direction.dot(normal)
    if d_dot_n == 0:
        return None
    t = -(ray.origin - point).dot(normal) / d_dot_n
    if t < 0:
        return None
    return t


def intersect_square(square: Square, ray: Ray) -> Optional[Hit]:
    """Intersect ``ray`` with a square lying in the plane of its normal."""
    t = _support_plane_t(square.center, square.normal, ray)
    if t is None:
        return None
    offset = square.center - ray.at(t)
    half = square.side / 2
    if all(abs(c) <= half for c in offset):
        return Hit(square, t)
    return None


def intersect_triangle(triangle: Triangle, ray: Ray) -> Optional[Hit]:
    """Intersect ``ray`` with ``triangle`` (Möller–Trumbore)."""
    edge1 = triangle.second - triangle.first
    edge2 = triangle.third - triangle.first
    pvec = ray.direction.cross(edge2)
    det = edge1.dot(pvec)
    if abs(det) < _EPSILON:
        return None
    inv_det = 1.0 / det
    tvec = ray.origin - triangle.first
    u = tvec.dot(pvec) * inv_det
    if u < 0.0 or u > 1.0:
        return None
    qvec = tvec.cross(edge1)
    v = ray.direction.dot(qvec) * inv_det
    if v < 0.0 or u + v > 1.0:
        return None
    t = edge2.dot(qvec) * inv_det
    if t > _EPSILON:
        return Hit(triangle, t)
    return None


def intersect_cylinder(cylinder: Cylinder, ray: Ray) -> Optional[Hit]:
    """Intersect ``ray`` with the side of a finite, open cylinder.

    The first root whose axial position lies within the height is taken,
    even when it lies behind the ray origin.
    """
    axis = cylinder.normal
    direction = ray.direction
    oc = ray.origin - cylinder.position
    d_n = direction.dot(axis)
    oc_n = oc.dot(axis)
    radius = cylinder.diameter / 2
    roots = _quadratic_roots(
        1 - d_n**2,
        2 * (direction.dot(oc) - d_n * oc_n),
        oc.dot(oc) - oc_n**2 - radius**2,
    )
    if roots is None:
        return None
    for t in roots:
        m = d_n * t + oc_n
        if 0 <= m <= cylinder.height:
            return Hit(cylinder, t, m)
    return None


def intersect(obj: SceneObject, ray: Ray) -> Optional[Hit]:
    """Intersect ``ray`` with any scene object."""
    match obj:
        case Sphere():
            return intersect_sphere(obj, ray)
        case Plane():
            return intersect_plane(obj, ray)
        case Square():
            return intersect_square(obj, ray)
        case Triangle():
            return intersect_triangle(obj, ray)
        case Cylinder():
            return intersect_cylinder(obj, ray)
    return None


def closest_hit(
    objects: Iterable[SceneObject],
    ray: Ray,
    exclude: Optional[SceneObject] = None,
) -> Optional[Hit]:
    """Return the nearest non-negative hit among ``objects``.

    ``exclude`` (compared by identity) is skipped. On equal distances the
    object met first wins.
    """
    best: Optional[Hit] = None
    for obj in objects:
        if obj is exclude:
            continue
        hit = intersect(obj, ray)
        if hit is None or hit.t < 0:
            continue
        if best is None or hit.t < best.t:
            best = hit
    return best


def normal_at(obj: SceneObject, point: Vec3, ray: Ray, m: float = 0.0) -> Vec3:
    """Return the unit surface normal of ``obj`` at ``point``.

    Triangle and cylinder normals are turned to face against ``ray``;
    ``m`` is the axial position of a cylinder hit.
    """
    match obj:
        case Sphere():
            normal = point - obj.center
        case Plane():
            normal = obj.normal
        case Square():
            normal = obj.normal
        case Triangle():
            normal = (obj.second - obj.first).cross(obj.third - obj.first)
            if ray.direction.dot(normal) > 0:
                normal = -normal
        case Cylinder():
            normal = (point - obj.position) - obj.normal * m
            if normal.dot(ray.direction) > 0:
                normal = -normal
        case _:
            raise TypeError(f"not a scene object: {obj!r}")
    return normal.normalized()