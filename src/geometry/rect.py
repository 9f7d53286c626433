# geometry/rect.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord

# Half thickness given to the flat axis of a rectangle's bounding box so the
# slab test never sees a zero-width interval.
RECT_PADDING = 0.0001

class AARect(Hittable):
    """
    Axis-aligned rectangle lying in the plane ``axis == k``.

    ``axis0``/``axis1`` are the two free axes, spanning [min0, max0] and
    [min1, max1]. Use the XYRect, XZRect and YZRect subclasses.
    """
    axis0 = 0
    axis1 = 1
    axis = 2

    def __init__(self, min0: float, max0: float, min1: float, max1: float,
                 k: float, material):
        self.min0 = min0
        self.max0 = max0
        self.min1 = min1
        self.max1 = max1
        self.k = k
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        d = ray.direction[self.axis]
        if d == 0.0:
            return None
        t = (self.k - ray.origin[self.axis]) / d
        if t < t_min or t > t_max:
            return None

        a = ray.origin[self.axis0] + ray.direction[self.axis0] * t
        b = ray.origin[self.axis1] + ray.direction[self.axis1] * t
        if a < self.min0 or a > self.max0 or b < self.min1 or b > self.max1:
            return None

        u = (a - self.min0) / (self.max0 - self.min0)
        v = (b - self.min1) / (self.max1 - self.min1)
        return HitRecord(ray, t, ray.at(t), self._outward_normal(),
                         self.material, u, v)

    def _outward_normal(self) -> Vector3:
        n = [0.0, 0.0, 0.0]
        n[self.axis] = 1.0
        return Vector3(*n)

    def bounding_box(self) -> AABB:
        lo = [0.0, 0.0, 0.0]
        hi = [0.0, 0.0, 0.0]
        lo[self.axis0], hi[self.axis0] = self.min0, self.max0
        lo[self.axis1], hi[self.axis1] = self.min1, self.max1
        lo[self.axis], hi[self.axis] = self.k - RECT_PADDING, self.k + RECT_PADDING
        return AABB(Vector3(*lo), Vector3(*hi))

class XYRect(AARect):
    """Rectangle in the plane z = k."""
    axis0, axis1, axis = 0, 1, 2

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(x0, x1, y0, y1, k, material)

class XZRect(AARect):
    """Rectangle in the plane y = k."""
    axis0, axis1, axis = 0, 2, 1

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(x0, x1, z0, z1, k, material)

class YZRect(AARect):
    """Rectangle in the plane x = k."""
    axis0, axis1, axis = 1, 2, 0

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(y0, y1, z0, z1, k, material)
