# geometry/box.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord
from geometry.rect import XYRect, XZRect, YZRect
from geometry.world import HittableList

class AABox(Hittable):
    """
    Axis-aligned box built from its six faces.
    """
    def __init__(self, p0: Vector3, p1: Vector3, material):
        self.box_min = p0
        self.box_max = p1
        self.material = material

        self.sides = HittableList()
        self.sides.add(XYRect(p0.x, p1.x, p0.y, p1.y, p1.z, material))
        self.sides.add(XYRect(p0.x, p1.x, p0.y, p1.y, p0.z, material))

        self.sides.add(XZRect(p0.x, p1.x, p0.z, p1.z, p1.y, material))
        self.sides.add(XZRect(p0.x, p1.x, p0.z, p1.z, p0.y, material))

        self.sides.add(YZRect(p0.y, p1.y, p0.z, p1.z, p1.x, material))
        self.sides.add(YZRect(p0.y, p1.y, p0.z, p1.z, p0.x, material))

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        return self.sides.hit(ray, t_min, t_max, rng)

    def bounding_box(self) -> AABB:
        return AABB(self.box_min, self.box_max)
