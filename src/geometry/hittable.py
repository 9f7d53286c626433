# geometry/hittable.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB

class HitRecord:
    """
    Records details of a ray-object intersection.

    The stored normal always points against the incoming ray; ``front_face``
    tells whether the geometric outward normal already did.
    """
    __slots__ = ("t", "p", "normal", "front_face", "material", "u", "v")

    def __init__(self, ray: Ray, t: float, p: Vector3, outward_normal: Vector3,
                 material, u: float = 0.0, v: float = 0.0):
        self.t = t              # Ray parameter at intersection
        self.p = p              # Intersection point
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal
        self.material = material
        self.u = u
        self.v = v

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, p={self.p}, normal={self.normal}, "
                f"front_face={self.front_face})")

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> Optional[AABB]:
        """Box enclosing the object, or None if it is unbounded."""
        return None
