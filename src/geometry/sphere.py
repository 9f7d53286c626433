# geometry/sphere.py
import math
from typing import Optional, Tuple
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from core.aabb import AABB

def get_sphere_uv(p: Vector3) -> Tuple[float, float]:
    """
    Map a point on the unit sphere to texture coordinates.

    u is the longitude around the Y axis starting at -X, v the latitude
    from the south pole (v=0) to the north pole (v=1).
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi

def _intersect(ray: Ray, center: Vector3, radius: float,
               t_min: float, t_max: float) -> Optional[float]:
    oc = ray.origin - center
    a = ray.direction.length_squared()
    half_b = oc.dot(ray.direction)
    c = oc.dot(oc) - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0 or a == 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if root < t_min or root > t_max:
        root = (-half_b + sqrt_disc) / a
        if root < t_min or root > t_max:
            return None
    return root

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        root = _intersect(ray, self.center, self.radius, t_min, t_max)
        if root is None:
            return None

        p = ray.at(root)
        outward_normal = (p - self.center) / self.radius
        u, v = get_sphere_uv(outward_normal)
        return HitRecord(ray, root, p, outward_normal, self.material, u, v)

    def bounding_box(self) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3(self.radius, self.radius, self.radius)
        return AABB(self.center - offset, self.center + offset)

class AnimatedSphere(Hittable):
    """
    A sphere whose center moves linearly from ``center0`` to ``center1``
    over ``duration``, repeating. The ray's time picks the position.
    """
    def __init__(self, center0: Vector3, center1: Vector3, duration: float,
                 radius: float, material):
        if duration <= 0:
            raise ValueError(f"AnimatedSphere duration must be positive, got {duration}")
        self.center0 = center0
        self.center1 = center1
        self.duration = duration
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        f = (time % self.duration) / self.duration
        return self.center0 * (1.0 - f) + self.center1 * f

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        center = self.center(ray.time)
        root = _intersect(ray, center, self.radius, t_min, t_max)
        if root is None:
            return None

        p = ray.at(root)
        outward_normal = (p - center) / self.radius
        u, v = get_sphere_uv(outward_normal)
        return HitRecord(ray, root, p, outward_normal, self.material, u, v)

    def bounding_box(self) -> AABB:
        # Covers every position the sphere takes during one cycle
        offset = Vector3(self.radius, self.radius, self.radius)
        box0 = AABB(self.center0 - offset, self.center0 + offset)
        box1 = AABB(self.center1 - offset, self.center1 + offset)
        return box0.merge(box1)
