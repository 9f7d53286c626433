# src/geometry/world.py
from typing import Iterable, List, Optional
from core.aabb import AABB
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from geometry.bvh import BVHNode

class HittableList(Hittable):
    """
    An unordered collection of Hittable objects hit-tested by linear scan.
    Call ``build_bvh`` to get an accelerated view over the same objects.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self, rng):
        """Build a BVH over the current objects (see ``BVHNode.build``)."""
        return BVHNode.build(self.objects, rng)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        # Shrink the window to the closest hit so far so only the nearest survives
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far, rng)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> Optional[AABB]:
        box = AABB.empty()
        for obj in self.objects:
            obj_box = obj.bounding_box()
            if obj_box is None:
                return None
            box = box.merge(obj_box)
        return box
