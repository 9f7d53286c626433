# src/geometry/bvh.py
import logging
from typing import List, Optional
from core.aabb import AABB
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

class SceneBuildError(ValueError):
    """Raised when a scene graph cannot be built from the given primitives."""

class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy node.

    Children are either further BVHNodes or primitives. A node built over a
    single primitive holds it as both children, so traversal never needs a
    leaf case. Nodes are read-only once built.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int, rng):
        # Sort the span along a random axis by each box's minimum corner
        axis = int(rng.integers(0, 3))
        objects[start:end] = sorted(objects[start:end],
                                    key=lambda obj: obj.bounding_box().minimum[axis])

        object_span = end - start
        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            self.left = objects[start]
            self.right = objects[start + 1]
        else:
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, rng)
            self.right = BVHNode(objects, mid, end, rng)

        self.box = self.left.bounding_box().merge(self.right.bounding_box())

    @classmethod
    def build(cls, objects: List[Hittable], rng) -> "BVHNode":
        """
        Build a hierarchy over ``objects``.

        Raises SceneBuildError if fewer than two objects are given or any of
        them has no bounding box. Split axes are drawn from ``rng``; the
        caller's list is not reordered.
        """
        if len(objects) < 2:
            raise SceneBuildError(
                f"BVH needs at least 2 primitives, got {len(objects)}")
        for obj in objects:
            if obj.bounding_box() is None:
                raise SceneBuildError(
                    f"{type(obj).__name__} has no bounding box and cannot be put in a BVH")

        root = cls(list(objects), 0, len(objects), rng)
        logger.debug("Built BVH over %d primitives, %d nodes", len(objects), root.node_count())
        return root

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max, rng)
        if hit_left is None:
            return self.right.hit(ray, t_min, t_max, rng)

        # Anything the right side finds below hit_left.t is closer (or a tie)
        hit_right = self.right.hit(ray, t_min, hit_left.t, rng)
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def node_count(self) -> int:
        count = 1
        if isinstance(self.left, BVHNode):
            count += self.left.node_count()
        if isinstance(self.right, BVHNode) and self.right is not self.left:
            count += self.right.node_count()
        return count
