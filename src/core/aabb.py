# src/core/aabb.py
import math
from core.vector import Vector3

class AABB:
    """
    Axis-aligned bounding box given by its minimum and maximum corners.

    Boxes are values: ``merge`` builds a new box and never modifies either
    operand.
    """
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    @staticmethod
    def empty() -> "AABB":
        """The box that contains nothing. Merging it with any box yields that box."""
        return AABB(Vector3(math.inf, math.inf, math.inf),
                    Vector3(-math.inf, -math.inf, -math.inf))

    def is_valid(self) -> bool:
        return (self.minimum.x <= self.maximum.x
                and self.minimum.y <= self.maximum.y
                and self.minimum.z <= self.maximum.z)

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: narrow [t_min, t_max] by each axis' entry/exit interval.
        for a in range(3):
            d = ray.direction[a]
            o = ray.origin[a]
            if d == 0.0:
                # Parallel to this slab: inside it for every t, or never.
                if o < self.minimum[a] or o > self.maximum[a]:
                    return False
                continue
            invD = 1.0 / d
            t0 = (self.minimum[a] - o) * invD
            t1 = (self.maximum[a] - o) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def merge(self, other: "AABB") -> "AABB":
        small = Vector3(
            min(self.minimum.x, other.minimum.x),
            min(self.minimum.y, other.minimum.y),
            min(self.minimum.z, other.minimum.z)
        )
        big = Vector3(
            max(self.maximum.x, other.maximum.x),
            max(self.maximum.y, other.maximum.y),
            max(self.maximum.z, other.maximum.z)
        )
        return AABB(small, big)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    def __hash__(self) -> int:
        return hash((self.minimum, self.maximum))

    def __repr__(self) -> str:
        return f"AABB({self.minimum}, {self.maximum})"
