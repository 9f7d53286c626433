# materials/material.py
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3

BLACK = Vector3(0.0, 0.0, 0.0)

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials are shared by every ray in the scene and hold no per-call state;
    all randomness comes from the ``rng`` passed in.
    """
    def __init__(self):
        self.texture = None

    def scatter(self, ray_in: Ray, rec, rng) -> Optional[Tuple[Vector3, Ray]]:
        """
        Computes the attenuation and scattered ray.
        Returns a tuple (attenuation, scattered_ray) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        """Light given off at the hit point. Non-emissive materials return black."""
        return BLACK
