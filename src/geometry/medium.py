# geometry/medium.py
import math
from typing import Optional, Union
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord
from materials.isotropic import Isotropic
from materials.material import Material
from materials.textures import Texture

# Any normal will do: the phase function inside ignores it
_ARBITRARY_NORMAL = Vector3(1.0, 0.0, 0.0)

class ConstantMedium(Hittable):
    """
    Homogeneous participating medium (smoke, fog) filling a convex boundary.

    A ray crossing the boundary scatters somewhere inside with probability
    governed by ``density``: free path lengths follow an exponential law with
    mean 1/density.
    """
    def __init__(self, boundary: Hittable, density: float,
                 phase: Union[Material, Texture, Vector3]):
        if not density > 0:
            raise ValueError(f"ConstantMedium density must be positive, got {density}")
        self.boundary = boundary
        self.density = density
        self.neg_inv_density = -1.0 / density
        self.phase_function = phase if isinstance(phase, Material) else Isotropic(phase)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if rng is None:
            raise ValueError("ConstantMedium.hit needs the caller's random generator")
        rec1 = self.boundary.hit(ray, -math.inf, math.inf, rng)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + 0.0001, math.inf, rng)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, t_min)
        t_exit = min(rec2.t, t_max)
        if t_enter >= t_exit:
            return None
        # The ray may start inside the medium
        t_enter = max(t_enter, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length

        # 1 - random() lies in (0, 1], so the log is finite
        hit_distance = self.neg_inv_density * math.log(1.0 - rng.random())
        if hit_distance > distance_inside_boundary:
            return None

        t = t_enter + hit_distance / ray_length
        return HitRecord(ray, t, ray.at(t), _ARBITRARY_NORMAL,
                         self.phase_function, 0.0, 0.0)

    def bounding_box(self) -> Optional[AABB]:
        return self.boundary.bounding_box()
