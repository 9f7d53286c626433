# src/materials/dielectric.py
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, refract, reflectance
from materials.material import Material

# Glass doesn't absorb light
_CLEAR = Vector3(1.0, 1.0, 1.0)

class Dielectric(Material):
    """
    Clear refractive material (glass, water) with index of refraction ``ref_idx``.
    """
    def __init__(self, ref_idx: float):
        super().__init__()
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec, rng) -> Optional[Tuple[Vector3, Ray]]:
        # Determine if we're entering or exiting the material
        ni_over_nt = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)

        refracted = refract(unit_direction, rec.normal, ni_over_nt)
        if refracted is None:
            # Total internal reflection: must reflect
            direction = reflect(unit_direction, rec.normal)
        elif rng.random() < reflectance(cos_theta, ni_over_nt):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refracted

        return _CLEAR, Ray(rec.p, direction, ray_in.time)
