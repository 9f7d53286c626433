# materials/metal.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_in_unit_sphere
from materials.material import Material
from materials.textures import Texture, as_texture

class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    ``fuzz`` in [0, 1] blurs the reflection; 0 is a perfect mirror.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        super().__init__()
        self.texture = as_texture(albedo)
        self.fuzz = max(0.0, min(fuzz, 1.0))

    def scatter(self, ray_in: Ray, rec, rng) -> Optional[Tuple[Vector3, Ray]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        direction = (reflected + random_in_unit_sphere(rng) * self.fuzz).normalize()

        if direction.dot(rec.normal) > 0:
            attenuation = self.texture.sample(rec.u, rec.v, rec.p)
            return attenuation, Ray(rec.p, direction, ray_in.time)

        return None  # Absorb the ray if it does not scatter forward
