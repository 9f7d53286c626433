# materials/lambertian.py

from typing import Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_unit_vector
from materials.material import Material
from materials.textures import Texture, as_texture

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__()
        # Store either a solid color or a texture.
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec, rng) -> Tuple[Vector3, Ray]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (attenuation, scattered_ray).
        """
        # Normal plus a uniform unit vector gives a cosine-weighted direction.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal
        else:
            scatter_direction = scatter_direction.normalize()

        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        attenuation = self.texture.sample(rec.u, rec.v, rec.p)
        return attenuation, scattered
