# materials/diffuse_light.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from materials.material import Material
from materials.textures import Texture, as_texture

class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    The texture can be used to create patterns in the emitted light. Both
    faces emit.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec, rng) -> Optional[Tuple[Vector3, Ray]]:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        """
        Return the emitted radiance, which can be textured.

        Args:
            u (float): The horizontal texture coordinate.
            v (float): The vertical texture coordinate.
            p (Vector3): The hit point.

        Returns:
            Vector3: The emission color from the texture.
        """
        return self.texture.sample(u, v, p)
