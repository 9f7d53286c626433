# materials/presets.py
from core.vector import Vector3
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.textures import CheckerTexture

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def mirror() -> Metal:
        return Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

class LightPresets:
    """Emitters. Intensities above 1 are normal: lights are brighter than white."""

    @staticmethod
    def ceiling_light(intensity: float = 15.0) -> DiffuseLight:
        return DiffuseLight(Vector3(1.0, 1.0, 1.0) * intensity)

class ColorPresets:
    """Colors of the classic Cornell box and the checkered ground."""
    RED = Vector3(0.65, 0.05, 0.05)
    GREEN = Vector3(0.12, 0.45, 0.15)
    WHITE = Vector3(0.73, 0.73, 0.73)
    DARK_GREEN = Vector3(0.2, 0.3, 0.1)
    OFF_WHITE = Vector3(0.9, 0.9, 0.9)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

class TexturePresets:
    """Predefined texture presets."""

    @staticmethod
    def checkerboard(odd: Vector3 = None, even: Vector3 = None, scale: float = 10.0) -> CheckerTexture:
        """Create a checker texture with default or custom colors."""
        if odd is None:
            odd = ColorPresets.DARK_GREEN
        if even is None:
            even = ColorPresets.OFF_WHITE
        return CheckerTexture(odd, even, scale)
