# materials/textures.py
import logging
import math
import numpy as np
from PIL import Image
from core.vector import Vector3
from core.utils import clamp

logger = logging.getLogger(__name__)

# Returned by textures that have no data, so the problem shows in the image
DEBUG_COLOR = Vector3(0.0, 1.0, 1.0)

class Texture:
    """Base class for all textures."""
    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        """Sample the texture at texture coordinates (u, v) and hit point p."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color

class CheckerTexture(Texture):
    """
    A 3D checker pattern: alternates between two textures by the sign of
    sin(sx)·sin(sy)·sin(sz) at the hit point, so it is independent of UVs.
    """
    def __init__(self, odd, even, scale: float = 10.0):
        self.odd = as_texture(odd)
        self.even = as_texture(even)
        self.scale = scale

    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        sines = (math.sin(self.scale * p.x)
                 * math.sin(self.scale * p.y)
                 * math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.sample(u, v, p)
        return self.even.sample(u, v, p)

class ImageTexture(Texture):
    """A texture from an image file."""
    def __init__(self, image_path: str):
        self.image_path = image_path
        self.data = None
        self.width = 0
        self.height = 0
        try:
            with Image.open(image_path) as img:
                # Convert to RGB if necessary
                if img.mode != 'RGB':
                    img = img.convert('RGB')
                # Convert to numpy array for faster access
                self.data = np.asarray(img, dtype=np.float64) / 255.0  # Normalize to [0,1]
                self.width = img.width
                self.height = img.height
        except Exception as e:
            logger.warning("Could not load texture %s: %s; using debug color", image_path, e)

    def sample(self, u: float, v: float, p: Vector3) -> Vector3:
        if self.data is None:
            return DEBUG_COLOR

        u = clamp(u, 0.0, 1.0)
        v = 1.0 - clamp(v, 0.0, 1.0)  # Flip V: image rows run top to bottom

        # Convert to pixel coordinates
        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))

def as_texture(value) -> Texture:
    """Wrap a plain color in a SolidTexture; pass textures through."""
    if isinstance(value, Texture):
        return value
    if isinstance(value, Vector3):
        return SolidTexture(value)
    raise TypeError(f"Expected a Texture or Vector3 color, got {type(value).__name__}")
