# renderer/integrator.py
import math
from typing import Optional
from core.ray import Ray
from core.vector import Vector3
from renderer.settings import HIT_EPSILON

BLACK = Vector3(0.0, 0.0, 0.0)

class SolidBackground:
    """Constant radiance for rays that escape the scene."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, ray: Ray) -> Vector3:
        return self.color

class GradientSky:
    """
    Sky that blends from ``bottom`` (looking straight down) to ``top``
    (looking straight up) by the ray's vertical direction.
    """
    def __init__(self, bottom: Optional[Vector3] = None, top: Optional[Vector3] = None):
        self.bottom = bottom if bottom is not None else Vector3(1.0, 1.0, 1.0)
        self.top = top if top is not None else Vector3(0.5, 0.7, 1.0)

    def value(self, ray: Ray) -> Vector3:
        unit_direction = ray.direction.normalize()
        t = 0.5 * (unit_direction.y + 1.0)
        return self.bottom * (1.0 - t) + self.top * t

def radiance(ray: Ray, world, depth: int, rng, background) -> Vector3:
    """
    Radiance arriving along ``ray`` estimated from one random light path.

    The path stops after ``depth`` surface interactions and contributes
    nothing beyond that. Each bounce adds the surface's own emission to its
    attenuation times the light arriving along the scattered ray.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, HIT_EPSILON, math.inf, rng)
    if rec is None:
        return background.value(ray)

    emitted = rec.material.emitted(rec.u, rec.v, rec.p)
    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None:
        return emitted

    attenuation, scattered = scatter
    return emitted + attenuation * radiance(scattered, world, depth - 1, rng, background)
