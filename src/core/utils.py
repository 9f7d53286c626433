# core/utils.py
import math
from typing import Optional
from core.vector import Vector3

# Every sampler takes the caller's numpy Generator; nothing here touches
# global random state.

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(float(rng.uniform(-1, 1)),
                   float(rng.uniform(-1, 1)),
                   float(rng.uniform(-1, 1)))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere(rng)
        # Points too close to the origin lose their direction when normalized
        if p.length_squared() > 1e-160:
            return p.normalize()

def random_in_unit_disk(rng) -> Vector3:
    """Generate random point in unit disk for depth of field."""
    while True:
        p = Vector3(
            float(rng.uniform(-1, 1)),
            float(rng.uniform(-1, 1)),
            0
        )
        if p.dot(p) < 1:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(v: Vector3, n: Vector3, ni_over_nt: float) -> Optional[Vector3]:
    """
    Bends the unit vector v through a surface with normal n following
    Snell's law. Returns None on total internal reflection.
    """
    cos_theta = min(-v.dot(n), 1.0)
    sin_theta_sq = 1.0 - cos_theta * cos_theta
    if ni_over_nt * ni_over_nt * sin_theta_sq > 1.0:
        return None
    r_out_perp = (v + n * cos_theta) * ni_over_nt
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel

def reflectance(cos_theta: float, ref_idx: float) -> float:
    """Schlick's approximation of the Fresnel reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)

def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x
