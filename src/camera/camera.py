# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray
from core.utils import random_in_unit_disk

class Camera:
    """
    Thin-lens camera looking from ``look_from`` toward ``look_at``.

    ``vfov`` is the vertical field of view in degrees. Rays carry a time
    sample drawn from [0, shutter_duration) for motion blur.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0, shutter_duration: float = 0.0):
        self.position = look_from
        self.look_at = look_at
        self.vup = vup
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.shutter_duration = shutter_duration
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        viewport_height = 2.0 * math.tan(math.radians(self.vfov) / 2)
        viewport_width = self.aspect_ratio * viewport_height

        # w points backwards, away from the scene
        self.w = (self.position - self.look_at).normalize()
        self.right = self.vup.cross(self.w).normalize()
        self.up = self.w.cross(self.right)

        # Scale by focus distance
        self.horizontal = self.right * viewport_width * self.focus_dist
        self.vertical = self.up * viewport_height * self.focus_dist

        self.lower_left_corner = (self.position -
                               self.horizontal * 0.5 -
                               self.vertical * 0.5 -
                               self.w * self.focus_dist)

    def get_ray(self, u: float, v: float, rng) -> Ray:
        """Generates a ray through image coordinates (u, v) in [0, 1]."""
        if self.lens_radius > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            offset = self.right * rd.x + self.up * rd.y
        else:
            offset = Vector3(0, 0, 0)

        ray_origin = self.position + offset
        ray_direction = (self.lower_left_corner +
                       self.horizontal * u +
                       self.vertical * v -
                       ray_origin).normalize()

        time = float(rng.uniform(0.0, self.shutter_duration)) if self.shutter_duration > 0 else 0.0
        return Ray(ray_origin, ray_direction, time)
