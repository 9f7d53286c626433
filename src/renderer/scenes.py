# renderer/scenes.py
import logging
from dataclasses import dataclass
from core.vector import Vector3
from camera.camera import Camera
from geometry.box import AABox
from geometry.hittable import Hittable
from geometry.medium import ConstantMedium
from geometry.rect import XYRect, XZRect, YZRect
from geometry.sphere import AnimatedSphere, Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import ColorPresets, DielectricPresets, LightPresets, MetalPresets, TexturePresets
from renderer.integrator import GradientSky, SolidBackground

logger = logging.getLogger(__name__)

@dataclass
class Scene:
    world: Hittable
    camera: Camera
    background: object

def _finish(objects: HittableList, rng) -> Hittable:
    if len(objects) < 2:
        return objects
    world = objects.build_bvh(rng)
    logger.info("Scene has %d primitives, %d BVH nodes", len(objects), world.node_count())
    return world

def simple_scene(aspect_ratio: float, rng) -> Scene:
    """A diffuse sphere resting on a large ground sphere under a sky."""
    objects = HittableList()
    objects.add(Sphere(Vector3(0, 0, -1), 0.5, ColorPresets.matte(Vector3(0.7, 0.3, 0.3))))
    objects.add(Sphere(Vector3(0, -100.5, -1), 100, ColorPresets.matte(Vector3(0.8, 0.8, 0.0))))
    camera = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), Vector3(0, 1, 0),
                    90, aspect_ratio)
    return Scene(_finish(objects, rng), camera, GradientSky())

def random_scene(aspect_ratio: float, rng, grid: int = 5) -> Scene:
    """
    Checkered ground scattered with small random spheres (some moving) and
    three large ones: glass, diffuse and metal.
    """
    objects = HittableList()
    objects.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(TexturePresets.checkerboard())))

    for a in range(-grid, grid):
        for b in range(-grid, grid):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * float(rng.random()), 0.2, b + 0.9 * float(rng.random()))
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = Vector3(*(float(c) for c in rng.random(3) * rng.random(3)))
                center1 = center + Vector3(0, float(rng.uniform(0, 0.5)), 0)
                objects.add(AnimatedSphere(center, center1, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = Vector3(*(float(c) for c in rng.uniform(0.5, 1.0, 3)))
                objects.add(Sphere(center, 0.2, Metal(albedo, float(rng.uniform(0, 0.5)))))
            else:
                objects.add(Sphere(center, 0.2, DielectricPresets.glass()))

    objects.add(Sphere(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()))
    objects.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    objects.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.mirror()))

    camera = Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), Vector3(0, 1, 0),
                    20, aspect_ratio, aperture=0.1, focus_dist=10.0,
                    shutter_duration=1.0)
    return Scene(_finish(objects, rng), camera, GradientSky())

def _cornell_walls(objects: HittableList, light: Hittable):
    red = ColorPresets.matte(ColorPresets.RED)
    white = ColorPresets.matte(ColorPresets.WHITE)
    green = ColorPresets.matte(ColorPresets.GREEN)

    objects.add(YZRect(0, 555, 0, 555, 555, green))
    objects.add(YZRect(0, 555, 0, 555, 0, red))
    objects.add(light)
    objects.add(XZRect(0, 555, 0, 555, 0, white))
    objects.add(XZRect(0, 555, 0, 555, 555, white))
    objects.add(XYRect(0, 555, 0, 555, 555, white))
    return white

def _cornell_camera(aspect_ratio: float) -> Camera:
    return Camera(Vector3(278, 278, -800), Vector3(278, 278, 0), Vector3(0, 1, 0),
                  40, aspect_ratio)

def cornell_scene(aspect_ratio: float, rng) -> Scene:
    """The Cornell box: colored walls, a ceiling light and two white boxes."""
    objects = HittableList()
    white = _cornell_walls(objects, XZRect(213, 343, 227, 332, 554, LightPresets.ceiling_light()))
    objects.add(AABox(Vector3(130, 0, 65), Vector3(295, 165, 230), white))
    objects.add(AABox(Vector3(265, 0, 295), Vector3(430, 330, 460), white))
    return Scene(_finish(objects, rng), _cornell_camera(aspect_ratio),
                 SolidBackground(Vector3(0, 0, 0)))

def cornell_smoke_scene(aspect_ratio: float, rng) -> Scene:
    """Cornell box whose two boxes are filled with dark and light smoke."""
    objects = HittableList()
    white = _cornell_walls(objects, XZRect(113, 443, 127, 432, 554, LightPresets.ceiling_light(7.0)))
    box1 = AABox(Vector3(130, 0, 65), Vector3(295, 165, 230), white)
    box2 = AABox(Vector3(265, 0, 295), Vector3(430, 330, 460), white)
    objects.add(ConstantMedium(box1, 0.01, Vector3(0, 0, 0)))
    objects.add(ConstantMedium(box2, 0.01, Vector3(1, 1, 1)))
    return Scene(_finish(objects, rng), _cornell_camera(aspect_ratio),
                 SolidBackground(Vector3(0, 0, 0)))

SCENES = {
    "simple": simple_scene,
    "random": random_scene,
    "cornell": cornell_scene,
    "cornell_smoke": cornell_smoke_scene,
}

def build_scene(name: str, aspect_ratio: float, rng) -> Scene:
    try:
        builder = SCENES[name]
    except KeyError:
        raise ValueError(f"Unknown scene {name!r}; choose from {', '.join(SCENES)}") from None
    return builder(aspect_ratio, rng)
