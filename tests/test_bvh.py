import math

import numpy as np
import pytest

from core.aabb import AABB
from core.ray import Ray
from core.utils import random_unit_vector
from core.vector import Vector3
from geometry.box import AABox
from geometry.bvh import BVHNode, SceneBuildError
from geometry.hittable import Hittable
from geometry.rect import XZRect
from geometry.sphere import AnimatedSphere, Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian


class Plane(Hittable):
    """Unbounded test primitive."""

    def hit(self, ray, t_min, t_max, rng=None):
        return None


def sphere_grid(rng, n=6):
    # Disjoint spheres on a jittered lattice, each with its own material
    spheres = []
    for i in range(n):
        for j in range(n):
            for k in range(n):
                center = Vector3(i * 3.0, j * 3.0, k * 3.0) + Vector3(
                    *(float(x) for x in rng.uniform(-0.4, 0.4, 3)))
                radius = float(rng.uniform(0.3, 1.0))
                spheres.append(Sphere(center, radius, Lambertian(Vector3(0.5, 0.5, 0.5))))
    return spheres


def assert_same_hit(expected, actual):
    if expected is None:
        assert actual is None
        return
    assert actual is not None
    assert actual.t == pytest.approx(expected.t)
    assert tuple(actual.p) == pytest.approx(tuple(expected.p))
    assert actual.material is expected.material
    assert actual.front_face == expected.front_face


def test_bvh_matches_linear_scan(rng):
    objects = sphere_grid(rng)
    linear = HittableList(objects)
    bvh = BVHNode.build(objects, rng)

    windows = [(0.001, math.inf), (0.001, 5.0), (2.0, 12.0)]
    hits = 0
    for _ in range(300):
        origin = Vector3(*(float(x) for x in rng.uniform(-5, 20, 3)))
        direction = random_unit_vector(rng)
        for t_min, t_max in windows:
            ray = Ray(origin, direction)
            expected = linear.hit(ray, t_min, t_max)
            assert_same_hit(expected, bvh.hit(ray, t_min, t_max))
            hits += expected is not None
    assert hits > 0


def test_bvh_matches_linear_scan_for_rays_aimed_at_spheres(rng):
    objects = sphere_grid(rng, n=4)
    linear = HittableList(objects)
    bvh = linear.build_bvh(rng)
    for target in objects:
        origin = Vector3(-10.0, -10.0, -10.0)
        ray = Ray(origin, target.center - origin)
        expected = linear.hit(ray, 0.001, math.inf)
        assert expected is not None
        assert_same_hit(expected, bvh.hit(ray, 0.001, math.inf))


def test_bvh_over_mixed_primitives(rng):
    material = Lambertian(Vector3(0.2, 0.4, 0.6))
    objects = [
        Sphere(Vector3(0, 1, 0), 1.0, material),
        AnimatedSphere(Vector3(4, 1, 0), Vector3(4, 2, 0), 1.0, 0.5, material),
        AABox(Vector3(-3, 0, -1), Vector3(-2, 2, 1), material),
        XZRect(-10, 10, -10, 10, 0, material),
    ]
    linear = HittableList(objects)
    bvh = BVHNode.build(objects, rng)
    for _ in range(500):
        origin = Vector3(float(rng.uniform(-8, 8)), float(rng.uniform(0.5, 6)),
                         float(rng.uniform(-8, 8)))
        ray = Ray(origin, random_unit_vector(rng), time=float(rng.random()))
        assert_same_hit(linear.hit(ray, 0.001, math.inf), bvh.hit(ray, 0.001, math.inf))


def test_root_box_encloses_every_primitive(rng):
    objects = sphere_grid(rng, n=3)
    bvh = BVHNode.build(objects, rng)
    expected = AABB.empty()
    for obj in objects:
        expected = expected.merge(obj.bounding_box())
    assert bvh.bounding_box() == expected
    assert HittableList(objects).bounding_box() == expected


def test_build_leaves_callers_list_alone(rng):
    objects = sphere_grid(rng, n=3)
    before = list(objects)
    BVHNode.build(objects, rng)
    assert objects == before


def test_three_primitives_make_three_nodes(rng):
    material = Lambertian(Vector3(0.5, 0.5, 0.5))
    objects = [Sphere(Vector3(x, 0, 0), 0.5, material) for x in (0, 2, 4)]
    assert BVHNode.build(objects, rng).node_count() == 3


@pytest.mark.parametrize("count", [0, 1])
def test_too_few_primitives(rng, count):
    material = Lambertian(Vector3(0.5, 0.5, 0.5))
    objects = [Sphere(Vector3(0, 0, 0), 1.0, material)] * count
    with pytest.raises(SceneBuildError):
        BVHNode.build(objects, rng)


def test_unbounded_primitive_rejected(rng):
    material = Lambertian(Vector3(0.5, 0.5, 0.5))
    objects = [Sphere(Vector3(0, 0, 0), 1.0, material), Plane()]
    with pytest.raises(SceneBuildError):
        BVHNode.build(objects, rng)
    assert HittableList(objects).bounding_box() is None


def test_build_requires_a_generator(rng):
    objects = sphere_grid(rng, n=2)
    with pytest.raises(TypeError):
        BVHNode.build(objects)
    with pytest.raises(TypeError):
        HittableList(objects).build_bvh()


def test_same_generator_seed_builds_same_tree():
    objects = sphere_grid(np.random.default_rng(5), n=3)
    first = BVHNode.build(objects, np.random.default_rng(11))
    second = BVHNode.build(objects, np.random.default_rng(11))

    def leaves(node):
        if not isinstance(node, BVHNode):
            return [node]
        if node.left is node.right:
            return leaves(node.left)
        return leaves(node.left) + leaves(node.right)

    assert leaves(first) == leaves(second)


def test_scene_build_error_is_a_value_error():
    assert issubclass(SceneBuildError, ValueError)
