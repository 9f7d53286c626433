import math

import pytest

from core.aabb import AABB
from core.ray import Ray
from core.vector import Vector3


def unit_box():
    return AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))


def random_box(rng):
    a = rng.uniform(-10, 10, 3)
    b = rng.uniform(-10, 10, 3)
    lo = [float(min(x, y)) for x, y in zip(a, b)]
    hi = [float(max(x, y)) for x, y in zip(a, b)]
    return AABB(Vector3(*lo), Vector3(*hi))


def test_hit_along_axis_with_zero_direction_components():
    ray = Ray(Vector3(-1, 0.5, 0.5), Vector3(1, 0, 0))
    assert unit_box().hit(ray, 0.0, math.inf)


def test_miss_when_parallel_ray_is_outside_slab():
    ray = Ray(Vector3(-1, 2, 0.5), Vector3(1, 0, 0))
    assert not unit_box().hit(ray, 0.0, math.inf)


def test_negative_direction_swaps_entry_and_exit():
    ray = Ray(Vector3(2, 0.5, 0.5), Vector3(-1, 0, 0))
    assert unit_box().hit(ray, 0.0, math.inf)


def test_box_behind_ray_is_missed():
    ray = Ray(Vector3(2, 0.5, 0.5), Vector3(1, 0, 0))
    assert not unit_box().hit(ray, 0.0, math.inf)


def test_interval_limits_are_respected():
    ray = Ray(Vector3(-1, 0.5, 0.5), Vector3(1, 0, 0))
    assert not unit_box().hit(ray, 0.0, 0.5)
    assert not unit_box().hit(ray, 2.5, math.inf)
    assert unit_box().hit(ray, 1.5, 1.7)


def test_diagonal_ray():
    ray = Ray(Vector3(-1, -1, -1), Vector3(1, 1, 1))
    assert unit_box().hit(ray, 0.0, math.inf)
    ray = Ray(Vector3(-1, -1, -1), Vector3(1, 1, -1))
    assert not unit_box().hit(ray, 0.0, math.inf)


def test_empty_box_is_invalid_and_never_hit():
    empty = AABB.empty()
    assert not empty.is_valid()
    assert unit_box().is_valid()
    assert not empty.hit(Ray(Vector3(0, 0, 0), Vector3(1, 1, 1)), -math.inf, math.inf)
    assert not empty.hit(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)), -math.inf, math.inf)


def test_merge_covers_both_boxes():
    a = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
    b = AABB(Vector3(-1, 0.5, 2), Vector3(0.5, 3, 4))
    assert a.merge(b) == AABB(Vector3(-1, 0, 0), Vector3(1, 3, 4))
    # Operands are untouched
    assert a == AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))


def test_merge_is_commutative_and_associative(rng):
    for _ in range(100):
        a, b, c = random_box(rng), random_box(rng), random_box(rng)
        assert a.merge(b) == b.merge(a)
        assert a.merge(b).merge(c) == a.merge(b.merge(c))


def test_empty_box_is_merge_identity(rng):
    for _ in range(20):
        a = random_box(rng)
        assert AABB.empty().merge(a) == a
        assert a.merge(AABB.empty()) == a


@pytest.mark.parametrize("perm", [(0, 1, 2), (0, 2, 1), (1, 0, 2), (1, 2, 0), (2, 0, 1), (2, 1, 0)])
def test_hit_does_not_depend_on_axis_order(rng, perm):
    def permuted(v):
        return Vector3(v[perm[0]], v[perm[1]], v[perm[2]])

    hits = 0
    for _ in range(300):
        box = random_box(rng)
        origin = Vector3(*(float(x) for x in rng.uniform(-15, 15, 3)))
        direction = Vector3(*(float(x) for x in rng.normal(size=3)))
        t_min = float(rng.uniform(-5, 5))
        t_max = t_min + float(rng.uniform(0, 40))
        ray = Ray(origin, direction)
        swapped_ray = Ray(permuted(origin), permuted(direction))
        swapped_box = AABB(permuted(box.minimum), permuted(box.maximum))

        expected = box.hit(ray, t_min, t_max)
        assert swapped_box.hit(swapped_ray, t_min, t_max) == expected
        hits += expected
    # The sample must exercise both outcomes to mean anything
    assert 0 < hits < 300
