import math

import pytest

from core.aabb import AABB
from core.ray import Ray
from core.vector import Vector3
from geometry.box import AABox
from geometry.rect import RECT_PADDING, XYRect, XZRect, YZRect
from materials.lambertian import Lambertian

MATERIAL = Lambertian(Vector3(0.5, 0.5, 0.5))


def test_xy_rect_hit():
    rect = XYRect(0, 1, 0, 1, -1, MATERIAL)
    rec = rect.hit(Ray(Vector3(0.5, 0.25, 0), Vector3(0, 0, -1)), 0.001, math.inf)
    assert rec.t == pytest.approx(1.0)
    assert rec.p == Vector3(0.5, 0.25, -1)
    assert rec.normal == Vector3(0, 0, 1)
    assert rec.front_face
    assert (rec.u, rec.v) == (0.5, 0.25)
    assert rec.material is MATERIAL


def test_xz_rect_maps_free_axes_to_uv():
    rect = XZRect(0, 2, 0, 4, 1, MATERIAL)
    rec = rect.hit(Ray(Vector3(1, 5, 3), Vector3(0, -1, 0)), 0.001, math.inf)
    assert rec.t == pytest.approx(4.0)
    assert (rec.u, rec.v) == (pytest.approx(0.5), pytest.approx(0.75))
    assert rec.normal == Vector3(0, 1, 0)


def test_yz_rect_back_face_flips_normal():
    rect = YZRect(0, 1, 0, 1, 3, MATERIAL)
    rec = rect.hit(Ray(Vector3(0, 0.5, 0.5), Vector3(1, 0, 0)), 0.001, math.inf)
    assert rec.t == pytest.approx(3.0)
    assert not rec.front_face
    assert rec.normal == Vector3(-1, 0, 0)


def test_rect_misses_outside_extent_window_and_when_parallel():
    rect = XYRect(0, 1, 0, 1, -1, MATERIAL)
    assert rect.hit(Ray(Vector3(2, 0.5, 0), Vector3(0, 0, -1)), 0.001, math.inf) is None
    assert rect.hit(Ray(Vector3(0.5, 0.5, 0), Vector3(0, 0, -1)), 0.001, 0.5) is None
    assert rect.hit(Ray(Vector3(0.5, 0.5, 0), Vector3(1, 0, 0)), 0.001, math.inf) is None


def test_rect_bounding_box_is_padded_along_fixed_axis():
    box = XZRect(0, 2, 0, 4, 1, MATERIAL).bounding_box()
    assert box == AABB(Vector3(0, 1 - RECT_PADDING, 0), Vector3(2, 1 + RECT_PADDING, 4))
    assert box.minimum.y < box.maximum.y
    # A ray grazing through the plane region still passes the slab test
    assert box.hit(Ray(Vector3(1, 5, 3), Vector3(0, -1, 0)), 0.001, math.inf)


def test_box_returns_nearest_face():
    box = AABox(Vector3(0, 0, 0), Vector3(1, 1, 1), MATERIAL)
    rec = box.hit(Ray(Vector3(0.5, 0.5, 5), Vector3(0, 0, -1)), 0.001, math.inf)
    assert rec.t == pytest.approx(4.0)
    assert rec.p.z == pytest.approx(1.0)
    assert rec.normal == Vector3(0, 0, 1)


def test_box_hit_from_inside():
    box = AABox(Vector3(0, 0, 0), Vector3(1, 1, 1), MATERIAL)
    rec = box.hit(Ray(Vector3(0.5, 0.5, 0.5), Vector3(1, 0, 0)), 0.001, math.inf)
    assert rec.t == pytest.approx(0.5)
    assert not rec.front_face


def test_box_miss_and_bounding_box():
    box = AABox(Vector3(-1, 0, 2), Vector3(1, 3, 4), MATERIAL)
    assert box.hit(Ray(Vector3(5, 5, 5), Vector3(1, 0, 0)), 0.001, math.inf) is None
    assert box.bounding_box() == AABB(Vector3(-1, 0, 2), Vector3(1, 3, 4))
    assert len(box.sides) == 6
