"""Hittable primitives, participating media and the BVH."""
