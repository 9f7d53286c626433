"""Vector math, rays, bounding boxes and sampling helpers."""
