# renderer/image_writer.py
import logging
from pathlib import Path
from typing import TextIO, Union
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

def write_ppm(out: TextIO, pixels: np.ndarray):
    """Write an (height, width, 3) uint8 image as a plain-text P3 PPM."""
    height, width, _ = pixels.shape
    out.write(f"P3 {width} {height}\n255\n")
    for row in pixels:
        for r, g, b in row:
            out.write(f"{r} {g} {b}\n")

def save_image(path: Union[str, Path], pixels: np.ndarray):
    """
    Save 8-bit pixels to ``path``. ``.ppm`` files are written as plain P3,
    any other extension goes through Pillow.
    """
    path = Path(path)
    if path.suffix.lower() == ".ppm":
        with path.open("w", encoding="ascii") as f:
            write_ppm(f, pixels)
    else:
        Image.fromarray(pixels).save(path)
    logger.info("Wrote %dx%d image to %s", pixels.shape[1], pixels.shape[0], path)
