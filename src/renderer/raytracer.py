# renderer/raytracer.py
import logging
import time
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Tuple
import numpy as np
from tqdm import tqdm
from core.vector import Vector3
from renderer.integrator import GradientSky, radiance
from renderer.settings import RenderSettings

logger = logging.getLogger(__name__)

# Rows handed to a worker at a time. Each band owns its own random stream.
BAND_HEIGHT = 8

# Scene installed in each pool process by _init_worker
_worker_scene = None

def _render_band(scene, settings: RenderSettings, row_start: int, row_end: int,
                 seed_seq: np.random.SeedSequence) -> Tuple[int, np.ndarray]:
    """Average ``samples_per_pixel`` paths for every pixel in rows [row_start, row_end)."""
    world, camera, background = scene
    rng = np.random.default_rng(seed_seq)
    width, height = settings.width, settings.height
    spp = settings.samples_per_pixel
    band = np.zeros((row_end - row_start, width, 3), dtype=np.float64)

    for row in range(row_start, row_end):
        # Row 0 is the top of the image; v grows upward
        j = height - 1 - row
        for i in range(width):
            color = Vector3(0.0, 0.0, 0.0)
            for _ in range(spp):
                u = (i + rng.random()) / (width - 1)
                v = (j + rng.random()) / (height - 1)
                ray = camera.get_ray(float(u), float(v), rng)
                color = color + radiance(ray, world, settings.max_depth, rng, background)
            band[row - row_start, i] = (color.x / spp, color.y / spp, color.z / spp)
    return row_start, band

def _init_worker(scene):
    global _worker_scene
    _worker_scene = scene

def _render_band_in_worker(task):
    settings, row_start, row_end, seed_seq = task
    return _render_band(_worker_scene, settings, row_start, row_end, seed_seq)

class Renderer:
    """
    CPU path tracing driver.

    Splits the image into row bands, renders each with an independent random
    generator spawned from one seed, and reassembles the averaged linear
    radiance image. The same seed gives the same image for any worker count.
    """
    def __init__(self, settings: RenderSettings, background=None):
        self.settings = settings
        self.background = background if background is not None else GradientSky()

    def bands(self) -> List[Tuple[int, int]]:
        height = self.settings.height
        return [(start, min(start + BAND_HEIGHT, height))
                for start in range(0, height, BAND_HEIGHT)]

    def render(self, world, camera, seed: Optional[int] = None) -> np.ndarray:
        """Render ``world`` through ``camera`` into a (height, width, 3) float array."""
        settings = self.settings
        bands = self.bands()
        seeds = np.random.SeedSequence(seed).spawn(len(bands))
        tasks = [(settings, start, end, s) for (start, end), s in zip(bands, seeds)]
        scene = (world, camera, self.background)

        logger.info("Rendering %dx%d, %d samples/pixel, max depth %d, %d worker(s)",
                    settings.width, settings.height, settings.samples_per_pixel,
                    settings.max_depth, settings.workers)
        started = time.perf_counter()

        image = np.zeros((settings.height, settings.width, 3), dtype=np.float64)
        progress = tqdm(total=len(tasks), desc="Rendering", unit="band",
                        disable=not settings.show_progress)
        with progress:
            if settings.workers == 1:
                for task in tasks:
                    row_start, band = _render_band(scene, *task)
                    image[row_start:row_start + band.shape[0]] = band
                    progress.update(1)
            else:
                with ProcessPoolExecutor(max_workers=settings.workers,
                                         initializer=_init_worker,
                                         initargs=(scene,)) as executor:
                    for row_start, band in executor.map(_render_band_in_worker, tasks):
                        image[row_start:row_start + band.shape[0]] = band
                        progress.update(1)

        logger.info("Render finished in %.2fs", time.perf_counter() - started)
        return image
