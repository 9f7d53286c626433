# main.py
import argparse
import logging
import os
import sys
import numpy as np
from geometry.bvh import SceneBuildError
from renderer.image_writer import save_image
from renderer.raytracer import Renderer
from renderer.scenes import SCENES, build_scene
from renderer.settings import QUALITY_LEVELS, RenderSettings
from renderer.tone_mapping import TONE_MAPPERS

logger = logging.getLogger("path_tracer")

def _env_int(name: str):
    value = os.getenv(name)
    return int(value) if value else None

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Offline Monte-Carlo path tracer")
    parser.add_argument("--scene", choices=sorted(SCENES), default="simple",
                        help="Demo scene to render")
    parser.add_argument("--width", "-w", type=int, default=400, help="Image width")
    parser.add_argument("--height", type=int, default=225, help="Image height")
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS), default="balanced",
                        help="Preset for samples per pixel and bounces")
    parser.add_argument("--samples", "-s", type=int, default=None,
                        help="Samples per pixel (overrides --quality)")
    parser.add_argument("--depth", "-d", type=int, default=None,
                        help="Maximum bounces per path (overrides --quality)")
    parser.add_argument("--workers", "-j", type=int, default=_env_int("PATH_TRACER_WORKERS") or 1,
                        help="Worker processes (env PATH_TRACER_WORKERS)")
    parser.add_argument("--seed", type=int, default=_env_int("PATH_TRACER_SEED"),
                        help="Random seed for scene and render (env PATH_TRACER_SEED)")
    parser.add_argument("--tone-map", choices=sorted(TONE_MAPPERS), default="gamma",
                        help="How linear radiance is turned into 8-bit color")
    parser.add_argument("--output", "-o", default="output.png",
                        help="Output file; .ppm is written as plain text, other formats via Pillow")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    return parser.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    overrides = {
        "width": args.width,
        "height": args.height,
        "workers": args.workers,
        "show_progress": not args.no_progress,
    }
    if args.samples is not None:
        overrides["samples_per_pixel"] = args.samples
    if args.depth is not None:
        overrides["max_depth"] = args.depth

    try:
        settings = RenderSettings.from_quality(args.quality, **overrides)
        scene = build_scene(args.scene, settings.aspect_ratio, np.random.default_rng(args.seed))
    except (SceneBuildError, ValueError) as e:
        logger.error("%s", e)
        return 1

    image = Renderer(settings, scene.background).render(scene.world, scene.camera, args.seed)
    save_image(args.output, TONE_MAPPERS[args.tone_map](image))
    return 0

if __name__ == "__main__":
    sys.exit(main())
