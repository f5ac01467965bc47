# main.py
import argparse
import logging
import signal
import sys
import threading
from core.errors import RenderCancelled
from core.logging_config import setup_logging
from renderer.image_output import save_image
from renderer.raytracer import Renderer
from renderer.settings import RenderSettings
from scenes.builders import SCENES, get_scene_builder

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Offline path tracer")
    parser.add_argument("--scene", choices=sorted(SCENES), default="random_spheres",
                        help="Scene to render")
    parser.add_argument("--width", type=int, default=400, help="Image width in pixels")
    parser.add_argument("--height", type=int, default=225, help="Image height in pixels")
    parser.add_argument("--samples", type=int, default=100, help="Samples per pixel")
    parser.add_argument("--depth", type=int, default=50, help="Maximum bounces per path")
    parser.add_argument("--workers", type=int, default=1, help="Worker processes")
    parser.add_argument("--tile-rows", type=int, default=16, help="Image rows per tile")
    parser.add_argument("--seed", type=int, default=None, help="Base random seed")
    parser.add_argument("--texture", default=None, help="Image used by the earth scene")
    parser.add_argument("--output", default="image.ppm",
                        help="Output file; .ppm writes P3 text, other extensions go through Pillow")
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING or ERROR")
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        settings = RenderSettings(width=args.width, height=args.height,
                                  samples_per_pixel=args.samples, max_depth=args.depth,
                                  workers=args.workers, tile_rows=args.tile_rows, seed=args.seed)
        builder = get_scene_builder(args.scene, seed=args.seed, texture_path=args.texture)
        world = builder.build_scene()
    except (ValueError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 2

    camera = builder.create_camera(settings.aspect_ratio)
    renderer = Renderer(settings)

    # Ctrl-C stops the render between tiles instead of killing it mid-write.
    cancel_event = threading.Event()
    previous_handler = signal.signal(signal.SIGINT, lambda signum, frame: cancel_event.set())
    try:
        renderer.render(world, camera, builder.background, cancel_event=cancel_event)
    except RenderCancelled:
        logger.warning("Interrupted, no image written")
        return 130
    finally:
        signal.signal(signal.SIGINT, previous_handler)

    save_image(args.output, renderer.to_image())
    return 0

if __name__ == "__main__":
    sys.exit(main())
