#!/usr/bin/env python3
"""Render a preset scene to a PPM or PNG file.

This script demonstrates end-to-end rendering with portaltrace. It builds a
preset scene, traces it in parallel with optional Gaussian-filtered
oversampling and writes the result in the format implied by the output
file's suffix.

Usage:
    python -m examples.render_scene [options]

Options:
    --width WIDTH           Image width in pixels (default: 640)
    --height HEIGHT         Image height in pixels (default: 480)
    --oversampling N        Samples per pixel along each axis (default: 2)
    --max-depth DEPTH       Recursion limit for reflections and portals (default: 10)
    --workers N             Tracing threads or processes (default: Python's choice)
    --processes             Trace in worker processes instead of threads
    --scene NAME            Preset: classic, showcase or random (default: showcase)
    --seed SEED             Seed for the random preset
    --count COUNT           Sphere count for the random preset (default: 12)
    --output OUTPUT         Output file path, .ppm or .png (default: render.png)
    --log-level LEVEL       Logging level (default: INFO)
    --quiet                 Suppress progress output

Example:
    python -m examples.render_scene --scene random --seed 3 --width 320 --height 240
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from portaltrace.config import DEFAULT_MAX_DEPTH

logger = logging.getLogger("portaltrace.examples.render_scene")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    from portaltrace.scene.presets import PRESETS

    parser = argparse.ArgumentParser(
        description="Render a preset portaltrace scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=640,
        help="Image width in pixels (default: 640)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=480,
        help="Image height in pixels (default: 480)",
    )
    parser.add_argument(
        "--oversampling",
        type=int,
        default=2,
        help="Samples per pixel along each axis (default: 2)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Recursion limit for reflections and portals (default: {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Tracing threads or processes (default: Python's choice)",
    )
    parser.add_argument(
        "--processes",
        action="store_true",
        help="Trace in worker processes instead of threads",
    )
    parser.add_argument(
        "--scene",
        choices=sorted(PRESETS),
        default="showcase",
        help="Preset scene (default: showcase)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random preset",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=12,
        help="Sphere count for the random preset (default: 12)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="render.png",
        help="Output file path, .ppm or .png (default: render.png)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def render_scene(
    scene_name: str = "showcase",
    width: int = 640,
    height: int = 480,
    oversampling: int = 2,
    max_depth: int = DEFAULT_MAX_DEPTH,
    workers: int | None = None,
    use_processes: bool = False,
    seed: int | None = None,
    count: int = 12,
    output_path: str = "render.png",
    quiet: bool = False,
) -> Path:
    """Render a preset scene and save it to file.

    Args:
        scene_name: Preset name, one of PRESETS.
        width: Image width in pixels.
        height: Image height in pixels.
        oversampling: Samples per pixel along each axis.
        max_depth: Recursion limit for reflections and portals.
        workers: Number of tracing workers, or None for the default.
        use_processes: If True, trace in worker processes instead of threads.
        seed: Seed for the random preset.
        count: Sphere count for the random preset.
        output_path: Output file path (.ppm or .png).
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports so the backend is initialized first
    from portaltrace.config import RenderSettings
    from portaltrace.core.render import Renderer
    from portaltrace.scene.presets import create_scene

    settings = RenderSettings(
        width=width,
        height=height,
        oversampling=oversampling,
        max_depth=max_depth,
        workers=workers,
        use_processes=use_processes,
    )

    logger.info("Creating %s scene", scene_name)
    scene, camera = create_scene(scene_name, seed=seed, count=count)
    logger.debug("%r", scene)

    renderer = Renderer(scene, camera, settings)

    start_time = time.perf_counter()

    def progress_callback(current: int, target: int) -> None:
        if not quiet:
            elapsed = time.perf_counter() - start_time
            progress_pct = (current / target) * 100 if target > 0 else 0
            rows_per_sec = current / elapsed if elapsed > 0 else 0
            print(
                f"\r  Progress: {current}/{target} rows "
                f"({progress_pct:.1f}%) - {rows_per_sec:.1f} rows/s",
                end="",
                flush=True,
            )

    renderer.render(callback=progress_callback)

    if not quiet:
        print()  # Newline after progress

    output_file = Path(output_path)
    renderer.save_image(str(output_file))

    logger.info("Saved to: %s", output_file.absolute())
    logger.info("Total time: %.2fs", time.perf_counter() - start_time)

    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    from portaltrace.core.filtering import init_backend
    from portaltrace.logging_config import setup_logging

    args = parse_args(argv)
    setup_logging("WARNING" if args.quiet else args.log_level)

    try:
        init_backend()
        render_scene(
            scene_name=args.scene,
            width=args.width,
            height=args.height,
            oversampling=args.oversampling,
            max_depth=args.max_depth,
            workers=args.workers,
            use_processes=args.processes,
            seed=args.seed,
            count=args.count,
            output_path=args.output,
            quiet=args.quiet,
        )
        return 0
    except Exception:
        logger.exception("Rendering failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
