#!/usr/bin/env python3
"""Render a preset scene to a PNG file.

Usage:
    python examples/render_scene.py [options]

Options:
    --scene NAME        Preset scene (default: two_spheres)
    --width WIDTH       Image width in pixels (default: 500)
    --height HEIGHT     Image height in pixels (default: 500)
    --threads N         Worker threads, 0 for sequential (default: 4)
    --adaptive          Enable adaptive super-sampling
    --dof               Enable depth of field (uses --aperture/--focal-length)
    --grid INTERVAL     Paint a grid every INTERVAL pixels after rendering
    --output-dir DIR    Output directory (default: images)
    --show              Show a Matplotlib preview when done
    --quiet             Suppress progress output
    --verbose           Enable debug logging

Example:
    python examples/render_scene.py --scene spheres_on_mirrors --width 250 --height 250
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from whitted.camera import DepthOfField
from whitted.core.primitives import Color
from whitted.core.tracer import RayTracer
from whitted.preview import ImageWriter, show_preview
from whitted.scene.presets import PRESETS, create_preset_scene


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a preset scene with the Whitted ray tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scene",
        choices=sorted(PRESETS),
        default="two_spheres",
        help="Preset scene (default: two_spheres)",
    )
    parser.add_argument("--width", type=int, default=500, help="Image width in pixels (default: 500)")
    parser.add_argument("--height", type=int, default=500, help="Image height in pixels (default: 500)")
    parser.add_argument(
        "--threads",
        type=int,
        default=4,
        help="Worker threads, 0 for sequential (default: 4)",
    )
    sampling = parser.add_mutually_exclusive_group()
    sampling.add_argument("--adaptive", action="store_true", help="Enable adaptive super-sampling")
    sampling.add_argument("--dof", action="store_true", help="Enable depth of field")
    parser.add_argument(
        "--aperture",
        type=float,
        default=20.0,
        help="Aperture radius for --dof (default: 20)",
    )
    parser.add_argument(
        "--focal-length",
        type=float,
        default=1600.0,
        help="Focal length for --dof (default: 1600)",
    )
    parser.add_argument("--grid", type=int, default=0, help="Grid interval in pixels (default: off)")
    parser.add_argument(
        "--output-dir",
        type=str,
        default="images",
        help="Output directory (default: images)",
    )
    parser.add_argument("--show", action="store_true", help="Show a preview window when done")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def render_scene(
    scene_name: str = "two_spheres",
    width: int = 500,
    height: int = 500,
    threads: int = 4,
    adaptive: bool = False,
    dof: DepthOfField | None = None,
    grid: int = 0,
    output_dir: str = "images",
    show: bool = False,
    quiet: bool = False,
) -> Path:
    """Render a preset scene and save it as a PNG.

    Returns:
        Path to the saved image file.
    """
    if not quiet:
        print(f"Creating {scene_name} scene ({width}x{height})...")

    scene, camera = create_preset_scene(scene_name)
    writer = ImageWriter(scene_name, width, height, output_dir=output_dir)
    start_time = time.time()

    def progress_callback(done: int, total: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            pixels_per_sec = done / elapsed if elapsed > 0 else 0
            print(
                f"\r  Progress: {done}/{total} pixels "
                f"({done / total * 100:.1f}%) - {pixels_per_sec:.0f} px/s",
                end="",
                flush=True,
            )

    options = {
        "image_writer": writer,
        "ray_tracer": RayTracer(scene),
        "threads": threads,
        "progress_callback": progress_callback,
    }
    if dof is not None:
        options["depth_of_field"] = dof
    if adaptive:
        options.update(adaptive=True, depth_of_field=None)
    camera = camera.with_options(**options)

    camera.render_image()
    if not quiet:
        print()
    if grid > 0:
        camera.print_grid(grid, Color(255, 255, 0))
    output_file = camera.write_to_image()

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {time.time() - start_time:.2f}s")
    if show:
        show_preview(writer)
    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    dof = DepthOfField(args.aperture, args.focal_length, seed=0) if args.dof else None
    try:
        render_scene(
            scene_name=args.scene,
            width=args.width,
            height=args.height,
            threads=args.threads,
            adaptive=args.adaptive,
            dof=dof,
            grid=args.grid,
            output_dir=args.output_dir,
            show=args.show,
            quiet=args.quiet,
        )
        return 0
    except (ValueError, RuntimeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
