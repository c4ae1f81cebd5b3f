"""Command line entry point for inspecting and sampling path curves."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from src.curves import (
    CurveError,
    PathLoadError,
    discover_paths,
    export_samples,
    load_path,
    sample_positions,
)
from src.curves.path_loader import PathDefinition


def main() -> None:
    args = _parse_args()
    paths_dir = Path(__file__).resolve().parent / "paths"
    available_paths = discover_paths(paths_dir)

    if args.list_paths:
        _print_path_list(available_paths)
        return

    definition, source = _resolve_path(args.path, available_paths, paths_dir)
    if definition is None:
        sys.exit(1)

    definition = definition.with_overrides(resolution=args.resolution, close_loop=args.loop)
    try:
        curve = definition.build()
    except CurveError as exc:
        print(f"Error: cannot build curve from {source}: {exc}")
        sys.exit(1)

    distances = getattr(curve, "control_point_distances", ())
    print(f"Path {source}")
    print(f"  kind        : {definition.kind}")
    print(f"  points      : {len(definition.control_points)}")
    print(f"  resolution  : {curve.resolution}")
    print(f"  closed loop : {definition.close_loop}")
    print(f"  length      : {curve.length:.4f}")
    if distances:
        boundaries = ", ".join(f"{value:.3f}" for value in distances)
        print(f"  boundaries  : {boundaries}")

    try:
        positions = sample_positions(curve, args.samples)
    except ValueError as exc:
        print(f"Error: {exc}")
        sys.exit(1)
    print("Samples:")
    step = 1.0 / (args.samples - 1)
    for index, (x, y, z) in enumerate(positions):
        print(f"  t={index * step:5.3f}  ({x:9.4f}, {y:9.4f}, {z:9.4f})")

    if args.output is not None:
        export_samples(args.output, curve, args.samples)
        print(f"Saved {args.samples} samples to {args.output}")


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Catmull-Rom path sampler")
    parser.add_argument(
        "path",
        nargs="?",
        help="Path name (from paths directory) or path to a JSON file",
    )
    parser.add_argument(
        "--list-paths",
        action="store_true",
        help="List bundled paths and exit",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=11,
        help="Number of evenly spaced samples to print",
    )
    parser.add_argument(
        "--resolution",
        type=int,
        help="Override the tessellation resolution per segment",
    )
    parser.add_argument(
        "--loop",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Override whether the path closes back on its first point",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the samples to a JSON file",
    )
    return parser.parse_args()


def _print_path_list(available_paths) -> None:
    if not available_paths:
        print("No paths found.")
        return
    print("Available paths:")
    for name, loaded in available_paths.items():
        print(f"  {name:15s} -> {loaded.path}")


def _resolve_path(
    path_arg, available_paths, paths_dir: Path
) -> tuple[PathDefinition | None, Path | None]:
    if path_arg is None:
        print("Error: no path given; use --list-paths to see bundled paths.")
        return None, None

    candidate_path = Path(path_arg)
    if candidate_path.exists():
        try:
            return load_path(candidate_path), candidate_path
        except PathLoadError as exc:
            print(f"Error: {exc}")
            return None, None

    if path_arg in available_paths:
        loaded = available_paths[path_arg]
        return loaded.definition, loaded.path

    candidate_file = paths_dir / f"{path_arg}.json"
    if candidate_file.exists():
        try:
            return load_path(candidate_file), candidate_file
        except PathLoadError as exc:
            print(f"Error: {exc}")
            return None, None

    print(f"Error: path '{path_arg}' not found.")
    return None, None


if __name__ == "__main__":
    main()
