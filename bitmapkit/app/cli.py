from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, List, Optional

from ..codec import read_bitmap, write_bitmap
from ..config import Settings
from ..errors import BitmapError
from ..raster import Raster
from ..transforms import FilterRegistry
from ..transforms.registry import Number
from .menu import ImageMenu

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="bitmapkit: apply simple filters to uncompressed 24-bit BMP images."
    )
    parser.add_argument("input", nargs="?", help="Input .bmp file")
    parser.add_argument("output", nargs="?", help="Output .bmp file")
    parser.add_argument("--filter", dest="filter_name", help="Filter name or menu number (see --list-filters)")
    parser.add_argument("--factor", type=float, help="Scaling factor for clarendon, lighten and darken")
    parser.add_argument("--turns", type=int, help="Number of clockwise quarter turns for rotate")
    parser.add_argument("--x-scale", type=int, help="Horizontal factor for enlarge")
    parser.add_argument("--y-scale", type=int, help="Vertical factor for enlarge")
    parser.add_argument("--list-filters", action="store_true", help="List available filters and exit")
    parser.add_argument("--interactive", action="store_true", help="Start the interactive menu")
    parser.add_argument("--preview", action="store_true", default=None, help="Open the result in an image viewer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.epilog = "Without arguments the interactive menu is started."
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.from_env()
    if args.verbose:
        settings.log_level = "DEBUG"
    if args.preview is not None:
        settings.preview = args.preview
    return settings


def list_filters(registry: FilterRegistry) -> int:
    for definition in registry.filters:
        print(f"{definition.number}) {definition.name} - {definition.label}")
    return 0


def show_preview(raster: Raster) -> None:
    from ..interop import to_image

    to_image(raster).show()


def launch_menu(registry: FilterRegistry, settings: Settings) -> int:
    menu = ImageMenu(registry, preview=show_preview if settings.preview else None)
    return menu.mainloop()


def _collect_values(args: argparse.Namespace) -> Dict[str, Number]:
    values: Dict[str, Number] = {}
    for name in ("factor", "turns", "x_scale", "y_scale"):
        value = getattr(args, name)
        if value is not None:
            values[name] = value
    return values


def apply_filter(args: argparse.Namespace, registry: FilterRegistry, settings: Settings) -> int:
    definition = registry.get(args.filter_name)
    if definition is None:
        print(f"Unknown filter '{args.filter_name}'. Use --list-filters.", file=sys.stderr)
        return 2
    raster = read_bitmap(args.input)
    if raster.is_empty:
        print(f"{args.input} is not a supported uncompressed 24-bit BMP file", file=sys.stderr)
        return 2
    result = definition.run(raster, _collect_values(args))
    write_bitmap(args.output, result)
    logger.info("Applied %s to %s -> %s", definition.name, args.input, args.output)
    if settings.preview:
        show_preview(result)
    print(f"Saved {definition.label} result to {args.output} ({result.width}x{result.height})")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    args = parse_args(argv)
    settings = resolve_settings(args)
    settings.configure_logging()
    registry = FilterRegistry()
    if args.list_filters:
        return list_filters(registry)
    if not argv or args.interactive:
        return launch_menu(registry, settings)
    if not args.input or not args.output or not args.filter_name:
        print("Missing input, output or --filter. Use --help for usage.", file=sys.stderr)
        return 2
    try:
        return apply_filter(args, registry, settings)
    except BitmapError as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
