#!/usr/bin/env python3
"""
VoxLoader - MagicaVoxel Model Inspector
=======================================

Main entry point for the VoxLoader command line.
Loads a MagicaVoxel (.vox) file and prints what a renderer would receive.

Usage:
    python main.py file [--palette] [--debug]

Arguments:
    file    MagicaVoxel file to load
"""

import sys
import logging
import argparse
from pathlib import Path

from voxloader import __version__
from voxloader.core.palette import DEFAULT_PALETTE
from voxloader.errors import VoxError
from voxloader.formats.vox import VoxFormat

logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='VoxLoader - MagicaVoxel model inspector',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s model.vox             Print size, voxel count and palette source
  %(prog)s model.vox --palette   Also list the colours the model uses
        """
    )

    parser.add_argument(
        'file',
        help='VOX file to load'
    )

    parser.add_argument(
        '--palette',
        action='store_true',
        help='List the palette entries referenced by the voxels'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool):
    """Configure root logging for the command line."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )


def describe(model, show_palette: bool = False) -> str:
    """Render a short text summary of a loaded model."""
    sx, sy, sz = model.size
    lines = [
        f"Size:    {sx} x {sy} x {sz}",
        f"Voxels:  {model.voxel_count}",
        f"Palette: {'default' if model.palette is DEFAULT_PALETTE else 'from file'}",
    ]

    if show_palette:
        used = sorted({v.c for v in model.voxels})
        for index in used:
            colour = model.palette[index]
            if colour.is_transparent:
                continue
            lines.append(f"  {index:3d}  {colour.to_hex()}")

    return '\n'.join(lines)


def main(argv=None):
    """Main application entry point."""
    args = parse_arguments(argv)
    setup_logging(args.debug)

    filepath = Path(args.file)
    try:
        model = VoxFormat.load(filepath)
    except (VoxError, OSError) as e:
        logger.debug("Load failed", exc_info=True)
        print(f"Error: {filepath}: {e}", file=sys.stderr)
        return 1

    print(describe(model, show_palette=args.palette))
    return 0


if __name__ == '__main__':
    sys.exit(main())
