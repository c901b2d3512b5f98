import argparse
import logging
import sys
from pathlib import Path

from brickart.config import DEFAULT_CELL_PIXELS, DocumentConfig
from brickart.converter import image_to_document
from brickart.palette import Palette
from brickart.render import render, to_image

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def main(argv=None):
    config = DocumentConfig()
    parser = argparse.ArgumentParser(description="Turn an image into brick mosaic art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument("-o", "--output", default=None, help="Output PNG path (default: <image>_bricks.png)")
    parser.add_argument(
        "-s",
        "--size",
        type=int,
        default=config.default_size,
        choices=config.supported_sizes,
        help=f"Grid size in bricks per side (default: {config.default_size})",
    )
    parser.add_argument(
        "-c",
        "--cell",
        type=positive_int,
        default=DEFAULT_CELL_PIXELS,
        help=f"Pixels per brick in the rendered image (default: {DEFAULT_CELL_PIXELS})",
    )
    parser.add_argument("-p", "--palette", default=None, help="JSON palette file (default: built-in brick colors)")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    output = Path(args.output) if args.output else image_path.with_name(f"{image_path.stem}_bricks.png")

    try:
        palette = Palette.load(args.palette) if args.palette else Palette.default()
        document = image_to_document(image_path, palette=palette, size=args.size, config=config)
        raster = render(document, args.cell)
        to_image(raster).save(output)
    except (ValueError, OSError) as exc:
        # BrickArtError is a ValueError; Pillow raises ValueError for unknown extensions
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    logger.debug("Wrote %s (%dx%d)", output, raster.shape[1], raster.shape[0])
    print(f"{output}: {document.size}x{document.size} bricks, {document.progress_percent}% filled")
