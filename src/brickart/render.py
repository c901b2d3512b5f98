from dataclasses import dataclass

import numpy as np
from PIL import Image

from brickart.config import DEFAULT_CELL_PIXELS
from brickart.document import EMPTY, GridDocument


@dataclass(frozen=True)
class RenderStyle:
    background: tuple[int, int, int] = (224, 224, 224)
    border: tuple[int, int, int] = (0, 0, 0)
    border_alpha: int = 51  # 0.2 of 255
    border_width: int = 1
    stud: tuple[int, int, int] = (255, 255, 255)
    stud_alpha: int = 77  # 0.3 of 255
    decorate_empty: bool = False


def blend(base: np.ndarray, color, alpha: int) -> np.ndarray:
    """Composite ``color`` over ``base`` with an 8-bit alpha, rounding to nearest."""
    base = base.astype(np.int32)
    over = np.asarray(color, dtype=np.int32)
    return ((base * (255 - alpha) + over * alpha + 127) // 255).astype(np.uint8)


def stud_mask(cell: int) -> np.ndarray:
    """Pixels whose centres lie within cell/4 of the cell centre."""
    radius = cell / 4
    centre = cell / 2
    ys = np.arange(cell)[:, None] + 0.5
    xs = np.arange(cell)[None, :] + 0.5
    return (xs - centre) ** 2 + (ys - centre) ** 2 <= radius * radius


def border_mask(cell: int, width: int = 1) -> np.ndarray:
    mask = np.zeros((cell, cell), dtype=bool)
    if width > 0:
        mask[:width, :] = True
        mask[-width:, :] = True
        mask[:, :width] = True
        mask[:, -width:] = True
    return mask


def render(
    document: GridDocument,
    cell_pixel_size: int = DEFAULT_CELL_PIXELS,
    style: RenderStyle | None = None,
) -> np.ndarray:
    """Draw the grid as an (size*cell, size*cell, 3) uint8 raster.

    Filled cells get a flat fill, a translucent border ring and a translucent
    round stud. Empty cells are flat background unless ``decorate_empty``.
    """
    if cell_pixel_size < 1:
        raise ValueError(f"Cell pixel size must be positive, got {cell_pixel_size}")
    style = style or RenderStyle()
    cell = cell_pixel_size
    size = document.size
    grid = document.snapshot()

    # Palette row per index plus the background for EMPTY (-1 wraps to last row)
    lookup = np.vstack([document.palette.rgb_array, np.array([style.background])]).astype(np.uint8)
    flat = lookup[grid]  # (size, size, 3)
    # (size, size, cell, cell, 3)
    tiles = np.broadcast_to(flat[:, :, None, None, :], (size, size, cell, cell, 3)).copy()

    decorated = grid != EMPTY
    if style.decorate_empty:
        decorated = np.ones_like(decorated)

    border = border_mask(cell, style.border_width)
    stud = stud_mask(cell)
    # Apply per cell region: rows/cols selected by the decorated mask
    target = tiles[decorated]  # (n, cell, cell, 3)
    target[:, border] = blend(target[:, border], style.border, style.border_alpha)
    target[:, stud] = blend(target[:, stud], style.stud, style.stud_alpha)
    tiles[decorated] = target

    return tiles.transpose(0, 2, 1, 3, 4).reshape(size * cell, size * cell, 3)


def to_image(raster: np.ndarray) -> Image.Image:
    return Image.fromarray(np.ascontiguousarray(raster, dtype=np.uint8))
