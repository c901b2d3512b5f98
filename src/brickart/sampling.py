import numpy as np
from PIL import Image

from brickart.errors import EmptySource


def coerce_samples(samples, width: int | None = None, height: int | None = None) -> np.ndarray:
    """Normalise a source image to an (H, W, 3) uint8 array.

    Accepts a Pillow image, an (H, W, C) array with C >= 3 (alpha and any
    further channels are dropped), an (H, W) grayscale array, or a flat
    row-major buffer together with ``width`` and ``height`` holding 3 or 4
    channels per pixel.
    """
    if samples is None:
        raise EmptySource("No image samples given")

    if isinstance(samples, Image.Image):
        if samples.width == 0 or samples.height == 0:
            raise EmptySource(f"Image has zero area: {samples.width}x{samples.height}")
        samples = np.asarray(samples.convert("RGB"))

    arr = np.asarray(samples)
    if arr.size == 0:
        raise EmptySource(f"Sample buffer is empty (shape {arr.shape})")

    if arr.ndim == 1 or width is not None or height is not None:
        if width is None or height is None:
            raise ValueError("Flat sample buffers need both width and height")
        if width < 1 or height < 1:
            raise EmptySource(f"Source has zero area: {width}x{height}")
        pixels = width * height
        if arr.size % pixels:
            raise ValueError(f"Buffer of {arr.size} values does not fit {width}x{height} pixels")
        channels = arr.size // pixels
        if channels < 3:
            raise ValueError(f"Expected at least 3 channels per pixel, got {channels}")
        arr = arr.reshape(height, width, channels)

    if arr.ndim == 2:
        arr = np.repeat(arr[:, :, np.newaxis], 3, axis=2)

    if arr.ndim != 3:
        raise ValueError(f"Expected an (H, W, C) sample array, got shape {arr.shape}")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise EmptySource(f"Source has zero area: {arr.shape[1]}x{arr.shape[0]}")
    if arr.shape[2] < 3:
        raise ValueError(f"Expected at least 3 channels per pixel, got {arr.shape[2]}")

    return np.clip(arr[:, :, :3], 0, 255).astype(np.uint8)


def source_coordinates(size: int, width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
    """Source column and row picked for each target cell: floor(i * extent / size)."""
    cells = np.arange(size, dtype=np.int64)
    xs = cells * width // size
    ys = cells * height // size
    return xs, ys


def resample_nearest(rgb: np.ndarray, size: int) -> np.ndarray:
    """Nearest-neighbour resample of an (H, W, 3) array to (size, size, 3). No averaging."""
    height, width = rgb.shape[:2]
    xs, ys = source_coordinates(size, width, height)
    return rgb[ys[:, np.newaxis], xs[np.newaxis, :]]
