from pathlib import Path

import numpy as np
from PIL import Image

from brickart.config import DocumentConfig
from brickart.document import GridDocument
from brickart.palette import Palette


def load_samples(image: Image.Image | str | Path) -> np.ndarray:
    """Decode an image file (or Pillow image) to an (H, W, 3) uint8 array."""
    if not isinstance(image, Image.Image):
        with Image.open(image) as im:
            return np.asarray(im.convert("RGB"))
    return np.asarray(image.convert("RGB"))


def image_to_document(
    image: Image.Image | str | Path | np.ndarray,
    palette: Palette | None = None,
    size: int | None = None,
    config: DocumentConfig | None = None,
) -> GridDocument:
    document = GridDocument(palette=palette, size=size, config=config)
    samples = image if isinstance(image, np.ndarray) else load_samples(image)
    document.quantize_from_image(samples)
    return document
