import enum
import logging
from collections import deque

import numpy as np

from brickart.config import DocumentConfig
from brickart.errors import InvalidSize, OutOfBounds, OutOfPalette
from brickart.palette import Palette, PaletteColor
from brickart.sampling import coerce_samples, resample_nearest

logger = logging.getLogger(__name__)

EMPTY = -1


class UndoResult(enum.Enum):
    RESTORED = "restored"
    NOTHING_TO_UNDO = "nothing to undo"


class GridDocument:
    """Square grid of palette colors with snapshot undo and tool state.

    Cells hold palette indices, ``EMPTY`` for no brick. Every mutation pushes a
    copy of the pre-mutation grid onto a bounded history; the oldest snapshot
    is dropped once ``config.max_history`` is reached. ``resize`` and
    ``initialize`` discard both content and history.
    """

    def __init__(self, palette: Palette | None = None, size: int | None = None, config: DocumentConfig | None = None):
        self.config = config if config is not None else DocumentConfig()
        self.palette = palette if palette is not None else Palette.default()
        self.selected_index = 0
        self.eraser = False
        self.initialize(size if size is not None else self.config.default_size)

    # Grid lifecycle

    def initialize(self, size: int) -> None:
        if size not in self.config.supported_sizes:
            raise InvalidSize(size, self.config.supported_sizes)
        self.size = size
        self._grid = np.full((size, size), EMPTY, dtype=np.int16)
        self._history: deque[np.ndarray] = deque(maxlen=self.config.max_history)
        logger.debug("Initialized %dx%d grid", size, size)

    def resize(self, new_size: int) -> None:
        """Reallocate at ``new_size``. Content and history are discarded."""
        self.initialize(new_size)

    def clear(self) -> None:
        """Empty every cell. Unlike ``resize`` this goes through history."""
        self._push_history()
        self._grid.fill(EMPTY)

    # History

    def _push_history(self) -> None:
        if self._history.maxlen == 0:
            return
        self._history.append(self._grid.copy())

    @property
    def history_depth(self) -> int:
        return len(self._history)

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    def undo(self) -> UndoResult:
        if not self._history:
            return UndoResult.NOTHING_TO_UNDO
        self._grid = self._history.pop()
        logger.debug("Undo, %d snapshots left", len(self._history))
        return UndoResult.RESTORED

    # Cells

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise OutOfBounds(row, col, self.size)

    def _resolve(self, color) -> int:
        if color is None:
            return EMPTY
        if isinstance(color, PaletteColor):
            return self.palette.index(color)
        if isinstance(color, (int, np.integer)) and not isinstance(color, bool):
            if 0 <= color < len(self.palette):
                return int(color)
            raise OutOfPalette(f"Palette index {color} out of range 0-{len(self.palette) - 1}")
        raise TypeError(f"Expected PaletteColor, palette index or None, got {type(color).__name__}")

    def set_cell(self, row: int, col: int, color) -> None:
        """Write a palette color (or index) to a cell; ``None`` empties it."""
        self._check_bounds(row, col)
        index = self._resolve(color)
        self._push_history()
        self._grid[row, col] = index

    def cell(self, row: int, col: int) -> PaletteColor | None:
        self._check_bounds(row, col)
        index = int(self._grid[row, col])
        return None if index == EMPTY else self.palette[index]

    def cells(self) -> list[list[PaletteColor | None]]:
        colors = self.palette.colors
        return [[None if i == EMPTY else colors[i] for i in row] for row in self._grid.tolist()]

    def snapshot(self) -> np.ndarray:
        """Copy of the index grid (``EMPTY`` for empty cells)."""
        return self._grid.copy()

    @property
    def filled_count(self) -> int:
        return int(np.count_nonzero(self._grid != EMPTY))

    @property
    def progress(self) -> float:
        return self.filled_count / (self.size * self.size)

    @property
    def progress_percent(self) -> int:
        return int(self.progress * 100 + 0.5)

    # Tools

    @property
    def selected_color(self) -> PaletteColor:
        return self.palette[self.selected_index]

    def select_color(self, color) -> None:
        """Select a palette color (or index) to paint with and leave eraser mode."""
        index = self._resolve(color)
        if index == EMPTY:
            raise OutOfPalette("Cannot select an empty color, use the eraser")
        self.selected_index = index
        self.eraser = False

    def toggle_eraser(self) -> bool:
        self.eraser = not self.eraser
        return self.eraser

    def paint(self, row: int, col: int) -> None:
        """Apply the current tool to a cell."""
        self.set_cell(row, col, None if self.eraser else self.selected_index)

    # Conversion

    def quantize_from_image(self, samples, source_width: int | None = None, source_height: int | None = None) -> None:
        """Replace the grid with a palette-quantized copy of an image.

        Each cell samples exactly one source pixel at
        ``(floor(row * H / size), floor(col * W / size))``, alpha is ignored,
        and the pixel is mapped to its nearest color in the document palette
        (``self.palette``), since cells store indices into it. The previous
        grid goes onto the history so the conversion can be undone.
        """
        rgb = coerce_samples(samples, source_width, source_height)
        sampled = resample_nearest(rgb, self.size)
        indices = self.palette.nearest_grid(sampled).astype(np.int16)
        self._push_history()
        self._grid = indices
        logger.debug(
            "Quantized %dx%d source into %dx%d grid with %d palette colors",
            rgb.shape[1],
            rgb.shape[0],
            self.size,
            self.size,
            len(np.unique(indices)),
        )
