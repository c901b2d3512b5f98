class BrickArtError(ValueError):
    """Base class for errors raised by the grid engine."""


class InvalidSize(BrickArtError):
    def __init__(self, size, supported):
        self.size = size
        self.supported = tuple(supported)
        super().__init__(f"Unsupported grid size {size!r}, expected one of {', '.join(map(str, self.supported))}")


class OutOfBounds(BrickArtError, IndexError):
    def __init__(self, row, col, size):
        self.row = row
        self.col = col
        self.size = size
        super().__init__(f"Cell ({row}, {col}) is outside the {size}x{size} grid")


class EmptySource(BrickArtError):
    """Raised when quantization is given no pixels to sample."""


class OutOfPalette(BrickArtError):
    """Raised when a color that is not a palette member is written to the grid."""


class PaletteFormatError(BrickArtError):
    """Raised when a palette definition file cannot be read."""
