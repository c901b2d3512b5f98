from dataclasses import dataclass

SUPPORTED_SIZES = (16, 32, 48)
MAX_HISTORY = 20
DEFAULT_SIZE = 32
DEFAULT_CELL_PIXELS = 20


@dataclass(frozen=True)
class DocumentConfig:
    supported_sizes: tuple[int, ...] = SUPPORTED_SIZES
    max_history: int = MAX_HISTORY
    default_size: int = DEFAULT_SIZE

    def __post_init__(self):
        if not self.supported_sizes:
            raise ValueError("At least one grid size must be supported")
        if any(s < 1 for s in self.supported_sizes):
            raise ValueError(f"Grid sizes must be positive: {self.supported_sizes}")
        if self.default_size not in self.supported_sizes:
            raise ValueError(f"Default size {self.default_size} is not a supported size")
        if self.max_history < 0:
            raise ValueError(f"History depth must not be negative: {self.max_history}")
