import json
import math
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from brickart.errors import OutOfPalette, PaletteFormatError
from brickart.palettes import BRICK_COLORS


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Parse '#RRGGBB' or '#RGB' (the '#' is optional)."""
    s = value.strip().lstrip("#")
    if len(s) == 3:
        s = "".join(c * 2 for c in s)
    if len(s) != 6:
        raise ValueError(f"Not a hex color: {value!r}")
    return (int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))


@dataclass(frozen=True)
class PaletteColor:
    name: str
    rgb: tuple[int, int, int]

    def __post_init__(self):
        rgb = tuple(int(v) for v in self.rgb)
        if len(rgb) != 3 or any(v < 0 or v > 255 for v in rgb):
            raise ValueError(f"RGB channels must be three values in 0-255, got {self.rgb!r}")
        object.__setattr__(self, "rgb", rgb)

    @property
    def hex(self) -> str:
        r, g, b = self.rgb
        return f"#{r:02X}{g:02X}{b:02X}"


class Palette:
    """Fixed, ordered set of reference colors with nearest-color lookup."""

    def __init__(self, colors):
        self._colors = tuple(colors)
        if not self._colors:
            raise ValueError("A palette needs at least one color")
        for color in self._colors:
            if not isinstance(color, PaletteColor):
                raise TypeError(f"Expected PaletteColor, got {type(color).__name__}")
        self._rgb = np.array([c.rgb for c in self._colors], dtype=np.int32)
        self._rgb.setflags(write=False)

    @classmethod
    def from_hex(cls, pairs) -> "Palette":
        return cls(PaletteColor(name, hex_to_rgb(hx)) for name, hx in pairs)

    @classmethod
    def default(cls) -> "Palette":
        return cls.from_hex(BRICK_COLORS)

    @classmethod
    def load(cls, path: str | Path) -> "Palette":
        """Read a JSON list of {"name": ..., "rgb": [r, g, b]} or {"name": ..., "hex": "#rrggbb"}."""
        path = Path(path)
        try:
            entries = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise PaletteFormatError(f"Not a JSON palette file: {path} ({exc})") from exc
        if not isinstance(entries, list):
            raise PaletteFormatError(f"Palette file must contain a list: {path}")
        colors = []
        for i, entry in enumerate(entries):
            if not isinstance(entry, dict) or "name" not in entry:
                raise PaletteFormatError(f"Palette entry {i} needs a name")
            if "rgb" not in entry and "hex" not in entry:
                raise PaletteFormatError(f"Palette entry {i} ({entry['name']}) has no rgb or hex value")
            try:
                rgb = tuple(entry["rgb"]) if "rgb" in entry else hex_to_rgb(entry["hex"])
                colors.append(PaletteColor(str(entry["name"]), rgb))
            except (TypeError, ValueError) as exc:
                raise PaletteFormatError(f"Palette entry {i} ({entry['name']}): {exc}") from exc
        if not colors:
            raise PaletteFormatError(f"Palette file has no colors: {path}")
        return cls(colors)

    def save(self, path: str | Path) -> None:
        path = Path(path)
        entries = [{"name": c.name, "rgb": list(c.rgb)} for c in self._colors]
        path.write_text(json.dumps(entries, indent=2) + "\n", encoding="utf-8")

    @property
    def colors(self) -> tuple[PaletteColor, ...]:
        return self._colors

    @property
    def rgb_array(self) -> np.ndarray:
        """(N, 3) int32 view of the palette, read-only."""
        return self._rgb

    def __len__(self):
        return len(self._colors)

    def __iter__(self):
        return iter(self._colors)

    def __getitem__(self, index: int) -> PaletteColor:
        return self._colors[index]

    def __contains__(self, color) -> bool:
        return color in self._colors

    def __eq__(self, other):
        if not isinstance(other, Palette):
            return NotImplemented
        return self._colors == other._colors

    def __hash__(self):
        return hash(self._colors)

    def __repr__(self):
        return f"Palette({len(self._colors)} colors)"

    def index(self, color: PaletteColor) -> int:
        """Position of the first entry equal to ``color``."""
        try:
            return self._colors.index(color)
        except ValueError:
            raise OutOfPalette(f"{color!r} is not in the palette") from None

    def nearest_index(self, rgb) -> int:
        r, g, b = (int(v) for v in rgb[:3])
        best_index = 0
        best_dist = math.inf
        for i, (pr, pg, pb) in enumerate(c.rgb for c in self._colors):
            dist = (r - pr) ** 2 + (g - pg) ** 2 + (b - pb) ** 2
            # Strict < keeps the earliest entry on ties
            if dist < best_dist:
                best_dist = dist
                best_index = i
        return best_index

    def nearest(self, rgb) -> PaletteColor:
        return self._colors[self.nearest_index(rgb)]

    def nearest_grid(self, samples: np.ndarray) -> np.ndarray:
        """Nearest palette index for every pixel of an (..., 3) array.

        Same metric and tie-break as ``nearest_index``: argmin returns the
        first minimum.
        """
        arr = np.asarray(samples)
        if arr.shape[-1] < 3:
            raise ValueError(f"Expected at least 3 channels, got shape {arr.shape}")
        flat = arr[..., :3].reshape(-1, 3).astype(np.int32)
        diff = flat[:, np.newaxis, :] - self._rgb[np.newaxis, :, :]  # (N, P, 3)
        dist = (diff * diff).sum(axis=2)
        return dist.argmin(axis=1).reshape(arr.shape[:-1])
