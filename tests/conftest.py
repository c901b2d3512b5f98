import pytest

from brickart.palette import Palette, PaletteColor
from brickart.palettes import MONOCHROME

BLACK = PaletteColor("Black", (0, 0, 0))
WHITE = PaletteColor("White", (255, 255, 255))
RED = PaletteColor("Red", (255, 0, 0))


@pytest.fixture
def mono():
    return Palette.from_hex(MONOCHROME)


@pytest.fixture
def rgbw():
    return Palette([BLACK, WHITE, RED, PaletteColor("Green", (0, 255, 0)), PaletteColor("Blue", (0, 0, 255))])
