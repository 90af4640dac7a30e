from __future__ import annotations

from typing import Tuple

import pytest
from PIL import Image


def frame_color(x: int, y: int) -> Tuple[int, int, int, int]:
    """Distinct opaque color for source grid cell (x, y)."""
    return (10 + x * 40, 20 + y * 40, 200, 255)


def make_sheet(
    width: int,
    height: int,
    frame_width: int,
    frame_height: int,
    fill: Tuple[int, int, int, int] = (255, 0, 255, 255),
) -> Image.Image:
    """Build an RGBA sheet whose whole frames are solid, distinct colors.

    Pixels outside the whole-frame grid get the fill color.
    """
    img = Image.new("RGBA", (width, height), fill)
    for x in range(width // frame_width):
        for y in range(height // frame_height):
            box = (x * frame_width, y * frame_height, (x + 1) * frame_width, (y + 1) * frame_height)
            img.paste(frame_color(x, y), box)
    # Mark one pixel per frame so orientation inside a frame is checked too.
    pixels = img.load()
    for x in range(width // frame_width):
        for y in range(height // frame_height):
            pixels[x * frame_width, y * frame_height] = (x, y, 1, 254)
    return img


@pytest.fixture
def sheet_factory():
    return make_sheet
