from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from PIL import Image

from ..errors import FatalInputError

OUTPUT_MODE = "RGBA"
DEFAULT_BACKGROUND: Tuple[int, int, int, int] = (0, 0, 0, 0)


@dataclass(frozen=True)
class SourceRaster:
    """Read-only decoded source image."""

    image: Image.Image

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def contains(self, x: int, y: int, width: int, height: int) -> bool:
        return _contains(self.image, x, y, width, height)

    def view(self, x: int, y: int, width: int, height: int) -> Image.Image:
        """Return a copy of the pixel block at (x, y); the source is not touched."""
        return self.image.crop((x, y, x + width, y + height))


@dataclass
class CanvasRaster:
    """Destination image that frames are written into."""

    image: Image.Image = field(repr=False)

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        background: Tuple[int, int, int, int] = DEFAULT_BACKGROUND,
    ) -> "CanvasRaster":
        try:
            image = Image.new(OUTPUT_MODE, (width, height), background)
        except (ValueError, OverflowError, MemoryError) as exc:
            raise FatalInputError(f"Unable to allocate a {width}x{height} destination image: {exc}") from exc
        return cls(image)

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def contains(self, x: int, y: int, width: int, height: int) -> bool:
        return _contains(self.image, x, y, width, height)

    def write_block(self, x: int, y: int, block: Image.Image) -> None:
        """Overwrite the pixels at (x, y) with block, without alpha blending."""
        if block.mode != self.image.mode:
            block = block.convert(self.image.mode)
        self.image.paste(block, (x, y))


def _contains(img: Image.Image, x: int, y: int, width: int, height: int) -> bool:
    if x < 0 or y < 0 or width <= 0 or height <= 0:
        return False
    return x + width <= img.width and y + height <= img.height
