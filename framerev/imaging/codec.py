from __future__ import annotations

import logging
from typing import Any

from PIL import Image, UnidentifiedImageError

from ..errors import FatalInputError, OutputError
from .types import OUTPUT_MODE, SourceRaster

logger = logging.getLogger(__name__)


class RasterCodec:
    def load(self, path: str) -> SourceRaster:
        raise NotImplementedError

    def save(self, image: Image.Image, path: str) -> None:
        raise NotImplementedError


class PillowCodec(RasterCodec):
    def __init__(self, save_format: str, **save_params: Any) -> None:
        self.save_format = save_format
        self.save_params = save_params

    def load(self, path: str) -> SourceRaster:
        try:
            img = self._load_image(path)
        except FileNotFoundError as exc:
            raise FatalInputError(f"Image not found: {path}") from exc
        except (UnidentifiedImageError, OSError) as exc:
            raise FatalInputError(f"Unable to decode image {path}: {exc}") from exc
        return SourceRaster(self._normalize_image(img))

    def save(self, image: Image.Image, path: str) -> None:
        try:
            image.save(path, format=self.save_format, **self.save_params)
        except (OSError, ValueError) as exc:
            raise OutputError(f"Unable to save image {path}: {exc}") from exc

    @staticmethod
    def _load_image(path: str) -> Image.Image:
        with Image.open(path) as img:
            img.load()
            return img.copy()

    @staticmethod
    def _normalize_image(img: Image.Image) -> Image.Image:
        if img.mode != OUTPUT_MODE:
            return img.convert(OUTPUT_MODE)
        return img


class JpegCodec(PillowCodec):
    """JPEG has no alpha channel, so frames are flattened to RGB on save."""

    def __init__(self) -> None:
        super().__init__("JPEG")

    def save(self, image: Image.Image, path: str) -> None:
        super().save(image.convert("RGB"), path)


class GifCodec(PillowCodec):
    """GIF stores a 256 color palette with on/off transparency."""

    def __init__(self) -> None:
        super().__init__("GIF")

    def save(self, image: Image.Image, path: str) -> None:
        logger.warning(
            "GIF output %s is reduced to a 256 color palette; partial alpha is not kept",
            path,
        )
        super().save(image, path)
