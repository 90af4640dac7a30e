from __future__ import annotations

import os
from typing import Dict, Optional, Set

from PIL import Image

from ..errors import FatalInputError, OutputError
from .codec import GifCodec, JpegCodec, PillowCodec, RasterCodec
from .copier import copy_frame
from .types import DEFAULT_BACKGROUND, OUTPUT_MODE, CanvasRaster, SourceRaster

SUPPORTED_EXTENSIONS: Set[str] = {
    ".bmp",
    ".gif",
    ".jpeg",
    ".jpg",
    ".png",
    ".tga",
    ".tif",
    ".tiff",
    ".webp",
}


class RasterLoader:
    def __init__(self, codecs: Optional[Dict[str, RasterCodec]] = None) -> None:
        if codecs is None:
            codecs = {
                ".bmp": PillowCodec("BMP"),
                ".gif": GifCodec(),
                ".png": PillowCodec("PNG"),
                ".tga": PillowCodec("TGA"),
                ".webp": PillowCodec("WEBP", lossless=True, exact=True),
            }
            tiff_codec = PillowCodec("TIFF")
            jpeg_codec = JpegCodec()
            for ext in (".tif", ".tiff"):
                codecs[ext] = tiff_codec
            for ext in (".jpg", ".jpeg"):
                codecs[ext] = jpeg_codec
        self._codecs = codecs

    @property
    def supported_extensions(self) -> Set[str]:
        return set(self._codecs.keys())

    def load(self, path: str) -> SourceRaster:
        codec = self._codec_for(path)
        if not codec:
            raise FatalInputError(
                f"Unsupported input format: {path} (supported: {_format_extensions(self.supported_extensions)})"
            )
        if not os.path.isfile(path):
            raise FatalInputError(f"Image not found: {path}")
        return codec.load(path)

    def save(self, image: Image.Image, path: str) -> None:
        codec = self._codec_for(path)
        if not codec:
            raise OutputError(
                f"Unsupported output format: {path} (supported: {_format_extensions(self.supported_extensions)})"
            )
        codec.save(image, path)

    def _codec_for(self, path: str) -> Optional[RasterCodec]:
        ext = os.path.splitext(path)[1].lower()
        return self._codecs.get(ext)


def _format_extensions(extensions: Set[str]) -> str:
    return ", ".join(sorted(extensions))


def load_raster(path: str) -> SourceRaster:
    return RasterLoader().load(path)


def save_raster(image: Image.Image, path: str) -> None:
    RasterLoader().save(image, path)


__all__ = [
    "CanvasRaster",
    "copy_frame",
    "DEFAULT_BACKGROUND",
    "load_raster",
    "OUTPUT_MODE",
    "RasterLoader",
    "save_raster",
    "SourceRaster",
    "SUPPORTED_EXTENSIONS",
]
