from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from PIL import Image

from .grid import GridGeometry, compute_geometry, iter_frame_moves
from .imaging import DEFAULT_BACKGROUND, OUTPUT_MODE, CanvasRaster, RasterLoader, SourceRaster, copy_frame

logger = logging.getLogger(__name__)


@dataclass
class RepackSettings:
    frame_width: int
    frame_height: int
    frames_per_row: Optional[int] = None
    background: Tuple[int, int, int, int] = DEFAULT_BACKGROUND


@dataclass(frozen=True)
class RepackJob:
    image: Image.Image
    geometry: GridGeometry


class RepackJobBuilder:
    def __init__(self, settings: RepackSettings, loader: Optional[RasterLoader] = None) -> None:
        self.settings = settings
        self.loader = loader or RasterLoader()

    def build_from_file(self, path: str) -> RepackJob:
        source = self.loader.load(path)
        logger.info("Loaded %s (%dx%d)", path, source.width, source.height)
        return self.build(source)

    def build(self, source: SourceRaster) -> RepackJob:
        geometry = compute_geometry(
            source.width,
            source.height,
            self.settings.frame_width,
            self.settings.frame_height,
            self.settings.frames_per_row,
        )
        self._log_geometry(source, geometry)
        width, height = geometry.canvas_size
        dest = CanvasRaster.new(width, height, self.settings.background)
        for move in iter_frame_moves(geometry):
            logger.debug(
                "Frame %d: source cell (%d, %d) at (%d, %d) -> (%d, %d)",
                move.index,
                move.grid_x,
                move.grid_y,
                move.source_x,
                move.source_y,
                move.dest_x,
                move.dest_y,
            )
            copy_frame(
                source,
                move.source_x,
                move.source_y,
                dest,
                move.dest_x,
                move.dest_y,
                geometry.frame_width,
                geometry.frame_height,
            )
        return RepackJob(image=dest.image, geometry=geometry)

    def write(self, job: RepackJob, path: str) -> None:
        self.loader.save(job.image, path)
        logger.info("Saved %s", path)

    @staticmethod
    def _log_geometry(source: SourceRaster, geometry: GridGeometry) -> None:
        logger.info(
            "Source grid %dx%d, destination grid %dx%d, canvas %dx%d",
            geometry.src_frames_x,
            geometry.src_frames_y,
            geometry.dest_frames_x,
            geometry.dest_frames_y,
            *geometry.canvas_size,
        )
        unused_x = source.width - geometry.src_frames_x * geometry.frame_width
        unused_y = source.height - geometry.src_frames_y * geometry.frame_height
        if unused_x or unused_y:
            logger.info(
                "Ignoring %d pixel column(s) and %d pixel row(s) outside the frame grid",
                unused_x,
                unused_y,
            )


def repack(
    image: Image.Image,
    frame_width: int,
    frame_height: int,
    frames_per_row: Optional[int] = None,
) -> Image.Image:
    """Repack an in-memory sprite sheet and return the new sheet."""
    if image.mode != OUTPUT_MODE:
        image = image.convert(OUTPUT_MODE)
    settings = RepackSettings(frame_width, frame_height, frames_per_row)
    return RepackJobBuilder(settings).build(SourceRaster(image)).image


def repack_file(input_path: str, output_path: str, settings: RepackSettings) -> RepackJob:
    """Repack input_path into output_path. Nothing is written if any step fails."""
    builder = RepackJobBuilder(settings)
    job = builder.build_from_file(input_path)
    builder.write(job, output_path)
    return job
