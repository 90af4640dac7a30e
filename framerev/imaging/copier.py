from __future__ import annotations

from ..errors import InternalConsistencyError
from .types import CanvasRaster, SourceRaster


def copy_frame(
    source: SourceRaster,
    source_x: int,
    source_y: int,
    dest: CanvasRaster,
    dest_x: int,
    dest_y: int,
    frame_width: int,
    frame_height: int,
) -> None:
    """Copy one frame-sized block of pixels from source into dest."""
    if not source.contains(source_x, source_y, frame_width, frame_height):
        raise InternalConsistencyError(
            f"Source block {frame_width}x{frame_height} at ({source_x}, {source_y}) "
            f"is outside the {source.width}x{source.height} source image"
        )
    if not dest.contains(dest_x, dest_y, frame_width, frame_height):
        raise InternalConsistencyError(
            f"Destination block {frame_width}x{frame_height} at ({dest_x}, {dest_y}) "
            f"is outside the {dest.width}x{dest.height} destination image"
        )
    block = source.view(source_x, source_y, frame_width, frame_height)
    dest.write_block(dest_x, dest_y, block)
