from __future__ import annotations

from typing import Iterator, Tuple

from .types import FrameMove, GridGeometry


def frame_index(x: int, y: int, src_frames_y: int) -> int:
    """Return the linear index of source grid cell (x, y).

    Frames are counted down each source column before moving to the next one.
    """
    return x * src_frames_y + y


def dest_cell(index: int, dest_frames_x: int) -> Tuple[int, int]:
    """Return the destination grid cell for a linear index, filled row by row."""
    return index % dest_frames_x, index // dest_frames_x


def source_offset(x: int, y: int, frame_width: int, frame_height: int) -> Tuple[int, int]:
    return x * frame_width, y * frame_height


def source_coord_to_dest_offset(
    x: int,
    y: int,
    src_frames_y: int,
    dest_frames_x: int,
    frame_width: int,
    frame_height: int,
) -> Tuple[int, int]:
    """Return the destination pixel offset of source grid cell (x, y)."""
    grid_x, grid_y = dest_cell(frame_index(x, y, src_frames_y), dest_frames_x)
    return grid_x * frame_width, grid_y * frame_height


def iter_frame_moves(geometry: GridGeometry) -> Iterator[FrameMove]:
    """Yield every frame of the source grid, outer loop over columns."""
    fw = geometry.frame_width
    fh = geometry.frame_height
    for x in range(geometry.src_frames_x):
        for y in range(geometry.src_frames_y):
            index = frame_index(x, y, geometry.src_frames_y)
            source_x, source_y = source_offset(x, y, fw, fh)
            dest_x, dest_y = source_coord_to_dest_offset(
                x, y, geometry.src_frames_y, geometry.dest_frames_x, fw, fh
            )
            yield FrameMove(
                index=index,
                grid_x=x,
                grid_y=y,
                source_x=source_x,
                source_y=source_y,
                dest_x=dest_x,
                dest_y=dest_y,
            )
