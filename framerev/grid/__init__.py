from .geometry import compute_geometry, div_ceil, require_positive
from .indexing import dest_cell, frame_index, iter_frame_moves, source_coord_to_dest_offset, source_offset
from .types import FrameMove, GridGeometry

__all__ = [
    "compute_geometry",
    "dest_cell",
    "div_ceil",
    "frame_index",
    "FrameMove",
    "GridGeometry",
    "iter_frame_moves",
    "require_positive",
    "source_coord_to_dest_offset",
    "source_offset",
]
