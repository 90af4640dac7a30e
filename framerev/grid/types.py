from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GridGeometry:
    """Source and destination frame grids for one repack."""

    src_frames_x: int
    src_frames_y: int
    dest_frames_x: int
    dest_frames_y: int
    frame_width: int
    frame_height: int

    @property
    def total_frames(self) -> int:
        """Return the number of whole frames found in the source."""
        return self.src_frames_x * self.src_frames_y

    @property
    def canvas_size(self) -> Tuple[int, int]:
        """Return destination image size in pixels."""
        return (
            self.dest_frames_x * self.frame_width,
            self.dest_frames_y * self.frame_height,
        )

    @property
    def unused_cells(self) -> int:
        """Return how many trailing destination cells stay background."""
        return self.dest_frames_x * self.dest_frames_y - self.total_frames


@dataclass(frozen=True)
class FrameMove:
    """Where one source frame is read from and written to, in pixels."""

    index: int
    grid_x: int
    grid_y: int
    source_x: int
    source_y: int
    dest_x: int
    dest_y: int
