from __future__ import annotations

from typing import Optional

from ..errors import ConfigError, FatalInputError
from .types import GridGeometry


def div_ceil(dividend: int, divisor: int) -> int:
    """Divide two non-negative integers, rounding up on any remainder."""
    quotient, remainder = divmod(dividend, divisor)
    return quotient + (1 if remainder != 0 else 0)


def require_positive(value: int, name: str) -> int:
    """Return value if it is a positive integer, else raise ConfigError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}", name)
    if value <= 0:
        raise ConfigError(f"{name} must be greater than zero, got {value}", name)
    return value


def compute_geometry(
    source_width: int,
    source_height: int,
    frame_width: int,
    frame_height: int,
    frames_per_row: Optional[int] = None,
) -> GridGeometry:
    """Compute the source grid and the destination grid it is repacked into.

    Pixels past the last whole frame on the right or bottom edge are not part
    of any frame. When frames_per_row is omitted the destination keeps the
    source row width.
    """
    require_positive(frame_width, "frame width")
    require_positive(frame_height, "frame height")
    if frames_per_row is not None:
        require_positive(frames_per_row, "frames per row")
    if frame_width > source_width:
        raise FatalInputError(
            f"Frame width {frame_width} is larger than source width {source_width}"
        )
    if frame_height > source_height:
        raise FatalInputError(
            f"Frame height {frame_height} is larger than source height {source_height}"
        )

    src_frames_x = source_width // frame_width
    src_frames_y = source_height // frame_height
    total_frames = src_frames_x * src_frames_y
    dest_frames_x = frames_per_row if frames_per_row is not None else src_frames_x
    dest_frames_y = div_ceil(total_frames, dest_frames_x)
    return GridGeometry(
        src_frames_x=src_frames_x,
        src_frames_y=src_frames_y,
        dest_frames_x=dest_frames_x,
        dest_frames_y=dest_frames_y,
        frame_width=frame_width,
        frame_height=frame_height,
    )
