"""Repack grid-organized sprite sheets into a new number of frames per row.

Library logging is silent by default. To see the computed grids and every
frame move:

    import logging
    logging.basicConfig(level=logging.DEBUG)
"""

import logging

from .errors import ConfigError, FatalInputError, FrameRevError, InternalConsistencyError, OutputError
from .grid import GridGeometry, compute_geometry
from .repack_job import RepackJob, RepackJobBuilder, RepackSettings, repack, repack_file

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "compute_geometry",
    "ConfigError",
    "FatalInputError",
    "FrameRevError",
    "GridGeometry",
    "InternalConsistencyError",
    "OutputError",
    "repack",
    "repack_file",
    "RepackJob",
    "RepackJobBuilder",
    "RepackSettings",
]
