from backend.models.config import SearchConfig
from backend.models.distances import DistanceMap
from backend.models.grid import (
    MAX_HEIGHT,
    MAX_WIDTH,
    UNREACHABLE,
    Coord,
    Direction,
    Grid,
    GridError,
)
from backend.models.layout import SKIP_WIDTH, RelativeLayout, RelativePosition
from backend.models.result import SearchResult

__all__ = [
    "MAX_HEIGHT",
    "MAX_WIDTH",
    "SKIP_WIDTH",
    "UNREACHABLE",
    "Coord",
    "Direction",
    "DistanceMap",
    "Grid",
    "GridError",
    "RelativeLayout",
    "RelativePosition",
    "SearchConfig",
    "SearchResult",
]
