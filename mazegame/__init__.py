from .generator import generate_maze
from .grid import SAMPLE_LAYOUT, SAMPLE_TARGET, FlatGrid, Grid, WallGrid
from .levels import LEVELS, level_size
from .pathfinder import bfs_path, next_step
from .session import MazeSession

__all__ = [
    "FlatGrid",
    "Grid",
    "LEVELS",
    "MazeSession",
    "SAMPLE_LAYOUT",
    "SAMPLE_TARGET",
    "WallGrid",
    "bfs_path",
    "generate_maze",
    "level_size",
    "next_step",
]
