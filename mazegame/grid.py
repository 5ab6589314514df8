from abc import ABC, abstractmethod

import numpy as np

# Wall / direction order: top, right, bottom, left
UP, RIGHT, DOWN, LEFT = 0, 1, 2, 3

DIRECTION_NAMES = {"up": UP, "right": RIGHT, "down": DOWN, "left": LEFT}
OFFSETS = {UP: (-1, 0), RIGHT: (0, 1), DOWN: (1, 0), LEFT: (0, -1)}
OPPOSITE = {UP: DOWN, RIGHT: LEFT, DOWN: UP, LEFT: RIGHT}

# Flat grid cell types
CELL_OPEN = 0
CELL_BLOCKED = 1

# 10 rows x 9 columns, start (0, 0), target (9, 8)
SAMPLE_LAYOUT = [
    [0, 1, 0, 0, 0, 0, 0, 1, 0],
    [0, 1, 0, 1, 1, 1, 0, 1, 0],
    [0, 0, 0, 1, 0, 0, 0, 0, 0],
    [1, 1, 0, 1, 0, 1, 1, 1, 0],
    [0, 0, 0, 0, 0, 1, 0, 0, 0],
    [0, 1, 1, 1, 1, 1, 0, 1, 1],
    [0, 0, 0, 1, 0, 0, 0, 1, 0],
    [1, 1, 0, 1, 0, 1, 1, 1, 0],
    [0, 0, 0, 0, 0, 1, 0, 0, 0],
    [0, 1, 1, 1, 0, 0, 0, 1, 0],
]
SAMPLE_TARGET = (9, 8)


def parse_direction(direction):
    """Accepts a direction name ('up', 'right', 'down', 'left') or constant."""
    if direction in OFFSETS:
        return direction
    try:
        return DIRECTION_NAMES[direction]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown direction: {direction!r}") from None


class Grid(ABC):
    """
    A rows x cols grid of (row, col) positions with a single adjacency predicate.
    Generation and pathfinding only ever talk to `can_move` / `neighbors`.
    """

    def __init__(self, rows, cols):
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols

    def in_bounds(self, pos):
        r, c = pos
        return 0 <= r < self.rows and 0 <= c < self.cols

    def step(self, pos, direction):
        dr, dc = OFFSETS[direction]
        return (pos[0] + dr, pos[1] + dc)

    @abstractmethod
    def can_move(self, pos, direction):
        """True if one step from `pos` in `direction` is allowed."""

    def neighbors(self, pos):
        """Reachable neighbours of `pos` in up, right, down, left order."""
        result = []
        for direction in (UP, RIGHT, DOWN, LEFT):
            if self.can_move(pos, direction):
                result.append(self.step(pos, direction))
        return result


class WallGrid(Grid):
    """Wall-bitmask grid: every cell starts with all four walls standing."""

    def __init__(self, rows, cols):
        super().__init__(rows, cols)
        self.walls = np.ones((rows, cols, 4), dtype=bool)
        self.visited = np.zeros((rows, cols), dtype=bool)

    def has_wall(self, pos, direction):
        return bool(self.walls[pos[0], pos[1], direction])

    def can_move(self, pos, direction):
        if self.has_wall(pos, direction):
            return False
        # Outer walls are never removed, but stay safe for hand-built grids
        return self.in_bounds(self.step(pos, direction))

    def remove_wall(self, a, b):
        """Carves the passage between two adjacent cells, on both sides at once."""
        offset = (b[0] - a[0], b[1] - a[1])
        for direction, delta in OFFSETS.items():
            if delta == offset:
                self.walls[a[0], a[1], direction] = False
                self.walls[b[0], b[1], OPPOSITE[direction]] = False
                return
        raise ValueError(f"Cells {a} and {b} are not adjacent")

    def removed_walls(self):
        # Each interior passage is counted once, from its right/bottom side
        return int(np.count_nonzero(~self.walls[:, :, RIGHT]) + np.count_nonzero(~self.walls[:, :, DOWN]))


class FlatGrid(Grid):
    """Passability grid: 0 = open, 1 = blocked. No per-direction walls."""

    def __init__(self, layout):
        layout = [list(row) for row in layout]
        widths = {len(row) for row in layout}
        if len(widths) > 1:
            raise ValueError("Flat layout rows must all have the same length")
        super().__init__(len(layout), widths.pop() if widths else 0)
        self.cells = np.array(layout, dtype=np.uint8)

    def is_open(self, pos):
        return self.in_bounds(pos) and self.cells[pos[0], pos[1]] == CELL_OPEN

    def can_move(self, pos, direction):
        return self.is_open(self.step(pos, direction))


def sample_grid():
    return FlatGrid(SAMPLE_LAYOUT)
