import numpy as np

from .grid import WallGrid


def generate_maze(rows, cols, rng=None):
    """
    Generates a perfect maze using randomized Depth-First Search (Recursive Backtracker).
    Every cell is visited once, so exactly rows * cols - 1 walls are removed and
    there is one simple path between any two cells.
    """
    if rng is None:
        rng = np.random.default_rng()

    grid = WallGrid(rows, cols)
    grid.visited[0, 0] = True
    stack = [(0, 0)]

    while stack:
        r, c = stack[-1]

        neighbors = []
        for nr, nc in [(r - 1, c), (r, c + 1), (r + 1, c), (r, c - 1)]:  # up, right, down, left
            if 0 <= nr < rows and 0 <= nc < cols and not grid.visited[nr, nc]:
                neighbors.append((nr, nc))

        if neighbors:
            # Select an index; Generator.choice would flatten the list of tuples
            nxt = neighbors[rng.integers(len(neighbors))]
            grid.remove_wall((r, c), nxt)
            grid.visited[nxt] = True
            stack.append(nxt)
        else:
            stack.pop()

    return grid
