from collections import deque


def bfs_path(grid, source, dest):
    """
    Shortest path from `source` to `dest` (both inclusive) as a list of (row, col).
    Neighbours are expanded up, right, down, left, so ties always resolve the same way.
    Returns [] if `dest` cannot be reached.
    """
    source, dest = tuple(source), tuple(dest)
    if not grid.in_bounds(source) or not grid.in_bounds(dest):
        return []

    parents = {source: None}
    queue = deque([source])

    while queue:
        cur = queue.popleft()
        if cur == dest:
            path = []
            while cur is not None:
                path.append(cur)
                cur = parents[cur]
            path.reverse()
            return path

        for nxt in grid.neighbors(cur):
            if nxt not in parents:
                parents[nxt] = cur
                queue.append(nxt)

    return []


def next_step(grid, source, dest):
    """First segment [source, step] of the shortest path, or None."""
    path = bfs_path(grid, source, dest)
    if len(path) >= 2:
        return path[:2]
    return None
