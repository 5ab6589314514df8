from .pathfinder import next_step


def policy(env):
    # Strategy: follow the BFS shortest path one cell at a time. The movement code
    # is picked from the offset between the player and the next cell on the path.
    session = env.session
    if not session.active:
        return [0, 0, 0]

    segment = next_step(session.grid, session.player, session.target)
    if segment is None:
        return [0, 0, 0]  # No route to the exit

    (r, c), (nr, nc) = segment
    if nr < r:
        return [1, 0, 0]  # Move up
    elif nr > r:
        return [2, 0, 0]  # Move down
    elif nc < c:
        return [3, 0, 0]  # Move left
    else:
        return [4, 0, 0]  # Move right
