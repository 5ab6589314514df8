import logging

import numpy as np

from .clock import Scheduler, SessionClock, Toast
from .generator import generate_maze
from .grid import FlatGrid, parse_direction
from .levels import DEFAULT_LEVEL, level_size
from .pathfinder import bfs_path, next_step

logger = logging.getLogger(__name__)

MSG_WIN = "Congratulations! You reached the destination!"
MSG_WIN_ASSISTED = "Finished (solution was shown). Try again without it!"
MSG_EXITED = "Game exited."


class MazeSession:
    """
    All state of one game: grid, player, target, overlay flags and timers.

    A session is inactive until `start`. Once the player reaches the target (or the
    game is exited) input is ignored again until the next `start`.
    """

    def __init__(self, level=DEFAULT_LEVEL, layout=None, target=None, rng=None, scheduler=None):
        self.level = level
        self.layout = layout
        self.layout_target = tuple(target) if target is not None else None
        self.rng = rng if rng is not None else np.random.default_rng()
        self.scheduler = scheduler if scheduler is not None else Scheduler()
        self.toast = Toast(self.scheduler)
        self.clock = SessionClock(self.scheduler, self.rng, on_cheer=self.toast.show)

        self.rows = self.cols = level_size(level)
        self.grid = None
        self.player = (0, 0)
        self.target = (0, 0)
        self.active = False
        self.show_solution = False
        self.used_solution = False
        self.hint_segment = None
        self.status = ""

    # --- Derived state ---

    @property
    def elapsed(self):
        return self.clock.elapsed

    @property
    def won(self):
        return self.grid is not None and not self.active and self.player == self.target

    @property
    def solution_label(self):
        return "Hide Solution" if self.show_solution else "Show Solution"

    def solution_path(self):
        """Full path from the player to the target while the overlay is on, else None."""
        if self.grid is None or not self.show_solution:
            return None
        return bfs_path(self.grid, self.player, self.target)

    # --- Lifecycle ---

    def start(self, level=None):
        if level is not None:
            self.level = level
        self._build_grid()

        self.show_solution = False
        self.used_solution = False
        self.hint_segment = None
        self.status = ""
        self.active = True

        self.clock.start()
        logger.debug("Session started: %sx%s grid, target %s", self.rows, self.cols, self.target)
        # A 1x1 board is solved before the first move
        if self.player == self.target:
            self._finish()

    def _build_grid(self):
        if self.layout is not None:
            grid = self.layout if isinstance(self.layout, FlatGrid) else FlatGrid(self.layout)
            target = self.layout_target or (grid.rows - 1, grid.cols - 1)
            if not grid.is_open((0, 0)) or not grid.is_open(target):
                raise ValueError("Flat layout start and target must be open cells")
            self.grid = grid
            self.rows, self.cols = grid.rows, grid.cols
            self.target = target
        else:
            self.rows = self.cols = level_size(self.level)
            self.grid = generate_maze(self.rows, self.cols, self.rng)
            self.target = (self.rows - 1, self.cols - 1)
        self.player = (0, 0)

    def change_shape(self):
        """New maze at the same difficulty; overlay state is kept."""
        if not self.active:
            self.start()
            return
        self._build_grid()
        self.hint_segment = None
        logger.debug("Maze regenerated: %sx%s", self.rows, self.cols)

    def exit_game(self):
        self.active = False
        self.clock.reset()
        self.grid = None
        self.hint_segment = None
        self.status = MSG_EXITED
        self.show_solution = False
        self.used_solution = False
        logger.debug("Session exited")

    # --- Input ---

    def move(self, direction):
        """Moves the player one cell if no wall is in the way. Returns True if the player moved."""
        direction = parse_direction(direction)
        if not self.active:
            return False

        # A move always clears the hint; asking again shows the fresh next step
        self.hint_segment = None
        if not self.grid.can_move(self.player, direction):
            return False

        self.player = self.grid.step(self.player, direction)
        if self.player == self.target:
            self._finish()
        return True

    def _finish(self):
        self.active = False
        self.clock.stop()
        self.status = MSG_WIN_ASSISTED if self.used_solution else MSG_WIN
        logger.debug("Target reached in %ss (assisted=%s)", self.elapsed, self.used_solution)

    def toggle_solution(self):
        if not self.active:
            return
        self.show_solution = not self.show_solution
        if self.show_solution:
            self.used_solution = True
        self.hint_segment = None

    def give_hint(self):
        """Stores and returns the next-step segment [player, step], or None."""
        if not self.active:
            return None
        segment = next_step(self.grid, self.player, self.target)
        if segment is not None:
            self.hint_segment = segment
        return segment

    def advance(self, ms):
        self.scheduler.advance(ms)
