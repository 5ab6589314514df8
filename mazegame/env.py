import gymnasium as gym
import numpy as np
import pygame
from gymnasium.spaces import Box, MultiDiscrete

from .grid import DOWN, LEFT, RIGHT, UP
from .levels import DEFAULT_LEVEL
from .renderer import MazeRenderer
from .session import MazeSession

# Movement component of the action: 0-4 none/up/down/left/right
MOVEMENT_DIRECTIONS = {1: UP, 2: DOWN, 3: LEFT, 4: RIGHT}


class GameEnv(gym.Env):
    """
    A Gymnasium environment for a procedurally generated maze game.
    The player walks from the top-left cell to the exit in the bottom-right cell.
    A hint shows the next step; the full solution can be toggled on and off,
    but a win with the solution shown counts as assisted.
    """
    metadata = {"render_modes": ["rgb_array"]}

    # Must be a short, user-facing control string:
    user_guide = (
        "Controls: Arrow keys to move. Space (H) shows a one-step hint, Shift (S) toggles the solution."
    )

    # Must be a short, user-facing description of the game:
    game_description = (
        "Find your way through a randomly carved maze to the green exit. "
        "Using the full solution still counts, but only as an assisted finish."
    )

    # Should frames auto-advance or wait for user input?
    auto_advance = False

    SCREEN_WIDTH = 640
    SCREEN_HEIGHT = 720

    STEP_REWARD = -0.01
    WIN_REWARD = 10.0
    ASSISTED_WIN_REWARD = 1.0

    def __init__(self, render_mode="rgb_array", level=DEFAULT_LEVEL, layout=None, target=None):
        super().__init__()
        self.render_mode = render_mode

        self.observation_space = Box(
            low=0, high=255, shape=(self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        pygame.init()
        self.screen = pygame.Surface((self.SCREEN_WIDTH, self.SCREEN_HEIGHT))
        self.renderer = MazeRenderer(self.SCREEN_WIDTH, self.SCREEN_HEIGHT)

        self.level = level
        self.session = MazeSession(level=level, layout=layout, target=target)
        self.steps = 0
        self.score = 0.0

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        if options and "level" in options:
            self.level = options["level"]

        # Stop the old session's timers before the next ones are scheduled
        self.session.clock.stop()
        self.session.rng = self.np_random
        self.session.clock.rng = self.np_random
        self.session.start(self.level)

        self.steps = 0
        self.score = 0.0
        return self._get_observation(), self._get_info()

    def step(self, action):
        if not self.session.active:
            return self._get_observation(), 0, True, False, self._get_info()

        movement, hint_pressed, solution_pressed = (int(a) for a in action[:3])
        self.steps += 1
        reward = self.STEP_REWARD

        if solution_pressed == 1:
            self.session.toggle_solution()
        if hint_pressed == 1:
            self.session.give_hint()
        if movement in MOVEMENT_DIRECTIONS:
            self.session.move(MOVEMENT_DIRECTIONS[movement])

        terminated = not self.session.active
        if terminated and self.session.won:
            reward = self.ASSISTED_WIN_REWARD if self.session.used_solution else self.WIN_REWARD

        self.score += reward
        return self._get_observation(), reward, terminated, False, self._get_info()

    def tick(self, ms):
        """Advances the session timers by `ms` milliseconds of play time."""
        self.session.advance(ms)

    def render(self):
        return self._get_observation()

    def _get_observation(self):
        self.renderer.draw(self.screen, self.session)
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _get_info(self):
        return {
            "score": self.score,
            "steps": self.steps,
            "elapsed": self.session.elapsed,
            "player_pos": self.session.player,
            "exit_pos": self.session.target,
            "won": self.session.won,
            "assisted": self.session.used_solution,
        }

    def close(self):
        self.session.scheduler.cancel_all()
        pygame.font.quit()
        pygame.quit()

    def validate_implementation(self):
        """Self-check of spaces and the reset/step contract."""
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        obs, info = self.reset()
        assert obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert obs.dtype == np.uint8
        assert isinstance(info, dict)

        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert trunc == False
        assert isinstance(info, dict)

        print("✓ Implementation validated successfully")
