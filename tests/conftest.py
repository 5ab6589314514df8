import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pytest

from mazegame.clock import Scheduler
from mazegame.session import MazeSession


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def session(rng, scheduler):
    s = MazeSession(level="easy", rng=rng, scheduler=scheduler)
    s.start()
    return s
