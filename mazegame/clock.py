import logging

from .levels import CHEERS, CHEER_MS, TICK_MS, TOAST_MS

logger = logging.getLogger(__name__)


class ScheduledTask:
    """A callback due at `due` ms; repeats every `interval` ms when `repeat` is set."""

    def __init__(self, scheduler, due, interval, callback, repeat):
        self.scheduler = scheduler
        self.due = due
        self.interval = interval
        self.callback = callback
        self.repeat = repeat
        self.cancelled = False

    @property
    def active(self):
        return not self.cancelled

    def cancel(self):
        self.cancelled = True
        self.scheduler._discard(self)


class Scheduler:
    """
    Simulated millisecond clock. Nothing fires on its own: `advance` moves time
    forward and runs every task that falls due, earliest first.
    """

    def __init__(self):
        self.now = 0
        self.tasks = []

    def call_every(self, interval, callback):
        return self._add(interval, callback, repeat=True)

    def call_later(self, delay, callback):
        return self._add(delay, callback, repeat=False)

    def _add(self, interval, callback, repeat):
        if interval <= 0:
            raise ValueError(f"Task interval must be positive, got {interval}")
        task = ScheduledTask(self, self.now + interval, interval, callback, repeat)
        self.tasks.append(task)
        return task

    def _discard(self, task):
        if task in self.tasks:
            self.tasks.remove(task)

    def advance(self, ms):
        target = self.now + ms
        while True:
            due = [t for t in self.tasks if t.due <= target]
            if not due:
                break
            task = min(due, key=lambda t: t.due)
            self.now = task.due
            if task.repeat:
                task.due += task.interval
            else:
                self._discard(task)
            task.callback()
        self.now = target

    def cancel_all(self):
        for task in list(self.tasks):
            task.cancel()


class SessionClock:
    """
    Elapsed-seconds counter plus a periodic encouragement toast.
    Both recurring tasks are acquired in `start` and released together in `stop`.
    """

    def __init__(self, scheduler, rng, on_cheer=None):
        self.scheduler = scheduler
        self.rng = rng
        self.on_cheer = on_cheer
        self.elapsed = 0
        self._tick_task = None
        self._cheer_task = None

    @property
    def running(self):
        return self._tick_task is not None

    def start(self):
        # Never leave an older pair of timers behind
        self.stop()
        self.elapsed = 0
        self._tick_task = self.scheduler.call_every(TICK_MS, self._tick)
        self._cheer_task = self.scheduler.call_every(CHEER_MS, self._cheer)

    def stop(self):
        if self._tick_task is None and self._cheer_task is None:
            return
        for task in (self._tick_task, self._cheer_task):
            if task is not None:
                task.cancel()
        self._tick_task = None
        self._cheer_task = None
        logger.debug("Session clock stopped at %ss", self.elapsed)

    def reset(self):
        self.stop()
        self.elapsed = 0

    def _tick(self):
        self.elapsed += 1

    def _cheer(self):
        msg = CHEERS[self.rng.integers(len(CHEERS))]
        if self.on_cheer is not None:
            self.on_cheer(msg)

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False


class Toast:
    """A transient message that clears itself after TOAST_MS."""

    def __init__(self, scheduler):
        self.scheduler = scheduler
        self.text = ""
        self._task = None

    def show(self, text):
        if self._task is not None:
            self._task.cancel()
        self.text = text
        self._task = self.scheduler.call_later(TOAST_MS, self._hide)

    def _hide(self):
        self.text = ""
        self._task = None
