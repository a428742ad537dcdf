# managers.py

import time

from config import (
    LOG_ENABLED,
    BASE_OBSTACLE_SPEED, BASE_SPAWN_PERIOD, RAMP_INTERVAL,
    SPEED_INCREMENT, PERIOD_DECREMENT, MIN_SPAWN_PERIOD
)
from logging_utils import log_debug


class Timer:
    def __init__(self, duration, clock=time.time):
        self.duration = duration
        self._clock = clock
        self.start = clock()
    def expired(self):
        return (self._clock() - self.start) >= self.duration
    def reset(self):
        self.start = self._clock()


class DifficultyManager:
    """Frame-driven spawn cadence and obstacle speed."""

    def __init__(self):
        self.speed = BASE_OBSTACLE_SPEED
        self.spawn_period = BASE_SPAWN_PERIOD

    def should_spawn(self, frame):
        return frame % self.spawn_period == 0

    def update(self, frame):
        """Ramp up on every RAMP_INTERVAL-th frame; return True if it did."""
        if frame % RAMP_INTERVAL != 0:
            return False
        self.speed += SPEED_INCREMENT
        self.spawn_period = max(MIN_SPAWN_PERIOD, self.spawn_period - PERIOD_DECREMENT)
        if LOG_ENABLED:
            log_debug(f"frame={frame} speed={self.speed} period={self.spawn_period}",
                      context="DifficultyManager.update")
        return True
