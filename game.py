# game.py
# ──────────────────────────────────────────────────────────────
# Session state machine and per-frame simulation.
# Knows nothing about pygame: game_loop.py drives it and
# renderer.py paints what get_drawables() returns.
# ──────────────────────────────────────────────────────────────

import random
from dataclasses import dataclass

from config import (
    WIDTH, HEIGHT, PALETTE, PALETTE_SIZE,
    GAP_MARGIN, PLAYER_RADIUS, LOG_ENABLED
)
from entities import Player, spawn_obstacle, random_color
from drawables import project
from managers import DifficultyManager
from logging_utils import log_debug

NOT_STARTED = "not_started"
RUNNING = "running"
GAME_OVER = "game_over"

LEFT = "left"
RIGHT = "right"


@dataclass(frozen=True)
class StepResult:
    score: int
    running: bool
    game_over: bool


def _validate(width, height, palette):
    if width <= 0 or height <= 0:
        raise ValueError(f"canvas must have a positive size, got {width}x{height}")
    if width <= 2 * GAP_MARGIN:
        raise ValueError(f"canvas width {width} leaves no room between the {GAP_MARGIN}px gate margins")
    if width < 2 * PLAYER_RADIUS:
        raise ValueError(f"canvas width {width} is narrower than the player")
    if len(palette) != PALETTE_SIZE or len(set(palette)) != PALETTE_SIZE:
        raise ValueError(f"palette must hold exactly {PALETTE_SIZE} distinct colors, got {list(palette)!r}")


# ──────────────────────────────────────────────────────────────
# Main Game class
# ──────────────────────────────────────────────────────────────
class Game:
    def __init__(self, width=WIDTH, height=HEIGHT, palette=PALETTE, rng=None):
        _validate(width, height, palette)
        self.width = width
        self.height = height
        self.palette = tuple(palette)
        self.rng = rng if rng is not None else random.Random()

        self.state = NOT_STARTED
        self.started = False
        self.inputs = {LEFT: False, RIGHT: False}
        self._reset()

    def _reset(self):
        self.player = Player(self.width, self.height, random_color(self.palette, rng=self.rng))
        self.difficulty = DifficultyManager()
        self.obstacles = []
        self.score = 0
        self.frame_count = 0

    # ──────────────────────────────────────────────────────
    # Read-only views
    @property
    def running(self):
        return self.state == RUNNING

    @property
    def game_over(self):
        return self.state == GAME_OVER

    @property
    def obstacle_speed(self):
        return self.difficulty.speed

    @property
    def spawn_period(self):
        return self.difficulty.spawn_period

    def result(self):
        return StepResult(self.score, self.running, self.game_over)

    # ──────────────────────────────────────────────────────
    # External triggers
    def start_or_restart(self):
        self._reset()
        self.state = RUNNING
        self.started = True
        if LOG_ENABLED:
            log_debug(f"color={self.player.color}", context="Game.start_or_restart")

    def set_directional_input(self, direction, asserted):
        if direction not in self.inputs:
            raise ValueError(f"unknown direction {direction!r}")
        self.inputs[direction] = bool(asserted)

    def trigger_color_change(self):
        """Swap the player to a different palette color while running.

        Returns the new color, or None when the session is not running.
        """
        if not self.running:
            return None
        self.player.color = random_color(self.palette, exclude=self.player.color, rng=self.rng)
        if LOG_ENABLED:
            log_debug(f"color={self.player.color}", context="Game.trigger_color_change")
        return self.player.color

    # ──────────────────────────────────────────────────────
    # Update loop
    def step(self):
        if not self.running:
            return self.result()

        self.player.update(self.inputs[LEFT], self.inputs[RIGHT], self.width)

        self.frame_count += 1
        if self.difficulty.should_spawn(self.frame_count):
            obs = spawn_obstacle(self.width, self.palette, rng=self.rng)
            self.obstacles.append(obs)
            if LOG_ENABLED:
                log_debug(f"frame={self.frame_count} {obs!r}", context="Game.step")
        self.difficulty.update(self.frame_count)

        # Newest first so removal by index stays safe
        speed = self.difficulty.speed
        for i in range(len(self.obstacles) - 1, -1, -1):
            o = self.obstacles[i]
            o.update(speed)

            if o.blocks(self.player) and o.color != self.player.color:
                self._end(o)
                return self.result()

            if not o.passed and o.has_cleared(self.player):
                o.passed = True
                self.score += 1

            if o.off_screen(self.height):
                del self.obstacles[i]

        return self.result()

    def _end(self, obstacle):
        self.state = GAME_OVER
        if LOG_ENABLED:
            log_debug(f"score={self.score} frame={self.frame_count} hit={obstacle!r}",
                      context="Game.game_over")

    def get_drawables(self):
        return project(self.player, self.obstacles)
