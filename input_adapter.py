"""Translate raw pygame input events into Game calls."""

from __future__ import annotations

from typing import Optional, Tuple

import pygame

from config import WIDTH, HEIGHT, SWIPE_THRESHOLD, LOG_ENABLED
from game import LEFT, RIGHT
from logging_utils import log_debug

KEY_DIRECTIONS = {
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}


def clamp(v, lo, hi):
    return max(lo, min(v, hi))


def adjust_mouse_to_viewport(pos: Tuple[int, int], window_size: Tuple[int, int]) -> Tuple[int, int]:
    """Map a window-space point into the letterboxed canvas, clamped to it."""
    x_off = (window_size[0] - WIDTH) // 2
    y_off = (window_size[1] - HEIGHT) // 2
    return (clamp(pos[0] - x_off, 0, WIDTH), clamp(pos[1] - y_off, 0, HEIGHT))


def finger_to_window(event, window_size: Tuple[int, int]) -> Tuple[float, float]:
    """Scale a finger event's normalized position to window pixels."""
    return (event.x * window_size[0], event.y * window_size[1])


def is_tap(event) -> bool:
    """One event per physical press: a real left click or a finger down.

    SDL mirrors every touch as a mouse click flagged ``touch``; those are
    dropped so the FINGERDOWN alone stands for the tap.
    """
    if event.type == pygame.FINGERDOWN:
        return True
    return (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1
            and not getattr(event, "touch", False))


def tap_position(event, window_size: Tuple[int, int]) -> Tuple[int, int]:
    """Canvas coordinates of a tap from either a mouse or a finger event."""
    if event.type == pygame.FINGERDOWN:
        return adjust_mouse_to_viewport(finger_to_window(event, window_size), window_size)
    return adjust_mouse_to_viewport(event.pos, window_size)


class InputAdapter:
    """Keyboard, mouse and touch glue around a Game.

    Arrow keys are level-triggered. A click or tap changes color while the
    game runs and restarts it after a game over. Dragging a finger more than
    SWIPE_THRESHOLD pixels holds that direction until the finger lifts.
    """

    def __init__(self, game) -> None:
        self.game = game
        self.touch_start_x: Optional[float] = None

    def handle_event(self, event, window_size: Tuple[int, int] = (WIDTH, HEIGHT)) -> bool:
        """Route one event; finger travel is measured in window pixels."""
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            direction = KEY_DIRECTIONS.get(event.key)
            if direction is None:
                return False
            self.game.set_directional_input(direction, event.type == pygame.KEYDOWN)
            return True

        if event.type == pygame.FINGERDOWN:
            self.touch_start_x = finger_to_window(event, window_size)[0]

        if is_tap(event):
            self.click()
            return True

        if event.type == pygame.FINGERMOTION:
            return self._swipe(finger_to_window(event, window_size)[0])

        if event.type == pygame.FINGERUP:
            self.touch_start_x = None
            self.game.set_directional_input(LEFT, False)
            self.game.set_directional_input(RIGHT, False)
            return True

        return False

    def click(self) -> None:
        if self.game.running:
            self.game.trigger_color_change()
        elif self.game.game_over:
            if LOG_ENABLED:
                log_debug("restart from click", context="InputAdapter")
            self.game.start_or_restart()

    def _swipe(self, touch_x: float) -> bool:
        if self.touch_start_x is None:
            self.touch_start_x = touch_x
            return False
        if touch_x < self.touch_start_x - SWIPE_THRESHOLD:
            held, released = LEFT, RIGHT
        elif touch_x > self.touch_start_x + SWIPE_THRESHOLD:
            held, released = RIGHT, LEFT
        else:
            return False
        self.game.set_directional_input(held, True)
        self.game.set_directional_input(released, False)
        self.touch_start_x = touch_x
        return True
