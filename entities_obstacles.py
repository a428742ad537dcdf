# entities_obstacles.py

import random

from config import GAP_MARGIN, GAP_WIDTH, OBSTACLE_HEIGHT, OBSTACLE_START_Y
from entities_utils import bands_overlap


class Obstacle:
    """A full-width barrier with one gate scrolling down the canvas."""

    def __init__(self, width, gap_position, color, y=OBSTACLE_START_Y):
        self.x = 0
        self.y = float(y)
        self.width = width
        self.height = OBSTACLE_HEIGHT
        self.gap_width = GAP_WIDTH
        self.gap_position = gap_position
        self.color = color
        self.passed = False

    @property
    def bottom(self):
        return self.y + self.height

    def update(self, speed):
        self.y += speed

    def overlaps(self, player):
        return bands_overlap(self.y, self.bottom, player.top, player.bottom)

    def in_gap(self, x):
        return self.gap_position <= x < self.gap_position + self.gap_width

    def blocks(self, player):
        """True when the player touches the solid, colored part of the band."""
        return self.overlaps(player) and not self.in_gap(player.x)

    def has_cleared(self, player):
        return self.bottom > player.bottom

    def off_screen(self, height):
        return self.y > height

    def __repr__(self):
        return (f"Obstacle(y={self.y:.1f}, gap={self.gap_position:.1f}, "
                f"color={self.color}, passed={self.passed})")


def spawn_obstacle(width, palette, rng=random):
    # Upper bound is not clamped against GAP_WIDTH, so the gate may run past
    # the right edge by up to GAP_WIDTH - GAP_MARGIN.
    gap_position = GAP_MARGIN + rng.random() * (width - 2 * GAP_MARGIN)
    color = palette[rng.randrange(len(palette))]
    return Obstacle(width, gap_position, color)
