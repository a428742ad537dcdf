# entities_player.py

import numpy as np

from config import PLAYER_RADIUS, PLAYER_SPEED, PLAYER_Y_OFFSET


class Player:
    def __init__(self, width, height, color):
        self.pos = np.array([width / 2, height - PLAYER_Y_OFFSET], dtype=float)
        self.radius = PLAYER_RADIUS
        self.speed = PLAYER_SPEED
        self.color = color

    @property
    def x(self):
        return float(self.pos[0])

    @property
    def y(self):
        return float(self.pos[1])

    @property
    def top(self):
        return self.y - self.radius

    @property
    def bottom(self):
        return self.y + self.radius

    def update(self, move_left, move_right, width):
        """Shift sideways by ``speed`` for each held direction.

        Both bounds are checked against the pre-move x, so holding both
        directions nets right minus left and the disc never leaves
        ``[radius, width - radius]``.
        """
        x = self.pos[0]
        dx = 0.0
        if move_left and x - self.speed - self.radius >= 0:
            dx -= self.speed
        if move_right and x + self.speed + self.radius <= width:
            dx += self.speed
        self.pos[0] = x + dx
