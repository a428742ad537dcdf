import random

from game import Game

PALETTE = ("A", "B", "C", "D")


def make_game(seed=0, start=True):
    game = Game(width=400, height=600, palette=PALETTE, rng=random.Random(seed))
    if start:
        game.start_or_restart()
    return game


def match_colors(game):
    """Paint every active gate in the player's color so nothing is fatal."""
    for o in game.obstacles:
        o.color = game.player.color


class FixedRng:
    def __init__(self, value, index=0):
        self.value = value
        self.index = index

    def random(self):
        return self.value

    def randrange(self, n):
        return self.index % n
