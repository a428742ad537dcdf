# entities_utils.py

import random


def random_color(palette, exclude=None, rng=random):
    """Pick a palette color uniformly, never returning ``exclude``.

    With ``exclude`` left as None every entry is a candidate.
    """
    choices = [c for c in palette if c != exclude]
    return choices[rng.randrange(len(choices))]


def bands_overlap(top_a, bottom_a, top_b, bottom_b):
    """Return True if half-open vertical bands [top, bottom) intersect."""
    return top_a < bottom_b and bottom_a > top_b
