# entities.py

# re‑export the game objects and their helpers

from entities_utils import (
    random_color,
    bands_overlap
)

from entities_player import Player

from entities_obstacles import (
    Obstacle,
    spawn_obstacle
)
