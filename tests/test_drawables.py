import unittest

import pygame

from drawables import Circle, Rect, project
from entities import Obstacle, Player
from renderer import draw_drawables
from tests.helpers import make_game

RED = "#FF5252"
BLUE = "#2196F3"


class ProjectTests(unittest.TestCase):
    def test_player_only(self):
        player = Player(400, 600, RED)
        self.assertEqual(project(player, []), [Circle(200, 550, 20, RED)])

    def test_obstacle_splits_around_gate(self):
        player = Player(400, 600, RED)
        obstacle = Obstacle(400, 150, BLUE, y=100)
        shapes = project(player, [obstacle])
        self.assertEqual(shapes[1:], [
            Rect(0, 100, 150, 30, BLUE),
            Rect(250, 100, 150, 30, BLUE),
        ])

    def test_game_drawables_track_state(self):
        game = make_game()
        game.obstacles.append(Obstacle(400, 60, "B", y=10))
        first = game.get_drawables()
        self.assertEqual(len(first), 3)
        self.assertEqual(first, game.get_drawables())
        game.step()
        self.assertEqual(game.get_drawables()[1].y, 12)


class RendererTests(unittest.TestCase):
    def test_paints_circle_and_walls(self):
        surf = pygame.Surface((400, 600))
        player = Player(400, 600, RED)
        shapes = project(player, [Obstacle(400, 150, BLUE, y=100)])
        draw_drawables(surf, shapes)
        self.assertEqual(surf.get_at((200, 550)), pygame.Color(RED))
        self.assertEqual(surf.get_at((10, 110)), pygame.Color(BLUE))
        self.assertEqual(surf.get_at((300, 110)), pygame.Color(BLUE))
        self.assertEqual(surf.get_at((200, 110)), pygame.Color(0, 0, 0))

    def test_skips_empty_right_wall(self):
        surf = pygame.Surface((400, 600))
        player = Player(400, 600, RED)
        shapes = project(player, [Obstacle(400, 340, BLUE, y=100)])
        self.assertLess(shapes[2].width, 0)
        draw_drawables(surf, shapes)
        self.assertEqual(surf.get_at((399, 110)), pygame.Color(0, 0, 0))


if __name__ == "__main__":
    unittest.main()
