import io
import unittest
from contextlib import redirect_stdout

import qa_harness
from game import LEFT, RIGHT
from entities import Obstacle
from tests.helpers import make_game


class HarnessTests(unittest.TestCase):
    def test_run_is_reproducible(self):
        args = qa_harness.parse_args(["--games", "2", "--frames", "400", "--seed", "3"])
        first = qa_harness.run(args)
        second = qa_harness.run(args)
        self.assertEqual(first, second)
        self.assertEqual([row["game"] for row in first], [1, 2])
        for row in first:
            self.assertLessEqual(row["frames"], 400)

    def test_autopilot_steers_toward_gate(self):
        game = make_game()
        game.obstacles.append(Obstacle(400, 20, game.player.color, y=100))
        qa_harness.autopilot(game, recolor=False)
        self.assertTrue(game.inputs[LEFT])
        self.assertFalse(game.inputs[RIGHT])

    def test_autopilot_recolors_toward_gate(self):
        game = make_game(seed=5)
        other = next(c for c in game.palette if c != game.player.color)
        game.obstacles.append(Obstacle(400, 150, other, y=100))
        before = game.player.color
        qa_harness.autopilot(game, steer=False)
        self.assertNotEqual(game.player.color, before)

    def test_next_threat_ignores_cleared(self):
        game = make_game()
        low = Obstacle(400, 150, "A", y=580)
        near = Obstacle(400, 150, "A", y=300)
        far = Obstacle(400, 150, "A", y=10)
        game.obstacles.extend([low, near, far])
        self.assertIs(qa_harness.next_threat(game), near)

    def test_main_prints_summary(self):
        out = io.StringIO()
        with redirect_stdout(out):
            qa_harness.main(["--frames", "50", "--seed", "1"])
        self.assertTrue(out.getvalue().startswith("game 1: score=0 frames=50 survived"))


if __name__ == "__main__":
    unittest.main()
