"""Headless QA harness: plays the simulation with a simple autopilot."""
from __future__ import annotations

import argparse
import random
import sys
from typing import List, Optional

from game import Game, LEFT, RIGHT


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Color Gate QA harness")
    parser.add_argument("--games", type=int, default=1, help="Sessions to play back to back")
    parser.add_argument("--frames", type=int, default=5000, help="Frame cap per session")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    parser.add_argument("--no-steer", action="store_true", help="Leave the player parked in the centre")
    parser.add_argument("--no-recolor", action="store_true", help="Never change the player color")
    return parser.parse_args(argv)


def next_threat(game: Game):
    """Lowest obstacle whose band has not yet cleared the player."""
    ahead = [o for o in game.obstacles if o.y < game.player.bottom]
    return max(ahead, key=lambda o: o.y, default=None)


def autopilot(game: Game, steer: bool = True, recolor: bool = True) -> None:
    threat = next_threat(game)
    left = right = False
    if threat is not None:
        if steer:
            target = threat.gap_position + threat.gap_width / 2
            if target < game.player.x - game.player.speed:
                left = True
            elif target > game.player.x + game.player.speed:
                right = True
        if recolor and threat.color != game.player.color:
            game.trigger_color_change()
    game.set_directional_input(LEFT, left)
    game.set_directional_input(RIGHT, right)


def play_session(game: Game, frames: int, steer: bool = True, recolor: bool = True) -> int:
    game.start_or_restart()
    for _ in range(frames):
        autopilot(game, steer, recolor)
        result = game.step()
        if result.game_over:
            break
    return game.frame_count


def run(args: argparse.Namespace) -> List[dict]:
    game = Game(rng=random.Random(args.seed))
    rows = []
    for index in range(args.games):
        frames = play_session(game, args.frames, not args.no_steer, not args.no_recolor)
        rows.append({
            "game": index + 1,
            "score": game.score,
            "frames": frames,
            "game_over": game.game_over,
            "speed": game.obstacle_speed,
            "period": game.spawn_period,
        })
    return rows


def main(argv: Optional[list[str]] = None) -> None:
    for row in run(parse_args(argv)):
        outcome = "crashed" if row["game_over"] else "survived"
        print(f"game {row['game']}: score={row['score']} frames={row['frames']} "
              f"{outcome} speed={row['speed']} period={row['period']}")


if __name__ == "__main__":
    main(sys.argv[1:])
