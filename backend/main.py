import argparse
import json
import logging
import os
import random
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from players import AVAILABLE_VARIANTS, Player, RandomPlayer, ScriptedPlayer, get_player_class
from snake_engine import GameState, Outcome, SnakeEngine
from snake_engine.constants import Vector

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 15
DEFAULT_MAX_TICKS = 1000


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else default


def get_replay_dir() -> str:
    d = os.getenv("SNAKE_REPLAY_DIR", "completed_games").strip()
    return d or "completed_games"


class SnakeGame:
    """
    Drives one SnakeEngine to a terminal outcome:
      - asks the player for a move before every tick
      - submits it and advances the engine
      - records a snapshot after every tick for replay
      - stops on CRASH / COMPLETE, or after max_ticks
    """
    def __init__(
        self,
        width: int,
        height: int,
        player: Player,
        max_ticks: int = DEFAULT_MAX_TICKS,
        tick_delay: float = 0.0,
        seed: Optional[int] = None,
        game_id: str = None
    ):
        self.player = player
        self.max_ticks = max_ticks
        self.tick_delay = tick_delay
        self.seed = seed
        self.game_id = game_id if game_id is not None else str(uuid.uuid4())

        self.engine = SnakeEngine(width, height, rng=random.Random(seed))
        self.outcome = Outcome.CONTINUE
        self.game_over = False
        self.end_reason: Optional[str] = None
        self.start_time = time.time()

        self.move_history: List[Vector] = []
        self.history: List[GameState] = [self.engine.snapshot()]

        logger.info(f"Game {self.game_id}: {width}x{height} board, player {player.__class__.__name__}")

    def get_current_state(self) -> GameState:
        return self.engine.snapshot()

    def run_tick(self) -> Outcome:
        """
        Execute one tick:
          1) If the game is over, do nothing
          2) Ask the player for a move and submit it
          3) Advance the engine and record the snapshot
          4) End the game on a terminal outcome or the tick limit
        """
        if self.game_over:
            logger.warning(f"Game {self.game_id} is already over. No more ticks.")
            return self.outcome

        if self.engine.tick >= self.max_ticks:
            self.end_game("Reached max ticks.")
            return self.outcome

        state = self.get_current_state()
        move = self.player.get_move(state)
        self.move_history.append(move)
        self.engine.submit_direction(*move)

        self.outcome = self.engine.advance()
        self.history.append(self.get_current_state())

        if self.outcome is Outcome.CRASH:
            self.end_game(f"Crashed into {self.engine.death_reason}.")
        elif self.outcome is Outcome.COMPLETE:
            self.end_game("Board complete.")
        elif self.engine.tick >= self.max_ticks:
            self.end_game("Reached max ticks.")

        if self.tick_delay > 0:
            time.sleep(self.tick_delay)

        return self.outcome

    def run(self) -> Outcome:
        while not self.game_over:
            self.run_tick()
        return self.outcome

    def end_game(self, reason: str):
        self.game_over = True
        self.end_reason = reason
        logger.info(
            f"Game {self.game_id} over after {self.engine.tick} ticks: {reason} "
            f"Length {len(self.engine.body)}/{self.engine.size.area}."
        )

    def print_board(self):
        print("\n" + self.get_current_state().print_board() + "\n")

    def summary(self) -> Dict[str, Any]:
        return {
            "game_id": self.game_id,
            "outcome": self.outcome.value,
            "end_reason": self.end_reason,
            "death_reason": self.engine.death_reason,
            "ticks": self.engine.tick,
            "length": len(self.engine.body),
        }

    def serialize_history(self) -> List[Dict[str, Any]]:
        return [state.to_dict() for state in self.history]

    def save_history_to_json(self, filename: str = None, directory: str = None) -> str:
        """
        Write the replay log for this game and return its path.

        The log is write-only: there is no way to resume an engine from it.
        """
        if filename is None:
            filename = f"snake_game_{self.game_id}.json"
        if directory is None:
            directory = get_replay_dir()

        metadata = {
            "game_id": self.game_id,
            "start_time": datetime.fromtimestamp(self.start_time, tz=timezone.utc).isoformat(),
            "end_time": datetime.now(tz=timezone.utc).isoformat(),
            "player": self.player.__class__.__name__,
            "seed": self.seed,
            "width": self.engine.size.width,
            "height": self.engine.size.height,
            "max_ticks": self.max_ticks,
            "actual_ticks": self.engine.tick,
            "outcome": self.outcome.value,
            "end_reason": self.end_reason,
            "death_reason": self.engine.death_reason,
            "final_length": len(self.engine.body),
            "moves": [list(move) for move in self.move_history],
        }

        data = {
            "metadata": metadata,
            "rounds": self.serialize_history()
        }

        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, filename)
        with open(path, "w") as f:
            json.dump(data, f, indent=2)

        logger.info(f"Saved replay for game {self.game_id} to {path}")
        return path


# -------------------------------
# Simulation Function
# -------------------------------

def build_player(game_params: argparse.Namespace) -> Player:
    player_cls = get_player_class(getattr(game_params, 'player', None))
    if player_cls is ScriptedPlayer:
        return ScriptedPlayer(getattr(game_params, 'moves', None) or [])
    if player_cls is RandomPlayer:
        return RandomPlayer(rng=random.Random(getattr(game_params, 'seed', None)))
    return player_cls()


def run_simulation(game_params: argparse.Namespace) -> Dict:
    """
    Runs a single snake game to its end.

    Args:
        game_params: An object (like argparse.Namespace) containing game settings
                     (width, height, player, moves, max_ticks, tick_delay, seed,
                     save_replay, show_board).

    Returns:
        A dictionary summarizing the game (game_id, outcome, ticks, length, ...).
    """
    game = SnakeGame(
        width=game_params.width,
        height=game_params.height,
        player=build_player(game_params),
        max_ticks=game_params.max_ticks,
        tick_delay=getattr(game_params, 'tick_delay', 0.0),
        seed=getattr(game_params, 'seed', None),
        game_id=getattr(game_params, 'game_id', None)
    )

    show_board = getattr(game_params, 'show_board', False)
    if show_board:
        game.print_board()

    while not game.game_over:
        game.run_tick()
        if show_board:
            game.print_board()

    result = game.summary()
    if getattr(game_params, 'save_replay', False):
        result["replay_path"] = game.save_history_to_json()

    return result


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run a single-player Snake game on a fixed grid."
    )
    parser.add_argument("--width", type=int, default=_env_int("SNAKE_WIDTH", DEFAULT_WIDTH),
                        help="Width of the board (default: 15, or SNAKE_WIDTH)")
    parser.add_argument("--height", type=int, default=_env_int("SNAKE_HEIGHT", None),
                        help="Height of the board (default: same as width, or SNAKE_HEIGHT)")
    parser.add_argument("--player", type=str, choices=AVAILABLE_VARIANTS, default="random",
                        help="Which player submits directions")
    parser.add_argument("--moves", type=str, nargs='*', default=[],
                        help="Moves for the scripted player (e.g. 'UP UP LEFT')")
    parser.add_argument("--max-ticks", dest="max_ticks", type=int,
                        default=_env_int("SNAKE_MAX_TICKS", DEFAULT_MAX_TICKS),
                        help="Stop the game after this many ticks")
    parser.add_argument("--tick-delay", dest="tick_delay", type=float,
                        default=_env_float("SNAKE_TICK_DELAY", 0.0),
                        help="Seconds to sleep between ticks")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the random player")
    parser.add_argument("--save-replay", dest="save_replay", action="store_true",
                        help="Write a replay log to SNAKE_REPLAY_DIR")
    parser.add_argument("--show-board", dest="show_board", action="store_true",
                        help="Print the board after every tick")

    args = parser.parse_args(argv)
    if args.max_ticks <= 0:
        parser.error(f"--max-ticks must be positive, got {args.max_ticks}")
    if args.height is None:
        args.height = args.width
    return args


def main(argv: Optional[List[str]] = None):
    logging.basicConfig(
        level=os.getenv("SNAKE_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    args = parse_args(argv)
    result = run_simulation(args)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
