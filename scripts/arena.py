"""
Arena script for running matches between Amazons agents.
"""

import argparse
import json
import logging
import os
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from agents.registry import AGENT_TYPES, build_agent
from agents.search_config import SearchConfig
from engine.game import AmazonsGame
from engine.pieces import Piece
from utils.logging_setup import resolve_level, setup_game_logging

logger = logging.getLogger(__name__)


class ArenaMatch:
    """One game between a WHITE and a BLACK agent, run through AmazonsGame."""

    def __init__(self, white_name: str, black_name: str, white_agent, black_agent):
        self.names = {Piece.WHITE: white_name, Piece.BLACK: black_name}
        self.game = AmazonsGame(white_agent=white_agent, black_agent=black_agent)
        self.duration_s = 0.0
        self.error: Optional[str] = None

    def play_match(self, max_moves: Optional[int] = None, verbose: bool = False) -> Dict[str, Any]:
        """
        Play the game until it is decided or max_moves moves were made.

        Agent failures are logged and reported in the result's "error" field.
        """
        start = time.perf_counter()
        try:
            self.game.play(max_moves=max_moves)
        except Exception as e:
            logger.exception(f"Match {self.names[Piece.WHITE]} vs {self.names[Piece.BLACK]} failed")
            self.error = str(e)
        self.duration_s = time.perf_counter() - start

        result = self.result()
        if verbose:
            print(self.game.board)
            print(f"Match finished: {result['winner']} after {result['moves_made']} moves ({self.duration_s:.2f}s)")
        return result

    def result(self) -> Dict[str, Any]:
        winner = self.game.winner
        return {
            "white": self.names[Piece.WHITE],
            "black": self.names[Piece.BLACK],
            "winner": self.names[winner] if winner is not None else "unfinished",
            "moves_made": self.game.board.num_moves,
            "moves": [record.move for record in self.game.game_history],
            "duration_s": self.duration_s,
            "error": self.error,
        }


def summarize(results: List[Dict[str, Any]]) -> Dict[str, int]:
    """Count wins per agent name (and unfinished games)."""
    summary: Dict[str, int] = {}
    for result in results:
        summary[result["winner"]] = summary.get(result["winner"], 0) + 1
    return summary


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play Amazons games between two agents")
    parser.add_argument("--white", choices=AGENT_TYPES, default="alphabeta")
    parser.add_argument("--black", choices=AGENT_TYPES, default="random")
    parser.add_argument("--games", type=int, default=1)
    parser.add_argument("--max-moves", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--search-config", type=Path, default=None, help="YAML or JSON SearchConfig file")
    parser.add_argument("--log-dir", type=Path, default=None, help="Write logs under a timestamped run directory")
    parser.add_argument("--log-level", default="INFO", help="Logging level name (AMAZONS_LOG_LEVEL overrides)")
    parser.add_argument("--output", type=Path, default=None, help="Write match results as JSON")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.log_dir is not None:
        _, log_file = setup_game_logging(args.log_dir, f"{args.white}_vs_{args.black}", args.log_level)
        logger.info(f"Logging to {log_file}")
    else:
        logging.basicConfig(level=resolve_level(args.log_level))

    config = SearchConfig.from_file(args.search_config) if args.search_config else SearchConfig()
    config = SearchConfig.from_env(config)

    results = []
    for game_num in range(args.games):
        seed = None if args.seed is None else args.seed + game_num
        white = build_agent(args.white, seed=seed, config=config)
        black = build_agent(args.black, seed=None if seed is None else seed + 1000, config=config)
        match = ArenaMatch(f"white:{args.white}", f"black:{args.black}", white, black)
        result = match.play_match(max_moves=args.max_moves, verbose=args.verbose)
        results.append(result)
        print(f"Game {game_num + 1}: winner={result['winner']} moves={result['moves_made']} "
              f"duration={result['duration_s']:.2f}s")

    summary = summarize(results)
    print("Summary:", summary)

    if args.output is not None:
        with open(args.output, "w") as f:
            json.dump({"summary": summary, "results": results}, f, indent=2)

    return 0


if __name__ == "__main__":
    sys.exit(main())
