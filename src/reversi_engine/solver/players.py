"""
Move-choosing tactics: random play and the search-based computer player.
"""

import logging
import random
import time
from typing import Optional

from ..config import SearchConfig
from ..core import GameState, Move
from .heuristics import get_heuristic
from .minimax import SearchResult, iterative_deepening

logger = logging.getLogger(__name__)


class RandomPlayer:
    """Plays a uniformly random legal move."""

    name = "random"

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def choose_move(self, state: GameState) -> Optional[Move]:
        moves = state.legal_moves()
        if not moves:
            return None
        return self.rng.choice(moves)


class ComputerPlayer:
    """
    Alpha-beta player with a per-move time budget.

    Each call searches with iterative deepening until `config.max_depth` or
    `config.timeout` seconds, whichever comes first.
    """

    name = "ai"

    def __init__(self, config: Optional[SearchConfig] = None, seed: Optional[int] = None):
        """
        Initialize computer player.

        Args:
            config: Search settings (defaults from reversi_engine.config)
            seed: Random seed for tie-breaking between equal moves
        """
        self.config = config or SearchConfig()
        self.heuristic = get_heuristic(self.config.heuristic)
        self.rng = random.Random(seed)
        self.last_result: Optional[SearchResult] = None

    def search(self, state: GameState) -> SearchResult:
        """Search `state` and return the full result."""
        logger.debug(f"Position before search:\n{state}")
        deadline = time.perf_counter() + self.config.timeout
        result = iterative_deepening(
            state, self.heuristic, self.config.max_depth, deadline, self.rng
        )
        self.last_result = result

        if result.move is not None:
            logger.debug(
                f"{state.player} plays {result.move}: score={result.score} "
                f"depth={result.depth} nodes={result.nodes:,} "
                f"cutoffs={result.cutoffs:,} time={result.elapsed:.3f}s"
            )
            if result.timed_out:
                logger.debug(f"Search hit the {self.config.timeout}s deadline")
        return result

    def choose_move(self, state: GameState) -> Optional[Move]:
        return self.search(state).move


def make_player(kind: str, config: Optional[SearchConfig] = None, seed: Optional[int] = None):
    """Create a player from its command-line name ("random" or "ai")."""
    if kind == RandomPlayer.name:
        return RandomPlayer(seed)
    if kind == ComputerPlayer.name:
        return ComputerPlayer(config, seed)
    raise ValueError(f"Unknown player type {kind!r}")
