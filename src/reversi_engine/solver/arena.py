"""
Play complete games between tactics, optionally across worker processes.

Games are independent of each other, so they are distributed over a
process pool; the search inside each game stays sequential.
"""

import logging
from dataclasses import dataclass, field
from multiprocessing import Pool, cpu_count
from typing import List, Optional, Tuple

from tqdm import tqdm

from ..config import SearchConfig
from ..core import GameState, Move, Player, create_starting_state, get_winner
from .players import make_player

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    """A finished (or abandoned) game."""

    final_state: GameState
    moves: List[Move]
    winner: Optional[Player]
    score: Tuple[int, int]  # (black, white)


@dataclass
class ArenaSummary:
    """Aggregated results over many games."""

    black: str
    white: str
    games: int = 0
    black_wins: int = 0
    white_wins: int = 0
    ties: int = 0
    black_discs: int = 0
    white_discs: int = 0
    records: List[GameRecord] = field(default_factory=list, repr=False)

    def add(self, record: GameRecord) -> None:
        self.games += 1
        self.black_discs += record.score[0]
        self.white_discs += record.score[1]
        if record.winner is Player.BLACK:
            self.black_wins += 1
        elif record.winner is Player.WHITE:
            self.white_wins += 1
        else:
            self.ties += 1
        self.records.append(record)


def play_game(start: GameState, black, white) -> GameRecord:
    """
    Play from `start` until neither side can move.

    Args:
        start: Initial position
        black: Object with choose_move(state) for black
        white: Object with choose_move(state) for white

    Returns:
        GameRecord of the game

    Raises:
        RuntimeError: If a player returns an illegal move
    """
    state = start
    moves: List[Move] = []

    while state.player is not None:
        player = black if state.player.is_black else white
        move = player.choose_move(state)
        if move is None:
            # Player gave up
            break

        next_state = state.play(move)
        if next_state is None:
            raise RuntimeError(f"{player.name} player chose illegal move {move}")
        moves.append(move)
        state = next_state

    return GameRecord(
        final_state=state,
        moves=moves,
        winner=get_winner(state),
        score=state.score(),
    )


# Global settings for worker processes
_worker_settings = None


def _worker_init(size: int, black: str, white: str, config: SearchConfig, seed: Optional[int]) -> None:
    """Initialize worker process with the match settings."""
    global _worker_settings
    _worker_settings = (size, black, white, config, seed)


def _worker_play(game_index: int) -> GameRecord:
    """Worker: play one game, seeding each side from the game index."""
    size, black, white, config, seed = _worker_settings
    base = None if seed is None else seed + 2 * game_index
    black_player = make_player(black, config, base)
    white_player = make_player(white, config, None if base is None else base + 1)
    return play_game(create_starting_state(size), black_player, white_player)


class Arena:
    """
    Runs a match of many games between two tactics.
    """

    def __init__(
        self,
        size: int,
        black: str,
        white: str,
        config: Optional[SearchConfig] = None,
        num_workers: Optional[int] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize arena.

        Args:
            size: Board side length
            black: Tactic name for black ("random" or "ai")
            white: Tactic name for white
            config: Search settings for "ai" players
            num_workers: Number of worker processes (default: CPU count, 1 = in-process)
            seed: Base random seed, None for nondeterministic games
        """
        self.size = size
        self.black = black
        self.white = white
        self.config = config or SearchConfig()
        self.num_workers = num_workers or cpu_count()
        self.seed = seed

        # Fail early on bad settings rather than inside a worker
        create_starting_state(size)
        make_player(black, self.config)
        make_player(white, self.config)

    def run(self, games: int) -> ArenaSummary:
        """Play `games` games and return the summary."""
        logger.info(
            f"Arena: {self.black} (X) vs {self.white} (O), {games} games "
            f"on {self.size}x{self.size}, {self.num_workers} workers"
        )
        summary = ArenaSummary(black=self.black, white=self.white)
        initargs = (self.size, self.black, self.white, self.config, self.seed)

        with tqdm(total=games, desc="Games", unit=" game") as pbar:
            if self.num_workers == 1:
                _worker_init(*initargs)
                for index in range(games):
                    summary.add(_worker_play(index))
                    pbar.update(1)
            else:
                with Pool(
                    processes=self.num_workers,
                    initializer=_worker_init,
                    initargs=initargs,
                ) as pool:
                    for record in pool.imap_unordered(_worker_play, range(games)):
                        summary.add(record)
                        pbar.update(1)

        logger.info(
            f"Results: black {summary.black_wins}, white {summary.white_wins}, "
            f"ties {summary.ties}"
        )
        return summary
