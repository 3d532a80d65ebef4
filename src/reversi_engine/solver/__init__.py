"""Move search and game-playing tactics."""

from .heuristics import HEURISTICS, Heuristic, disc_count, get_heuristic, mobility, terminal_score
from .minimax import SearchResult, alpha_beta, iterative_deepening, minimax_value
from .players import ComputerPlayer, RandomPlayer, make_player
from .arena import Arena, ArenaSummary, GameRecord, play_game

__all__ = [
    "HEURISTICS",
    "Heuristic",
    "disc_count",
    "mobility",
    "terminal_score",
    "get_heuristic",
    "SearchResult",
    "alpha_beta",
    "minimax_value",
    "iterative_deepening",
    "ComputerPlayer",
    "RandomPlayer",
    "make_player",
    "Arena",
    "ArenaSummary",
    "GameRecord",
    "play_game",
]
