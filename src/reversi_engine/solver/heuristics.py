"""
Position evaluation functions for search.

A heuristic takes a state and the player whose point of view is scored and
returns a number where larger is better for that player. Finished games
collapse to -inf, 0 or +inf so that any win outranks any unfinished lead.
"""

from math import inf
from typing import Callable, Dict

from ..core import GameState, Player, compute_moves, disc_differential, is_terminal

Heuristic = Callable[[GameState, Player], float]


def terminal_score(state: GameState, player: Player) -> float:
    """Score a finished game: +inf for a win, -inf for a loss, 0 for a tie."""
    diff = disc_differential(state, player)
    if diff > 0:
        return inf
    if diff < 0:
        return -inf
    return 0


def disc_count(state: GameState, player: Player) -> float:
    """Disc differential from `player`'s point of view."""
    if is_terminal(state):
        return terminal_score(state, player)
    return disc_differential(state, player)


def mobility(state: GameState, player: Player) -> float:
    """Difference in the number of legal moves available to each side."""
    if is_terminal(state):
        return terminal_score(state, player)

    if player.is_black:
        mine, theirs = state.black, state.white
    else:
        mine, theirs = state.white, state.black
    return compute_moves(mine, theirs).popcount() - compute_moves(theirs, mine).popcount()


HEURISTICS: Dict[str, Heuristic] = {
    "discs": disc_count,
    "mobility": mobility,
}


def get_heuristic(name: str) -> Heuristic:
    """Look up a heuristic by name."""
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ValueError(
            f"Unknown heuristic {name!r}, choose from {', '.join(HEURISTICS)}"
        ) from None
