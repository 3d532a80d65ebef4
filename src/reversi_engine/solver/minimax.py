"""
Depth-limited minimax search with alpha-beta pruning.

Scores are always taken from the point of view of the player to move at
the root. Whether a node maximizes or minimizes depends on who is to move
there, not on its depth, because passes let the same player move twice in
a row.

The deadline is a time.perf_counter() value checked on entry to every
node. Once it has passed, nodes are scored by the heuristic without being
expanded, so the root still gets a value for each of its moves and a move
is always returned.
"""

import random
import time
from dataclasses import dataclass, replace
from math import inf
from typing import Optional

from ..core import GameState, Move, Player
from .heuristics import Heuristic


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a search from one root position."""

    move: Optional[Move]  # None if the root has no player to move
    score: Optional[float]  # Value of `move` for the root player
    depth: int  # Depth limit used
    nodes: int = 0  # Nodes visited
    cutoffs: int = 0  # Sibling lists cut short by pruning
    elapsed: float = 0.0  # Seconds spent searching
    timed_out: bool = False  # True if any node saw the deadline


@dataclass
class _SearchContext:
    """Per-search bookkeeping shared by all recursive calls."""

    heuristic: Heuristic
    root_player: Player
    deadline: Optional[float]
    nodes: int = 0
    cutoffs: int = 0
    timed_out: bool = False

    def expired(self) -> bool:
        if self.deadline is not None and time.perf_counter() >= self.deadline:
            self.timed_out = True
            return True
        return False


def _alpha_beta(
    state: GameState, depth: int, alpha: float, beta: float, ctx: _SearchContext
) -> float:
    ctx.nodes += 1

    if ctx.expired() or depth == 0 or state.player is None:
        return ctx.heuristic(state, ctx.root_player)

    if state.player is ctx.root_player:
        value = -inf
        for move in state.legal_moves():
            value = max(value, _alpha_beta(state.play(move), depth - 1, alpha, beta, ctx))
            alpha = max(alpha, value)
            if alpha >= beta:
                ctx.cutoffs += 1
                break
        return value

    value = inf
    for move in state.legal_moves():
        value = min(value, _alpha_beta(state.play(move), depth - 1, alpha, beta, ctx))
        beta = min(beta, value)
        if alpha >= beta:
            ctx.cutoffs += 1
            break
    return value


def alpha_beta(
    state: GameState,
    heuristic: Heuristic,
    depth: int,
    deadline: Optional[float] = None,
    rng: Optional[random.Random] = None,
) -> SearchResult:
    """
    Pick a move for the player to move in `state`.

    Root moves are shuffled before searching and the first move reaching
    the best score is kept, so ties are broken at random without affecting
    the score itself.

    Args:
        state: Root position (not modified)
        heuristic: Evaluation function, called with the root player
        depth: Depth limit in plies, at least 1
        deadline: time.perf_counter() value after which nodes stop expanding
        rng: Random source for tie-breaking

    Returns:
        SearchResult; `move` is None if the game is already over
    """
    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}")

    if state.player is None:
        return SearchResult(move=None, score=None, depth=depth)

    start = time.perf_counter()
    rng = rng or random.Random()
    ctx = _SearchContext(heuristic=heuristic, root_player=state.player, deadline=deadline)

    moves = state.legal_moves()
    rng.shuffle(moves)

    alpha = -inf
    best_move = None
    best_score = -inf

    for move in moves:
        score = _alpha_beta(state.play(move), depth - 1, alpha, inf, ctx)
        if best_move is None or score > best_score:
            best_move = move
            best_score = score
        alpha = max(alpha, best_score)

    return SearchResult(
        move=best_move,
        score=best_score,
        depth=depth,
        nodes=ctx.nodes,
        cutoffs=ctx.cutoffs,
        elapsed=time.perf_counter() - start,
        timed_out=ctx.timed_out,
    )


def minimax_value(
    state: GameState,
    heuristic: Heuristic,
    depth: int,
    root_player: Optional[Player] = None,
) -> float:
    """
    Plain minimax value of `state`, without pruning or deadline.

    Args:
        state: Position to evaluate
        heuristic: Evaluation function
        depth: Depth limit in plies
        root_player: Point of view (defaults to the player to move)

    Returns:
        Minimax value for root_player
    """
    root_player = root_player or state.player
    if root_player is None:
        raise ValueError("Cannot pick a point of view for a finished game")

    if depth == 0 or state.player is None:
        return heuristic(state, root_player)

    values = [
        minimax_value(state.play(move), heuristic, depth - 1, root_player)
        for move in state.legal_moves()
    ]
    return max(values) if state.player is root_player else min(values)


def iterative_deepening(
    state: GameState,
    heuristic: Heuristic,
    max_depth: int,
    deadline: Optional[float] = None,
    rng: Optional[random.Random] = None,
) -> SearchResult:
    """
    Run alpha_beta at increasing depths until max_depth or the deadline.

    The result of the deepest iteration that finished in time is returned.
    The depth-1 result is kept even if it ran out of time.
    """
    start = time.perf_counter()
    # A game cannot last longer than the number of empty cells
    max_depth = max(1, min(max_depth, state.empty.popcount()))

    result = None
    total_nodes = 0
    for depth in range(1, max_depth + 1):
        current = alpha_beta(state, heuristic, depth, deadline, rng)
        total_nodes += current.nodes
        if current.move is None:
            return current

        if result is None or not current.timed_out:
            result = current
        if current.timed_out or (deadline is not None and time.perf_counter() >= deadline):
            break

    return replace(result, nodes=total_nodes, elapsed=time.perf_counter() - start)
