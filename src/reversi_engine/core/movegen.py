"""
Legal move and flip computation by directional bit shifting.

All functions are pure and work on whole bitboards at once: for each of the
eight directions a set of candidate lines is advanced one step at a time, so
the cost depends on the longest opponent run rather than on the number of
empty cells.
"""

from typing import TYPE_CHECKING, Optional, Tuple

from .bitboard import SHIFTS, BitBoard

if TYPE_CHECKING:
    from .game_state import Player


def compute_moves(mover: BitBoard, opponent: BitBoard) -> BitBoard:
    """
    Compute the legal moves for the side owning `mover`.

    A cell is legal if it is empty and, in at least one direction, is one
    step past a contiguous run of opponent discs that starts next to one of
    the mover's discs.

    Args:
        mover: Discs of the side to move
        opponent: Discs of the other side (disjoint from mover)

    Returns:
        Bitboard of legal landing cells
    """
    empty = (mover | opponent).complement()
    moves = BitBoard.empty(mover.size)

    for shift in SHIFTS:
        candidates = shift(mover) & opponent
        while candidates:
            step = shift(candidates)
            moves = moves | (step & empty)
            candidates = step & opponent

    return moves


def compute_flips(mover: BitBoard, opponent: BitBoard, placed: BitBoard) -> BitBoard:
    """
    Compute the opponent discs flipped by placing a disc on `placed`.

    In every direction a line is grown from the placed cell while it stays
    inside the opponent's discs. The run is flipped only if the next cell is
    one of the mover's own discs.

    Args:
        mover: Discs of the side to move
        opponent: Discs of the other side
        placed: Singleton bitboard of the cell being played

    Returns:
        Bitboard of discs changing ownership (possibly empty)
    """
    flipped = BitBoard.empty(mover.size)

    for shift in SHIFTS:
        run = BitBoard.empty(mover.size)
        step = shift(placed)
        while step and step <= opponent:
            run = run | step
            step = shift(step)
        if run and step & mover:
            flipped = flipped | run

    return flipped


def resolve_turn(
    black: BitBoard, white: BitBoard, player: Optional["Player"]
) -> Tuple[Optional["Player"], BitBoard]:
    """
    Decide who moves next, applying the pass rule.

    `player` is the side that would normally move. If it has no legal move,
    the turn goes to the other side; if neither side can move the game is
    over.

    Returns:
        (player to move or None, legal moves for that player)
    """
    if player is None:
        return None, BitBoard.empty(black.size)

    for side in (player, player.other()):
        mover, opponent = (black, white) if side.is_black else (white, black)
        moves = compute_moves(mover, opponent)
        if moves:
            return side, moves

    return None, BitBoard.empty(black.size)
