"""
Reversi game rules as plain functions over GameState.

Implements standard Reversi/Othello rules:
- A move must flip at least one opponent disc
- Flips happen along all eight lines bracketed by the mover's own discs
- A side with no legal move passes; the game ends when neither side can move
- The side with more discs at the end wins
"""

from typing import List, Optional

from ..config import is_valid_size
from .game_state import GameState, Move, Player


def create_starting_state(size: int) -> GameState:
    """
    Create the initial game state.

    Args:
        size: Board side length (even, 2-10)

    Returns:
        Starting GameState with black to move (already terminal on 2x2)
    """
    if not is_valid_size(size):
        raise ValueError(f"Invalid board size {size}")
    return GameState.new_game(size)


def generate_legal_moves(state: GameState) -> List[Move]:
    """
    Generate all legal moves for the current player.

    Returns:
        List of moves in ascending cell order (empty once the game is over)
    """
    return state.legal_moves()


def apply_move(state: GameState, move: Move) -> GameState:
    """
    Apply a move and return the resulting state.

    Unlike GameState.play, an illegal move is treated as a caller error.

    Raises:
        ValueError: If the move is not legal in this state
    """
    next_state = state.play(move)
    if next_state is None:
        raise ValueError(f"Illegal move {move} for state")
    return next_state


def is_terminal(state: GameState) -> bool:
    """Check if neither side can move."""
    return state.is_terminal()


def disc_differential(state: GameState, player: Player) -> int:
    """Discs of `player` minus discs of the opponent."""
    black, white = state.score()
    return black - white if player.is_black else white - black


def get_winner(state: GameState) -> Optional[Player]:
    """Winner of a finished game, None for a tie or an unfinished game."""
    return state.winner()


def get_game_result(state: GameState) -> Optional[str]:
    """
    Get human-readable game result.

    Returns:
        Result string or None if not terminal
    """
    if not is_terminal(state):
        return None

    black, white = state.score()
    winner = state.winner()

    if winner is None:
        return f"Tie game ({black}-{white})"
    return f"{winner.display_name.title()} wins {max(black, white)}-{min(black, white)}"
