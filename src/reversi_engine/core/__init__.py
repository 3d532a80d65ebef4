"""Core game state representation and rules."""

from .bitboard import BitBoard, SHIFTS
from .game_state import GameState, Move, Player
from .movegen import compute_flips, compute_moves, resolve_turn
from .notation import (
    BadSizeError,
    BoardParseError,
    EmptyFileError,
    InconsistentSizeError,
    InvalidCharacterError,
    PlayerParseError,
    load_board,
    parse_board,
    save_board,
    serialize_board,
)
from .rules import (
    create_starting_state,
    generate_legal_moves,
    apply_move,
    is_terminal,
    disc_differential,
    get_winner,
    get_game_result,
)

__all__ = [
    "BitBoard",
    "SHIFTS",
    "GameState",
    "Move",
    "Player",
    "compute_moves",
    "compute_flips",
    "resolve_turn",
    "BoardParseError",
    "EmptyFileError",
    "BadSizeError",
    "InconsistentSizeError",
    "InvalidCharacterError",
    "PlayerParseError",
    "parse_board",
    "serialize_board",
    "load_board",
    "save_board",
    "create_starting_state",
    "generate_legal_moves",
    "apply_move",
    "is_terminal",
    "disc_differential",
    "get_winner",
    "get_game_result",
]
