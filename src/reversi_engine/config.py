"""
Default settings for the engine and the command line.

Board sizes are even side lengths in [MIN_SIZE, MAX_SIZE]; the bitboard
encoding needs size * (size + 1) bits, which stays within 110 bits at the
maximum.
"""

from dataclasses import dataclass

# Board dimensions
MIN_SIZE = 2
MAX_SIZE = 10
DEFAULT_SIZE = 8

# Search defaults
DEFAULT_TIMEOUT_SEC = 5.0
DEFAULT_MAX_DEPTH = 6
DEFAULT_HEURISTIC = "discs"

# Arena defaults
DEFAULT_ARENA_GAMES = 20


def is_valid_size(size: int) -> bool:
    """Check if size is a supported board side length."""
    return size % 2 == 0 and MIN_SIZE <= size <= MAX_SIZE


@dataclass(frozen=True)
class SearchConfig:
    """Settings for the computer player."""

    timeout: float = DEFAULT_TIMEOUT_SEC  # Seconds per move
    max_depth: int = DEFAULT_MAX_DEPTH  # Deepest iterative-deepening pass
    heuristic: str = DEFAULT_HEURISTIC  # Key into solver.heuristics.HEURISTICS

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")
        if self.max_depth < 1:
            raise ValueError(f"Max depth must be at least 1, got {self.max_depth}")
