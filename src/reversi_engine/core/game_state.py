"""
Immutable game state for Reversi.

A position consists of:
- Black and white disc sets (disjoint bitboards)
- The player to move, or None once the game has ended
- The cached set of legal moves for that player

The legal move cache is always derived from the other fields; every
transition builds a new GameState instead of patching an existing one.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..config import MAX_SIZE
from .bitboard import BitBoard
from .movegen import compute_flips, compute_moves, resolve_turn

EMPTY_SYMBOL = "_"


class Player(Enum):
    """Side to move. Values are the characters used in board files."""

    BLACK = "X"
    WHITE = "O"

    def other(self) -> "Player":
        return Player.WHITE if self is Player.BLACK else Player.BLACK

    @property
    def is_black(self) -> bool:
        return self is Player.BLACK

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.name.lower()

    def __str__(self) -> str:
        return self.display_name


@dataclass(frozen=True)
class Move:
    """
    A cell on the board, x = column and y = row, both 0-based.

    Notation is a column letter followed by a 1-based row number, e.g.
    "D3" for (3, 2).
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        if not (0 <= self.x < MAX_SIZE and 0 <= self.y < MAX_SIZE):
            raise ValueError(f"Move ({self.x}, {self.y}) outside any supported board")

    @classmethod
    def from_notation(cls, text: str, size: int) -> "Move":
        """
        Parse a move such as "a5" or "J10" for a board of the given size.

        Args:
            text: Column letter (case-insensitive) and 1-based row number
            size: Board side length the move must fit on

        Returns:
            Parsed Move

        Raises:
            ValueError: If text is malformed, non-ASCII, or off the board
        """
        text = text.strip()
        if not text.isascii() or len(text) < 2:
            raise ValueError(f"Invalid move notation {text!r}")

        letter, digits = text[0].lower(), text[1:]
        if not letter.isalpha() or not digits.isdigit():
            raise ValueError(f"Invalid move notation {text!r}")

        x = ord(letter) - ord("a")
        y = int(digits) - 1
        if not (0 <= x < size and 0 <= y < size):
            raise ValueError(f"Move {text!r} outside {size}x{size} board")

        return cls(x, y)

    def __str__(self) -> str:
        return f"{chr(ord('A') + self.x)}{self.y + 1}"


@dataclass(frozen=True)
class GameState:
    """
    Immutable Reversi position.

    `moves` is filled in from the discs and the player to move when not
    supplied, and is excluded from equality: two states with the same discs
    and the same player to move are the same position.
    """

    size: int
    black: BitBoard
    white: BitBoard
    player: Optional[Player]
    moves: Optional[BitBoard] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate state invariants."""
        if self.black.size != self.size or self.white.size != self.size:
            raise ValueError(
                f"Disc sets of size {self.black.size}/{self.white.size} "
                f"don't match board size {self.size}"
            )
        if self.black & self.white:
            raise ValueError("Black and white discs overlap")

        if self.moves is None:
            if self.player is None:
                moves = BitBoard.empty(self.size)
            else:
                mover, opponent = self._sides(self.player)
                moves = compute_moves(mover, opponent)
            # Frozen dataclass: derived field is set once here
            object.__setattr__(self, "moves", moves)

    @classmethod
    def from_position(
        cls, size: int, black: BitBoard, white: BitBoard, player: Optional[Player]
    ) -> "GameState":
        """
        Build a state, passing the turn if `player` cannot move.

        If neither side has a legal move the state is terminal regardless of
        the declared player.
        """
        player, moves = resolve_turn(black, white, player)
        return cls(size, black, white, player, moves)

    @classmethod
    def new_game(cls, size: int) -> "GameState":
        """Create the starting cross in the centre, black to move."""
        half = size // 2
        black = BitBoard.from_cells(size, [(half, half - 1), (half - 1, half)])
        white = BitBoard.from_cells(size, [(half - 1, half - 1), (half, half)])
        return cls.from_position(size, black, white, Player.BLACK)

    def _sides(self, player: Player) -> Tuple[BitBoard, BitBoard]:
        """(player's discs, opponent's discs)."""
        if player.is_black:
            return self.black, self.white
        return self.white, self.black

    @property
    def occupied(self) -> BitBoard:
        return self.black | self.white

    @property
    def empty(self) -> BitBoard:
        return self.occupied.complement()

    def score(self) -> Tuple[int, int]:
        """Disc counts as (black, white)."""
        return self.black.popcount(), self.white.popcount()

    def is_terminal(self) -> bool:
        """Check if game is over."""
        return self.player is None

    def winner(self) -> Optional[Player]:
        """Return the winner of a finished game, None for a tie or ongoing game."""
        if not self.is_terminal():
            return None
        black, white = self.score()
        if black > white:
            return Player.BLACK
        if white > black:
            return Player.WHITE
        return None

    def legal_moves(self) -> List[Move]:
        """Legal moves for the player to move, in ascending cell order."""
        return [Move(x, y) for x, y in self.moves]

    def is_valid_move(self, move: Move) -> bool:
        if not (move.x < self.size and move.y < self.size):
            return False
        return self.moves.get(move.x, move.y)

    def get_cell(self, x: int, y: int) -> Optional[Player]:
        """Owner of the disc at (x, y), or None if empty."""
        if self.black.get(x, y):
            return Player.BLACK
        if self.white.get(x, y):
            return Player.WHITE
        return None

    def with_cell(self, x: int, y: int, owner: Optional[Player]) -> "GameState":
        """
        Return a copy with one cell overwritten.

        The player to move is kept as is and its legal moves are recomputed;
        no pass is applied. Intended for setting up positions.
        """
        black = self.black.unset(x, y)
        white = self.white.unset(x, y)
        if owner is Player.BLACK:
            black = black.set(x, y)
        elif owner is Player.WHITE:
            white = white.set(x, y)
        return GameState(self.size, black, white, self.player)

    def play(self, move: Move) -> Optional["GameState"]:
        """
        Play a move for the current player.

        Args:
            move: Cell to place a disc on (must lie on the board)

        Returns:
            The resulting GameState, or None if the move is not legal here
        """
        if self.player is None or not self.is_valid_move(move):
            return None

        mover, opponent = self._sides(self.player)
        placed = BitBoard.empty(self.size).set(move.x, move.y)
        flipped = compute_flips(mover, opponent, placed)

        mover = mover | placed | flipped
        opponent = opponent - flipped

        if self.player.is_black:
            black, white = mover, opponent
        else:
            black, white = opponent, mover

        # Opponent moves next unless it has to pass
        player, moves = resolve_turn(black, white, self.player.other())
        return GameState(self.size, black, white, player, moves)

    def rows(self) -> List[str]:
        """Board rows top to bottom as strings of X, O and _."""
        rows = []
        for y in range(self.size):
            row = []
            for x in range(self.size):
                owner = self.get_cell(x, y)
                row.append(owner.symbol if owner else EMPTY_SYMBOL)
            rows.append("".join(row))
        return rows

    def __str__(self) -> str:
        """Human-readable board representation."""
        header = "   " + " ".join(chr(ord("A") + x) for x in range(self.size))
        lines = [header]
        for y, row in enumerate(self.rows()):
            lines.append(f"{y + 1:>2} " + " ".join(row))

        black, white = self.score()
        lines.append("")
        lines.append(f"Score: X = {black}, O = {white}")
        if self.player is None:
            lines.append("Game ended")
        else:
            lines.append(f"{self.player.display_name.title()} ({self.player.symbol}) to move")
        return "\n".join(lines)
