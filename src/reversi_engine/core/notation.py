"""
Text encoding of Reversi positions.

Format:

    X               <- player to move: X (black) or O (white)
    ________
    ___OX___        <- N rows of N cells: X, O or _ (empty)
    ___XO___
    ...

ASCII whitespace other than newlines is ignored, '#' starts a comment running to
the end of the line, and blank or comment lines may appear anywhere. The
board size is taken from the first row.
"""

from pathlib import Path
from typing import Iterator, List, Tuple, Union

from ..config import is_valid_size
from .bitboard import BitBoard
from .game_state import EMPTY_SYMBOL, GameState, Player

CELL_SYMBOLS = (Player.BLACK.symbol, Player.WHITE.symbol, EMPTY_SYMBOL)

# Written in place of the player character once the game is over
ENDED_SYMBOL = EMPTY_SYMBOL

# Ignored between tokens; other whitespace is an invalid character
WHITESPACE = " \t\r\x0c"


class BoardParseError(ValueError):
    """Base class for board text that cannot be turned into a GameState."""


class EmptyFileError(BoardParseError):
    def __init__(self) -> None:
        super().__init__("Board file contains no data")


class BadSizeError(BoardParseError):
    def __init__(self, size: int) -> None:
        super().__init__(f"Unsupported board size {size}")
        self.size = size


class InconsistentSizeError(BoardParseError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidCharacterError(BoardParseError):
    def __init__(self, char: str) -> None:
        super().__init__(f"Invalid character {char!r} in board")
        self.char = char


class PlayerParseError(BoardParseError):
    def __init__(self, char: str) -> None:
        super().__init__(f"Invalid player character {char!r}, expected X or O")
        self.char = char


def _tokens(text: str) -> Iterator[str]:
    """
    Yield significant characters: newlines and non-whitespace.

    A comment yields only the newline that ends it.
    """
    in_comment = False
    for char in text:
        if char == "\n":
            in_comment = False
            yield char
        elif in_comment or char in WHITESPACE:
            continue
        elif char == "#":
            in_comment = True
        else:
            yield char


def _cells(grid: List[List[str]], symbol: str) -> List[Tuple[int, int]]:
    return [(x, y) for y, row in enumerate(grid) for x, c in enumerate(row) if c == symbol]


def parse_board(text: str) -> GameState:
    """
    Parse a board from its text encoding.

    After loading, the declared player passes if it has no legal move, and
    the position is terminal if neither side can move.

    Args:
        text: Board text

    Returns:
        Parsed GameState

    Raises:
        EmptyFileError: No tokens at all
        PlayerParseError: First token is not X or O
        InvalidCharacterError: A row contains something other than X, O, _
        BadSizeError: First row length is odd or outside the supported range
        InconsistentSizeError: Later row of another length, or wrong row count
    """
    tokens = _tokens(text)

    # Player to move
    first = next((c for c in tokens if c != "\n"), None)
    if first is None:
        raise EmptyFileError()
    if first == Player.BLACK.symbol:
        player = Player.BLACK
    elif first == Player.WHITE.symbol:
        player = Player.WHITE
    else:
        raise PlayerParseError(first)

    # First row fixes the size
    first_row: List[str] = []
    for char in tokens:
        if char == "\n":
            if first_row:
                break
        elif char in CELL_SYMBOLS:
            first_row.append(char)
        else:
            raise InvalidCharacterError(char)

    size = len(first_row)
    if not is_valid_size(size):
        raise BadSizeError(size)

    grid = [first_row]
    row: List[str] = []
    for char in tokens:
        if char == "\n":
            if len(row) == size:
                grid.append(row)
                row = []
            elif row:
                raise InconsistentSizeError(
                    f"Row {len(grid) + 1} has {len(row)} cells, expected {size}"
                )
        elif char in CELL_SYMBOLS:
            if len(grid) >= size:
                raise InconsistentSizeError(f"More than {size} rows")
            if len(row) >= size:
                raise InconsistentSizeError(
                    f"Row {len(grid) + 1} has more than {size} cells"
                )
            row.append(char)
        else:
            raise InvalidCharacterError(char)

    # Last row without a trailing newline
    if row:
        if len(row) != size:
            raise InconsistentSizeError(
                f"Row {len(grid) + 1} has {len(row)} cells, expected {size}"
            )
        grid.append(row)

    if len(grid) != size:
        raise InconsistentSizeError(f"Board has {len(grid)} rows, expected {size}")

    black = BitBoard.from_cells(size, _cells(grid, Player.BLACK.symbol))
    white = BitBoard.from_cells(size, _cells(grid, Player.WHITE.symbol))
    return GameState.from_position(size, black, white, player)


def serialize_board(state: GameState) -> str:
    """
    Encode a state as text, the inverse of parse_board.

    The first line is the player to move, or ENDED_SYMBOL for a finished game.
    """
    player = state.player.symbol if state.player is not None else ENDED_SYMBOL
    return player + "\n" + "".join(row + "\n" for row in state.rows())


def load_board(path: Union[str, Path]) -> GameState:
    """
    Read and parse a board file.

    Bytes are decoded as latin-1 so that any byte outside the format is
    reported as an InvalidCharacterError rather than a decoding failure.
    """
    return parse_board(Path(path).read_bytes().decode("latin-1"))


def save_board(state: GameState, path: Union[str, Path]) -> Path:
    """Write a board file, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize_board(state), encoding="utf-8")
    return path

