"""
Bitboard representation for square Reversi boards.

A board of side N is stored in a single Python int using a row stride of
N + 1 bits. The extra bit at the end of every row is a sentinel column that
is always kept clear, so horizontal and diagonal shifts can never carry a
disc from one row into the next.

Layout for N = 4 (bit indices, S = sentinel):

  y=0 |  0  1  2  3  S(4)
  y=1 |  5  6  7  8  S(9)
  y=2 | 10 11 12 13  S(14)
  y=3 | 15 16 17 18  S(19)
        x=0 1  2  3

Cell index = x + y * (N + 1)
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from ..config import MAX_SIZE, MIN_SIZE


def _full_mask(size: int) -> int:
    """Mask of the size x size usable cells, sentinel bits clear."""
    row = (1 << size) - 1
    mask = 0
    for y in range(size):
        mask |= row << (y * (size + 1))
    return mask


# Precomputed universe masks for every supported size
FULL_MASKS = {size: _full_mask(size) for size in range(MIN_SIZE, MAX_SIZE + 1, 2)}


@dataclass(frozen=True)
class BitBoard:
    """
    Immutable set of cells on a size x size board.

    Every operation returns a new BitBoard. Binary operations require both
    operands to have the same size.
    """

    size: int
    bits: int = 0

    def __post_init__(self) -> None:
        """Validate size and keep sentinel/padding bits clear."""
        mask = FULL_MASKS.get(self.size)
        if mask is None:
            raise ValueError(
                f"Invalid board size {self.size}, must be even and in "
                f"[{MIN_SIZE}, {MAX_SIZE}]"
            )
        if self.bits & ~mask:
            raise ValueError("Bits set outside the usable board area")

    @classmethod
    def empty(cls, size: int) -> "BitBoard":
        """Create an empty set."""
        return cls(size)

    @classmethod
    def full(cls, size: int) -> "BitBoard":
        """Create the set of all size x size cells."""
        if size not in FULL_MASKS:
            # Let __post_init__ produce the error message
            return cls(size)
        return cls(size, FULL_MASKS[size])

    @classmethod
    def from_cells(cls, size: int, cells: Iterable[Tuple[int, int]]) -> "BitBoard":
        """Create a set from (x, y) pairs."""
        board = cls(size)
        for x, y in cells:
            board = board.set(x, y)
        return board

    @property
    def mask(self) -> int:
        """Universe mask for this board size."""
        return FULL_MASKS[self.size]

    def index(self, x: int, y: int) -> int:
        """
        Convert (x, y) to a bit index.

        Raises:
            ValueError: If the coordinates are off the board
        """
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise ValueError(f"Coordinates ({x}, {y}) outside {self.size}x{self.size} board")
        return x + y * (self.size + 1)

    def set(self, x: int, y: int) -> "BitBoard":
        return BitBoard(self.size, self.bits | (1 << self.index(x, y)))

    def unset(self, x: int, y: int) -> "BitBoard":
        return BitBoard(self.size, self.bits & ~(1 << self.index(x, y)))

    def get(self, x: int, y: int) -> bool:
        return bool(self.bits >> self.index(x, y) & 1)

    # Set algebra

    def _check_size(self, other: "BitBoard") -> None:
        if self.size != other.size:
            raise ValueError(f"Bitboard size mismatch: {self.size} vs {other.size}")

    def union(self, other: "BitBoard") -> "BitBoard":
        self._check_size(other)
        return BitBoard(self.size, self.bits | other.bits)

    def intersection(self, other: "BitBoard") -> "BitBoard":
        self._check_size(other)
        return BitBoard(self.size, self.bits & other.bits)

    def setminus(self, other: "BitBoard") -> "BitBoard":
        self._check_size(other)
        return BitBoard(self.size, self.bits & ~other.bits)

    def complement(self) -> "BitBoard":
        """Cells not in this set, restricted to the usable board."""
        return BitBoard(self.size, ~self.bits & self.mask)

    def is_subset_of(self, other: "BitBoard") -> bool:
        """Check self <= other, i.e. self | other == other."""
        return self.union(other) == other

    def is_empty(self) -> bool:
        return self.bits == 0

    __or__ = union
    __and__ = intersection
    __sub__ = setminus
    __invert__ = complement
    __le__ = is_subset_of

    def __bool__(self) -> bool:
        return self.bits != 0

    # Directional shifts
    #
    # North is towards y = 0 and east is towards larger x. Shifted bits that
    # land in a sentinel column or fall off the board are masked away.

    def shift_north(self) -> "BitBoard":
        return BitBoard(self.size, self.bits >> (self.size + 1))

    def shift_south(self) -> "BitBoard":
        return BitBoard(self.size, (self.bits << (self.size + 1)) & self.mask)

    def shift_east(self) -> "BitBoard":
        return BitBoard(self.size, (self.bits << 1) & self.mask)

    def shift_west(self) -> "BitBoard":
        return BitBoard(self.size, (self.bits >> 1) & self.mask)

    def shift_ne(self) -> "BitBoard":
        return BitBoard(self.size, (self.bits >> self.size) & self.mask)

    def shift_se(self) -> "BitBoard":
        return BitBoard(self.size, (self.bits << (self.size + 2)) & self.mask)

    def shift_sw(self) -> "BitBoard":
        return BitBoard(self.size, (self.bits << self.size) & self.mask)

    def shift_nw(self) -> "BitBoard":
        return BitBoard(self.size, (self.bits >> (self.size + 2)) & self.mask)

    def popcount(self) -> int:
        """Count number of set cells."""
        return bin(self.bits).count("1")

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        """Iterate over (x, y) of set cells in ascending index order."""
        bits = self.bits
        stride = self.size + 1
        while bits:
            low = bits & -bits
            y, x = divmod(low.bit_length() - 1, stride)
            yield x, y
            bits ^= low

    def __str__(self) -> str:
        rows = []
        for y in range(self.size):
            rows.append(" ".join("1" if self.get(x, y) else "." for x in range(self.size)))
        return "\n".join(rows)


# All eight shift directions, in the order moves and flips are scanned
SHIFTS = (
    BitBoard.shift_north,
    BitBoard.shift_south,
    BitBoard.shift_east,
    BitBoard.shift_west,
    BitBoard.shift_ne,
    BitBoard.shift_se,
    BitBoard.shift_sw,
    BitBoard.shift_nw,
)
