"""Tests for the bitboard representation."""

import pytest
from reversi_engine.core import BitBoard


EVEN_SIZES = [4, 6, 8, 10]


@pytest.mark.parametrize("size", EVEN_SIZES)
def test_shifting(size):
    """Test each shift moves a disc one cell in its direction."""
    bitboard = BitBoard.empty(size).set(1, 1)

    assert bitboard.shift_north() == BitBoard.empty(size).set(1, 0)
    assert bitboard.shift_south() == BitBoard.empty(size).set(1, 2)
    assert bitboard.shift_east() == BitBoard.empty(size).set(2, 1)
    assert bitboard.shift_west() == BitBoard.empty(size).set(0, 1)
    assert bitboard.shift_ne() == BitBoard.empty(size).set(2, 0)
    assert bitboard.shift_se() == BitBoard.empty(size).set(2, 2)
    assert bitboard.shift_sw() == BitBoard.empty(size).set(0, 2)
    assert bitboard.shift_nw() == BitBoard.empty(size).set(0, 0)


@pytest.mark.parametrize("size", EVEN_SIZES)
def test_shifts_do_not_wrap(size):
    """Test discs shifted off an edge disappear instead of wrapping."""
    last = size - 1

    # East edge: must not reappear at the start of the next row
    east_edge = BitBoard.empty(size).set(last, 0).set(last, 1)
    assert east_edge.shift_east().is_empty()
    assert east_edge.shift_ne().is_empty()
    assert east_edge.shift_se().is_empty()

    # West edge: must not reappear at the end of the previous row
    west_edge = BitBoard.empty(size).set(0, 1).set(0, last)
    assert west_edge.shift_west().is_empty()
    assert west_edge.shift_nw().is_empty()
    assert west_edge.shift_sw().is_empty()

    # Top and bottom rows
    assert BitBoard.empty(size).set(2, 0).shift_north().is_empty()
    assert BitBoard.empty(size).set(2, last).shift_south().is_empty()


def test_full_board_shifts_stay_in_mask():
    """Test shifting the full board never sets sentinel bits."""
    full = BitBoard.full(8)
    for shifted in [
        full.shift_north(), full.shift_south(), full.shift_east(), full.shift_west(),
        full.shift_ne(), full.shift_se(), full.shift_sw(), full.shift_nw(),
    ]:
        assert shifted <= full
        assert shifted.popcount() in (49, 56)


def test_weight():
    """Test population count across set/unset."""
    bitboard = BitBoard.empty(10)
    assert bitboard.popcount() == 0
    bitboard = bitboard.set(1, 0)
    assert bitboard.popcount() == 1
    bitboard = bitboard.set(2, 0)
    assert bitboard.popcount() == 2

    # Setting the same cell repeatedly counts once
    bitboard = bitboard.set(0, 1).set(0, 1).set(0, 1)
    assert bitboard.popcount() == 3
    bitboard = bitboard.set(0, 2)
    assert bitboard.popcount() == 4

    bitboard = bitboard.unset(0, 2)
    assert bitboard.popcount() == 3
    bitboard = bitboard.unset(2, 0).unset(2, 0).unset(2, 0)
    assert bitboard.popcount() == 2


def test_get():
    """Test cell membership."""
    bitboard = BitBoard.empty(6).set(5, 5)
    assert bitboard.get(5, 5)
    assert not bitboard.get(4, 5)
    assert not bitboard.get(0, 0)


def test_complement_excludes_sentinels():
    """Test complement stays within the usable board."""
    empty = BitBoard.empty(8)
    assert empty.complement() == BitBoard.full(8)
    assert (~empty).popcount() == 64

    # Sentinel bit of the first row (index 8) is never set
    assert not BitBoard.full(8).bits & (1 << 8)

    one = empty.set(3, 3)
    assert (~one).popcount() == 63
    assert not (~one).get(3, 3)


def test_set_algebra():
    """Test union, intersection, difference and subset."""
    a = BitBoard.from_cells(4, [(0, 0), (1, 1)])
    b = BitBoard.from_cells(4, [(1, 1), (2, 2)])

    assert (a | b) == BitBoard.from_cells(4, [(0, 0), (1, 1), (2, 2)])
    assert (a & b) == BitBoard.from_cells(4, [(1, 1)])
    assert (a - b) == BitBoard.from_cells(4, [(0, 0)])

    assert a.is_subset_of(a | b)
    assert not a.is_subset_of(b)
    assert BitBoard.empty(4) <= a


def test_iteration_order():
    """Test iteration yields cells in ascending index order."""
    bitboard = BitBoard.from_cells(4, [(3, 0), (0, 1), (1, 0), (3, 3)])

    assert list(bitboard) == [(1, 0), (3, 0), (0, 1), (3, 3)]
    # Iterating does not consume the set
    assert list(bitboard) == [(1, 0), (3, 0), (0, 1), (3, 3)]
    assert list(BitBoard.empty(4)) == []


def test_invalid_sizes():
    """Test unsupported sizes are rejected."""
    for size in [0, 1, 3, 5, 11, 12]:
        with pytest.raises(ValueError):
            BitBoard.empty(size)
        with pytest.raises(ValueError):
            BitBoard.full(size)


def test_out_of_range_coordinates():
    """Test coordinates off the board are rejected."""
    bitboard = BitBoard.empty(4)

    with pytest.raises(ValueError):
        bitboard.set(4, 0)
    with pytest.raises(ValueError):
        bitboard.get(0, 4)
    with pytest.raises(ValueError):
        bitboard.unset(-1, 0)


def test_size_mismatch():
    """Test set algebra refuses boards of different sizes."""
    with pytest.raises(ValueError):
        BitBoard.empty(4) | BitBoard.empty(6)
    with pytest.raises(ValueError):
        BitBoard.empty(4) & BitBoard.empty(6)


def test_bits_outside_board_rejected():
    """Test raw bits in a sentinel column are rejected."""
    with pytest.raises(ValueError):
        BitBoard(4, 1 << 4)


def test_str():
    """Test the bitboard dump marks set cells."""
    bitboard = BitBoard.from_cells(4, [(0, 0), (3, 2)])

    assert str(bitboard) == "1 . . .\n. . . .\n. . . 1\n. . . ."
