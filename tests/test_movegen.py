"""Tests for legal move and flip computation."""

from reversi_engine.core import (
    BitBoard,
    GameState,
    Player,
    compute_flips,
    compute_moves,
    resolve_turn,
)


def test_compute_moves_start_position():
    """Test black's opening moves on 8x8."""
    state = GameState.new_game(8)
    moves = compute_moves(state.black, state.white)

    assert moves == BitBoard.from_cells(8, [(3, 2), (2, 3), (5, 4), (4, 5)])


def test_compute_moves_white_at_start():
    """Test white's moves are the mirror image."""
    state = GameState.new_game(8)
    moves = compute_moves(state.white, state.black)

    assert moves == BitBoard.from_cells(8, [(4, 2), (5, 3), (2, 4), (3, 5)])


def test_moves_are_empty_cells():
    """Test legal moves never land on occupied cells."""
    state = GameState.new_game(6)
    moves = compute_moves(state.black, state.white)

    assert moves <= state.empty
    assert not (moves & state.occupied)


def test_no_moves_without_opponent_run():
    """Test adjacency to an empty cell alone is not a move."""
    black = BitBoard.from_cells(4, [(0, 0)])
    white = BitBoard.empty(4)

    assert compute_moves(black, white).is_empty()


def test_no_move_across_row_boundary():
    """Test runs do not continue from the end of one row into the next."""
    # (3,0) and (0,1) are adjacent bit indices without the sentinel column
    black = BitBoard.from_cells(4, [(3, 0)])
    white = BitBoard.from_cells(4, [(0, 1)])

    assert compute_moves(black, white).is_empty()
    assert compute_moves(white, black).is_empty()


def test_long_run():
    """Test a run spanning most of a row."""
    black = BitBoard.from_cells(8, [(0, 0)])
    white = BitBoard.from_cells(8, [(x, 0) for x in range(1, 7)])

    assert compute_moves(black, white) == BitBoard.from_cells(8, [(7, 0)])


def test_compute_flips_single_direction():
    """Test the opening move d3 flips exactly d4."""
    state = GameState.new_game(8)
    placed = BitBoard.empty(8).set(3, 2)

    flipped = compute_flips(state.black, state.white, placed)
    assert flipped == BitBoard.from_cells(8, [(3, 3)])


def test_compute_flips_multiple_directions():
    """Test flips accumulate over every bracketed line."""
    # Black at the corners of a 3x3 square around (2,2), white in between
    black = BitBoard.from_cells(6, [(0, 0), (4, 0), (0, 4), (4, 4), (2, 0)])
    white = BitBoard.from_cells(6, [(1, 1), (3, 1), (1, 3), (3, 3), (2, 1)])
    placed = BitBoard.empty(6).set(2, 2)

    flipped = compute_flips(black, white, placed)
    assert flipped == white


def test_compute_flips_unbracketed_run():
    """Test a run ending in an empty cell or the edge is not flipped."""
    black = BitBoard.from_cells(4, [(0, 0)])
    white = BitBoard.from_cells(4, [(1, 0), (0, 1), (0, 2), (0, 3)])

    # Playing (2,0) brackets (1,0) against (0,0)
    placed = BitBoard.empty(4).set(2, 0)
    assert compute_flips(black, white, placed) == BitBoard.from_cells(4, [(1, 0)])

    # From (1,1) every white run ends at the edge
    placed = BitBoard.empty(4).set(1, 1)
    assert compute_flips(black, white, placed).is_empty()


def test_resolve_turn_switches():
    """Test the opponent moves next when it can."""
    state = GameState.new_game(8)
    player, moves = resolve_turn(state.black, state.white, Player.WHITE)

    assert player is Player.WHITE
    assert moves == compute_moves(state.white, state.black)


def test_resolve_turn_pass():
    """Test the turn falls back to the other side when one must pass."""
    black = BitBoard.from_cells(4, [(1, 0)])
    white = BitBoard.from_cells(4, [(0, 0)])

    player, moves = resolve_turn(black, white, Player.BLACK)
    assert player is Player.WHITE
    assert moves == BitBoard.from_cells(4, [(2, 0)])


def test_resolve_turn_game_over():
    """Test no player when neither side can move."""
    black = BitBoard.from_cells(4, [(0, 0), (1, 0)])
    white = BitBoard.empty(4)

    player, moves = resolve_turn(black, white, Player.WHITE)
    assert player is None
    assert moves.is_empty()
