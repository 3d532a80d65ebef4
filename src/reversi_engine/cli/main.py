"""
Main CLI for the Reversi engine.
"""

import argparse
import logging
import sys

from ..config import (
    DEFAULT_ARENA_GAMES,
    DEFAULT_HEURISTIC,
    DEFAULT_MAX_DEPTH,
    DEFAULT_SIZE,
    DEFAULT_TIMEOUT_SEC,
    SearchConfig,
)
from ..core import (
    BoardParseError,
    Move,
    create_starting_state,
    get_game_result,
    load_board,
    save_board,
)
from ..solver import HEURISTICS, Arena, ComputerPlayer
from ..utils.rich_display import GameDisplay, setup_rich_logging


def setup_logging(level: str = "INFO", rich: bool = False) -> None:
    """Configure logging."""
    if rich:
        setup_rich_logging(level)
        return
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _search_config(args) -> SearchConfig:
    return SearchConfig(timeout=args.timeout, max_depth=args.depth, heuristic=args.heuristic)


def _load_state(args):
    """Board from FILE if given, otherwise the starting position."""
    if args.file:
        return load_board(args.file)
    return create_starting_state(args.size)


def info_command(args, display: GameDisplay) -> int:
    """Show a summary of a board file."""
    state = load_board(args.file)
    display.show_header(f"Position: {args.file}")
    display.show_position(state)
    return 0


def new_command(args, display: GameDisplay) -> int:
    """Write the starting position to a file."""
    state = create_starting_state(args.size)
    path = save_board(state, args.output)
    display.log_success(f"Saved {args.size}x{args.size} starting position to {path}")
    return 0


def apply_command(args, display: GameDisplay) -> int:
    """Play a move on a board file."""
    state = load_board(args.file)
    try:
        move = Move.from_notation(args.move, state.size)
    except ValueError as e:
        display.log_error(str(e))
        return 1

    next_state = state.play(move)
    if next_state is None:
        display.log_error(f"Illegal move {move}")
        return 1

    output = args.output or args.file
    save_board(next_state, output)
    display.log_success(f"Played {move}, saved to {output}")
    if next_state.player is None:
        display.log_warning(
            f"Game over: {get_game_result(next_state)}. {output} records a finished "
            "game and cannot be loaded again"
        )
    display.show_position(next_state)
    return 0


def move_command(args, display: GameDisplay) -> int:
    """Compute the computer's move and print it (contest mode)."""
    logger = logging.getLogger(__name__)

    state = _load_state(args)
    player = ComputerPlayer(_search_config(args), seed=args.seed)
    result = player.search(state)

    if result.move is None:
        logger.info("Game is over, no move to play")
        display.log_warning("No move: the game is over")
        return 1

    if args.verbose:
        display.show_search(result)
    # Plain output for scripts
    print(result.move)
    return 0


def arena_command(args, display: GameDisplay) -> int:
    """Play a match between two tactics."""
    display.show_header(f"Arena - {args.size}x{args.size}")
    arena = Arena(
        size=args.size,
        black=args.black,
        white=args.white,
        config=_search_config(args),
        num_workers=args.workers,
        seed=args.seed,
    )
    summary = arena.run(args.games)
    display.show_arena(summary)
    return 0


def _add_search_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-t", "--timeout", type=float, default=DEFAULT_TIMEOUT_SEC,
        help="Seconds per computer move",
    )
    parser.add_argument(
        "-d", "--depth", type=int, default=DEFAULT_MAX_DEPTH,
        help="Maximum search depth in plies",
    )
    parser.add_argument(
        "--heuristic", choices=sorted(HEURISTICS), default=DEFAULT_HEURISTIC,
        help="Position evaluation function",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Reversi rules engine and alpha-beta player")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument("--rich-log", action="store_true", help="Use rich log formatting")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Info command
    info_parser = subparsers.add_parser("info", help="Summarize a board file")
    info_parser.add_argument("file", help="Board file")
    info_parser.set_defaults(func=info_command)

    # New command
    new_parser = subparsers.add_parser("new", help="Write a starting position")
    new_parser.add_argument("output", help="Board file to write")
    new_parser.add_argument("-s", "--size", type=int, default=DEFAULT_SIZE, help="Board size")
    new_parser.set_defaults(func=new_command)

    # Apply command
    apply_parser = subparsers.add_parser("apply", help="Play a move on a board file")
    apply_parser.add_argument("file", help="Board file")
    apply_parser.add_argument("move", help="Move such as d3 or D3")
    apply_parser.add_argument("-o", "--output", default=None, help="Output file (default: overwrite)")
    apply_parser.set_defaults(func=apply_command)

    # Move command
    move_parser = subparsers.add_parser("move", help="Print the computer's move")
    move_parser.add_argument("file", nargs="?", default=None, help="Board file (default: new game)")
    move_parser.add_argument("-s", "--size", type=int, default=DEFAULT_SIZE, help="Board size for a new game")
    move_parser.add_argument("-v", "--verbose", action="store_true", help="Show search statistics")
    _add_search_args(move_parser)
    move_parser.set_defaults(func=move_command)

    # Arena command
    arena_parser = subparsers.add_parser("arena", help="Play a match between two tactics")
    arena_parser.add_argument("-s", "--size", type=int, default=DEFAULT_SIZE, help="Board size")
    arena_parser.add_argument("-n", "--games", type=int, default=DEFAULT_ARENA_GAMES, help="Number of games")
    arena_parser.add_argument("-b", "--black", choices=["random", "ai"], default="ai", help="Black tactic")
    arena_parser.add_argument("-w", "--white", choices=["random", "ai"], default="random", help="White tactic")
    arena_parser.add_argument("--workers", type=int, default=None, help="Number of worker processes")
    _add_search_args(arena_parser)
    arena_parser.set_defaults(func=arena_command)

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.log_level, args.rich_log)
    display = GameDisplay()

    try:
        return args.func(args, display)
    except BoardParseError as e:
        display.log_error(f"Could not parse board: {e}")
    except OSError as e:
        display.log_error(str(e))
    except ValueError as e:
        display.log_error(str(e))
    return 1


if __name__ == "__main__":
    sys.exit(main())
