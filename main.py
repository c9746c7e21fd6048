#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--size N] [--bombs B] [--seed S]
    python main.py evaluate [--games G] [--size N] [--bombs B] [--seed S]
"""
import argparse
from typing import Callable, List, Optional, Tuple

from src.minefield.board import Board, BoardConfig, GameState
from src.minefield.cell import CellChange
from src.minefield.environment import render_observation
from src.minefield.agents import RandomAgent
from src.minefield.evaluation import Evaluator


def parse_move(line: str) -> Optional[Tuple[int, int]]:
    """Parse a "row col" line, or return None if it is not one."""
    parts = line.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def describe_changes(changes: List[CellChange]) -> str:
    """Format a change list for the terminal."""
    if not changes:
        return "Nothing changed."
    shown = []
    for change in changes:
        display = change.display_value
        label = "" if display is None else display
        shown.append(f"({change.row}, {change.col})={label}")
    return f"Revealed {len(changes)} cell(s): " + " ".join(shown)


def play(args: argparse.Namespace, read: Callable[[str], str] = input) -> GameState:
    """Play one game in the terminal."""
    config = BoardConfig(size=args.size, num_bombs=args.bombs)
    board = Board(config, rng=args.seed)

    print(f"Board: {config.size}x{config.size} with {config.num_bombs} bombs")
    print("Enter moves as 'row col' (0-based), or 'q' to quit.\n")
    print(render_observation(board.get_observation()))

    while board.is_playing:
        try:
            line = read("> ").strip()
        except EOFError:
            break
        if line.lower() in ("q", "quit", "exit"):
            break

        move = parse_move(line)
        if move is None:
            print("Expected two integers: row col")
            continue

        result = board.reveal(*move)
        print(describe_changes(result.changes))
        print(render_observation(board.get_observation()))

    if board.is_won:
        print("\n*** WIN! ***")
    elif board.is_lost:
        print(f"\n*** LOST (hit bomb at {board.triggered_bomb}) ***")
    else:
        print(f"\nStopped with {board.cells_remaining} cells hidden.")

    return board.game_state


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the random baseline agent."""
    config = BoardConfig(size=args.size, num_bombs=args.bombs)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)
    agent = RandomAgent(config.size, seed=args.seed)

    print(f"\nEvaluating Random over {args.games} games...")
    results = evaluator.evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by every subcommand."""
    parser.add_argument("--size", type=int, default=9, help="Board size (NxN)")
    parser.add_argument(
        "--bombs", type=int, default=10, help="Number of bombs"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for bomb placement"
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - Minesweeper board engine"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    eval_parser = subparsers.add_parser(
        "evaluate", help="Evaluate the random agent"
    )
    add_board_arguments(eval_parser)
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    args = parser.parse_args(argv)

    try:
        if args.command == "play":
            play(args)
        elif args.command == "evaluate":
            evaluate(args)
        else:
            parser.print_help()
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
