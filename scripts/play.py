#!/usr/bin/env python3
"""
Terminal Snake - Play Script

Controls:
    WASD or Arrow Keys: Move the snake
    R: Restart game
    Q / ESC: Quit

Usage:
    python scripts/play.py
    python scripts/play.py --food-policy interior_free --no-reverse
    python scripts/play.py --config my_snake.yaml --fps 20
"""
import sys
import os
import argparse
import curses
import locale
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Make ESC respond without curses' default one second delay
os.environ.setdefault('ESCDELAY', '25')

from rich.console import Console

from termsnake.games.snake.config import parse_food_policy
from termsnake.games.snake.controller import SnakeController
from termsnake.games.snake.game import GridTooSmallError
from termsnake.terminal.app import CursesApp
from termsnake.utils.config_loader import Config, load_config, load_game_config


console = Console()


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Terminal Snake - play snake in your terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/play.py
  python scripts/play.py --food-policy interior_free
  python scripts/play.py --config my_snake.yaml --fps 20
"""
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="Path to a YAML config file (default: config/ directory)"
    )
    parser.add_argument(
        "--fps",
        type=positive_int,
        default=None,
        help="Render frames per second (default: 30)"
    )
    parser.add_argument(
        "--food-policy",
        type=str,
        default=None,
        choices=["interior", "interior_free"],
        help="Where food may spawn (default: interior)"
    )
    parser.add_argument(
        "--no-reverse",
        action="store_true",
        help="Ignore turns straight back into the snake"
    )

    return parser.parse_args(argv)


def build_config(args) -> Config:
    """Load configuration and apply command line overrides."""
    if args.config:
        config = load_config(args.config)
    else:
        config = load_game_config("snake")

    if args.fps is not None:
        config.display.fps = args.fps
    if args.food_policy is not None:
        config.game.food_policy = parse_food_policy(args.food_policy)
    if args.no_reverse:
        config.game.allow_reverse = False

    return config


def play(stdscr, config: Config) -> SnakeController:
    """Run the game inside an initialized curses screen."""
    app = CursesApp(stdscr, fps=config.display.fps)
    controller = SnakeController(app.window_size(), config=config.game)
    app.run(controller.on_frame)
    return controller


def main(argv=None) -> int:
    """Main entry point for the play script."""
    args = parse_args(argv)
    try:
        config = build_config(args)
    except ValueError as e:
        console.print(f"[Config] {e}", markup=False, style="bold red")
        return 1

    locale.setlocale(locale.LC_ALL, "")

    console.rule("Terminal Snake")
    console.print("Controls:", markup=False)
    console.print("  WASD / Arrow Keys: Move", markup=False)
    console.print("  R: Restart", markup=False)
    console.print("  Q / ESC: Quit", markup=False)

    try:
        controller = curses.wrapper(play, config)
    except GridTooSmallError as e:
        console.print(f"[Snake] {e}", markup=False, style="bold red")
        console.print("[Snake] Enlarge the terminal window and try again.", markup=False)
        return 1

    controller.record_score()
    console.print(f"\n[Snake] Best score this session: {controller.best_score}", markup=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
