'''
Mastermind in the terminal: computer picks the code, you break it.

Usage:
  secretcode                         -> new game with settings from env/.env
  secretcode --length 5 --seed 42    -> reproducible 5-peg game
  secretcode --load saved.json       -> resume a saved game

Commands during play:
  <guess>        e.g. "rygb" (spaces and case are ignored)
  s, surrender   give up and see the secret
  save           write the game to a JSON file
  load           replace the current game with a saved one
  q              quit without revealing the secret
'''

import argparse
import logging
import sys
from typing import Callable, List, Optional

from .config import LOG_LEVELS, get_settings
from .errors import InvalidGuessError, SnapshotError
from .game import Game
from .random_client import SOURCES
from .render import colorize_code, describe_colors, legend, render_feedback, render_summary

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="secretcode",
        description="Mastermind: guess the secret color code.",
    )
    parser.add_argument("--length", type=_positive_int, help="pegs in the code (default from env, else 4)")
    parser.add_argument("--colors", help="allowed color letters (default from env, else rygbmc)")
    parser.add_argument("--max-attempts", type=_positive_int, help="guesses allowed (default from env, else 9)")
    parser.add_argument("--seed", type=int, help="seed the secret for a reproducible game")
    parser.add_argument("--source", choices=SOURCES, help="where random secrets come from")
    parser.add_argument("--load", metavar="PATH", help="resume a saved game instead of starting one")
    parser.add_argument("--no-color", action="store_true", help="plain text output")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="logging level")
    return parser


# ---------------- Command loop ----------------

def _save(game: Game, read: Reader, write: Writer) -> None:
    path = read("Enter filename to save snapshot: ").strip()
    try:
        game.save(path)
    except OSError as exc:
        write(f"Save failed: {exc}")
        return
    write(f"Game saved to '{path}'.")


def _load(game: Game, read: Reader, write: Writer) -> Game:
    path = read("Enter filename to load snapshot: ").strip()
    try:
        loaded = Game.load(path)
    except (OSError, SnapshotError) as exc:
        write(f"Load failed: {exc}")
        return game
    write(f"Loaded snapshot from '{path}'.")
    return loaded


def play(
    game: Game,
    read: Optional[Reader] = None,
    write: Optional[Writer] = None,
    color: bool = True,
) -> Game:
    """
    Run the interactive loop until the game is over or the player quits.
    Returns the game in its final state (it may be a different object if the
    player loaded a snapshot).
    """
    read = read or input
    write = write or print

    while not game.is_over:
        write("")
        write(
            f"Attempt {len(game.history) + 1} of {game.max_attempts}. "
            f"Enter {game.code_length} colors from [{game.allowed_colors}] or a command:"
        )
        try:
            line = read("> ").strip()
        except EOFError:
            write("Input closed. Exiting without revealing secret.")
            return game
        command = line.lower()

        if command == "q":
            write("Quit requested. Exiting without revealing secret.")
            return game

        if command in ("s", "surrender"):
            game.surrender()
            write("You surrendered. Secret revealed:")
            write(colorize_code(game.reveal_secret(force_reveal=True), color))
            break

        if command == "save":
            _save(game, read, write)
            continue

        if command == "load":
            game = _load(game, read, write)
            continue

        try:
            feedback = game.make_guess(line)
        except InvalidGuessError as exc:
            write(f"Invalid guess. {exc}")
            continue

        write(render_feedback(game, feedback, color))
        write(legend(color))
        if game.is_won:
            write(f"Congratulations, you guessed the secret in {feedback.attempt_number} attempt(s)!")
            break

        write(
            f"Black (exact): {feedback.exact}, White (partial): {feedback.partial}. "
            f"Attempts left: {game.attempts_left}"
        )
        if game.attempts_left == 0:
            write("No attempts left. The secret was:")
            write(colorize_code(game.reveal_secret(force_reveal=True), color))

    write("")
    write(render_summary(game, color))
    return game


# ---------------- Entry point ----------------

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except RuntimeError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Settings: %s", settings)

    if args.load:
        try:
            game = Game.load(args.load)
        except (OSError, SnapshotError) as exc:
            print(f"Load failed: {exc}", file=sys.stderr)
            return 1
        print(f"Loaded snapshot from '{args.load}'.")
    else:
        try:
            game = Game.new_random(
                code_length=args.length or settings.code_length,
                allowed_colors=args.colors or settings.colors,
                max_attempts=args.max_attempts or settings.max_attempts,
                seed=args.seed,
                source=args.source or settings.random_source,
            )
        except ValueError as exc:
            print(f"Invalid game settings: {exc}", file=sys.stderr)
            return 2

    color = not args.no_color
    print("Mastermind: Computer vs Player (classic)")
    print(f"Colors: {describe_colors(game.allowed_colors)}")
    print("Commands: 's' to surrender, 'save' to save, 'load' to load snapshot, 'q' to quit.")

    play(game, color=color)
    return 0


if __name__ == "__main__":
    sys.exit(main())
