"""
Save and load a Game as a JSON snapshot.

Public functions:
- to_snapshot(game) -> GameSnapshot
- from_snapshot(snapshot) -> Game
- save_game(game, path) -> None
- load_game(path) -> Game

A loaded game resumes exactly where it stopped: history, secret and flags are
taken from the file as they are, never recomputed. from_snapshot() only checks
that they describe a game that could have been played.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from .engine import is_win
from .errors import SnapshotDataError, SnapshotFormatError
from .game import Game, GuessFeedback, Rules
from .schemas import GameSnapshot, GuessFeedbackOut

logger = logging.getLogger(__name__)


# --- Small builders between the Game and the file model ---

def _to_feedback_out(feedback: GuessFeedback) -> GuessFeedbackOut:
    return GuessFeedbackOut(
        guess=feedback.guess,
        exact=feedback.exact,
        partial=feedback.partial,
        attempt_number=feedback.attempt_number,
    )


def to_snapshot(game: Game) -> GameSnapshot:
    return GameSnapshot(
        code_length=game.code_length,
        allowed_colors=game.allowed_colors,
        max_attempts=game.max_attempts,
        history=[_to_feedback_out(f) for f in game.history],
        is_won=game.is_won,
        secret=game.reveal_secret(force_reveal=True),
        surrendered=game.surrendered,
    )


def _check_code(label: str, code: str, rules: Rules) -> None:
    if len(code) != rules.code_length:
        raise SnapshotDataError(
            f"{label} {code!r} has {len(code)} symbols, expected {rules.code_length}."
        )
    for symbol in code:
        if symbol not in rules.allowed_colors:
            raise SnapshotDataError(
                f"{label} {code!r} uses {symbol!r}, not in [{rules.allowed_colors}]."
            )


def from_snapshot(snapshot: GameSnapshot) -> Game:
    # 1. Rules must be valid on their own
    try:
        rules = Rules(snapshot.code_length, snapshot.allowed_colors, snapshot.max_attempts)
    except ValueError as exc:
        raise SnapshotDataError(f"Invalid rules in snapshot: {exc}") from exc

    # 2. Secret fits the rules
    _check_code("Secret", snapshot.secret, rules)

    # 3. History fits the rules and is in attempt order
    entries = snapshot.history
    if len(entries) > rules.max_attempts:
        raise SnapshotDataError(
            f"Snapshot has {len(entries)} guesses but only {rules.max_attempts} attempts are allowed."
        )

    history = []
    for index, entry in enumerate(entries):
        if entry.attempt_number != index + 1:
            raise SnapshotDataError(
                f"History entry {index} has attempt number {entry.attempt_number}, expected {index + 1}."
            )
        _check_code(f"Guess #{entry.attempt_number}", entry.guess, rules)
        if entry.exact + entry.partial > rules.code_length:
            raise SnapshotDataError(
                f"Guess #{entry.attempt_number} scores {entry.exact}+{entry.partial} pegs "
                f"for a code of length {rules.code_length}."
            )
        if entry.exact == rules.code_length and index != len(entries) - 1:
            raise SnapshotDataError(
                f"Guess #{entry.attempt_number} already won but more guesses follow."
            )
        history.append(
            GuessFeedback(
                guess=entry.guess,
                exact=entry.exact,
                partial=entry.partial,
                attempt_number=entry.attempt_number,
            )
        )

    # 4. Won flag agrees with the last guess
    last_won = bool(history) and history[-1].exact == rules.code_length
    if snapshot.is_won != last_won:
        raise SnapshotDataError(
            "Won flag does not match the last guess in the history."
        )
    if last_won and not is_win(history[-1].guess, snapshot.secret):
        raise SnapshotDataError("Winning guess does not equal the secret.")

    return Game(
        rules,
        snapshot.secret,
        history=history,
        is_won=snapshot.is_won,
        surrendered=snapshot.surrendered,
    )


# --- File I/O ---

def save_game(game: Game, path) -> None:
    """
    Write the game to `path` as indented JSON.
    Args:
        game (Game): The game to save.
        path (str | Path): Where to write. Parent folders must exist.
    Raises:
        OSError: if the file cannot be written.
    """
    path = Path(path)
    text = to_snapshot(game).model_dump_json(indent=2)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
        f.write("\n")
    logger.info("Game saved to %s (%d attempt(s))", path, len(game.history))


def load_game(path) -> Game:
    """
    Load a game written by save_game().
    Args:
        path (str | Path): The file to read.
    Returns:
        Game: the restored game.
    Raises:
        OSError: if the file cannot be read.
        SnapshotFormatError: if the file is not a snapshot document.
        SnapshotDataError: if the snapshot describes an impossible game.
    """
    path = Path(path)
    try:
        # utf-8-sig also accepts files saved with a byte order mark
        with open(path, "r", encoding="utf-8-sig") as f:
            text = f.read()
    except UnicodeDecodeError as exc:
        raise SnapshotFormatError(f"{path} is not UTF-8 text: {exc}") from exc

    try:
        snapshot = GameSnapshot.model_validate_json(text)
    except ValidationError as exc:
        raise SnapshotFormatError(f"{path} is not a valid game snapshot: {exc}") from exc

    game = from_snapshot(snapshot)
    logger.info("Game loaded from %s (%s, %d attempt(s))", path, game.status, len(game.history))
    return game
