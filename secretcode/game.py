"""
Game state for one player.

A Game holds fixed rules, the secret, and an append-only history of feedback.
It changes only through make_guess() and surrender(). The game is over once
it is won, surrendered, or every attempt has been used.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .engine import evaluate, mark_positions
from .errors import GameOverError, InvalidGuessError, SecretHiddenError
from .random_client import fetch_code
from .types import Code, GameStatus, Markers, RandomSource

logger = logging.getLogger(__name__)

DEFAULT_CODE_LENGTH = 4
DEFAULT_COLORS = "rygbmc"
DEFAULT_MAX_ATTEMPTS = 9


@dataclass(frozen=True)
class Rules:
    code_length: int = DEFAULT_CODE_LENGTH
    allowed_colors: str = DEFAULT_COLORS
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    def __post_init__(self) -> None:
        if self.code_length <= 0:
            raise ValueError("Code length must be a positive integer.")
        if self.max_attempts <= 0:
            raise ValueError("Max attempts must be a positive integer.")
        if not self.allowed_colors:
            raise ValueError("Allowed colors must not be empty.")
        if len(set(self.allowed_colors)) != len(self.allowed_colors):
            raise ValueError("Allowed colors must be distinct.")
        # guesses are lower-cased and stripped of spaces, so these could never match
        for symbol in self.allowed_colors:
            if symbol.isspace() or symbol != symbol.lower():
                raise ValueError(f"Allowed color {symbol!r} must be lower-case and not whitespace.")


@dataclass(frozen=True)
class GuessFeedback:
    guess: Code
    exact: int
    partial: int
    attempt_number: int


class Game:
    def __init__(
        self,
        rules: Rules,
        secret: Code,
        history: Iterable[GuessFeedback] = (),
        is_won: bool = False,
        surrendered: bool = False,
    ) -> None:
        self._rules = rules
        self._secret = secret
        self._history: List[GuessFeedback] = list(history)
        self._is_won = is_won
        self._surrendered = surrendered

    def __repr__(self) -> str:
        # the secret stays out of reprs and logs
        return (
            f"Game(rules={self._rules!r}, attempts={len(self._history)}, "
            f"status={self.status!r})"
        )

    # --- Construction ---

    @classmethod
    def new_random(
        cls,
        code_length: int = DEFAULT_CODE_LENGTH,
        allowed_colors: str = DEFAULT_COLORS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        source: RandomSource = "local",
    ) -> "Game":
        """
        Start a fresh game with a random secret.
        A seed (or an explicit rng) makes the secret reproducible.
        """
        rules = Rules(code_length, allowed_colors, max_attempts)
        if rng is None and seed is not None:
            rng = random.Random(seed)
        secret = fetch_code(rules.code_length, rules.allowed_colors, rng=rng, source=source)
        logger.info(
            "New game: length=%d colors=%s max_attempts=%d",
            rules.code_length, rules.allowed_colors, rules.max_attempts,
        )
        return cls(rules, secret)

    @classmethod
    def load(cls, path) -> "Game":
        from .snapshot import load_game
        return load_game(path)

    def save(self, path) -> None:
        from .snapshot import save_game
        save_game(self, path)

    # --- Read access ---

    @property
    def rules(self) -> Rules:
        return self._rules

    @property
    def code_length(self) -> int:
        return self._rules.code_length

    @property
    def allowed_colors(self) -> str:
        return self._rules.allowed_colors

    @property
    def max_attempts(self) -> int:
        return self._rules.max_attempts

    @property
    def history(self) -> Tuple[GuessFeedback, ...]:
        return tuple(self._history)

    @property
    def is_won(self) -> bool:
        return self._is_won

    @property
    def surrendered(self) -> bool:
        return self._surrendered

    @property
    def is_over(self) -> bool:
        return self._is_won or self._surrendered or len(self._history) >= self.max_attempts

    @property
    def attempts_left(self) -> int:
        return max(self.max_attempts - len(self._history), 0)

    @property
    def status(self) -> GameStatus:
        if self._is_won:
            return "won"
        if self._surrendered:
            return "surrendered"
        if len(self._history) >= self.max_attempts:
            return "exhausted"
        return "in_progress"

    # --- Guesses ---

    def normalize_guess(self, raw: Optional[str]) -> Code:
        """
        " Rr Gb " -> "rrgb". Raises InvalidGuessError unless the result has
        exactly code_length symbols, all from the allowed colors.
        """
        expected = f"Guess must be {self.code_length} letters from [{self.allowed_colors}]."
        if raw is None:
            raise InvalidGuessError(expected)
        normalized = raw.strip().lower().replace(" ", "")
        if len(normalized) != self.code_length:
            raise InvalidGuessError(expected)
        for symbol in normalized:
            if symbol not in self.allowed_colors:
                raise InvalidGuessError(f"Unknown color {symbol!r}. {expected}")
        return normalized

    def make_guess(self, raw: Optional[str]) -> GuessFeedback:
        if self.is_over:
            raise GameOverError("Game is already over.")

        guess = self.normalize_guess(raw)
        exact, partial = evaluate(guess, self._secret)

        feedback = GuessFeedback(
            guess=guess,
            exact=exact,
            partial=partial,
            attempt_number=len(self._history) + 1,
        )
        self._history.append(feedback)
        logger.debug(
            "Attempt %d: %s -> exact=%d partial=%d",
            feedback.attempt_number, guess, exact, partial,
        )

        if exact == self.code_length:
            self._is_won = True
        if self.is_over:
            logger.info("Game finished: %s after %d attempt(s)", self.status, len(self._history))
        return feedback

    def evaluate_positions(self, raw: Optional[str]) -> Markers:
        """Per-position markers for a guess, for display. History is not touched."""
        guess = self.normalize_guess(raw)
        return mark_positions(guess, self._secret)

    # --- Ending ---

    def surrender(self) -> None:
        if not self._surrendered:
            logger.info("Player surrendered after %d attempt(s)", len(self._history))
        self._surrendered = True

    def reveal_secret(self, force_reveal: bool = False) -> Code:
        if not self.is_over and not force_reveal:
            raise SecretHiddenError("Secret cannot be revealed until the game is over.")
        return self._secret
