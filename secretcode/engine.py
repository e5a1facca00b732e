"""
Pure game logic (no terminal, no files).
We compute two feedback numbers for each guess:
- exact: how many positions hold the right color in the right place (black pegs)
- partial: how many of the remaining guess colors appear somewhere else in the
  secret (white pegs), never counting a secret peg twice

Duplicates are allowed in both the secret and the guess.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from .types import EXACT, NO_MATCH, PARTIAL, Markers


def _check_inputs(guess: Optional[Sequence[str]], secret: Optional[Sequence[str]]) -> int:
    if guess is None or secret is None:
        raise ValueError("Guess and secret must both be given.")
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")
    return n


def _exact_pass(guess: Sequence[str], secret: Sequence[str]) -> List[bool]:
    # True where guess[i] == secret[i]; those positions are consumed on both sides
    return [guess[i] == secret[i] for i in range(len(secret))]


def _leftover_counts(secret: Sequence[str], consumed: List[bool]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for i, symbol in enumerate(secret):
        if consumed[i]:
            continue
        counts[symbol] = counts.get(symbol, 0) + 1
    return counts


def evaluate(guess: Sequence[str], secret: Sequence[str]) -> Tuple[int, int]:
    """
    Example:
      secret = "rrgb"
      guess  = "rbgr"
      exact   = 2  (positions 0 and 2)
      partial = 2  (the swapped 'b' and 'r')
      Returns a tuple: (exact, partial)

    Two empty sequences are rejected too: a game never has a zero-length code.
    """
    # 0. Validate inputs
    n = _check_inputs(guess, secret)

    # 1. Exact matches
    consumed = _exact_pass(guess, secret)
    exact = sum(1 for hit in consumed if hit)

    # 2. How many of each color are still unmatched in the secret
    leftover = _leftover_counts(secret, consumed)

    # 3. Partial matches take from what is left over
    partial = 0
    for i in range(n):
        if consumed[i]:
            continue
        symbol = guess[i]
        if leftover.get(symbol, 0) > 0:
            partial += 1
            leftover[symbol] -= 1

    return (exact, partial)


def mark_positions(guess: Sequence[str], secret: Sequence[str]) -> Markers:
    """
    Same two passes as evaluate(), but returns one marker per guess position
    (EXACT, PARTIAL or NO_MATCH) in guess order, for display.
    """
    n = _check_inputs(guess, secret)

    consumed = _exact_pass(guess, secret)
    markers: Markers = [EXACT if hit else NO_MATCH for hit in consumed]

    leftover = _leftover_counts(secret, consumed)
    for i in range(n):
        if consumed[i]:
            continue
        symbol = guess[i]
        if leftover.get(symbol, 0) > 0:
            markers[i] = PARTIAL
            leftover[symbol] -= 1

    return markers


def is_win(guess: Sequence[str], secret: Sequence[str]) -> bool:
    """
    Win = all colors match in order, for all positions.
    Works for any length, as long as lengths match.
    """
    if guess is None or secret is None:
        return False
    n = len(secret)
    if n == 0 or len(guess) != n:
        return False
    return all(guess[i] == secret[i] for i in range(n))
