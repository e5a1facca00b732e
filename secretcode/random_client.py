"""
Where secret codes come from.

- An explicit random.Random (seeded or not) gives reproducible codes for tests
  and for "--seed" on the command line.
- "local": Python's secure random (secrets module).
- "random.org": HTTP call with clear fallback. If anything goes wrong (no
  internet, timeout, bad response), we fall back to the local secure source so
  the game still works.

Colors are drawn independently, so repeats are allowed (classic rules).
"""

import logging
import random
import secrets
from typing import List, Optional

import requests

from .types import Code, RandomSource

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"
TIMEOUT_SECONDS = 3.0

SOURCES = ("local", "random.org")


def _local_code(length: int, alphabet: str) -> Code:
    return "".join(secrets.choice(alphabet) for _ in range(length))


def _fetch_indexes(length: int, upper: int) -> List[int]:
    # Parameters to send to random.org
    params = {
        "num": length,     # how many numbers we want
        "min": 0,          # smallest allowed number
        "max": upper,      # largest allowed number (last alphabet index)
        "col": 1,          # one number per line
        "base": 10,        # normal decimal numbers
        "format": "plain", # plain text response
        "rnd": "new",      # always generate new numbers
    }
    response = requests.get(RANDOM_URL, params=params, timeout=TIMEOUT_SECONDS)

    # If the response was not 200 OK, this will raise an error
    response.raise_for_status()

    # The body looks like:
    #   0\n3\n1\n2\n
    indexes = [int(line.strip()) for line in response.text.splitlines() if line.strip()]

    if len(indexes) != length:
        raise ValueError(f"random.org returned {len(indexes)} values, expected {length}.")
    for value in indexes:
        if value < 0 or value > upper:
            raise ValueError(f"random.org number {value} out of range 0..{upper}.")
    return indexes


def fetch_code(
    length: int,
    alphabet: str,
    rng: Optional[random.Random] = None,
    source: RandomSource = "local",
) -> Code:
    """
    Return `length` symbols drawn uniformly (with replacement) from `alphabet`.
    An explicit `rng` always wins over `source`.
    """
    if length <= 0:
        raise ValueError("Code length must be positive.")
    if not alphabet:
        raise ValueError("Alphabet must not be empty.")

    if rng is not None:
        return "".join(rng.choice(alphabet) for _ in range(length))

    if source == "local":
        return _local_code(length, alphabet)

    if source == "random.org":
        try:
            indexes = _fetch_indexes(length, len(alphabet) - 1)
        except (requests.RequestException, ValueError) as exc:
            logger.warning("random.org unavailable (%s); using local random source", exc)
            return _local_code(length, alphabet)
        return "".join(alphabet[i] for i in indexes)

    raise ValueError(f"Unknown random source {source!r}; expected one of {', '.join(SOURCES)}.")
