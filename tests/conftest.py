"""
- Keep every test independent of the developer's shell and .env
- Provide a make_game fixture that builds a game with a KNOWN secret
  (no randomness), so outcomes are predictable.
"""
import pytest

from secretcode.game import Game, Rules

ENV_VARS = (
    "SECRETCODE_CODE_LENGTH",
    "SECRETCODE_COLORS",
    "SECRETCODE_MAX_ATTEMPTS",
    "SECRETCODE_RANDOM_SOURCE",
    "SECRETCODE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """config.py loads .env at import; wipe our variables before each test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def make_game():
    """Factory: make_game("rygb", max_attempts=3) -> fresh Game with that secret."""
    def _make(secret: str = "rygb", allowed_colors: str = "rygbmc", max_attempts: int = 9) -> Game:
        rules = Rules(code_length=len(secret), allowed_colors=allowed_colors, max_attempts=max_attempts)
        return Game(rules, secret)
    return _make


@pytest.fixture
def game(make_game) -> Game:
    return make_game("rrgb")
