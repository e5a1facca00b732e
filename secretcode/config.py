"""
Single place to:
- Read game settings from env (and a local .env, if present)
- Validate them once, with a message naming the bad variable
- Hand them out as a frozen Settings object

Command line flags in main.py override whatever is set here.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .game import DEFAULT_CODE_LENGTH, DEFAULT_COLORS, DEFAULT_MAX_ATTEMPTS
from .random_client import SOURCES

# dev convenience; a real shell environment wins over .env
load_dotenv(override=False)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    code_length: int = DEFAULT_CODE_LENGTH
    colors: str = DEFAULT_COLORS
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    random_source: str = "local"
    log_level: str = "WARNING"


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}.") from None
    if value <= 0:
        raise RuntimeError(f"{name} must be a positive integer, got {value}.")
    return value


def _choice(name: str, default: str, choices, transform=str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = transform(raw.strip())
    if value not in choices:
        raise RuntimeError(f"{name} must be one of {', '.join(choices)}, got {raw!r}.")
    return value


def get_settings() -> Settings:
    """Read the environment now (not at import) so tests can monkeypatch it."""
    colors = os.getenv("SECRETCODE_COLORS", "").strip() or DEFAULT_COLORS
    return Settings(
        code_length=_positive_int("SECRETCODE_CODE_LENGTH", DEFAULT_CODE_LENGTH),
        colors=colors,
        max_attempts=_positive_int("SECRETCODE_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS),
        random_source=_choice("SECRETCODE_RANDOM_SOURCE", "local", SOURCES, str.lower),
        log_level=_choice("SECRETCODE_LOG_LEVEL", "WARNING", LOG_LEVELS, str.upper),
    )
