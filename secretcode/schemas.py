"""
Explicit validation & Pydantic models for the save file.
- Defines the structure of a game snapshot on disk (JSON).
- Field names are stable. Files written by the older PascalCase format
  (CodeLength, History, ...) are accepted on load; we always write snake_case.
"""

from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# 1. One entry of the guess history
class GuessFeedbackOut(BaseModel):
    model_config = ConfigDict(strict=True)

    guess: str = Field(
        ..., validation_alias=AliasChoices("guess", "Guess"),
        description="The normalized guess, e.g. 'rrgb'",
    )
    exact: int = Field(
        ..., ge=0, validation_alias=AliasChoices("exact", "Exact"),
        description="Right color, right place (black pegs)",
    )
    partial: int = Field(
        ..., ge=0, validation_alias=AliasChoices("partial", "Partial"),
        description="Right color, wrong place (white pegs)",
    )
    attempt_number: int = Field(
        ..., ge=1, validation_alias=AliasChoices("attempt_number", "AttemptNumber"),
        description="1-based attempt at which the guess was made",
    )


# 2. The whole game
class GameSnapshot(BaseModel):
    code_length: int = Field(
        ..., validation_alias=AliasChoices("code_length", "CodeLength"),
        description="How many pegs in the code",
    )
    allowed_colors: str = Field(
        ..., validation_alias=AliasChoices("allowed_colors", "AllowedColors"),
        description="Alphabet of peg colors, one character each",
    )
    max_attempts: int = Field(
        ..., validation_alias=AliasChoices("max_attempts", "MaxAttempts"),
        description="Guesses allowed before the game is lost",
    )
    history: List[GuessFeedbackOut] = Field(
        default_factory=list, validation_alias=AliasChoices("history", "History"),
        description="All guesses made so far, in order",
    )
    is_won: bool = Field(
        False, validation_alias=AliasChoices("is_won", "IsWon"),
        description="True once the code was guessed",
    )
    secret: str = Field(
        ..., validation_alias=AliasChoices("secret", "Secret"),
        description="The secret code",
    )
    surrendered: bool = Field(
        False, validation_alias=AliasChoices("surrendered", "Surrendered"),
        description="True if the player gave up",
    )

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "examples": [
                {
                    "code_length": 4,
                    "allowed_colors": "rygbmc",
                    "max_attempts": 9,
                    "history": [
                        {"guess": "rrgb", "exact": 2, "partial": 1, "attempt_number": 1},
                    ],
                    "is_won": False,
                    "secret": "rgbb",
                    "surrendered": False,
                }
            ]
        },
    )
