"""
Terminal rendering with ANSI colors. Only builds strings; main.py prints them.
"""

from typing import List

from .game import Game, GuessFeedback
from .types import EXACT, PARTIAL, Code, Markers

RESET = "\033[0m"
BLACK_PEG = "\033[30;47m"  # black on white
WHITE_PEG = "\033[97;100m"  # white on dark gray

COLOR_CODES = {
    "r": "\033[91m",  # red
    "y": "\033[93m",  # yellow
    "g": "\033[92m",  # green
    "b": "\033[94m",  # blue
    "m": "\033[95m",  # magenta
    "c": "\033[96m",  # cyan
}

COLOR_NAMES = {
    "r": "Red",
    "y": "Yellow",
    "g": "Green",
    "b": "Blue",
    "m": "Magenta",
    "c": "Cyan",
}


def _paint(text: str, code: str, color: bool) -> str:
    return f"{code}{text}{RESET}" if color and code else text


def colorize_code(code: Code, color: bool = True) -> str:
    """'rygb' -> 'r y g b' with each letter in its own color."""
    return " ".join(_paint(ch, COLOR_CODES.get(ch, ""), color) for ch in code)


def render_markers(markers: Markers, color: bool = True) -> str:
    cells = []
    for marker in markers:
        if marker == EXACT:
            cells.append(_paint("●", BLACK_PEG, color))
        elif marker == PARTIAL:
            cells.append(_paint("○", WHITE_PEG, color))
        else:
            cells.append(" ")
    return " ".join(cells)


def legend(color: bool = True) -> str:
    return f"  Legend: {_paint('●', BLACK_PEG, color)} = Black  {_paint('○', WHITE_PEG, color)} = White"


def describe_colors(allowed_colors: str) -> str:
    """'rygbmc' -> 'r=Red, y=Yellow, ...'; unknown symbols are listed bare."""
    parts = []
    for ch in allowed_colors:
        name = COLOR_NAMES.get(ch)
        parts.append(f"{ch}={name}" if name else ch)
    return ", ".join(parts)


def render_feedback(game: Game, feedback: GuessFeedback, color: bool = True) -> str:
    markers = game.evaluate_positions(feedback.guess)
    lines = [
        f"{colorize_code(feedback.guess, color)}   {render_markers(markers, color)}",
        f"  -> Black: {feedback.exact}, White: {feedback.partial} (Attempt #{feedback.attempt_number})",
    ]
    return "\n".join(lines)


def result_label(game: Game) -> str:
    if game.is_won:
        return "WIN"
    if game.surrendered:
        return "SURRENDERED"
    if game.is_over:
        return "LOST"
    return "IN PROGRESS"


def render_summary(game: Game, color: bool = True) -> str:
    lines: List[str] = ["Game summary:"]
    for feedback in game.history:
        lines.append(render_feedback(game, feedback, color))
    if game.history:
        lines.append(legend(color))
    lines.append(f"Result: {result_label(game)}")
    return "\n".join(lines)
