"""
Labels for clarity.
"""

from typing import List, Literal

Code = str  # secret or normalized guess, e.g. "rygb"
Marker = Literal["B", "W", "N"]
GameStatus = Literal["in_progress", "won", "surrendered", "exhausted"]
RandomSource = Literal["local", "random.org"]

# Per-position markers
EXACT: Marker = "B"  # black peg: right color, right place
PARTIAL: Marker = "W"  # white peg: right color, wrong place
NO_MATCH: Marker = "N"

Markers = List[Marker]
