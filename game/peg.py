from __future__ import annotations

import numbers
import random
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PegColor:
    """
        A symbolic peg color from the fixed palette.
    Attributes:
        ordinal (int): Position in the palette (0-based).
        name (str): Human-readable name.
        code (str): Single character used for text input/output."""

    ordinal: int
    name: str
    code: str

    def __str__(self):
        return self.code


# Canonical order. Wire codes are ordinal + 1.
PALETTE = (
    PegColor(0, "red", "r"),
    PegColor(1, "aqua", "a"),
    PegColor(2, "green", "g"),
    PegColor(3, "white", "w"),
    PegColor(4, "brown", "b"),
    PegColor(5, "yellow", "y"),
    PegColor(6, "purple", "p"),
    PegColor(7, "orange", "o"),
)

N_MAX = len(PALETTE)

RED, AQUA, GREEN, WHITE, BROWN, YELLOW, PURPLE, ORANGE = PALETTE

# Wire code for an empty slot
EMPTY = 0


def color_for_code(code: str, available: int) -> Optional[PegColor]:
    """
    Look up a color by its single-character code among the first
    `available` palette entries.

    Args:
        code (str): The character typed by the player (case-sensitive).
        available (int): How many palette entries are in play.
    Returns:
        PegColor | None: The matching color, or None.
    """
    if not isinstance(code, str) or len(code) != 1:
        return None
    for color in PALETTE[: max(0, available)]:
        if color.code == code:
            return color
    return None


def random_color(available: int, rng: random.Random | None = None) -> PegColor:
    """
    Pick a color uniformly from the first min(available, N_MAX) entries.

    Args:
        available (int): How many palette entries are in play.
        rng (random.Random, optional): Source of randomness. Defaults to the
        module-level generator.
    Returns:
        PegColor: The chosen color.
    """
    rng = rng or random
    count = min(max(available, 1), N_MAX)
    return PALETTE[rng.randrange(count)]


def to_code(color: PegColor) -> int:
    """Return the wire code (1..N_MAX) for a color."""
    return color.ordinal + 1


def from_code(value) -> Optional[PegColor]:
    """
    Return the color for a wire code, or None for 0 and any malformed value.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        return None
    if 1 <= value <= N_MAX:
        return PALETTE[int(value) - 1]
    return None
