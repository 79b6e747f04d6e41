from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from .peg import EMPTY, N_MAX, PALETTE, PegColor, from_code, to_code
from .ruleset import DEFAULT_RULES


class Row:
    """
        A fixed-width row of peg slots, used for the solution and for guesses.
    Attributes:
        slots (int): Number of slots; never changes after construction.
        editable (bool): Whether set_peg/clear_peg are accepted."""

    def __init__(self, codes: Iterable[int] | None, slots: int, editable=False):
        """
        Build a row from wire codes.

        Args:
            codes (Iterable[int] | None): Peg codes, 0 for empty. Missing or
            malformed codes become empty slots, extra codes are ignored.
            slots (int): The row width.
            editable (bool): Initial editability.
        """
        codes = list(codes if codes is not None else [])[:slots]
        codes += [EMPTY] * (slots - len(codes))

        self.slots = slots
        self.editable = editable
        self.pegs: list[Optional[PegColor]] = [from_code(c) for c in codes]

    def at(self, col: int) -> Optional[PegColor]:
        """Return the peg at `col`, or None if empty or out of range."""
        if 0 <= col < self.slots:
            return self.pegs[col]
        return None

    def set_peg(self, col: int, color: PegColor) -> bool:
        """
        Place a peg. Only succeeds on an editable row with `col` in range.

        Returns:
            bool: Whether the row changed.
        """
        if not (0 <= col < self.slots) or not self.editable:
            return False
        self.pegs[col] = color
        return True

    def clear_peg(self, col: int) -> bool:
        """Remove the peg at `col`; same guard as set_peg."""
        if not (0 <= col < self.slots) or not self.editable:
            return False
        self.pegs[col] = None
        return True

    def is_full(self) -> bool:
        return all(p is not None for p in self.pegs)

    def is_empty(self) -> bool:
        return all(p is None for p in self.pegs)

    def set_editable(self, editable: bool):
        self.editable = editable

    def toggle_editable(self):
        self.editable = not self.editable

    def color_counts(self) -> np.ndarray:
        """
        Count pegs per palette ordinal.

        Returns:
            np.ndarray: Vector of length N_MAX; entry i is the number of pegs
            whose color has ordinal i.
        """
        ordinals = [p.ordinal for p in self.pegs if p is not None]
        return np.bincount(np.asarray(ordinals, dtype=np.int64), minlength=N_MAX)

    def color_frequency(self) -> dict[PegColor, int]:
        """Return {color: count} for the colors present in this row."""
        counts = self.color_counts()
        return {PALETTE[i]: int(n) for i, n in enumerate(counts) if n}

    def red_count(self, other: Row) -> int:
        """
        Count positions where both rows hold the same color.

        Args:
            other (Row): The row to compare against (same width).
        Returns:
            int: Number of correct-color, correct-position pegs.
        """
        return sum(
            1
            for mine, theirs in zip(self.pegs, other.pegs)
            if mine is not None and mine == theirs
        )

    def white_count(self, other: Row) -> int:
        """
        Count color matches regardless of position, capped by the
        multiplicity in each row. Includes every red match.

        Args:
            other (Row): The row to compare against.
        Returns:
            int: Sum over colors of min(count in self, count in other).
        """
        return int(np.minimum(self.color_counts(), other.color_counts()).sum())

    def to_codes(self) -> list[int]:
        """Return the row as wire codes, 0 for an empty slot."""
        return [EMPTY if p is None else to_code(p) for p in self.pegs]

    def __len__(self):
        return self.slots

    def __eq__(self, other):
        if isinstance(other, Row):
            return self.pegs == other.pegs
        return NotImplemented

    def __str__(self):
        empty = DEFAULT_RULES["empty_symbol"]
        return "".join(empty if p is None else p.code for p in self.pegs)

    def __repr__(self):
        return f"Row({str(self)!r}, editable={self.editable})"
