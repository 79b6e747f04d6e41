from __future__ import annotations

import random
from typing import Optional, Sequence

from .peg import PegColor, random_color, to_code
from .row import Row
from .ruleset import DEFAULT_RULES, clamp
from state.codec import squeeze, unsqueeze

# slots, colors, max_rows
HEADER_SIZE = 3


class Board:
    """Game board: owns the hidden solution, the guess rows and which row is active.

    Save image layout:

        1 byte:  slots
        1 byte:  colors
        1 byte:  max_rows
        squeeze(solution codes + row codes), ceil(slots * (1 + max_rows) / 2) bytes
    """

    def __init__(
        self,
        slots: int = DEFAULT_RULES["slots"],
        colors: int = DEFAULT_RULES["colors"],
        max_rows: int = DEFAULT_RULES["max_rows"],
        solution_pegs: Optional[Sequence[int]] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Create a board. Dimensions are clamped to the ruleset bounds.

        Args:
            slots (int): Pegs per row.
            colors (int): Number of usable palette entries.
            max_rows (int): Number of guess rows.
            solution_pegs (Sequence[int], optional): Wire codes of the
            solution. A random solution is drawn when omitted.
            rng (random.Random, optional): Source for the random solution.
        """
        self.slots = clamp(slots, "slots")
        self.colors = clamp(colors, "colors")
        self.max_rows = clamp(max_rows, "max_rows")

        if solution_pegs is None:
            solution_pegs = random_solution(self.slots, self.colors, rng)
        self.solution = Row(solution_pegs, self.slots)

        # All rows start empty and locked; only the first accepts pegs
        self.rows = [Row(None, self.slots) for _ in range(self.max_rows)]
        self.rows[0].toggle_editable()

    def new_game(self, rng: Optional[random.Random] = None) -> Board:
        """Return a fresh board with the same dimensions and a new solution."""
        return Board(self.slots, self.colors, self.max_rows, rng=rng)

    def _get_row(self, i: int) -> Optional[Row]:
        if 0 <= i < self.max_rows:
            return self.rows[i]
        return None

    def peg_at(self, i: int, j: int) -> Optional[PegColor]:
        """Return the peg at row i, column j, or None if empty or out of range."""
        row = self._get_row(i)
        return row.at(j) if row is not None else None

    def set_peg(self, i: int, j: int, color: PegColor) -> bool:
        """Place a peg; fails on a bad coordinate or a locked row."""
        row = self._get_row(i)
        return row.set_peg(j, color) if row is not None else False

    def clear_peg(self, i: int, j: int) -> bool:
        """Remove a peg; fails on a bad coordinate or a locked row."""
        row = self._get_row(i)
        return row.clear_peg(j) if row is not None else False

    def is_row_full(self, i: int) -> bool:
        row = self._get_row(i)
        return row.is_full() if row is not None else False

    def is_row_editable(self, i: int) -> bool:
        row = self._get_row(i)
        return row.editable if row is not None else False

    @property
    def active_row(self) -> Optional[int]:
        """Index of the row currently accepting pegs, or None."""
        for i, row in enumerate(self.rows):
            if row.editable:
                return i
        return None

    def test_row(self, i: int) -> tuple[int, int]:
        """
        Compute feedback for a guess row.

        Args:
            i (int): Row index.
        Returns:
            tuple[int, int]: (red, white_only). red counts pegs with the
            right color in the right position, white_only those with the
            right color in the wrong position. (0, 0) when the row does not
            exist or is not full.
        """
        row = self._get_row(i)
        if row is None or not row.is_full() or not self.solution.is_full():
            return (0, 0)

        red = self.solution.red_count(row)
        white = self.solution.white_count(row)
        return (red, white - red)

    def set_solution(self, solution_pegs: Sequence[int]) -> bool:
        """
        Replace the solution. Rejected, leaving the old one, unless every
        slot of the candidate holds a valid color.
        """
        candidate = Row(solution_pegs, self.slots)
        if not candidate.is_full():
            return False
        self.solution = candidate
        return True

    def next_row_if_possible(self):
        """
        Lock the active row once it is full and unlock the one after it.

        Advances by at most one row. Completing the last row leaves no row
        active.
        """
        found = False
        for row in self.rows:
            if row.editable and row.is_full():
                row.toggle_editable()
                found = True
            elif found:
                row.toggle_editable()
                return

    def _derive_editability(self):
        # First incomplete row is active, everything else locked
        active_found = False
        for row in self.rows:
            row.set_editable(False)
            if not active_found and not row.is_full():
                row.set_editable(True)
                active_found = True

    def to_byte_list(self) -> bytes:
        """Return the save image of this board."""
        peg_data = list(self.solution.to_codes())
        for row in self.rows:
            peg_data.extend(row.to_codes())

        return bytes([self.slots, self.colors, self.max_rows]) + squeeze(peg_data)

    @classmethod
    def from_byte_list(cls, data) -> Board:
        """
        Rebuild a board from a save image.

        Malformed peg codes and missing peg data become empty slots; missing
        header bytes fall back to the default rules.

        Args:
            data (bytes): The save image.
        Returns:
            Board: The restored board, with the first incomplete row active.
        """
        data = bytes(data)
        defaults = (
            DEFAULT_RULES["slots"],
            DEFAULT_RULES["colors"],
            DEFAULT_RULES["max_rows"],
        )
        header = [
            data[k] if k < len(data) else defaults[k] for k in range(HEADER_SIZE)
        ]
        slots = clamp(header[0], "slots")
        colors = clamp(header[1], "colors")
        max_rows = clamp(header[2], "max_rows")

        peg_data = unsqueeze(data[HEADER_SIZE:])

        board = cls(slots, colors, max_rows, solution_pegs=peg_data[:slots])
        for i in range(max_rows):
            start = slots * (i + 1)
            board.rows[i] = Row(peg_data[start : start + slots], slots)

        board._derive_editability()
        return board

    def row_string(self, i: int) -> str:
        row = self._get_row(i)
        return str(row) if row is not None else ""

    def solution_string(self) -> str:
        """Return the solution as color codes (used at the end of the game)."""
        return str(self.solution)

    def __str__(self):
        return "\n".join(str(row) for row in self.rows)


def random_solution(
    slots: int, colors: int, rng: Optional[random.Random] = None
) -> list[int]:
    """
    Draw a random solution.

    Args:
        slots (int): Row width.
        colors (int): Number of usable palette entries.
        rng (random.Random, optional): Source of randomness.
    Returns:
        list[int]: Wire codes, one per slot.
    """
    return [to_code(random_color(colors, rng)) for _ in range(slots)]
