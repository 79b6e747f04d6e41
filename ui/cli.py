# # Command-line interface (text-based play)

from game.board import Board
from game.peg import PALETTE, color_for_code
from game.ruleset import DEFAULT_RULES
from state.persistence import load_state, save_state

HELP = (
    "Type color codes to fill the active row (e.g. rgwb). "
    "'x N' clears column N, 'set N c' places one peg.\n"
    "'save [file]' stores, 'load file' resumes, 'new' restarts, 'exit' quits.\n"
)


def render(board: Board):
    """Print every row with its (red, white) feedback, marking the active row."""
    active = board.active_row
    for i in range(board.max_rows):
        marker = ">" if i == active else " "
        line = f"{marker} {i + 1:2d} | {board.row_string(i)} |"
        if board.is_row_full(i):
            red, white = board.test_row(i)
            line += f" red {red} white {white}"
        print(line)


def place_codes(board: Board, codes: str) -> bool:
    """
    Fill the active row left to right with the typed color codes, advancing
    to the next row whenever one is completed.

    Returns:
        bool: False if a code is not a usable color (nothing placed after it).
    """
    for code in codes:
        color = color_for_code(code, board.colors)
        if color is None:
            print(f"Invalid color '{code}'.")
            return False

        row = board.active_row
        if row is None:
            return True
        col = next(
            (j for j in range(board.slots) if board.peg_at(row, j) is None), None
        )
        if col is not None and board.set_peg(row, col, color):
            board.next_row_if_possible()
    return True


def is_won(board: Board) -> bool:
    return any(
        board.test_row(i)[0] == board.slots for i in range(board.max_rows)
    )


def is_over(board: Board) -> bool:
    return is_won(board) or board.active_row is None


def handle_command(board: Board, user_input: str):
    """
    Apply one line of input.

    Returns:
        Board | None: The board to continue with (a new one after 'new' or
        'load'), or None to quit.
    """
    parts = user_input.split()
    if not parts:
        return board
    command = parts[0].lower()

    if command == "exit":
        print("Exiting game.")
        return None
    elif command == "save":
        try:
            path = save_state(board, parts[1] if len(parts) > 1 else None)
            print(f"Game saved to {path}.")
        except OSError as e:
            print(f"Error writing save: {e}")
        return board
    elif command == "load":
        if len(parts) < 2:
            print("Usage: load <file>")
            return board
        try:
            board = load_state(parts[1])
            print("Game loaded.")
        except OSError as e:
            print(f"Error loading save: {e}")
        return board
    elif command == "new":
        return board.new_game()
    elif command in (DEFAULT_RULES["clear_key"], "set"):
        try:
            col = int(parts[1]) - 1
        except (IndexError, ValueError):
            print("Expected a column number.")
            return board
        row = board.active_row
        if row is None:
            return board
        if command == "set":
            color = color_for_code(parts[2], board.colors) if len(parts) > 2 else None
            if color is None or not board.set_peg(row, col, color):
                print("Cannot place that peg.")
            else:
                board.next_row_if_possible()
        elif not board.clear_peg(row, col):
            print("Cannot clear that slot.")
        return board

    place_codes(board, "".join(parts))
    return board


def gameloop(board=None, rng=None):
    print("=== Mastermind CLI ===")
    print(HELP)

    b = board or Board(rng=rng)

    while True:
        colors = ", ".join(f"{c.code}={c.name}" for c in PALETTE[: b.colors])
        print(f"\nAvailable colors: {colors}")
        render(b)

        if is_won(b):
            print("\nCongratulations, you cracked the code!")
            print(f"The secret code was: {b.solution_string()}")
            break
        elif is_over(b):
            print("\nNo more attempts left.")
            print(f"The secret code was: {b.solution_string()}")
            break

        b = handle_command(b, input("Enter your guess: ").strip())
        if b is None:
            break

    print("\n=== Game Over ===")
