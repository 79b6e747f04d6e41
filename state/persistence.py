# state/persistence.py
import random
from pathlib import Path

from game.board import Board
from game.ruleset import DEFAULT_RULES


def default_save_path(directory=None) -> Path:
    """
    Build a fresh save-file path like gamedata/mastermind_<random number>.
    Args:
        directory (str | Path, optional): Target directory. Defaults to the
        directory from the rules.
    Returns:
        Path: The file path (the file does not exist yet)."""
    directory = Path(directory or DEFAULT_RULES["save"]["directory"])
    name = f"{DEFAULT_RULES['save']['prefix']}{random.getrandbits(63)}"
    return directory / name


def save_state(board: Board, path=None) -> Path:
    """
    Save the board to disk as its binary save image.
    Args:
        board (Board): The board to save.
        path (str | Path, optional): The file path. A new path in the save
        directory is generated when omitted.
    Returns:
        Path: Where the board was written.
    """
    path = Path(path) if path else default_save_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        f.write(board.to_byte_list())
    return path


def load_state(path) -> Board:
    """
    Load a board from disk.
    Args:
        path (str | Path): The file path to load the board from.
    Returns:
        Board: The restored board."""
    path = Path(path)
    with open(path, "rb") as f:
        data = f.read()
    return Board.from_byte_list(data)
