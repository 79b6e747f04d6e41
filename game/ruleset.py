# Configuration: board dimensions, bounds, save location, etc.
DEFAULT_RULES = {
    "name": "classic",  # Identifier for this ruleset
    "slots": 4,  # Number of pegs per row
    "colors": 6,  # Usable colors (first entries of the palette)
    "max_rows": 8,  # Number of guess rows per game
    "bounds": {
        "slots": (2, 10),
        "colors": (2, 8),  # Upper bound is the palette size
        "max_rows": (2, 20),
    },
    "clear_key": "x",  # Removes a peg in text play (never a color code)
    "empty_symbol": "-",  # Printed for an empty slot
    "save": {
        "directory": "gamedata",
        "prefix": "mastermind_",
    },
}


def clamp(value: int, key: str, rules=None) -> int:
    """
    Clamp a board dimension to the bounds declared in the rules.

    Args:
        value (int): The requested value.
        key (str): One of "slots", "colors", "max_rows".
        rules (dict, optional): The ruleset. Defaults to DEFAULT_RULES.
    Returns:
        int: The value truncated to [low, high].
    """
    low, high = (rules or DEFAULT_RULES)["bounds"][key]
    return min(max(int(value), low), high)
