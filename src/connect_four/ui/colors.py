from __future__ import annotations

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"  # swaps fg/bg; good generic highlight

FG_RED = "\033[31m"
FG_GREEN = "\033[32m"
FG_YELLOW = "\033[33m"
FG_BLUE = "\033[34m"
FG_MAGENTA = "\033[35m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

BY_NAME = {
    "red": FG_RED,
    "green": FG_GREEN,
    "yellow": FG_YELLOW,
    "blue": FG_BLUE,
    "magenta": FG_MAGENTA,
    "cyan": FG_CYAN,
}


def code_for(name: object) -> str:
    """Escape code for a colour name; unknown names render uncoloured."""
    return BY_NAME.get(str(name).lower(), "")


def c(s: str, code: str, enabled: bool = True) -> str:
    if not enabled or not code:
        return s
    return f"{code}{s}{RESET}"
