"""Terminal colour helpers used in crawler messages."""

_RED = "\x1b[31m"
_RESET = "\x1b[0m"


def formatted_error_text() -> str:
    """Return the word 'Error' coloured red for terminal output."""
    return f"{_RED}Error{_RESET}"