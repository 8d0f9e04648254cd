# ANSI Colors
CYAN = "\033[96m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
RESET = "\033[0m"

# Cursor control
CLEAR_SCREEN = "\033[1;1H\033[2J"
ERASE_BELOW = "\033[J"


def cursor_up(lines):
    return f"\033[{lines}A"
