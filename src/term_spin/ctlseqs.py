"""
..
   Control Sequences

   See https://invisible-island.net/xterm/ctlseqs/ctlseqs.html
"""

from __future__ import annotations

__all__ = []  # Updated later on

# Parameters
Ps = "%d"

_START = None  # Marks the beginning control sequence definitions

# C0
CR = "\r"
ESC = "\x1b"

# C1
CSI = f"{ESC}["

# Cursor Movement
CURSOR_UP = f"{CSI}{Ps}A"
CURSOR_DOWN = f"{CSI}{Ps}B"

# Erasing
ERASE_IN_LINE = f"{CSI}{Ps}K"

ERASE_LINE = ERASE_IN_LINE % 2

# DEC Modes
DECSET = f"{CSI}?{Ps}h"
DECRST = f"{CSI}?{Ps}l"

SHOW_CURSOR = DECSET % 25
HIDE_CURSOR = DECRST % 25


module_items = tuple(globals().items())
for name, value in module_items[module_items.index(("_START", None)) + 1 :]:
    globals()[f"{name}_b"] = value.encode()
    __all__.extend((name, f"{name}_b"))


__all__ += ("cursor_up", "erase_line")


def cursor_up(n: int = 1) -> str:
    """Returns the sequence moving the cursor up by *n* lines.

    An empty string is returned if *n* is zero, since ``CSI 0 A`` is interpreted by
    terminals as a one-line movement.
    """
    return CURSOR_UP % n if n > 0 else ""


def erase_line() -> str:
    """Returns the sequence erasing the entire line the cursor is on.

    The cursor position is not changed.
    """
    return ERASE_LINE


del _START, module_items
