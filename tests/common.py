"""A virtual terminal screen for checking the effect of frame outputs"""

import re
from threading import Lock

from term_spin.ctlseqs import CSI

_CSI_RE = re.compile(re.escape(CSI) + r"(\??)(\d*)([A-Za-z])")


class VirtualScreen:
    """Interprets the subset of control sequences written by frames and loops.

    Also usable as a text stream. A newline moves the cursor to the start of the
    next row, as a terminal with output post-processing does.
    """

    def __init__(self):
        self.rows = [[]]
        self.row = self.col = 0
        self.writes = []
        self._lock = Lock()

    def flush(self):
        pass

    def isatty(self):
        return False

    def write(self, data):
        with self._lock:
            self.writes.append(data)
            self._interpret(data)
        return len(data)

    @property
    def cursor(self):
        return (self.row, self.col)

    @property
    def lines(self):
        """The content of every row, without trailing blank rows"""
        with self._lock:
            lines = ["".join(row).rstrip() for row in self.rows]
        while lines and not lines[-1]:
            lines.pop()
        return lines

    def _interpret(self, data):
        i = 0
        while i < len(data):
            char = data[i]
            if char == "\n":
                self.row += 1
                self.col = 0
                self._ensure_row()
            elif char == "\r":
                self.col = 0
            elif char == "\x1b":
                match = _CSI_RE.match(data, i)
                if not match:
                    raise ValueError(f"Unsupported escape sequence at {data[i:]!r}")
                private, param, final = match.groups()
                if not private:
                    self._control(int(param) if param else None, final)
                i = match.end()
                continue
            else:
                row = self.rows[self.row]
                if self.col >= len(row):
                    row.extend(" " * (self.col - len(row)))
                    row.append(char)
                else:
                    row[self.col] = char
                self.col += 1
            i += 1

    def _control(self, param, final):
        if final == "A":
            self.row = max(0, self.row - (param or 1))
        elif final == "B":
            self.row += param or 1
            self._ensure_row()
        elif final == "K":
            row = self.rows[self.row]
            if param == 2:
                row.clear()
            elif not param:
                del row[self.col :]
            else:
                del row[: self.col + 1]
                row[:0] = " " * (self.col + 1)
        else:
            raise ValueError(f"Unsupported control function {final!r}")

    def _ensure_row(self):
        while len(self.rows) <= self.row:
            self.rows.append([])
