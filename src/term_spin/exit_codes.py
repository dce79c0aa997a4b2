"""Exit codes of the demo CLI"""

from __future__ import annotations

codes = {
    0: "SUCCESS",
    1: "FAILURE",
    2: "INVALID_ARG",
    3: "INTERRUPTED",
}

globals().update((v, k) for k, v in codes.items())
