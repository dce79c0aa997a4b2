"""
term-spin

Multi-line terminal spinners driven by ANSI escape sequences
"""

from __future__ import annotations

__all__ = (
    "DEFAULT_INTERVAL",
    "get_default_interval",
    "set_default_interval",
)

from math import isfinite

from ._utils import arg_type_error, arg_value_error_range

version_info = (0, 3, 0)

# Follows https://semver.org/spec/v2.0.0.html
__version__ = ".".join(map(str, version_info[:3]))
if version_info[3:]:
    __version__ += "-" + ".".join(map(str, version_info[3:]))

#: Default tick interval of render loops, in seconds
#:
#: See also: :py:func:`set_default_interval`
DEFAULT_INTERVAL: float = 0.1  # Final[float]


def get_default_interval() -> float:
    """Returns the tick interval used by render loops created without one.

    See :py:func:`set_default_interval`.
    """
    return _default_interval


def set_default_interval(interval: float) -> None:
    """Sets the tick interval used by render loops created without one.

    Args:
        interval: Time between two consecutive renders, in seconds.

    Raises:
        TypeError: *interval* is not a float.
        ValueError: *interval* is not a finite number greater than zero.

    NOTE:
        This does not affect existing loops. See
        :py:attr:`Loop.interval <term_spin.render.Loop.interval>`.
    """
    global _default_interval

    if not isinstance(interval, float):
        raise arg_type_error("interval", interval)
    if not isfinite(interval) or interval <= 0.0:
        raise arg_value_error_range("interval", interval)

    _default_interval = interval


_default_interval = DEFAULT_INTERVAL
