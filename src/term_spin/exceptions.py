"""
.. Custom Exceptions
"""

from __future__ import annotations


class TermSpinError(Exception):
    """Exception baseclass. Raised for generic errors."""


class SpinnerError(TermSpinError, ValueError):
    """Raised for invalid spinner configurations, such as a spinner with no glyphs."""


class GroupIndexError(TermSpinError, IndexError):
    """Raised when inserting into a :py:class:`~term_spin.frame.Group` at a position
    beyond its number of children.
    """
