"""
.. The Frame API
"""

from __future__ import annotations

__all__ = ("Frame", "FrameT", "Group", "Line", "INDENT")

from ._frame import INDENT, Frame, FrameT
from ._group import Group
from ._line import Line
