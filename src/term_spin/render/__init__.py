"""
.. The Render Loop API
"""

from __future__ import annotations

__all__ = ("Loop",)

from ._loop import Loop
