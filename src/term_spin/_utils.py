"""
.. Internal utilities
"""

from __future__ import annotations

__all__ = (
    "arg_type_error",
    "arg_type_error_msg",
    "arg_value_error_msg",
    "arg_value_error_range",
)

from typing_extensions import Any


def arg_type_error(arg: str, value: Any, got_extra: str = "") -> TypeError:
    return arg_type_error_msg(f"Invalid type for {arg!r}", value, got_extra)


def arg_type_error_msg(msg: str, value: Any, got_extra: str = "") -> TypeError:
    return TypeError(f"{msg} {_got(type(value).__qualname__, got_extra)}")


def arg_value_error_msg(msg: str, value: Any, got_extra: str = "") -> ValueError:
    return ValueError(f"{msg} {_got(repr(value), got_extra)}")


def arg_value_error_range(arg: str, value: Any, got_extra: str = "") -> ValueError:
    return ValueError(f"{arg!r} is out of range {_got(repr(value), got_extra)}")


def _got(got: str, extra: str) -> str:
    return f"(got: {got}; {extra})" if extra else f"(got: {got})"
