# SPDX-License-Identifier: MIT

"""Per-invocation display switches, set from the command line or config."""

from contextvars import ContextVar

_show_header: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    _show_header.set(value)


def get_show_header() -> bool:
    """Whether reports start with the application header."""
    return _show_header.get()
