"""Script value conventions shared by the builder and the interpreter."""

from __future__ import annotations

from typing import Any

from chaincss.model.style import StyleBlock


class _Undefined:
    """The script language's ``undefined`` value."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


def stringify(value: Any) -> str:
    """Render a script value the way it appears in CSS text."""
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if v is None or v is UNDEFINED else stringify(v) for v in value)
    if isinstance(value, (dict, StyleBlock)):
        return "[object Object]"
    return str(value)


def is_object(value: Any) -> bool:
    """True for values a script sees as objects (never contribute CSS text)."""
    return value is None or isinstance(value, (dict, list, tuple, StyleBlock))
