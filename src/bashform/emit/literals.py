from __future__ import annotations

import struct
from fractions import Fraction
from typing import Any, Callable, Dict

from ..tree import Keyword, Symbol
from ..types import MalformedForm

def emit_null(_: Any) -> str:
    # bash has no null literal; kept for compatibility with existing scripts
    return "null"

def emit_bool(value: bool) -> str:
    return "true" if value else "false"

def emit_number(value: int | float) -> str:
    return str(value)

def _to_single(value: float) -> float:
    return struct.unpack('f', struct.pack('f', value))[0]

def emit_ratio(value: Fraction) -> str:
    # single precision, printed with the fewest digits that read back the same
    single = _to_single(float(value))

    for digits in range(1, 10):
        text = f"{single:.{digits}g}"
        if _to_single(float(text)) == single:
            return repr(float(text))

    return repr(single)

def emit_keyword(value: Keyword) -> str:
    return value.name

def emit_symbol(value: Symbol) -> str:
    return value.name

def emit_text(value: str) -> str:
    # quoting is decided by the enclosing form
    return value

# bool before int, Symbol/Keyword before str
_LITERAL_DISPATCH: Dict[type, Callable[[Any], str]] = {
    type(None): emit_null,
    bool: emit_bool,
    Keyword: emit_keyword,
    Symbol: emit_symbol,
    int: emit_number,
    float: emit_number,
    Fraction: emit_ratio,
    str: emit_text,
}

def emit_literal(value: Any) -> str:
    handler = _LITERAL_DISPATCH.get(type(value))
    if handler is not None:
        return handler(value)

    for kind, fn in _LITERAL_DISPATCH.items():
        if isinstance(value, kind):
            return fn(value)

    raise MalformedForm(f"Cannot emit value of type {type(value).__name__}")
