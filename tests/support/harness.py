from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import pytest

BASE_DIR = Path(__file__).resolve().parent.parent.parent
SRC_DIR = (BASE_DIR / "src").resolve()

if str(BASE_DIR) not in sys.path:
    sys.path.append(str(BASE_DIR))
if str(SRC_DIR) not in sys.path:
    sys.path.append(str(SRC_DIR))

from bashform.emitter import emit, emit_function, emit_script
from bashform.reader import ReadError, read, read_all
from bashform.tree import Form, Keyword, SourceLocation, Symbol, form, kw, sym
from bashform.types import (
    ArityError,
    EmitContext,
    EmitError,
    InvalidIdentifier,
    MalformedForm,
    MalformedSignature,
)

__all__ = [
    "ArityError",
    "EmitContext",
    "EmitError",
    "Form",
    "InvalidIdentifier",
    "Keyword",
    "MalformedForm",
    "MalformedSignature",
    "ReadError",
    "SourceLocation",
    "Symbol",
    "emit",
    "emit_function",
    "emit_script",
    "emit_source",
    "form",
    "kw",
    "read",
    "read_all",
    "run_emit_case",
    "sym",
]


def emit_source(source: str, ctx: Optional[EmitContext] = None) -> str:
    """Read one expression and emit it as bash."""
    return emit(read(source), ctx)


def run_emit_case(
    source: str,
    expected: Optional[str],
    expected_exc: Optional[type],
) -> None:
    """Emit one scenario, comparing text or expecting an exception."""
    if expected_exc is not None:
        with pytest.raises(expected_exc):
            emit_source(source)
        return

    rendered = emit_source(source)
    assert rendered == expected, f"expected {expected!r}, got {rendered!r}"
