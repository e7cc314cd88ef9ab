"""Reader for the canonical s-expression notation.

Not used by the emitter itself; it turns script text such as

    (pipe (cat "/etc/passwd") (grep nobody) (wc -c))

into the expression tree `emit` consumes, expanding `@name` into
`(deref name)` on the way.
"""
from __future__ import annotations

import re
from fractions import Fraction
from functools import lru_cache
from typing import Any, List, Optional

from lark import Lark, Token, Transformer, UnexpectedInput, v_args
from lark.exceptions import VisitError

from .tree import Form, Keyword, SourceLocation, Symbol

GRAMMAR = r"""
start: item*

?item: form
     | vector
     | map
     | deref
     | atom

form: "(" item* ")"
vector: "[" item* "]"
map: "{" item* "}"
deref: "@" item

?atom: STRING
     | RATIO
     | FLOAT
     | INT
     | KEYWORD
     | SYMBOL

STRING: /"(\\.|[^"\\])*"/s
RATIO.4: /-?\d+\/\d+/
FLOAT.3: /-?\d+\.\d+([eE][-+]?\d+)?/
INT.2: /-?\d+/
KEYWORD.2: /:[^\s()\[\]{}";,@]+/
SYMBOL: /[^\s()\[\]{}";,@:][^\s()\[\]{}";,]*/

COMMENT: /;[^\n]*/
%ignore COMMENT
%ignore /[\s,]+/
"""

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "0": "\0"}
_ESCAPE_RE = re.compile(r"\\(.)", re.S)

_NAMED_ATOMS = {"nil": None, "true": True, "false": False}

class ReadError(ValueError):
    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        msg = super().__str__()

        if self.line is None:
            return msg

        return f"{msg} (line {self.line}, col {self.column})"

@lru_cache(maxsize=None)
def make_parser() -> Lark:
    return Lark(GRAMMAR, parser="lalr", propagate_positions=True)

def _unescape(raw: str) -> str:
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), raw)

class ToExpr(Transformer):
    """Lower the lark parse tree into emitter nodes."""

    def __init__(self, file: Optional[str] = None, track_locations: bool = False):
        super().__init__()
        self.file = file
        self.track_locations = track_locations

    def _location(self, meta: Any) -> Optional[SourceLocation]:
        if not self.track_locations or getattr(meta, "empty", True):
            return None

        return SourceLocation(line=meta.line, file=self.file, column=meta.column)

    def start(self, children: List[Any]) -> List[Any]:
        return list(children)

    @v_args(meta=True)
    def form(self, meta: Any, children: List[Any]) -> Form:
        return Form(children, meta=self._location(meta))

    def vector(self, children: List[Any]) -> List[Any]:
        return list(children)

    def map(self, children: List[Any]) -> dict:
        if len(children) % 2:
            raise ReadError("map literal needs an even number of items")

        return dict(zip(children[0::2], children[1::2]))

    @v_args(meta=True)
    def deref(self, meta: Any, children: List[Any]) -> Form:
        return Form((Symbol("deref"), children[0]), meta=self._location(meta))

    def STRING(self, tok: Token) -> str:
        return _unescape(tok.value[1:-1])

    def RATIO(self, tok: Token) -> Fraction | int:
        value = Fraction(tok.value)
        return int(value) if value.denominator == 1 else value

    def FLOAT(self, tok: Token) -> float:
        return float(tok.value)

    def INT(self, tok: Token) -> int:
        return int(tok.value)

    def KEYWORD(self, tok: Token) -> Keyword:
        return Keyword(tok.value[1:])

    def SYMBOL(self, tok: Token) -> Any:
        if tok.value in _NAMED_ATOMS:
            return _NAMED_ATOMS[tok.value]

        return Symbol(tok.value)

def read_all(src: str, file: Optional[str] = None, track_locations: bool = False) -> List[Any]:
    """Read every top-level expression in `src`."""
    try:
        tree = make_parser().parse(src)
    except UnexpectedInput as exc:
        summary = str(exc).strip().splitlines()[0]
        raise ReadError(summary, getattr(exc, "line", None), getattr(exc, "column", None)) from exc

    try:
        return ToExpr(file=file, track_locations=track_locations).transform(tree)
    except VisitError as exc:
        if isinstance(exc.orig_exc, ReadError):
            raise exc.orig_exc from None
        raise

def read(src: str, file: Optional[str] = None, track_locations: bool = False) -> Any:
    """Read exactly one expression."""
    exprs = read_all(src, file=file, track_locations=track_locations)

    if len(exprs) != 1:
        raise ReadError(f"Expected one expression; got {len(exprs)}")

    return exprs[0]
