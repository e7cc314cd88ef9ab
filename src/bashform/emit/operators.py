from __future__ import annotations

from typing import Any, Callable, Dict, FrozenSet, Sequence, Tuple

from ..tree import Form
from ..types import ArityError, EmitContext, EmitFunc
from .common import quoted_string

# ---------------- Operator classes ----------------

INFIX_OPERATORS: FrozenSet[str] = frozenset({
    '+', '-', '/', '*', '%', '==', '=', '<', '>', '<=', '>=', '!=',
    '<<', '>>', '<<<', '>>>', '&', '|', '&&', '||', 'and', 'or',
})

ARITHMETIC_OPERATORS: FrozenSet[str] = frozenset({'+', '-', '/', '*', '%'})

FILE_PREDICATES: Dict[str, str] = {
    'file-exists?': '-e',
    'directory?': '-d',
    'symlink?': '-h',
    'readable?': '-r',
    'writeable?': '-w',
    'empty?': '-z',
}

LOGICAL_OPERATORS: FrozenSet[str] = frozenset({
    '==', '=', '<', '>', '<=', '>=', '!=', '<<', '>>', '<<<', '>>>', '&', '|',
}) | frozenset(FILE_PREDICATES)

QUOTED_OPERATORS: FrozenSet[str] = LOGICAL_OPERATORS - frozenset(FILE_PREDICATES)

INFIX_CONVERSIONS: Dict[str, str] = {
    '&&': '&&',
    'and': '&&',
    '||': '||',
    'or': '||',
    '<': '-lt',
    '>': '-gt',
    '<=': '-le',
    '>=': '-ge',
    '=': '==',
}

# rendered operands starting with one of these are never re-quoted
SUBEXPR_PREFIXES: Tuple[str, ...] = ('\\(', '!', '-', '@')

def is_infix_operator(op: Any) -> bool:
    return isinstance(op, str) and str(op) in INFIX_OPERATORS

def is_logical_operator(op: Any) -> bool:
    return isinstance(op, str) and str(op) in LOGICAL_OPERATORS

def is_arithmetic_operator(op: Any) -> bool:
    return isinstance(op, str) and str(op) in ARITHMETIC_OPERATORS

def is_quoted_operator(op: Any) -> bool:
    return isinstance(op, str) and str(op) in QUOTED_OPERATORS

def delimiters_for(op: str) -> Tuple[str, str]:
    if is_logical_operator(op):
        return "[ ", " ]"

    if is_arithmetic_operator(op):
        return "(", ")"

    return "", ""

def emit_quoted_if_not_subexpr(quote: Callable[[str], str], expr: Any, ctx: EmitContext, emit_func: EmitFunc) -> str:
    s = emit_func(expr, ctx)

    if s.startswith(SUBEXPR_PREFIXES):
        return s

    return quote(s)

def emit_infix(op: str, args: Sequence[Any], ctx: EmitContext, emit_func: EmitFunc) -> str:
    """Two-operand infix: `[ "a" -lt "b" ]`, `(a + b)`, `a && b`."""
    if len(args) < 2:
        raise ArityError(f"Infix operator {op} needs 2 arguments; got {len(args)}", rule=str(op))

    open_, close = delimiters_for(op)
    quote: Callable[[str], str] = quoted_string if is_quoted_operator(op) else (lambda s: s)

    lhs = emit_quoted_if_not_subexpr(quote, args[0], ctx, emit_func)
    rhs = emit_quoted_if_not_subexpr(quote, args[1], ctx, emit_func)
    return f"{open_}{lhs} {INFIX_CONVERSIONS.get(str(op), op)} {rhs}{close}"

def emit_file_predicate(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    flag = FILE_PREDICATES[node.head.name]
    path = node.args[0] if node.args else None
    return f"[ {flag} {emit_func(path, ctx)} ]"

def emit_not(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    expr = node.args[0] if node.args else None
    return f"! {{ {emit_func(expr, ctx)}; }}"
