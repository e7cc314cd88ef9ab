from __future__ import annotations

from typing import Any, Iterable, List

from ..tree import is_form, node_meta
from ..types import EmitContext, EmitFunc, InvalidIdentifier

STATEMENT_SEPARATOR = "\n"

_MUNGE_TABLE = (
    ("-", "__"),
    (".", "_DOT_"),
    ("/", "_SLASH_"),
)

def quoted_string(s: str) -> str:
    return f'"{s}"'

def munge(name: str) -> str:
    """Make rendered text usable as a fragment of a bash identifier."""
    for old, new in _MUNGE_TABLE:
        name = name.replace(old, new)

    return name

def check_identifier(name: str, rule: str | None = None) -> str:
    if "-" in name:
        raise InvalidIdentifier(name, rule=rule)

    return name

def statement(text: str) -> str:
    if text.endswith(STATEMENT_SEPARATOR):
        return text

    return text + STATEMENT_SEPARATOR

def source_comment(node: Any, ctx: EmitContext) -> str:
    if not ctx.source_comments or not is_form(node):
        return ""

    meta = node_meta(node)
    if meta is None:
        return ""

    return f" # {meta}"

def emit_do(exprs: Iterable[Any], ctx: EmitContext, emit_func: EmitFunc) -> str:
    """Emit each expression as its own newline-terminated statement."""
    parts: List[str] = []

    for expr in exprs:
        text = emit_func(expr, ctx)
        if not text:
            continue

        comment = source_comment(expr, ctx)
        if comment:
            text = text.rstrip(STATEMENT_SEPARATOR) + comment

        parts.append(statement(text))

    return "".join(parts)

def chain_with(op: str, parts: Iterable[str]) -> str:
    return f" {op} ".join(p for p in parts if p.strip())

def comma_list(items: Iterable[str]) -> str:
    """Render items as a parenthesised, comma separated list: `(a, b, c)`."""
    return "(" + ", ".join(items) + ")"
