"""Parameter expansion and command substitution: `${...}`, `$(...)`."""
from __future__ import annotations

from typing import Any, Dict, List, Tuple

from ..tree import Form, is_form, padded_args
from ..types import EmitContext, EmitFunc, MalformedForm
from .common import munge

# checked in this order; the first option present wins
DEREF_OPTIONS: Tuple[Tuple[str, str], ...] = (
    ('default', '-'),
    ('default-value', ':-'),
    ('default-assign', '='),
    ('default-assign-value', ':='),
    ('alternate', '+'),
    ('alternate-value', ':+'),
    ('error', '?'),
    ('error-value', ':?'),
)

def _deref_options(node: Form) -> Dict[str, Any]:
    raw = node.args[1:]

    if len(raw) % 2:
        raise MalformedForm("deref options must be key/value pairs", form=node, rule='deref')

    opts: Dict[str, Any] = {}

    for key, value in zip(raw[0::2], raw[1::2]):
        opts[str(key)] = value

    return opts

def emit_deref(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    expr, = padded_args(node, 1)
    opts = _deref_options(node)
    inner = ctx.replace(source_comments=False)

    if is_form(expr):
        return "$(" + emit_func(expr, inner) + ")"

    parts: List[str] = ["${", emit_func(expr, inner)]

    for option, marker in DEREF_OPTIONS:
        if option in opts:
            parts.append(marker + emit_func(opts[option], inner))
            break

    parts.append("}")
    return "".join(parts)

def emit_get(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    name, idx = padded_args(node, 2)
    return f"$(hash_echo {munge(emit_func(name, ctx))} {munge(emit_func(idx, ctx))} -n)"

def emit_aget(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    name, idx = padded_args(node, 2)
    return "${" + emit_func(name, ctx) + "[" + emit_func(idx, ctx) + "]}"
