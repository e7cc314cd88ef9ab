"""Object-style call sugar. Not native bash; kept so forms written against the
generic object notation still emit something predictable."""
from __future__ import annotations

from typing import Any, Sequence

from ..tree import Form, Symbol, head_name, padded_args
from ..types import EmitContext, EmitFunc
from .common import comma_list

def emit_method(obj: Any, method: Any, args: Sequence[Any], ctx: EmitContext, emit_func: EmitFunc) -> str:
    return emit_func(obj, ctx) + "." + emit_func(method, ctx) + comma_list(emit_func(a, ctx) for a in args)

def emit_dot_method(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    head = node.head

    # (.push obj x) carries the method in the head
    if head_name(node) != 'dot-method':
        obj, = padded_args(node, 1)
        return emit_method(obj, Symbol(head[1:]), node.args[1:], ctx, emit_func)

    obj, method = padded_args(node, 2)
    return emit_method(obj, method, node.args[2:], ctx, emit_func)

def emit_new(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    cls, = padded_args(node, 1)
    return "new " + emit_func(cls, ctx) + comma_list(emit_func(a, ctx) for a in node.args[1:])
