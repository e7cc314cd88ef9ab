from __future__ import annotations

from ..tree import Form, is_mapping, padded_args
from ..types import EmitContext, EmitFunc, MalformedForm
from .collections import hash_set_call, set_map_values
from .common import check_identifier

def emit_var(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    name, expr = padded_args(node, 2)
    name_text = check_identifier(emit_func(name, ctx), rule='var')

    if is_mapping(expr):
        return set_map_values(name, expr, ctx, emit_func)

    return name_text + "=" + emit_func(expr, ctx)

def emit_defvar(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    name, expr = padded_args(node, 2)
    return emit_func(name, ctx) + "=" + emit_func(expr, ctx)

def emit_set(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    name, value = padded_args(node, 2)
    return check_identifier(emit_func(name, ctx), rule='set!') + "=" + emit_func(value, ctx)

def emit_local(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    name, expr = padded_args(node, 2)
    return "local " + emit_func(name, ctx) + "=" + emit_func(expr, ctx)

def emit_let(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    name, expr = padded_args(node, 2)
    return "let " + emit_func(name, ctx) + "=" + emit_func(expr, ctx)

def emit_alias(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    name, expr = padded_args(node, 2)
    return "alias " + emit_func(name, ctx) + "='" + emit_func(expr, ctx) + "'"

def emit_merge(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    name, expr = padded_args(node, 2)

    if not is_mapping(expr):
        raise MalformedForm("merge! needs a mapping", form=node, rule='merge!')

    return set_map_values(name, expr, ctx, emit_func)

def emit_assoc(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    name, key, value = padded_args(node, 3)
    check_identifier(emit_func(name, ctx), rule='assoc!')
    return hash_set_call(name, key, value, ctx, emit_func)

def emit_aset(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    name, idx, value = padded_args(node, 3)
    return emit_func(name, ctx) + "[" + emit_func(idx, ctx) + "]=" + emit_func(value, ctx)
