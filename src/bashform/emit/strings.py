from __future__ import annotations

from ..tree import Form
from ..types import EmitContext, EmitFunc
from .common import quoted_string

def emit_str(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    return "".join(emit_func(arg, ctx) for arg in node.args)

def emit_quoted(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    return quoted_string(" ".join(emit_func(arg, ctx) for arg in node.args))

def emit_println(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    return "echo " + " ".join(emit_func(arg, ctx) for arg in node.args)

def emit_print(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    return "echo -n " + " ".join(emit_func(arg, ctx) for arg in node.args)
