from __future__ import annotations

from typing import Any, List

from ..tree import Form, head_name, is_compound_form, is_sequence, padded_args
from ..types import EmitContext, EmitFunc, MalformedForm
from .common import chain_with, emit_do

def emit_body_for_if(node: Any, ctx: EmitContext, emit_func: EmitFunc) -> str:
    text = emit_func(node, ctx)

    if is_compound_form(node) or head_name(node) == 'if' or "\n" in text:
        return "\n" + text.strip() + "\n"

    return " " + text + ";"

def _emit_if(test_text: str, node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    true_form = node.args[1] if len(node.args) > 1 else None
    false_forms = node.args[2:]

    parts: List[str] = [test_text, "; then", emit_body_for_if(true_form, ctx, emit_func)]

    if false_forms and false_forms[0] is not None and false_forms[0] is not False:
        parts.append("else" + emit_body_for_if(false_forms[0], ctx, emit_func))

    parts.append("fi")
    return "".join(parts)

def emit_if(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    test, = padded_args(node, 1)
    return _emit_if("if " + emit_func(test, ctx), node, ctx, emit_func)

def emit_if_not(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    test, = padded_args(node, 1)
    return _emit_if("if ! ( " + emit_func(test, ctx) + " )", node, ctx, emit_func)

def _emit_when(test_text: str, node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    body = emit_do(node.args[1:], ctx, emit_func)
    return test_text + "; then\n" + body.strip() + "\nfi"

def emit_when(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    test, = padded_args(node, 1)
    return _emit_when("if " + emit_func(test, ctx), node, ctx, emit_func)

def emit_when_not(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    test, = padded_args(node, 1)
    return _emit_when("if ! ( " + emit_func(test, ctx) + " )", node, ctx, emit_func)

def emit_case(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    test, = padded_args(node, 1)
    clauses = node.args[1:]

    if len(clauses) % 2:
        raise MalformedForm("case needs pattern/body pairs", form=node, rule='case')

    arms = [
        emit_func(pattern, ctx) + ")\n" + emit_func(body, ctx)
        for pattern, body in zip(clauses[0::2], clauses[1::2])
    ]
    return "case " + emit_func(test, ctx) + " in\n" + ";;\n".join(arms) + ";;\nesac"

def emit_while(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    test, = padded_args(node, 1)
    return "while " + emit_func(test, ctx) + "; do\n" + emit_do(node.args[1:], ctx, emit_func) + "done\n"

def emit_doseq(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    binding, = padded_args(node, 1)

    if not is_sequence(binding) or len(binding) != 2:
        raise MalformedForm("doseq binding must be [var values]", form=node, rule='doseq')

    var, values = binding
    # the iterable is a bare word list, not an array literal
    values_text = emit_func(values, ctx.replace(delimited_sequence=False))
    return (
        "for " + emit_func(var, ctx) + " in " + values_text + "; do\n"
        + emit_do(node.args[1:], ctx, emit_func) + "done"
    )

def emit_group(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    return "{\n" + emit_do(node.args, ctx, emit_func) + "}"

def emit_chain(op: str):
    def emit(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
        return chain_with(op, (emit_func(expr, ctx) for expr in node.args))
    return emit

def emit_return(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    expr, = padded_args(node, 1)
    return "return " + emit_func(expr, ctx)
