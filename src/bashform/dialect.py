"""Output dialects.

Each dialect implements the same rendering operations; bash is the only one
shipped. Look dialects up by name with `get_dialect`.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Sequence
from typing_extensions import Protocol

from .tree import Form
from .types import DEFAULT_CONTEXT, EmitContext, MalformedForm
from . import emitter
from .emit.literals import emit_literal
from .emit.operators import emit_infix


class Dialect(Protocol):
    name: str

    def render_literal(self, value: Any) -> str: ...

    def render_infix(self, op: str, args: Sequence[Any], ctx: Optional[EmitContext] = None) -> str: ...

    def render_special(self, node: Form, ctx: Optional[EmitContext] = None) -> str: ...

    def render_function(self, name: Any, doc: Optional[Any], sig: Any, body: Sequence[Any], ctx: Optional[EmitContext] = None) -> str: ...

    def render_call(self, head: Any, args: Sequence[Any], ctx: Optional[EmitContext] = None) -> str: ...

    def render(self, expr: Any, ctx: Optional[EmitContext] = None) -> str: ...


class BashDialect:
    name = "bash"

    def render_literal(self, value: Any) -> str:
        return emit_literal(value)

    def render_infix(self, op: str, args: Sequence[Any], ctx: Optional[EmitContext] = None) -> str:
        return emit_infix(op, args, ctx or DEFAULT_CONTEXT, emitter.emit_node)

    def render_special(self, node: Form, ctx: Optional[EmitContext] = None) -> str:
        if not emitter.is_special_form(node.head):
            raise MalformedForm(f"{node.head!r} is not a special form", form=node)

        return emitter.emit(node, ctx)

    def render_function(self, name: Any, doc: Optional[Any], sig: Any, body: Sequence[Any], ctx: Optional[EmitContext] = None) -> str:
        return emitter.emit_function(name, doc, sig, body, ctx)

    def render_call(self, head: Any, args: Sequence[Any], ctx: Optional[EmitContext] = None) -> str:
        ctx = ctx or DEFAULT_CONTEXT
        return emitter.emit_function_call(head, (emitter.emit_node(arg, ctx) for arg in args), ctx)

    def render(self, expr: Any, ctx: Optional[EmitContext] = None) -> str:
        return emitter.emit(expr, ctx)


_DIALECTS: Dict[str, Dialect] = {
    BashDialect.name: BashDialect(),
}

def get_dialect(name: str) -> Dialect:
    dialect = _DIALECTS.get(name)
    if dialect is None:
        raise MalformedForm(f"Unknown dialect '{name}'")

    return dialect
