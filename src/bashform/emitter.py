from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional, Sequence

from .tree import Form, Symbol, form_head, is_form, is_mapping, is_sequence, node_meta
from .types import DEFAULT_CONTEXT, EmitContext, EmitError

from .emit.assign import (
    emit_alias,
    emit_assoc,
    emit_aset,
    emit_defvar,
    emit_let,
    emit_local,
    emit_merge,
    emit_set,
    emit_var,
)
from .emit.collections import emit_mapping, emit_sequence
from .emit.common import emit_do
from .emit.control import (
    emit_case,
    emit_chain,
    emit_doseq,
    emit_group,
    emit_if,
    emit_if_not,
    emit_return,
    emit_when,
    emit_when_not,
    emit_while,
)
from .emit.expand import emit_aget, emit_deref, emit_get
from .emit.fn import emit_defn, emit_function as _emit_function
from .emit.literals import emit_literal
from .emit.objects import emit_dot_method, emit_new
from .emit.operators import FILE_PREDICATES, emit_file_predicate, emit_infix, emit_not, is_infix_operator
from .emit.strings import emit_print, emit_println, emit_quoted, emit_str

logger = logging.getLogger(__name__)

SpecialFunc = Callable[[Form, EmitContext], str]

def _attach_form(exc: EmitError, node: Any) -> None:
    if exc.form is not None:
        if exc.location is None:
            exc.location = node_meta(exc.form)
        return

    exc.form = node
    exc.location = node_meta(node)

    if exc.rule is None:
        head = form_head(node)
        exc.rule = head.name if head is not None else None

    logger.debug("emit failed in %r: %s", node, exc)

# ---------------- Public API ----------------

def emit(expr: Any, ctx: Optional[EmitContext] = None) -> str:
    """Render one expression tree as bash source text."""
    return emit_node(expr, ctx if ctx is not None else DEFAULT_CONTEXT)

def emit_script(*forms: Any, ctx: Optional[EmitContext] = None) -> str:
    """Render top-level forms as newline-terminated statements."""
    return emit_do(forms, ctx if ctx is not None else DEFAULT_CONTEXT, emit_node)

def emit_function(name: Any, doc: Optional[Any], sig: Any, body: Sequence[Any], ctx: Optional[EmitContext] = None) -> str:
    """Render `name() { ... }` with shFlags declarations for `sig`."""
    return _emit_function(name, doc, sig, body, ctx if ctx is not None else DEFAULT_CONTEXT, emit_node)

def is_special_form(head: Any) -> bool:
    if not isinstance(head, Symbol):
        return False

    return head.name in _SPECIAL_DISPATCH or _is_dot_method(head)

# ---------------- Core emitter ----------------

def emit_node(n: Any, ctx: EmitContext) -> str:
    if not is_form(n):
        return _emit_value(n, ctx)

    try:
        return _emit_form(n, ctx)
    except EmitError as e:
        _attach_form(e, n)
        raise

def _emit_value(n: Any, ctx: EmitContext) -> str:
    if is_sequence(n):
        return emit_sequence(n, ctx, emit_node)

    if is_mapping(n):
        return emit_mapping(n, ctx, emit_node)

    return emit_literal(n)

def _emit_form(n: Form, ctx: EmitContext) -> str:
    head = n.head

    if isinstance(head, Symbol):
        handler = _SPECIAL_DISPATCH.get(head.name)
        if handler is not None:
            return handler(n, ctx)

        if _is_dot_method(head):
            return emit_dot_method(n, ctx, emit_node)

        if is_infix_operator(head):
            return emit_infix(head, n.args, ctx, emit_node)

    logger.debug("generic call for head %r", head)
    return emit_function_call(head, (emit_node(arg, ctx) for arg in n.args), ctx)

def emit_function_call(head: Any, args: Iterable[str], ctx: EmitContext) -> str:
    # source comments cannot go between the arguments of a single command
    rendered = list(args)
    name = emit_node(head, ctx)

    if rendered:
        return name + " " + " ".join(rendered)

    return name

def _is_dot_method(head: Symbol) -> bool:
    # `.push` is sugar; `./configure` and `../bin/run` are commands
    return head.startswith('.') and head.name[1:].isidentifier()

# ---------------- Dispatch ----------------

_SPECIAL_DISPATCH: dict[str, SpecialFunc] = {
    **{name: (lambda n, ctx: emit_file_predicate(n, ctx, emit_node)) for name in FILE_PREDICATES},
    'not': lambda n, ctx: emit_not(n, ctx, emit_node),
    'if': lambda n, ctx: emit_if(n, ctx, emit_node),
    'if-not': lambda n, ctx: emit_if_not(n, ctx, emit_node),
    'when': lambda n, ctx: emit_when(n, ctx, emit_node),
    'when-not': lambda n, ctx: emit_when_not(n, ctx, emit_node),
    'case': lambda n, ctx: emit_case(n, ctx, emit_node),
    'while': lambda n, ctx: emit_while(n, ctx, emit_node),
    'doseq': lambda n, ctx: emit_doseq(n, ctx, emit_node),
    'group': lambda n, ctx: emit_group(n, ctx, emit_node),
    'do': lambda n, ctx: emit_do(n.args, ctx, emit_node),
    'pipe': lambda n, ctx: emit_chain('|')(n, ctx, emit_node),
    'chain-or': lambda n, ctx: emit_chain('||')(n, ctx, emit_node),
    'chain-and': lambda n, ctx: emit_chain('&&')(n, ctx, emit_node),
    'return': lambda n, ctx: emit_return(n, ctx, emit_node),
    'local': lambda n, ctx: emit_local(n, ctx, emit_node),
    'var': lambda n, ctx: emit_var(n, ctx, emit_node),
    'defvar': lambda n, ctx: emit_defvar(n, ctx, emit_node),
    'let': lambda n, ctx: emit_let(n, ctx, emit_node),
    'alias': lambda n, ctx: emit_alias(n, ctx, emit_node),
    'set!': lambda n, ctx: emit_set(n, ctx, emit_node),
    'merge!': lambda n, ctx: emit_merge(n, ctx, emit_node),
    'assoc!': lambda n, ctx: emit_assoc(n, ctx, emit_node),
    'aset': lambda n, ctx: emit_aset(n, ctx, emit_node),
    'get': lambda n, ctx: emit_get(n, ctx, emit_node),
    'aget': lambda n, ctx: emit_aget(n, ctx, emit_node),
    'deref': lambda n, ctx: emit_deref(n, ctx, emit_node),
    'str': lambda n, ctx: emit_str(n, ctx, emit_node),
    'quoted': lambda n, ctx: emit_quoted(n, ctx, emit_node),
    'println': lambda n, ctx: emit_println(n, ctx, emit_node),
    'print': lambda n, ctx: emit_print(n, ctx, emit_node),
    'dot-method': lambda n, ctx: emit_dot_method(n, ctx, emit_node),
    'new': lambda n, ctx: emit_new(n, ctx, emit_node),
    'defn': lambda n, ctx: emit_defn(n, ctx, emit_node),
}
