from __future__ import annotations

from typing import Any, Dict, Sequence

from ..types import EmitContext, EmitFunc
from .common import munge

def emit_sequence(items: Sequence[Any], ctx: EmitContext, emit_func: EmitFunc) -> str:
    body = " ".join(emit_func(item, ctx) for item in items)

    if ctx.delimited_sequence:
        return f"({body})"

    return body

def emit_mapping(mapping: Dict[Any, Any], ctx: EmitContext, emit_func: EmitFunc) -> str:
    """Native associative-array literal: `([k]=v [k2]=v2)`."""
    pairs = [f"[{emit_func(k, ctx)}]={emit_func(v, ctx)}" for k, v in mapping.items()]
    return "(" + " ".join(pairs) + ")"

def hash_set_call(var_name: Any, key: Any, value: Any, ctx: EmitContext, emit_func: EmitFunc) -> str:
    return "hash_set {} {} {}".format(
        munge(emit_func(var_name, ctx)),
        munge(emit_func(key, ctx)),
        emit_func(value, ctx),
    )

def set_map_values(var_name: Any, mapping: Dict[Any, Any], ctx: EmitContext, emit_func: EmitFunc) -> str:
    """Emulate an associative array with one `hash_set` call per key.

    Works on bash versions without `declare -A`; the `hash_set`/`hash_echo`
    helpers are expected to be defined by the script's prelude.
    """
    calls = "".join(
        hash_set_call(var_name, key, value, ctx, emit_func) + "; "
        for key, value in mapping.items()
    )
    return "{ " + calls + " }"
