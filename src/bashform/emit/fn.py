"""Function definitions with shFlags argument handling.

A signature is a sequence of positional symbols optionally followed by flag
specs, each `[type long short doc default]`:

    (defn deploy "Deploy a build" [target [:string env e "Environment" staging]]
      (echo (deref target)))

emits `DEFINE_string "env" "staging" "Environment" "e"`, the shFlags parsing
boilerplate, and `target=$1`.
"""
from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from ..tree import Form, is_sequence, is_symbol, is_text
from ..types import EmitContext, EmitFunc, MalformedSignature
from .common import emit_do, quoted_string
from .literals import emit_literal

FLAG_SPEC_FIELDS = 5

FLAGS_SETUP = (
    'FLAGS "$@" || exit 1\n'
    'eval set -- "${FLAGS_ARGV}"\n'
)

def _flag_text(value: Any) -> str:
    if value is None:
        return ""

    return emit_literal(value)

def shflags_declare(type_: Any, long: Any, short: Any, doc: Any, default: Any) -> str:
    fields = " ".join(quoted_string(_flag_text(v)) for v in (long, default, doc, short))
    return f"DEFINE_{_flag_text(type_)} {fields}\n"

def shflags_doc_string(doc: Any) -> str:
    if not is_text(doc):
        raise MalformedSignature("function doc string must be text")

    return "FLAGS_HELP=" + quoted_string(doc) + "\n"

def deconstruct_sig(sig: Any) -> Tuple[List[Any], List[Sequence[Any]]]:
    """Split a signature into (positional symbols, flag specs)."""
    if not is_sequence(sig):
        raise MalformedSignature("function signature must be a sequence")

    args: List[Any] = []
    flags: List[Sequence[Any]] = []

    for item in sig:
        if is_symbol(item) and not flags:
            args.append(item)
            continue

        if is_symbol(item):
            raise MalformedSignature(f"positional argument {item} follows a flag spec")

        if not is_sequence(item) or len(item) != FLAG_SPEC_FIELDS:
            raise MalformedSignature(f"flag spec must be [type long short doc default]; got {item!r}")

        flags.append(item)

    return args, flags

def shflags_make_declaration(doc: Optional[Any], sig: Any, ctx: EmitContext, emit_func: EmitFunc) -> str:
    args, flags = deconstruct_sig(sig)
    parts: List[str] = []

    if doc is not None:
        parts.append(shflags_doc_string(doc))

    if flags:
        parts.extend(shflags_declare(*spec) for spec in flags)
        parts.append(FLAGS_SETUP)

    for idx, arg in enumerate(args, start=1):
        parts.append(f"{emit_func(arg, ctx)}=${idx}\n")

    return "".join(parts)

def emit_function(name: Any, doc: Optional[Any], sig: Any, body: Sequence[Any], ctx: EmitContext, emit_func: EmitFunc) -> str:
    if not is_symbol(name):
        raise MalformedSignature(f"function name must be a symbol; got {name!r}")

    return (
        f"{name.name}() {{\n"
        + shflags_make_declaration(doc, sig, ctx, emit_func)
        + emit_do(body, ctx, emit_func)
        + "}\n"
    )

def emit_defn(node: Form, ctx: EmitContext, emit_func: EmitFunc) -> str:
    """(defn name "doc"? [sig] body...)"""
    rest = list(node.args)
    name = rest.pop(0) if rest else None
    doc = None

    if rest and is_text(rest[0]):
        doc = rest.pop(0)

    if not rest:
        raise MalformedSignature("defn needs a signature", form=node, rule='defn')

    sig = rest.pop(0)
    return emit_function(name, doc, sig, rest, ctx, emit_func)
