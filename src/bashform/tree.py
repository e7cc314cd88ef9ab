"""Expression nodes consumed by the emitter.

Atoms are plain Python values (None, int, Fraction, float, str, bool) plus the
two name types below. Sequences are lists/tuples, mappings are dicts, and a
parenthesised form is a `Form`.
"""
from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union
from typing_extensions import TypeAlias, TypeGuard

class Name(str):
    """Base for the two name types. Equal only to names of the same type, so
    `a`, `:a` and `"a"` stay distinct mapping keys."""
    __slots__ = ()

    @property
    def name(self) -> str:
        return str.__str__(self)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and str.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))

class Symbol(Name):
    """A bare name."""
    __slots__ = ()

    def __repr__(self) -> str:
        return f'Symbol({self.name!r})'

class Keyword(Name):
    """A `:name` keyword. Holds the name without the leading colon."""
    __slots__ = ()

    def __repr__(self) -> str:
        return f'Keyword({self.name!r})'

@dataclass(frozen=True)
class SourceLocation:
    line: int
    file: Optional[str] = None
    column: Optional[int] = None

    def __str__(self) -> str:
        if self.file:
            return f"{self.file}:{self.line}"
        return f"line {self.line}"

class Form:
    """A parenthesised list: head followed by arguments."""
    __slots__ = ('items', 'meta')

    def __init__(self, items: Sequence['Expr'], meta: Optional[SourceLocation] = None):
        self.items: Tuple['Expr', ...] = tuple(items)
        self.meta = meta

    @property
    def head(self) -> 'Expr':
        return self.items[0] if self.items else None

    @property
    def args(self) -> Tuple['Expr', ...]:
        return self.items[1:]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __repr__(self) -> str:
        return f'Form({list(self.items)!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Form):
            return False
        return self.items == other.items

    def __hash__(self) -> int:
        return hash(('form', self.items))

Expr: TypeAlias = Union[
    None, bool, int, float, Fraction, str, Symbol, Keyword,
    Form, List[Any], Tuple[Any, ...], Dict[Any, Any],
]

def sym(name: str) -> Symbol:
    return Symbol(name)

def kw(name: str) -> Keyword:
    return Keyword(name[1:] if name.startswith(':') else name)

def form(head: Union[str, 'Expr'], *args: 'Expr', meta: Optional[SourceLocation] = None) -> Form:
    """Build a form; a plain-str head is taken as a symbol."""
    if type(head) is str:
        head = Symbol(head)
    return Form((head, *args), meta=meta)

def is_form(node: Any) -> TypeGuard[Form]:
    return isinstance(node, Form)

def is_symbol(node: Any) -> TypeGuard[Symbol]:
    return isinstance(node, Symbol)

def is_sequence(node: Any) -> bool:
    return isinstance(node, (list, tuple))

def is_mapping(node: Any) -> bool:
    return isinstance(node, dict)

def form_head(node: Any) -> Optional[Symbol]:
    if is_form(node) and is_symbol(node.head):
        return node.head
    return None

def head_name(node: Any) -> Optional[str]:
    """Plain text of a form's symbol head, for lookups keyed by str."""
    head = form_head(node)
    return head.name if head is not None else None

def node_meta(node: Any) -> Optional[SourceLocation]:
    return getattr(node, "meta", None)

def is_compound_form(node: Any) -> bool:
    """A `do` form; its statements render one per line."""
    return head_name(node) == 'do'

def padded_args(node: Form, count: int) -> List[Any]:
    """First `count` arguments of a form, with missing trailing ones as None."""
    args = list(node.args[:count])

    while len(args) < count:
        args.append(None)

    return args

def is_text(node: Any) -> bool:
    return isinstance(node, str) and not isinstance(node, Name)
