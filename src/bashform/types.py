from __future__ import annotations

from dataclasses import dataclass, replace as _dc_replace
from typing import Any, Callable, Optional
from typing_extensions import TypeAlias

from .tree import Form, SourceLocation

# ---------- Emission context ----------

@dataclass(frozen=True)
class EmitContext:
    """Per-call emission flags.

    Handlers never mutate a context; an override is a new value handed to the
    nested call only, so it ends when that call returns.
    """
    delimited_sequence: bool = True
    source_comments: bool = True

    def replace(self, **changes: Any) -> 'EmitContext':
        return _dc_replace(self, **changes)

DEFAULT_CONTEXT = EmitContext()

EmitFunc: TypeAlias = Callable[[Any, EmitContext], str]

# ---------- Exceptions ----------

class EmitError(Exception):
    form: Optional[Form]
    rule: Optional[str]
    location: Optional[SourceLocation]

    def __init__(self, message: str, *, form: Optional[Form] = None, rule: Optional[str] = None):
        super().__init__(message)
        self.form = form
        self.rule = rule
        self.location = None

    def __str__(self) -> str:
        msg = super().__str__()

        if self.rule is not None:
            msg = f"{msg} (in {self.rule})"

        if self.location is None:
            return msg

        if self.location.file:
            return f"{msg} ({self.location.file}:{self.location.line})"

        return f"{msg} (line {self.location.line})"

class ArityError(EmitError):
    pass

class InvalidIdentifier(EmitError):
    def __init__(self, name: str, *, rule: Optional[str] = None):
        super().__init__(f"Invalid bash symbol {name}", rule=rule)
        self.name = name

class MalformedSignature(EmitError):
    pass

class MalformedForm(EmitError):
    pass
