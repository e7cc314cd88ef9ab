from __future__ import annotations

import pytest

from bashform.dialect import BashDialect, get_dialect
from tests.support.harness import MalformedForm, form, read, sym


def test_bash_dialect_lookup() -> None:
    dialect = get_dialect("bash")
    assert isinstance(dialect, BashDialect)
    assert dialect.name == "bash"


def test_unknown_dialect() -> None:
    with pytest.raises(MalformedForm):
        get_dialect("zsh")


def test_dialect_operations() -> None:
    bash = get_dialect("bash")

    assert bash.render_literal(None) == "null"
    assert bash.render_infix("<", [1, 2]) == '[ "1" -lt "2" ]'
    assert bash.render_special(read("(deref x)")) == "${x}"
    assert bash.render_special(read("(.push obj 1)")) == "obj.push(1)"
    assert bash.render(read("(systemctl restart nginx)")) == "systemctl restart nginx"
    assert bash.render_function(sym("f"), None, [], [form("ls")]) == "f() {\nls\n}\n"
    assert bash.render_call(sym("tar"), [sym("-xzf"), "a.tgz"]) == "tar -xzf a.tgz"


def test_render_special_rejects_plain_commands() -> None:
    with pytest.raises(MalformedForm):
        get_dialect("bash").render_special(read("(ls)"))
