from __future__ import annotations

from textwrap import dedent

import pytest

from tests.support.harness import EmitContext, MalformedForm, emit_script, read_all, run_emit_case

SCENARIOS = [
    pytest.param("(deref tmpdir)", "${tmpdir}", None, id="deref-bare"),
    pytest.param("@tmpdir", "${tmpdir}", None, id="deref-shorthand"),
    pytest.param("(deref x :default v)", "${x-v}", None, id="default"),
    pytest.param('(deref cachedir :default-value "x")', "${cachedir:-x}", None, id="default-value"),
    pytest.param("(deref x :default-assign v)", "${x=v}", None, id="default-assign"),
    pytest.param("(deref x :default-assign-value v)", "${x:=v}", None, id="default-assign-value"),
    pytest.param("(deref x :alternate v)", "${x+v}", None, id="alternate"),
    pytest.param("(deref x :alternate-value v)", "${x:+v}", None, id="alternate-value"),
    pytest.param("(deref x :error v)", "${x?v}", None, id="error"),
    pytest.param("(deref x :error-value bar)", "${x:?bar}", None, id="error-value"),
    pytest.param("(deref x :default @y)", "${x-${y}}", None, id="nested-default"),
    pytest.param("(deref x :alternate a :default d)", "${x-d}", None, id="first-option-wins"),
    pytest.param("(deref x :default)", None, MalformedForm, id="dangling-option"),
    pytest.param("(deref (ls))", "$(ls)", None, id="command-substitution"),
    pytest.param("(deref (pipe (ls) (wc -l)))", "$(ls | wc -l)", None, id="substituted-pipe"),
    pytest.param("(echo @x)", "echo ${x}", None, id="deref-argument"),
    pytest.param("(get my-map :some.key)", "$(hash_echo my__map some_DOT_key -n)", None, id="get"),
    pytest.param("(aget arr 1)", "${arr[1]}", None, id="aget"),
]


@pytest.mark.parametrize("source, expected, expected_exc", SCENARIOS)
def test_expand(source: str, expected, expected_exc) -> None:
    run_emit_case(source, expected, expected_exc)


def test_statements_carry_source_comments() -> None:
    forms = read_all("(ls)\n(pwd)\n", file="a.sh", track_locations=True)
    assert emit_script(*forms) == "ls # a.sh:1\npwd # a.sh:2\n"


def test_nested_statements_carry_source_comments() -> None:
    forms = read_all(
        dedent(
            """\
            (group
              (ls)
              (pwd))
            """
        ),
        file="a.sh",
        track_locations=True,
    )
    assert emit_script(*forms) == "{\nls # a.sh:2\npwd # a.sh:3\n} # a.sh:1\n"


def test_deref_suppresses_source_comments() -> None:
    forms = read_all("(var x @(do (ls) (pwd)))", file="a.sh", track_locations=True)
    assert emit_script(*forms) == "x=$(ls\npwd\n) # a.sh:1\n"


def test_source_comments_can_be_switched_off(plain_ctx: EmitContext) -> None:
    forms = read_all("(ls)\n(pwd)\n", file="a.sh", track_locations=True)
    assert emit_script(*forms, ctx=plain_ctx) == "ls\npwd\n"


def test_source_comment_without_file() -> None:
    forms = read_all("(ls)", track_locations=True)
    assert emit_script(*forms) == "ls # line 1\n"


def test_deref_option_values_carry_no_source_comments() -> None:
    forms = read_all("(var x (deref y :default (group (ls))))", file="a.sh", track_locations=True)
    assert emit_script(*forms) == "x=${y-{\nls\n}} # a.sh:1\n"
