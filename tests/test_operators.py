from __future__ import annotations

import pytest

from bashform.emit.operators import INFIX_OPERATORS, SUBEXPR_PREFIXES
from tests.support.harness import ArityError, emit, form, run_emit_case

SCENARIOS = [
    pytest.param("(+ 1 2)", "(1 + 2)", None, id="arith-plus"),
    pytest.param("(- 5 1)", "(5 - 1)", None, id="arith-minus"),
    pytest.param("(* x 3)", "(x * 3)", None, id="arith-times"),
    pytest.param("(% n 2)", "(n % 2)", None, id="arith-mod"),
    pytest.param("(== a b)", '[ "a" == "b" ]', None, id="equal"),
    pytest.param("(= a b)", '[ "a" == "b" ]', None, id="single-equal-converted"),
    pytest.param("(!= a b)", '[ "a" != "b" ]', None, id="not-equal"),
    pytest.param("(< 1 2)", '[ "1" -lt "2" ]', None, id="less-than"),
    pytest.param("(> 1 2)", '[ "1" -gt "2" ]', None, id="greater-than"),
    pytest.param("(<= 1 2)", '[ "1" -le "2" ]', None, id="less-equal"),
    pytest.param("(>= @n 3)", '[ "${n}" -ge "3" ]', None, id="deref-operand-quoted"),
    pytest.param("(<< a b)", '[ "a" << "b" ]', None, id="shift-is-test"),
    pytest.param("(and a b)", "a && b", None, id="and-word"),
    pytest.param("(&& a b)", "a && b", None, id="and-symbol"),
    pytest.param("(or a b)", "a || b", None, id="or-word"),
    pytest.param("(|| a b)", "a || b", None, id="or-symbol"),
    pytest.param("(!= -x y)", '[ -x != "y" ]', None, id="dash-operand-unquoted"),
    pytest.param('(== "\\\\(a" b)', '[ \\(a == "b" ]', None, id="subexpr-operand-unquoted"),
    pytest.param('(== "@x" y)', '[ @x == "y" ]', None, id="at-operand-unquoted"),
    pytest.param("(== (not (foo)) y)", '[ ! { foo; } == "y" ]', None, id="negation-operand-unquoted"),
    pytest.param("(+ 1)", None, ArityError, id="one-operand"),
    pytest.param("(==)", None, ArityError, id="no-operand"),
    pytest.param('(file-exists? "/tmp/f")', "[ -e /tmp/f ]", None, id="file-exists"),
    pytest.param("(directory? d)", "[ -d d ]", None, id="directory"),
    pytest.param("(symlink? l)", "[ -h l ]", None, id="symlink"),
    pytest.param("(readable? f)", "[ -r f ]", None, id="readable"),
    pytest.param("(writeable? f)", "[ -w f ]", None, id="writeable"),
    pytest.param("(empty? @s)", "[ -z ${s} ]", None, id="empty"),
    pytest.param("(not (file-exists? x))", "! { [ -e x ]; }", None, id="not-predicate"),
    pytest.param("(not (== a b))", '! { [ "a" == "b" ]; }', None, id="not-test"),
]


@pytest.mark.parametrize("source, expected, expected_exc", SCENARIOS)
def test_operators(source: str, expected, expected_exc) -> None:
    run_emit_case(source, expected, expected_exc)


@pytest.mark.parametrize("op", sorted(INFIX_OPERATORS))
def test_every_infix_operator_needs_two_operands(op: str) -> None:
    with pytest.raises(ArityError):
        emit(form(op))

    with pytest.raises(ArityError):
        emit(form(op, "a"))

    assert emit(form(op, "a", "b"))


@pytest.mark.parametrize("prefix", SUBEXPR_PREFIXES)
def test_special_prefix_suppresses_quoting(prefix: str) -> None:
    operand = prefix + "value"
    assert emit(form("==", operand, "plain")) == f'[ {operand} == "plain" ]'


@pytest.mark.parametrize("operand", ["value", "${v}", "$(ls)", "1", "a b", "+x"])
def test_plain_operand_quoted_once(operand: str) -> None:
    assert emit(form("!=", operand, operand)) == f'[ "{operand}" != "{operand}" ]'
