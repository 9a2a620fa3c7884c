import math

import pytest

from rpncalc.compiler import compile
from rpncalc.errors import MalformedExpression
from rpncalc.expression import Expression, format_value
from rpncalc.lexer import tokenize
from rpncalc.operators import lookup
from rpncalc.tokens import Token


def expression(text):
    return Expression(compile(tokenize(text)))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42.0),
        ("3 + 4 * 2", 11.0),
        ("(3 + 4) * 2", 14.0),
        ("-3 + 5", 2.0),
        ("2 ** 3", 8.0),
        ("2^3^2", 64.0),
        ("10 / 4", 2.5),
        ("1 - 2 - 3", -4.0),
        ("0xFF + 0b1", 256.0),
        ("-2 ^ 2", -4.0),
        ("2 ^ -1", 0.5),
        ("--5", 5.0),
        ("+5", 5.0),
        ("3-(-5)", 8.0),
        ("1 + 1 && 0", 1.0),
        ("0 || 3 - 3", -2.0),
        ("2 * (3 + 4) - 10 / 5", 12.0),
    ],
)
def test_solve_numbers(text, expected):
    result = expression(text).solve()
    assert result == expected
    assert isinstance(result, float)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1 == 1", True),
        ("!(1 == 2)", True),
        ("1 != 1", False),
        ("2 > 1", True),
        ("2 >= 3", False),
        ("1 + 1 == 2", True),
        ("2 * 3 && 0", False),
        ("0 || 0", False),
        ("!0", True),
        ("(1 < 2) && (3 <= 3)", True),
    ],
)
def test_solve_booleans(text, expected):
    assert expression(text).solve() is expected


def test_solve_division_by_zero():
    assert math.isinf(expression("1 / 0").solve())


@pytest.mark.parametrize("text", ["3 4", "()", "(3 +)", "1 2 3 + 4"])
def test_solve_malformed(text):
    expr = expression(text)
    with pytest.raises(MalformedExpression):
        expr.solve()


def test_solve_operator_without_operands():
    expr = Expression([Token.from_operator(lookup("+"))])
    with pytest.raises(MalformedExpression):
        expr.solve()


def test_solve_unary_without_operand():
    expr = Expression([Token.from_operator(lookup("!"))])
    with pytest.raises(MalformedExpression):
        expr.solve()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3 + 4 * 2", "3 4 2 * +"),
        ("0x1F ** 2", "0x1F 2 ^"),
        ("-(1.5)", "1.5 -"),
        ("3 4", "3 4"),
    ],
)
def test_render_postfix(text, expected):
    assert expression(text).render_postfix() == expected
    assert str(expression(text)) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", "42"),
        ("3 + 4 * 2", "3 + (4 * 2)"),
        ("(3 + 4) * 2", "(3 + 4) * 2"),
        ("1 - 2 - 3", "(1 - 2) - 3"),
        ("-5", "-5"),
        ("-(3 + 4)", "-(3 + 4)"),
        ("!(1 == 2)", "!(1 == 2)"),
        ("3 - -5", "3 - -5"),
        ("0xFF*2", "0xFF * 2"),
        ("(-2)^2", "(-2) ^ 2"),
        ("-2^2", "-(2 ^ 2)"),
        ("(-2)^2 * 3", "((-2) ^ 2) * 3"),
        ("2 ^ -1", "2 ^ -1"),
    ],
)
def test_render_infix(text, expected):
    assert expression(text).render_infix() == expected


def test_render_infix_malformed():
    with pytest.raises(MalformedExpression):
        expression("3 4").render_infix()


def test_render_modes():
    expr = expression("1 + 2 * 3")
    assert expr.render("postfix") == "1 2 3 * +"
    assert expr.render("infix") == "1 + (2 * 3)"
    with pytest.raises(ValueError):
        expr.render("prefix")


@pytest.mark.parametrize(
    "text",
    [
        "3 + 4 * 2",
        "(3 + 4) * 2",
        "-3 + 5",
        "2 ^ 3 ^ 2",
        "!(1 == 2) || 1 <= 0x10",
        "3 - (-5)",
        "--5 * (2 - 1)",
        "(-2)^2",
        "(-2)**3",
        "(-2)^0.5",
        "(!0)^2",
    ],
)
def test_rendering_is_stable(text):
    first = expression(text)
    assert first.render_postfix() == expression(text).render_postfix()
    infix = first.render_infix()
    assert expression(infix).render_postfix() == first.render_postfix()
    assert expression(infix).render_infix() == infix


@pytest.mark.parametrize(
    "text, expected",
    [
        ("(-2)^2", 4.0),
        ("(-2)**3", -8.0),
        ("-2^2", -4.0),
        ("(-2)^2 * 3", 12.0),
    ],
)
def test_infix_rendering_keeps_value(text, expected):
    infix = expression(text).render_infix()
    assert expression(text).solve() == expected
    assert expression(infix).solve() == expected


def test_postfix_is_immutable():
    tokens = compile(tokenize("1 + 2"))
    expr = Expression(tokens)
    tokens.clear()
    assert isinstance(expr.postfix, tuple)
    assert expr.solve() == 3.0


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "true"),
        (False, "false"),
        (2.0, "2"),
        (-0.5, "-0.5"),
        (2.5, "2.5"),
        (math.inf, "inf"),
        (1e15, "1000000000000000"),
        (1e300, "1e+300"),
        (-1e16, "-1e+16"),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected
