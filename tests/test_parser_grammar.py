from __future__ import annotations

from decimal import Decimal

import pytest

from plc_ref.tree import (
    Access,
    Assignment,
    Binary,
    Declaration,
    ExpressionStmt,
    Field,
    For,
    FunctionCall,
    Group,
    If,
    Literal,
    Method,
    Return,
    Source,
    While,
)
from plc_ref.types import Char
from tests.support.harness import ParseError, parse_source


def _body(source: str):
    """Parse `source` as the statements of a single `main` method."""
    program = parse_source(f"DEF main() DO {source} END")
    assert len(program.methods) == 1
    return program.methods[0].statements


def _expr(text: str):
    (stmt,) = _body(f"RETURN {text};")
    assert isinstance(stmt, Return)
    return stmt.value


def test_empty_main() -> None:
    assert parse_source("DEF main() DO END") == Source((), (Method("main", (), ()),))


def test_empty_source() -> None:
    assert parse_source("") == Source()


def test_fields_and_methods() -> None:
    program = parse_source("LET a; LET b = 1; DEF f(x, y) DO RETURN x; END DEF main() DO END")

    assert program.fields == (Field("a"), Field("b", Literal(1)))
    assert program.methods[0] == Method("f", ("x", "y"), (Return(Access(None, "x")),))
    assert program.methods[1].name == "main"


LITERALS = [
    pytest.param("NIL", None, id="nil"),
    pytest.param("TRUE", True, id="true"),
    pytest.param("FALSE", False, id="false"),
    pytest.param("42", 42, id="integer"),
    pytest.param("-7", -7, id="negative-integer"),
    pytest.param("123456789012345678901234567890", 123456789012345678901234567890, id="big-integer"),
    pytest.param("3.50", Decimal("3.50"), id="decimal"),
    pytest.param("'c'", Char("c"), id="char"),
    pytest.param("'\\n'", Char("\n"), id="char-escape"),
    pytest.param('"hi"', "hi", id="string"),
    pytest.param('"a\\tb\\"c\\\\"', 'a\tb"c\\', id="string-escapes"),
    pytest.param('""', "", id="empty-string"),
]


@pytest.mark.parametrize("text, value", LITERALS)
def test_literals(text: str, value) -> None:
    assert _expr(text) == Literal(value)


def test_decimal_literal_keeps_scale() -> None:
    lit = _expr("1.10")
    assert isinstance(lit, Literal)
    assert str(lit.literal) == "1.10"


def test_multiplicative_binds_tighter_than_additive() -> None:
    assert _expr("1 + 2 * 3") == Binary("+", Literal(1), Binary("*", Literal(2), Literal(3)))


def test_binary_operators_are_left_associative() -> None:
    assert _expr("1 - 2 - 3") == Binary("-", Binary("-", Literal(1), Literal(2)), Literal(3))


def test_subtraction_without_spaces() -> None:
    assert _expr("x-1") == Binary("-", Access(None, "x"), Literal(1))


def test_comparison_below_logical() -> None:
    expected = Binary(
        "AND",
        Binary("<", Access(None, "a"), Access(None, "b")),
        Binary("!=", Access(None, "c"), Literal(None)),
    )
    assert _expr("a < b AND c != NIL") == expected


def test_symbolic_logical_operators() -> None:
    assert _expr("a || b && c") == Binary(
        "&&", Binary("||", Access(None, "a"), Access(None, "b")), Access(None, "c")
    )


def test_group_is_preserved() -> None:
    assert _expr("(1 + 2) * 3") == Binary("*", Group(Binary("+", Literal(1), Literal(2))), Literal(3))


def test_access_and_calls() -> None:
    assert _expr("obj.field") == Access(Access(None, "obj"), "field")
    assert _expr("f()") == FunctionCall(None, "f", ())
    assert _expr("f(1, x)") == FunctionCall(None, "f", (Literal(1), Access(None, "x")))
    assert _expr("a.b.m(1)") == FunctionCall(Access(Access(None, "a"), "b"), "m", (Literal(1),))


def test_statements() -> None:
    stmts = _body(
        """
        LET x;
        LET y = 1;
        x = y;
        obj.f = 2;
        print(x);
        IF x DO y = 2; END
        IF x DO ELSE y = 3; END
        FOR e IN xs DO print(e); END
        WHILE FALSE DO END
        """
    )

    assert stmts == (
        Declaration("x"),
        Declaration("y", Literal(1)),
        Assignment(Access(None, "x"), Access(None, "y")),
        Assignment(Access(Access(None, "obj"), "f"), Literal(2)),
        ExpressionStmt(FunctionCall(None, "print", (Access(None, "x"),))),
        If(Access(None, "x"), (Assignment(Access(None, "y"), Literal(2)),), ()),
        If(Access(None, "x"), (), (Assignment(Access(None, "y"), Literal(3)),)),
        For("e", Access(None, "xs"), (ExpressionStmt(FunctionCall(None, "print", (Access(None, "e"),))),)),
        While(Literal(False), ()),
    )


def test_assignment_target_is_any_expression() -> None:
    # rejected at evaluation time, not by the grammar
    (stmt,) = _body("1 = 2;")
    assert stmt == Assignment(Literal(1), Literal(2))


def test_keyword_prefixed_identifiers() -> None:
    stmts = _body("LET LETTER = 1; LET DOer = IFFY; RETURN ENDING;")

    assert stmts == (
        Declaration("LETTER", Literal(1)),
        Declaration("DOer", Access(None, "IFFY")),
        Return(Access(None, "ENDING")),
    )


def test_whitespace_is_ignored() -> None:
    assert parse_source("\n\tDEF\n main ( )\n DO\n END\n") == Source((), (Method("main", (), ()),))


PARSE_ERRORS = [
    pytest.param("DEF main() DO", id="missing-end"),
    pytest.param("DEF main() DO LET x = ; END", id="declaration-without-value"),
    pytest.param("DEF main() DO END LET x;", id="field-after-method"),
    pytest.param("DEF main() DO RETURN; END", id="return-without-value"),
    pytest.param("DEF main() DO x END", id="missing-semicolon"),
    pytest.param("DEF main() DO RETURN 1 +; END", id="dangling-operator"),
    pytest.param("DEF main() DO RETURN 'ab'; END", id="multi-char-literal"),
    pytest.param('DEF main() DO RETURN "open; END', id="unterminated-string"),
    pytest.param("DEF main() DO RETURN #; END", id="unknown-character"),
    pytest.param("DEF f(a,) DO END", id="trailing-parameter-comma"),
]


@pytest.mark.parametrize("source", PARSE_ERRORS)
def test_parse_errors(source: str) -> None:
    with pytest.raises(ParseError):
        parse_source(source)


def test_parse_error_reports_position() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_source("DEF main() DO\n  RETURN 1 +;\nEND")

    assert excinfo.value.line == 2
    assert excinfo.value.column is not None
    assert "line 2" in str(excinfo.value)


def test_parse_error_at_end_of_input() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_source("DEF main() DO")

    assert excinfo.value.message == "Unexpected end of input"
