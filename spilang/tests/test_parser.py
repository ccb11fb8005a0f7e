"""Tests for the recursive descent parser."""

import pytest

from spilang.exceptions import ErrorCode, ParseError
from spilang.lexer import TokenType
from spilang.nodes import (
    Assign,
    BinOp,
    Compound,
    NoOp,
    Num,
    ProcedureDecl,
    Program,
    UnaryOp,
    Var,
    VarDecl,
)
from spilang.tests.utils import parse_source


def first_assignment(body: str) -> Assign:
    tree = parse_source(f"program P; begin {body} end.")
    return tree.block.compound_statement.children[0]


def test_minimal_program():
    tree = parse_source("program Empty; begin end.")
    assert isinstance(tree, Program)
    assert tree.name == "Empty"
    assert tree.block.declarations == ()
    assert tree.block.compound_statement == Compound((NoOp(),))


def test_multiplication_binds_tighter_than_addition():
    node = first_assignment("a := 1 + 2 * 3").right
    assert isinstance(node, BinOp)
    assert node.op.type == TokenType.PLUS
    assert isinstance(node.right, BinOp)
    assert node.right.op.type == TokenType.MUL


def test_operators_are_left_associative():
    node = first_assignment("a := 8 - 3 - 2").right
    assert node.op.type == TokenType.MINUS
    assert isinstance(node.left, BinOp)
    assert node.left.left.value == 8
    assert node.right.value == 2

    node = first_assignment("a := 8 div 4 / 2").right
    assert node.op.type == TokenType.FLOAT_DIV
    assert node.left.op.type == TokenType.INTEGER_DIV


def test_parentheses_override_precedence():
    node = first_assignment("a := (1 + 2) * 3").right
    assert node.op.type == TokenType.MUL
    assert node.left.op.type == TokenType.PLUS


def test_unary_operators_nest():
    node = first_assignment("a := - + 2").right
    assert isinstance(node, UnaryOp)
    assert node.op.type == TokenType.MINUS
    assert isinstance(node.expr, UnaryOp)
    assert node.expr.op.type == TokenType.PLUS
    assert isinstance(node.expr.expr, Num)


def test_assignment_target_is_a_var():
    node = first_assignment("total := x")
    assert isinstance(node.left, Var)
    assert node.left.value == "total"
    assert isinstance(node.right, Var)


def test_variable_groups_expand_to_one_declaration_each():
    tree = parse_source("program P; var a, b : integer; c : real; begin end.")
    decls = tree.block.declarations
    assert [(d.var_node.value, d.type_node.value) for d in decls] == [
        ("a", "integer"),
        ("b", "integer"),
        ("c", "real"),
    ]
    assert all(isinstance(d, VarDecl) for d in decls)


def test_uppercase_type_names_are_normalized():
    tree = parse_source("PROGRAM P; VAR a : INTEGER; BEGIN END.")
    assert tree.block.declarations[0].type_node.value == "integer"


def test_var_sections_and_procedures_interleave():
    source = (
        "program P;\n"
        "var a : integer;\n"
        "procedure One; begin end;\n"
        "var b : real;\n"
        "procedure Two; begin end;\n"
        "begin end."
    )
    decls = parse_source(source).block.declarations
    assert [type(d).__name__ for d in decls] == ["VarDecl", "ProcedureDecl", "VarDecl", "ProcedureDecl"]


def test_procedure_parameters():
    source = (
        "program P;\n"
        "procedure Alpha(a : integer; b, c : real);\n"
        "var y : integer;\n"
        "begin y := a end;\n"
        "begin end."
    )
    proc = parse_source(source).block.declarations[0]
    assert isinstance(proc, ProcedureDecl)
    assert proc.proc_name == "Alpha"
    assert [(p.var_node.value, p.type_node.value) for p in proc.params] == [
        ("a", "integer"),
        ("b", "real"),
        ("c", "real"),
    ]
    assert len(proc.block_node.declarations) == 1


def test_procedure_without_parameters():
    for header in ("procedure Q;", "procedure Q();"):
        proc = parse_source(f"program P; {header} begin end; begin end.").block.declarations[0]
        assert proc.params == ()


def test_nested_procedures():
    source = (
        "program P;\n"
        "procedure Outer;\n"
        "  procedure Inner; begin end;\n"
        "begin end;\n"
        "begin end."
    )
    outer = parse_source(source).block.declarations[0]
    assert outer.block_node.declarations[0].proc_name == "Inner"


def test_nested_compound_and_empty_statements():
    tree = parse_source("program P; var a : integer; begin begin a := 1; end; ; end.")
    children = tree.block.compound_statement.children
    assert isinstance(children[0], Compound)
    assert isinstance(children[0].children[0], Assign)
    assert isinstance(children[0].children[1], NoOp)
    assert children[1:] == (NoOp(), NoOp())


def test_missing_expression_is_unexpected_token():
    """
    Test that the parse error points at the ';' where an expression was
    expected.
    """
    with pytest.raises(ParseError) as excinfo:
        parse_source("program P; var a: integer; begin a := ; end.")
    err = excinfo.value
    assert err.error_code == ErrorCode.UNEXPECTED_TOKEN
    assert err.token.type == TokenType.SEMI
    assert (err.line, err.column) == (1, 39)


def test_statement_without_program_header_fails():
    with pytest.raises(ParseError) as excinfo:
        parse_source("begin a := ; end.")
    assert excinfo.value.token.type == TokenType.BEGIN


def test_missing_final_dot_fails_at_eof():
    with pytest.raises(ParseError) as excinfo:
        parse_source("program P; begin end")
    assert excinfo.value.token.type == TokenType.EOF


def test_trailing_tokens_after_dot_fail():
    with pytest.raises(ParseError) as excinfo:
        parse_source("program P; begin end. x")
    assert excinfo.value.token.value == "x"


def test_var_section_needs_a_declaration():
    with pytest.raises(ParseError) as excinfo:
        parse_source("program P; var begin end.")
    assert excinfo.value.token.type == TokenType.BEGIN


def test_missing_semicolon_between_statements():
    with pytest.raises(ParseError) as excinfo:
        parse_source("program P; begin a := 1 b := 2 end.")
    assert excinfo.value.token.value == "b"


def test_unknown_type_name_is_a_parse_error():
    with pytest.raises(ParseError) as excinfo:
        parse_source("program P; var a : boolean; begin end.")
    assert excinfo.value.token.value == "boolean"


def test_parse_error_message_names_token_and_position():
    with pytest.raises(ParseError) as excinfo:
        parse_source("program P; begin a := 1 end")
    message = str(excinfo.value)
    assert message.startswith("Unexpected token -> Token(EOF")
    assert "in <input>" in message
