"""Statement parsing utilities.

These functions operate on a `spilang.parser.parser.Parser` instance and
handle compound statements, statement lists and assignments.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from spilang.lexer import TokenType
from spilang.nodes import Assign, Compound, NoOp, Var

if TYPE_CHECKING:
    from spilang.parser import Parser


def parse_compound_statement(parser: 'Parser') -> Compound:
    """
    Parse a block of statements enclosed in ``begin``/``end``.

    Syntax:
        begin <statement_list> end

    Args:
        parser: The parser instance.

    Returns:
        Compound: The statements in source order.
    """
    parser.eat(TokenType.BEGIN)
    nodes = parser.statement_list()
    parser.eat(TokenType.END)
    return Compound(tuple(nodes))


def parse_statement_list(parser: 'Parser') -> list:
    """
    Syntax:
        <statement> (; <statement>)*
    """
    results = [parser.statement()]
    while parser.curr_token.type == TokenType.SEMI:
        parser.eat(TokenType.SEMI)
        results.append(parser.statement())
    return results


def parse_statement(parser: 'Parser'):
    """
    Parse a single statement. Anything that does not start a compound
    statement or an assignment is the empty statement, leaving the current
    token for the caller to check.
    """
    tok = parser.curr_token
    if tok.type == TokenType.BEGIN:
        return parser.compound_statement()
    if tok.type == TokenType.ID:
        return parser.assignment_statement()
    return parser.empty()


def parse_assignment_statement(parser: 'Parser') -> Assign:
    """
    Syntax:
        <variable> := <expr>
    """
    left = parser.variable()
    tok = parser.curr_token
    parser.eat(TokenType.ASSIGN)
    right = parser.expr()
    return Assign(left, tok, right)


def parse_variable(parser: 'Parser') -> Var:
    """
    Syntax:
        <identifier>
    """
    node = Var(parser.curr_token)
    parser.eat(TokenType.ID)
    return node


def parse_empty(parser: 'Parser') -> NoOp:  # pylint: disable=unused-argument
    return NoOp()
