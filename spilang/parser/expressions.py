"""Expression parsing utilities.

These functions operate on a `spilang.parser.parser.Parser` instance and
implement the recursive descent logic for arithmetic expressions. Binary
operators are left associative: each loop folds the next operand into the
tree built so far.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from spilang.lexer import TokenType
from spilang.nodes import BinOp, Num, UnaryOp

if TYPE_CHECKING:
    from spilang.parser import Parser


# ---- Highest precedence ----

def parse_factor(parser: 'Parser'):
    """Parse a signed factor, a literal, a parenthesized expression or a variable."""
    tok = parser.curr_token
    if tok.type in (TokenType.PLUS, TokenType.MINUS):
        parser.eat(tok.type)
        return UnaryOp(tok, parser.factor())

    if tok.type in (TokenType.INTEGER_CONST, TokenType.REAL_CONST):
        parser.eat(tok.type)
        return Num(tok)

    if tok.type == TokenType.LPAREN:
        parser.eat(TokenType.LPAREN)
        node = parser.expr()
        parser.eat(TokenType.RPAREN)
        return node

    return parser.variable()


def parse_term(parser: 'Parser'):
    """Parse ``*``, ``div`` and ``/`` expressions."""
    result = parser.factor()
    while parser.curr_token.type in (TokenType.MUL, TokenType.INTEGER_DIV, TokenType.FLOAT_DIV):
        op_tok = parser.curr_token
        parser.eat(op_tok.type)
        result = BinOp(result, op_tok, parser.factor())
    return result


# ---- Entry point ----

def parse_expr(parser: 'Parser'):
    """Parse ``+`` and ``-`` expressions, the lowest precedence level."""
    result = parser.term()
    while parser.curr_token.type in (TokenType.PLUS, TokenType.MINUS):
        tok = parser.curr_token
        parser.eat(tok.type)
        result = BinOp(result, tok, parser.term())
    return result
