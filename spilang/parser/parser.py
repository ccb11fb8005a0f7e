"""Main parser entry point.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process with one token of lookahead. The actual parsing
routines are split across `spilang.parser.declarations`,
`spilang.parser.statements` and `spilang.parser.expressions`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from spilang.exceptions import ErrorCode, ParseError
from spilang.lexer import Lexer, Token, TokenType
from spilang.nodes import (
    Assign,
    Block,
    Compound,
    Node,
    NoOp,
    Param,
    ProcedureDecl,
    Program,
    Type,
    Var,
    VarDecl,
)

from . import declarations as _decl
from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """Recursive descent parser producing a :class:`Program` tree."""

    def __init__(self, lexer: Lexer, file: str = "<input>"):
        """
        Initialize the parser and read the first token.

        Parameters:
            lexer (Lexer): The token source.
            file (str): The name of the script, used in error messages.
        """
        self.lexer = lexer
        self.source_file = file
        self.curr_token: Token = self.lexer.next_token()

    def error(self, error_code: ErrorCode, token: Token) -> None:
        """
        Raise a parse error for ``token``.

        Raises:
            ParseError: Always.
        """
        raise ParseError(
            f"{error_code} -> {token!r}",
            error_code=error_code,
            token=token,
            file=self.source_file,
        )

    def eat(self, token_type: TokenType) -> None:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (TokenType): The expected token type.

        Raises:
            ParseError: If the token does not match the expected type.
        """
        if self.curr_token.type == token_type:
            self.curr_token = self.lexer.next_token()
        else:
            self.error(ErrorCode.UNEXPECTED_TOKEN, self.curr_token)

    # Declaration wrappers
    def program(self) -> Program:
        """
        Parse ``program ID ; block .``
        """
        return _decl.parse_program(self)

    def block(self) -> Block:
        """
        Parse a block: declarations followed by a compound statement.
        """
        return _decl.parse_block(self)

    def declarations(self) -> list[VarDecl | ProcedureDecl]:
        """
        Parse any number of ``var`` sections and procedure declarations.
        """
        return _decl.parse_declarations(self)

    def variable_declaration(self) -> list[VarDecl]:
        """
        Parse ``ID (, ID)* : type_spec`` into one declaration per name.
        """
        return _decl.parse_variable_declaration(self)

    def procedure_declaration(self) -> ProcedureDecl:
        """
        Parse a procedure header, its block and the trailing semicolon.
        """
        return _decl.parse_procedure_declaration(self)

    def formal_parameter_list(self) -> list[Param]:
        """
        Parse parameter groups separated by semicolons.
        """
        return _decl.parse_formal_parameter_list(self)

    def formal_parameters(self) -> list[Param]:
        """
        Parse one parameter group sharing a type.
        """
        return _decl.parse_formal_parameters(self)

    def type_spec(self) -> Type:
        """
        Parse ``integer`` or ``real``.
        """
        return _decl.parse_type_spec(self)

    # Statement wrappers
    def compound_statement(self) -> Compound:
        """
        Parse ``begin statement_list end``.
        """
        return _stmt.parse_compound_statement(self)

    def statement_list(self) -> list[Node]:
        """
        Parse statements separated by semicolons.
        """
        return _stmt.parse_statement_list(self)

    def statement(self) -> Node:
        """
        Parse a compound statement, an assignment or the empty statement.
        """
        return _stmt.parse_statement(self)

    def assignment_statement(self) -> Assign:
        """
        Parse ``variable := expr``.
        """
        return _stmt.parse_assignment_statement(self)

    def variable(self) -> Var:
        """
        Parse a single identifier.
        """
        return _stmt.parse_variable(self)

    def empty(self) -> NoOp:
        """
        Produce the empty statement.
        """
        return _stmt.parse_empty(self)

    # Expression wrappers
    def factor(self) -> Node:
        """
        Parse a unary sign, a literal, a parenthesized group or a variable.
        """
        return _expr.parse_factor(self)

    def term(self) -> Node:
        """
        Parse multiplication, integer division and float division.
        """
        return _expr.parse_term(self)

    def expr(self) -> Node:
        """
        Parse addition and subtraction.
        """
        return _expr.parse_expr(self)

    def parse(self) -> Program:
        """
        Parse the whole input.

        Returns:
            Program: The root of the tree.

        Raises:
            ParseError: If the input is not a program or has trailing tokens.
        """
        node = self.program()
        if self.curr_token.type != TokenType.EOF:
            self.error(ErrorCode.UNEXPECTED_TOKEN, self.curr_token)
        return node
