"""Declaration parsing utilities.

These functions operate on a `spilang.parser.parser.Parser` instance and
handle the program header, blocks, ``var`` sections and procedure
declarations.


File: declarations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from spilang.lexer import TokenType
from spilang.nodes import Block, Param, ProcedureDecl, Program, Type, Var, VarDecl

if TYPE_CHECKING:
    from spilang.parser import Parser


def parse_program(parser: 'Parser') -> Program:
    """
    Parse the program header and its block.

    Syntax:
        program <identifier> ; <block> .

    Args:
        parser: The parser instance.

    Returns:
        Program: The root node.
    """
    tok = parser.curr_token
    parser.eat(TokenType.PROGRAM)
    var_node = parser.variable()
    parser.eat(TokenType.SEMI)
    block_node = parser.block()
    parser.eat(TokenType.DOT)
    return Program(tok, var_node.value, block_node)


def parse_block(parser: 'Parser') -> Block:
    """
    Parse a block.

    Syntax:
        <declarations> <compound_statement>
    """
    declaration_nodes = parser.declarations()
    compound_statement_node = parser.compound_statement()
    return Block(tuple(declaration_nodes), compound_statement_node)


def parse_declarations(parser: 'Parser') -> list:
    """
    Parse the declaration part of a block. ``var`` sections and procedures
    may appear in any order; a ``var`` section needs at least one entry.

    Syntax:
        ( var (<variable_declaration> ;)+ | <procedure_declaration> )*

    Args:
        parser: The parser instance.

    Returns:
        list: VarDecl and ProcedureDecl nodes in source order.
    """
    declarations = []
    while parser.curr_token.type in (TokenType.VAR, TokenType.PROCEDURE):
        if parser.curr_token.type == TokenType.VAR:
            parser.eat(TokenType.VAR)
            declarations.extend(parser.variable_declaration())
            parser.eat(TokenType.SEMI)
            while parser.curr_token.type == TokenType.ID:
                declarations.extend(parser.variable_declaration())
                parser.eat(TokenType.SEMI)
        else:
            declarations.append(parser.procedure_declaration())
    return declarations


def parse_variable_declaration(parser: 'Parser') -> list[VarDecl]:
    """
    Parse a group of variables sharing one type.

    Syntax:
        <identifier> (, <identifier>)* : <type_spec>
    """
    var_nodes = [parser.variable()]
    while parser.curr_token.type == TokenType.COMMA:
        parser.eat(TokenType.COMMA)
        var_nodes.append(parser.variable())
    parser.eat(TokenType.COLON)
    type_node = parser.type_spec()
    return [VarDecl(var_node, type_node) for var_node in var_nodes]


def parse_procedure_declaration(parser: 'Parser') -> ProcedureDecl:
    """
    Parse a procedure declaration. Without a parameter list, or with an
    empty one, the procedure takes no parameters.

    Syntax:
        procedure <identifier> ( ( <formal_parameter_list> ) )? ; <block> ;

    Args:
        parser: The parser instance.

    Returns:
        ProcedureDecl: The declaration node.
    """
    parser.eat(TokenType.PROCEDURE)
    name_tok = parser.curr_token
    parser.eat(TokenType.ID)
    params = []
    if parser.curr_token.type == TokenType.LPAREN:
        parser.eat(TokenType.LPAREN)
        if parser.curr_token.type != TokenType.RPAREN:
            params = parser.formal_parameter_list()
        parser.eat(TokenType.RPAREN)
    parser.eat(TokenType.SEMI)
    block_node = parser.block()
    parser.eat(TokenType.SEMI)
    return ProcedureDecl(name_tok, name_tok.value, tuple(params), block_node)


def parse_formal_parameter_list(parser: 'Parser') -> list[Param]:
    """
    Syntax:
        <formal_parameters> (; <formal_parameters>)*
    """
    params = parser.formal_parameters()
    while parser.curr_token.type == TokenType.SEMI:
        parser.eat(TokenType.SEMI)
        params.extend(parser.formal_parameters())
    return params


def parse_formal_parameters(parser: 'Parser') -> list[Param]:
    """
    Syntax:
        <identifier> (, <identifier>)* : <type_spec>
    """
    var_nodes = [Var(parser.curr_token)]
    parser.eat(TokenType.ID)
    while parser.curr_token.type == TokenType.COMMA:
        parser.eat(TokenType.COMMA)
        var_nodes.append(Var(parser.curr_token))
        parser.eat(TokenType.ID)
    parser.eat(TokenType.COLON)
    type_node = parser.type_spec()
    return [Param(var_node, type_node) for var_node in var_nodes]


def parse_type_spec(parser: 'Parser') -> Type:
    """
    Syntax:
        integer | real
    """
    tok = parser.curr_token
    if tok.type == TokenType.INTEGER:
        parser.eat(TokenType.INTEGER)
    else:
        parser.eat(TokenType.REAL)
    return Type(tok)
