"""AST node definitions.

Each node variant is a frozen dataclass holding only its own fields;
children live in tuples so a tree is read-only once the parser has built
it. :data:`Node` is the closed union of every variant. Visitors dispatch on
it with ``match`` and finish with ``assert_never`` so a variant without a
case is reported by the type checker.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from spilang.lexer import Token


@dataclass(frozen=True)
class Num:
    """Integer or real literal."""
    token: Token

    @property
    def value(self) -> int | float:
        return self.token.value


@dataclass(frozen=True)
class Var:
    """Variable reference, built from an ID token."""
    token: Token

    @property
    def value(self) -> str:
        return self.token.value


@dataclass(frozen=True)
class UnaryOp:
    op: Token
    expr: Node


@dataclass(frozen=True)
class BinOp:
    left: Node
    op: Token
    right: Node


@dataclass(frozen=True)
class Assign:
    """``variable := expr``"""
    left: Var
    op: Token
    right: Node


@dataclass(frozen=True)
class NoOp:
    """Empty statement."""


@dataclass(frozen=True)
class Compound:
    """``begin ... end`` block of statements."""
    children: tuple[Node, ...]


@dataclass(frozen=True)
class Type:
    """Type specification of a declaration."""
    token: Token

    @property
    def value(self) -> str:
        return self.token.value.lower()


@dataclass(frozen=True)
class VarDecl:
    var_node: Var
    type_node: Type


@dataclass(frozen=True)
class Param:
    """Formal parameter of a procedure."""
    var_node: Var
    type_node: Type


@dataclass(frozen=True)
class Block:
    declarations: tuple[VarDecl | ProcedureDecl, ...]
    compound_statement: Compound


@dataclass(frozen=True)
class ProcedureDecl:
    token: Token
    proc_name: str
    params: tuple[Param, ...]
    block_node: Block


@dataclass(frozen=True)
class Program:
    token: Token
    name: str
    block: Block


Node = Union[
    Program,
    Block,
    VarDecl,
    ProcedureDecl,
    Param,
    Type,
    Compound,
    Assign,
    Var,
    BinOp,
    UnaryOp,
    Num,
    NoOp,
]
