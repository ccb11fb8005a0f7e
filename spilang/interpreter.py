"""Interpreter.

This is a tree-walk interpreter for trees accepted by the semantic
analyzer. It computes values into one flat runtime store.

1. Execution Model
:meth:`Interpreter.visit` dispatches on the node variant. Statements are
executed for their effect on the store, expression nodes return their
value. Declarations and procedure bodies do nothing at runtime: there is no
call statement, so a procedure is declared and scope-checked but never run.

2. Runtime Store
``vars`` maps each assigned name to its last value. It is created empty
and changed only by assignments; later assignments to a name overwrite
earlier ones. :meth:`Interpreter.bindings` exposes it read-only.

3. Arithmetic
``+``, ``-`` and ``*`` follow Python numeric semantics on ``int`` and
``float``. ``/`` always yields a ``float``. ``div`` rounds the quotient to
the nearest integer, ties away from zero, and yields an ``int``.

4. Error Handling
Reading a name with no stored value raises ``UndefinedVariableException``;
after a successful analysis this indicates the analyzer was skipped.
Dividing by zero raises ``DivisionByZeroException``.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType
from typing import Mapping, assert_never

from spilang.exceptions import (
    DivisionByZeroException,
    NumericOverflowException,
    UndefinedVariableException,
    UnknownOpException,
)
from spilang.lexer import TokenType
from spilang.nodes import (
    Assign,
    BinOp,
    Block,
    Compound,
    Node,
    NoOp,
    Num,
    Param,
    ProcedureDecl,
    Program,
    Type,
    UnaryOp,
    Var,
    VarDecl,
)

logger = logging.getLogger(__name__)


def integer_divide(lhs: int | float, rhs: int | float) -> int:
    """
    Divide and round to the nearest integer, ties away from zero.

    ``7 div 2`` is 4 and ``-7 div 2`` is -4. Two integers divide exactly,
    whatever their size.

    Raises:
        OverflowError: If a real quotient is infinite.
        ValueError: If a real quotient is not a number.
    """
    if isinstance(lhs, int) and isinstance(rhs, int):
        quotient, remainder = divmod(abs(lhs), abs(rhs))
        if 2 * remainder >= abs(rhs):
            quotient += 1
        return quotient if (lhs < 0) == (rhs < 0) else -quotient
    return int(Decimal(lhs / rhs).to_integral_value(rounding=ROUND_HALF_UP))


class Interpreter:
    """Tree-walk interpreter."""

    def __init__(self, tree: Program | None, file: str = "<input>"):
        """Initialize the interpreter with an empty runtime store."""
        self.tree = tree
        self.file = file
        self.vars: dict[str, int | float] = {}

    def interpret(self):
        """
        Run the program tree.

        Returns:
            The value of the root node; the useful result is the store.
        """
        if self.tree is None:
            return None
        return self.visit(self.tree)

    def bindings(self) -> Mapping[str, int | float]:
        """Return a read-only view of the runtime store."""
        return MappingProxyType(self.vars)

    def visit(self, node: Node):
        match node:
            case Program():
                return self.visit(node.block)
            case Block():
                for declaration in node.declarations:
                    self.visit(declaration)
                return self.visit(node.compound_statement)
            case Compound():
                for child in node.children:
                    self.visit(child)
                return None
            case Assign():
                value = self.visit(node.right)
                logger.debug("%s := %r", node.left.value, value)
                self.vars[node.left.value] = value
                return None
            case Var():
                return self.visit_var(node)
            case BinOp():
                return self.visit_binop(node)
            case UnaryOp():
                return self.visit_unaryop(node)
            case Num():
                return node.value
            case VarDecl() | ProcedureDecl() | Param() | Type() | NoOp():
                return None
            case _:
                assert_never(node)

    def visit_var(self, node: Var):
        varname = node.value
        if varname in self.vars:
            return self.vars[varname]
        raise UndefinedVariableException(varname, node.token.line, self.file)

    def visit_binop(self, node: BinOp):
        lhs = self.visit(node.left)
        rhs = self.visit(node.right)
        op = node.op
        try:
            return self._arithmetic(op, lhs, rhs)
        except (OverflowError, ValueError) as e:
            raise NumericOverflowException(op.value, op.line, self.file) from e

    def _arithmetic(self, op, lhs, rhs):
        match op.type:
            case TokenType.PLUS:
                return lhs + rhs
            case TokenType.MINUS:
                return lhs - rhs
            case TokenType.MUL:
                return lhs * rhs
            case TokenType.FLOAT_DIV:
                if rhs == 0:
                    raise DivisionByZeroException(op.value, op.line, self.file)
                return lhs / rhs
            case TokenType.INTEGER_DIV:
                if rhs == 0:
                    raise DivisionByZeroException(op.value, op.line, self.file)
                return integer_divide(lhs, rhs)
        raise UnknownOpException(op.value, op.line, self.file)

    def visit_unaryop(self, node: UnaryOp):
        operand = self.visit(node.expr)
        match node.op.type:
            case TokenType.PLUS:
                return +operand
            case TokenType.MINUS:
                return -operand
        raise UnknownOpException(node.op.value, node.op.line, self.file)
