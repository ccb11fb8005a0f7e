"""Semantic analyzer.

The analyzer walks the tree produced by the parser and checks that every
identifier is declared before use and declared only once per scope. It
computes no values and leaves the tree untouched.

1. Scopes
Entering the program opens the global scope (level 1, seeded with the
builtin types); entering a procedure opens a scope one level deeper named
after it. Both are closed again when their block has been visited, so the
stack is empty once :meth:`SemanticAnalyzer.analyze` returns. Every table
that was opened stays available through ``scopes`` for inspection.

2. Declarations
Variables and parameters resolve their type through the scope chain and
must not already exist in the current scope. Names from an outer scope may
be shadowed.

3. Uses
Variable reads and assignment targets resolve through the whole chain.

4. Errors
``SemanticError`` with ``ErrorCode.ID_NOT_FOUND`` or
``ErrorCode.DUPLICATE_ID``, carrying the offending token.


File: analyzer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from typing import assert_never

from spilang.exceptions import ErrorCode, SemanticError
from spilang.lexer import Token
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
from spilang.symbols import (
    ProcedureSymbol,
    ScopedSymbolTable,
    ScopeStack,
    Symbol,
    VarSymbol,
)

logger = logging.getLogger(__name__)


class SemanticAnalyzer:
    """Scope-checking tree visitor."""

    def __init__(self, file: str = "<input>"):
        self.file = file
        self.scope_stack = ScopeStack()

    @property
    def current_scope(self) -> ScopedSymbolTable | None:
        return self.scope_stack.current

    @property
    def scopes(self) -> list[ScopedSymbolTable]:
        """Every scope opened so far, in the order they were opened."""
        return list(self.scope_stack.history)

    def error(self, error_code: ErrorCode, token: Token) -> None:
        raise SemanticError(
            f"{error_code} -> {token!r}",
            error_code=error_code,
            token=token,
            file=self.file,
        )

    def analyze(self, tree: Program) -> None:
        """
        Check ``tree``.

        Raises:
            SemanticError: On the first undeclared or duplicate identifier.
        """
        self.visit(tree)

    def visit(self, node: Node) -> None:
        match node:
            case Program():
                self.visit_program(node)
            case Block():
                self.visit_block(node)
            case VarDecl():
                self.visit_var_decl(node)
            case ProcedureDecl():
                self.visit_procedure_decl(node)
            case Compound():
                for child in node.children:
                    self.visit(child)
            case Assign():
                self.visit_assign(node)
            case Var():
                self.visit_var(node)
            case BinOp():
                self.visit(node.left)
                self.visit(node.right)
            case UnaryOp():
                self.visit(node.expr)
            case Num() | NoOp() | Type() | Param():
                pass
            case _:
                assert_never(node)

    def visit_program(self, node: Program) -> None:
        with self.scope_stack.enter("global") as scope:
            self.visit(node.block)
            logger.debug("%r", scope)

    def visit_block(self, node: Block) -> None:
        for declaration in node.declarations:
            self.visit(declaration)
        self.visit(node.compound_statement)

    def _resolve_type(self, type_node: Type) -> Symbol:
        type_symbol = self.current_scope.lookup(type_node.value)
        if type_symbol is None:
            self.error(ErrorCode.ID_NOT_FOUND, type_node.token)
        return type_symbol

    def _declare_variable(self, var_node: Var, type_node: Type) -> VarSymbol:
        type_symbol = self._resolve_type(type_node)
        var_name = var_node.value
        if self.current_scope.lookup(var_name, current_scope_only=True) is not None:
            self.error(ErrorCode.DUPLICATE_ID, var_node.token)
        var_symbol = VarSymbol(var_name, type_symbol, var_node.token)
        self.current_scope.insert(var_symbol)
        return var_symbol

    def visit_var_decl(self, node: VarDecl) -> None:
        self._declare_variable(node.var_node, node.type_node)

    def visit_procedure_decl(self, node: ProcedureDecl) -> None:
        proc_name = node.proc_name
        if self.current_scope.lookup(proc_name, current_scope_only=True) is not None:
            self.error(ErrorCode.DUPLICATE_ID, node.token)
        proc_symbol = ProcedureSymbol(proc_name, token=node.token)
        self.current_scope.insert(proc_symbol)

        with self.scope_stack.enter(proc_name) as scope:
            for param in node.params:
                proc_symbol.params.append(self._declare_variable(param.var_node, param.type_node))
            self.visit(node.block_node)
            logger.debug("%r", scope)

    def visit_assign(self, node: Assign) -> None:
        self.visit_var(node.left)
        self.visit(node.right)

    def visit_var(self, node: Var) -> None:
        if self.current_scope.lookup(node.value) is None:
            self.error(ErrorCode.ID_NOT_FOUND, node.token)
