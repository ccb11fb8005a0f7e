"""Symbols and scoped symbol tables.

A :class:`ScopedSymbolTable` maps names to symbols for one lexical scope
and links to the scope that encloses it. Lookups walk outward through that
link until the name is found or the chain ends. The outermost table is
seeded with the builtin ``integer`` and ``real`` types when it is created.

:class:`ScopeStack` owns the chain while the semantic analyzer walks a
tree: pushing creates a child of the current top, popping restores exactly
the previous top.


File: symbols.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from types import MappingProxyType
from typing import Iterator, Mapping

logger = logging.getLogger(__name__)

BUILTIN_TYPES = ("integer", "real")


class Symbol:
    """
    Base class for named entries in a symbol table.
    """
    def __init__(self, name: str, type_: Symbol | None = None, token=None):
        self.name = name
        self.type = type_
        # Declaration site, None for builtins
        self.token = token


class BuiltinTypeSymbol(Symbol):
    """A predefined type such as ``integer``."""

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(name={self.name!r})>"


class VarSymbol(Symbol):
    """A variable or parameter and the type it was declared with."""

    def __init__(self, name: str, type_: Symbol, token=None):
        super().__init__(name, type_, token)

    def __str__(self) -> str:
        return f"<{type(self).__name__}(name={self.name!r}, type={self.type})>"

    __repr__ = __str__


class ProcedureSymbol(Symbol):
    """A procedure and its parameters in declaration order."""

    def __init__(self, name: str, params: list[VarSymbol] | None = None, token=None):
        super().__init__(name, token=token)
        self.params = params if params is not None else []

    def __str__(self) -> str:
        return f"<{type(self).__name__}(name={self.name!r}, parameters={self.params})>"

    __repr__ = __str__


class ScopedSymbolTable:
    """Symbol table of one scope."""

    def __init__(self, scope_name: str, scope_level: int, enclosing_scope: ScopedSymbolTable | None = None):
        self._symbols: dict[str, Symbol] = {}
        self.scope_name = scope_name
        self.scope_level = scope_level
        self.enclosing_scope = enclosing_scope
        if enclosing_scope is None:
            self._init_builtins()

    def _init_builtins(self) -> None:
        for name in BUILTIN_TYPES:
            self.define(BuiltinTypeSymbol(name))

    def define(self, symbol: Symbol) -> None:
        """
        Add ``symbol`` unconditionally, replacing any entry with its name.
        """
        logger.debug("Define: %s", symbol)
        self._symbols[symbol.name] = symbol

    def insert(self, symbol: Symbol) -> None:
        """
        Add a declared symbol. Callers check for duplicates with
        ``lookup(name, current_scope_only=True)`` first.
        """
        logger.debug("Insert: %s (scope %s)", symbol.name, self.scope_name)
        self._symbols[symbol.name] = symbol

    def lookup(self, name: str, current_scope_only: bool = False) -> Symbol | None:
        """
        Find ``name`` in this scope or, unless restricted to this scope,
        in the enclosing ones.

        Returns:
            Symbol | None: The nearest symbol with that name.
        """
        logger.debug("Lookup: %s (scope %s)", name, self.scope_name)
        symbol = self._symbols.get(name)
        if symbol is not None:
            return symbol
        if current_scope_only or self.enclosing_scope is None:
            return None
        return self.enclosing_scope.lookup(name)

    def symbols(self) -> Mapping[str, Symbol]:
        """
        Return a read-only view of the bindings of this scope alone.
        """
        return MappingProxyType(self._symbols)

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return (
            f"<ScopedSymbolTable(name={self.scope_name!r}, level={self.scope_level}, "
            f"symbols={list(self._symbols)})>"
        )


class ScopeStack:
    """
    Stack of the scopes currently open, innermost last.
    """

    def __init__(self):
        self._scopes: list[ScopedSymbolTable] = []
        self.history: list[ScopedSymbolTable] = []

    @property
    def current(self) -> ScopedSymbolTable | None:
        """The innermost open scope, or ``None`` when nothing is open."""
        return self._scopes[-1] if self._scopes else None

    def push(self, scope_name: str) -> ScopedSymbolTable:
        """
        Open a scope nested in the current one. With no scope open the new
        scope is the global one, at level 1 and seeded with the builtins.
        """
        scope = ScopedSymbolTable(scope_name, len(self._scopes) + 1, self.current)
        self._scopes.append(scope)
        self.history.append(scope)
        logger.info("Enter scope: %s", scope_name)
        return scope

    def pop(self) -> ScopedSymbolTable:
        """
        Close the innermost scope and return it.

        Raises:
            IndexError: If no scope is open.
        """
        if not self._scopes:
            raise IndexError("pop from an empty scope stack")
        scope = self._scopes.pop()
        logger.info("Leave scope: %s", scope.scope_name)
        return scope

    @contextmanager
    def enter(self, scope_name: str) -> Iterator[ScopedSymbolTable]:
        """
        Open a scope for the duration of a ``with`` block.
        """
        scope = self.push(scope_name)
        try:
            yield scope
        finally:
            self.pop()

    def __len__(self) -> int:
        return len(self._scopes)
