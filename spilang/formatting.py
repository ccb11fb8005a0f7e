"""Text rendering of scope tables and the runtime store.


File: formatting.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Mapping

from spilang.symbols import ScopedSymbolTable


def format_scope(scope: ScopedSymbolTable) -> str:
    """
    Render a scope table with a header, its position in the chain and its
    symbols.
    """
    h1 = "SCOPE (SCOPED SYMBOL TABLE)"
    lines = [h1, "=" * len(h1)]
    lines.append(f"{'Scope name':<15}: {scope.scope_name}")
    lines.append(f"{'Scope level':<15}: {scope.scope_level}")
    enclosing = scope.enclosing_scope.scope_name if scope.enclosing_scope is not None else None
    lines.append(f"{'Enclosing scope':<15}: {enclosing}")
    h2 = "Scope (Scoped symbol table) contents"
    lines.extend([h2, "-" * len(h2)])
    for name, symbol in scope.symbols().items():
        lines.append(f"{name:>7}: {symbol!r}")
    return "\n".join(lines)


def format_store(bindings: Mapping[str, int | float]) -> str:
    """
    Render the runtime store, one ``name = value`` line per variable in
    sorted order.
    """
    h1 = "Run-time GLOBAL_MEMORY contents"
    lines = [h1, "=" * len(h1)]
    for name, value in sorted(bindings.items()):
        lines.append(f"{name} = {value}")
    return "\n".join(lines)
