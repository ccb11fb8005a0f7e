"""
Pascal subset language server entry point.

This server provides basic language features for ``.pas`` source files
using `pygls`. It runs the lexer, parser and semantic analyzer once on every
open or change, publishes the first error as a diagnostic, and indexes the
scope tables of a valid program for document symbols and hover.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_CHANGE,
    Diagnostic,
    DiagnosticSeverity,
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from spilang.diagnostics import analyze_source, to_diagnostic
from spilang.exceptions import SPIError
from spilang.symbols import ProcedureSymbol, ScopedSymbolTable, VarSymbol


@dataclass
class PascalSymbol:
    """Represents a declared symbol in a source file."""

    name: str
    kind: SymbolKind
    uri: str
    scope: str
    line: int
    column: int
    detail: str


class PascalLanguageServer(LanguageServer):
    """Language server for Pascal subset source files."""

    def __init__(self) -> None:
        super().__init__("spi-ls", "v0.1")
        self.symbols_by_uri: Dict[str, List[PascalSymbol]] = {}

    def update_index(self, uri: str, text: str) -> None:
        """Check ``text``, publish diagnostics and refresh the symbol index."""
        try:
            _, analyzer = analyze_source(text, uri)
        except SPIError as e:
            d = to_diagnostic(e)
            diagnostic = Diagnostic(
                range=Range(
                    Position(d.line - 1, d.column - 1),
                    Position(d.line - 1, d.column - 1 + d.length),
                ),
                message=d.message,
                severity=DiagnosticSeverity.Error,
                source="spi",
                code=d.code,
            )
            self.publish_diagnostics(uri, [diagnostic])
            return
        self.publish_diagnostics(uri, [])
        self.symbols_by_uri[uri] = self._collect_symbols(uri, analyzer.scopes)

    @staticmethod
    def _collect_symbols(uri: str, scopes: List[ScopedSymbolTable]) -> List[PascalSymbol]:
        """Collect the variables and procedures of every scope."""
        symbols: List[PascalSymbol] = []
        for scope in scopes:
            for sym in scope.symbols().values():
                if isinstance(sym, ProcedureSymbol):
                    params = "; ".join(f"{p.name}: {p.type}" for p in sym.params)
                    detail = f"procedure {sym.name}({params})"
                    symbols.append(PascalSymbol(
                        sym.name, SymbolKind.Function, uri, scope.scope_name,
                        sym.token.line - 1, sym.token.column - 1, detail,
                    ))
                elif isinstance(sym, VarSymbol):
                    detail = f"var {sym.name}: {sym.type}"
                    symbols.append(PascalSymbol(
                        sym.name, SymbolKind.Variable, uri, scope.scope_name,
                        sym.token.line - 1, sym.token.column - 1, detail,
                    ))
        return symbols


lang_server = PascalLanguageServer()


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: PascalLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Check a document when it is opened."""
    ls.update_index(params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: PascalLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-check the whole document when it changes.

    Changes may be incremental, so the text is taken from the workspace
    copy that pygls has already patched.
    """
    uri = params.text_document.uri
    ls.update_index(uri, ls.workspace.get_text_document(uri).source)


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: PascalLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Return the declaration of the symbol under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if not word:
        return None
    matches = [s for s in ls.symbols_by_uri.get(params.text_document.uri, []) if s.name == word]
    if not matches:
        return None
    value = "\n".join(f"{sym.detail}  ({sym.scope})" for sym in matches)
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=value))


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: PascalLanguageServer, params: DocumentSymbolParams):
    """Return the declared symbols of the given document."""
    symbols = ls.symbols_by_uri.get(params.text_document.uri, [])
    result: List[DocumentSymbol] = []
    for sym in symbols:
        rng = Range(
            Position(sym.line, sym.column),
            Position(sym.line, sym.column + len(sym.name)),
        )
        result.append(
            DocumentSymbol(
                name=sym.name,
                kind=sym.kind,
                range=rng,
                selection_range=rng,
                detail=sym.detail,
            )
        )
    return result


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
