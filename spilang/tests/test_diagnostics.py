"""Tests for pipeline helpers, diagnostics and text rendering."""

from spilang.diagnostics import analyze_source, check_source, run_source
from spilang.formatting import format_scope, format_store


def test_valid_program_has_no_diagnostics():
    assert check_source("program P; var a : integer; begin a := 1 end.") == []


def test_lexer_error_diagnostic():
    (diag,) = check_source("program P; begin ? end.", "prog.pas")
    assert diag.category == "LexerError"
    assert diag.code is None
    assert (diag.line, diag.column) == (1, 18)
    assert diag.file == "prog.pas"
    assert "'?'" in diag.message


def test_parse_error_diagnostic():
    (diag,) = check_source("program P;\nbegin\n  a := \nend.")
    assert diag.category == "ParseError"
    assert diag.code == "UNEXPECTED_TOKEN"
    assert (diag.line, diag.column) == (4, 1)
    assert diag.length == 3


def test_semantic_error_diagnostic():
    (diag,) = check_source("program P; var a: integer; var a: real; begin end.", "dup.pas")
    assert diag.category == "SemanticError"
    assert diag.code == "DUPLICATE_ID"
    assert (diag.line, diag.column) == (1, 32)
    assert diag.file == "dup.pas"


def test_run_source_uses_fresh_instances():
    first = run_source("program P; var a : integer; begin a := 1 end.")
    second = run_source("program P; var b : integer; begin b := 2 end.")
    assert first.vars == {"a": 1}
    assert second.vars == {"b": 2}


def test_format_store_sorts_names():
    text = format_store({"b": 2, "a": 1.5})
    lines = text.splitlines()
    assert lines[0] == "Run-time GLOBAL_MEMORY contents"
    assert lines[2:] == ["a = 1.5", "b = 2"]


def test_format_scope():
    _, analyzer = analyze_source(
        "program P; var x : real; procedure Alpha(a : integer); begin end; begin end."
    )
    global_text = format_scope(analyzer.scopes[0])
    assert "Scope name     : global" in global_text
    assert "Scope level    : 1" in global_text
    assert "Enclosing scope: None" in global_text
    assert "<VarSymbol(name='x', type=real)>" in global_text
    alpha_text = format_scope(analyzer.scopes[1])
    assert "Enclosing scope: global" in alpha_text
    assert "<VarSymbol(name='a', type=integer)>" in alpha_text
