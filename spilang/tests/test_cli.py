"""Tests for the command line entry point."""

import builtins

import spi


PROGRAM = "program P; var a, b: integer; begin a := 10; b := a div 4 end."


def test_run_script_prints_store(tmp_path, capsys):
    path = tmp_path / "prog.pas"
    path.write_text(PROGRAM, encoding="utf-8")
    assert spi.main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-2:] == ["a = 10", "b = 3"]


def test_scope_flag_prints_symbol_tables(tmp_path, capsys):
    path = tmp_path / "prog.pas"
    path.write_text(PROGRAM, encoding="utf-8")
    assert spi.main([str(path), "--scope"]) == 0
    out = capsys.readouterr().out
    assert "SCOPE (SCOPED SYMBOL TABLE)" in out
    assert "Scope name     : global" in out


def test_tokens_flag_prints_tokens_and_ast(tmp_path, capsys):
    path = tmp_path / "prog.pas"
    path.write_text(PROGRAM, encoding="utf-8")
    assert spi.main([str(path), "--tokens"]) == 0
    out = capsys.readouterr().out
    assert "Tokens:" in out
    assert "Program(" in out


def test_missing_file_is_an_io_error(tmp_path, capsys):
    assert spi.main([str(tmp_path / "missing.pas")]) == 1
    assert capsys.readouterr().out.startswith("IOError: cannot read")


def test_pipeline_error_is_reported(tmp_path, capsys):
    path = tmp_path / "bad.pas"
    path.write_text("program P; begin x := 1 end.", encoding="utf-8")
    assert spi.main([str(path)]) == 1
    out = capsys.readouterr().out
    assert out.startswith("SemanticError: Identifier not found")


def test_repl_buffers_until_program_is_complete(monkeypatch, capsys):
    lines = iter([
        "program P;",
        "var a : integer;",
        "begin a := 7 div 2 end.",
        "exit",
    ])

    def fake_input(_prompt):
        try:
            return next(lines)
        except StopIteration as e:
            raise EOFError from e

    monkeypatch.setattr(builtins, "input", fake_input)
    assert spi.main([]) == 0
    out = capsys.readouterr().out
    assert "a = 4" in out


def test_repl_reports_errors_and_continues(monkeypatch, capsys):
    lines = iter([
        "program P; begin x := 1 end.",
        "program Q; var y : integer; begin y := 2 end.",
    ])

    def fake_input(_prompt):
        try:
            return next(lines)
        except StopIteration as e:
            raise EOFError from e

    monkeypatch.setattr(builtins, "input", fake_input)
    assert spi.main([]) == 0
    out = capsys.readouterr().out
    assert "SemanticError" in out
    assert "y = 2" in out


def test_repl_keeps_buffering_inside_a_comment(monkeypatch, capsys):
    lines = iter([
        "program P; var a : integer; { start",
        "end } begin a := 1 end.",
    ])

    def fake_input(_prompt):
        try:
            return next(lines)
        except StopIteration as e:
            raise EOFError from e

    monkeypatch.setattr(builtins, "input", fake_input)
    assert spi.main([]) == 0
    out = capsys.readouterr().out
    assert "LexerError" not in out
    assert "a = 1" in out
