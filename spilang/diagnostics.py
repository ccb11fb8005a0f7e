"""Pipeline helpers shared by the command line and the language server.

:func:`run_source` runs the four passes in order with fresh instances.
:func:`check_source` runs the front end only and reports the first error
as a :class:`Diagnostic` instead of raising it.


File: diagnostics.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass

from spilang.analyzer import SemanticAnalyzer
from spilang.exceptions import SPIError
from spilang.interpreter import Interpreter
from spilang.lexer import Lexer
from spilang.nodes import Program
from spilang.parser import Parser


@dataclass
class Diagnostic:
    """A front-end error located in the source."""

    category: str
    code: str | None
    message: str
    line: int
    column: int
    file: str
    length: int = 1


def parse_source(source: str, file: str = "<input>") -> Program:
    """
    Lex and parse ``source``.
    """
    return Parser(Lexer(source), file).parse()


def analyze_source(source: str, file: str = "<input>") -> tuple[Program, SemanticAnalyzer]:
    """
    Parse ``source`` and check it.

    Returns:
        tuple: The tree and the analyzer holding its scope tables.
    """
    tree = parse_source(source, file)
    analyzer = SemanticAnalyzer(file)
    analyzer.analyze(tree)
    return tree, analyzer


def run_source(source: str, file: str = "<input>") -> Interpreter:
    """
    Parse, check and run ``source``.

    Returns:
        Interpreter: The interpreter after the run; its store is the result.
    """
    tree, _ = analyze_source(source, file)
    interpreter = Interpreter(tree, file)
    interpreter.interpret()
    return interpreter


def to_diagnostic(error: SPIError) -> Diagnostic:
    """
    Describe ``error`` as a :class:`Diagnostic`.
    """
    token = error.token
    length = len(str(token.value)) if token is not None and token.value is not None else 1
    return Diagnostic(
        category=type(error).__name__,
        code=error.error_code.name if error.error_code is not None else None,
        message=error.detail,
        line=error.line if error.line is not None else 1,
        column=error.column if error.column is not None else 1,
        file=error.file if error.file is not None else "<input>",
        length=length,
    )


def check_source(source: str, file: str = "<input>") -> list[Diagnostic]:
    """
    Run the lexer, parser and analyzer over ``source``.

    Returns:
        list[Diagnostic]: Empty for a valid program, else the first error.
    """
    try:
        analyze_source(source, file)
    except SPIError as e:
        if e.file is None:
            e.file = file
        return [to_diagnostic(e)]
    return []
