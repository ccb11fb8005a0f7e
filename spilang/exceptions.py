"""Errors.

Every error raised by the front end carries the offending token so the
caller can point at the exact line and column. Lexical, parse and semantic
errors share the :class:`SPIError` base; the runtime exceptions at the
bottom of this module are raised by the interpreter only.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class ErrorCode(str, Enum):
    """
    Categories of front-end errors.
    """
    UNEXPECTED_TOKEN = "Unexpected token"
    ID_NOT_FOUND = "Identifier not found"
    DUPLICATE_ID = "Duplicate id found"

    def __str__(self) -> str:
        return self.value


class SPIError(Exception):
    """
    Base error for the lexer, parser and semantic analyzer.
    """
    def __init__(self, message, error_code=None, token=None, line=None, column=None, file=None):
        self.error_code = error_code
        self.token = token
        self.line = token.line if token is not None else line
        self.column = token.column if token is not None else column
        self.file = file
        self.detail = message
        if self.line is not None:
            message += f" on line {self.line}"
            if self.column is not None:
                message += f" column {self.column}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class LexerError(SPIError):
    """
    Error for characters the lexer cannot turn into a token.
    """


class ParseError(SPIError):
    """
    Error for tokens the grammar does not allow at their position.
    """


class SemanticError(SPIError):
    """
    Error for undeclared or duplicate identifiers.
    """


class UndefinedVariableException(Exception):
    """
    Error for reading a variable that holds no value at runtime.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        self.line = line
        message = f"Undefined variable '{varname}'"
        if line is not None:
            message += f" on line {line}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class DivisionByZeroException(Exception):
    """
    Error for dividing by zero with either division operator.
    """
    def __init__(self, op, line=None, file=None):
        self.op = op
        self.line = line
        message = f"Division by zero with '{op}'"
        if line is not None:
            message += f" on line {line}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class UnterminatedCommentError(LexerError):
    """
    Error for a ``{`` comment with no closing ``}`` before the end of input.
    """


class UnknownOpException(Exception):
    """
    Error for operator tokens the interpreter has no rule for.
    """
    def __init__(self, op, line=None, file=None):
        self.op = op
        self.line = line
        message = f"Unknown operation '{op}'"
        if line is not None:
            message += f" on line {line}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class NumericOverflowException(Exception):
    """
    Error for arithmetic whose result cannot be represented, such as an
    integer too large to convert to a real or an infinite ``div`` quotient.
    """
    def __init__(self, op, line=None, file=None):
        self.op = op
        self.line = line
        message = f"Numeric overflow with '{op}'"
        if line is not None:
            message += f" on line {line}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)
