"""Lexer for the Pascal subset.

The lexer is a lazy scanner over a combined regular expression of named
groups. Each call to :meth:`Lexer.next_token` pulls one match from the
underlying ``finditer`` and wraps it in a :class:`Token` that records its
type, literal value and the line and column of its first character.

Whitespace and ``{ ... }`` comments are skipped, line numbers stay accurate
across multi-line comments. An opening brace without a closing one is a
lexical error rather than a silent read to the end of the input.

Reserved words are matched exactly against :data:`RESERVED_KEYWORDS`; both
the lowercase and the all-uppercase spelling are reserved, any other
spelling is an identifier.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from spilang.exceptions import LexerError, UnterminatedCommentError


class TokenType(str, Enum):
    """
    Enumeration of token kinds.
    """

    # Punctuation
    PLUS = "PLUS"
    MINUS = "MINUS"
    MUL = "MUL"
    FLOAT_DIV = "FLOAT_DIV"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    SEMI = "SEMI"
    DOT = "DOT"
    COLON = "COLON"
    COMMA = "COMMA"
    ASSIGN = "ASSIGN"

    # Reserved words
    PROGRAM = "PROGRAM"
    VAR = "VAR"
    PROCEDURE = "PROCEDURE"
    BEGIN = "BEGIN"
    END = "END"
    INTEGER = "INTEGER"
    REAL = "REAL"
    INTEGER_DIV = "INTEGER_DIV"

    # Literals and names
    ID = "ID"
    INTEGER_CONST = "INTEGER_CONST"
    REAL_CONST = "REAL_CONST"
    EOF = "EOF"

    def __str__(self) -> str:
        return self.value


_KEYWORDS = {
    "program": TokenType.PROGRAM,
    "var": TokenType.VAR,
    "procedure": TokenType.PROCEDURE,
    "begin": TokenType.BEGIN,
    "end": TokenType.END,
    "integer": TokenType.INTEGER,
    "real": TokenType.REAL,
    "div": TokenType.INTEGER_DIV,
}

RESERVED_KEYWORDS: dict[str, TokenType] = {
    **_KEYWORDS,
    **{word.upper(): kind for word, kind in _KEYWORDS.items()},
}


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a type, value and source position.
    """
    type: TokenType
    value: int | float | str | None
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value!r}, position={self.line}:{self.column})"


token_specification: list[tuple[str, str]] = [
    # Comments
    ('COMMENT',       r'\{[^}]*\}'),
    ('OPEN_COMMENT',  r'\{'),

    # Literals
    ('REAL_CONST',    r'[0-9]+\.[0-9]*'),
    ('INTEGER_CONST', r'[0-9]+'),

    # Reserved words and identifiers
    ('WORD',          r'[A-Za-z][A-Za-z0-9]*'),

    # Assignment
    ('ASSIGN',        r':='),

    # Delimiters
    ('COLON',         r':'),
    ('SEMI',          r';'),
    ('COMMA',         r','),
    ('DOT',           r'\.'),
    ('LPAREN',        r'\('),
    ('RPAREN',        r'\)'),

    # Arithmetic operators
    ('PLUS',          r'\+'),
    ('MINUS',         r'-'),
    ('MUL',           r'\*'),
    ('FLOAT_DIV',     r'/'),

    # Miscellaneous
    ('NEWLINE',       r'\n'),
    ('SKIP',          r'[^\S\n]+'),
    ('MISMATCH',      r'.'),
]

_TOKEN_REGEX = re.compile('|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification))


class Lexer:
    """
    Forward-only scanner producing one token per :meth:`next_token` call.
    """

    def __init__(self, text: str):
        """
        Initialize the lexer.

        Parameters:
            text (str): The complete source text.
        """
        self.text = text
        self.line = 1
        self._line_start = 0
        self._scanner = self._scan()
        self._eof: Token | None = None

    def _column(self, offset: int) -> int:
        return offset - self._line_start + 1

    def _scan(self) -> Iterator[Token]:
        for match_obj in _TOKEN_REGEX.finditer(self.text):
            kind = match_obj.lastgroup
            value = match_obj.group()
            column = self._column(match_obj.start())

            if kind == 'NEWLINE':
                self.line += 1
                self._line_start = match_obj.end()
                continue
            if kind == 'SKIP':
                continue
            if kind == 'COMMENT':
                newlines = value.count('\n')
                if newlines:
                    self.line += newlines
                    self._line_start = match_obj.start() + value.rfind('\n') + 1
                continue
            if kind == 'OPEN_COMMENT':
                raise UnterminatedCommentError("Unterminated comment", line=self.line, column=column)
            if kind == 'MISMATCH':
                raise LexerError(f"Unexpected character {value!r}", line=self.line, column=column)

            if kind == 'REAL_CONST':
                yield Token(TokenType.REAL_CONST, float(value), self.line, column)
            elif kind == 'INTEGER_CONST':
                yield Token(TokenType.INTEGER_CONST, int(value), self.line, column)
            elif kind == 'WORD':
                yield Token(RESERVED_KEYWORDS.get(value, TokenType.ID), value, self.line, column)
            else:
                yield Token(TokenType[kind], value, self.line, column)

    def next_token(self) -> Token:
        """
        Return the next token, or the EOF token once the input is exhausted.

        Raises:
            LexerError: On an unexpected character or an unterminated comment.
        """
        if self._eof is not None:
            return self._eof
        token = next(self._scanner, None)
        if token is None:
            self._eof = Token(TokenType.EOF, None, self.line, self._column(len(self.text)))
            return self._eof
        return token

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens ending with EOF.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances.

    Raises:
        LexerError: If an unexpected character is encountered.
    """
    return list(Lexer(code))
