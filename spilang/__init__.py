"""Simple Pascal Interpreter.

A lexer, recursive descent parser, semantic analyzer and tree-walk
interpreter for a small Pascal subset.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from spilang.analyzer import SemanticAnalyzer
from spilang.interpreter import Interpreter
from spilang.lexer import Lexer, Token, TokenType, tokenize
from spilang.parser import Parser

__all__ = [
    "Interpreter",
    "Lexer",
    "Parser",
    "SemanticAnalyzer",
    "Token",
    "TokenType",
    "tokenize",
]
