"""
Simple Pascal Interpreter

This is the main entry point for the interpreter.

Workflow:
1. The source program is read from the file given on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The SemanticAnalyzer checks every identifier against its scope.
5. The Interpreter walks the AST and the final runtime store is printed.
"""
import argparse
import logging
import os
import sys

from spilang.diagnostics import analyze_source
from spilang.exceptions import ParseError, UnterminatedCommentError
from spilang.formatting import format_scope, format_store
from spilang.interpreter import Interpreter
from spilang.lexer import TokenType, tokenize


def setup_logging(verbose: bool) -> None:
    """
    Configure logging for the command line. ``verbose`` traces scope
    entry, exit and symbol table operations.
    """
    logging.basicConfig(format="{message}", style="{")
    if verbose:
        logging.getLogger("spilang").setLevel(logging.DEBUG)


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    print(ast)
    print(" ")


def run_program(source: str, file: str, show_scope: bool = False, show_tokens: bool = False) -> Interpreter:
    """
    Run a program and print its runtime store.
    """
    tree, analyzer = analyze_source(source, file)

    if show_tokens:
        debug_print_tokens_ast(tokenize(source), tree)
    if show_scope:
        for scope in analyzer.scopes:
            print(format_scope(scope))
            print()

    interpreter = Interpreter(tree, file)
    interpreter.interpret()
    print(format_store(interpreter.bindings()))
    return interpreter


def run_script(script_name: str, show_scope: bool = False, show_tokens: bool = False) -> int:
    """
    Run a program file.

    Returns:
        int: The exit status.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"IOError: cannot read {script_name}: {e.strerror}")
        return 1

    try:
        run_program(code, script_name, show_scope, show_tokens)
    except Exception as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    return 0


def run_repl():
    """
    Run the interactive REPL. Lines are buffered until they form a
    complete program.
    """
    print("Simple Pascal Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            source = "\n".join(buffer)
            try:
                run_program(source, "<stdin>")
                buffer.clear()
            except UnterminatedCommentError:
                continue
            except ParseError as e:
                # A parse error at EOF means the program is not finished yet
                if e.token is not None and e.token.type == TokenType.EOF:
                    continue
                print(f"{type(e).__name__}: {e}")
                buffer.clear()
            except Exception as e:
                print(f"{type(e).__name__}: {e}")
                buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spi",
        description="Simple Pascal Interpreter. Run with no arguments to enter the REPL.",
    )
    parser.add_argument("script", nargs="?", help="path to a program source file")
    parser.add_argument("--scope", action="store_true", help="print every scope table after analysis")
    parser.add_argument("--tokens", action="store_true", help="print the tokens and the AST")
    parser.add_argument("-v", "--verbose", action="store_true", help="trace scopes and symbol lookups")
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No script: enter the REPL.
    - A script: run it and print the runtime store.
    - ``SPIDEBUG`` in the environment implies ``--tokens``.
    """
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.verbose)
    if args.script is None:
        run_repl()
        return 0
    show_tokens = args.tokens or bool(os.environ.get("SPIDEBUG"))
    return run_script(args.script, args.scope, show_tokens)


if __name__ == "__main__":
    sys.exit(main())
