"""
Utility functions shared across the interpreter tests.
"""
from pathlib import Path

from spilang.diagnostics import analyze_source, parse_source, run_source
from spilang.interpreter import Interpreter

PROJECT_ROOT = Path(__file__).resolve().parents[2]
SAMPLES = PROJECT_ROOT / "samples"

__all__ = ["PROJECT_ROOT", "SAMPLES", "analyze_source", "parse_source", "run_file", "run_source"]


def run_file(path: Path) -> Interpreter:
    """
    Run a file and return the interpreter instance after execution.
    """
    return run_source(path.read_text(encoding="utf-8"), str(path))
