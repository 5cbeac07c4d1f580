"""Pipeline entry points: scan, parse, then interpret.

A `Session` owns one interpreter and one `Diagnostics` object. Globals
declared by one `run` call stay visible to the next, which is what the
interactive prompt relies on. The module-level `run` function uses a
fresh session for each call.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .ast import Stmt
from .diagnostics import Diagnostics
from .interpreter import Interpreter
from .parser import Parser
from .scanner import Scanner

EXIT_COMPILE_ERROR = 65
EXIT_RUNTIME_ERROR = 70


class Session:
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt',
                 stream: Optional[TextIO] = None):
        self.interpreter = Interpreter(debug_level=debug_level, debug_file=debug_file)
        self.diagnostics = Diagnostics(stream)

    def parse(self, source: str) -> List[Stmt]:
        tokens = Scanner(source, self.diagnostics).scan_tokens()
        return Parser(tokens, self.diagnostics).parse()

    def run(self, source: str) -> Diagnostics:
        statements = self.parse(source)
        if self.diagnostics.had_error:
            return self.diagnostics
        return self.execute(statements)

    def execute(self, statements: List[Stmt]) -> Diagnostics:
        return self.interpreter.interpret(statements, self.diagnostics)

    def exit_code(self) -> int:
        if self.diagnostics.had_error:
            return EXIT_COMPILE_ERROR
        if self.diagnostics.had_runtime_error:
            return EXIT_RUNTIME_ERROR
        return 0

    def run_file(self, path: str) -> int:
        """Run a script file and return the process exit status."""
        source = Path(path).read_text(encoding='utf-8')
        self.run(source)
        return self.exit_code()

    def run_prompt(self, stdin: Optional[TextIO] = None) -> None:
        """Read and run one line at a time until end of input."""
        stdin = stdin if stdin is not None else sys.stdin
        while True:
            print('> ', end='', flush=True)
            line = stdin.readline()
            if not line:
                print()
                break
            self.run(line)
            self.diagnostics.reset()

    def close(self) -> None:
        self.interpreter.close()


def run(source: str) -> Diagnostics:
    """Convenience function to run a Lox program from a source string."""
    session = Session()
    try:
        return session.run(source)
    finally:
        session.close()
