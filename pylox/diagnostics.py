"""Error reporting for a Lox run.

A `Diagnostics` object collects every lexical, parse and runtime error
produced while running a piece of source and exposes the two flags the
command line uses to pick an exit status. Each session owns its own
instance, so independent runs never share error state.
"""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from pylox.errors import LoxRuntimeError
from pylox.tokens import Token, TokenType


class Diagnostics:
    def __init__(self, stream: Optional[TextIO] = None):
        # Resolved lazily so pytest's capsys sees the replaced sys.stderr.
        self._stream = stream
        self.had_error = False
        self.had_runtime_error = False
        self.messages: List[str] = []

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def scan_error(self, line: int, message: str) -> None:
        self._report(f"[line {line}] Error: {message}")
        self.had_error = True

    def parse_error(self, token: Token, message: str) -> None:
        if token.type == TokenType.EOF:
            where = 'at end'
        else:
            where = f"at '{token.lexeme}'"
        self._report(f"[line {token.line}] Error {where}: {message}")
        self.had_error = True

    def runtime_error(self, error: LoxRuntimeError) -> None:
        self._report(f"{error.message}\n[line {error.token.line}]")
        self.had_runtime_error = True

    def reset(self) -> None:
        """Clear the compile-error flag between interactive lines."""
        self.had_error = False

    def _report(self, text: str) -> None:
        self.messages.append(text)
        print(text, file=self.stream)
