from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

# DEBUG = True
DEBUG = False


class IndentingWriter:
    """Prints user output, and indented trace output when debugging is on."""

    def __init__(
        self,
        indent_size: int = 3,
        debug: bool | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self._indent_size = indent_size
        self._indents = 0
        self._debug = DEBUG if debug is None else debug
        self._stream = stream

    @property
    def debugging(self) -> bool:
        return self._debug

    def debug(self, message: str) -> None:
        if self._debug:
            self._print_indentation()
            self._write(message)

    def debugln(self, message: str) -> None:
        if self._debug:
            self.debug(message)
            self._write("\n")

    def print(self, message: str) -> None:
        self._print_indentation()
        self._write(message)

    def println(self, message: str) -> None:
        self.print(message + "\n")

    def newline(self) -> None:
        self._write("\n")

    def indent(self) -> None:
        if self._debug:
            self._indents += 1

    def dedent(self) -> None:
        if self._debug:
            self._indents -= 1

    def flush(self) -> None:
        self._output().flush()

    def _print_indentation(self) -> None:
        if self._debug:
            self._write(" " * self._indent_size * self._indents)

    def _write(self, text: str) -> None:
        self._output().write(text)

    def _output(self) -> TextIO:
        # Resolved lazily so pytest's capsys sees the swapped sys.stdout.
        return self._stream if self._stream is not None else sys.stdout


@contextmanager
def indented_output(output_writer: IndentingWriter) -> Iterator[None]:
    output_writer.indent()
    try:
        yield
    finally:
        output_writer.dedent()
