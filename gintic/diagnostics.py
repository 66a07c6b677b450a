"""
Diagnostic sinks: where lexical problems end up.

A sink is anything with a ``report(message, line, column)`` method.  Every
report is an error; sinks keep no tally and never raise.
"""

import abc
import sys
import dataclasses as dc


class DiagnosticSink(abc.ABC):
    @abc.abstractmethod
    def report(self, message, line, column):
        pass


@dc.dataclass(frozen=True)
class Diagnostic:
    message: str
    line: int
    column: int

    def get_info(self, source):
        from gintic.lexer.scanner import trim
        # Mimic gcc error messages
        info = f'{source.filename}:{self.line}:{self.column}: {self.message}'
        if 0 < self.line <= len(source):
            # Columns are relative to the trimmed line, so show it trimmed
            info += f'\n{self.line:5} | {trim(source[self.line - 1])}'
            info += '\n      | ' + (' ' * (self.column - 1)) + '^'
        return info

    def __str__(self):
        return f'Error at line {self.line}, column {self.column}: {self.message}'


class StreamSink(DiagnosticSink):
    def __init__(self, stream=None):
        self.stream = stream

    def report(self, message, line, column):
        # sys.stderr is looked up late so that it can be swapped out
        stream = sys.stderr if self.stream is None else self.stream
        print(Diagnostic(message, line, column), file=stream)


class DiagnosticList(DiagnosticSink, list):
    """Collects diagnostics in the order they were reported"""

    def report(self, message, line, column):
        self.append(Diagnostic(message, line, column))

    @property
    def messages(self):
        return [diag.message for diag in self]
