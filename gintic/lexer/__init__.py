from . import tokens
from . import readers
from .tokens import Category, Token
from .scanner import Scanner, Cursor, SourceCode
from gintic.diagnostics import StreamSink
from gintic.errors import LexerError


def lex(source, sink):
    """
    Lazily produce the tokens of source, reporting lexical problems to sink.

    Every physical line is scanned on its own.  A broken string or
    character literal costs the rest of its line, an unrecognized
    character becomes a single Unknown token.  Nothing is fatal.
    """
    scan = Scanner(source)

    while scan:
        if scan.linebreak() or readers.skip_whitespace(scan):
            continue

        marker = scan.mark()
        try:
            for reader in readers.token_readers:
                category = reader(scan)
                if category is not None:
                    yield marker.collect(category)
                    break
            else:
                char = scan.read(1)
                LexerError.unrecognized(marker.cursor, char=char).report(sink)
                yield marker.collect(Category.UNKNOWN)
        except LexerError as err:
            err.report(sink)
            scan.skip_line()


def tokenize(source, sink=None):
    if isinstance(source, str):
        source = SourceCode.from_string(source)
    if sink is None:
        sink = StreamSink()
    return list(lex(source, sink))
