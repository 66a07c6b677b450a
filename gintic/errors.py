def _message(m):
    @classmethod
    def builder(cls, *args, **format_vars):
        return cls(m.format(**format_vars), *args)
    return builder


class CompilerError(Exception):
    def __init__(self, message, context):
        from gintic.lexer import Cursor, Token
        super().__init__(message)
        # Tokens carry 1-based positions, cursors are 0-based
        if isinstance(context, Token):
            context = Cursor(context.line - 1, context.column - 1)
        self.cursor = context

    @property
    def line(self):
        return self.cursor.lineno

    @property
    def column(self):
        return self.cursor.colno

    def report(self, sink):
        sink.report(str(self), self.line, self.column)


class LexerError(CompilerError):
    unterminated_string = _message('Unterminated string literal')
    invalid_char = _message('Invalid character literal')
    unrecognized = _message('Unrecognized token: {char}')

class SymbolError(CompilerError):
    invalid_identifier = _message(
        "Invalid identifier: '{name}'. Must match ^[a-z][a-zA-Z0-9_]*$"
    )

class InternalCompilerError(Exception):
    pass
