import re
from dataclasses import dataclass, field
from collections.abc import Sequence

from .tokens import Token
from gintic.errors import InternalCompilerError


# Any of the usual line terminators ends a physical line, not just \n
line_break = re.compile(r'\r\n|[\n\x0b\x0c\r\x85\u2028\u2029]')

# Control characters and space, not the wider Unicode idea of whitespace
blank = ''.join(map(chr, range(0x21)))

def trim(line):
    return line.strip(blank)


@dataclass
class SourceCode(Sequence):
    filename: str
    lines: Sequence[str]

    @classmethod
    def from_file(cls, filename):
        with open(filename, newline='') as file:
            return cls.from_string(file.read(), str(filename))

    @classmethod
    def from_string(cls, string, filename='<string>'):
        lines = line_break.split(string)
        # Trailing line breaks don't start new (empty) lines
        while len(lines) > 1 and not lines[-1]:
            lines.pop()
        return cls(filename, lines)

    def __getitem__(self, item):
        return self.lines[item]

    def __len__(self):
        return len(self.lines)

    def __repr__(self):
        return f'SourceCode.from_file({self.filename!r})'


@dataclass
class Scanner:
    source: SourceCode
    line: int = 0
    col: int = 0
    # Columns are counted from the first non-blank character of each line,
    # so the scanner only ever sees the trimmed lines.
    lines: list[str] = field(init=False, repr=False)

    def __post_init__(self):
        self.lines = [trim(line) for line in self.source]

    @property
    def curline(self):
        if self.line < len(self.lines):
            return self.lines[self.line]
        return ''

    def exact(self, string):
        length = len(string)
        if self.curline[self.col:self.col+length] == string:
            self.col += length
            return True
        return False

    def match(self, pat):
        mo = pat.match(self.curline, self.col)
        if mo is not None:
            self.col = mo.end()
            return mo.group()
        return None

    def peek(self, count=1):
        return self.curline[self.col:self.col+count]

    def read(self, count):
        string = self.peek(count)
        if len(string) == count:
            self.col += count
            return string
        return None

    def mark(self):
        return Marker(self, self.cursor)

    @property
    def cursor(self):
        return Cursor(self.line, self.col)

    @property
    def eol(self):
        return self.col >= len(self.curline)

    def skip_line(self):
        self.col = len(self.curline)

    def linebreak(self):
        if self.eol and self:
            self.line += 1
            self.col = 0
            return True
        return False

    def __bool__(self):
        # Is there any more to read?
        return not (self.eol and self.line >= (len(self.lines) - 1))

    def __repr__(self):
        return f'<Scanner L{self.line+1} {self.curline[self.col:]!r}>'


@dataclass(frozen=True)
class Cursor:
    line: int
    col: int

    # 1-based, for humans
    @property
    def lineno(self):
        return self.line + 1

    @property
    def colno(self):
        return self.col + 1


@dataclass
class Marker:
    scan: Scanner
    cursor: Cursor

    def collect(self, category):
        start, end = self.cursor, self.scan.cursor
        if start.line != end.line or start.col >= end.col:
            raise InternalCompilerError(
                f'Cannot collect a token from {start} to {end}'
            )

        text = self.scan.lines[start.line][start.col:end.col]
        self.cursor = end
        return Token(category, text, start.lineno, start.colno)
