import re
import enum
import dataclasses as dc

from gintic.lexer.tokens import Category, Separator, TypeKeyword
from gintic.diagnostics import StreamSink
from gintic.errors import SymbolError


class Scope(enum.Enum):
    GLOBAL = 'Global'
    LOCAL = 'Local'

    def __str__(self):
        return self.value


@dc.dataclass(frozen=True)
class Symbol:
    name: str
    declared_type: TypeKeyword | None
    scope: Scope


name_pattern = re.compile(r'[a-z][a-zA-Z0-9_]*')


class SymbolTable(dict):
    """
    Declared names, keyed by name alone.

    There is no shadowing: declaring a name again replaces the previous
    symbol, whatever scope either declaration was in.
    """

    def declare(self, tok, declared_type, scope):
        if not name_pattern.fullmatch(tok.text):
            raise SymbolError.invalid_identifier(tok, name=tok.text)
        self[tok.text] = Symbol(tok.text, declared_type, scope)


class ScopeTracker:
    # A stack of frames that only ever holds Global at the bottom and
    # Local above it.  Flat tracking never lets it grow past two frames,
    # so any } goes straight back to Global.
    def __init__(self, nested=False):
        self.nested = nested
        self.frames = [Scope.GLOBAL]

    @property
    def current(self):
        return self.frames[-1]

    def enter(self):
        if self.nested or len(self.frames) == 1:
            self.frames.append(Scope.LOCAL)

    def exit(self):
        if not self.nested:
            del self.frames[1:]
        elif len(self.frames) > 1:
            self.frames.pop()


type_keywords = {str(kw): kw for kw in TypeKeyword}

def build(tokens, sink=None, nested_scopes=False):
    """
    Pick out declarations in a single pass over tokens.

    A declaration is simply a type keyword followed by an identifier, with
    anything other than another keyword allowed in between.  Nothing
    checks that the tokens form an actual declaration statement.
    """
    if sink is None:
        sink = StreamSink()

    table = SymbolTable()
    scopes = ScopeTracker(nested_scopes)
    # The type keyword still waiting for its identifier, if any
    pending = None

    for tok in tokens:
        if tok.category is Category.SEPARATOR:
            if tok.text == str(Separator.LCURLY):
                scopes.enter()
            elif tok.text == str(Separator.RCURLY):
                scopes.exit()
        elif tok.category is Category.KEYWORD:
            pending = type_keywords.get(tok.text)
        elif tok.category is Category.IDENTIFIER and pending is not None:
            try:
                table.declare(tok, pending, scopes.current)
            except SymbolError as err:
                err.report(sink)
            pending = None

    return table
