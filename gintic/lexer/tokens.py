import enum
import dataclasses as dc


class Category(enum.Enum):
    KEYWORD = 'Keyword'
    IDENTIFIER = 'Identifier'
    NUMBER = 'Number'
    OPERATOR = 'Operator'
    SEPARATOR = 'Separator'
    COMMENT = 'Comment'
    STRING = 'StringLiteral'
    CHAR = 'CharLiteral'
    UNKNOWN = 'Unknown'

    def __str__(self):
        return self.value


@dc.dataclass(frozen=True)
class Token:
    category: Category
    text: str
    line: int
    column: int

    @property
    def position(self):
        return self.line, self.column

    def __str__(self):
        return self.text


class Spelling(enum.Enum):
    """Fixed literal spellings, matched exactly in definition order"""

    def __str__(self):
        return self.value


keywords = []
def include_keywords(cls):
    keywords.extend(cls)
    return cls


# The keywords that introduce a declaration of a variable of that type
@include_keywords
class TypeKeyword(Spelling):
    GINTI = 'Ginti'
    POINT_WALA_NUMBER = 'PointWalaNumber'
    SACH_GHOOT = 'SachGhoot'
    HARF = 'harf'


@include_keywords
class StmtKeyword(Spelling):
    DEKHAO = 'dekhao'


class Operator(Spelling):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    MOD = '%'
    POW = '^'
    ASSIGN = '='


class Separator(Spelling):
    LPAREN = '('
    RPAREN = ')'
    LCURLY = '{'
    RCURLY = '}'
    LSQUARE = '['
    RSQUARE = ']'
    SEMICOLON = ';'
    COMMA = ','
