import re
from gintic.lexer.tokens import Category, Operator, Separator, keywords
from gintic.errors import LexerError


# Space and line separators, minus the non-breaking spaces (NBSP, U+2007,
# U+202F), plus tabs, line breaks and the \x1c-\x1f information separators
whitespace = re.compile(
    r'[\t\n\x0b\x0c\r\x1c-\x1f \u1680\u2000-\u2006\u2008-\u200a'
    r'\u2028\u2029\u205f\u3000]+'
)
def skip_whitespace(scan):
    return scan.match(whitespace) is not None


line_comment = re.compile(r'//.*')
def read_line_comment(scan):
    # Swallows the rest of the line, so nothing else can follow it
    if scan.match(line_comment) is not None:
        return Category.COMMENT


# DOTALL is a bit of a lie: the scanner only ever hands us one line at a
# time, so a block comment has to be closed on the line it was opened.
block_comment = re.compile(r'/\*.*?\*/', re.DOTALL)
def read_block_comment(scan):
    if scan.match(block_comment) is not None:
        return Category.COMMENT


string_literal = re.compile(r'".*?"')
def read_string_token(scan):
    if scan.peek() != '"':
        return

    if scan.match(string_literal) is None:
        raise LexerError.unterminated_string(scan.cursor)
    return Category.STRING


char_literal = re.compile(r"'.'")
def read_char_token(scan):
    if scan.peek() != "'":
        return

    if scan.match(char_literal) is None:
        raise LexerError.invalid_char(scan.cursor)
    return Category.CHAR


# At most five digits after the point, any more are left for the next token
number_literal = re.compile(r'[0-9]+(?:\.[0-9]{1,5})?')
def read_number_token(scan):
    if scan.match(number_literal) is not None:
        return Category.NUMBER


def read_spelling(scan, spellings):
    for spelling in spellings:
        if scan.exact(str(spelling)):
            return spelling

def read_operator_token(scan):
    if read_spelling(scan, Operator):
        return Category.OPERATOR

def read_separator_token(scan):
    if read_spelling(scan, Separator):
        return Category.SEPARATOR

# No word boundary: "harfan" is the keyword harf followed by "an"
def read_keyword_token(scan):
    if read_spelling(scan, keywords):
        return Category.KEYWORD


ident_pattern = re.compile(r'[a-z][a-zA-Z0-9_]*')
def read_ident_token(scan):
    if scan.match(ident_pattern) is not None:
        return Category.IDENTIFIER


# Order matters!  Comments before operators (both start with /), literals
# before everything else that could claim a quote, and keywords before
# identifiers since every keyword spelled in lowercase is also a valid
# identifier.
token_readers = [
    read_line_comment, read_block_comment,
    read_string_token, read_char_token,
    read_number_token, read_operator_token, read_separator_token,
    read_keyword_token, read_ident_token
]
