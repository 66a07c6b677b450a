"""
Human-readable dumps of tokens and symbols.

None of this affects what the lexer produces.  In particular the "DFA
state" trace just numbers the characters of each lexeme; there is no
automaton behind it.
"""

import re
from gintic.lexer import readers
from gintic.lexer.scanner import trim
from gintic.lexer.tokens import Operator, Separator, keywords


def format_token(tok):
    return (f"Token[{tok.category}, '{tok.text}', "
            f"line={tok.line}, col={tok.column}]")


def format_tokens(tokens):
    lines = ['---- Token List ----']
    lines.extend(format_token(tok) for tok in tokens)
    lines.append(f'Total tokens: {len(tokens)}')
    return lines


def format_symbol(sym):
    type_name = 'null' if sym.declared_type is None else str(sym.declared_type)
    return f'Symbol[name={sym.name}, type={type_name}, scope={sym.scope.name}]'


def format_symbols(table):
    return ['---- Symbol Table ----', *map(format_symbol, table.values())]


def _alternatives(spellings):
    return '|'.join(re.escape(str(spelling)) for spelling in spellings)

def regex_info():
    return [
        ('Keyword', f'({_alternatives(keywords)})'),
        ('Identifier', readers.ident_pattern.pattern),
        ('Number', readers.number_literal.pattern),
        ('Operator', f'({_alternatives(Operator)})'),
        ('Separator', f'({_alternatives(Separator)})'),
        ('Single-line Comment', readers.line_comment.pattern),
        ('Multi-line Comment', readers.block_comment.pattern),
        ('String Literal', readers.string_literal.pattern),
        ('Character Literal', readers.char_literal.pattern),
    ]


def format_regex_info():
    info = regex_info()
    width = max(len(label) for label, _ in info) + 1
    lines = ['---- Regular Expressions Used ----']
    lines.extend(f'{label + ":":<{width}} {pattern}' for label, pattern in info)
    lines.append('-' * 34)
    return lines


def format_state_trace(tokens):
    lines = ['---- DFA State Simulation for Each Token ----']
    for tok in tokens:
        if not trim(tok.text):
            continue
        states = ' -> '.join(
            f'State{state}({char})'
            for state, char in enumerate(tok.text, start=1)
        )
        lines.append(f"Token '{tok.text}': {states} -> Accept")
    return lines
