"""Properties of the lexer and symbol table that hold for any input."""

from hypothesis import given, settings
from hypothesis import strategies as st

from gintic.lexer import tokenize, SourceCode, Category
from gintic.lexer.scanner import trim
from gintic.lexer.tokens import TypeKeyword, keywords
from gintic.symbols import build, name_pattern
from gintic.diagnostics import DiagnosticList


# Mostly things the language knows about, plus a few it doesn't
alphabet = st.sampled_from(list(
    'GintiPoWalNumberSchGhfdkxyz_0129.+-*/%^=(){}[];,"\' \t\n\r@#$'
))
sources = st.text(alphabet=alphabet, max_size=300) | st.text(max_size=100)


def run(source):
    diagnostics = DiagnosticList()
    return tokenize(source, diagnostics), diagnostics


@given(sources)
@settings(max_examples=200)
def test_tokens_in_source_order(source):
    tokens, _ = run(source)
    positions = [tok.position for tok in tokens]
    assert positions == sorted(positions)
    assert len(set(positions)) == len(positions)

@given(sources)
@settings(max_examples=200)
def test_tokens_match_source(source):
    lines = SourceCode.from_string(source)
    tokens, _ = run(source)
    for tok in tokens:
        assert tok.text
        assert 1 <= tok.line <= len(lines)
        assert tok.column >= 1
        line = trim(lines[tok.line - 1])
        assert line[tok.column - 1:].startswith(tok.text)

@given(sources)
@settings(max_examples=100)
def test_idempotent(source):
    assert run(source) == run(source)

@given(sources)
@settings(max_examples=200)
def test_unknown_tokens_are_reported(source):
    tokens, diagnostics = run(source)
    unknown = [tok for tok in tokens if tok.category is Category.UNKNOWN]
    unrecognized = [diag for diag in diagnostics
                    if diag.message.startswith('Unrecognized token: ')]
    assert len(unknown) == len(unrecognized)
    for tok, diag in zip(unknown, unrecognized):
        assert len(tok.text) == 1
        assert diag.message == f'Unrecognized token: {tok.text}'
        assert (diag.line, diag.column) == tok.position

@given(sources)
@settings(max_examples=100)
def test_diagnostics_in_source_order(source):
    _, diagnostics = run(source)
    positions = [(diag.line, diag.column) for diag in diagnostics]
    assert positions == sorted(positions)

@given(st.sampled_from(keywords))
def test_keyword_alone(keyword):
    tokens, diagnostics = run(str(keyword))
    assert [(tok.category, tok.text) for tok in tokens] == \
        [(Category.KEYWORD, str(keyword))]
    assert diagnostics == []

@given(sources, st.booleans())
@settings(max_examples=100)
def test_symbols_are_well_formed(source, nested):
    tokens, diagnostics = run(source)
    table = build(tokens, diagnostics, nested_scopes=nested)
    declared = {tok.text for tok in tokens if tok.category is Category.IDENTIFIER}
    for name, sym in table.items():
        assert sym.name == name
        assert name in declared
        assert name_pattern.fullmatch(name)
        assert isinstance(sym.declared_type, TypeKeyword)
