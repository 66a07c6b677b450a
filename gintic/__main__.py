from gintic.lexer import SourceCode, tokenize
from gintic.symbols import build
from gintic.diagnostics import DiagnosticList
from gintic import report
import argparse
import sys


gintic = argparse.ArgumentParser(
    description='Tokenize a Ginti source file and collect its declarations',
    prog='gintic'
)

gintic.add_argument(
    'input', nargs='?', default='source.txt',
    help='the Ginti source file to read [default: source.txt]'
)

gintic.add_argument(
    '--regex', help='list the regular expressions used by the lexer',
    action='store_true'
)

gintic.add_argument(
    '--trace', help='show the character-by-character state trace of each token',
    action='store_true'
)

gintic.add_argument(
    '--no-tokens', dest='tokens', help='do not list the tokens',
    action='store_false'
)

gintic.add_argument(
    '--no-symbols', dest='symbols', help='do not print the symbol table',
    action='store_false'
)

gintic.add_argument(
    '--nested-scopes', help='track scope through nested blocks',
    action='store_true'
)

gintic.add_argument(
    '--context', help='show the offending source line with each error',
    action='store_true'
)

gintic.add_argument(
    '--strict', help='exit with status 1 if any error was reported',
    action='store_true'
)


def main(argv=None):
    args = gintic.parse_args(argv)

    try:
        source = SourceCode.from_file(args.input)
    except OSError as err:
        gintic.error(str(err))

    diagnostics = DiagnosticList()
    tokens = tokenize(source, diagnostics)
    table = build(tokens, diagnostics, nested_scopes=args.nested_scopes)

    output = []
    if args.regex:
        output += report.format_regex_info()
    if args.tokens:
        output += report.format_tokens(tokens)
    if args.trace:
        output += report.format_state_trace(tokens)
    if args.symbols:
        output += report.format_symbols(table)
    for line in output:
        print(line)

    for diag in diagnostics:
        print(diag.get_info(source) if args.context else diag, file=sys.stderr)

    if args.strict and diagnostics:
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
