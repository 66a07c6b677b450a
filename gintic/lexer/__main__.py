from gintic.lexer import tokenize, SourceCode
from gintic.report import format_token
import sys

def main(filename):
    for tok in tokenize(SourceCode.from_file(filename)):
        print(format_token(tok))

if __name__ == '__main__':
    main(sys.argv[1])
