import ply.lex as lex
import sys

#identifiers are truncated past this length (same cap as the symbol records)
MAX_NAME_LEN = 29


class StatementSyntaxError(Exception):
    """Raised when a line matches no known statement shape."""


#reserved words (type keywords stay as ID, the type catalog resolves them)
reserved_map = {
    'void': 'VOID',
}

#tokens
tokens = list(reserved_map.values()) + ['ID', 'NUMBER', 'CHAR_LITERAL']

#literal symbols
literals = [';', ',', '=', '(', ')', '{', '}', '+', '-', '*', '/', '%']


#comments (// ___) come first so '/' is not taken as a literal
def t_COMMENT(t):
    r'//[^\n]*'
    pass

def t_CHAR_LITERAL(t):
    r"'([^'\\]|\\.)'"
    return t

#int and float literals are kept as text, the operand is only traced
def t_NUMBER(t):
    r'\d+(\.\d+)?'
    return t

def t_ID(t):
    r'[a-zA-Z_][a-zA-Z0-9_]*'
    t.type = reserved_map.get(t.value, 'ID')
    t.value = t.value[:MAX_NAME_LEN]
    return t

t_ignore = ' \t\r'


def t_newline(t):
    r'\n+'
    t.lexer.lineno += len(t.value)

def t_error(t):
    raise StatementSyntaxError(f"Illegal character '{t.value[0]}'")


lexer = lex.lex()


def tokenize(text):
    """(type, value) pairs of one line, raising StatementSyntaxError on bad input."""
    lexer.input(text)
    return [(tok.type, tok.value) for tok in iter(lexer.token, None)]


if __name__ == "__main__":
    for num, raw in enumerate(sys.stdin, start=1):
        try:
            pairs = tokenize(raw)
        except StatementSyntaxError as e:
            print(f"{num:>3}: {e}")
            continue
        print(f"{num:>3}: " + " ".join(f"{kind}({value})" for kind, value in pairs))
