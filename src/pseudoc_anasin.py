import ply.yacc as yacc
from pseudoc_analex import tokens, literals, lexer, StatementSyntaxError
import sys
import pprint

# every line is one statement; the result is a tuple whose first element is
# the statement kind, e.g. ('DECLARE', 'int', 'x')

def p_statement(p):
    '''
    statement : declaration
              | open_scope
              | close_scope
              | assignment
              | arith_assignment
    '''
    p[0] = p[1]

#declarations (an initializer is accepted but not analysed)
def p_declaration(p):
    '''
    declaration : ID ID ';'
                | ID ID '=' operand ';'
    '''
    p[0] = ('DECLARE', p[1], p[2])

#function-like bodies open the single local scope
def p_open_scope(p):
    '''
    open_scope : VOID ID '(' params ')' '{'
               | ID ID '(' params ')' '{'
    '''
    p[0] = ('OPEN_SCOPE', p[2])

#parameters only shape the header, they are not declared
def p_params(p):
    '''
    params : param_list
           | VOID
           | empty
    '''
    p[0] = p[1] if isinstance(p[1], list) else []

def p_param_list(p):
    '''
    param_list : param_list ',' param
               | param
    '''
    if len(p) == 2:
        p[0] = [p[1]]
    else:
        p[0] = p[1] + [p[3]]

def p_param(p):
    '''
    param : ID ID
    '''
    p[0] = (p[1], p[2])

def p_empty(p):
    'empty :'
    pass

def p_close_scope(p):
    '''
    close_scope : '}'
    '''
    p[0] = ('CLOSE_SCOPE',)

def p_assignment(p):
    '''
    assignment : ID '=' ID ';'
    '''
    p[0] = ('ASSIGN', p[1], p[3])

def p_arith_assignment(p):
    '''
    arith_assignment : ID '=' ID operator operand ';'
    '''
    # target, source, operator, operand
    p[0] = ('ARITH_ASSIGN', p[1], p[3], p[4], p[5])

def p_operator(p):
    '''
    operator : '+'
             | '-'
             | '*'
             | '/'
             | '%'
    '''
    p[0] = p[1]

def p_operand(p):
    '''
    operand : ID
            | NUMBER
            | CHAR_LITERAL
    '''
    p[0] = p[1]


def p_error(p):
    if p:
        raise StatementSyntaxError(f"Unexpected token '{p.value}'")
    raise StatementSyntaxError("Unexpected end of statement")


#execution
parser = yacc.yacc(debug=False, write_tables=False)


def classify(line):
    """
    Classifies one raw line.
    Returns None for blank and comment lines, ('UNRECOGNIZED', text) when
    the line has no known shape, and the statement tuple otherwise.
    """
    text = line.strip()
    if not text or text.startswith('//'):
        return None

    try:
        return parser.parse(text, lexer=lexer)
    except StatementSyntaxError:
        return ('UNRECOGNIZED', text)


if __name__ == "__main__":
    for raw in sys.stdin:
        stmt = classify(raw.rstrip('\n'))
        if stmt is not None:
            pprint.pprint(stmt)
