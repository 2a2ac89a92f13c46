import ply.lex as lex

from utils.error import MiniLexError

from .lex import *


def t_error(t):
    t.lexer.error_stack.append(MiniLexError(t.value[0], t.lineno))
    t.lexer.skip(1)


lexer = lex.lex()
lexer.error_stack = []
