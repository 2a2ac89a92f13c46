"""
Module that defines a parser using `ply.yacc`.
Add your own parser rules on demand, which can be accomplished by:

1. Define a global function whose name starts with "p_".
2. Write the corresponding grammar rule(s) in its docstring.
3. Complete the function body, which is actually a syntax-directed translation
   scheme (SDTS) producing the AST.

Operator chains are built left to right into one n-ary node per precedence level,
unless the left operand was written in parentheses.

Refer to https://www.dabeaz.com/ply/ply.html for more details.
"""

import ply.yacc as yacc

from frontend.ast.node import BinaryOp
from frontend.ast.tree import *
from frontend.lexer.lex import tokens
from utils.error import MiniSyntaxError


def _chain(cls, lhs, op: str, rhs):
    binop = BinaryOp(op)
    if isinstance(lhs, cls) and not lhs.getattr("parenthesized"):
        #! 比较链只合并同一族的运算符
        if not isinstance(lhs, CompExpr) or lhs.op.sameFamily(binop):
            lhs.ops.append(binop)
            lhs.children.append(rhs)
            return lhs
    return cls([binop], lhs, rhs)


def p_program(p):
    """
    program : statement_list
    """
    p[0] = Program(*p[1])


def p_statement_list(p):
    """
    statement_list : statement_list statement
    """
    p[1].append(p[2])
    p[0] = p[1]


def p_statement_list_empty(p):
    """
    statement_list : empty
    """
    p[0] = []


def p_empty(p):
    """
    empty :
    """
    pass


def p_statement(p):
    """
    statement : declaration
        | assignment
        | if
        | while
        | do_while
    """
    p[0] = p[1]


def p_declaration(p):
    """
    declaration : Declare Identifier Colon Identifier Semi
    """
    p[0] = Declaration(TypeLiteral(p[4]), Identifier(p[2]))


def p_declaration_init(p):
    """
    declaration : Declare Identifier Colon Identifier Assign expression Semi
    """
    p[0] = Declaration(TypeLiteral(p[4]), Identifier(p[2]), p[6])


def p_assignment(p):
    """
    assignment : Identifier Assign expression Semi
    """
    p[0] = Assignment(Identifier(p[1]), p[3])


def p_if(p):
    """
    if : If LParen expression RParen LBrace statement_list RBrace
    """
    p[0] = IfStmt(IfCond(p[3]), IfBlock(*p[6]))


def p_if_else(p):
    """
    if : If LParen expression RParen LBrace statement_list RBrace Else LBrace statement_list RBrace
    """
    p[0] = IfStmt(IfCond(p[3]), IfBlock(*p[6]), ElseBlock(*p[10]))


def p_if_else_if(p):
    """
    if : If LParen expression RParen LBrace statement_list RBrace Else if
    """
    p[0] = IfStmt(IfCond(p[3]), IfBlock(*p[6]), ElseBlock(p[9]))


def p_while(p):
    """
    while : While LParen expression RParen LBrace statement_list RBrace
    """
    p[0] = WhileStmt(WhileCond(p[3]), WhileBlock(*p[6]))


def p_do_while(p):
    """
    do_while : Do LBrace statement_list RBrace While LParen expression RParen Semi
    """
    p[0] = DoWhileStmt(WhileBlock(*p[3]), WhileCond(p[7]))


def p_expression(p):
    """
    expression : ternary
    """
    p[0] = p[1]


def p_ternary(p):
    """
    ternary : logical Question ternary Colon ternary
    """
    p[0] = Ternary(p[1], p[3], p[5])


def p_logical(p):
    """
    logical : logical And equality
        | logical Or equality
    """
    p[0] = _chain(LogExpr, p[1], p[2], p[3])


def p_equality(p):
    """
    equality : equality Equal relational
        | equality NotEqual relational
    """
    p[0] = _chain(CompExpr, p[1], p[2], p[3])


def p_relational(p):
    """
    relational : relational Less additive
        | relational LessEqual additive
        | relational Greater additive
        | relational GreaterEqual additive
    """
    p[0] = _chain(CompExpr, p[1], p[2], p[3])


def p_additive(p):
    """
    additive : additive Plus multiplicative
        | additive Minus multiplicative
    """
    p[0] = _chain(AddExpr, p[1], p[2], p[3])


def p_multiplicative(p):
    """
    multiplicative : multiplicative Mul unary
        | multiplicative Div unary
        | multiplicative Mod unary
    """
    p[0] = _chain(MulExpr, p[1], p[2], p[3])


def p_unary_not(p):
    """
    unary : Not unary
    """
    p[0] = NotExpr(p[2])


def p_unary_neg(p):
    """
    unary : Minus unary
    """
    p[0] = NegExpr(p[2])


def p_passthrough(p):
    """
    ternary : logical
    logical : equality
    equality : relational
    relational : additive
    additive : multiplicative
    multiplicative : unary
    unary : primary
    """
    p[0] = p[1]


def p_primary_int(p):
    """
    primary : Integer
    """
    p[0] = GenValue(IntLiteral(p[1]))


def p_primary_real(p):
    """
    primary : Real
    """
    p[0] = GenValue(FloatLiteral(p[1]))


def p_primary_bool(p):
    """
    primary : True
        | False
    """
    p[0] = GenValue(BoolLiteral(p[1] == "true"))


def p_primary_identifier(p):
    """
    primary : Identifier
    """
    p[0] = GenValue(Identifier(p[1]))


def p_primary_paren(p):
    """
    primary : LParen expression RParen
    """
    p[2].setattr("parenthesized", True)
    p[0] = p[2]


def p_primary_list(p):
    """
    primary : LBracket expression_list RBracket
    """
    p[0] = ListExpr(*p[2])


def p_primary_list_empty(p):
    """
    primary : LBracket RBracket
    """
    p[0] = ListExpr()


def p_expression_list(p):
    """
    expression_list : expression_list Comma expression
    """
    p[1].append(p[3])
    p[0] = p[1]


def p_expression_list_single(p):
    """
    expression_list : expression
    """
    p[0] = [p[1]]


def p_error(t):
    """
    Record the error and give up on the rest of the input.
    """
    parser.error_stack.append(MiniSyntaxError(t))
    if t:
        # Only the first error is reported, skip the rest of the input.
        while parser.token():
            pass


parser = yacc.yacc(start="program", debug=False, write_tables=False)
parser.error_stack = []
