import pytest

from frontend.ast.node import NULL, BinaryOp
from frontend.ast.tree import *
from main import step_parse
from utils.error import MiniLexError, MiniSyntaxError


def init_of(code: str):
    program = step_parse(code)
    assert len(program) == 1
    return program[0].init_expr


def test_declaration_shape():
    decl = step_parse("declare x: int = 1;")[0]
    assert isinstance(decl, Declaration)
    assert decl.var_t.value == "int"
    assert isinstance(decl.ident, Identifier)
    assert decl.ident.value == "x"
    assert isinstance(decl.init_expr, GenValue)
    assert decl.init_expr.value.value == 1


def test_declaration_without_initializer():
    decl = step_parse("declare l: list;")[0]
    assert decl.init_expr is NULL


def test_unknown_type_keyword_still_parses():
    assert step_parse("declare s: string;")[0].var_t.value == "string"


def test_identifiers_in_value_position_are_wrapped():
    stmt = step_parse("x = y;")[0]
    assert isinstance(stmt, Assignment)
    assert stmt.ident.value == "x"
    assert isinstance(stmt.expr, GenValue)
    assert isinstance(stmt.expr.value, Identifier)


def test_literals():
    elements = init_of("declare l: list = [1, 2.5, .5, true, false];").children
    values = [element.value for element in elements]
    assert [type(v) for v in values] == [IntLiteral, FloatLiteral, FloatLiteral, BoolLiteral, BoolLiteral]
    assert [v.value for v in values] == [1, 2.5, 0.5, True, False]


def test_additive_chain_is_flat():
    expr = init_of("declare x: int = 1 + 2 - 3;")
    assert isinstance(expr, AddExpr)
    assert len(expr) == 3
    assert expr.ops == [BinaryOp.Add, BinaryOp.Sub]


def test_precedence():
    expr = init_of("declare x: int = 1 + 2 * 3 % 4;")
    assert isinstance(expr, AddExpr)
    assert isinstance(expr[1], MulExpr)
    assert expr[1].ops == [BinaryOp.Mul, BinaryOp.Mod]


def test_parentheses_stop_chaining():
    expr = init_of("declare x: int = (1 + 2) + 3;")
    assert isinstance(expr, AddExpr)
    assert len(expr) == 2
    assert isinstance(expr[0], AddExpr)


def test_comparison_chain_same_family():
    expr = init_of("declare b: bool = a < b <= c > d;")
    assert isinstance(expr, CompExpr)
    assert len(expr) == 4
    assert expr.op is BinaryOp.LT


def test_comparison_family_change_nests():
    expr = init_of("declare b: bool = a < b == c != d;")
    assert isinstance(expr, CompExpr)
    assert expr.ops == [BinaryOp.EQ, BinaryOp.NE]
    assert len(expr) == 3
    assert isinstance(expr[0], CompExpr)
    assert expr[0].op is BinaryOp.LT


def test_equality_binds_looser_than_ordering():
    expr = init_of("declare b: bool = true == 1 < 2;")
    assert isinstance(expr, CompExpr)
    assert expr.ops == [BinaryOp.EQ]
    assert isinstance(expr[1], CompExpr)
    assert expr[1].ops == [BinaryOp.LT]

    expr = init_of("declare b: bool = a == b < c;")
    assert expr.op is BinaryOp.EQ
    assert isinstance(expr[0], GenValue)
    assert expr[1].op is BinaryOp.LT


def test_logical_chain():
    expr = init_of("declare b: bool = a && b || !c;")
    assert isinstance(expr, LogExpr)
    assert expr.ops == [BinaryOp.LogicAnd, BinaryOp.LogicOr]
    assert isinstance(expr[2], NotExpr)


def test_unary_minus():
    expr = init_of("declare x: int = a - -b;")
    assert isinstance(expr, AddExpr)
    assert isinstance(expr[1], NegExpr)


def test_ternary():
    expr = init_of("declare x: int = a ? 1 : b ? 2 : 3;")
    assert isinstance(expr, Ternary)
    assert len(expr) == 3
    assert isinstance(expr[2], Ternary)


def test_if_else_if():
    stmt = step_parse("if (a) { } else if (b) { x = 1; } else { }")[0]
    assert isinstance(stmt, IfStmt)
    assert isinstance(stmt.cond, IfCond)
    assert isinstance(stmt.otherwise, ElseBlock)
    inner = stmt.otherwise[0]
    assert isinstance(inner, IfStmt)
    assert len(inner.then) == 1
    assert isinstance(inner.otherwise, ElseBlock)


def test_if_without_else():
    assert step_parse("if (a) { }")[0].otherwise is NULL


def test_loops():
    loop, do_loop = step_parse("while (a) { x = 1; } do { x = 2; } while (b);")
    assert isinstance(loop, WhileStmt)
    assert isinstance(loop.cond, WhileCond)
    assert isinstance(loop.body, WhileBlock)
    assert isinstance(do_loop, DoWhileStmt)
    assert isinstance(do_loop.body, WhileBlock)
    assert len(do_loop.body) == 1


def test_comments_are_ignored():
    program = step_parse("// leading\ndeclare x: int; // trailing\n")
    assert len(program) == 1


def test_lex_error():
    with pytest.raises(MiniLexError, match="line 2"):
        step_parse("declare x: int;\nx = 1 $ 2;")


@pytest.mark.parametrize(
    "newlines, line",
    [("\n", 2), ("\r\n", 2), ("\r", 2), ("\r\r\n", 3), ("\n\r\n\r", 4)],
)
def test_lex_error_line_counts_every_newline_style(newlines, line):
    with pytest.raises(MiniLexError, match=f"line {line}:"):
        step_parse("declare x: int;" + newlines + "$")


def test_syntax_error():
    with pytest.raises(MiniSyntaxError):
        step_parse("declare x int;")


def test_unexpected_end_of_input():
    with pytest.raises(MiniSyntaxError, match="end of input"):
        step_parse("if (a) {")


def test_parse_state_does_not_leak():
    with pytest.raises(MiniSyntaxError):
        step_parse("x = ;")
    assert len(step_parse("x = 1;")) == 1
