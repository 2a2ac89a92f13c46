import pytest

from frontend.ast.tree import *
from frontend.typecheck.namer import Namer
from main import step_check, step_parse
from utils.error import (
    AssignmentTypeMismatchError,
    InvalidConditionError,
    InvalidExpressionTypeError,
    MultipleDeclarationError,
    UndeclaredVariableError,
    UnknownTypeError,
)


def check(code: str):
    return step_check(step_parse(code))


def test_empty_program_counts_nothing():
    metrics = check("")
    assert str(metrics) == "{VAR:0, WHILE:0, IF:0, OP:0}"


def test_counters_over_a_whole_program():
    code = """
    declare i: int = 0;
    declare done: bool = false;
    while (i < 10 && !done) {
        i = i + 1;
        if (i == 5) {
            done = true;
        } else {
            declare j: float = 1.5 * 2.0;
        }
    }
    do {
        i = i - 1;
    } while (i > 0);
    declare k: int = done ? 1 : -1;
    """
    assert str(check(code)) == "{VAR:4, WHILE:2, IF:2, OP:9}"


def test_multiple_declaration():
    with pytest.raises(MultipleDeclarationError, match="Identifier x has multiple declarations"):
        check("declare x: int; declare x: bool;")


def test_multiple_declaration_reported_before_unknown_type():
    with pytest.raises(MultipleDeclarationError):
        check("declare x: int; declare x: string;")


def test_unknown_type():
    with pytest.raises(UnknownTypeError, match="undefined Identifier string"):
        check("declare s: string;")


def test_assignment_to_undeclared():
    with pytest.raises(UndeclaredVariableError, match="Variable x was not declared"):
        check("x = 1;")


def test_assignment_target_checked_before_value():
    with pytest.raises(UndeclaredVariableError, match="Variable x was not declared"):
        check("x = y;")


def test_assignment_type_mismatch():
    with pytest.raises(AssignmentTypeMismatchError, match="Invalid type in assignation of Identifier x"):
        check("declare x: int = 1; x = true;")


def test_initializer_type_mismatch():
    with pytest.raises(AssignmentTypeMismatchError):
        check("declare f: float = 1;")


def test_rejected_declaration_is_still_counted():
    namer = Namer()
    with pytest.raises(AssignmentTypeMismatchError):
        namer.transform(step_parse("declare x: int = true;"))
    assert namer.metrics.var == 1


def test_declaration_without_initializer():
    assert check("declare l: list; l = [];").var == 1


def test_numeric_if_condition():
    with pytest.raises(InvalidConditionError, match="Invalid type in condition"):
        check("if (1) { }")


@pytest.mark.parametrize(
    "code",
    [
        "declare n: int; while (n) { }",
        "declare n: int; do { } while (n + 1);",
    ],
)
def test_numeric_loop_condition(code):
    with pytest.raises(InvalidConditionError):
        check(code)


def test_heterogeneous_list():
    with pytest.raises(InvalidExpressionTypeError):
        check("declare l: list = [1, 2, true];")


def test_chained_ordering():
    metrics = check("declare b: bool = 1 < 2 < 3;")
    assert metrics.op == 2


def test_parenthesized_comparison_is_not_a_chain():
    with pytest.raises(InvalidExpressionTypeError):
        check("declare b: bool = (1 < 2) < 3;")


def test_ordering_then_equality():
    assert check("declare b: bool = 1 < 2 == true;").op == 2


def test_equality_of_bool_and_ordering():
    assert check("declare b: bool = true == 1 < 2;").op == 2
    assert check("declare b: bool = 1 < 2 != 2.0 >= 1.5;").op == 3


def test_bool_equals_int():
    with pytest.raises(InvalidExpressionTypeError):
        check("declare b: bool = true == 1;")


def test_no_implicit_promotion():
    with pytest.raises(InvalidExpressionTypeError):
        check("declare x: float = 1 + 2.0;")


def test_block_declaration_does_not_escape():
    with pytest.raises(UndeclaredVariableError, match="Variable y was not declared"):
        check("if (true) { declare y: int = 1; } y = 2;")


def test_outer_variable_visible_inside_block():
    code = """
    declare x: int = 1;
    while (x < 3) {
        x = x + 1;
        declare y: int = x;
    }
    """
    metrics = check(code)
    assert metrics.var == 2
    assert metrics.while_ == 1


def test_loop_local_declaration_does_not_escape():
    with pytest.raises(UndeclaredVariableError):
        check("while (true) { declare y: int; } y = 1;")


def test_redeclaring_outer_variable_in_block():
    with pytest.raises(MultipleDeclarationError):
        check("declare x: int; if (true) { declare x: bool; }")


def test_sibling_blocks_have_separate_scopes():
    code = """
    if (true) {
        declare y: int = 1;
    } else {
        declare y: bool = false;
    }
    declare y: float = 0.5;
    """
    assert check(code).var == 3


def test_else_if_chain():
    code = """
    declare n: int = 3;
    if (n < 0) {
        n = 0;
    } else if (n > 10) {
        n = 10;
    } else {
        n = n * 2;
    }
    """
    metrics = check(code)
    assert metrics.if_ == 2
    assert metrics.op == 3


def test_nested_ternary_condition():
    with pytest.raises(InvalidConditionError):
        check("declare x: int = 1 ? 2 : 3;")


def test_nested_blocks():
    code = """
    declare a: int = 0;
    while (a < 2) {
        declare b: int = a;
        if (b == 0) {
            declare c: int = a + b;
            a = c + 1;
        }
        b = 5;
    }
    """
    assert str(check(code)) == "{VAR:3, WHILE:1, IF:1, OP:4}"


def test_rerun_gives_identical_results():
    program = step_parse("declare x: int = 1; if (x > 0) { x = -x; }")
    namer = Namer()
    first = namer.transform(program)
    second = namer.transform(program)
    assert first == second
    assert first is not second
    assert str(step_check(program)) == str(first)


def test_rerun_after_failure():
    program = step_parse("declare x: int = 1; x = 2.0;")
    for _ in range(2):
        with pytest.raises(AssignmentTypeMismatchError):
            step_check(program)


def test_hand_built_tree_with_empty_condition():
    program = Program(
        IfStmt(IfCond(), IfBlock()),
        WhileStmt(WhileCond(), WhileBlock()),
    )
    assert str(step_check(program)) == "{VAR:0, WHILE:1, IF:1, OP:0}"


def test_hand_built_declaration_with_empty_value():
    program = Program(Declaration(TypeLiteral("int"), Identifier("x"), GenValue()))
    with pytest.raises(AssignmentTypeMismatchError):
        step_check(program)
