"""
Module that defines all AST nodes.
Reading this file to grasp the basic method of defining a new AST node is recommended.
Modify this file if you want to add a new AST node.

Operator nodes are n-ary: a chain like `a + b - c` is a single `AddExpr` with three
children, and the operators between them are kept apart from the children.
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar, Union

from utils import T, U

from .node import NULL, BinaryOp, Node, UnaryOp
from .visitor import Visitor

_T = TypeVar("_T", bound=Node)


def _index_len_err(i: int, node: Node):
    return IndexError(
        f"you are trying to index the #{i} child of node {node.name}, which has only {len(node)} children"
    )


class ListNode(Node, Generic[_T]):
    """
    Abstract node type that represents a node sequence.
    E.g. `IfBlock` (sequence of statements) or `AddExpr` (sequence of operands).
    """

    def __init__(self, name: str, children: list[_T]) -> None:
        super().__init__(name)
        self.children = children

    def __getitem__(self, key: int) -> _T:
        return self.children.__getitem__(key)

    def __len__(self) -> int:
        return len(self.children)


class Program(ListNode["Statement"]):
    """
    AST root: the sequence of top-level statements.
    """

    def __init__(self, *children: Statement) -> None:
        super().__init__("program", list(children))

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitProgram(self, ctx)


#! 语句, 无返回值
class Statement(Node):
    """
    Abstract type that represents a statement.
    """


class Declaration(Statement):
    """
    AST node of declaration, e.g. `declare x: int = 1;`.
    """

    def __init__(
        self,
        var_t: TypeLiteral,
        ident: Identifier,
        init_expr: Optional[Expression] = None,
    ) -> None:
        super().__init__("declaration")
        self.var_t = var_t
        self.ident = ident
        self.init_expr = init_expr or NULL

    def __getitem__(self, key: int) -> Node:
        return (self.var_t, self.ident, self.init_expr)[key]

    def __len__(self) -> int:
        return 3

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitDeclaration(self, ctx)


class Assignment(Statement):
    """
    AST node of assignment statement, e.g. `x = 1;`.
    The target identifier is a name, not a value: it is never typed as an expression.
    """

    def __init__(self, ident: Identifier, expr: Expression) -> None:
        super().__init__("assignment")
        self.ident = ident
        self.expr = expr

    def __getitem__(self, key: int) -> Node:
        return (self.ident, self.expr)[key]

    def __len__(self) -> int:
        return 2

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitAssignment(self, ctx)


class Condition(Node):
    """
    Abstract node that holds the (optional) condition of an `if` or a loop.
    """

    def __init__(self, name: str, expr: Optional[Expression] = None) -> None:
        super().__init__(name)
        self.expr = expr or NULL

    def __getitem__(self, key: int) -> Node:
        if self.expr is NULL:
            raise _index_len_err(key, self)
        return (self.expr,)[key]

    def __len__(self) -> int:
        return 0 if self.expr is NULL else 1


class IfCond(Condition):
    def __init__(self, expr: Optional[Expression] = None) -> None:
        super().__init__("if_cond", expr)

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitIfCond(self, ctx)


class WhileCond(Condition):
    def __init__(self, expr: Optional[Expression] = None) -> None:
        super().__init__("while_cond", expr)

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitWhileCond(self, ctx)


class Block(Statement, ListNode["Statement"]):
    """
    Abstract node of a braced statement sequence that opens its own scope.
    """

    def __init__(self, name: str, *children: Statement) -> None:
        super().__init__(name, list(children))


class IfBlock(Block):
    def __init__(self, *children: Statement) -> None:
        super().__init__("if_block", *children)

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitIfBlock(self, ctx)


class ElseBlock(Block):
    def __init__(self, *children: Statement) -> None:
        super().__init__("else_block", *children)

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitElseBlock(self, ctx)


class WhileBlock(Block):
    def __init__(self, *children: Statement) -> None:
        super().__init__("while_block", *children)

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitWhileBlock(self, ctx)


class IfStmt(Statement):
    """
    AST node of if statement.
    """

    def __init__(
        self, cond: IfCond, then: IfBlock, otherwise: Optional[ElseBlock] = None
    ) -> None:
        super().__init__("if")
        self.cond = cond
        self.then = then
        self.otherwise = otherwise or NULL

    def __getitem__(self, key: int) -> Node:
        return (self.cond, self.then, self.otherwise)[key]

    def __len__(self) -> int:
        return 3

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitIfStmt(self, ctx)


class WhileStmt(Statement):
    """
    AST node of while statement.
    """

    def __init__(self, cond: WhileCond, body: WhileBlock) -> None:
        super().__init__("while")
        self.cond = cond
        self.body = body

    def __getitem__(self, key: int) -> Node:
        return (self.cond, self.body)[key]

    def __len__(self) -> int:
        return 2

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitWhileStmt(self, ctx)


class DoWhileStmt(Statement):
    """
    AST node of do-while statement. The body comes first, as in the source text.
    """

    def __init__(self, body: WhileBlock, cond: WhileCond) -> None:
        super().__init__("do_while")
        self.body = body
        self.cond = cond

    def __getitem__(self, key: int) -> Node:
        return (self.body, self.cond)[key]

    def __len__(self) -> int:
        return 2

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitDoWhileStmt(self, ctx)


#! 表达式, 有返回值
class Expression(Node):
    """
    Abstract type that represents an evaluable expression.
    """


class Ternary(Expression, ListNode[Expression]):
    """
    AST node of condition expression (`?:`).
    Children are `cond, then, otherwise`; a single child is a plain passthrough.
    """

    def __init__(self, *children: Expression) -> None:
        super().__init__("ternary", list(children))

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitTernary(self, ctx)


class OperatorChain(Expression, ListNode[Expression]):
    """
    Abstract n-ary operator node. `ops[i]` sits between `children[i]` and `children[i + 1]`.
    """

    def __init__(self, name: str, ops: list[BinaryOp], children: list[Expression]) -> None:
        super().__init__(name, children)
        self.ops = ops

    def __str__(self) -> str:
        if not self.children:
            return self.name
        text = str(self.children[0])
        for op, child in zip(self.ops, self.children[1:]):
            text += f" {op.value} {child}"
        return f"({text})"


class LogExpr(OperatorChain):
    """
    AST node of a `&&` / `||` chain.
    """

    def __init__(self, ops: list[BinaryOp], *children: Expression) -> None:
        super().__init__("log_expr", ops, list(children))

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitLogExpr(self, ctx)


class CompExpr(OperatorChain):
    """
    AST node of a comparison chain like `a < b <= c`.
    All operators of one chain belong to the same family (ordering or equality),
    so the first operator tells which rule applies.
    """

    def __init__(self, ops: list[BinaryOp], *children: Expression) -> None:
        super().__init__("comp_expr", ops, list(children))

    @property
    def op(self) -> Optional[BinaryOp]:
        return self.ops[0] if self.ops else None

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitCompExpr(self, ctx)


class AddExpr(OperatorChain):
    """
    AST node of a `+` / `-` chain.
    """

    def __init__(self, ops: list[BinaryOp], *children: Expression) -> None:
        super().__init__("add_expr", ops, list(children))

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitAddExpr(self, ctx)


class MulExpr(OperatorChain):
    """
    AST node of a `*` / `/` / `%` chain.
    """

    def __init__(self, ops: list[BinaryOp], *children: Expression) -> None:
        super().__init__("mul_expr", ops, list(children))

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitMulExpr(self, ctx)


class UnaryExpr(Expression, ListNode[Expression]):
    """
    Abstract unary operator node.
    Note that the operation type (like negative) is not among its children.
    """

    def __init__(self, op: UnaryOp, *children: Expression) -> None:
        super().__init__(f"unary({op.value})", list(children))
        self.op = op

    def __str__(self) -> str:
        return "{}({})".format(self.op.value, ", ".join(map(str, self)))


class NotExpr(UnaryExpr):
    def __init__(self, *children: Expression) -> None:
        super().__init__(UnaryOp.LogicNot, *children)

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitNotExpr(self, ctx)


class NegExpr(UnaryExpr):
    def __init__(self, *children: Expression) -> None:
        super().__init__(UnaryOp.Neg, *children)

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitNegExpr(self, ctx)


class GenValue(Expression):
    """
    AST node that wraps a value-producing leaf (an identifier read or a literal).
    Only an identifier under a `GenValue` is looked up as a variable.
    """

    def __init__(self, value: Optional[Expression] = None) -> None:
        super().__init__("gen_value")
        self.value = value or NULL

    def __getitem__(self, key: int) -> Node:
        if self.value is NULL:
            raise _index_len_err(key, self)
        return (self.value,)[key]

    def __len__(self) -> int:
        return 0 if self.value is NULL else 1

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitGenValue(self, ctx)

    def __str__(self) -> str:
        return str(self.value)


class ListExpr(Expression, ListNode[Expression]):
    """
    AST node of list literal like `[1, 2, 3]`.
    """

    def __init__(self, *children: Expression) -> None:
        super().__init__("list_expr", list(children))

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitListExpr(self, ctx)

    def __str__(self) -> str:
        return "[{}]".format(", ".join(map(str, self)))


class Leaf(Node):
    """
    Abstract node without children.
    """

    def __getitem__(self, key: int) -> Node:
        raise _index_len_err(key, self)

    def __len__(self) -> int:
        return 0

    def is_leaf(self) -> bool:
        return True


class Identifier(Expression, Leaf):
    """
    AST node of identifier "expression".
    """

    def __init__(self, value: str) -> None:
        super().__init__("identifier")
        self.value = value

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitIdentifier(self, ctx)

    def __str__(self) -> str:
        return f"identifier({self.value})"


class IntLiteral(Expression, Leaf):
    """
    AST node of int literal like `0`.
    """

    def __init__(self, value: Union[int, str]) -> None:
        super().__init__("int_literal")
        self.value = int(value)

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitIntLiteral(self, ctx)

    def __str__(self) -> str:
        return f"int({self.value})"


class FloatLiteral(Expression, Leaf):
    """
    AST node of float literal like `2.5`.
    """

    def __init__(self, value: Union[float, str]) -> None:
        super().__init__("float_literal")
        self.value = float(value)

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitFloatLiteral(self, ctx)

    def __str__(self) -> str:
        return f"float({self.value})"


class BoolLiteral(Expression, Leaf):
    """
    AST node of `true` / `false`.
    """

    def __init__(self, value: bool) -> None:
        super().__init__("bool_literal")
        self.value = value

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitBoolLiteral(self, ctx)

    def __str__(self) -> str:
        return "bool({})".format("true" if self.value else "false")


class TypeLiteral(Leaf):
    """
    AST node of the type keyword of a declaration, like `int`.
    The keyword is kept as written; it is resolved by the checker.
    """

    def __init__(self, value: str) -> None:
        super().__init__("type")
        self.value = value

    def accept(self, v: Visitor[T, U], ctx: T):
        return v.visitTypeLiteral(self, ctx)

    def __str__(self) -> str:
        return f"type({self.value})"
