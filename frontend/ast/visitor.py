"""
Module that defines the base visitor of the AST.
A visitor method receives the node and a context, and returns a result (or None).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

from utils import T, U

from .node import Node

if TYPE_CHECKING:
    from .tree import *


class Visitor(Protocol[T, U]):
    def visitOther(self, node: Node, ctx: T) -> Optional[U]:
        return None

    def visitProgram(self, that: Program, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitDeclaration(self, that: Declaration, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitAssignment(self, that: Assignment, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitIfStmt(self, that: IfStmt, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitIfCond(self, that: IfCond, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitIfBlock(self, that: IfBlock, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitElseBlock(self, that: ElseBlock, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitWhileStmt(self, that: WhileStmt, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitDoWhileStmt(self, that: DoWhileStmt, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitWhileCond(self, that: WhileCond, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitWhileBlock(self, that: WhileBlock, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitTernary(self, that: Ternary, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitLogExpr(self, that: LogExpr, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitCompExpr(self, that: CompExpr, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitAddExpr(self, that: AddExpr, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitMulExpr(self, that: MulExpr, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitNotExpr(self, that: NotExpr, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitNegExpr(self, that: NegExpr, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitGenValue(self, that: GenValue, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitListExpr(self, that: ListExpr, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitIdentifier(self, that: Identifier, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitIntLiteral(self, that: IntLiteral, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitFloatLiteral(self, that: FloatLiteral, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitBoolLiteral(self, that: BoolLiteral, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)

    def visitTypeLiteral(self, that: TypeLiteral, ctx: T) -> Optional[U]:
        return self.visitOther(that, ctx)


class RecursiveVisitor(Visitor[T, None]):
    """
    Visits every child of a node it has no dedicated method for.
    """

    def visitOther(self, node: Node, ctx: T) -> None:
        for child in node:
            child.accept(self, ctx)
