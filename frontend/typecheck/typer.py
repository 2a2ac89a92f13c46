from typing import Optional

from frontend.ast.tree import *
from frontend.ast.visitor import Visitor
from frontend.scope.scopestack import ScopeStack
from frontend.type.type import VarType, isNumeric, typesEqual
from utils.error import *

from .metrics import Metrics

"""
The typer: compute the type of an expression, or reject it.
Every visit method returns the `VarType` of the visited node.
"""


class Typer(Visitor[ScopeStack, VarType]):
    def __init__(self, metrics: Metrics) -> None:
        self.metrics = metrics

    def typeOf(self, expr: Node, ctx: ScopeStack) -> Optional[VarType]:
        return expr.accept(self, ctx)

    def visitOther(self, node: Node, ctx: ScopeStack) -> None:
        raise IllegalArgumentException(f"{node.name} is not an expression")

    def visitIntLiteral(self, expr: IntLiteral, ctx: ScopeStack) -> VarType:
        return VarType.INT

    def visitFloatLiteral(self, expr: FloatLiteral, ctx: ScopeStack) -> VarType:
        return VarType.FLOAT

    def visitBoolLiteral(self, expr: BoolLiteral, ctx: ScopeStack) -> VarType:
        return VarType.BOOL

    def visitIdentifier(self, ident: Identifier, ctx: ScopeStack) -> VarType:
        # Declaration and assignment targets never get here, so this is always a read.
        return ctx.get(ident.value)

    def visitGenValue(self, expr: GenValue, ctx: ScopeStack) -> Optional[VarType]:
        if len(expr) == 0:
            return None
        return self.typeOf(expr[0], ctx)

    def visitListExpr(self, expr: ListExpr, ctx: ScopeStack) -> VarType:
        if len(expr) == 0:
            return VarType.LIST

        first = self.typeOf(expr[0], ctx)
        for element in expr.children[1:]:
            if not typesEqual(first, self.typeOf(element, ctx)):
                raise InvalidExpressionTypeError()

        #! 元素类型不再继续跟踪
        return VarType.LIST

    def visitNotExpr(self, expr: NotExpr, ctx: ScopeStack) -> VarType:
        self.metrics.op += 1
        operand = self._operand(expr)
        if self.typeOf(operand, ctx) is not VarType.BOOL:
            raise InvalidExpressionTypeError()
        return VarType.BOOL

    def visitNegExpr(self, expr: NegExpr, ctx: ScopeStack) -> VarType:
        self.metrics.op += 1
        operand = self._operand(expr)
        operandType = self.typeOf(operand, ctx)
        if not isNumeric(operandType):
            raise InvalidExpressionTypeError()
        return operandType

    def _operand(self, expr: UnaryExpr) -> Expression:
        if len(expr) != 1:
            raise IllegalArgumentException(
                f"{expr.name} expects exactly one operand, got {len(expr)}"
            )
        return expr[0]

    def visitAddExpr(self, expr: AddExpr, ctx: ScopeStack) -> Optional[VarType]:
        return self._numericChain(expr, ctx)

    def visitMulExpr(self, expr: MulExpr, ctx: ScopeStack) -> Optional[VarType]:
        return self._numericChain(expr, ctx)

    def _numericChain(self, expr: OperatorChain, ctx: ScopeStack) -> Optional[VarType]:
        """
        All operands must be numeric and of the same concrete type, which is the result.
        There is no implicit promotion from int to float.
        """
        if len(expr) == 1:
            return self.typeOf(expr[0], ctx)

        self._countOperators(expr)
        resultType = None
        for operand in expr:
            operandType = self.typeOf(operand, ctx)
            if not isNumeric(operandType):
                raise InvalidExpressionTypeError()
            if resultType is None:
                resultType = operandType
            elif not typesEqual(resultType, operandType):
                raise InvalidExpressionTypeError()
        return resultType

    def visitLogExpr(self, expr: LogExpr, ctx: ScopeStack) -> VarType:
        self._countOperators(expr)
        for operand in expr:
            if self.typeOf(operand, ctx) is not VarType.BOOL:
                raise InvalidExpressionTypeError()
        return VarType.BOOL

    def visitCompExpr(self, expr: CompExpr, ctx: ScopeStack) -> Optional[VarType]:
        """
        Ordering operators (`<` `<=` `>` `>=`) accept any two numeric operands.
        Equality operators (`==` `!=`) accept any two operands of the very same type.
        Each operand is compared with the one before it, so `a < b < c` checks a/b then b/c.
        """
        if len(expr) == 1:
            return self.typeOf(expr[0], ctx)

        self._countOperators(expr)
        ordering = expr.op is not None and expr.op.isOrdering()

        leftType = self.typeOf(expr[0], ctx)
        for operand in expr.children[1:]:
            rightType = self.typeOf(operand, ctx)
            if ordering:
                if not isNumeric(leftType) or not isNumeric(rightType):
                    raise InvalidExpressionTypeError()
            elif not typesEqual(leftType, rightType):
                raise InvalidExpressionTypeError()
            leftType = rightType

        return VarType.BOOL

    def visitTernary(self, expr: Ternary, ctx: ScopeStack) -> Optional[VarType]:
        if len(expr) == 1:
            return self.typeOf(expr[0], ctx)
        if len(expr) != 3:
            raise IllegalArgumentException(
                f"ternary expects 1 or 3 children, got {len(expr)}"
            )

        self.metrics.if_ += 1
        cond, then, otherwise = expr.children
        if self.typeOf(cond, ctx) is not VarType.BOOL:
            raise InvalidConditionError()

        thenType = self.typeOf(then, ctx)
        otherwiseType = self.typeOf(otherwise, ctx)
        if not typesEqual(thenType, otherwiseType):
            raise InvalidExpressionTypeError()
        return thenType

    def _countOperators(self, expr: OperatorChain) -> None:
        if len(expr) > 1:
            self.metrics.op += len(expr) - 1
