import logging

from frontend.ast.tree import *
from frontend.ast.visitor import RecursiveVisitor
from frontend.scope.scope import Scope, ScopeKind
from frontend.scope.scopestack import ScopeStack
from frontend.symbol.varsymbol import VarSymbol
from frontend.type.type import VarType, typesEqual
from utils.error import *

from .metrics import Metrics
from .typer import Typer

"""
The namer phase: walk the statements of the abstract syntax tree, bind declared
variables in their scopes and make sure every statement is well typed.
The first violation aborts the whole pass.
"""

logger = logging.getLogger(__name__)


class Namer(RecursiveVisitor[ScopeStack]):
    def __init__(self) -> None:
        self.metrics = Metrics()
        self.typer = Typer(self.metrics)

    # Entry of this phase
    def transform(self, program: Program) -> Metrics:
        # Counters and scopes are created per run, nothing leaks between two checks.
        self.metrics = Metrics()
        self.typer = Typer(self.metrics)
        ctx = ScopeStack(Scope(ScopeKind.GLOBAL))

        program.accept(self, ctx)
        logger.debug("semantic check passed: %s", self.metrics)
        return self.metrics

    def visitProgram(self, program: Program, ctx: ScopeStack) -> None:
        for child in program:
            child.accept(self, ctx)

    def visitDeclaration(self, decl: Declaration, ctx: ScopeStack) -> None:
        #! decl.ident.value 是变量名字符串
        name = decl.ident.value
        if ctx.lookup(name):
            raise MultipleDeclarationError(name)

        symbol = VarSymbol(name, VarType.fromKeyword(decl.var_t.value))
        ctx.declare(symbol)
        self.metrics.var += 1
        logger.debug("declare %s in scope #%d", symbol, ctx.depth() - 1)

        if decl.init_expr:
            if not typesEqual(symbol.type, self.typer.typeOf(decl.init_expr, ctx)):
                raise AssignmentTypeMismatchError(name)

    def visitAssignment(self, stmt: Assignment, ctx: ScopeStack) -> None:
        name = stmt.ident.value
        if not ctx.lookup(name):
            raise UndeclaredVariableError(name)
        ctx.assign(name, self.typer.typeOf(stmt.expr, ctx))

    # `if` and loops count themselves, then check their condition and blocks in order.
    def visitIfStmt(self, stmt: IfStmt, ctx: ScopeStack) -> None:
        self.metrics.if_ += 1
        self.visitOther(stmt, ctx)

    def visitWhileStmt(self, stmt: WhileStmt, ctx: ScopeStack) -> None:
        self.metrics.while_ += 1
        self.visitOther(stmt, ctx)

    def visitDoWhileStmt(self, stmt: DoWhileStmt, ctx: ScopeStack) -> None:
        self.metrics.while_ += 1
        self.visitOther(stmt, ctx)

    def visitIfCond(self, cond: IfCond, ctx: ScopeStack) -> None:
        self._checkCondition(cond, ctx)

    def visitWhileCond(self, cond: WhileCond, ctx: ScopeStack) -> None:
        self._checkCondition(cond, ctx)

    def _checkCondition(self, cond: Condition, ctx: ScopeStack) -> None:
        # An empty condition only shows up in partial trees and is accepted as is.
        if len(cond) > 0 and self.typer.typeOf(cond[0], ctx) is not VarType.BOOL:
            raise InvalidConditionError()

    def visitIfBlock(self, block: IfBlock, ctx: ScopeStack) -> None:
        self._checkBlock(block, ctx)

    def visitElseBlock(self, block: ElseBlock, ctx: ScopeStack) -> None:
        self._checkBlock(block, ctx)

    def visitWhileBlock(self, block: WhileBlock, ctx: ScopeStack) -> None:
        self._checkBlock(block, ctx)

    def _checkBlock(self, block: Block, ctx: ScopeStack) -> None:
        with ctx.block():
            for child in block:
                child.accept(self, ctx)
