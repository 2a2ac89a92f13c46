import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from frontend.symbol.varsymbol import VarSymbol
from frontend.type.type import VarType

from .scope import Scope, ScopeKind

from utils.error import ScopeOverflowError

logger = logging.getLogger(__name__)


class ScopeStack:
    """
    Scopes that are alive at the current point of the traversal.
    Opening a scope pushes a snapshot of the top one, closing it drops the snapshot.
    """

    def __init__(self, globalScope: Optional[Scope] = None) -> None:
        self.globalScope = globalScope or Scope(ScopeKind.GLOBAL)
        self.scopeStack = [self.globalScope]
        self.scopeCount = 512

    def open(self) -> None:
        if len(self.scopeStack) < self.scopeCount:
            scope = self.top().copy()
            self.scopeStack.append(scope)
            logger.debug("open %s scope #%d", scope.kind.name.lower(), len(self.scopeStack) - 1)
        else:
            raise ScopeOverflowError(self.scopeCount)

    def close(self) -> None:
        logger.debug("close scope #%d", len(self.scopeStack) - 1)
        self.scopeStack.pop()

    @contextmanager
    def block(self) -> Iterator[Scope]:
        self.open()
        try:
            yield self.top()
        finally:
            self.close()

    def top(self) -> Scope:
        if self.scopeStack:
            return self.scopeStack[-1]
        return self.globalScope

    def depth(self) -> int:
        return len(self.scopeStack)

    def declare(self, symbol: VarSymbol) -> None:
        self.top().declare(symbol)

    def lookup(self, name: str) -> Optional[VarSymbol]:
        return self.top().lookup(name)

    def get(self, name: str) -> VarType:
        return self.top().get(name)

    def assign(self, name: str, type: Optional[VarType]) -> None:
        self.top().assign(name, type)
