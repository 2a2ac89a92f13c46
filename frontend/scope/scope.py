from __future__ import annotations

from enum import Enum, auto, unique
from typing import Optional

from frontend.symbol.varsymbol import VarSymbol
from frontend.type.type import VarType, typesEqual
from utils.error import (
    AssignmentTypeMismatchError,
    MultipleDeclarationError,
    UndeclaredVariableError,
)


@unique
class ScopeKind(Enum):
    GLOBAL = auto()
    LOCAL = auto()


class Scope:
    """
    A symbol table: maps an identifier to the variable it was declared as.
    Each name is bound at most once for the lifetime of the scope.
    """

    def __init__(self, kind: ScopeKind) -> None:
        self.kind = kind
        self.symbols: dict[str, VarSymbol] = {}

    def lookup(self, name: str) -> Optional[VarSymbol]:
        return self.symbols.get(name)

    def get(self, name: str) -> VarType:
        if name not in self.symbols:
            raise UndeclaredVariableError(name)
        return self.symbols[name].type

    def declare(self, symbol: VarSymbol) -> None:
        if symbol.name in self.symbols:
            raise MultipleDeclarationError(symbol.name)
        self.symbols[symbol.name] = symbol

    def assign(self, name: str, type: Optional[VarType]) -> None:
        # The declared type never changes, assignment only has to agree with it.
        if not typesEqual(self.get(name), type):
            raise AssignmentTypeMismatchError(name)

    def copy(self) -> Scope:
        """
        Snapshot the current bindings into a new local scope.
        Declarations made in either scope afterwards are not seen by the other.
        """
        child = Scope(ScopeKind.LOCAL)
        child.symbols = dict(self.symbols)
        return child
