"""
Module that defines the base type of AST nodes and the operator kinds.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, unique
from typing import Any, Iterator, Optional

from utils import T, U


class Node(ABC):
    """
    Base of all AST nodes.
    A node is a read-only sequence of its syntactic children, and may carry extra attributes.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.attrs: dict[str, Any] = {}

    @abstractmethod
    def __getitem__(self, key: int) -> Node:
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def accept(self, v, ctx: T) -> Optional[U]:
        raise NotImplementedError

    def __iter__(self) -> Iterator[Node]:
        for i in range(len(self)):
            yield self[i]

    def is_leaf(self) -> bool:
        return False

    def is_null(self) -> bool:
        return False

    def setattr(self, name: str, value: Any) -> None:
        self.attrs[name] = value

    def getattr(self, name: str) -> Any:
        return self.attrs.get(name, None)

    def __str__(self) -> str:
        if self.is_leaf():
            return self.name
        return "{}[{}]".format(self.name, ", ".join(map(str, self)))

    def __bool__(self) -> bool:
        return True


class NullType(Node):
    """
    Placeholder for an absent optional child, e.g. a missing `else` branch.
    """

    def __init__(self) -> None:
        super().__init__("NULL")

    def __getitem__(self, key: int) -> Node:
        raise IndexError("NULL node has no children")

    def __len__(self) -> int:
        return 0

    def accept(self, v, ctx: T) -> None:
        return None

    def is_leaf(self) -> bool:
        return True

    def is_null(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return False


NULL = NullType()


@unique
class UnaryOp(Enum):
    Neg = "-"
    LogicNot = "!"


@unique
class BinaryOp(Enum):
    Add = "+"
    Sub = "-"
    Mul = "*"
    Div = "/"
    Mod = "%"
    LogicOr = "||"
    LogicAnd = "&&"
    EQ = "=="
    NE = "!="
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="

    def isOrdering(self) -> bool:
        return self in (BinaryOp.LT, BinaryOp.GT, BinaryOp.LE, BinaryOp.GE)

    def isEquality(self) -> bool:
        return self in (BinaryOp.EQ, BinaryOp.NE)

    def sameFamily(self, other: BinaryOp) -> bool:
        """
        Whether two comparison operators may share one comparison chain.
        """
        return (self.isOrdering() and other.isOrdering()) or (
            self.isEquality() and other.isEquality()
        )
