from __future__ import annotations

from enum import Enum, unique
from typing import Optional

from utils.error import UnknownTypeError


@unique
class VarType(Enum):
    """
    The closed set of value types of the language.
    The value of each member is the keyword used to spell it in source code.
    """

    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    LIST = "list"

    @classmethod
    def fromKeyword(cls, keyword: str) -> VarType:
        try:
            return cls(keyword)
        except ValueError:
            raise UnknownTypeError(keyword) from None

    def __str__(self) -> str:
        return self.value


def isNumeric(t: Optional[VarType]) -> bool:
    return t is VarType.INT or t is VarType.FLOAT


def typesEqual(a: Optional[VarType], b: Optional[VarType]) -> bool:
    # No coercion between tags, not even int -> float.
    return a is b
