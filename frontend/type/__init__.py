from .type import VarType, isNumeric, typesEqual

INT = VarType.INT
FLOAT = VarType.FLOAT
BOOL = VarType.BOOL
LIST = VarType.LIST

__all__ = [
    "VarType",
    "INT",
    "FLOAT",
    "BOOL",
    "LIST",
    "isNumeric",
    "typesEqual",
]
