from frontend.type.type import VarType

from .symbol import Symbol


class VarSymbol(Symbol):
    def __init__(self, name: str, type: VarType) -> None:
        super().__init__(name, type)

    def __str__(self) -> str:
        return "variable %s : %s" % (self.name, str(self.type))

    def __repr__(self) -> str:
        return f"VarSymbol({self.name!r}, {self.type!r})"
