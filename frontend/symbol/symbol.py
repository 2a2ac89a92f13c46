from abc import ABC, abstractmethod

from frontend.type.type import VarType


class Symbol(ABC):
    """
    Base class of everything a scope can bind a name to.
    """

    def __init__(self, name: str, type: VarType) -> None:
        self.name = name
        self.type = type

    @abstractmethod
    def __str__(self) -> str:
        raise NotImplementedError
