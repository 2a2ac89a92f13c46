from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U", covariant=True)
