"""
Usage counters collected while the semantic pass walks a program.
"""


class Metrics:
    """
    Four counters that only ever grow during one check:
    declared variables, loops, conditionals (`if` and `?:`) and operator occurrences.
    """

    def __init__(self) -> None:
        self.var = 0
        self.while_ = 0
        self.if_ = 0
        self.op = 0

    def asdict(self) -> dict[str, int]:
        return {"VAR": self.var, "WHILE": self.while_, "IF": self.if_, "OP": self.op}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Metrics):
            return NotImplemented
        return self.asdict() == other.asdict()

    def __str__(self) -> str:
        return "{VAR:%d, WHILE:%d, IF:%d, OP:%d}" % (self.var, self.while_, self.if_, self.op)

    def __repr__(self) -> str:
        return f"Metrics({self.asdict()})"
