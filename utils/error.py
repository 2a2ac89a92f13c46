"""
Module that defines all errors raised by the MiniSem front end.

Every user-facing error derives from `MiniError`. Semantic errors are raised at the
node where the violation is detected and are never caught inside the checker.
"""


class MiniError(Exception):
    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        return self.msg


class MiniLexError(MiniError):
    def __init__(self, char: str, lineno: int) -> None:
        super().__init__(f"line {lineno}: illegal character {char!r}")
        self.lineno = lineno


class MiniSyntaxError(MiniError):
    def __init__(self, token, msg: str = "syntax error") -> None:
        if token is None:
            super().__init__(f"{msg}: unexpected end of input")
        else:
            super().__init__(f"line {token.lineno}: {msg} near {token.value!r}")
        self.token = token


class SemanticError(MiniError):
    pass


class UnknownTypeError(SemanticError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid use of undefined Identifier {name}")


class MultipleDeclarationError(SemanticError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Identifier {name} has multiple declarations")


class UndeclaredVariableError(SemanticError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Variable {name} was not declared")


class AssignmentTypeMismatchError(SemanticError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid type in assignation of Identifier {name}")


class InvalidConditionError(SemanticError):
    def __init__(self) -> None:
        super().__init__("Invalid type in condition")


class InvalidExpressionTypeError(SemanticError):
    def __init__(self) -> None:
        super().__init__("Invalid type in expression")


class ScopeOverflowError(MiniError):
    def __init__(self, limit: int) -> None:
        super().__init__(f"blocks are nested deeper than {limit} levels")


class NestingTooDeepError(MiniError):
    def __init__(self) -> None:
        super().__init__("program is nested too deeply to be checked")


#! 以下错误表示 AST 本身不合法, 不属于语义错误
class IllegalArgumentException(Exception):
    pass
