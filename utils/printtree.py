from frontend.ast.node import Node
from frontend.ast.tree import GenValue, OperatorChain


class TreePrinter:
    """
    Print an AST as an indented outline, one node per line.
    """

    def __init__(self, indentLen: int = 2) -> None:
        self.indentLen = indentLen
        self.indent = 0
        self.lines: list[str] = []

    def work(self, element: Node) -> str:
        self.lines = []
        self.indent = 0
        self._visit(element)
        return "\n".join(self.lines)

    def _visit(self, element: Node) -> None:
        if element.is_null():
            return
        if element.is_leaf() or isinstance(element, GenValue):
            self._emit(str(element))
            return

        label = element.name
        if isinstance(element, OperatorChain):
            label += " " + " ".join(op.value for op in element.ops)
        self._emit(label)
        self.indent += self.indentLen
        for child in element:
            self._visit(child)
        self.indent -= self.indentLen

    def _emit(self, text: str) -> None:
        self.lines.append(" " * self.indent + text)
