from typing import Optional, Protocol, cast

from frontend.ast.tree import Program
from frontend.lexer import Lexer
from utils.error import MiniSyntaxError

from .ply_parser import parser as _parser


class Parser(Protocol):
    '''
        描述 MiniSem 前端的解析器的接口
    '''
    def __init__(self) -> None:
        self.error_stack: list[MiniSyntaxError]

    def parse(self, input: str, lexer: Optional[Lexer] = None) -> Optional[Program]:
        '''
            将输入源代码解析成程序抽象语法树, 出错时返回 None
        '''
        ...


parser = cast(Parser, _parser)


__all__ = [
    "parser",
]
