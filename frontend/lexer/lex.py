"""
Module that lists out all lex tokens.
Modify this file if you want to add more tokens, which can be accomplished by:

If the token you're going to add is a syntactically valid identifier:
    add it into the `reserved` dictionary, where key is the token itself and value is token name.
Else:
    makes it into a global variable or function that starts with "t_" and the following the name of your token.

Type keywords (`int`, `float`, ...) are deliberately not reserved: they are lexed as
identifiers and resolved by the semantic checker, which reports unknown ones.

Refer to https://www.dabeaz.com/ply/ply.html for more details.
"""

import re

# Reserved keywords
# 保留关键字, 在源代码中解析成相应标记类型
reserved = {
    "declare": "Declare",
    "if": "If",
    "else": "Else",
    "while": "While",
    "do": "Do",
    "true": "True",
    "false": "False",
}

# 定义单字符标记类型
t_Semi = ";"
t_Comma = ","

t_LParen = "("
t_RParen = ")"
t_LBrace = "{"
t_RBrace = "}"
t_LBracket = "["
t_RBracket = "]"

t_Colon = ":"
t_Question = "?"

t_Plus = "+"
t_Minus = "-"
t_Mul = "*"
t_Div = "/"
t_Mod = "%"
t_Not = "!"
t_And = "&&"
t_Or = "||"
t_Equal = "=="
t_NotEqual = "!="
t_Less = "<"
t_LessEqual = "<="
t_Greater = ">"
t_GreaterEqual = ">="
t_Assign = "="


'''
    匹配带小数点的数字, 必须定义在 t_Integer 之前
'''
def t_Real(t):
    r"[0-9]+\.[0-9]*|\.[0-9]+"
    t.value = float(t.value)
    return t


'''
    使用正则表达式匹配连续的数字
    匹配到的字符串转换成整数类型
'''
def t_Integer(t):
    r"[0-9]+"  # can be accessed from `t_Integer.__doc__`
    t.value = int(t.value)
    return t


'''
    使用正则表达式匹配字符串
    匹配到的标识符在 reserved 字典中
    否则将被标记为 Identifier
'''
def t_Identifier(t):
    r"[a-zA-Z_][0-9a-zA-Z_]*"
    t.type = reserved.get(t.value, "Identifier")
    return t


def t_Newline(t):
    r"(?:\r\n?|\n)+"
    t.lexer.lineno += len(re.findall(r"\r\n?|\n", t.value))


# String patterns that should be ignored by the lexer.
t_ignore = " \t"
t_ignore_LineComment = r"//[^\r\n]*"


# Collection of all tokens.
tokens = tuple(
    name.removeprefix("t_")
    for name in globals()
    if name.startswith("t_") and not name.startswith("t_ignore") and name != "t_Newline"
) + tuple(reserved.values())


def _escape():
    "Don't care about this"

    token_dict = globals()
    for name in tokens:
        name = f"t_{name}"
        original = token_dict.get(name, name)
        if isinstance(original, str):
            token_dict[name] = re.escape(original)


_escape()
