"""core/token_system.py"""
from enum import Enum
import re

from core.operators import OPERATOR_SYMBOLS, is_operator

LEFT_PAREN = '('
RIGHT_PAREN = ')'
ARGUMENT_SEPARATOR = ','

_WHITESPACE = re.compile(r'\s+')
# 公式中的数字只能是十进制字面量；inf / nan 等名称按标识符处理
_DECIMAL_LITERAL = re.compile(r'(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][0-9]+)?')


class TokenType(Enum):
    NUMBER = "number"
    VARIABLE = "variable"
    OPERATOR = "operator"
    FUNCTION = "function"
    ARGUMENT_SEPARATOR = "argument_separator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    UNKNOWN = "unknown"  # 原样输出到队列


def format_formula(formula):
    """在括号、逗号和所有操作符前后加空格，再合并多余空白"""
    for symbol in (LEFT_PAREN, RIGHT_PAREN, ARGUMENT_SEPARATOR) + OPERATOR_SYMBOLS:
        formula = formula.replace(symbol, f" {symbol} ")
    return _WHITESPACE.sub(' ', formula).strip()


def tokenize(formula):
    """
    把中缀公式拆成 token 列表
    注意：相邻的字母数字 token 不会被拆开（需要调用方自己用空格分隔）
    """
    formatted = format_formula(formula)
    if not formatted:
        return []
    return formatted.split(' ')


def is_decimal_literal(token):
    """解析器使用的数字判断：只接受十进制字面量（如 3、2.5、.5、1e5）"""
    return token is not None and _DECIMAL_LITERAL.fullmatch(token) is not None


def is_number(token):
    """求值器使用的数字判断：能被 float() 解析即可，包括 inf、nan 等计算结果"""
    if token is None:
        return False
    try:
        float(token)
        return True
    except ValueError:
        return False


def classify_token(token, variables=None, functions=None):
    """
    按解析器的判断顺序给 token 分类（先匹配先得）
    Args:
        token: 原始字符串
        variables: 变量字典（只看 key 是否存在）
        functions: FunctionRegistry 或任何支持 is_function 的对象
    Returns:
        TokenType
    """
    if is_decimal_literal(token):
        return TokenType.NUMBER
    if variables is not None and token in variables:
        return TokenType.VARIABLE
    if is_operator(token):
        return TokenType.OPERATOR
    if functions is not None and functions.is_function(token):
        return TokenType.FUNCTION
    if token == ARGUMENT_SEPARATOR:
        return TokenType.ARGUMENT_SEPARATOR
    if token == LEFT_PAREN:
        return TokenType.LEFT_PAREN
    if token == RIGHT_PAREN:
        return TokenType.RIGHT_PAREN
    return TokenType.UNKNOWN
