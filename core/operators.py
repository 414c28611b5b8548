"""core/operators.py"""
from enum import Enum
import numpy as np
import logging

from core.exceptions import InvalidArgument, UnknownOperator

logger = logging.getLogger(__name__)


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class OperatorKind(Enum):
    ADDITION = "+"
    SUBTRACTION = "-"
    MULTIPLICATION = "*"
    DIVISION = "/"
    MODULO = "%"
    POWER = "^"
    OPPOSITE = "_"  # 一元负号（取反），不会出现在原始输入中


def format_value(value):
    """数值 -> 字符串（如 11.0、-2.0、inf、nan），结果可以再次被 float() 解析"""
    return repr(float(value))


def parse_arguments(label, arity, args):
    """
    检查参数个数并把字符串参数转换为 float64
    Args:
        label: 出错信息中使用的名称
        arity: 需要的参数个数
        args: 字符串参数（出栈顺序）
    Returns:
        float64 列表，顺序与 args 相同
    """
    if args is None:
        raise InvalidArgument(f"{label}: args must not be None")
    if len(args) != arity:
        logger.debug(f"{label} called with {list(args)}")
        raise InvalidArgument(f"{label}: needs exactly {arity} argument(s), got {len(args)}")
    values = []
    for arg in args:
        try:
            values.append(np.float64(float(arg)))
        except (TypeError, ValueError) as e:
            logger.debug(f"{label}: cannot convert {arg!r} to float ({e})")
            raise InvalidArgument(f"{label}: argument '{arg}' is not a number") from e
    return values


def compute_with(label, arity, func, args):
    """
    按出栈顺序接收参数，恢复成书写顺序后调用 func。
    栈是 LIFO 的，所以二元操作的 args[0] 是右操作数，args[1] 是左操作数。
    """
    values = parse_arguments(label, arity, args)
    values.reverse()
    with np.errstate(all='ignore'):
        result = func(*values)
    return format_value(result)


class Operators:
    """所有数值计算的静态方法集合（IEEE double 语义，不做除零保护）"""

    # 算术操作符====================

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        return np.add(operand1, operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        return np.subtract(operand1, operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        return np.multiply(operand1, operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法：1/0 -> inf，0/0 -> nan"""
        return np.divide(operand1, operand2)

    @staticmethod
    def mod(operand1, operand2):
        """浮点取余，符号跟随被除数（-7 % 3 = -1）"""
        return np.fmod(operand1, operand2)

    @staticmethod
    def pow(operand1, operand2):
        """幂运算：负底数配分数指数得到 nan"""
        return np.power(operand1, operand2)

    @staticmethod
    def neg(operand):
        """取反（一元负号）"""
        return np.negative(operand)

    # 函数====================

    @staticmethod
    def abs(operand):
        return np.abs(operand)

    @staticmethod
    def sqrt(operand):
        return np.sqrt(operand)

    @staticmethod
    def exp(operand):
        return np.exp(operand)

    @staticmethod
    def ln(operand):
        """自然对数：ln(0) = -inf，ln(负数) = nan"""
        return np.log(operand)

    @staticmethod
    def log10(operand):
        return np.log10(operand)

    @staticmethod
    def sin(operand):
        return np.sin(operand)

    @staticmethod
    def cos(operand):
        return np.cos(operand)

    @staticmethod
    def tan(operand):
        return np.tan(operand)

    @staticmethod
    def asin(operand):
        return np.arcsin(operand)

    @staticmethod
    def acos(operand):
        return np.arccos(operand)

    @staticmethod
    def atan(operand):
        return np.arctan(operand)

    @staticmethod
    def floor(operand):
        return np.floor(operand)

    @staticmethod
    def ceil(operand):
        return np.ceil(operand)

    @staticmethod
    def min(operand1, operand2):
        return np.minimum(operand1, operand2)

    @staticmethod
    def max(operand1, operand2):
        return np.maximum(operand1, operand2)

    @staticmethod
    def atan2(operand1, operand2):
        return np.arctan2(operand1, operand2)

    @staticmethod
    def hypot(operand1, operand2):
        return np.hypot(operand1, operand2)


class Operator:
    """不可变的操作符记录：符号、优先级、结合性、元数和计算函数"""

    __slots__ = ('kind', 'symbol', 'precedence', 'associativity', 'arity', 'func')

    def __init__(self, kind, precedence, associativity, arity, func):
        object.__setattr__(self, 'kind', kind)
        object.__setattr__(self, 'symbol', kind.value)
        object.__setattr__(self, 'precedence', precedence)
        object.__setattr__(self, 'associativity', associativity)
        object.__setattr__(self, 'arity', arity)
        object.__setattr__(self, 'func', func)

    def __setattr__(self, name, value):
        raise AttributeError(f"Operator '{self.symbol}' is immutable")

    @property
    def is_left_associative(self):
        return self.associativity is Associativity.LEFT

    @property
    def is_right_associative(self):
        return self.associativity is Associativity.RIGHT

    def compute(self, *args):
        """
        计算操作符的值
        Args:
            args: 字符串形式的数字，按出栈顺序（二元时 args[0] 为右操作数）
        Returns:
            字符串形式的结果
        """
        return compute_with(self.kind.name, self.arity, self.func, args)

    def __repr__(self):
        return f"Operator({self.symbol!r}, precedence={self.precedence}, {self.associativity.value}, arity={self.arity})"

    def __str__(self):
        return self.symbol


# 操作符定义字典
OPERATOR_DEFINITIONS = {
    OperatorKind.ADDITION: Operator(OperatorKind.ADDITION, 12, Associativity.LEFT, 2, Operators.add),
    OperatorKind.SUBTRACTION: Operator(OperatorKind.SUBTRACTION, 12, Associativity.LEFT, 2, Operators.sub),
    OperatorKind.OPPOSITE: Operator(OperatorKind.OPPOSITE, 14, Associativity.LEFT, 1, Operators.neg),
    OperatorKind.MULTIPLICATION: Operator(OperatorKind.MULTIPLICATION, 13, Associativity.LEFT, 2, Operators.mul),
    OperatorKind.MODULO: Operator(OperatorKind.MODULO, 13, Associativity.LEFT, 2, Operators.mod),
    OperatorKind.DIVISION: Operator(OperatorKind.DIVISION, 13, Associativity.LEFT, 2, Operators.div),
    OperatorKind.POWER: Operator(OperatorKind.POWER, 14, Associativity.RIGHT, 2, Operators.pow),
}

SYMBOL_TO_OPERATOR = {op.symbol: op for op in OPERATOR_DEFINITIONS.values()}
OPERATOR_SYMBOLS = tuple(SYMBOL_TO_OPERATOR)


def lookup_operator(symbol):
    """按符号查找操作符，找不到返回 None（这是正常结果，用于区分 token 类型）"""
    return SYMBOL_TO_OPERATOR.get(symbol)


def get_operator(symbol):
    """严格查找，找不到时抛出 UnknownOperator"""
    operator = SYMBOL_TO_OPERATOR.get(symbol)
    if operator is None:
        raise UnknownOperator(f"Unknown operator: {symbol!r}")
    return operator


def is_operator(token):
    return token in SYMBOL_TO_OPERATOR
