"""core/functions.py - 函数目录（sqrt、max 等），为解析器提供 is_function 判断"""
import logging

from core.exceptions import UnknownOperator
from core.operators import Operators, compute_with, OPERATOR_SYMBOLS

logger = logging.getLogger(__name__)


class Function:
    """固定元数的函数，计算约定与操作符相同（参数按出栈顺序传入）"""

    def __init__(self, name, arity, func):
        self.name = name
        self.arity = arity
        self.func = func

    def compute(self, *args):
        return compute_with(self.name, self.arity, self.func, args)

    def __repr__(self):
        return f"Function({self.name!r}, arity={self.arity})"


class FunctionRegistry:
    """函数名 -> Function 的注册表"""

    def __init__(self, functions=None):
        self._functions = {}
        for function in functions or ():
            self._functions[function.name] = function

    def register(self, name, arity, func):
        """
        注册一个函数
        Args:
            name: 函数名（不能包含括号、逗号或操作符符号，否则格式化时会被拆开）
            arity: 参数个数
            func: 接收 arity 个 float64（书写顺序）的可调用对象
        Returns:
            注册的 Function
        """
        if not name or any(ch in name for ch in OPERATOR_SYMBOLS + ('(', ')', ',', ' ')):
            raise ValueError(f"Invalid function name: {name!r}")
        if arity < 0:
            raise ValueError(f"Invalid arity for {name}: {arity}")
        function = Function(name, arity, func)
        if name in self._functions:
            logger.debug(f"Overriding function {name}")
        self._functions[name] = function
        return function

    def is_function(self, token):
        return token in self._functions

    def get(self, name):
        function = self._functions.get(name)
        if function is None:
            raise UnknownOperator(f"Unknown function: {name!r}")
        return function

    def names(self):
        return sorted(self._functions)

    def copy(self):
        return FunctionRegistry(self._functions.values())

    def __contains__(self, name):
        return name in self._functions

    def __len__(self):
        return len(self._functions)


def _build_default_functions():
    registry = FunctionRegistry()
    # 一元函数
    for name in ('abs', 'sqrt', 'exp', 'ln', 'log10', 'sin', 'cos', 'tan',
                 'asin', 'acos', 'atan', 'floor', 'ceil'):
        registry.register(name, 1, getattr(Operators, name))
    # 二元函数
    for name in ('min', 'max', 'atan2', 'hypot'):
        registry.register(name, 2, getattr(Operators, name))
    registry.register('pow', 2, Operators.pow)
    return registry


DEFAULT_FUNCTIONS = _build_default_functions()
