"""core/exceptions.py - 公式解析与计算的异常体系"""


class FormulaError(Exception):
    """所有公式解析/计算错误的基类"""


class MismatchedParenthesis(FormulaError):
    """括号不匹配：找不到对应的 '(' 或最终出栈时遇到 '('"""


class InvalidArgument(FormulaError):
    """操作符/函数参数个数错误或参数不是数字"""


class UnknownOperator(FormulaError):
    """在目录中找不到需要的操作符或函数"""


class RecursionLimitExceeded(FormulaError):
    """变量替换递归过深或变量循环引用"""

    def __init__(self, message, chain=()):
        super().__init__(message)
        self.chain = tuple(chain)


class EvaluationError(FormulaError):
    """RPN 求值失败（栈下溢、空表达式、剩余多个值）"""


class UnresolvedSymbol(EvaluationError):
    """未解析的符号（没有值的变量等）进入了求值器"""

    def __init__(self, symbol):
        super().__init__(f"Cannot evaluate unresolved symbol '{symbol}'")
        self.symbol = symbol
