"""RPN表达式求值器 - 调用操作符目录和函数目录"""
import logging

from core.exceptions import EvaluationError, UnresolvedSymbol
from core.functions import DEFAULT_FUNCTIONS
from core.operators import lookup_operator, format_value
from core.token_system import is_number

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence, functions=None):
        """
        评估RPN表达式
        Args:
            token_sequence: RPN token 列表（字符串）
            functions: FunctionRegistry，默认使用 DEFAULT_FUNCTIONS
        Returns:
            字符串形式的结果
        """
        if functions is None:
            functions = DEFAULT_FUNCTIONS
        stack = []

        for token in token_sequence:
            if is_number(token):
                stack.append(token)
                continue

            operator = lookup_operator(token)
            if operator is not None:
                callable_ = operator
            elif functions.is_function(token):
                callable_ = functions.get(token)
            else:
                raise UnresolvedSymbol(token)

            if len(stack) < callable_.arity:
                raise EvaluationError(
                    f"Insufficient operands for {token}: needs {callable_.arity}, have {len(stack)}"
                )

            # 出栈顺序：最近入栈的在前
            args = [stack.pop() for _ in range(callable_.arity)]
            result = callable_.compute(*args)
            logger.debug(f"{token} {args} -> {result}")
            stack.append(result)

        # 返回结果处理
        if len(stack) == 0:
            raise EvaluationError("Empty stack after evaluation")
        if len(stack) > 1:
            raise EvaluationError(
                f"Stack has {len(stack)} elements after evaluation, expected 1: {' '.join(stack)}"
            )
        return format_value(float(stack[0]))
