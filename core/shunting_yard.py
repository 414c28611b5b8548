"""中缀公式 -> RPN 的 Shunting-Yard 解析器"""
import logging

from config.config import PARSER_CONFIG
from core.exceptions import MismatchedParenthesis
from core.functions import DEFAULT_FUNCTIONS
from core.operators import OperatorKind, get_operator, is_operator
from core.token_system import (
    TokenType, LEFT_PAREN, ARGUMENT_SEPARATOR,
    classify_token, format_formula, tokenize
)

logger = logging.getLogger(__name__)


class ShuntingYardParser:
    """
    把中缀公式转换为 RPN token 序列

    每次 parse() 都新建输出队列和操作符栈，因此同一个解析器可以在多个线程中
    使用（前提是调用方不在解析期间修改 variables）。
    """

    def __init__(self, variables=None, functions=None, enable_logging=None,
                 drain_operators=None, extended_unary_minus=None, resolver=None):
        """
        Args:
            variables: 变量字典 {名称: 子公式}，值为 None 或空串时变量原样保留
            functions: FunctionRegistry，默认使用 DEFAULT_FUNCTIONS
            enable_logging: 是否输出解析过程
            drain_operators: 遇到操作符时是否循环出栈（False 时最多出栈一次）
            extended_unary_minus: 是否在开头/逗号后/操作符后识别一元负号
            resolver: resolver(name, sub_formula) -> 计算结果字符串
        """
        self.variables = variables if variables is not None else {}
        self.functions = functions if functions is not None else DEFAULT_FUNCTIONS
        self.enable_logging = self._option(enable_logging, "enable_logging")
        self.drain_operators = self._option(drain_operators, "drain_operators")
        self.extended_unary_minus = self._option(extended_unary_minus, "extended_unary_minus")
        self.resolver = resolver

    @staticmethod
    def _option(value, key):
        return PARSER_CONFIG[key] if value is None else value

    def parse(self, formula):
        """
        Args:
            formula: 中缀公式字符串
        Returns:
            RPN token 列表
        """
        if self.enable_logging:
            self._log(f"Formula : {formula}")
            self._log(f"Formatted formula : {format_formula(formula)}")
        queue = []
        stack = []
        return self._analyze(tokenize(formula), queue, stack)

    def _analyze(self, tokens, queue, stack):
        last_token = None

        for token in tokens:
            self._log(f"Treatment of token '{token}'.")
            token_type = classify_token(token, self.variables, self.functions)

            if token_type is TokenType.NUMBER:
                self._log(f"Token {token} is a number. Adding to Queue.")
                queue.append(token)

            elif token_type is TokenType.VARIABLE:
                self._log(f"Token {token} is a variable. Adding to Queue.")
                queue.append(self._substitute(token))

            elif token_type is TokenType.OPERATOR:
                self._log(f"Token {token} is an operator.")
                token = self._push_operator(token, last_token, queue, stack)

            elif token_type is TokenType.FUNCTION:
                self._log(f"Token {token} is a function. Pushing onto the Stack.")
                stack.append(token)

            elif token_type is TokenType.ARGUMENT_SEPARATOR:
                self._log(f"Token {token} is a function arg separator.")
                self._pop_until_left_paren(token, queue, stack)

            elif token_type is TokenType.LEFT_PAREN:
                self._log(f"Pushing {token} onto the stack")
                stack.append(token)

            elif token_type is TokenType.RIGHT_PAREN:
                self._log("Until ( is found on the stack, pop token from the stack to the queue.")
                self._pop_until_left_paren(token, queue, stack)
                self._log("( found. Dismiss from the stack.")
                stack.pop()
                if stack and self.functions.is_function(stack[-1]):
                    self._log(f"Token {stack[-1]} is a function, pop it from the stack to the queue.")
                    queue.append(stack.pop())

            else:
                self._log(f"{token} unknown. Maybe a variable ?. Added to queue.")
                queue.append(token)

            last_token = token

        self._log("No more token to read.")
        while stack:
            if stack[-1] == LEFT_PAREN:
                raise MismatchedParenthesis("Unclosed '(' left on the stack")
            pop = stack.pop()
            self._log(f"Popping {pop} from the stack to the queue.")
            queue.append(pop)

        return queue

    def _push_operator(self, token, last_token, queue, stack):
        """处理操作符 token，返回实际入栈的符号（'-' 可能被改写为 '_'）"""
        if token == OperatorKind.SUBTRACTION.value and self._is_unary_position(last_token):
            self._log(f"Token {token} is the opposite operator.")
            token = OperatorKind.OPPOSITE.value

        o1 = get_operator(token)
        if o1.arity == 1:
            # 前缀操作符左边没有操作数，不能让栈里的操作符先出栈
            self._log(f"{token} is a prefix operator.")
        else:
            while stack and is_operator(stack[-1]):
                peek = stack[-1]
                o2 = get_operator(peek)
                if ((o1.is_left_associative and o1.precedence <= o2.precedence)
                        or (o1.is_right_associative and o1.precedence < o2.precedence)):
                    self._log(f"{token} priority is <= {peek} priority and {token} is "
                              f"{o1.associativity.value}-associative")
                    self._log(f"Poping {peek} from the stack, and adding it to the queue.")
                    queue.append(stack.pop())
                else:
                    self._log(f"{token} priority is > {peek} priority")
                    break
                if not self.drain_operators:
                    break

        self._log(f"Pushing {token} onto the Stack.")
        stack.append(token)
        return token

    def _is_unary_position(self, last_token):
        if last_token == LEFT_PAREN:
            return True
        if not self.extended_unary_minus:
            return False
        return last_token is None or last_token == ARGUMENT_SEPARATOR or is_operator(last_token)

    def _pop_until_left_paren(self, token, queue, stack):
        while stack and stack[-1] != LEFT_PAREN:
            pop = stack.pop()
            self._log(f"\tPop {pop} from stack, adding it to Queue.")
            queue.append(pop)
        if not stack:
            raise MismatchedParenthesis(f"No matching '(' found for '{token}'")

    def _substitute(self, name):
        value = self.variables.get(name)
        if not value:
            return name

        if self.resolver is None:
            from formula.compute import variable_resolver
            self.resolver = variable_resolver(
                self.variables, self.functions,
                drain_operators=self.drain_operators,
                extended_unary_minus=self.extended_unary_minus
            )
        new_value = self.resolver(name, value)
        self._log(f"\tReplacing variable {name} by its value {value} = {new_value}")
        return new_value

    def _log(self, message):
        if self.enable_logging and logger.isEnabledFor(logging.INFO):
            logger.info(message)
