"""核心模块 - 操作符目录、Token系统、Shunting-Yard解析器和RPN评估器"""
from .exceptions import (
    FormulaError, MismatchedParenthesis, InvalidArgument, UnknownOperator,
    RecursionLimitExceeded, EvaluationError, UnresolvedSymbol
)
from .operators import (
    Associativity, OperatorKind, Operator, Operators, OPERATOR_DEFINITIONS,
    SYMBOL_TO_OPERATOR, lookup_operator, get_operator, is_operator
)
from .functions import Function, FunctionRegistry, DEFAULT_FUNCTIONS
from .token_system import TokenType, classify_token, format_formula, tokenize
from .shunting_yard import ShuntingYardParser
from .rpn_evaluator import RPNEvaluator

__all__ = [
    'FormulaError', 'MismatchedParenthesis', 'InvalidArgument', 'UnknownOperator',
    'RecursionLimitExceeded', 'EvaluationError', 'UnresolvedSymbol',
    'Associativity', 'OperatorKind', 'Operator', 'Operators', 'OPERATOR_DEFINITIONS',
    'SYMBOL_TO_OPERATOR', 'lookup_operator', 'get_operator', 'is_operator',
    'Function', 'FunctionRegistry', 'DEFAULT_FUNCTIONS',
    'TokenType', 'classify_token', 'format_formula', 'tokenize',
    'ShuntingYardParser', 'RPNEvaluator'
]
