"""RPN 求值器测试"""

import pytest

from core import (
    DEFAULT_FUNCTIONS, EvaluationError, FunctionRegistry, RPNEvaluator, UnresolvedSymbol
)


class TestEvaluate:

    @pytest.mark.parametrize("tokens,expected", [
        ("3 4 2 * +", '11.0'),
        ("5 _ 3 +", '-2.0'),
        ("10 3 -", '7.0'),
        ("2 3 2 ^ ^", '512.0'),
        ("2 3 ^ 2 ^", '64.0'),
        ("1 0 /", 'inf'),
        ("16 sqrt", '4.0'),
        ("1 5 max 2 *", '10.0'),
        ("3", '3.0'),
        ("-2.0 3 *", '-6.0'),
    ])
    def test_values(self, tokens, expected):
        assert RPNEvaluator.evaluate(tokens.split()) == expected

    def test_custom_functions(self):
        functions = FunctionRegistry()
        functions.register('sub2', 2, lambda a, b: a - b)
        assert RPNEvaluator.evaluate(['10', '3', 'sub2'], functions) == '7.0'

    def test_default_catalog_not_used_with_custom_registry(self):
        with pytest.raises(UnresolvedSymbol):
            RPNEvaluator.evaluate(['16', 'sqrt'], FunctionRegistry())
        assert RPNEvaluator.evaluate(['16', 'sqrt'], DEFAULT_FUNCTIONS) == '4.0'


class TestErrors:

    @pytest.mark.parametrize("tokens", [[], ['+'], ['1', '+'], ['_'], ['max']])
    def test_underflow_or_empty(self, tokens):
        with pytest.raises(EvaluationError):
            RPNEvaluator.evaluate(tokens)

    def test_leftover_values(self):
        with pytest.raises(EvaluationError, match="expected 1"):
            RPNEvaluator.evaluate(['1', '2'])

    def test_unresolved_symbol(self):
        with pytest.raises(UnresolvedSymbol) as exc_info:
            RPNEvaluator.evaluate(['x', '1', '+'])
        assert exc_info.value.symbol == 'x'
