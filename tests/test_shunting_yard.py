"""
Shunting-Yard 解析器测试

验证：
1. 优先级 / 结合性决定的 RPN 顺序
2. 一元负号识别（'(' 后，以及扩展位置）
3. 逗号只弹出到最近的 '('
4. 括号不匹配一律报错
5. 循环出栈（默认）与单次出栈（兼容模式）的差异
"""

import logging

import pytest

from core import (
    DEFAULT_FUNCTIONS, MismatchedParenthesis, ShuntingYardParser, tokenize
)


def rpn(formula, **kwargs):
    return ShuntingYardParser(**kwargs).parse(formula)


class TestPrecedence:

    @pytest.mark.parametrize("formula,expected", [
        ("3+4*2", "3 4 2 * +"),
        ("3*4+2", "3 4 * 2 +"),
        ("5-3", "5 3 -"),
        ("1-2-3-4", "1 2 - 3 - 4 -"),
        ("2^3^2", "2 3 2 ^ ^"),
        ("(2^3)^2", "2 3 ^ 2 ^"),
        ("8/4/2", "8 4 / 2 /"),
        ("7%3*2", "7 3 % 2 *"),
        ("3 + 4 * 2 / ( 1 - 5 ) ^ 2 ^ 3", "3 4 2 * 1 5 - 2 3 ^ ^ / +"),
    ])
    def test_rpn_order(self, formula, expected):
        assert rpn(formula) == expected.split()

    def test_empty_formula(self):
        assert rpn("") == []

    def test_parser_is_reusable(self):
        parser = ShuntingYardParser()
        assert parser.parse("1+2") == parser.parse("1+2") == ['1', '2', '+']


class TestOperatorDraining:
    """遇到操作符时循环出栈 vs 最多出栈一次"""

    def test_full_drain_by_default(self):
        assert rpn("1-2*3-4") == "1 2 3 * - 4 -".split()

    def test_single_pop_reproduces_legacy_ordering(self):
        # 兼容模式只比较栈顶一次，'-' 留在栈里，结果等价于 1-(2*3-4)
        assert rpn("1-2*3-4", drain_operators=False) == "1 2 3 * 4 - -".split()

    def test_modes_agree_on_simple_chains(self):
        for formula in ("1-2-3-4", "3+4*2", "2^3^2"):
            assert rpn(formula) == rpn(formula, drain_operators=False)


class TestUnaryMinus:

    def test_after_left_paren(self):
        assert rpn("(-5+3)") == ['5', '_', '3', '+']

    def test_binary_minus_unchanged(self):
        assert rpn("5-3") == ['5', '3', '-']

    @pytest.mark.parametrize("formula,expected", [
        ("-3*2", "3 _ 2 *"),
        ("2*-3", "2 3 _ *"),
        ("2^-1", "2 1 _ ^"),
        ("-2^2", "2 2 ^ _"),
        ("1--1", "1 1 _ -"),
        ("max(1,-2)", "1 2 _ max"),
    ])
    def test_extended_positions(self, formula, expected):
        assert rpn(formula) == expected.split()

    def test_only_after_paren_when_not_extended(self):
        assert rpn("-3", extended_unary_minus=False) == ['3', '-']
        assert rpn("(-3)", extended_unary_minus=False) == ['3', '_']

    def test_explicit_opposite_symbol(self):
        assert rpn("2*_3") == ['2', '3', '_', '*']


class TestFunctionsAndSeparators:

    def test_function_call(self):
        assert rpn("max(1,2)") == ['1', '2', 'max']

    def test_separator_pops_pending_operators(self):
        assert rpn("max(1+2, 3*4)") == "1 2 + 3 4 * max".split()

    def test_nested_functions(self):
        assert rpn("max(1, sqrt(16)) + 1") == "1 16 sqrt max 1 +".split()

    def test_separator_stops_at_nearest_paren(self):
        functions = DEFAULT_FUNCTIONS.copy()
        functions.register('f', 3, lambda a, b, c: a + b + c)
        assert rpn("f((1+2,3),4)", functions=functions) == "1 2 + 3 4 f".split()
        # '*' 在函数外面，逗号不能把它弹出来
        assert rpn("2 * f((1,2),3)", functions=functions) == "2 1 2 3 f *".split()


class TestMismatchedParenthesis:

    @pytest.mark.parametrize("formula", ["(1+2", "1+2)", "((1+2)", ")", "1,2", ",1", "max(1,2))"])
    def test_raises(self, formula):
        with pytest.raises(MismatchedParenthesis):
            rpn(formula)


class TestVariables:

    def test_unresolved_variable_passes_through(self):
        assert rpn("x*2", variables={'x': None}) == ['x', '2', '*']

    def test_empty_value_passes_through(self):
        assert rpn("x*2", variables={'x': ''}) == ['x', '2', '*']

    def test_unknown_token_passes_through(self):
        assert rpn("foo + 1") == ['foo', '1', '+']

    def test_resolver_is_called(self):
        calls = []

        def resolver(name, value):
            calls.append((name, value))
            return '42.0'

        assert rpn("x+1", variables={'x': '40+2'}, resolver=resolver) == ['42.0', '1', '+']
        assert calls == [('x', '40+2')]

    def test_default_resolver_computes_sub_formula(self):
        assert rpn("x+1", variables={'x': '40+2'}) == ['42.0', '1', '+']


class TestProperties:

    @pytest.mark.parametrize("formula", [
        "((1+2)*(3-4))",
        "(2^(3^2))",
        "((1/2)%(3*4))",
        "(((1+2)+3)+4)",
    ])
    def test_fully_parenthesized_output_length(self, formula):
        tokens = tokenize(formula)
        parens = sum(1 for t in tokens if t in '()')
        assert len(rpn(formula)) == len(tokens) - parens


class TestLogging:

    def test_trace_when_enabled(self, caplog):
        caplog.set_level(logging.INFO, logger='core.shunting_yard')
        rpn("3+4", enable_logging=True)
        messages = [r.getMessage() for r in caplog.records]
        assert "Treatment of token '3'." in messages
        assert "No more token to read." in messages

    def test_silent_by_default(self, caplog):
        caplog.set_level(logging.INFO, logger='core.shunting_yard')
        rpn("3+4")
        assert not [r for r in caplog.records if r.name == 'core.shunting_yard']

    def test_logging_does_not_change_output(self):
        formula = "3 + 4 * 2 / ( 1 - 5 ) ^ 2 ^ 3"
        assert rpn(formula, enable_logging=True) == rpn(formula)
