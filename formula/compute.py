"""公式计算入口 - 串联 Shunting-Yard 解析器和 RPN 评估器"""
import logging

from config.config import PARSER_CONFIG, max_safe_recursion_depth
from core import RPNEvaluator, ShuntingYardParser, RecursionLimitExceeded

logger = logging.getLogger(__name__)


def variable_resolver(variables, functions=None, max_depth=None, chain=(), **parser_options):
    """
    生成变量替换回调：resolver(name, sub_formula) -> 子公式的计算结果
    Args:
        variables: 变量字典
        functions: FunctionRegistry
        max_depth: 最大嵌套深度，默认 PARSER_CONFIG['max_recursion_depth']
        chain: 当前正在解析的变量名链
        parser_options: 传给 ShuntingYardParser 的其他参数
    """
    if max_depth is None:
        max_depth = PARSER_CONFIG["max_recursion_depth"]
    safe_depth = max_safe_recursion_depth()
    if max_depth > safe_depth:
        if not chain:
            logger.warning(f"max_depth {max_depth} exceeds the interpreter recursion limit, using {safe_depth}")
        max_depth = safe_depth

    def resolve(name, sub_formula):
        new_chain = tuple(chain) + (name,)
        if name in chain:
            raise RecursionLimitExceeded(
                f"Circular variable reference: {' -> '.join(new_chain)}", new_chain
            )
        if len(new_chain) > max_depth:
            raise RecursionLimitExceeded(
                f"Variable substitution nested deeper than {max_depth}: {' -> '.join(new_chain)}",
                new_chain
            )
        logger.debug(f"Resolving variable {name} = {sub_formula} (depth {len(new_chain)})")
        return compute_formula(sub_formula, variables, verbose=False, functions=functions,
                               max_depth=max_depth, _chain=new_chain, **parser_options)

    return resolve


def parse_formula(formula, variables=None, verbose=False, functions=None,
                  max_depth=None, _chain=(), **parser_options):
    """
    中缀公式 -> RPN token 列表（有值的变量会被替换为计算结果）
    """
    if variables is None:
        variables = {}
    resolver = variable_resolver(variables, functions, max_depth, _chain, **parser_options)
    parser = ShuntingYardParser(variables, functions, enable_logging=verbose,
                                resolver=resolver, **parser_options)
    return parser.parse(formula)


def compute_formula(formula, variables=None, verbose=False, functions=None,
                    max_depth=None, _chain=(), **parser_options):
    """
    计算中缀公式的值
    Args:
        formula: 中缀公式，如 "3 + 4 * 2"
        variables: {名称: 子公式或 None}
        verbose: 是否输出解析过程
        functions: FunctionRegistry，默认 DEFAULT_FUNCTIONS
        max_depth: 变量替换的最大嵌套深度
        parser_options: drain_operators / extended_unary_minus
    Returns:
        字符串形式的结果，如 "11.0"
    """
    rpn = parse_formula(formula, variables, verbose, functions, max_depth, _chain, **parser_options)
    if verbose:
        logger.info(f"RPN : {' '.join(rpn)}")
    return RPNEvaluator.evaluate(rpn, functions)
