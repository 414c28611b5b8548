"""命令行入口 - 计算中缀公式或输出其 RPN 序列"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, PARSER_CONFIG, max_safe_recursion_depth, validate_config
from core import FormulaError
from formula.compute import compute_formula, parse_formula

logger = logging.getLogger(__name__)


def parse_variables(definitions):
    """
    把 ["x=1+2", "y"] 转换为 {"x": "1+2", "y": None}
    没有 '=' 的变量保持未解析状态
    """
    variables = {}
    for definition in definitions or ():
        name, sep, value = definition.partition('=')
        name = name.strip()
        if not name:
            raise ValueError(f"Invalid variable definition: {definition!r}")
        variables[name] = value.strip() if sep else None
    return variables


def recursion_depth(value):
    """argparse 类型：1 到解释器允许的安全深度之间的整数"""
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r}")
    limit = max_safe_recursion_depth()
    if not 1 <= depth <= limit:
        raise argparse.ArgumentTypeError(f"depth must be between 1 and {limit}, got {depth}")
    return depth


def build_arg_parser():
    parser = argparse.ArgumentParser(description='Infix formula -> RPN converter and calculator')
    parser.add_argument('formula', type=str, help='infix formula, e.g. "3 + 4 * 2"')
    parser.add_argument('--var', action='append', default=[], metavar='NAME[=FORMULA]',
                        help='variable definition (repeatable); without "=" the name stays unresolved')
    parser.add_argument('--rpn', action='store_true',
                        help='print the RPN token sequence instead of computing it')
    parser.add_argument('--verbose', action='store_true',
                        help='log every parser transition')
    parser.add_argument('--single-pop', action='store_true',
                        help='pop at most one operator per incoming operator (legacy ordering)')
    parser.add_argument('--no-extended-unary', action='store_true',
                        help="only treat '-' right after '(' as unary minus")
    parser.add_argument('--max-depth', type=recursion_depth, default=PARSER_CONFIG["max_recursion_depth"],
                        help='maximum nesting of variable substitution')
    return parser


def main(args):
    try:
        variables = parse_variables(args.var)
    except ValueError as e:
        logger.error(str(e))
        return 2

    options = {
        "drain_operators": not args.single_pop,
        "extended_unary_minus": not args.no_extended_unary,
    }

    try:
        if args.rpn:
            rpn = parse_formula(args.formula, variables, verbose=args.verbose,
                                max_depth=args.max_depth, **options)
            print(' '.join(rpn))
        else:
            result = compute_formula(args.formula, variables, verbose=args.verbose,
                                     max_depth=args.max_depth, **options)
            print(result)
    except FormulaError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    return 0


def cli(argv=None):
    validate_config()
    # 设置日志
    logging.basicConfig(
        level=getattr(logging, LOGGING_CONFIG["level"]),
        format=LOGGING_CONFIG["format"]
    )
    return main(build_arg_parser().parse_args(argv))


if __name__ == "__main__":
    sys.exit(cli())
