"""公式模块 - 解析并计算中缀公式"""
from .compute import compute_formula, parse_formula, variable_resolver

__all__ = ['compute_formula', 'parse_formula', 'variable_resolver']
