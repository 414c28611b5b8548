"""配置模块"""
from .config import PARSER_CONFIG, LOGGING_CONFIG, validate_config

__all__ = ['PARSER_CONFIG', 'LOGGING_CONFIG', 'validate_config']
