"""配置文件"""
import sys

# 解析器参数
PARSER_CONFIG = {
    "enable_logging": False,  # 输出每个 token 的处理过程（INFO 级别）
    "drain_operators": True,  # True: 教科书式循环出栈；False: 每个操作符最多比较/出栈一次
    "extended_unary_minus": True,  # 开头、逗号后、操作符后的 '-' 也视为一元负号
    "max_recursion_depth": 32,  # 变量替换的最大嵌套深度
}

# 每层变量替换占用的栈帧数（resolve -> compute_formula -> parse_formula -> parse -> _analyze -> _substitute，留有余量）
FRAMES_PER_SUBSTITUTION = 8
# 为调用方和求值过程保留的栈帧
RECURSION_HEADROOM = 100


def max_safe_recursion_depth():
    """在当前解释器递归限制下，变量替换最多可以嵌套的层数"""
    return max(1, (sys.getrecursionlimit() - RECURSION_HEADROOM) // FRAMES_PER_SUBSTITUTION)


# 日志配置（只在 main.py 中使用）
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert isinstance(PARSER_CONFIG["drain_operators"], bool), "drain_operators 必须是布尔值"
    assert isinstance(PARSER_CONFIG["extended_unary_minus"], bool), "extended_unary_minus 必须是布尔值"
    assert PARSER_CONFIG["max_recursion_depth"] >= 1, "max_recursion_depth 至少为 1"
    assert PARSER_CONFIG["max_recursion_depth"] <= max_safe_recursion_depth(), \
        "max_recursion_depth 超过了解释器递归限制允许的深度"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR"), "未知的日志级别"
    return True
