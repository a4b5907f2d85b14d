"""配置文件"""

# 操作符参数：优先级 + 结合性
# name 对应 core.operators.Operators 中的方法名
OPERATOR_CONFIG = {
    "+": {"name": "add", "precedence": 1, "associativity": "left"},
    "-": {"name": "sub", "precedence": 1, "associativity": "left"},
    "*": {"name": "mul", "precedence": 2, "associativity": "left"},
    "/": {"name": "div", "precedence": 2, "associativity": "left"},
    "^": {"name": "pow", "precedence": 3, "associativity": "right"},  # 乘方右结合
}

# 词法分析参数
TOKENIZER_CONFIG = {
    "strict": True,  # True: 非法字符抛 LexError；False: 静默丢弃
    "number_pattern": r"\d+(?:\.\d+)?",  # 不支持指数形式和前导符号
}

# 日志参数
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

# 批量评估参数
BATCH_CONFIG = {
    "comment_prefix": "#",
    "encoding": "utf-8",
    "result_columns": ["expression", "value", "error_kind", "error"],
    "default_output_path": "expression_results.csv",
}

# 命令行参数
CLI_CONFIG = {
    "exit_ok": 0,
    "exit_error": 1,
}

VALID_ASSOCIATIVITY = ("left", "right")


# 验证配置
def validate_config():
    """验证配置的合理性"""
    for symbol, entry in OPERATOR_CONFIG.items():
        assert len(symbol) == 1, f"操作符必须是单个字符: {symbol!r}"
        assert symbol not in "()", "括号不能作为操作符"
        assert not symbol.isdigit() and not symbol.isspace(), f"非法操作符: {symbol!r}"
        assert isinstance(entry.get("precedence"), int), f"{symbol} 缺少整数优先级"
        assert entry.get("associativity") in VALID_ASSOCIATIVITY, f"{symbol} 结合性非法"
        assert entry.get("name"), f"{symbol} 缺少运算名"
    assert OPERATOR_CONFIG["^"]["associativity"] == "right", "乘方必须右结合"
    assert set(CLI_CONFIG.values()) == {0, 1}
    return True
