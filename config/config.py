"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 求值器参数
EVALUATOR_CONFIG = {
    "round_decimals": 8,  # 结果保留8位小数，消除浮点表示误差
    "cache_size": 1000,  # ExpressionEvaluator 的LRU缓存大小
    "default_degrees": True,  # 默认角度制
    "max_length": 1000,  # 表达式最大长度
}

# 会话参数（仅内存，不持久化）
SESSION_CONFIG = {
    "history_size": 3,  # 原计算器只保留最近3条历史
    "memory_default": 0.0,
}

# 科学函数参数
SCIENTIFIC_CONFIG = {
    "factorial_min": 0,
    "factorial_max": 100,
}

# 批量求值参数
BATCH_CONFIG = {
    "expression_column": "expression",
    "result_column": "result",
    "error_column": "error",
    "output_path": "results.csv",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert EVALUATOR_CONFIG["round_decimals"] == 8, "结果必须保留8位小数"
    assert EVALUATOR_CONFIG["cache_size"] >= 0, "缓存大小不能为负"
    assert EVALUATOR_CONFIG["max_length"] > 0, "表达式最大长度必须为正"
    assert SESSION_CONFIG["history_size"] > 0, "历史记录至少保留1条"
    assert 0 <= SCIENTIFIC_CONFIG["factorial_min"] <= SCIENTIFIC_CONFIG["factorial_max"], "阶乘范围无效"
    logger.info("Configuration validated successfully!")
