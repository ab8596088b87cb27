import pandas as pd
import numpy as np
import logging
from collections import OrderedDict
from typing import Iterable, Optional, Tuple, Union

from config.config import EVALUATOR_CONFIG
from core import (
    EvalError, InvalidExpressionError, MalformedExpressionError,
    ExpressionValidator, preprocess, tokenize, to_rpn, RPNEvaluator, round_result
)

logger = logging.getLogger(__name__)


def evaluate(expression: Optional[str], degrees: bool = True) -> float:
    """
    求值入口：纯函数，不依赖任何共享状态，可在多线程中直接调用

    Args:
        expression: 用户输入的表达式（可包含 × ÷ π 函数 ^ %），空输入视为 "0"
        degrees: 三角函数是否使用角度制
    Returns:
        保留8位小数的 float
    Raises:
        EvalError 的子类，.kind 为稳定的错误类别
    """
    if expression is None or not expression.strip():
        expression = '0'

    if len(expression) > EVALUATOR_CONFIG['max_length']:
        raise InvalidExpressionError(
            f"Expression longer than {EVALUATOR_CONFIG['max_length']} characters", expression)

    if not ExpressionValidator.is_balanced(expression):
        raise MalformedExpressionError("Unbalanced parentheses", expression)

    try:
        preprocessed = preprocess(expression)
        tokens = tokenize(preprocessed)
        rpn = to_rpn(tokens)
        result = RPNEvaluator.evaluate(rpn, degrees=degrees)
    except EvalError as e:
        e.expression = expression
        raise

    return round_result(result, scale=10.0 ** EVALUATOR_CONFIG['round_decimals'])


class ExpressionEvaluator:

    def __init__(self, cache_size=None, degrees=None):
        self.cache_size = EVALUATOR_CONFIG['cache_size'] if cache_size is None else cache_size
        self.degrees = EVALUATOR_CONFIG['default_degrees'] if degrees is None else degrees
        # 使用有限大小的OrderedDict实现LRU缓存
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    def cache_info(self) -> dict:
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._result_cache),
            'max_size': self.cache_size,
        }

    def _generate_cache_key(self, expression: Optional[str], degrees: bool) -> Tuple[str, bool]:
        return (expression or '', bool(degrees))

    def evaluate(self, expression: Optional[str], degrees: Optional[bool] = None) -> float:
        """
        带缓存的求值，错误原样抛出（错误结果不缓存）
        """
        if degrees is None:
            degrees = self.degrees
        cache_key = self._generate_cache_key(expression, degrees)

        if cache_key in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(cache_key)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {str(expression)[:50]}")
            return self._result_cache[cache_key]

        self._cache_misses += 1
        result = evaluate(expression, degrees=degrees)

        if self.cache_size > 0:
            self._result_cache[cache_key] = result
            self._manage_cache()  # 检查并清理过多的缓存
        return result

    def try_evaluate(self, expression: Optional[str],
                     degrees: Optional[bool] = None) -> Tuple[float, Optional[str]]:
        """
        Returns:
            (结果, None) 或 (NaN, 错误类别)
        """
        try:
            return self.evaluate(expression, degrees), None
        except EvalError as e:
            logger.warning(f"Error evaluating expression '{str(expression)[:50]}': {e.kind.value}: {e}")
            return np.nan, e.kind.value

    def evaluate_many(self, expressions: Union[pd.Series, Iterable[str]],
                      degrees: Optional[bool] = None) -> pd.DataFrame:
        """
        批量求值，单个表达式失败不会中断整个批次

        Returns:
            DataFrame，列为 expression / result / error，失败行 result 为 NaN
        """
        if not isinstance(expressions, pd.Series):
            expressions = pd.Series(list(expressions), dtype=object)

        expressions = expressions.fillna('').astype(str)
        outcomes = [self.try_evaluate(expr, degrees) for expr in expressions]

        results = pd.DataFrame({
            'expression': expressions.values,
            'result': pd.Series([value for value, _ in outcomes], dtype=float).values,
            'error': [error for _, error in outcomes],
        }, index=expressions.index)

        n_failed = results['error'].notna().sum()
        if n_failed:
            logger.warning(f"{n_failed} of {len(results)} expressions failed to evaluate")
        else:
            logger.info(f"Evaluated {len(results)} expressions")
        return results
