"""计算器会话 - 宿主层状态（当前表达式、结果、内存、历史、角度模式），只存在于内存中"""
import logging
from collections import deque

import numpy as np

from config.config import SESSION_CONFIG
from core import ExpressionValidator, InvalidExpressionError
from core.preprocessor import format_literal
from calc.evaluator import ExpressionEvaluator
from calc.scientific import apply_function
from utils.formatting import format_number, format_history_entry

logger = logging.getLogger(__name__)


class CalculatorSession:
    """单一所有者的计算器状态，求值本身仍由无状态的核心完成"""

    def __init__(self, degrees=True, evaluator=None, history_size=None, rng=None):
        self.expression = '0'
        self.result = None  # 最近一次 calculate 的结果
        self.memory = SESSION_CONFIG['memory_default']
        self.memory_set = False
        self.degrees = degrees
        self.evaluator = evaluator or ExpressionEvaluator(degrees=degrees)
        self.history = deque(maxlen=history_size or SESSION_CONFIG['history_size'])
        self.rng = rng or np.random.default_rng()

    def _add_history(self, entry):
        self.history.append(entry)
        logger.debug(f"History: {entry}")

    def _set_expression(self, value):
        """把一个数值写回为当前表达式，并清除上次结果

        inf / nan 没有可分词的写法，此时抛出 InvalidExpressionError，会话状态不变
        """
        if not np.isfinite(value):
            raise InvalidExpressionError(
                f"Cannot write non-finite value {value} back into the expression", self.expression)
        self.expression = format_literal(value)
        self.result = None

    # ================== 求值 ==================
    def calculate(self, expression=None):
        """
        求值当前表达式（或传入的表达式）

        空表达式或 "0" 不做任何事，返回 None；
        末尾为操作符或包含空括号时抛出 InvalidExpressionError
        """
        if expression is not None:
            self.expression = expression

        if self.expression.strip() in ('', '0'):
            return None

        if ExpressionValidator.has_trailing_operator(self.expression):
            raise InvalidExpressionError("Invalid expression: trailing operator", self.expression)
        if ExpressionValidator.has_empty_parentheses(self.expression):
            raise InvalidExpressionError("Invalid expression: empty parentheses", self.expression)

        result = self.evaluator.evaluate(self.expression, degrees=self.degrees)
        self.result = result
        self._add_history(format_history_entry(self.expression, result))
        return result

    def current_value(self):
        """上次结果优先，否则对当前表达式求值"""
        if self.result is not None:
            return self.result
        return self.evaluator.evaluate(self.expression, degrees=self.degrees)

    # ================== 快捷/科学函数 ==================
    def apply(self, name):
        value = self.current_value()
        result = apply_function(name, value, degrees=self.degrees)
        self._set_expression(result)
        self._add_history(f"{name}({format_number(value)}) = {format_number(result)}")
        return result

    def insert_constant(self, name):
        """π / e 写入当前表达式"""
        constants = {'pi': np.pi, 'π': np.pi, 'e': np.e}
        if name not in constants:
            raise ValueError(f"Unknown constant: {name}")
        self._set_expression(constants[name])
        self._add_history(f"{name} entered")
        return float(constants[name])

    def random(self):
        value = float(self.rng.random())
        self._set_expression(value)
        self._add_history(f"Random: {format_number(value)}")
        return value

    def toggle_sign(self):
        if self.result is not None:
            self._set_expression(-self.result)
        elif self.expression.startswith('-'):
            self.expression = self.expression[1:]
        else:
            self.expression = '-' + self.expression
        return self.expression

    # ================== 内存 ==================
    def memory_clear(self):
        self.memory = 0.0
        self.memory_set = False

    def memory_recall(self):
        """内存为空时返回 None，表达式保持不变"""
        if not self.memory_set:
            logger.info("Memory is empty")
            return None
        self._set_expression(self.memory)
        return self.memory

    def memory_add(self):
        self.memory += self.current_value()
        self.memory_set = True
        return self.memory

    def memory_subtract(self):
        self.memory -= self.current_value()
        self.memory_set = True
        return self.memory

    def memory_store(self):
        self.memory = self.current_value()
        self.memory_set = True
        return self.memory

    # ================== 模式 / 清除 ==================
    def set_degrees(self):
        self.degrees = True
        logger.info("Angle mode set to Degrees")

    def set_radians(self):
        self.degrees = False
        logger.info("Angle mode set to Radians")

    def clear(self):
        self.expression = '0'
        self.result = None
