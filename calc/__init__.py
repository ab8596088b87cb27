"""Calc模块 - 求值入口、缓存求值器、科学函数和会话"""
from .evaluator import evaluate, ExpressionEvaluator
from .scientific import apply_function, SCIENTIFIC_FUNCTIONS
from .session import CalculatorSession

__all__ = ['evaluate', 'ExpressionEvaluator', 'apply_function', 'SCIENTIFIC_FUNCTIONS', 'CalculatorSession']
