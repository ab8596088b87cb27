"""快捷/科学函数层：作用于当前值的一元函数，带定义域检查"""
import logging

import numpy as np
from scipy import special

from config.config import SCIENTIFIC_CONFIG
from core import Operators, DomainError, DivisionByZeroError, round_result

logger = logging.getLogger(__name__)


def square(value, degrees=True):
    return Operators.mul(value, value)


def cube(value, degrees=True):
    return Operators.mul(Operators.mul(value, value), value)


def inverse(value, degrees=True):
    if value == 0:
        raise DivisionByZeroError("Cannot calculate inverse of zero")
    return Operators.div(1.0, value)


def factorial(value, degrees=True):
    """阶乘：只接受 [factorial_min, factorial_max] 范围内的整数"""
    lo, hi = SCIENTIFIC_CONFIG['factorial_min'], SCIENTIFIC_CONFIG['factorial_max']
    if not np.isfinite(value) or value != np.floor(value):
        raise DomainError(f"Factorial requires an integer, got {value}")
    if value < lo or value > hi:
        raise DomainError(f"Invalid input for factorial ({lo}-{hi} only)")
    return float(special.factorial(int(value), exact=True))


def hyp(value, degrees=True):
    """斜边: sqrt(x^2 + 1)"""
    if value <= 0:
        raise DomainError(f"Invalid input for hypotenuse: {value}")
    return np.hypot(np.float64(value), 1.0)


SCIENTIFIC_FUNCTIONS = {
    'sqrt': lambda v, degrees=True: Operators.sqrt(v),
    'square': square,
    'cube': cube,
    'inverse': inverse,
    'percent': lambda v, degrees=True: Operators.percent(v),
    'exp': lambda v, degrees=True: Operators.exp(v),
    'sin': Operators.sin,
    'cos': Operators.cos,
    'tan': Operators.tan,
    'asin': Operators.asin,
    'acos': Operators.acos,
    'atan': Operators.atan,
    'log': lambda v, degrees=True: Operators.log10(v),
    'ln': lambda v, degrees=True: Operators.ln(v),
    'factorial': factorial,
    'abs': lambda v, degrees=True: Operators.abs(v),
    'floor': lambda v, degrees=True: Operators.floor(v),
    'hyp': hyp,
    'negate': lambda v, degrees=True: Operators.neg(v),
}


def apply_function(name, value, degrees=True):
    """
    Args:
        name: SCIENTIFIC_FUNCTIONS 中的函数名
        value: 当前值
        degrees: 三角函数是否使用角度制
    Returns:
        保留8位小数的 float
    """
    func = SCIENTIFIC_FUNCTIONS.get(name)
    if func is None:
        raise ValueError(f"Unknown scientific function: {name}")
    result = func(float(value), degrees=degrees)
    logger.debug(f"{name}({value}) = {result}")
    return round_result(result)
