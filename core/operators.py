"""core/operators.py"""
import numpy as np
import logging

from core.errors import DivisionByZeroError, DomainError

logger = logging.getLogger(__name__)

DEGREES_TO_RADIANS = np.pi / 180.0
RADIANS_TO_DEGREES = 180.0 / np.pi


class Operators:
    """所有操作符和函数的静态方法集合，统一使用 float64"""

    # 二元操作符========================================
    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) + np.float64(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) - np.float64(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) * np.float64(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符，除数严格为0时报错"""
        if operand2 == 0:
            raise DivisionByZeroError("Division by zero")
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return np.float64(operand1) / np.float64(operand2)

    @staticmethod
    def pow(operand1, operand2):
        """幂运算：支持分数和负指数，NaN/inf 按 IEEE-754 传播"""
        with np.errstate(all='ignore'):
            return np.power(np.float64(operand1), np.float64(operand2))

    # 一元操作符====================
    @staticmethod
    def neg(operand):
        return -np.float64(operand)

    @staticmethod
    def percent(operand):
        """后缀百分号: x% = x/100"""
        return np.float64(operand) / 100.0

    # 函数=====================================
    @staticmethod
    def _to_radians(angle, degrees):
        return np.float64(angle) * DEGREES_TO_RADIANS if degrees else np.float64(angle)

    @staticmethod
    def sin(operand, degrees=True):
        with np.errstate(invalid='ignore'):
            return np.sin(Operators._to_radians(operand, degrees))

    @staticmethod
    def cos(operand, degrees=True):
        with np.errstate(invalid='ignore'):
            return np.cos(Operators._to_radians(operand, degrees))

    @staticmethod
    def tan(operand, degrees=True):
        with np.errstate(invalid='ignore'):
            return np.tan(Operators._to_radians(operand, degrees))

    @staticmethod
    def asin(operand, degrees=True):
        """反正弦，输入必须在[-1, 1]，角度制下结果转为度"""
        if operand < -1 or operand > 1:
            raise DomainError(f"asin input must be between -1 and 1, got {operand}")
        result = np.arcsin(np.float64(operand))
        return result * RADIANS_TO_DEGREES if degrees else result

    @staticmethod
    def acos(operand, degrees=True):
        if operand < -1 or operand > 1:
            raise DomainError(f"acos input must be between -1 and 1, got {operand}")
        result = np.arccos(np.float64(operand))
        return result * RADIANS_TO_DEGREES if degrees else result

    @staticmethod
    def atan(operand, degrees=True):
        result = np.arctan(np.float64(operand))
        return result * RADIANS_TO_DEGREES if degrees else result

    @staticmethod
    def sqrt(operand):
        if operand < 0:
            raise DomainError(f"Cannot calculate square root of negative number {operand}")
        return np.sqrt(np.float64(operand))

    @staticmethod
    def log10(operand):
        """常用对数（以10为底）"""
        if operand <= 0:
            raise DomainError(f"log input must be positive, got {operand}")
        return np.log10(np.float64(operand))

    @staticmethod
    def ln(operand):
        """自然对数"""
        if operand <= 0:
            raise DomainError(f"ln input must be positive, got {operand}")
        return np.log(np.float64(operand))

    @staticmethod
    def abs(operand):
        return np.abs(np.float64(operand))

    @staticmethod
    def exp(operand):
        with np.errstate(over='ignore'):
            return np.exp(np.float64(operand))

    @staticmethod
    def floor(operand):
        return np.floor(np.float64(operand))
