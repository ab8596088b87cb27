"""RPN表达式求值器 - 调用统一的Operators类"""
import numpy as np
import logging

from core.errors import InvalidExpressionError
from core.token_system import TokenType, TRIG_FUNCTIONS, INVERSE_TRIG_FUNCTIONS
from core.operators import Operators

logger = logging.getLogger(__name__)

ROUND_SCALE = 1e8  # 8位小数


def round_result(value, scale=ROUND_SCALE):
    """
    四舍五入到8位小数: floor(x*1e8 + 0.5) / 1e8
    非有限值或放大后溢出的值原样返回
    """
    value = np.float64(value)
    if not np.isfinite(value):
        return float(value)
    with np.errstate(over='ignore'):
        scaled = value * scale
    if not np.isfinite(scaled):
        return float(value)
    return float(np.floor(scaled + 0.5) / scale)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence, degrees=True):
        """
        Args:
            token_sequence: to_rpn() 产生的RPN Token序列
            degrees: 三角函数是否使用角度制
        Returns:
            float64 结果（未舍入）
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(np.float64(token.value))
                continue

            if token.type not in (TokenType.OPERATOR, TokenType.FUNCTION):
                logger.error(f"Unexpected token in RPN stream: {token!r}")
                raise InvalidExpressionError(f"Unexpected token '{token.name}'")

            op_method = getattr(Operators, token.method, None)
            if op_method is None:
                logger.error(f"Unknown operator: {token.name}")
                raise InvalidExpressionError(f"Unknown operator '{token.name}'")

            # ================== 二元操作符处理 ==================
            if token.arity == 2:
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token.name}")
                    raise InvalidExpressionError(f"Insufficient operands for '{token.name}'")
                operand2 = stack.pop()
                operand1 = stack.pop()
                stack.append(op_method(operand1, operand2))

            # ================== 一元操作符 / 函数处理 ==================
            elif token.arity == 1:
                if len(stack) < 1:
                    logger.debug(f"Insufficient operands for {token.name}")
                    raise InvalidExpressionError(f"Insufficient operands for '{token.name}'")
                operand = stack.pop()
                if token.name in TRIG_FUNCTIONS or token.name in INVERSE_TRIG_FUNCTIONS:
                    stack.append(op_method(operand, degrees=degrees))
                else:
                    stack.append(op_method(operand))

            else:
                logger.error(f"Unexpected arity {token.arity} for {token.name}")
                raise InvalidExpressionError(f"Unsupported operator '{token.name}'")

        # 返回结果处理
        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise InvalidExpressionError(f"Invalid expression: {len(stack)} values left on the stack")

        return stack[0]
