"""core/errors.py - 表达式求值的错误类型"""
from enum import Enum


class ErrorKind(Enum):
    MALFORMED_EXPRESSION = "MalformedExpression"  # 括号不平衡（分词前检测）
    MISMATCHED_PARENTHESES = "MismatchedParentheses"  # 调度场算法检测到括号不匹配
    INVALID_EXPRESSION = "InvalidExpression"  # 栈下溢 / 结果栈不为1 / 非法字符
    DIVISION_BY_ZERO = "DivisionByZero"
    DOMAIN_ERROR = "DomainError"  # sqrt负数、log非正数、asin/acos越界、阶乘越界


class EvalError(Exception):
    """所有求值错误的基类，kind 为稳定的错误类别"""
    kind = None

    def __init__(self, message=None, expression=None):
        self.expression = expression
        if message is None:
            message = self.kind.value if self.kind else "Evaluation error"
        super().__init__(message)


class MalformedExpressionError(EvalError):
    kind = ErrorKind.MALFORMED_EXPRESSION


class MismatchedParenthesesError(EvalError):
    kind = ErrorKind.MISMATCHED_PARENTHESES


class InvalidExpressionError(EvalError):
    kind = ErrorKind.INVALID_EXPRESSION


class DivisionByZeroError(EvalError):
    kind = ErrorKind.DIVISION_BY_ZERO


class DomainError(EvalError):
    kind = ErrorKind.DOMAIN_ERROR
