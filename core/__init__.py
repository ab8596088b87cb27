"""核心模块 - Token系统、预处理、分词、调度场、RPN评估器和操作符"""
from .errors import (
    ErrorKind, EvalError, MalformedExpressionError, MismatchedParenthesesError,
    InvalidExpressionError, DivisionByZeroError, DomainError
)
from .token_system import (
    TokenType, Fixity, Token, TOKEN_DEFINITIONS, FUNCTION_NAMES,
    ExpressionValidator, is_balanced, number_token
)
from .operators import Operators
from .preprocessor import preprocess
from .tokenizer import tokenize
from .shunting_yard import to_rpn
from .rpn_evaluator import RPNEvaluator, round_result

__all__ = [
    'ErrorKind', 'EvalError', 'MalformedExpressionError', 'MismatchedParenthesesError',
    'InvalidExpressionError', 'DivisionByZeroError', 'DomainError',
    'TokenType', 'Fixity', 'Token', 'TOKEN_DEFINITIONS', 'FUNCTION_NAMES',
    'ExpressionValidator', 'is_balanced', 'number_token',
    'Operators', 'preprocess', 'tokenize', 'to_rpn',
    'RPNEvaluator', 'round_result'
]
