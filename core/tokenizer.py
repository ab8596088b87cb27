"""core/tokenizer.py"""
import logging
import string

from core.errors import InvalidExpressionError
from core.token_system import TOKEN_DEFINITIONS, FUNCTION_NAMES, BINARY_OPERATORS, number_token

logger = logging.getLogger(__name__)

# 这些字符之后的 '-' 视为一元负号
UNARY_MINUS_PRECEDERS = BINARY_OPERATORS + '('
NUMBER_CHARS = string.digits + '.'


def _flush_number(current_number, tokens, expression):
    if current_number == '':
        return ''
    try:
        tokens.append(number_token(current_number))
    except ValueError:
        raise InvalidExpressionError(f"Invalid number literal: '{current_number}'", expression)
    return ''


def tokenize(expression):
    """
    把预处理后的表达式切分为Token序列（假设括号已平衡）

    - 连续的数字和小数点组成一个数字Token
    - '-' 出现在开头，或紧跟在 + - * / ^ ( 之后时为一元负号：
      后面是数字则并入数字字面量；后面是 ( 或函数名则生成前缀 neg 操作符；
      连续的一元负号互相抵消（--5 == 5）
    - 字母序列必须是已知函数名且后面紧跟 (
    """
    tokens = []
    current_number = ''
    i = 0
    n = len(expression)

    while i < n:
        char = expression[i]

        if char in NUMBER_CHARS:
            current_number += char
            i += 1
            continue

        if char == '-' and (i == 0 or expression[i - 1] in UNARY_MINUS_PRECEDERS):
            # 只有前一个字符也是一元负号时累加器才会是 '-'
            if current_number == '-':
                current_number = ''
            else:
                current_number = _flush_number(current_number, tokens, expression)
                current_number = '-'
            i += 1
            continue

        if current_number == '-':
            # 一元负号后面不是数字
            if char == '(' or char in string.ascii_letters:
                tokens.append(TOKEN_DEFINITIONS['neg'])
                current_number = ''
            else:
                raise InvalidExpressionError(f"Dangling unary minus at position {i}", expression)
        else:
            current_number = _flush_number(current_number, tokens, expression)

        if char in BINARY_OPERATORS or char in '()%':
            tokens.append(TOKEN_DEFINITIONS[char])
            i += 1
        elif char in string.ascii_letters:
            start = i
            while i < n and expression[i] in string.ascii_letters:
                i += 1
            name = expression[start:i].lower()
            if name not in FUNCTION_NAMES:
                raise InvalidExpressionError(f"Unknown function: '{name}'", expression)
            if i >= n or expression[i] != '(':
                raise InvalidExpressionError(f"Function '{name}' must be followed by '('", expression)
            tokens.append(TOKEN_DEFINITIONS[name])
        else:
            raise InvalidExpressionError(f"Unexpected character '{char}' at position {i}", expression)

    if current_number == '-':
        raise InvalidExpressionError("Expression ends with a unary minus", expression)
    _flush_number(current_number, tokens, expression)

    logger.debug(f"Tokens: {tokens}")
    return tokens
