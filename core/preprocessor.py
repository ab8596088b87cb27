"""core/preprocessor.py - 把用户输入改写为可分词的纯数字/操作符字符串"""
import re
import logging

import numpy as np

logger = logging.getLogger(__name__)

# 纯数字字面量（无符号），前面不能紧跟数字或小数点
_NUMBER = r'(?<![\d.])(\d+(?:\.\d+)?)'

# 底数前不能是 ^，否则 (2)^3^2 会被改写成 (2)^9
RE_POWER = re.compile(r'(?<!\^)' + _NUMBER + r'\^(\d+(?:\.\d+)?)(?![\d.])')
RE_PERCENT = re.compile(_NUMBER + r'%')
# 常数和函数名一样不区分大小写
RE_PI = re.compile(r'π|(?<![a-z])pi(?![a-z])', re.IGNORECASE)
RE_EULER = re.compile(r'(?<![a-z])e(?![a-z])', re.IGNORECASE)
RE_WHITESPACE = re.compile(r'\s+')

# 隐式乘法
RE_DIGIT_LPAREN = re.compile(r'(\d)(\()')
RE_RPAREN_DIGIT = re.compile(r'(\))(\d)')
RE_RPAREN_LPAREN = re.compile(r'(\))(\()')
RE_DIGIT_OR_RPAREN_NAME = re.compile(r'([\d)])([a-zA-Z])')
RE_PERCENT_OPERAND = re.compile(r'(%)([\d(a-zA-Z])')


def format_literal(value):
    """浮点数写回表达式时使用定点表示，避免出现 1e-05 这类分词器无法识别的写法"""
    return np.format_float_positional(np.float64(value), trim='-')


PI_LITERAL = '(' + format_literal(np.pi) + ')'
E_LITERAL = '(' + format_literal(np.e) + ')'


def _replace_power(match):
    with np.errstate(all='ignore'):
        result = np.power(np.float64(match.group(1)), np.float64(match.group(2)))
    if not np.isfinite(result):
        # 保留原文，由求值器自己的 ^ 产生 IEEE 结果
        return match.group(0)
    return format_literal(result)


def _replace_percent(match):
    return format_literal(np.float64(match.group(1)) / 100.0)


def preprocess(expression):
    """
    预处理表达式

    顺序：
    1. 显示符号 × ÷ 改写为 * /
    2. 去除空白
    3. 常数 π / e 替换为带括号的十进制展开
    4. 百分号后紧跟操作数时插入 *
    5. 纯数字的 base^exp 直接算出结果（从左到右，不重叠，2^3^2 -> 8^2）
    6. 纯数字的 number% 改写为 number/100 的值
    7. 插入隐式乘法
    8. 空括号 () 改写为 (0)

    函数 sin/cos/... 保持原样，由分词器生成函数Token并在RPN中求值。
    """
    expression = expression.replace('×', '*').replace('÷', '/')
    expression = RE_WHITESPACE.sub('', expression)

    expression = RE_PI.sub(PI_LITERAL, expression)
    expression = RE_EULER.sub(E_LITERAL, expression)

    expression = RE_PERCENT_OPERAND.sub(r'\1*\2', expression)
    expression = RE_POWER.sub(_replace_power, expression)
    expression = RE_PERCENT.sub(_replace_percent, expression)

    expression = RE_DIGIT_LPAREN.sub(r'\1*\2', expression)
    expression = RE_RPAREN_DIGIT.sub(r'\1*\2', expression)
    expression = RE_RPAREN_LPAREN.sub(r'\1*\2', expression)
    expression = RE_DIGIT_OR_RPAREN_NAME.sub(r'\1*\2', expression)

    expression = expression.replace('()', '(0)')

    logger.debug(f"Preprocessed expression: {expression}")
    return expression
