"""core/shunting_yard.py - 调度场算法：中缀Token序列 -> RPN"""
import logging

from core.errors import MismatchedParenthesesError
from core.token_system import TokenType, Fixity

logger = logging.getLogger(__name__)


def to_rpn(tokens):
    """
    Args:
        tokens: tokenize() 产生的中缀Token序列
    Returns:
        RPN Token序列（数字、操作符、函数）

    所有二元操作符在优先级相等时先出栈再入栈（左结合），
    ^ 也一样，所以 2^3^2 计算为 (2^3)^2 = 64。
    """
    output_queue = []
    operator_stack = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output_queue.append(token)

        elif token.type == TokenType.FUNCTION or token.fixity == Fixity.PREFIX:
            # 前缀操作符直接入栈，不弹出任何操作符
            operator_stack.append(token)

        elif token.fixity == Fixity.POSTFIX:
            # 后缀操作符作用于刚输出的操作数
            output_queue.append(token)

        elif token.type == TokenType.OPERATOR:
            while (operator_stack
                   and operator_stack[-1].type == TokenType.OPERATOR
                   and operator_stack[-1].precedence >= token.precedence):
                output_queue.append(operator_stack.pop())
            operator_stack.append(token)

        elif token.type == TokenType.LPAREN:
            operator_stack.append(token)

        elif token.type == TokenType.RPAREN:
            while operator_stack and operator_stack[-1].type != TokenType.LPAREN:
                output_queue.append(operator_stack.pop())
            if not operator_stack:
                raise MismatchedParenthesesError("Mismatched parentheses: unmatched ')'")
            operator_stack.pop()
            # 括号前的函数随之输出
            if operator_stack and operator_stack[-1].type == TokenType.FUNCTION:
                output_queue.append(operator_stack.pop())

    # 弹出剩余操作符
    while operator_stack:
        token = operator_stack.pop()
        if token.type == TokenType.LPAREN:
            raise MismatchedParenthesesError("Mismatched parentheses: unmatched '('")
        output_queue.append(token)

    logger.debug(f"RPN: {' '.join(_describe(t) for t in output_queue)}")
    return output_queue


def _describe(token):
    if token.type == TokenType.NUMBER:
        return repr(token.value)
    return token.name
