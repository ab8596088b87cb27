"""core/token_system.py"""
from enum import Enum


class TokenType(Enum):
    NUMBER = "number"  # 数字
    OPERATOR = "operator"  # 操作符（二元、前缀负号、后缀百分号）
    FUNCTION = "function"  # 命名函数 sin/cos/...
    LPAREN = "lparen"
    RPAREN = "rparen"


class Fixity(Enum):
    INFIX = "infix"
    PREFIX = "prefix"
    POSTFIX = "postfix"


class Token:
    def __init__(self, token_type, name, value=None, arity=0, precedence=0,
                 fixity=Fixity.INFIX, method=None):
        self.type = token_type
        self.name = name
        self.value = value  # 仅NUMBER使用
        self.arity = arity
        self.precedence = precedence
        self.fixity = fixity
        self.method = method  # Operators 中对应的方法名

    def is_number(self):
        return self.type == TokenType.NUMBER

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.name, self.value) == (other.type, other.name, other.value)

    def __hash__(self):
        return hash((self.type, self.name, self.value))

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Token(number, {self.value!r})"
        return f"Token({self.type.value}, {self.name!r})"


def number_token(value):
    """创建数字Token"""
    return Token(TokenType.NUMBER, 'number', value=float(value))


# Token定义字典
TOKEN_DEFINITIONS = {
    # 括号
    '(': Token(TokenType.LPAREN, '('),
    ')': Token(TokenType.RPAREN, ')'),

    # 二元操作符 - 全部左结合（包括^，所以 2^3^2 = (2^3)^2）
    '+': Token(TokenType.OPERATOR, '+', arity=2, precedence=1, method='add'),
    '-': Token(TokenType.OPERATOR, '-', arity=2, precedence=1, method='sub'),
    '*': Token(TokenType.OPERATOR, '*', arity=2, precedence=2, method='mul'),
    '/': Token(TokenType.OPERATOR, '/', arity=2, precedence=2, method='div'),
    '^': Token(TokenType.OPERATOR, '^', arity=2, precedence=3, method='pow'),

    # 一元操作符 - neg 低于 ^ 高于 * /，-(2)^2 与 -2^2 一样是 -4
    'neg': Token(TokenType.OPERATOR, 'neg', arity=1, precedence=2.5, fixity=Fixity.PREFIX, method='neg'),
    '%': Token(TokenType.OPERATOR, '%', arity=1, precedence=5, fixity=Fixity.POSTFIX, method='percent'),

    # 函数（参数经过同一条 分词->调度场->RPN 流水线求值）
    'sin': Token(TokenType.FUNCTION, 'sin', arity=1, fixity=Fixity.PREFIX, method='sin'),
    'cos': Token(TokenType.FUNCTION, 'cos', arity=1, fixity=Fixity.PREFIX, method='cos'),
    'tan': Token(TokenType.FUNCTION, 'tan', arity=1, fixity=Fixity.PREFIX, method='tan'),
    'asin': Token(TokenType.FUNCTION, 'asin', arity=1, fixity=Fixity.PREFIX, method='asin'),
    'acos': Token(TokenType.FUNCTION, 'acos', arity=1, fixity=Fixity.PREFIX, method='acos'),
    'atan': Token(TokenType.FUNCTION, 'atan', arity=1, fixity=Fixity.PREFIX, method='atan'),
    'sqrt': Token(TokenType.FUNCTION, 'sqrt', arity=1, fixity=Fixity.PREFIX, method='sqrt'),
    'log': Token(TokenType.FUNCTION, 'log', arity=1, fixity=Fixity.PREFIX, method='log10'),
    'ln': Token(TokenType.FUNCTION, 'ln', arity=1, fixity=Fixity.PREFIX, method='ln'),
    'abs': Token(TokenType.FUNCTION, 'abs', arity=1, fixity=Fixity.PREFIX, method='abs'),
    'exp': Token(TokenType.FUNCTION, 'exp', arity=1, fixity=Fixity.PREFIX, method='exp'),
}

BINARY_OPERATORS = '+-*/^'
FUNCTION_NAMES = frozenset(name for name, tk in TOKEN_DEFINITIONS.items() if tk.type == TokenType.FUNCTION)
TRIG_FUNCTIONS = frozenset(['sin', 'cos', 'tan'])
INVERSE_TRIG_FUNCTIONS = frozenset(['asin', 'acos', 'atan'])


class ExpressionValidator:
    @staticmethod
    def is_balanced(expression):
        """
        括号平衡检查：遇到 '(' 计数+1，遇到 ')' 计数-1，
        计数一旦为负立即返回False，结束时计数必须为0
        """
        balance = 0
        for char in expression:
            if char == '(':
                balance += 1
            elif char == ')':
                balance -= 1
                if balance < 0:
                    return False
        return balance == 0

    @staticmethod
    def has_trailing_operator(expression):
        """末尾是否为二元操作符（宿主层的预检查）"""
        stripped = expression.rstrip()
        return bool(stripped) and stripped[-1] in BINARY_OPERATORS + '×÷'

    @staticmethod
    def has_empty_parentheses(expression):
        return '()' in ''.join(expression.split())


def is_balanced(expression):
    return ExpressionValidator.is_balanced(expression)
