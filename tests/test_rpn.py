import math

import numpy as np
import pytest

from core import (
    tokenize, to_rpn, number_token, TOKEN_DEFINITIONS, RPNEvaluator, round_result,
    MismatchedParenthesesError, InvalidExpressionError, DivisionByZeroError, DomainError
)

T = TOKEN_DEFINITIONS


def rpn_of(expression):
    return [t.value if t.is_number() else t.name for t in to_rpn(tokenize(expression))]


def run(expression, degrees=True):
    return RPNEvaluator.evaluate(to_rpn(tokenize(expression)), degrees=degrees)


# ================== 调度场 ==================

def test_precedence():
    assert rpn_of("2+3*4") == [2.0, 3.0, 4.0, '*', '+']
    assert rpn_of("(2+3)*4") == [2.0, 3.0, '+', 4.0, '*']


def test_equal_precedence_pops_first_including_power():
    assert rpn_of("8-3-2") == [8.0, 3.0, '-', 2.0, '-']
    assert rpn_of("2^3^2") == [2.0, 3.0, '^', 2.0, '^']


def test_function_is_emitted_after_its_argument():
    assert rpn_of("sqrt(4)+1") == [4.0, 'sqrt', 1.0, '+']
    assert rpn_of("sin(1+2)") == [1.0, 2.0, '+', 'sin']


def test_prefix_negation_and_postfix_percent():
    assert rpn_of("-(2)^2") == [2.0, 2.0, '^', 'neg']
    assert rpn_of("-(2)*3") == [2.0, 'neg', 3.0, '*']
    assert rpn_of("2^-(1)") == [2.0, 1.0, 'neg', '^']
    assert rpn_of("(50)%*2") == [50.0, '%', 2.0, '*']


def test_unmatched_closing_parenthesis():
    with pytest.raises(MismatchedParenthesesError):
        to_rpn(tokenize("1+2)"))


def test_leftover_opening_parenthesis():
    with pytest.raises(MismatchedParenthesesError):
        to_rpn(tokenize("(1+2"))


# ================== RPN求值 ==================

def test_evaluates_binary_operators_in_source_order():
    assert run("2+3*4") == 14
    assert run("10-4") == 6
    assert run("8/2") == 4
    assert run("2^3^2") == 64


def test_power_follows_ieee_semantics():
    assert run("2^-1") == 0.5
    assert run("4^0.5") == 2
    assert math.isnan(run("(-8)^(1/3)"))
    assert math.isinf(run("10^400"))


def test_division_by_exact_zero():
    with pytest.raises(DivisionByZeroError):
        run("5/0")
    with pytest.raises(DivisionByZeroError):
        run("5/(2-2)")


def test_stack_underflow_is_invalid():
    with pytest.raises(InvalidExpressionError):
        RPNEvaluator.evaluate([T['+']])
    with pytest.raises(InvalidExpressionError):
        RPNEvaluator.evaluate([number_token(1), T['+']])
    with pytest.raises(InvalidExpressionError):
        RPNEvaluator.evaluate([T['neg']])


def test_final_stack_must_hold_one_value():
    with pytest.raises(InvalidExpressionError):
        RPNEvaluator.evaluate([])
    with pytest.raises(InvalidExpressionError):
        RPNEvaluator.evaluate([number_token(1), number_token(2)])


def test_parenthesis_in_rpn_stream_is_invalid():
    with pytest.raises(InvalidExpressionError):
        RPNEvaluator.evaluate([number_token(1), T['(']])


def test_functions_respect_angle_mode():
    assert run("sin(90)") == pytest.approx(1.0)
    assert run("sin(90)", degrees=False) == pytest.approx(math.sin(90))
    assert run("acos(0)") == pytest.approx(90.0)
    assert run("acos(0)", degrees=False) == pytest.approx(math.pi / 2)


def test_function_domain_errors():
    with pytest.raises(DomainError):
        run("sqrt(-4)")
    with pytest.raises(DomainError):
        run("log(0)")
    with pytest.raises(DomainError):
        run("ln(-1)")
    with pytest.raises(DomainError):
        run("asin(2)")


def test_result_is_float64():
    assert isinstance(run("1+1"), np.float64)


# ================== 舍入 ==================

def test_round_result_to_eight_decimals():
    assert round_result(0.1 + 0.2) == 0.3
    assert round_result(1.000000004) == 1.0
    assert round_result(1.000000006) == 1.00000001
    assert round_result(-2.0) == -2.0


def test_round_result_keeps_non_finite_and_huge_values():
    assert math.isinf(round_result(float('inf')))
    assert math.isnan(round_result(float('nan')))
    assert round_result(1e305) == 1e305
