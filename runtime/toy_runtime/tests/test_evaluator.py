"""
Test suite for the operator-precedence evaluator
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from toy_runtime.evaluator import ToyEvaluator, evaluate, apply_operator
from toy_runtime.tokenizer import tokenize
from toy_runtime.tables import VariableTable
from toy_runtime.errors import (
    ToyError,
    E_DIVISION_BY_ZERO, E_MALFORMED_EXPRESSION, E_UNBALANCED_PARENS,
)


def calc(source, variables=None, lenient=False):
    variables = variables if variables is not None else VariableTable()
    return evaluate(tokenize(source, variables), variables, lenient=lenient)


class TestArithmetic:
    """Test basic arithmetic"""

    def test_literal(self):
        assert calc('42') == 42

    def test_addition(self):
        assert calc('5 + 3') == 8

    def test_subtraction(self):
        assert calc('10 - 4') == 6

    def test_multiplication(self):
        assert calc('6 * 7') == 42

    def test_division(self):
        assert calc('15 / 3') == 5

    def test_large_values_do_not_wrap(self):
        assert calc('2147483647 + 1') == 2147483648
        assert calc('99999999999 * 99999999999') == 99999999999 ** 2


class TestPrecedence:
    """Test precedence, associativity and parentheses"""

    def test_multiplication_first(self):
        assert calc('2 + 3 * 4') == 14

    def test_parentheses(self):
        assert calc('(2 + 3) * 4') == 20

    def test_nested_parentheses(self):
        assert calc('((1 + 2) * (3 + 4)) - 1') == 20

    def test_subtraction_left_associative(self):
        assert calc('10 - 4 - 3') == 3

    def test_division_left_associative(self):
        assert calc('100 / 10 / 5') == 2

    def test_mixed(self):
        assert calc('8 - 6 / 2 * 3 + 1') == 0


class TestDivision:
    """Test truncating division"""

    @pytest.mark.parametrize('source, expected', [
        ('7 / 2', 3),
        ('-7 / 2', -3),
        ('7 / -2', -3),
        ('-7 / -2', 3),
        ('1 / 3', 0),
        ('-1 / 3', 0),
    ])
    def test_truncates_toward_zero(self, source, expected):
        assert calc(source) == expected

    def test_division_by_zero(self):
        with pytest.raises(ToyError) as exc:
            calc('5 / 0')
        assert exc.value.code == E_DIVISION_BY_ZERO

    def test_division_by_zero_expression(self):
        with pytest.raises(ToyError) as exc:
            calc('5 / (3 - 3)')
        assert exc.value.code == E_DIVISION_BY_ZERO

    def test_apply_operator(self):
        assert apply_operator('-', 2, 5) == -3
        assert apply_operator('/', -9, 4) == -2


class TestUnary:
    """Test unary plus and minus"""

    def test_negative_literal(self):
        assert calc('-5') == -5

    def test_positive_literal(self):
        assert calc('+5') == 5

    def test_negated_group(self):
        assert calc('-(3 + 2)') == -5

    def test_after_binary_operator(self):
        assert calc('10 + -3') == 7
        assert calc('2 - -3') == 5

    def test_binds_tighter_than_multiplication(self):
        assert calc('2 * -3') == -6
        assert calc('2 * -3 + 1') == -5
        assert calc('8 / -2 / 2') == -2

    def test_leading_sign_with_product(self):
        assert calc('-2 * 3') == -6

    def test_double_negation(self):
        assert calc('- -3') == 3
        assert calc('-(-3)') == 3

    def test_after_open_paren(self):
        assert calc('4 * (-1 + 3)') == 8


class TestVariables:
    """Test identifier substitution"""

    def test_substitution(self, table):
        assert calc('x * 2 + y', table) == 17

    def test_evaluator_reads_table(self, table):
        tokens = tokenize('x - _tmp1', table)
        assert ToyEvaluator(table).evaluate(tokens) == 3

    def test_deterministic(self, table):
        tokens = tokenize('(x + y) * _tmp1 / 2', table)
        evaluator = ToyEvaluator(table)
        assert evaluator.evaluate(tokens) == evaluator.evaluate(tokens) == 24


class TestMalformed:
    """Test strict stack discipline"""

    @pytest.mark.parametrize('source', ['', '5 +', '* 5', '1 2', '()', '3 * / 4', '(1 + 2) (3)'])
    def test_malformed_expression(self, source):
        with pytest.raises(ToyError) as exc:
            calc(source)
        assert exc.value.code == E_MALFORMED_EXPRESSION

    @pytest.mark.parametrize('source', ['(1 + 2', '1 + 2)', ')', '((3)', '3))'])
    def test_unbalanced_parens(self, source):
        with pytest.raises(ToyError) as exc:
            calc(source)
        assert exc.value.code == E_UNBALANCED_PARENS


class TestLenient:
    """Test the lenient final drain"""

    def test_trailing_plus(self):
        assert calc('5 +', lenient=True) == 5

    def test_trailing_minus(self):
        assert calc('5 -', lenient=True) == -5

    def test_leading_star(self):
        assert calc('* 5', lenient=True) == 0

    def test_well_formed_unchanged(self):
        assert calc('2 * -3', lenient=True) == -6

    def test_other_checks_stay_strict(self):
        with pytest.raises(ToyError):
            calc('(1 + 2', lenient=True)
        with pytest.raises(ToyError):
            calc('', lenient=True)
        with pytest.raises(ToyError):
            calc('3 * / 4', lenient=True)
