"""
Toy Evaluator - Operator-Precedence Expression Evaluation

Evaluates a token list with two explicit stacks (operands and operators)
in a single left-to-right pass. No AST is built.

Unary '+'/'-' are recognised by position: at the start of an expression,
right after '(' and right after another operator. A sign is desugared to
'0 + x' / '0 - x', but it is stacked as its own operator that binds tighter
than '*' and '/', so '2 * -3' is -6 and '8 / -2 / 2' is -2.

Division truncates toward zero.
"""

from typing import List
import logging

from .errors import (
    ToyError,
    E_DIVISION_BY_ZERO, E_MALFORMED_EXPRESSION, E_UNBALANCED_PARENS,
)
from .tables import VariableTable
from .tokenizer import Token, TokenType

logger = logging.getLogger(__name__)


UNARY_PLUS = "u+"
UNARY_MINUS = "u-"

PRECEDENCE = {
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
    UNARY_PLUS: 3,
    UNARY_MINUS: 3,
}

SIGNS = {'+': UNARY_PLUS, '-': UNARY_MINUS}


def apply_operator(op: str, left: int, right: int) -> int:
    """Apply a binary operator to two ints"""
    if op == '+':
        return left + right
    elif op == '-':
        return left - right
    elif op == '*':
        return left * right
    elif op == '/':
        if right == 0:
            raise ToyError(E_DIVISION_BY_ZERO, "Division by zero")
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient
    else:
        raise ToyError(E_MALFORMED_EXPRESSION, f"Unknown operator: {op}")


class ToyEvaluator:
    """Evaluate expression tokens against a variable table"""

    def __init__(self, variables: VariableTable, lenient: bool = False):
        self.variables = variables
        # lenient: a missing left operand in the final drain counts as 0
        self.lenient = lenient

    def evaluate(self, tokens: List[Token]) -> int:
        """Evaluate tokens to a single int"""
        values: List[int] = []
        operators: List[str] = []
        expect_unary = True

        for token in tokens:
            if token.type == TokenType.LITERAL:
                values.append(token.value)
                expect_unary = False

            elif token.type == TokenType.IDENTIFIER:
                values.append(self.variables.get(token.value))
                expect_unary = False

            elif token.value == '(':
                operators.append('(')
                expect_unary = True

            elif token.value == ')':
                while operators and operators[-1] != '(':
                    self._reduce(values, operators)
                if not operators:
                    raise ToyError(E_UNBALANCED_PARENS, f"Unmatched ')' at position {token.pos}")
                operators.pop()
                expect_unary = False

            elif token.value in PRECEDENCE:
                op = token.value
                if expect_unary and op in SIGNS:
                    values.append(0)
                    operators.append(SIGNS[op])
                else:
                    while (operators and operators[-1] != '('
                           and PRECEDENCE[operators[-1]] >= PRECEDENCE[op]):
                        self._reduce(values, operators)
                    operators.append(op)
                expect_unary = True

            else:
                raise ToyError(E_MALFORMED_EXPRESSION, f"Unexpected token {token.value!r} at position {token.pos}")

        while operators:
            if operators[-1] == '(':
                raise ToyError(E_UNBALANCED_PARENS, "Unmatched '('")
            self._reduce(values, operators, final=True)

        if len(values) != 1:
            raise ToyError(E_MALFORMED_EXPRESSION, f"Expression left {len(values)} operands")

        logger.debug(f"evaluated {len(tokens)} tokens to {values[0]}")
        return values[0]

    def _reduce(self, values: List[int], operators: List[str], final: bool = False):
        """Pop one operator and its operands, push the result"""
        op = operators.pop()
        if not values:
            raise ToyError(E_MALFORMED_EXPRESSION, f"Missing operand for '{op[-1]}'")
        right = values.pop()
        if values:
            left = values.pop()
        elif final and self.lenient:
            left = 0
        else:
            raise ToyError(E_MALFORMED_EXPRESSION, f"Missing operand for '{op[-1]}'")
        values.append(apply_operator(op[-1], left, right))


def evaluate(tokens: List[Token], variables: VariableTable, lenient: bool = False) -> int:
    """Evaluate tokens (convenience function)"""
    return ToyEvaluator(variables, lenient=lenient).evaluate(tokens)


__all__ = [
    'ToyEvaluator',
    'evaluate',
    'apply_operator',
    'PRECEDENCE',
]
