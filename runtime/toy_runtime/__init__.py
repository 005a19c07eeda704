"""
Toy Runtime - Integer Assignment Language

Each statement assigns the integer value of an arithmetic expression to a
named variable:

    x = 2;
    y = x + 3;
    x = -(y * 2) / 4;

**Components:**
- Tokenizer: expression text -> literal/identifier/operator tokens
- Evaluator: two-stack operator-precedence evaluation with unary signs
- VariableTable: run-scoped bindings in first-seen order
- ToyRuntime: splits programs into statements, binds results, collects failures

Version: 1.0.0
"""

__version__ = '1.0.0'

# ============================================================================
# Core
# ============================================================================

from .errors import (
    ToyError, ERROR_MARKER,
    E_MALFORMED_PROGRAM, E_MALFORMED_STATEMENT, E_INVALID_IDENTIFIER,
    E_INVALID_CHARACTER, E_INVALID_LITERAL, E_UNINITIALIZED_VARIABLE,
    E_UNBALANCED_PARENS, E_MALFORMED_EXPRESSION, E_DIVISION_BY_ZERO,
)

from .tables import VariableTable

from .tokenizer import Token, TokenType, ToyTokenizer, tokenize

from .evaluator import ToyEvaluator, evaluate, apply_operator

from .toy_runtime import (
    ToyRuntime, RuntimeOptions, RunResult, StatementOutcome, Failure,
    execute_toy,
)

# ============================================================================
# Exports
# ============================================================================

__all__ = [
    # Version
    '__version__',

    # Errors
    'ToyError', 'ERROR_MARKER',
    'E_MALFORMED_PROGRAM', 'E_MALFORMED_STATEMENT', 'E_INVALID_IDENTIFIER',
    'E_INVALID_CHARACTER', 'E_INVALID_LITERAL', 'E_UNINITIALIZED_VARIABLE',
    'E_UNBALANCED_PARENS', 'E_MALFORMED_EXPRESSION', 'E_DIVISION_BY_ZERO',

    # Variable table
    'VariableTable',

    # Tokenizer
    'Token', 'TokenType', 'ToyTokenizer', 'tokenize',

    # Evaluator
    'ToyEvaluator', 'evaluate', 'apply_operator',

    # Runtime
    'ToyRuntime', 'RuntimeOptions', 'RunResult', 'StatementOutcome', 'Failure',
    'execute_toy',
]
