"""
Toy Runtime - Statement Processing

A program is a sequence of assignments, each terminated by ';':

    x = 2;
    y = x + 3;
    x = -(y * 2) / 4;

Statements run strictly left to right. Each right-hand side is fully
evaluated before its identifier is bound, and a statement that fails leaves
the variable table untouched. Failures are returned as values: a run
produces either the final bindings or, if anything failed, only the list of
failures.
"""

from typing import Dict, List, Optional
from dataclasses import dataclass, field
import logging

from .errors import (
    ToyError, ERROR_MARKER,
    E_MALFORMED_PROGRAM, E_MALFORMED_STATEMENT, E_INVALID_IDENTIFIER,
)
from .evaluator import ToyEvaluator
from .tables import VariableTable
from .tokenizer import ToyTokenizer, IDENTIFIER_PATTERN

logger = logging.getLogger(__name__)


DEFAULT_TERMINATOR = ";"
DEFAULT_ASSIGNMENT = "="


# ============================================================================
# Options and Results
# ============================================================================

@dataclass
class RuntimeOptions:
    """Runtime configuration"""
    terminator: str = DEFAULT_TERMINATOR
    assignment: str = DEFAULT_ASSIGNMENT
    lenient: bool = False
    # keep bindings from earlier execute() calls instead of starting empty
    persist: bool = False

    def __post_init__(self):
        if not self.terminator:
            raise ValueError("terminator must be a non-empty string")
        if not self.assignment:
            raise ValueError("assignment must be a non-empty string")


@dataclass(frozen=True)
class Failure:
    """One failed statement, or a failed program when statement is None"""
    code: str
    message: str
    statement: Optional[str] = None
    index: Optional[int] = None

    def describe(self) -> str:
        return f"{ERROR_MARKER}: [{self.code}] {self.message}"


@dataclass(frozen=True)
class StatementOutcome:
    """Result of executing a single statement"""
    name: Optional[str] = None
    value: Optional[int] = None
    failure: Optional[Failure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass
class RunResult:
    """Result of executing a whole program"""
    bindings: Dict[str, int] = field(default_factory=dict)
    failures: List[Failure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def lines(self, explain: bool = False) -> List[str]:
        """
        Render the result for output.

        Any failure suppresses all bindings: one line per failure, either
        the bare marker or, with explain=True, the marker plus code and
        message. Otherwise one 'name = value' line per binding in
        first-seen order.
        """
        if self.failures:
            if explain:
                return [failure.describe() for failure in self.failures]
            return [ERROR_MARKER for _ in self.failures]
        return [f"{name} = {value}" for name, value in self.bindings.items()]


# ============================================================================
# Runtime Interface
# ============================================================================

class ToyRuntime:
    """Main toy runtime interface"""

    def __init__(self, options: Optional[RuntimeOptions] = None):
        self.options = options or RuntimeOptions()
        self.variables = VariableTable()

    def execute(self, program: str) -> RunResult:
        """
        Execute a program; failures are collected, never raised.

        Each program starts from an empty table unless options.persist is
        set. The table is left as the program finished with it.
        """
        terminator = self.options.terminator
        if not self.options.persist:
            self.variables.clear()

        if not program.endswith(terminator):
            logger.debug(f"program does not end with {terminator!r}")
            failure = Failure(E_MALFORMED_PROGRAM, f"Program must end with {terminator!r}")
            return RunResult(failures=[failure])

        failures: List[Failure] = []
        index = 0
        for piece in program.split(terminator):
            statement = piece.strip()
            if not statement:
                continue
            outcome = self.execute_statement(statement, index=index)
            if not outcome.ok:
                failures.append(outcome.failure)
            index += 1

        logger.info(f"ran {index} statements, {len(failures)} failed")
        if failures:
            return RunResult(failures=failures)
        return RunResult(bindings=self.variables.snapshot())

    def execute_statement(self, statement: str, index: Optional[int] = None) -> StatementOutcome:
        """Execute one 'identifier = expression' statement (no terminator)"""
        try:
            name, expression = self._split_statement(statement)
            value = self.evaluate_expression(expression)
        except ToyError as e:
            logger.debug(f"statement {statement!r} failed: {e}")
            return StatementOutcome(failure=Failure(e.code, e.message, statement, index))

        self.variables.set(name, value)
        return StatementOutcome(name=name, value=value)

    def evaluate_expression(self, expression: str) -> int:
        """Lex and evaluate an expression against the current bindings"""
        tokens = ToyTokenizer(expression, self.variables).tokenize()
        return ToyEvaluator(self.variables, lenient=self.options.lenient).evaluate(tokens)

    def _split_statement(self, statement: str):
        assignment = self.options.assignment
        if statement.count(assignment) != 1:
            raise ToyError(E_MALFORMED_STATEMENT, f"Expected exactly one {assignment!r} in {statement!r}")

        name, expression = statement.split(assignment)
        name = name.strip()
        if not IDENTIFIER_PATTERN.fullmatch(name):
            raise ToyError(E_INVALID_IDENTIFIER, f"Invalid identifier: {name!r}")
        return name, expression.strip()

    def set_var(self, name: str, value: int):
        """Set variable in environment"""
        self.variables.set(name, value)

    def get_var(self, name: str) -> int:
        """Get variable from environment"""
        return self.variables.get(name)

    def get_env(self) -> Dict[str, int]:
        """Get entire environment"""
        return self.variables.snapshot()

    def clear_env(self):
        """Clear environment"""
        self.variables.clear()


# ============================================================================
# Convenience Function
# ============================================================================

def execute_toy(program: str, lenient: bool = False) -> RunResult:
    """
    Execute a program on a fresh runtime (convenience function)

    Example:
        >>> execute_toy('x = 2; y = x + 3; x = y;').lines()
        ['x = 5', 'y = 5']
        >>> execute_toy('x = 5 / 0;').lines()
        ['error']
    """
    runtime = ToyRuntime(RuntimeOptions(lenient=lenient))
    return runtime.execute(program)


__all__ = [
    'ToyRuntime',
    'RuntimeOptions',
    'RunResult',
    'StatementOutcome',
    'Failure',
    'execute_toy',
    'DEFAULT_TERMINATOR',
    'DEFAULT_ASSIGNMENT',
]
