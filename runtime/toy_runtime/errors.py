"""
Toy Runtime - Error Definitions

Every failure the language can produce carries one of the codes below.
The statement processor collapses them to the opaque ERROR_MARKER for
default output; the code and message remain available for diagnostics.
"""


# ============================================================================
# Error Codes
# ============================================================================

# Program structure
E_MALFORMED_PROGRAM = "E_MALFORMED_PROGRAM"
E_MALFORMED_STATEMENT = "E_MALFORMED_STATEMENT"
E_INVALID_IDENTIFIER = "E_INVALID_IDENTIFIER"

# Lexing
E_INVALID_CHARACTER = "E_INVALID_CHARACTER"
E_INVALID_LITERAL = "E_INVALID_LITERAL"
E_UNINITIALIZED_VARIABLE = "E_UNINITIALIZED_VARIABLE"

# Evaluation
E_UNBALANCED_PARENS = "E_UNBALANCED_PARENS"
E_MALFORMED_EXPRESSION = "E_MALFORMED_EXPRESSION"
E_DIVISION_BY_ZERO = "E_DIVISION_BY_ZERO"

ERROR_MARKER = "error"


class ToyError(Exception):
    """Base exception for toy runtime errors"""
    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


__all__ = [
    'ToyError',
    'ERROR_MARKER',
    'E_MALFORMED_PROGRAM',
    'E_MALFORMED_STATEMENT',
    'E_INVALID_IDENTIFIER',
    'E_INVALID_CHARACTER',
    'E_INVALID_LITERAL',
    'E_UNINITIALIZED_VARIABLE',
    'E_UNBALANCED_PARENS',
    'E_MALFORMED_EXPRESSION',
    'E_DIVISION_BY_ZERO',
]
