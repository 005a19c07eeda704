"""
Variable table for the toy runtime.

Maps identifiers to the last integer assigned to them. Names keep the
position they were first bound at, so reporting order is first-seen order
even after reassignment.
"""

from typing import Dict, Iterator, List, Tuple
import logging

from .errors import ToyError, E_UNINITIALIZED_VARIABLE

logger = logging.getLogger(__name__)


class VariableTable:
    """Run-scoped identifier -> int bindings"""

    def __init__(self):
        self._values: Dict[str, int] = {}

    def get(self, name: str) -> int:
        """Return the value bound to name, or raise if it was never assigned"""
        if name not in self._values:
            raise ToyError(E_UNINITIALIZED_VARIABLE, f"Uninitialized variable: {name}")
        return self._values[name]

    def set(self, name: str, value: int):
        """Bind name to value; a rebound name keeps its original position"""
        # bool is an int subclass but not a language value
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Variable values must be int, got {type(value).__name__}")
        logger.debug(f"bind {name} = {value}")
        self._values[name] = value

    def items(self) -> List[Tuple[str, int]]:
        return list(self._values.items())

    def snapshot(self) -> Dict[str, int]:
        """Copy of the current bindings"""
        return dict(self._values)

    def clear(self):
        self._values.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __repr__(self) -> str:
        return f"VariableTable({self._values!r})"
