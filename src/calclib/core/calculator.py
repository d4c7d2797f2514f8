"""
Calculator - stateless integer arithmetic.
"""

from typing import Any, Optional

from loguru import logger

from calclib.config import Settings, get_settings
from calclib.core.interface import CalculatorBase
from calclib.core.operations import Operation
from calclib.errors import DivisionByZeroError, InvalidOperandError


def _check_operands(a: Any, b: Any) -> None:
    # bool is an int subclass but never a meaningful operand
    for name, value in (("a", a), ("b", b)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidOperandError(name, value)


class Calculator(CalculatorBase):
    """
    Integer calculator over Python ints.

    Holds no state between calls; the settings object only controls whether
    each operation is traced at DEBUG level.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def total(self, a: int, b: int) -> int:
        _check_operands(a, b)
        return self._trace(Operation.TOTAL, a, b, a + b)

    def subtract(self, a: int, b: int) -> int:
        _check_operands(a, b)
        return self._trace(Operation.SUBTRACT, a, b, a - b)

    def multiply(self, a: int, b: int) -> int:
        _check_operands(a, b)
        return self._trace(Operation.MULTIPLY, a, b, a * b)

    def divide(self, a: int, b: int) -> int:
        """
        Divide a by b, truncating toward zero.

        Python's // floors, so the quotient is computed on magnitudes and the
        sign applied afterwards: divide(-7, 2) == -3, not -4.

        Raises:
            DivisionByZeroError: if b is zero
        """
        _check_operands(a, b)
        if b == 0:
            logger.debug(f"Rejected division of {a} by zero")
            raise DivisionByZeroError(a)

        quotient = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            quotient = -quotient
        return self._trace(Operation.DIVIDE, a, b, quotient)

    def _trace(self, op: Operation, a: int, b: int, result: int) -> int:
        if self.settings.trace_operations:
            logger.debug(f"{a} {op.symbol} {b} = {result}")
        return result
