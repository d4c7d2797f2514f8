"""
Capability interface for calculators.
"""

from abc import ABC, abstractmethod
from typing import Union

from calclib.core.operations import Operation


class CalculatorBase(ABC):
    """
    Abstract base class for calculators.

    All calculators must implement total, subtract, multiply and divide over
    two integer operands.
    """

    @abstractmethod
    def total(self, a: int, b: int) -> int:
        """Return a + b."""
        pass

    @abstractmethod
    def subtract(self, a: int, b: int) -> int:
        """Return a - b."""
        pass

    @abstractmethod
    def multiply(self, a: int, b: int) -> int:
        """Return a * b."""
        pass

    @abstractmethod
    def divide(self, a: int, b: int) -> int:
        """
        Return a / b truncated toward zero.

        Raises:
            DivisionByZeroError: if b is zero
        """
        pass

    def apply(self, operation: Union[Operation, str], a: int, b: int) -> int:
        """Run the operation named by `operation` (member, name, alias or symbol)."""
        op = Operation.parse(operation)
        return getattr(self, op.value)(a, b)
