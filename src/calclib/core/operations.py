"""
Operation taxonomy for calclib.

Defines the four binary operations a calculator exposes, along with the
names, aliases and infix symbols used to refer to them.
"""

from enum import Enum
from typing import Dict, List, Union

from calclib.errors import UnknownOperationError


class Operation(str, Enum):
    """Binary integer operations supported by a calculator."""

    TOTAL = "total"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @property
    def symbol(self) -> str:
        """Infix symbol, e.g. '+' for TOTAL."""
        return OPERATION_SYMBOLS[self]

    @property
    def description(self) -> str:
        return OPERATION_DESCRIPTIONS[self]

    @classmethod
    def parse(cls, value: Union["Operation", str]) -> "Operation":
        """
        Resolve an operation from a member, value, name, alias or symbol.

        Args:
            value: e.g. Operation.TOTAL, "total", "TOTAL", "add" or "+"

        Returns:
            The matching Operation

        Raises:
            UnknownOperationError: if nothing matches
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key in OPERATION_ALIASES:
                return OPERATION_ALIASES[key]
            for op in cls:
                if key == op.value or value.strip() == op.symbol:
                    return op
        raise UnknownOperationError(value, available=cls.names())

    @classmethod
    def names(cls) -> List[str]:
        return [op.value for op in cls]


OPERATION_SYMBOLS: Dict[Operation, str] = {
    Operation.TOTAL: "+",
    Operation.SUBTRACT: "-",
    Operation.MULTIPLY: "*",
    Operation.DIVIDE: "/",
}

OPERATION_DESCRIPTIONS: Dict[Operation, str] = {
    Operation.TOTAL: "Sum of a and b",
    Operation.SUBTRACT: "Difference a - b",
    Operation.MULTIPLY: "Product of a and b",
    Operation.DIVIDE: "Quotient a / b, truncated toward zero",
}

OPERATION_ALIASES: Dict[str, Operation] = {
    "add": Operation.TOTAL,
    "sum": Operation.TOTAL,
    "sub": Operation.SUBTRACT,
    "mul": Operation.MULTIPLY,
    "div": Operation.DIVIDE,
}
