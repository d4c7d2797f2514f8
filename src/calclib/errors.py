"""
Error types for calclib.

Every failure raised by the library derives from CalculatorError, and also
from the closest built-in exception so callers can catch either.
"""

from typing import Any, Dict, Iterable, Optional


class CalculatorError(Exception):
    """Base exception for all calclib errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """Raised by divide when the divisor is zero."""

    def __init__(self, dividend: int):
        super().__init__(
            f"Cannot divide {dividend} by zero",
            {"dividend": dividend, "divisor": 0},
        )
        self.dividend = dividend


class InvalidOperandError(CalculatorError, TypeError):
    """Raised when an operand is not a plain integer."""

    def __init__(self, name: str, value: Any):
        super().__init__(
            f"Operand '{name}' must be an int, got {type(value).__name__}",
            {"operand": name, "type": type(value).__name__},
        )
        self.operand = name
        self.value = value


class UnknownOperationError(CalculatorError, ValueError):
    """Raised when an operation name or symbol cannot be resolved."""

    def __init__(self, operation: Any, available: Iterable[str] = ()):
        available = list(available)
        message = f"Unknown operation: {operation!r}"
        if available:
            message += f". Available: {', '.join(available)}"
        super().__init__(message, {"operation": str(operation), "available": available})
        self.operation = operation
