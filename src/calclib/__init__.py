"""
calclib - A basic integer arithmetic library.

Provides a stateless Calculator implementing total, subtract, multiply and
divide over two integers, with division by zero reported as an explicit error.
"""

__version__ = "0.1.0"

# Core components
from calclib.core.interface import CalculatorBase
from calclib.core.calculator import Calculator
from calclib.core.operations import Operation

# Errors
from calclib.errors import (
    CalculatorError,
    DivisionByZeroError,
    InvalidOperandError,
    UnknownOperationError,
)

# Configuration
from calclib.config import Settings, get_settings

__all__ = [
    # Version
    "__version__",

    # Core
    "CalculatorBase",
    "Calculator",
    "Operation",

    # Errors
    "CalculatorError",
    "DivisionByZeroError",
    "InvalidOperandError",
    "UnknownOperationError",

    # Config
    "Settings",
    "get_settings",
]
