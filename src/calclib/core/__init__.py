"""
Core module exports.
"""

from calclib.core.interface import CalculatorBase
from calclib.core.calculator import Calculator
from calclib.core.operations import Operation

__all__ = [
    "CalculatorBase",
    "Calculator",
    "Operation",
]
