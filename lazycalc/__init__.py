"""
A calculator for postfix expressions whose operators are lazy in their operands.
"""
from .calculator import LazyCalculator, PostfixSyntaxError
from .registry import Registry, CalculatorError, UnknownOperator, OperatorAlreadyDefined
from .lazy import force
