"""
Core module with the calculator logic.
Contains the engine, its state, the token vocabulary and display formatting.
"""

from .calculator import CalculatorEngine
from .display import format_for_display
from .operand import OperandText, number_to_text, parse_number, to_exponential
from .state import AngleUnit, CalculatorState, Operator
from .tokens import Token, TokenKind, UnknownTokenError, from_function_name, parse_token

__all__ = [
    'CalculatorEngine',
    'CalculatorState',
    'AngleUnit',
    'Operator',
    'OperandText',
    'Token',
    'TokenKind',
    'UnknownTokenError',
    'format_for_display',
    'from_function_name',
    'number_to_text',
    'parse_number',
    'parse_token',
    'to_exponential',
]
