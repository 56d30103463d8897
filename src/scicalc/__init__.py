"""
Token-driven scientific calculator.

Sub-packages:
    - core: engine, state, tokens and display formatting
    - config: settings and logging setup
    - app: session connecting the engine to input and display adapters
"""

from .core import AngleUnit, CalculatorEngine, Operator, Token, TokenKind
from .app import CalculatorSession
from .config import CalculatorConfig, configure_logging

__version__ = "0.1.0"

__all__ = [
    'AngleUnit',
    'CalculatorConfig',
    'CalculatorEngine',
    'CalculatorSession',
    'Operator',
    'Token',
    'TokenKind',
    'configure_logging',
]
