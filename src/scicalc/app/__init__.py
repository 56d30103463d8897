"""
Application module.
Contains the session that connects the engine to its collaborators.
"""

from .session import CalculatorSession, ModeIndicator

__all__ = ['CalculatorSession', 'ModeIndicator']
