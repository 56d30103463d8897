"""
Configuration module for the calculator.
Contains the settings class and the logging setup.
"""

from .settings import CalculatorConfig
from .logging_setup import configure_logging

__all__ = ['CalculatorConfig', 'configure_logging']
