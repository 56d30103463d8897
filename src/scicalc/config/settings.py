"""
Calculator settings.

This module holds the centralized configuration of the calculator: display
limits, default modes and the collaborator-facing error surface.
"""

import os


# ============================================================================
# CLASS: CalculatorConfig
# Purpose: Centralized calculator settings
# Responsibilities:
#   - Display limits and exponent-notation thresholds
#   - Default angle unit for a fresh calculator
#   - Error flash duration and log level for embedding applications
# ============================================================================
class CalculatorConfig:
    """
    Settings shared by the engine, the display formatter and the session.

    Available options:
        - Display width and exponent-notation thresholds
        - Placeholder shown for an empty operand
        - Default angle unit ("degrees", "radians", "gradians")
        - Error flash duration and log level
    """

    def __init__(self):
        """Initializes every setting with its default value."""
        # ====================================================================
        # DISPLAY
        # ====================================================================
        self.max_display_length = 99        # Characters shown verbatim
        self.exponential_upper = 1e99       # |v| >= this -> exponent notation
        self.exponential_lower = 1e-99      # |v| < this (and long text) -> exponent notation
        self.exponential_digits = 6         # Fraction digits in exponent notation
        self.empty_placeholder = ""         # Shown when nothing is typed

        # ====================================================================
        # MODES
        # ====================================================================
        self.default_angle_unit = "degrees"

        # ====================================================================
        # COLLABORATORS
        # ====================================================================
        self.error_flash_seconds = 2.0      # How long a UI should flash "Error"
        self.log_level = "INFO"             # Applied by CalculatorSession(setup_logging=True)

    @classmethod
    def from_env(cls, environ=None):
        """
        Builds a config with overrides from environment variables.

        Args:
            environ (dict): Mapping to read instead of os.environ

        Variables:
            SCICALC_LOG_LEVEL: Logging level name (e.g. "DEBUG")
            SCICALC_ANGLE_UNIT: "degrees", "radians" or "gradians"

        Raises:
            ValueError: If SCICALC_ANGLE_UNIT is not a known unit
        """
        from scicalc.core.state import AngleUnit

        environ = os.environ if environ is None else environ
        config = cls()
        config.log_level = environ.get("SCICALC_LOG_LEVEL", config.log_level).upper()
        unit = environ.get("SCICALC_ANGLE_UNIT", config.default_angle_unit).lower()
        try:
            config.default_angle_unit = AngleUnit(unit).value
        except ValueError:
            raise ValueError("SCICALC_ANGLE_UNIT: unknown angle unit %r" % (unit,)) from None
        return config

    def needs_exponential(self, value, text):
        """
        Tells whether a value must be shown in exponent notation.

        Args:
            value (float): Parsed operand
            text (str): Operand text as typed
        """
        magnitude = abs(value)
        if magnitude >= self.exponential_upper:
            return True
        return magnitude < self.exponential_lower and value != 0 and len(text) > self.max_display_length
