"""
Display formatting of the operand being typed.
"""

from scicalc.config.settings import CalculatorConfig

from .operand import parse_number, to_exponential

_DEFAULT_CONFIG = CalculatorConfig()


def format_for_display(text, config=None):
    """
    Builds the display string for an operand.

    Args:
        text (str): Operand text as typed
        config (CalculatorConfig): Display settings (defaults if None)

    Returns:
        str: Display string

    Rules:
        - Empty operand: the configured placeholder (the cursor itself is
          drawn by the renderer)
        - Huge magnitudes, or tiny non-zero values typed with more
          characters than fit: exponent notation with 6 fraction digits
        - Anything else: the text verbatim, so in-progress input such as
          "1.20" or "3." is shown exactly as typed
    """
    config = config or _DEFAULT_CONFIG
    if not text:
        return config.empty_placeholder

    value = parse_number(text)
    if config.needs_exponential(value, text):
        return to_exponential(value, config.exponential_digits)
    return str(text)[:config.max_display_length]
