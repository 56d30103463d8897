"""
Calculator state and the enumerations it is built from.

CalculatorState holds everything the engine mutates between tokens. It has
no references to presentation objects: the display is derived from it.
"""

from enum import Enum

from .operand import OperandText


class Operator(Enum):
    """Binary operators that can be pending between two operands."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    POWER = "power"
    COMBINATION = "ncr"
    PERMUTATION = "npr"


class AngleUnit(Enum):
    """Unit of trigonometric arguments and inverse-trig results."""

    DEGREES = "degrees"
    RADIANS = "radians"
    GRADIANS = "gradians"


# ============================================================================
# CLASS: CalculatorState
# Purpose: Single mutable record of the calculator
# Responsibilities:
#   - Hold the operand being typed and the stored left operand
#   - Track the pending operator and the fresh-operand flag
#   - Keep mode flags, angle unit and the memory register
# ============================================================================
class CalculatorState:
    """
    Mutable state of one calculator instance.

    State variables:
        - current_input: Operand text being typed ("" = nothing typed)
        - previous_input: Left operand of the pending/last operation ("" = none)
        - pending_operator: Operator awaiting its right operand, or None
        - awaiting_fresh_operand: Next digit starts a new operand
        - shift_active / alpha_active: Modifier flags
        - angle_unit: AngleUnit used by trig functions
        - memory: Memory register, survives reset()
    """

    def __init__(self, angle_unit=AngleUnit.DEGREES):
        """Creates the state with every field at its initial value."""
        self.angle_unit = angle_unit
        self.shift_active = False
        self.alpha_active = False
        self.memory = 0.0
        self.reset()

    def reset(self):
        """
        Resets the calculation (AC).

        Memory, mode flags and angle unit are left untouched.
        """
        self.current_input = OperandText()
        self.previous_input = OperandText()
        self.pending_operator = None
        self.awaiting_fresh_operand = False

    def snapshot(self):
        """Returns the calculation fields as a plain dict."""
        return {
            "current_input": str(self.current_input),
            "previous_input": str(self.previous_input),
            "pending_operator": self.pending_operator,
            "awaiting_fresh_operand": self.awaiting_fresh_operand,
            "shift_active": self.shift_active,
            "alpha_active": self.alpha_active,
            "angle_unit": self.angle_unit,
            "memory": self.memory,
        }

    def __repr__(self):
        return "CalculatorState(current=%r, previous=%r, operator=%s, fresh=%s)" % (
            str(self.current_input),
            str(self.previous_input),
            self.pending_operator.value if self.pending_operator else None,
            self.awaiting_fresh_operand,
        )
