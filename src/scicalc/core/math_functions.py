"""
Numeric operations used by the calculator engine.

Everything is evaluated on numpy float64 with floating-point errors ignored,
so out-of-domain inputs give nan or inf instead of raising (ln(-1) -> nan,
ln(0) -> -inf, asin(2) -> nan).
"""

import numpy as np

from .operand import to_exponential
from .state import Operator

PI = float(np.pi)
E = float(np.e)
PHI = float((1 + np.sqrt(5)) / 2)   # Golden ratio
EULER_GAMMA = float(np.euler_gamma)


def to_radians(degrees):
    """Degrees to radians."""
    return float(np.float64(degrees) * np.pi / 180)


def to_degrees(radians):
    """Radians to degrees."""
    return float(np.float64(radians) * 180 / np.pi)


def factorial(n):
    """
    Product 2 * 3 * ... up to n.

    Non-integers are truncated by the loop bound, anything below 2 gives 1
    and the loop stops as soon as the product overflows to inf.
    """
    result = 1.0
    i = 2
    while i <= n:
        result *= i
        if np.isinf(result):
            break
        i += 1
    return result


def combination(n, r):
    """Number of r-element subsets of n elements (nCr)."""
    with np.errstate(all="ignore"):
        return float(np.float64(factorial(n)) / (np.float64(factorial(r)) * factorial(n - r)))


def permutation(n, r):
    """Number of ordered r-element selections of n elements (nPr)."""
    with np.errstate(all="ignore"):
        return float(np.float64(factorial(n)) / np.float64(factorial(n - r)))


def _power(a, b):
    # IEEE pow gives 1 for 1**nan and (+-1)**inf; the calculator reports nan
    if abs(a) == 1 and not np.isfinite(b):
        return np.nan
    return np.power(a, b)


# ============================================================================
# Binary operators
# ============================================================================
def compute(operator, a, b):
    """
    Applies a binary operator to two evaluated operands.

    Args:
        operator (Operator): Pending operator
        a (float): Left operand
        b (float): Right operand

    Returns:
        float: Result; division by zero returns 0 instead of inf
    """
    a = np.float64(a)
    b = np.float64(b)
    with np.errstate(all="ignore"):
        if operator is Operator.ADD:
            result = a + b
        elif operator is Operator.SUBTRACT:
            result = a - b
        elif operator is Operator.MULTIPLY:
            result = a * b
        elif operator is Operator.DIVIDE:
            result = 0.0 if b == 0 else a / b
        elif operator is Operator.POWER:
            result = _power(a, b)
        elif operator is Operator.COMBINATION:
            result = combination(a, b)
        elif operator is Operator.PERMUTATION:
            result = permutation(a, b)
        else:
            result = b
    return float(result)


# ============================================================================
# Unary functions
# Each takes the evaluated operand; "exp" returns text, the rest a float
# ============================================================================
def _ln(x):
    return np.log(x)


def _sqrt(x):
    return np.sqrt(x)


def _square(x):
    return np.power(x, 2)


def _negate(x):
    return x * -1


def _exp(x):
    return to_exponential(float(x))


UNARY_FUNCTIONS = {
    "ln": _ln,
    "sqrt": _sqrt,
    "square": _square,
    "negate": _negate,
    "exp": _exp,
    "factorial": factorial,
}


def apply_unary(name, x):
    """
    Evaluates a unary function by name.

    Raises:
        KeyError: If name is not a known unary function
    """
    function = UNARY_FUNCTIONS[name]
    with np.errstate(all="ignore"):
        result = function(np.float64(x))
    if isinstance(result, str):
        return result
    return float(result)


# ============================================================================
# Trigonometry
# ============================================================================
TRIG_FUNCTIONS = {
    "sin": (np.sin, np.arcsin),
    "cos": (np.cos, np.arccos),
    "tan": (np.tan, np.arctan),
}


def trig(name, x, inverse=False, degrees=True):
    """
    Evaluates sin/cos/tan or their inverses.

    Args:
        name (str): "sin", "cos" or "tan"
        x (float): Argument (forward) or ratio (inverse)
        inverse (bool): Apply asin/acos/atan instead
        degrees (bool): Forward arguments are degrees / inverse results
            are returned in degrees. When False no conversion is applied.

    Raises:
        KeyError: If name is not a trig function
    """
    forward, backward = TRIG_FUNCTIONS[name]
    x = np.float64(x)
    with np.errstate(all="ignore"):
        if inverse:
            result = backward(x)
            if degrees:
                result = to_degrees(result)
        else:
            if degrees:
                x = to_radians(x)
            result = forward(x)
    return float(result)
