"""
Input tokens accepted by the calculator engine.

A Token is one discrete unit of input: a digit, an operator, a function, a
mode toggle. Input adapters build them with the factory functions below,
from the textual form ("operator(add)") with parse_token(), or from a
button/function name ("sin", "ac", "s-sum") with from_function_name().
"""

import re
from collections import namedtuple
from enum import Enum

from .math_functions import TRIG_FUNCTIONS, UNARY_FUNCTIONS
from .state import AngleUnit, Operator


class UnknownTokenError(ValueError):
    """Raised when input cannot be turned into a token."""


class TokenKind(Enum):
    DIGIT = "digit"
    DECIMAL_POINT = "decimal_point"
    OPERATOR = "operator"
    EQUALS = "equals"
    CLEAR = "clear"
    DELETE_LAST = "delete_last"
    TOGGLE_SHIFT = "toggle_shift"
    TOGGLE_ALPHA = "toggle_alpha"
    SET_ANGLE_UNIT = "set_angle_unit"
    TRIG_FUNCTION = "trig_function"
    UNARY_FUNCTION = "unary_function"
    MEMORY_ADD = "memory_add"
    RECALL_ANSWER = "recall_answer"
    PAREN_OPEN = "paren_open"
    PAREN_CLOSE = "paren_close"
    NAVIGATE = "navigate"


Token = namedtuple("Token", ["kind", "arg"], defaults=(None,))

NAVIGATION_DIRECTIONS = ("up", "down", "left", "right")

DECIMAL_POINT = Token(TokenKind.DECIMAL_POINT)
EQUALS = Token(TokenKind.EQUALS)
CLEAR = Token(TokenKind.CLEAR)
DELETE_LAST = Token(TokenKind.DELETE_LAST)
TOGGLE_SHIFT = Token(TokenKind.TOGGLE_SHIFT)
TOGGLE_ALPHA = Token(TokenKind.TOGGLE_ALPHA)
MEMORY_ADD = Token(TokenKind.MEMORY_ADD)
RECALL_ANSWER = Token(TokenKind.RECALL_ANSWER)
PAREN_OPEN = Token(TokenKind.PAREN_OPEN)
PAREN_CLOSE = Token(TokenKind.PAREN_CLOSE)


# ============================================================================
# Factories for tokens carrying an argument
# ============================================================================
def digit(d):
    """Digit token; d is an int or a one-character string 0-9."""
    text = str(d)
    if len(text) != 1 or text not in "0123456789":
        raise UnknownTokenError("not a digit: %r" % (d,))
    return Token(TokenKind.DIGIT, text)


def operator(op):
    """Operator token from an Operator or its name ("add", "ncr", ...)."""
    try:
        return Token(TokenKind.OPERATOR, Operator(op))
    except ValueError:
        raise UnknownTokenError("unknown operator: %r" % (op,)) from None


def set_angle_unit(unit):
    """Angle unit token from an AngleUnit or its name ("degrees", ...)."""
    try:
        return Token(TokenKind.SET_ANGLE_UNIT, AngleUnit(unit))
    except ValueError:
        raise UnknownTokenError("unknown angle unit: %r" % (unit,)) from None


def trig_function(name):
    """Trig function token: "sin", "cos" or "tan"."""
    if name not in TRIG_FUNCTIONS:
        raise UnknownTokenError("unknown trig function: %r" % (name,))
    return Token(TokenKind.TRIG_FUNCTION, name)


def unary_function(name):
    """Unary function token ("ln", "sqrt", "square", "negate", "exp", "factorial")."""
    if name not in UNARY_FUNCTIONS:
        raise UnknownTokenError("unknown function: %r" % (name,))
    return Token(TokenKind.UNARY_FUNCTION, name)


def navigate(direction):
    """Cursor key token: "up", "down", "left" or "right"."""
    if direction not in NAVIGATION_DIRECTIONS:
        raise UnknownTokenError("unknown direction: %r" % (direction,))
    return Token(TokenKind.NAVIGATE, direction)


ARG_FACTORIES = {
    TokenKind.DIGIT: digit,
    TokenKind.OPERATOR: operator,
    TokenKind.SET_ANGLE_UNIT: set_angle_unit,
    TokenKind.TRIG_FUNCTION: trig_function,
    TokenKind.UNARY_FUNCTION: unary_function,
    TokenKind.NAVIGATE: navigate,
}


def normalize(token):
    """
    Validates a token built outside the factories.

    Args:
        token (Token): Token as received from an input adapter

    Returns:
        Token: Token whose argument went through its kind's factory
            (e.g. Token(OPERATOR, "add") -> Token(OPERATOR, Operator.ADD))

    Raises:
        UnknownTokenError: Not a Token, unknown kind, missing/unexpected
            argument, or an argument the factory rejects
    """
    if not isinstance(token, Token) or not isinstance(token.kind, TokenKind):
        raise UnknownTokenError("not a token: %r" % (token,))
    factory = ARG_FACTORIES.get(token.kind)
    if factory is None:
        if token.arg is not None:
            raise UnknownTokenError("%s takes no argument: %r" % (token.kind.value, token.arg))
        return token
    if token.arg is None:
        raise UnknownTokenError("%s needs an argument" % (token.kind.value,))
    try:
        return factory(token.arg)
    except TypeError:
        raise UnknownTokenError("bad %s argument: %r" % (token.kind.value, token.arg)) from None


# ============================================================================
# Textual forms
# ============================================================================
_TOKEN_TEXT = re.compile(r"^\s*([A-Za-z_]+)\s*(?:\(\s*([\w.-]*)\s*\))?\s*$")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def parse_token(text):
    """
    Parses the textual form of a token.

    Args:
        text (str): e.g. "digit(7)", "operator(multiply)", "equals",
            "setAngleUnit(radians)"; kind names may be snake_case or camelCase

    Returns:
        Token: Parsed token

    Raises:
        UnknownTokenError: If the kind or its argument is not recognized
    """
    match = _TOKEN_TEXT.match(text)
    if match is None:
        raise UnknownTokenError("malformed token: %r" % (text,))
    name, arg = match.groups()
    name = _CAMEL_BOUNDARY.sub(r"_\1", name).lower()
    try:
        kind = TokenKind(name)
    except ValueError:
        raise UnknownTokenError("unknown token kind: %r" % (text,)) from None

    factory = ARG_FACTORIES.get(kind)
    if factory is None:
        if arg:
            raise UnknownTokenError("%s takes no argument: %r" % (kind.value, text))
        return Token(kind)
    if not arg:
        raise UnknownTokenError("%s needs an argument: %r" % (kind.value, text))
    return factory(arg.lower() if kind is not TokenKind.DIGIT else arg)


# Button vocabulary of the calculator keypad
FUNCTION_NAMES = {
    "add": operator(Operator.ADD),
    "subtract": operator(Operator.SUBTRACT),
    "multiply": operator(Operator.MULTIPLY),
    "divide": operator(Operator.DIVIDE),
    "power": operator(Operator.POWER),
    "ncr": operator(Operator.COMBINATION),
    "npr": operator(Operator.PERMUTATION),
    "equals": EQUALS,
    "ac": CLEAR,
    "del": DELETE_LAST,
    "decimal": DECIMAL_POINT,
    "sin": trig_function("sin"),
    "cos": trig_function("cos"),
    "tan": trig_function("tan"),
    "ln": unary_function("ln"),
    "sqrt": unary_function("sqrt"),
    "x-power-y": unary_function("square"),
    "neg": unary_function("negate"),
    "exp": unary_function("exp"),
    "factorial": unary_function("factorial"),
    "shift": TOGGLE_SHIFT,
    "alpha": TOGGLE_ALPHA,
    "s-sum": MEMORY_ADD,
    "ans": RECALL_ANSWER,
    "parenthesis-open": PAREN_OPEN,
    "parenthesis-close": PAREN_CLOSE,
    "deg": set_angle_unit(AngleUnit.DEGREES),
    "rad": set_angle_unit(AngleUnit.RADIANS),
    "gra": set_angle_unit(AngleUnit.GRADIANS),
    "nav-up": navigate("up"),
    "nav-down": navigate("down"),
    "nav-left": navigate("left"),
    "nav-right": navigate("right"),
}


def from_function_name(name):
    """
    Maps a keypad button name (or a single digit) to its token.

    Raises:
        UnknownTokenError: If the name is not on the keypad
    """
    if len(name) == 1 and name in "0123456789":
        return digit(name)
    try:
        return FUNCTION_NAMES[name]
    except KeyError:
        raise UnknownTokenError("function %s not implemented" % (name,)) from None
