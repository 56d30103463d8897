"""
Session that connects the engine to its input and display collaborators.

This module contains the CalculatorSession class.
"""

import logging
from collections import namedtuple

from scicalc.config.logging_setup import configure_logging
from scicalc.config.settings import CalculatorConfig
from scicalc.core.calculator import CalculatorEngine
from scicalc.core.tokens import (
    Token,
    TokenKind,
    UnknownTokenError,
    from_function_name,
    parse_token,
)

logger = logging.getLogger(__name__)

ModeIndicator = namedtuple("ModeIndicator", ["shift_active", "alpha_active", "angle_unit"])

DEGENERATE_DISPLAYS = ("NaN", "Infinity", "-Infinity")

_MODE_TOKENS = (TokenKind.TOGGLE_SHIFT, TokenKind.TOGGLE_ALPHA, TokenKind.SET_ANGLE_UNIT)


# ============================================================================
class CalculatorSession:
    """
    Coordinates one calculator with the outside world.

    Architecture:
        - Input adapter: turns key presses/clicks into tokens (external)
        - CalculatorEngine: calculation state and display string
        - Display adapter: renders each display string (external)
        - CalculatorSession: serializes tokens and publishes results

    Callbacks (all optional):
        - on_display(text): called with the display string after every token
        - on_modes(ModeIndicator): called after shift/alpha/angle changes
        - on_error(text, seconds): called when the display degenerates to
          NaN or Infinity, with how long a UI should flash "Error"
    """

    def __init__(self, engine=None, config=None, on_display=None, on_modes=None, on_error=None,
                 setup_logging=False):
        """
        Initializes the session.

        Args:
            engine (CalculatorEngine): Engine to drive (new one if None)
            config (CalculatorConfig): Settings; taken from the engine if omitted
            on_display, on_modes, on_error: Collaborator callbacks
            setup_logging (bool): Configure the "scicalc" logger with
                config.log_level (for applications without their own setup)
        """
        if engine is None:
            engine = CalculatorEngine(config if config else CalculatorConfig())
        self.engine = engine
        self.config = config if config else engine.config
        self.on_display = on_display
        self.on_modes = on_modes
        self.on_error = on_error
        if setup_logging:
            configure_logging(self.config.log_level)
        self.history = []               # Display strings produced so far
        self.ignored = 0                # Input that could not be tokenized

    @property
    def modes(self):
        engine = self.engine
        return ModeIndicator(engine.shift_active, engine.alpha_active, engine.angle_unit)

    def process(self, token):
        """
        Processes one token and publishes the results.

        Args:
            token (Token): Token from the input adapter

        Returns:
            str: Display string after the token
        """
        text = self.engine.process(token)
        self.history.append(text)

        if self.on_display:
            self.on_display(text)

        if isinstance(token, Token) and token.kind in _MODE_TOKENS and self.on_modes:
            self.on_modes(self.modes)

        if text in DEGENERATE_DISPLAYS:
            logger.info("Degenerate result %s", text)
            if self.on_error:
                self.on_error(text, self.config.error_flash_seconds)
        return text

    def feed(self, name):
        """
        Processes input given by name.

        Args:
            name (str): Keypad name ("7", "add", "sin", "ac") or token text
                ("operator(add)", "setAngleUnit(radians)")

        Returns:
            str: Display string; unchanged when the input is not recognized
        """
        try:
            token = from_function_name(name)
        except UnknownTokenError:
            try:
                token = parse_token(name)
            except UnknownTokenError as e:
                self.ignored += 1
                logger.warning("Input %r ignored: %s", name, e)
                return self.engine.display()
        return self.process(token)

    def run(self, tokens):
        """
        Processes a serialized stream of tokens or names.

        Args:
            tokens (iterable): Tokens and/or names, in input order

        Returns:
            str: Last display string (current display if the stream is empty)
        """
        text = self.engine.display()
        for item in tokens:
            if isinstance(item, Token):
                text = self.process(item)
            else:
                text = self.feed(item)
        return text
