"""Exception classes for mathseg.

Scanning itself never raises: malformed delimiters degrade to plain text.
These exceptions cover the edges of the library, such as registering an
invalid equation grammar.
"""

from __future__ import annotations


class MathsegError(Exception):
    """Base exception for all mathseg errors.

    Subclass this for specific error categories.
    """

    pass


class GrammarError(MathsegError):
    """Error in equation grammar definition or registration.

    Raised when a grammar is rejected by a registry builder, for example
    because its name is already taken or it produces plain text.
    """

    def __init__(self, grammar_name: str, message: str) -> None:
        """Initialize grammar error.

        Args:
            grammar_name: Name of the offending grammar
            message: Description of the error
        """
        self.grammar_name = grammar_name
        self.message = message
        super().__init__(f"Grammar '{grammar_name}': {message}")
