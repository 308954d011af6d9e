#!/usr/bin/env python3
"""
Base64 Codec - Exception Classes
Custom exception hierarchy for the codec and its CLI.
"""

from typing import Optional


class Base64CodecError(Exception):
    """Base exception - parent of every codec error"""

    def __init__(self, message: str, context: str = ""):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.context:
            return f"[{self.context}] {self.message}"
        return self.message


class MalformedInputError(Base64CodecError):
    """Raised by strict decoding when the encoded text is not valid Base64

    Examples:
        - length is not a multiple of 4
        - a byte outside the alphabet before the padding
        - more than two padding characters
    """

    def __init__(self, message: str, position: int = -1, value: Optional[int] = None):
        self.position = position
        self.value = value
        super().__init__(message, context="decode")


class InputReadError(Base64CodecError):
    """Raised when stdin or the input file cannot be read"""

    def __init__(self, message: str, source: str = ""):
        self.source = source
        super().__init__(message, context="input")


class OutputWriteError(Base64CodecError):
    """Raised when stdout or the output file cannot be written"""

    def __init__(self, message: str, destination: str = ""):
        self.destination = destination
        super().__init__(message, context="output")


class ConfigurationError(Base64CodecError):
    """Raised when command line options do not form a valid configuration

    Examples:
        - positional text and --file given together
        - unknown log level
    """

    def __init__(self, message: str, param_name: str = ""):
        self.param_name = param_name
        super().__init__(message, context="config")
