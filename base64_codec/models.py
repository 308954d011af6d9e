#!/usr/bin/env python3
"""
Base64 Codec - Data Models
Configuration and result types shared by the codec and the CLI.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .exceptions import ConfigurationError


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CodecMode(Enum):
    """Transform direction"""
    ENCODE = "encode"
    DECODE = "decode"


# ============================================================================
# Decoding Diagnostics
# ============================================================================

@dataclass(frozen=True)
class MalformedByte:
    """A byte of encoded input that is not part of the alphabet"""
    position: int                      # offset in the encoded input
    value: int                         # byte value

    def describe(self) -> str:
        if 0x20 < self.value < 0x7f:
            return f"{chr(self.value)!r} at offset {self.position}"
        return f"byte 0x{self.value:02x} at offset {self.position}"


# ============================================================================
# Result Models
# ============================================================================

@dataclass(frozen=True)
class CodecResult:
    """Outcome of one transform"""
    mode: CodecMode
    data: bytes                        # transformed bytes
    input_size: int                    # bytes consumed
    output_size: int                   # bytes produced
    malformed_count: int = 0           # non-alphabet bytes seen while decoding


# ============================================================================
# Configuration Models
# ============================================================================

@dataclass
class CodecConfig:
    """CLI configuration

    Input comes from ``text`` when given, else ``input_file``, else stdin.
    Output goes to ``output_file`` when given, else stdout.
    """
    mode: CodecMode = CodecMode.ENCODE
    text: Optional[str] = None         # literal input (filesystem encoded)
    input_file: Optional[str] = None   # read input from this path
    output_file: Optional[str] = None  # write output to this path
    strict: bool = False               # reject malformed input when decoding
    strip: bool = False                # strip surrounding whitespace before decoding
    newline: bool = False              # append a newline to encoded output
    log_level: str = "WARNING"

    def validate(self) -> None:
        """Check option combinations, raising ConfigurationError"""
        if self.text is not None and self.input_file:
            raise ConfigurationError(
                "text argument and --file are mutually exclusive", param_name="file"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"unknown log level: {self.log_level}", param_name="log_level"
            )
        if self.mode is CodecMode.ENCODE and (self.strict or self.strip):
            raise ConfigurationError(
                "--strict and --strip only apply to decode", param_name="mode"
            )
        if self.mode is CodecMode.DECODE and self.newline:
            raise ConfigurationError(
                "--newline only applies to encode", param_name="newline"
            )
