# Base64 Codec
# Standard Base64 encoder/decoder with a stdin/stdout command line interface

from .exceptions import (
    Base64CodecError,
    MalformedInputError,
    InputReadError,
    OutputWriteError,
    ConfigurationError,
)

from .models import (
    CodecMode,
    CodecConfig,
    CodecResult,
    MalformedByte,
)

from .alphabet import ALPHABET, forward, reverse, is_alphabet
from .codec import encode, decode, check_strict, count_padding, find_malformed, transform
from .logger import get_logger, setup_logging
from .stream_io import read_input, write_output
from .main import (
    VERSION as __version__,
    create_argument_parser,
    create_config_from_args,
    run,
    main,
)

__all__ = [
    # Exceptions
    'Base64CodecError',
    'MalformedInputError',
    'InputReadError',
    'OutputWriteError',
    'ConfigurationError',
    # Models
    'CodecMode',
    'CodecConfig',
    'CodecResult',
    'MalformedByte',
    # Alphabet
    'ALPHABET',
    'forward',
    'reverse',
    'is_alphabet',
    # Codec
    'encode',
    'decode',
    'check_strict',
    'count_padding',
    'find_malformed',
    'transform',
    # Logger
    'get_logger',
    'setup_logging',
    # I/O
    'read_input',
    'write_output',
    # Main
    'create_argument_parser',
    'create_config_from_args',
    'run',
    'main',
]
