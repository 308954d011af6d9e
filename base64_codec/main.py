#!/usr/bin/env python3
"""
Base64 Codec - Command Line Interface

Usage:
    base64-codec encode < image.png > image.b64
    base64-codec decode < image.b64 > image.png
    base64-codec encode "Hello World" -n
    base64-codec decode --file image.b64 --output image.png --strict
"""

import argparse
import logging
import sys
from typing import BinaryIO, List, Optional

from .codec import find_malformed, transform
from .exceptions import (
    Base64CodecError,
    ConfigurationError,
    InputReadError,
    MalformedInputError,
    OutputWriteError,
)
from .logger import setup_logging
from .models import CodecConfig, CodecMode, CodecResult
from .stream_io import read_input, write_output

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def create_argument_parser() -> argparse.ArgumentParser:
    """Build the command line parser

    Returns:
        Configured ArgumentParser with ``encode`` and ``decode`` subcommands
    """
    parser = argparse.ArgumentParser(
        prog="base64-codec",
        description="Standard Base64 (RFC 4648) encoder/decoder for stdin/stdout",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  %(prog)s encode < photo.jpg > photo.b64
  %(prog)s decode < photo.b64 > photo.jpg
  %(prog)s decode "SGVsbG8gV29ybGQ="
        """
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="show debug logging on stderr"
    )
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="only log errors"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}"
    )

    # options shared by both subcommands
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("text", nargs="?", help="literal input instead of stdin")
    common.add_argument("--file", "-f", metavar="FILE", help="read input from FILE")
    common.add_argument("--output", "-o", metavar="FILE", help="write output to FILE")

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="{encode,decode}")

    p_enc = subparsers.add_parser("encode", parents=[common], help="encode bytes to Base64")
    p_enc.add_argument(
        "--newline", "-n",
        action="store_true",
        help="append a newline to the encoded text"
    )

    p_dec = subparsers.add_parser("decode", parents=[common], help="decode Base64 to bytes")
    p_dec.add_argument(
        "--strip", "-s",
        action="store_true",
        help="strip surrounding whitespace before decoding"
    )
    p_dec.add_argument(
        "--strict",
        action="store_true",
        help="fail on malformed input instead of decoding it leniently"
    )

    return parser


def create_config_from_args(args: argparse.Namespace) -> CodecConfig:
    """Map parsed arguments to a CodecConfig"""
    if args.verbose:
        log_level = "DEBUG"
    elif args.quiet:
        log_level = "ERROR"
    else:
        log_level = "WARNING"

    return CodecConfig(
        mode=CodecMode(args.command),
        text=args.text,
        input_file=args.file,
        output_file=args.output,
        strict=getattr(args, "strict", False),
        strip=getattr(args, "strip", False),
        newline=getattr(args, "newline", False),
        log_level=log_level,
    )


def run(
    config: CodecConfig,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> CodecResult:
    """Read input, transform it and write the output

    Raises:
        InputReadError, OutputWriteError, MalformedInputError
    """
    data = read_input(config, stdin)
    if config.mode is CodecMode.DECODE and config.strip:
        data = data.strip()

    result = transform(config.mode, data, strict=config.strict)

    if result.malformed_count:
        first = find_malformed(data)[0]
        logger.warning(
            "input has %d non-Base64 byte(s), first is %s; decoded them as zero bits",
            result.malformed_count, first.describe()
        )

    output = result.data + b"\n" if config.newline else result.data
    write_output(config, output, stdout)
    return result


def main(args: Optional[List[str]] = None) -> int:
    """Entry point

    Args:
        args: argument list, None to use sys.argv

    Returns:
        Exit code (0 = success, 1 = failure, 130 = interrupted)
    """
    parser = create_argument_parser()
    parsed_args = parser.parse_args(args)
    config = create_config_from_args(parsed_args)
    setup_logging(config.log_level)

    try:
        config.validate()
        run(config)
        return EXIT_OK

    except ConfigurationError as e:
        logger.debug("configuration rejected", exc_info=True)
        print(f"base64-codec: invalid options: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    except MalformedInputError as e:
        print(f"base64-codec: malformed input: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    except InputReadError as e:
        logger.debug("input failure", exc_info=True)
        print(f"base64-codec: read error: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    except OutputWriteError as e:
        logger.debug("output failure", exc_info=True)
        print(f"base64-codec: write error: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    except Base64CodecError as e:
        print(f"base64-codec: {e}", file=sys.stderr)
        return EXIT_ERROR

    except KeyboardInterrupt:
        print("base64-codec: interrupted", file=sys.stderr)
        return EXIT_INTERRUPTED

    except Exception as e:
        logger.debug("unexpected failure", exc_info=True)
        print(f"base64-codec: unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
