"""Exception hierarchy for the conversion pipeline.

WHY: The CLI prints errors and the HTTP API maps them to status codes. Both
need to tell "you asked for a format we don't have" apart from "your file is
broken" without parsing message strings.

HOW: One base class, ConversionError, with four concrete subclasses — one
per failure kind. Each carries the offending format so callers can surface
it verbatim.

RULES:
- Every error raised by file_converter.core or file_converter.codecs is a
  ConversionError subclass
- str(error) is a complete, user-facing sentence
- Errors are terminal: no retry, no fallback to another format
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for all conversion failures.

    Attributes:
        format: The format name involved in the failure ("json", "yaml", ...).
        message: Human-readable description, surfaced to the end user.
    """

    def __init__(self, format: str, message: str) -> None:
        self.format = format
        self.message = message
        super().__init__(message)


class UnsupportedFormatError(ConversionError):
    """Raised when the requested output format is not one of the known formats."""

    def __init__(self, format: str) -> None:
        super().__init__(format, "Unsupported output format: '{}'".format(format))


class UnrecognizedInputError(ConversionError):
    """Raised when the declared or detected input format is not a known format."""

    def __init__(self, format: str) -> None:
        super().__init__(format, "Unrecognized input format: '{}'".format(format))


class DecodeError(ConversionError):
    """Raised when input bytes do not parse as their (detected) format.

    WHY: Malformed JSON/XML/CSV, header-only CSV and bad UTF-8 all end here,
    with the parser's own message kept for the user.
    """

    def __init__(self, format: str, reason: str) -> None:
        self.reason = reason
        super().__init__(format, "Failed to parse {} input: {}".format(format.upper(), reason))


class EncodeError(ConversionError):
    """Raised when a Record Set cannot be rendered in the target format."""

    def __init__(self, format: str, reason: str) -> None:
        self.reason = reason
        super().__init__(format, "Failed to write {} output: {}".format(format.upper(), reason))
