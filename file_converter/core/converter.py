"""Conversion orchestrator: validate, detect, decode, encode.

WHY: Collaborators (CLI, HTTP API) want one call that takes raw bytes and a
target format name and returns raw bytes. Format validation, detection and
codec dispatch belong in one place so every entry point behaves the same.

HOW: convert() resolves the requested output format first (so an unknown
target fails before any parsing), then picks the input format from the
caller's hint or from detect_format(), decodes into a Record Set with the
matching codec and encodes it with the target codec.

RULES:
- Unknown output format → UnsupportedFormatError, raised before decoding
- Unknown input format hint → UnrecognizedInputError
- Decode/encode failures propagate as DecodeError / EncodeError
- Atomic: either complete output bytes or an exception, never partial output
- Stateless: safe to call concurrently from many threads
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

from file_converter.codecs import CODECS
from file_converter.core.detector import detect_format
from file_converter.core.errors import UnrecognizedInputError, UnsupportedFormatError
from file_converter.core.formats import (
    FORMAT_TABLE,
    DataFormat,
    SupportedFormat,
    lookup_format,
)

FormatName = Union[str, DataFormat]


def supported_formats() -> Tuple[SupportedFormat, ...]:
    """Return every supported format descriptor, in table order."""
    return tuple(FORMAT_TABLE.values())


def get_format(name: FormatName) -> SupportedFormat:
    """Look up the descriptor for a format name.

    WHY: Collaborators need the content type and file extension of the
    target format to name output files and set response headers.

    Raises:
        UnsupportedFormatError: ``name`` is not a supported format.
    """
    fmt = lookup_format(name)
    if fmt is None:
        raise UnsupportedFormatError(str(name))
    return FORMAT_TABLE[fmt]


def convert(
    data: bytes,
    output_format: FormatName,
    input_format: Optional[FormatName] = None,
) -> bytes:
    """Convert a raw document into the requested output format.

    Args:
        data: The complete raw input document.
        output_format: Target format, e.g. ``"csv"`` or ``DataFormat.CSV``.
        input_format: Optional source format hint. When omitted the source
                      format is detected from the bytes.

    Returns:
        The converted document as UTF-8 bytes.

    Raises:
        UnsupportedFormatError: ``output_format`` is not supported.
        UnrecognizedInputError: ``input_format`` is not supported.
        DecodeError: ``data`` does not parse as the source format.
        EncodeError: The decoded records cannot be written as the target.
    """
    target = lookup_format(output_format)
    if target is None:
        raise UnsupportedFormatError(str(output_format))

    if input_format is None:
        source = detect_format(data)
    else:
        source = lookup_format(input_format)
        if source is None:
            raise UnrecognizedInputError(str(input_format))

    records = CODECS[source]().decode(data)
    return CODECS[target]().encode(records)
