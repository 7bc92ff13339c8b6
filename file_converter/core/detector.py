"""Heuristic input format detection.

WHY: Users upload files without saying what they are, and file extensions
lie. The converter needs a best guess at the source format before it can
pick a decoder.

HOW: Looks at the first meaningful byte, then at the first line, in a fixed
order. First match wins:
  1. empty after trimming      → txt
  2. starts with ``{`` or ``[`` → json
  3. starts with ``<``          → xml
  4. first line has a comma and none of ``{}[]<>`` → csv
  5. anything else              → txt

RULES:
- Never raises; txt is the fallback
- A UTF-8 byte-order mark is ignored
- This is a classifier, not a validator — a malformed document that looks
  like JSON is still routed to the JSON decoder, which then fails
"""

from __future__ import annotations

import codecs

from file_converter.core.formats import DataFormat

# Characters that rule out CSV when they appear on the first line.
_NON_CSV_CHARS = frozenset(b"{}[]<>")


def detect_format(data: bytes) -> DataFormat:
    """Classify raw bytes as json, xml, csv or txt.

    Args:
        data: The complete raw input document.

    Returns:
        The best-guess DataFormat. Never raises.
    """
    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]
    trimmed = data.strip()
    if not trimmed:
        return DataFormat.TXT

    first = trimmed[:1]
    if first in (b"{", b"["):
        return DataFormat.JSON
    if first == b"<":
        return DataFormat.XML

    first_line = trimmed.split(b"\n", 1)[0]
    if b"," in first_line and not _NON_CSV_CHARS.intersection(first_line):
        return DataFormat.CSV

    return DataFormat.TXT
