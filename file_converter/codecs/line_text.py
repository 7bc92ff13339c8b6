"""Line-oriented plain text codec.

WHY: Plain lists (one entry per line) are the lowest common denominator —
log excerpts, name lists, pasted columns. Reading them as records lets them
flow into JSON, CSV or XML; writing records as ``key: value`` blocks gives a
human-readable dump of any Record Set.

HOW: Decoding splits on newlines, trims each line and turns every non-blank
line into a one-field record ``{"line": text}``. Encoding writes each record
as ``key: value`` lines followed by one blank separator line.

RULES:
- Blank (or whitespace-only) lines produce no record
- The single decoded field is always named "line"
- Encode: one "key: value" line per field, in record field order
- Encode: a blank line after every record, including the last
- An empty Record Set encodes as an empty document
- Decoding never fails except on invalid UTF-8
"""

from __future__ import annotations

from typing import List

from file_converter.codecs.base import BaseCodec
from file_converter.core.formats import DataFormat
from file_converter.core.records import RecordSet, value_to_text

LINE_FIELD = "line"


class LineTextCodec(BaseCodec):
    """Codec for one-record-per-line plain text."""

    format = DataFormat.TXT

    @property
    def name(self) -> str:
        return "Text"

    def decode(self, data: bytes) -> RecordSet:
        text = self._to_text(data)
        records: RecordSet = []
        for line in text.split("\n"):
            line = line.strip()
            if line:
                records.append({LINE_FIELD: line})
        return records

    def encode(self, records: RecordSet) -> bytes:
        lines: List[str] = []
        for record in records:
            for key, value in record.items():
                lines.append("{}: {}\n".format(key, value_to_text(value)))
            lines.append("\n")
        return self._to_bytes("".join(lines))
