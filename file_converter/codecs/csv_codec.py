"""CSV codec: header row plus data rows ⇄ Record Set.

WHY: Spreadsheets and database exports speak CSV. A header row names the
fields, every following row is one record.

HOW: Decoding runs the csv module in strict mode so unterminated or stray
quotes fail instead of being silently absorbed. Blank rows are skipped; the
first remaining row is the header and each later row is zipped with it
positionally. Encoding takes the header from the first record's keys and
writes one row per record.

RULES:
- Decode needs a header plus at least one data row, else DecodeError
- Short rows: trailing fields are absent from the record (not "")
- Long rows: values past the header width are dropped
- Duplicate header names: the later column wins
- Encode header = keys of the FIRST record only; keys that appear only in
  later records are not written
- Missing values encode as empty cells
- Empty Record Set, or a first record with no fields → EncodeError
- Rows end with "\\n"
"""

from __future__ import annotations

import csv
import io
from typing import List

from file_converter.codecs.base import BaseCodec
from file_converter.core.errors import DecodeError, EncodeError
from file_converter.core.formats import DataFormat
from file_converter.core.records import RecordSet, build_record, value_to_text


class CSVCodec(BaseCodec):
    """Codec for comma-separated values with a header row."""

    format = DataFormat.CSV

    @property
    def name(self) -> str:
        return "CSV"

    def decode(self, data: bytes) -> RecordSet:
        text = self._to_text(data)
        reader = csv.reader(io.StringIO(text, newline=""), strict=True)
        try:
            rows: List[List[str]] = [row for row in reader if row]
        except csv.Error as exc:
            raise DecodeError(
                self.format.value,
                "line {}: {}".format(reader.line_num, exc),
            ) from exc

        if len(rows) < 2:
            raise DecodeError(
                self.format.value,
                "need a header row and at least one data row",
            )

        header = rows[0]
        # zip() stops at the shorter side: short rows lose trailing fields,
        # long rows lose the overflow.
        return [build_record(zip(header, row)) for row in rows[1:]]

    def encode(self, records: RecordSet) -> bytes:
        if not records:
            raise EncodeError(self.format.value, "no records to write")

        header = list(records[0].keys())
        if not header:
            raise EncodeError(self.format.value, "first record has no fields to use as header")

        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(header)
        for record in records:
            writer.writerow([value_to_text(record.get(key, "")) for key in header])
        return self._to_bytes(buffer.getvalue())
