"""JSON codec: array of flat objects ⇄ Record Set.

WHY: JSON exports from APIs and databases are the most common input. The
flat "array of objects" shape maps one-to-one onto the record model.

HOW: Decoding parses with the json module and insists on a top-level array
whose every element is an object; each object becomes one Record with its
values rendered as text. Encoding dumps the Record Set with a two-space
indent, keeping record order and each record's key order.

RULES:
- Top-level value must be an array; every element must be an object
- Non-string values are stored as text ("30", "true", "")
- Duplicate keys in one object: the last one wins
- Unpaired surrogate escapes ("\\ud800") and runaway nesting → DecodeError
- Output: two-space indent, UTF-8, non-ASCII characters written verbatim
- An empty Record Set encodes as ``[]``
"""

from __future__ import annotations

import json

from file_converter.codecs.base import BaseCodec
from file_converter.core.errors import DecodeError
from file_converter.core.formats import DataFormat
from file_converter.core.records import Record, RecordSet, build_record


def _check_encodable(record: Record, index: int) -> None:
    """Reject lone surrogate escapes such as ``"\\ud800"``.

    json.loads accepts them, but no UTF-8 output can carry them.
    """
    for key, value in record.items():
        try:
            key.encode("utf-8")
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise DecodeError(
                DataFormat.JSON.value,
                "array element {} contains an unpaired surrogate escape".format(index),
            ) from exc


class JSONCodec(BaseCodec):
    """Codec for JSON arrays of flat objects."""

    format = DataFormat.JSON

    @property
    def name(self) -> str:
        return "JSON"

    def decode(self, data: bytes) -> RecordSet:
        text = self._to_text(data)
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DecodeError(self.format.value, str(exc)) from exc
        except RecursionError as exc:
            raise DecodeError(self.format.value, "document is nested too deeply") from exc

        if not isinstance(document, list):
            raise DecodeError(
                self.format.value,
                "expected a JSON array of objects, got {}".format(type(document).__name__),
            )

        records: RecordSet = []
        for index, item in enumerate(document):
            if not isinstance(item, dict):
                raise DecodeError(
                    self.format.value,
                    "array element {} is not an object".format(index),
                )
            record = build_record(item.items())
            _check_encodable(record, index)
            records.append(record)
        return records

    def encode(self, records: RecordSet) -> bytes:
        return self._to_bytes(json.dumps(records, indent=2, ensure_ascii=False))
