"""Intermediate record model shared by every codec.

WHY: JSON arrays, CSV rows, XML items and text lines all describe the same
thing — an ordered list of flat records. Decoders produce this model and
encoders consume it, so any input format can reach any output format
without pairwise converters.

HOW: A Record is a plain ``dict`` from field name to text value; its
insertion order is the record's field order. A Record Set is a ``list`` of
Records. build_record() is the single way decoders assemble a record, so the
duplicate-key and value-to-text rules live in one place.

RULES:
- Field values are always ``str`` — no type inference
- Duplicate keys in one record: the later occurrence wins
- Record order is significant and preserved end to end
- A Record Set may be empty
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Tuple

Record = Dict[str, str]
"""One row/entry: field name → text value, in field order."""

RecordSet = List[Record]
"""Ordered sequence of records produced by decoding, consumed by encoding."""


def value_to_text(value: Any) -> str:
    """Render any decoded value as its canonical text form.

    WHY: JSON carries numbers, booleans and nulls. The model only stores
    text, so every non-string value needs one deterministic spelling that
    the CSV, XML and text encoders can write as-is.

    RULES:
    - str → unchanged
    - None → ""
    - bool → "true" / "false" (checked before int, since bool is an int)
    - int / float → JSON spelling ("30", "2.5")
    - list / dict → compact JSON text
    - anything else → str(value)
    """
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, list, dict)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


def build_record(pairs: Iterable[Tuple[str, Any]]) -> Record:
    """Assemble a Record from (key, value) pairs in source order.

    RULES:
    - Values pass through value_to_text()
    - A repeated key keeps its first position but takes the last value
    """
    record: Record = {}
    for key, value in pairs:
        record[key] = value_to_text(value)
    return record
