"""Codec registry — one codec per supported format.

WHY: The orchestrator, CLI and HTTP API need a single lookup from a format
tag to the code that reads and writes it. A closed dict keyed by DataFormat
keeps dispatch explicit: no string switches scattered around.

HOW: CODECS maps each DataFormat member to a codec *class* (not an
instance). Callers instantiate as needed: ``codec = CODECS[DataFormat.CSV]()``.

RULES:
- Every DataFormat member has exactly one entry
- Values are BaseCodec subclasses whose ``format`` equals their key
- Every codec listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Type

from file_converter.codecs.csv_codec import CSVCodec
from file_converter.codecs.json_codec import JSONCodec
from file_converter.codecs.line_text import LineTextCodec
from file_converter.codecs.xml_codec import XMLCodec
from file_converter.core.formats import DataFormat

if TYPE_CHECKING:
    from file_converter.codecs.base import BaseCodec

CODECS: Dict[DataFormat, Type[BaseCodec]] = {
    DataFormat.JSON: JSONCodec,
    DataFormat.CSV: CSVCodec,
    DataFormat.XML: XMLCodec,
    DataFormat.TXT: LineTextCodec,
}
