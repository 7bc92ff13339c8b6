"""Abstract base codec.

WHY: Every format turns bytes into the same Record Set and back. A shared
base class gives the orchestrator, the CLI and the HTTP API one interface to
call regardless of format.

HOW: BaseCodec is an ABC with a ``format`` class attribute, a ``name``
property and two abstract methods — ``decode()`` and ``encode()``. The
``_to_text()`` and ``_to_bytes()`` helpers apply one UTF-8 rule to input and
output for every text-based codec.

RULES:
- Subclasses MUST set ``format`` and implement ``name``, ``decode()`` and
  ``encode()``
- decode() raises DecodeError, encode() raises EncodeError — nothing else
- Codecs are stateless; instantiate freely
- Output is always UTF-8 encoded bytes

To add a new format:
1. Add a member to DataFormat and a row to FORMAT_TABLE
2. Create a new module in codecs/ subclassing BaseCodec
3. Register it in CODECS in codecs/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from file_converter.core.errors import DecodeError, EncodeError
from file_converter.core.formats import DataFormat
from file_converter.core.records import RecordSet


class BaseCodec(ABC):
    """Abstract base for all format codecs."""

    format: DataFormat

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable codec name, e.g. 'JSON'."""

    @abstractmethod
    def decode(self, data: bytes) -> RecordSet:
        """Parse a raw document of this format into a Record Set.

        Raises:
            DecodeError: The bytes are not a valid document of this format.
        """

    @abstractmethod
    def encode(self, records: RecordSet) -> bytes:
        """Render a Record Set as a raw document of this format.

        Raises:
            EncodeError: The records cannot be represented in this format.
        """

    def _to_text(self, data: bytes) -> str:
        """Decode input bytes as UTF-8, dropping a leading byte-order mark.

        Raises DecodeError (not UnicodeDecodeError) on invalid bytes.
        """
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise DecodeError(self.format.value, "input is not valid UTF-8 ({})".format(exc)) from exc

    def _to_bytes(self, text: str) -> bytes:
        """Encode output text as UTF-8.

        Raises EncodeError (not UnicodeEncodeError) when the text holds
        unpaired surrogates.
        """
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise EncodeError(self.format.value, "output is not valid UTF-8 ({})".format(exc)) from exc
