"""Unit tests for input format detection.

WHY: Detection picks the decoder. A wrong guess turns a valid upload into
a confusing parse error in a format the user never sent.

HOW: Feeds small byte strings through detect_format() and checks the tag,
covering each rule of the fixed-order heuristic and its fallbacks.

RULES:
- detect_format() never raises
- Rule order matters: json before xml before csv before txt
"""

import pytest

from file_converter.core.detector import detect_format
from file_converter.core.formats import DataFormat


class TestDetectFormat:
    """detect_format() classification rules."""

    @pytest.mark.parametrize(
        "data, expected",
        [
            (b'{"a":1}', DataFormat.JSON),
            (b"<root/>", DataFormat.XML),
            (b"a,b\n1,2\n", DataFormat.CSV),
            (b"hello world", DataFormat.TXT),
            (b"", DataFormat.TXT),
        ],
    )
    def test_reference_examples(self, data, expected):
        assert detect_format(data) == expected

    def test_json_array(self):
        assert detect_format(b'[{"a": "1"}]') == DataFormat.JSON

    def test_leading_whitespace_ignored(self):
        assert detect_format(b"  \n\t [\n]") == DataFormat.JSON
        assert detect_format(b"\n\n<?xml version='1.0'?><root/>") == DataFormat.XML

    def test_whitespace_only_is_txt(self):
        assert detect_format(b" \n\t \r\n") == DataFormat.TXT

    def test_utf8_bom_ignored(self):
        assert detect_format(b"\xef\xbb\xbf[]") == DataFormat.JSON

    def test_csv_only_looks_at_first_line(self):
        assert detect_format(b"just a title\na,b\n1,2") == DataFormat.TXT

    def test_brackets_on_first_line_rule_out_csv(self):
        assert detect_format(b"a,{b}\n1,2") == DataFormat.TXT
        assert detect_format(b"a,b>c\n1,2") == DataFormat.TXT

    def test_malformed_json_still_routed_to_json(self):
        """Detection is a heuristic, not a validator."""
        assert detect_format(b"{not json at all") == DataFormat.JSON

    def test_single_comma_line_is_csv(self):
        assert detect_format(b"name,age") == DataFormat.CSV
