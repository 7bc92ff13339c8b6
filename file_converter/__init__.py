"""File Converter — structured text conversion between JSON, CSV, XML and text.

WHY: The same tabular data arrives as JSON exports, spreadsheet CSVs, XML
dumps and plain line lists. Every consumer wants it in a different shape.
This package decodes any of the four formats into one intermediate record
model and re-encodes that model into whichever format is requested.

HOW: Three-stage pipeline — detect (sniff the input format), decode (codec
turns bytes into a Record Set), encode (codec turns the Record Set back into
bytes). The CLI and the HTTP API are thin collaborators around ``convert()``.

RULES:
- All codecs produce and consume the same Record Set model
- Adding a format = one new codec module plus one registry entry
- The core never touches the file system and never logs
"""

__version__ = "0.1.0"
