"""Shared test fixtures for the file_converter test suite.

WHY: Codec, converter, CLI and API tests all need the same small dataset in
each of the four formats. Centralizing it here keeps every test module
checking against one authoritative set of records.

HOW: PEOPLE is the reference Record Set. Fixtures expose it as records and
as hand-written JSON, CSV and XML documents that decode to exactly PEOPLE.

RULES:
- Every document fixture decodes to PEOPLE, field order included
- Fixtures return fresh copies so tests may mutate them
"""

from typing import Dict, List

import pytest

PEOPLE: List[Dict[str, str]] = [
    {"name": "Alice", "age": "30", "city": "Paris"},
    {"name": "Bob", "age": "25", "city": "Lyon"},
]

PEOPLE_JSON = b"""[
  {"name": "Alice", "age": "30", "city": "Paris"},
  {"name": "Bob", "age": "25", "city": "Lyon"}
]
"""

PEOPLE_CSV = b"name,age,city\nAlice,30,Paris\nBob,25,Lyon\n"

PEOPLE_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<root>
  <item>
    <field name="name">Alice</field>
    <field name="age">30</field>
    <field name="city">Paris</field>
  </item>
  <item>
    <field name="name">Bob</field>
    <field name="age">25</field>
    <field name="city">Lyon</field>
  </item>
</root>
"""

LINES_TXT = b"first entry\n\n  second entry  \nthird entry\n"


@pytest.fixture
def people():
    """The reference Record Set."""
    return [dict(record) for record in PEOPLE]


@pytest.fixture
def people_json():
    return PEOPLE_JSON


@pytest.fixture
def people_csv():
    return PEOPLE_CSV


@pytest.fixture
def people_xml():
    return PEOPLE_XML


@pytest.fixture
def lines_txt():
    """Plain text with a blank line and padded whitespace."""
    return LINES_TXT
