"""Output formatters: report rendering per format.

Tests cover:
    - text report is "x,y,DIRECTION"
    - json/xml/csv carry the same triple
    - quiet renders nothing
    - factory falls back to text
    - welcome/goodbye messages mention the table and commands
"""

import csv
import io
import json
import xml.etree.ElementTree as ET

import pytest

from toyrobot.formatters import (
    CsvOutputFormatter,
    JsonOutputFormatter,
    QuietOutputFormatter,
    TextOutputFormatter,
    XmlOutputFormatter,
    create_formatter,
)
from toyrobot.processor import Reported
from toyrobot.types import Direction, Position, Table


@pytest.fixture
def report():
    return Reported(Position(3, 1), Direction.WEST)


def test_text(report):
    assert TextOutputFormatter().format_report(report) == "3,1,WEST"


def test_json(report):
    data = json.loads(JsonOutputFormatter().format_report(report))
    assert data["status"] == "success"
    assert data["type"] == "report"
    assert data["data"] == {
        "position": {"x": 3, "y": 1},
        "direction": "WEST",
        "formatted": "3,1,WEST",
    }


def test_xml(report):
    root = ET.fromstring(XmlOutputFormatter().format_report(report).encode("utf-8"))
    assert root.tag == "robot_report"
    assert root.findtext("position/x") == "3"
    assert root.findtext("position/y") == "1"
    assert root.findtext("direction") == "WEST"
    assert root.findtext("formatted") == "3,1,WEST"


def test_csv(report):
    rows = list(csv.reader(io.StringIO(CsvOutputFormatter().format_report(report))))
    assert rows == [
        ["x", "y", "direction", "formatted"],
        ["3", "1", "WEST", "3,1,WEST"],
    ]


def test_quiet(report):
    formatter = QuietOutputFormatter()
    assert formatter.format_report(report) is None
    assert formatter.format_welcome(Table()) is None
    assert formatter.format_goodbye() is None


@pytest.mark.parametrize("name,cls", [
    ("text", TextOutputFormatter),
    ("JSON", JsonOutputFormatter),
    ("xml", XmlOutputFormatter),
    (" csv ", CsvOutputFormatter),
    ("quiet", QuietOutputFormatter),
    ("none", QuietOutputFormatter),
    ("yaml", TextOutputFormatter),
    (None, TextOutputFormatter),
    ("", TextOutputFormatter),
])
def test_create_formatter(name, cls):
    assert type(create_formatter(name)) is cls


def test_text_welcome():
    text = TextOutputFormatter().format_welcome(Table(7, 3))
    assert "Table size: 7x3 table" in text
    assert "Valid directions: NORTH, EAST, SOUTH, WEST" in text
    assert "PLACE X,Y,F" in text


def test_json_welcome():
    data = json.loads(JsonOutputFormatter().format_welcome(Table(6, 4)))
    assert data["type"] == "welcome"
    assert data["data"]["table"] == {"width": 6, "height": 4}
    assert set(data["data"]["commands"]) == {"place", "move", "left", "right", "report", "exit"}


def test_xml_welcome_is_well_formed():
    root = ET.fromstring(XmlOutputFormatter().format_welcome(Table()).encode("utf-8"))
    assert root.findtext("table/width") == "5"
    assert root.find("commands/place") is not None


def test_csv_welcome():
    rows = list(csv.reader(io.StringIO(CsvOutputFormatter().format_welcome(Table(2, 9)))))
    assert ["table", "width", "2"] in rows
    assert ["table", "height", "9"] in rows


@pytest.mark.parametrize("cls", [TextOutputFormatter, JsonOutputFormatter, XmlOutputFormatter, CsvOutputFormatter])
def test_goodbye_mentions_simulator(cls):
    assert "Toy Robot Simulator" in cls().format_goodbye()
