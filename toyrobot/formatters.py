"""
Output Formatters
-----------------
Render reports and session messages for the output sink.

Formats: text (default), json, xml, csv, quiet. A formatter returns None
when nothing should be written.

Usage:
    from toyrobot.formatters import create_formatter

    formatter = create_formatter("json")
    print(formatter.format_report(reported))
"""

import csv
import io
import json
from typing import Dict, List, Optional
from xml.sax.saxutils import escape

from .commands import list_commands
from .processor import Reported
from .types import Direction, Table

APPLICATION_NAME = "Toy Robot Simulator"
GOODBYE_MESSAGE = "Thank you for using Toy Robot Simulator!"

OUTPUT_FORMATS = ["text", "json", "xml", "csv", "quiet"]


def _command_descriptions() -> Dict[str, str]:
    descriptions = {}
    for spec in list_commands():
        usage = f" {spec.usage}" if spec.usage else ""
        descriptions[spec.name.lower()] = f"{spec.name}{usage} - {spec.description}"
    return descriptions


def _report_data(report: Reported) -> Dict:
    return {
        "position": {"x": report.x, "y": report.y},
        "direction": report.direction.name,
        "formatted": report.as_text(),
    }


class OutputFormatter:
    """Base formatter."""

    name = ""

    def format_report(self, report: Reported) -> Optional[str]:
        raise NotImplementedError

    def format_welcome(self, table: Table) -> Optional[str]:
        raise NotImplementedError

    def format_goodbye(self) -> Optional[str]:
        raise NotImplementedError


class TextOutputFormatter(OutputFormatter):
    name = "text"

    def format_report(self, report: Reported) -> Optional[str]:
        return report.as_text()

    def format_welcome(self, table: Table) -> Optional[str]:
        lines = [APPLICATION_NAME, "=" * len(APPLICATION_NAME), "", "Commands:"]
        lines.extend(f"  {text}" for text in _command_descriptions().values())
        lines.extend([
            "",
            f"Table size: {table}",
            f"Valid directions: {', '.join(Direction.names())}",
            "",
        ])
        return "\n".join(lines)

    def format_goodbye(self) -> Optional[str]:
        return f"\n{GOODBYE_MESSAGE}"


class JsonOutputFormatter(OutputFormatter):
    name = "json"

    def format_report(self, report: Reported) -> Optional[str]:
        return json.dumps({"status": "success", "type": "report", "data": _report_data(report)})

    def format_welcome(self, table: Table) -> Optional[str]:
        return json.dumps({
            "status": "info",
            "type": "welcome",
            "data": {
                "application": APPLICATION_NAME,
                "table": {"width": table.width, "height": table.height},
                "valid_directions": Direction.names(),
                "commands": _command_descriptions(),
            },
        })

    def format_goodbye(self) -> Optional[str]:
        return json.dumps({"status": "info", "type": "goodbye", "message": GOODBYE_MESSAGE})


class XmlOutputFormatter(OutputFormatter):
    name = "xml"

    HEADER = '<?xml version="1.0" encoding="UTF-8"?>'

    def format_report(self, report: Reported) -> Optional[str]:
        return "\n".join([
            self.HEADER,
            "<robot_report>",
            "  <status>success</status>",
            "  <position>",
            f"    <x>{report.x}</x>",
            f"    <y>{report.y}</y>",
            "  </position>",
            f"  <direction>{report.direction.name}</direction>",
            f"  <formatted>{report.as_text()}</formatted>",
            "</robot_report>",
        ])

    def format_welcome(self, table: Table) -> Optional[str]:
        lines = [
            self.HEADER,
            "<robot_welcome>",
            f"  <application>{escape(APPLICATION_NAME)}</application>",
            "  <table>",
            f"    <width>{table.width}</width>",
            f"    <height>{table.height}</height>",
            "  </table>",
            f"  <valid_directions>{', '.join(Direction.names())}</valid_directions>",
            "  <commands>",
        ]
        for key, text in _command_descriptions().items():
            lines.append(f"    <{key}>{escape(text)}</{key}>")
        lines.extend(["  </commands>", "</robot_welcome>"])
        return "\n".join(lines)

    def format_goodbye(self) -> Optional[str]:
        return "\n".join([
            self.HEADER,
            "<robot_goodbye>",
            f"  <message>{escape(GOODBYE_MESSAGE)}</message>",
            "</robot_goodbye>",
        ])


class CsvOutputFormatter(OutputFormatter):
    name = "csv"

    @staticmethod
    def _rows(rows: List[List]) -> str:
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerows(rows)
        return buf.getvalue().rstrip("\n")

    def format_report(self, report: Reported) -> Optional[str]:
        return self._rows([
            ["x", "y", "direction", "formatted"],
            [report.x, report.y, report.direction.name, report.as_text()],
        ])

    def format_welcome(self, table: Table) -> Optional[str]:
        rows = [
            ["type", "key", "value"],
            ["application", "name", APPLICATION_NAME],
            ["table", "width", table.width],
            ["table", "height", table.height],
            ["directions", "valid", ";".join(Direction.names())],
        ]
        rows.extend(["command", key, text] for key, text in _command_descriptions().items())
        return self._rows(rows)

    def format_goodbye(self) -> Optional[str]:
        return self._rows([["type", "message"], ["goodbye", GOODBYE_MESSAGE]])


class QuietOutputFormatter(OutputFormatter):
    name = "quiet"

    def format_report(self, report: Reported) -> Optional[str]:
        return None

    def format_welcome(self, table: Table) -> Optional[str]:
        return None

    def format_goodbye(self) -> Optional[str]:
        return None


FORMATTERS = {
    "text": TextOutputFormatter,
    "json": JsonOutputFormatter,
    "xml": XmlOutputFormatter,
    "csv": CsvOutputFormatter,
    "quiet": QuietOutputFormatter,
    "none": QuietOutputFormatter,
}


def create_formatter(name: Optional[str] = None) -> OutputFormatter:
    """Create formatter by name. Unknown or empty names give text."""
    key = (name or "text").strip().lower()
    return FORMATTERS.get(key, TextOutputFormatter)()
