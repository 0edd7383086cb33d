"""Application: the line-by-line run loop.

Tests cover:
    - the documented example scenarios
    - pre-placement commands produce no output
    - EXIT (and aliases) stop processing; later lines never run
    - malformed and blank lines are skipped
    - input stream failures raise InputStreamError
    - Ctrl+C while reading ends the run cleanly
    - command cap from configuration, off unless set
    - Application() defaults
"""

import pytest

from toyrobot.application import Application
from toyrobot.config import RobotConfig
from toyrobot.errors import InputStreamError
from toyrobot.formatters import JsonOutputFormatter
from toyrobot.input_sources import FileInputSource, ListInputSource
from toyrobot.types import Direction, Position, Table


# ─── scenarios ───────────────────────────────────────────────────

@pytest.mark.parametrize("lines,expected", [
    (["PLACE 0,0,NORTH", "MOVE", "REPORT"], ["0,1,NORTH"]),
    (["PLACE 0,0,NORTH", "LEFT", "REPORT"], ["0,0,WEST"]),
    (["PLACE 1,2,EAST", "MOVE", "MOVE", "LEFT", "MOVE", "REPORT"], ["3,3,NORTH"]),
    (["PLACE 4,4,NORTH", "MOVE", "REPORT"], ["4,4,NORTH"]),
    (["MOVE", "LEFT", "REPORT", "PLACE 2,2,SOUTH", "REPORT"], ["2,2,SOUTH"]),
])
def test_scenarios(collect_app, lines, expected):
    app = collect_app()
    app.run(lines)
    assert app.reports == expected


def test_multiple_reports_in_order(collect_app):
    app = collect_app()
    app.run(["PLACE 0,0,EAST", "REPORT", "MOVE", "REPORT", "RIGHT", "REPORT"])
    assert app.reports == ["0,0,EAST", "1,0,EAST", "1,0,SOUTH"]


def test_nothing_reported_before_place(collect_app):
    app = collect_app()
    result = app.run(["REPORT", "MOVE", "RIGHT", "REPORT"])
    assert app.reports == []
    assert result.commands_executed == 4
    assert not app.robot.placed


def test_invalid_place_then_valid(collect_app):
    app = collect_app()
    app.run(["PLACE 5,5,NORTH", "REPORT", "PLACE 0,0,NORTH", "REPORT"])
    assert app.reports == ["0,0,NORTH"]


# ─── exit ────────────────────────────────────────────────────────

@pytest.mark.parametrize("keyword", ["EXIT", "quit", "Bye"])
def test_exit_stops_processing(collect_app, keyword):
    app = collect_app()
    result = app.run(["PLACE 0,0,NORTH", "REPORT", keyword, "MOVE", "REPORT"])
    assert app.reports == ["0,0,NORTH"]
    assert result.exit_requested
    assert result.lines_read == 3
    assert app.robot.position == Position(0, 0)


def test_exit_does_not_consume_rest_of_stream(collect_app):
    consumed = []

    def lines():
        for line in ["PLACE 1,1,NORTH", "EXIT", "REPORT", "MOVE"]:
            consumed.append(line)
            yield line

    app = collect_app()
    app.run(lines())
    assert consumed == ["PLACE 1,1,NORTH", "EXIT"]


def test_end_of_input_without_exit(collect_app):
    app = collect_app()
    result = app.run(["PLACE 0,0,NORTH", "REPORT"])
    assert not result.exit_requested
    assert result.lines_read == 2
    assert result.reports == 1


# ─── tolerant input ──────────────────────────────────────────────

def test_malformed_and_blank_lines_are_skipped(collect_app):
    app = collect_app()
    result = app.run([
        "",
        "PLACE 1,2",
        "   ",
        "place 1,2,north",
        "JUMP",
        "move 2",
        "move",
        "report",
    ])
    assert app.reports == ["1,3,NORTH"]
    assert result.parse_failures == 3
    assert result.commands_executed == 3


def test_string_input(collect_app):
    app = collect_app()
    app.run("PLACE 0,0,NORTH\nMOVE\nREPORT\n")
    assert app.reports == ["0,1,NORTH"]


def test_file_input(collect_app, tmp_path):
    path = tmp_path / "commands.txt"
    path.write_text("PLACE 1,2,EAST\nMOVE\nMOVE\nLEFT\nMOVE\nREPORT\n")
    app = collect_app()
    app.run(FileInputSource(str(path)))
    assert app.reports == ["3,3,NORTH"]


def test_custom_table(collect_app):
    app = collect_app(table=Table(10, 3))
    app.run(["PLACE 9,2,NORTH", "MOVE", "REPORT", "PLACE 0,5,NORTH", "REPORT"])
    assert app.reports == ["9,2,NORTH", "9,2,NORTH"]


def test_table_from_config(collect_app):
    app = collect_app(config=RobotConfig(table_width=2, table_height=2))
    app.run(["PLACE 1,1,NORTH", "REPORT", "PLACE 2,2,NORTH", "REPORT"])
    assert app.reports == ["1,1,NORTH", "1,1,NORTH"]


def test_formatter_is_used(collect_app):
    app = collect_app(formatter=JsonOutputFormatter())
    app.run(["PLACE 0,0,NORTH", "REPORT"])
    assert '"formatted": "0,0,NORTH"' in app.reports[0]


def test_quiet_config_writes_nothing(collect_app):
    app = collect_app(config=RobotConfig(quiet=True))
    result = app.run(["PLACE 0,0,NORTH", "REPORT"])
    assert app.reports == []
    assert result.reports == 1


# ─── process_line ────────────────────────────────────────────────

def test_process_line(collect_app):
    app = collect_app()
    assert app.process_line("").blank
    assert app.process_line("nonsense").failure is not None
    app.process_line("PLACE 0,0,SOUTH")
    result = app.process_line("REPORT")
    assert result.output == "0,0,SOUTH"
    assert app.reports == ["0,0,SOUTH"]
    assert app.process_line("EXIT").exit_requested


# ─── stream failures and interrupts ──────────────────────────────

def test_missing_file_raises_input_stream_error(collect_app, tmp_path):
    app = collect_app()
    with pytest.raises(InputStreamError):
        app.run(FileInputSource(str(tmp_path / "missing.txt")))


def test_failing_iterator_raises_input_stream_error(collect_app):
    def lines():
        yield "PLACE 0,0,NORTH"
        raise OSError("device unplugged")

    app = collect_app()
    with pytest.raises(InputStreamError):
        app.run(lines())
    assert app.robot.placed


def test_interrupt_ends_run_cleanly(collect_app):
    def lines():
        yield "PLACE 0,0,NORTH"
        yield "REPORT"
        raise KeyboardInterrupt

    app = collect_app()
    result = app.run(lines())
    assert result.interrupted
    assert app.reports == ["0,0,NORTH"]
    assert app.robot.report() == (Position(0, 0), Direction.NORTH)


# ─── command cap ─────────────────────────────────────────────────

def test_max_commands_stops_reading(collect_app):
    app = collect_app(config=RobotConfig(max_commands=2))
    result = app.run(ListInputSource(["PLACE 0,0,NORTH", "MOVE", "REPORT"]))
    assert result.limit_reached
    assert app.reports == []
    assert app.robot.position == Position(0, 1)


def test_zero_max_commands_means_unlimited(collect_app):
    app = collect_app(config=RobotConfig(max_commands=0))
    app.run(["PLACE 0,0,NORTH"] + ["LEFT"] * 50 + ["REPORT"])
    assert app.reports == ["0,0,SOUTH"]


def test_default_config_runs_long_stream_to_the_end():
    reports = []
    app = Application(output=reports.append)
    result = app.run(["PLACE 0,0,NORTH"] + ["LEFT"] * 100_000 + ["REPORT"])
    assert reports == ["0,0,NORTH"]
    assert not result.limit_reached
    assert result.commands_executed == 100_002


def test_application_defaults():
    app = Application()
    assert app.table == Table(5, 5)
    assert app.robot.table is app.table
    assert app.config == RobotConfig()
    assert app.output is print


def test_default_output_is_print(capsys):
    Application().run(["PLACE 2,2,WEST", "REPORT"])
    assert capsys.readouterr().out == "2,2,WEST\n"
