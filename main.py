#!/usr/bin/env python3
"""
Toy Robot Simulator
-------------------
Move a robot around a table with text commands.

Usage:
    python main.py                          # Read commands from stdin (shell if a terminal)
    python main.py commands.txt             # Read commands from a file
    python main.py -i commands.txt -o json  # JSON reports
    python main.py -W 10 -H 8               # 10x8 table
    python main.py --config config.yaml     # Settings from YAML
    python main.py --example rotation       # Run a built-in example
    python main.py --list-examples          # List built-in examples

Commands:
    PLACE X,Y,F     Place robot at (X,Y) facing F (NORTH, EAST, SOUTH, WEST)
    MOVE            Move one step forward
    LEFT / RIGHT    Turn 90 degrees
    REPORT          Print X,Y,F
    EXIT            Stop (also QUIT, BYE)

Environment:
    ROBOT_TABLE_WIDTH, ROBOT_TABLE_HEIGHT, ROBOT_OUTPUT_FORMAT,
    ROBOT_LOG_LEVEL, ROBOT_MAX_COMMANDS, ROBOT_QUIET_MODE
"""

import os
import sys
import argparse
from dataclasses import replace

# Add root to path
ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, ROOT_DIR)

from toyrobot.application import Application
from toyrobot.config import LOG_FORMATS, LOG_LEVELS, RobotConfig
from toyrobot.errors import ConfigError, InputStreamError
from toyrobot.formatters import OUTPUT_FORMATS
from toyrobot.input_sources import FileInputSource, StdinInputSource
from toyrobot.observability import setup_logging
from toyrobot.scenarios import SCENARIOS, get_scenario
from toyrobot.shell import RobotShell, error
from toyrobot.utils import CleanupContext, run_with_cleanup


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Toy Robot Simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s commands.txt
  %(prog)s -W 10 -H 8 < commands.txt
  %(prog)s -o json commands.txt
        """
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        help="File with one command per line (default: stdin)"
    )

    parser.add_argument(
        "--input", "-i",
        metavar="FILE",
        help="File with one command per line (overrides the positional argument)"
    )

    parser.add_argument(
        "--width", "-W",
        type=int,
        help="Table width (default: 5)"
    )

    parser.add_argument(
        "--height", "-H",
        type=int,
        help="Table height (default: 5)"
    )

    parser.add_argument(
        "--output", "-o",
        choices=OUTPUT_FORMATS,
        help="Report format (default: text)"
    )

    parser.add_argument(
        "--config", "-c",
        help="Path to config.yaml"
    )

    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Diagnostic log level (default: warning)"
    )

    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        help="Diagnostic log format (default: text)"
    )

    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Start the interactive shell even when stdin is not a terminal"
    )

    parser.add_argument(
        "--example",
        metavar="NAME",
        help="Run a built-in example scenario"
    )

    parser.add_argument(
        "--list-examples",
        action="store_true",
        help="List built-in example scenarios"
    )

    args = parser.parse_args(argv)
    if args.interactive and (args.input or args.input_file):
        parser.error("--interactive reads from the terminal and cannot be combined with an input file")
    return args


def build_config(args) -> RobotConfig:
    """Defaults < config file < environment < CLI flags."""
    config = RobotConfig.load(args.config)

    updates = {}
    if args.width is not None:
        updates["table_width"] = args.width
    if args.height is not None:
        updates["table_height"] = args.height
    if args.output:
        updates["output_format"] = args.output
        updates["quiet"] = False
    if args.log_level:
        updates["log_level"] = args.log_level
    if args.log_format:
        updates["log_format"] = args.log_format

    return replace(config, **updates).validate()


def list_examples():
    """List built-in scenarios."""
    print("Available examples:")
    print()
    for key, scenario in SCENARIOS.items():
        print(f"  {key:18} {scenario.description}")


def run(args) -> int:
    """Run the simulator. Returns the process exit status."""
    if args.list_examples:
        list_examples()
        return 0

    config = build_config(args)
    setup_logging(config.log_level, config.log_format)
    app = Application(config=config)

    if args.example:
        scenario = get_scenario(args.example)
        if scenario is None:
            print(error(f"Unknown example: {args.example}"), file=sys.stderr)
            list_examples()
            return 1
        app.run(scenario.commands)
        return 0

    path = args.input or args.input_file
    source = FileInputSource(path) if path else StdinInputSource()

    if args.interactive or source.is_interactive():
        RobotShell(app).run()
        return 0

    app.run(source)
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    cleanup = CleanupContext()
    cleanup.register(sys.stdout.flush)

    def _run():
        try:
            return run(args)
        except (ConfigError, InputStreamError) as e:
            print(error(str(e)), file=sys.stderr)
            return 1

    status = run_with_cleanup(
        _run,
        cleanup=cleanup,
        cleanup_message="[Toy Robot] Shutting down...",
        done_message="[Toy Robot] Goodbye!",
    )
    return 0 if status is None else status


if __name__ == "__main__":
    sys.exit(main())
