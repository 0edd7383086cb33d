#!/usr/bin/env python3
"""
Robot Shell - Interactive Command Shell
---------------------------------------
Terminal front end for the toy robot.
Provides readline, colors, history, help, and command execution.

Features:
- Robot commands: PLACE X,Y,F / MOVE / LEFT / RIGHT / REPORT
- Tab completion for keywords and PLACE directions
- Command history (saved to ~/.toyrobot_history)
- Built-in help, history, status, clear
- EXIT / QUIT / BYE or Ctrl+C to leave

Usage:
    from toyrobot.shell import RobotShell

    shell = RobotShell(Application())
    shell.run()  # Blocking interactive loop
"""

import os
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .application import Application
from .commands import format_command_help, get_command, get_completions, list_commands


# ============================================================
# ANSI COLORS
# ============================================================

class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"


def colored(text: str, color: str) -> str:
    """Apply color to text."""
    return f"{color}{text}{Colors.RESET}"


def success(text: str) -> str:
    return colored(f"✓ {text}", Colors.GREEN)


def error(text: str) -> str:
    return colored(f"✗ {text}", Colors.RED)


def warning(text: str) -> str:
    return colored(f"⚠ {text}", Colors.YELLOW)


def info(text: str) -> str:
    return colored(f"ℹ {text}", Colors.CYAN)


# ============================================================
# BUILT-IN COMMAND DEFINITION
# ============================================================

@dataclass
class ShellCommand:
    """Definition of a shell-only command."""
    name: str
    description: str
    handler: Callable  # handler(args_str) -> str or None
    usage: str = ""
    aliases: List[str] = field(default_factory=list)


# ============================================================
# ROBOT SHELL
# ============================================================

class RobotShell:
    """
    Interactive shell around an Application.

    Robot commands are handed to Application.process_line, so the shell
    follows the same rules as batch input. Shell built-ins (help, history,
    status, clear) never reach the robot.
    """

    def __init__(
        self,
        app: Application,
        input_func: Callable[[str], str] = input,
        print_func: Callable[[str], None] = print,
        history_file: Optional[str] = None,
        use_readline: bool = True,
        use_color: bool = True,
    ):
        self.app = app
        self.input_func = input_func
        self.print_func = print_func
        self.use_readline = use_readline
        self.use_color = use_color
        self.history_file = history_file or os.path.expanduser("~/.toyrobot_history")

        self.history: List[str] = []
        self.builtins: Dict[str, ShellCommand] = {}
        self._running = False
        self._register_builtin_commands()

        # Reports go to the shell's printer
        self.app.output = self._emit

    def _emit(self, text: str):
        self.print_func(colored(text, Colors.BOLD) if self.use_color else text)

    def _style(self, formatter: Callable[[str], str], text: str) -> str:
        return formatter(text) if self.use_color else text

    def _setup_readline(self):
        """Configure readline for tab completion and history."""
        import atexit
        import readline

        readline.parse_and_bind("tab: complete")
        readline.set_completer(self._completer)
        readline.set_completer_delims(" \t\n")

        try:
            readline.read_history_file(self.history_file)
        except (FileNotFoundError, OSError):
            pass

        atexit.register(readline.write_history_file, self.history_file)

    def _completer(self, text: str, state: int) -> Optional[str]:
        """Tab completion function for readline."""
        import readline

        context = readline.get_line_buffer()[:readline.get_begidx()]
        completions = self.complete(text, context)
        if state < len(completions):
            return completions[state]
        return None

    def complete(self, text: str, context: str = "") -> List[str]:
        """Completions for robot keywords, PLACE directions and built-ins."""
        completions = get_completions(text, context)
        if not context.strip():
            names = []
            for cmd in self.builtins.values():
                names.append(cmd.name)
                names.extend(cmd.aliases)
            completions.extend(n for n in names if n.startswith(text.lower()))
        return sorted(set(completions))

    def _register_builtin_commands(self):
        """Register built-in shell commands."""
        for cmd in (
            ShellCommand("help", "Show available commands", self._cmd_help, "[command]", ["?", "h"]),
            ShellCommand("history", "Show command history", self._cmd_history),
            ShellCommand("status", "Show robot state and counters", self._cmd_status),
            ShellCommand("clear", "Clear the screen", self._cmd_clear, aliases=["cls"]),
        ):
            self.builtins[cmd.name] = cmd

    def _find_builtin(self, name: str) -> Optional[ShellCommand]:
        name = name.lower().strip()
        if name in self.builtins:
            return self.builtins[name]
        for cmd in self.builtins.values():
            if name in cmd.aliases:
                return cmd
        return None

    # ============================================================
    # BUILT-IN COMMAND HANDLERS
    # ============================================================

    def _cmd_help(self, args: str) -> str:
        """Show help for commands."""
        args = args.strip()

        if args:
            spec = get_command(args)
            if spec:
                return format_command_help(spec)
            cmd = self._find_builtin(args)
            if cmd:
                usage = f" {cmd.usage}" if cmd.usage else ""
                return f"{cmd.name}{usage}: {cmd.description}"
            return self._style(error, f"Unknown command: {args}")

        lines = [
            "",
            self._style(lambda t: colored(t, Colors.BOLD), "ROBOT COMMANDS"),
        ]
        for spec in list_commands():
            usage = f" {spec.usage}" if spec.usage else ""
            aliases = f" (aliases: {', '.join(spec.aliases)})" if spec.aliases else ""
            lines.append(f"  {spec.name + usage:15} {spec.description}{aliases}")

        lines.append("")
        lines.append(self._style(lambda t: colored(t, Colors.BOLD), "SHELL"))
        for cmd in self.builtins.values():
            lines.append(f"  {cmd.name:15} {cmd.description}")
        lines.append("")
        return "\n".join(lines)

    def _cmd_history(self, args: str) -> str:
        """Show command history."""
        if not self.history:
            return self._style(info, "No command history yet.")

        lines = ["Command History:"]
        for i, line in enumerate(self.history[-20:], 1):
            lines.append(f"  {i:3}. {line}")
        return "\n".join(lines)

    def _cmd_status(self, args: str) -> str:
        """Show robot state and counters."""
        stats = self.app.processor.stats
        lines = [
            "Robot Status:",
            f"  {self.app.robot.describe()}",
            f"  Table: {self.app.table}",
            f"  Commands executed: {stats.executed}",
            f"  Ignored: {stats.ignored}",
            f"  Reports: {stats.reports}",
        ]
        return "\n".join(lines)

    def _cmd_clear(self, args: str) -> Optional[str]:
        """Clear the screen."""
        os.system('clear' if os.name == 'posix' else 'cls')
        return None

    # ============================================================
    # COMMAND EXECUTION
    # ============================================================

    def execute(self, line: str) -> Optional[str]:
        """
        Execute one shell line.

        Returns:
            Message to display, or None. Reports are printed directly
            through the application's output sink.
        """
        line = line.strip()
        if not line:
            return None

        self.history.append(line)

        parts = line.split(maxsplit=1)
        builtin = self._find_builtin(parts[0])
        if builtin and get_command(parts[0]) is None:
            return builtin.handler(parts[1] if len(parts) > 1 else "")

        result = self.app.process_line(line, len(self.history))

        if result.exit_requested:
            self._running = False
            return None
        if result.failure is not None:
            return self._style(warning, f"Invalid command: {result.failure.reason}")
        return None

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        """Run interactive shell loop (blocking)."""
        if self.use_readline:
            self._setup_readline()

        welcome = self.app.welcome_message()
        if welcome:
            self.print_func(welcome)
        self.print_func(self._style(info, "Type 'help' for commands, 'EXIT' to quit"))

        self._running = True

        while self._running:
            try:
                line = self.input_func("> ")
            except (KeyboardInterrupt, EOFError):
                self.print_func("")
                self._running = False
                break

            result = self.execute(line)
            if result:
                self.print_func(result)

        goodbye = self.app.goodbye_message()
        if goodbye:
            self.print_func(self._style(lambda t: colored(t, Colors.MAGENTA), goodbye))
