"""
Input Sources
-------------
Line producers for the application. Each source yields lines with the
trailing newline removed. Failures of the source itself are raised as
InputStreamError.

Usage:
    from toyrobot.input_sources import create_input_source

    source = create_input_source("commands.txt")
    for line in source:
        ...
"""

import os
import sys
from typing import Iterator, List, Optional, TextIO, Union

from .errors import InputStreamError


class InputSource:
    """Base class for line producers."""

    name = "input"

    def __iter__(self) -> Iterator[str]:
        return self.lines()

    def lines(self) -> Iterator[str]:
        raise NotImplementedError

    def is_interactive(self) -> bool:
        return False


class StdinInputSource(InputSource):
    """Lines from a text stream (stdin by default). Not restartable."""

    name = "stdin"

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdin

    def lines(self) -> Iterator[str]:
        try:
            for line in self.stream:
                yield line.rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as e:
            raise InputStreamError(f"Failed reading {self.name}: {e}", self.name) from e

    def is_interactive(self) -> bool:
        isatty = getattr(self.stream, "isatty", None)
        try:
            return bool(isatty and isatty())
        except ValueError:
            # closed stream
            return False


class FileInputSource(InputSource):
    """Lines from a file, opened lazily and closed when iteration ends."""

    def __init__(self, path: str, encoding: str = "utf-8"):
        self.path = path
        self.encoding = encoding
        self.name = path

    def lines(self) -> Iterator[str]:
        try:
            with open(self.path, encoding=self.encoding) as f:
                for line in f:
                    yield line.rstrip("\r\n")
        except FileNotFoundError as e:
            raise InputStreamError(f"File not found: {self.path}", self.path) from e
        except PermissionError as e:
            raise InputStreamError(f"Permission denied: {self.path}", self.path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise InputStreamError(f"Failed reading {self.path}: {e}", self.path) from e


class StringInputSource(InputSource):
    """Lines from an in-memory string."""

    name = "string"

    def __init__(self, text: str):
        self.text = text

    def lines(self) -> Iterator[str]:
        for line in self.text.splitlines():
            yield line


class ListInputSource(InputSource):
    """Lines from a list of strings."""

    name = "list"

    def __init__(self, items: List[str]):
        self.items = list(items)

    def lines(self) -> Iterator[str]:
        for item in self.items:
            yield item.rstrip("\r\n")


def create_input_source(source: Union[str, List[str], TextIO, InputSource, None] = None) -> InputSource:
    """
    Build an input source.

    - None: stdin
    - InputSource: returned as-is
    - str: a file path if it exists, otherwise the command text itself
    - list/tuple: one command per item
    - file-like object: read line by line
    """
    if source is None:
        return StdinInputSource()
    if isinstance(source, InputSource):
        return source
    if isinstance(source, str):
        if os.path.isfile(source):
            return FileInputSource(source)
        return StringInputSource(source)
    if isinstance(source, (list, tuple)):
        return ListInputSource(list(source))
    if hasattr(source, "readline"):
        return StdinInputSource(source)
    raise TypeError(f"Unsupported input source type: {type(source).__name__}")
