#!/usr/bin/env python3
"""
Signal Handler Utilities
------------------------
Graceful Ctrl+C handling for the simulator.
Ensures cleanup (closing input, printing the goodbye) on interrupt.

Usage:
    from toyrobot.utils import run_with_cleanup

    def main():
        ...

    if __name__ == "__main__":
        run_with_cleanup(main)

Or with explicit cleanup:

    from toyrobot.utils import CleanupContext

    with CleanupContext() as ctx:
        ctx.register(source.close)
        app.run(source)
"""

import sys
from typing import Any, Callable, List, Optional


class CleanupContext:
    """
    Context for registering cleanup functions that run on exit or interrupt.

    Usage:
        ctx = CleanupContext()
        ctx.register(my_cleanup_func)

        # Later, on interrupt:
        ctx.cleanup()
    """

    def __init__(self, stream=None):
        self._cleanups: List[Callable] = []
        self._cleaned = False
        self._stream = stream

    def register(self, cleanup_func: Callable) -> Callable:
        """Register a cleanup function. Returns it, so it can be used as a decorator."""
        self._cleanups.append(cleanup_func)
        return cleanup_func

    @property
    def cleaned(self) -> bool:
        return self._cleaned

    def cleanup(self):
        """Run all registered cleanup functions once, newest first."""
        if self._cleaned:
            return
        self._cleaned = True

        for func in reversed(self._cleanups):
            try:
                func()
            except Exception as e:
                print(f"[Cleanup Error] {e}", file=self._stream or sys.stderr)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.cleanup()
        return False


def run_with_cleanup(
    func: Callable[[], Any],
    cleanup: Optional[CleanupContext] = None,
    cleanup_message: str = "[Interrupted] Cleaning up...",
    done_message: str = "[Done] Cleanup complete",
    stream=None,
) -> Any:
    """
    Run a callable with proper Ctrl+C handling.

    Ensures that:
    1. KeyboardInterrupt does not escape as a traceback
    2. Registered cleanups run whether func returns, raises, or is interrupted

    Args:
        func: Callable to run
        cleanup: Optional context whose cleanups run afterwards
        cleanup_message: Message to print when interrupted
        done_message: Message to print after cleanup on interrupt
        stream: Where to print messages (stderr by default)

    Returns:
        The result of func, or None if interrupted
    """
    out = stream or sys.stderr
    ctx = cleanup or CleanupContext(stream=out)

    try:
        return func()
    except KeyboardInterrupt:
        print(f"\n{cleanup_message}", file=out)
        ctx.cleanup()
        print(done_message, file=out)
        return None
    finally:
        ctx.cleanup()
