"""Shared utilities."""

from .signal_handler import run_with_cleanup, CleanupContext

__all__ = ["run_with_cleanup", "CleanupContext"]
