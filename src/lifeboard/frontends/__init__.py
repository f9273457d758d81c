"""Frontend interfaces for the simulator."""

from .console import ConsoleGameOfLife

__all__ = ["ConsoleGameOfLife"]
