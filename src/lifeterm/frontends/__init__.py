"""Frontend interfaces for the universe."""

from .terminal import TerminalGameOfLife

__all__ = ["TerminalGameOfLife"]
