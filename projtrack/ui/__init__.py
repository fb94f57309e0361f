"""Console user interface."""

from projtrack.ui.console import ConsoleApp

__all__ = ["ConsoleApp"]
