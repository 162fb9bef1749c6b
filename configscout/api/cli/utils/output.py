"""Output formatting utilities for ConfigScout CLI commands."""

import json
import os
import sys
from typing import Any, Iterable


class OutputFormatter:
    """Handles consistent output formatting across CLI commands."""

    def __init__(self, verbose: bool = False):
        """Initialize output formatter.

        Args:
            verbose: Whether to enable verbose output
        """
        self.verbose = verbose

    def info(self, message: str) -> None:
        print(f"ℹ️  {message}")

    def success(self, message: str) -> None:
        print(f"✅ {message}")

    def error(self, message: str) -> None:
        """Print an error message to stderr.

        Args:
            message: Message to print
        """
        # Quiet mode keeps stdout machine-readable and stderr empty
        if not os.environ.get("CONFIGSCOUT_QUIET"):
            print(f"❌ {message}", file=sys.stderr)

    def verbose_info(self, message: str) -> None:
        """Print a verbose info message if verbose mode is enabled.

        Args:
            message: Message to print
        """
        if self.verbose:
            print(f"🔍 {message}")

    def json_output(self, data: Any) -> None:
        """Print data as formatted JSON.

        Args:
            data: Data to output as JSON
        """
        print(json.dumps(data, indent=2, default=str))

    def lines(self, values: Iterable[str]) -> None:
        for value in values:
            print(value)
