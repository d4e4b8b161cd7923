"""Turn the outcome of a task into a process exit code."""

from __future__ import annotations

import sys
from typing import Any


def report(result: Any) -> int:
    """Return the exit code for a task's result.

    An exception is printed to standard error and gives 1; anything else gives 0.
    """
    if isinstance(result, BaseException):
        print(f"Error: {result!r}", file=sys.stderr)
        return 1
    return 0