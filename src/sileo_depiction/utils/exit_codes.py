"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success
  1   Violation — output failed its schema contract
  2   Error — usage error, missing file, malformed record
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
