"""Exceptions raised while reading markdown input"""

from typing import Optional


class MalformedInputError(ValueError):
    """A code fence was opened but never closed."""

    def __init__(self, line: int, path: Optional[str] = None):
        self.line = line
        self.path = path
        where = f"{path}:{line}" if path else f"line {line}"
        super().__init__(f"Unterminated code fence opened at {where}")
