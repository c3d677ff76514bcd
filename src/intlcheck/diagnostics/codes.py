"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Diagnostic codes with unique identifiers.

    Organized by category:
        1000-1999: Key errors (used but undefined)
        2000-2999: Dynamic usages (cannot be statically analyzed)
        3000-3999: Informational findings (defined but unused)
        4000-4999: Message document errors (absent, unparsable)
    """

    # Key errors (1000-1999)
    MISSING_KEY = 1001

    # Dynamic usages (2000-2999)
    DYNAMIC_KEY = 2001
    DYNAMIC_NAMESPACE = 2002

    # Informational (3000-3999)
    UNUSED_KEY = 3001

    # Message document errors (4000-4999)
    MESSAGES_NOT_FOUND = 4001
    MESSAGES_INVALID = 4002
    MESSAGES_EMPTY = 4003


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for diagnostic reporting.

    Note:
        Offsets and columns come from the syntax tree and are measured in
        bytes of the UTF-8 encoded source, not in characters.

    Attributes:
        start: Starting byte offset (0-indexed)
        end: Ending byte offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        path: Source file the span belongs to (empty when unknown)
    """

    start: int
    end: int
    line: int
    column: int
    path: str = ""

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1 (lines are 1-indexed), or column is less than 1
                (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    def describe(self) -> str:
        """Return ``path:line:column`` (or ``line:column`` without a path)."""
        if self.path:
            return f"{self.path}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich information for
    both humans (console output) and tools (JSON consumers, editors).

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description
        span: Source location (None for document-level findings)
        hint: Suggestion for fixing the problem
        key: Fully-qualified translation key involved, if any
        namespace: Translator namespace involved, if any
        document: Message document path involved, if any
        severity: Severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    key: str | None = None
    namespace: str | None = None
    document: str | None = None
    severity: Literal["error", "warning", "info"] = "error"

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[MISSING_KEY]: Missing translation key: 'common.title'
              --> src/App.tsx:4:12
              = help: Add 'common.title' to the source locale document

        Returns:
            Formatted diagnostic message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
