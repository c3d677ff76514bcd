"""Diagnostic system for intlcheck.

Provides structured diagnostics with codes, spans and hints, plus the
exception hierarchy used at the I/O and configuration boundary.
Inspired by Rust compiler diagnostics.

Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import IntlCheckError, MessagesLoadError, RuleConfigError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "IntlCheckError",
    "MessagesLoadError",
    "OutputFormat",
    "RuleConfigError",
    "SourceSpan",
]
