"""Enumerations for intlcheck type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class UsageKind(StrEnum):
    """How a reference to a translator binding is used.

    StrEnum provides automatic string conversion: str(UsageKind.DIRECT) == "direct"
    """

    DIRECT = "direct"
    """Translator invoked: t('key') or t.rich('key')"""

    FORWARD_POSITIONAL = "forward_positional"
    """Translator passed as a bare argument: render(t)"""

    FORWARD_DESTRUCTURED = "forward_destructured"
    """Translator passed inside an object literal argument: render({ t })"""

    IGNORED = "ignored"
    """Any other use (identity checks, assignments, returns)"""


class DynamicReason(StrEnum):
    """Why a usage could not be resolved to a literal key."""

    NON_LITERAL_KEY = "non_literal_key"
    """t(key), t(`a`), t('a' + b), t(c ? 'a' : 'b')"""

    MISSING_KEY = "missing_key"
    """t() called without a key argument"""

    NON_LITERAL_NAMESPACE = "non_literal_namespace"
    """useTranslations(ns) called with a non-literal namespace"""


class CheckMode(StrEnum):
    """CLI operating mode."""

    CHECK = "check"
    """Report missing and unused keys"""

    FIX = "fix"
    """Report, then remove unused keys from every locale document"""


__all__ = [
    "CheckMode",
    "DynamicReason",
    "UsageKind",
]
