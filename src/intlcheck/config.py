"""Run configuration for the checker.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from intlcheck.constants import (
    DEFAULT_MESSAGES_DIR,
    DEFAULT_SOURCE_LOCALE,
    DEFAULT_SOURCE_PATTERNS,
)
from intlcheck.enums import CheckMode
from intlcheck.localization.loading import messages_path, validate_locale_code

__all__ = ["CheckConfig"]


@dataclass(frozen=True, slots=True)
class CheckConfig:
    """Immutable configuration of one checker run.

    Attributes:
        messages_dir: Directory holding ``{locale}.json`` documents,
            relative to ``cwd`` unless absolute
        source_locale: Locale whose document defines the canonical keys
        mode: CHECK (report only) or FIX (also remove unused keys)
        source_patterns: Glob patterns selecting the sources to analyze
        cwd: Directory patterns and relative paths are resolved against

    Raises:
        ValueError: If the locale is unsafe or no source pattern is given
    """

    messages_dir: str = DEFAULT_MESSAGES_DIR
    source_locale: str = DEFAULT_SOURCE_LOCALE
    mode: CheckMode = CheckMode.CHECK
    source_patterns: tuple[str, ...] = DEFAULT_SOURCE_PATTERNS
    cwd: Path = field(default_factory=Path.cwd)

    def __post_init__(self) -> None:
        """Validate and normalize fields."""
        validate_locale_code(self.source_locale)
        if not self.source_patterns:
            msg = "At least one source pattern is required"
            raise ValueError(msg)
        object.__setattr__(self, "mode", CheckMode(self.mode))
        object.__setattr__(self, "source_patterns", tuple(self.source_patterns))
        object.__setattr__(self, "cwd", Path(self.cwd))

    @property
    def messages_root(self) -> Path:
        """Absolute messages directory."""
        return (self.cwd / self.messages_dir).resolve()

    @property
    def source_document(self) -> Path:
        """Absolute path of the source locale document."""
        return messages_path(self.messages_root, self.source_locale)

    @property
    def source_document_name(self) -> str:
        """File name of the source locale document (e.g., ``en.json``)."""
        return self.source_document.name
