"""Lint rule infrastructure.

A rule inspects one source file and returns diagnostics. Unlike the CLI,
which resolves usages across the whole project, a rule sees a single file;
that file may rely on a global hook, so the import short-circuit is off.

Components:
    RuleOptions - messagesDir / sourceLocale after precedence resolution
    resolve_rule_options - Rule options > shared settings > defaults
    RuleMeta - Static description of a rule
    RuleContext - Per-file state shared by every rule run on the file
    Rule - Base class of concrete rules

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Literal

from intlcheck.analysis.resolver import ResolutionResult, ResolverConfig, resolve
from intlcheck.constants import DEFAULT_MESSAGES_DIR, DEFAULT_SOURCE_LOCALE, SETTINGS_SECTION
from intlcheck.diagnostics import RuleConfigError
from intlcheck.localization.loading import validate_locale_code
from intlcheck.syntax import Project

if TYPE_CHECKING:
    from collections.abc import Mapping

    from intlcheck.diagnostics import Diagnostic
    from intlcheck.localization import MessageKeyCache
    from intlcheck.syntax import SourceUnit

__all__ = [
    "OPTION_NAMES",
    "Rule",
    "RuleContext",
    "RuleMeta",
    "RuleOptions",
    "resolve_rule_options",
]

logger = logging.getLogger(__name__)

# Option name -> RuleOptions field
OPTION_NAMES: dict[str, str] = {
    "messagesDir": "messages_dir",
    "sourceLocale": "source_locale",
}

type RuleLevel = Literal["error", "warn", "off"]


@dataclass(frozen=True, slots=True)
class RuleOptions:
    """Resolved rule options.

    Attributes:
        messages_dir: Directory holding the locale documents
        source_locale: Locale whose document defines the canonical keys
    """

    messages_dir: str = DEFAULT_MESSAGES_DIR
    source_locale: str = DEFAULT_SOURCE_LOCALE


def _checked_options(raw: Mapping[str, Any] | None, origin: str) -> dict[str, str]:
    if raw is None:
        return {}
    checked: dict[str, str] = {}
    for name, value in raw.items():
        if name not in OPTION_NAMES:
            msg = f"Unknown {origin} '{name}'"
            raise RuleConfigError(msg)
        if not isinstance(value, str):
            msg = f"{origin.capitalize()} '{name}' must be a string, got {type(value).__name__}"
            raise RuleConfigError(msg)
        if value:
            checked[OPTION_NAMES[name]] = value
    return checked


def resolve_rule_options(
    options: Mapping[str, Any] | None = None,
    settings: Mapping[str, Any] | None = None,
) -> RuleOptions:
    """Resolve rule options with precedence options > settings > defaults.

    Args:
        options: Options given to the rule itself
        settings: Shared settings; only the ``next-intl`` section is read

    Returns:
        RuleOptions

    Raises:
        RuleConfigError: On unknown option names, non-string values, or an
            unsafe sourceLocale

    Example:
        >>> resolve_rule_options({"sourceLocale": "de"}, {"next-intl": {"sourceLocale": "fr"}})
        RuleOptions(messages_dir='src/messages', source_locale='de')
    """
    section = settings.get(SETTINGS_SECTION) if settings is not None else None
    if section is not None and not hasattr(section, "items"):
        msg = f"Setting '{SETTINGS_SECTION}' must be a mapping"
        raise RuleConfigError(msg)
    merged = _checked_options(section, "setting")
    merged.update(_checked_options(options, "rule option"))
    resolved = RuleOptions(**merged)
    try:
        validate_locale_code(resolved.source_locale)
    except ValueError as e:
        raise RuleConfigError(str(e)) from e
    return resolved


@dataclass(frozen=True, slots=True)
class RuleMeta:
    """Static description of a rule.

    Attributes:
        name: Rule identifier (e.g., "no-missing-keys")
        kind: "problem" for correctness rules, "suggestion" for style rules
        description: One-line description
        recommended: Level in the recommended configuration
        accepts_options: Whether the rule takes messagesDir / sourceLocale
    """

    name: str
    kind: Literal["problem", "suggestion"]
    description: str
    recommended: RuleLevel
    accepts_options: bool = False


@dataclass(slots=True)
class RuleContext:
    """Per-file state shared by the rules run on that file.

    Resolution is computed at most once per context.

    Attributes:
        unit: Parsed source file
        cwd: Directory relative messagesDir values resolve against
        options: Rule options (before precedence resolution)
        settings: Shared settings
        cache: Defined-key cache (None: the process-wide default cache)
    """

    unit: SourceUnit
    cwd: Path = field(default_factory=Path.cwd)
    options: Mapping[str, Any] | None = None
    settings: Mapping[str, Any] | None = None
    cache: MessageKeyCache | None = None
    _resolution: ResolutionResult | None = field(default=None, init=False, repr=False)

    @property
    def resolution(self) -> ResolutionResult:
        """Usages resolved within this file alone."""
        if self._resolution is None:
            project = Project([self.unit])
            self._resolution = resolve(project, ResolverConfig(require_import=False))
        return self._resolution


class Rule:
    """Base class of lint rules.

    Subclasses set ``meta`` and implement ``check``.
    """

    meta: ClassVar[RuleMeta]

    def check(self, context: RuleContext) -> list[Diagnostic]:
        """Return the diagnostics this rule reports for ``context.unit``."""
        raise NotImplementedError

    def __call__(self, context: RuleContext) -> list[Diagnostic]:
        """Run the rule, validating its options first."""
        if not self.meta.accepts_options and context.options:
            msg = f"Rule '{self.meta.name}' takes no options"
            raise RuleConfigError(msg)
        return self.check(context)
