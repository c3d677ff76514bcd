"""Lint rules for translation key usage.

Rules:
    no-missing-keys - error for literal keys absent from the source locale document
    no-dynamic-keys - warning for keys that cannot be statically analyzed

Example:
    >>> diagnostics = lint_source("const t = useTranslations('a'); t(k);", "App.tsx")
    >>> [d.code.name for d in diagnostics]
    ['DYNAMIC_KEY']

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from intlcheck.diagnostics import RuleConfigError
from intlcheck.syntax import parse_file, parse_source

from .base import OPTION_NAMES, Rule, RuleContext, RuleMeta, RuleOptions, resolve_rule_options
from .no_dynamic_keys import NoDynamicKeys
from .no_missing_keys import NoMissingKeys

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from intlcheck.diagnostics import Diagnostic
    from intlcheck.localization import MessageKeyCache
    from intlcheck.syntax import SourceUnit

    from .base import RuleLevel

__all__ = [
    "OPTION_NAMES",
    "RECOMMENDED",
    "RULES",
    "NoDynamicKeys",
    "NoMissingKeys",
    "Rule",
    "RuleContext",
    "RuleMeta",
    "RuleOptions",
    "lint_file",
    "lint_files",
    "lint_source",
    "lint_unit",
    "resolve_rule_options",
]

logger = logging.getLogger(__name__)

RULES: dict[str, Rule] = {
    NoMissingKeys.meta.name: NoMissingKeys(),
    NoDynamicKeys.meta.name: NoDynamicKeys(),
}

RECOMMENDED: dict[str, RuleLevel] = {name: rule.meta.recommended for name, rule in RULES.items()}

_SEVERITY_BY_LEVEL: dict[str, str] = {"error": "error", "warn": "warning"}


def lint_unit(
    unit: SourceUnit,
    *,
    rules: Mapping[str, RuleLevel] | None = None,
    options: Mapping[str, Mapping[str, Any]] | None = None,
    settings: Mapping[str, Any] | None = None,
    cwd: Path | None = None,
    cache: MessageKeyCache | None = None,
) -> list[Diagnostic]:
    """Run the enabled rules on one parsed file.

    Args:
        unit: Parsed source file
        rules: Rule name -> level (default: RECOMMENDED); "off" disables a rule
        options: Rule name -> rule options
        settings: Shared settings (the ``next-intl`` section is read)
        cwd: Directory relative messagesDir values resolve against
        cache: Defined-key cache (default: the process-wide cache)

    Returns:
        Diagnostics sorted by position, each with the severity of its rule level

    Raises:
        RuleConfigError: On unknown rule names or invalid options
    """
    levels = rules if rules is not None else RECOMMENDED
    context = RuleContext(
        unit=unit,
        cwd=cwd if cwd is not None else Path.cwd(),
        settings=settings,
        cache=cache,
    )
    diagnostics: list[Diagnostic] = []
    for name, level in levels.items():
        rule = RULES.get(name)
        if rule is None:
            msg = f"Unknown rule '{name}'"
            raise RuleConfigError(msg)
        if level == "off":
            continue
        severity = _SEVERITY_BY_LEVEL.get(level)
        if severity is None:
            msg = f"Invalid level {level!r} for rule '{name}' (expected error, warn or off)"
            raise RuleConfigError(msg)
        context.options = options.get(name) if options is not None else None
        for diagnostic in rule(context):
            diagnostics.append(_with_severity(diagnostic, severity))
    diagnostics.sort(key=lambda d: (d.span.start if d.span is not None else -1, d.code.value))
    return diagnostics


def _with_severity(diagnostic: Diagnostic, severity: str) -> Diagnostic:
    if diagnostic.severity == severity:
        return diagnostic
    return replace(diagnostic, severity=severity)


def lint_source(source: str | bytes, path: str = "<memory>.tsx", **kwargs: Any) -> list[Diagnostic]:
    """Parse ``source`` and run the enabled rules on it (see lint_unit)."""
    return lint_unit(parse_source(source, path), **kwargs)


def lint_file(path: Path, **kwargs: Any) -> list[Diagnostic]:
    """Parse the file at ``path`` and run the enabled rules on it (see lint_unit).

    Raises:
        OSError: If the file cannot be read
    """
    return lint_unit(parse_file(path), **kwargs)


def lint_files(paths: Iterable[Path], **kwargs: Any) -> dict[Path, list[Diagnostic]]:
    """Lint several files; unreadable files are logged and skipped."""
    results: dict[Path, list[Diagnostic]] = {}
    for path in paths:
        try:
            results[path] = lint_file(path, **kwargs)
        except OSError as e:
            logger.warning("Skipping unreadable source %s: %s", path, e)
    return results
