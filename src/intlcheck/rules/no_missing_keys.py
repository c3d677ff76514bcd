"""no-missing-keys: report literal keys absent from the source locale document."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from intlcheck.diagnostics import ErrorTemplate, MessagesLoadError
from intlcheck.localization import load_defined_keys

from .base import Rule, RuleContext, RuleMeta, resolve_rule_options

if TYPE_CHECKING:
    from intlcheck.diagnostics import Diagnostic

__all__ = ["NoMissingKeys"]

logger = logging.getLogger(__name__)


class NoMissingKeys(Rule):
    """Report every usage site whose fully-qualified key is not defined.

    The defined keys come from ``{messagesDir}/{sourceLocale}.json``
    through the shared key cache. An absent or unparsable document is
    treated as defining no keys: every literal usage is then reported.
    """

    meta = RuleMeta(
        name="no-missing-keys",
        kind="problem",
        description="disallow missing translation keys",
        recommended="error",
        accepts_options=True,
    )

    def check(self, context: RuleContext) -> list[Diagnostic]:
        options = resolve_rule_options(context.options, context.settings)
        usages = [usage for usage in context.resolution.usages if usage.key is not None]
        if not usages:
            return []

        defined = self.defined_keys(context, options.messages_dir, options.source_locale)
        return [
            ErrorTemplate.missing_key(usage.key, usage.span)
            for usage in usages
            if usage.key is not None and usage.key not in defined
        ]

    @staticmethod
    def defined_keys(context: RuleContext, messages_dir: str, locale: str) -> frozenset[str]:
        """Load defined keys, degrading to the empty set on load failure."""
        try:
            return load_defined_keys(context.cwd / messages_dir, locale, cache=context.cache)
        except MessagesLoadError as e:
            logger.warning("No defined keys available: %s", e)
            return frozenset()
