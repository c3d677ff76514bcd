"""no-dynamic-keys: warn about translator calls whose key is not a literal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from intlcheck.diagnostics import ErrorTemplate
from intlcheck.enums import DynamicReason

from .base import Rule, RuleContext, RuleMeta

if TYPE_CHECKING:
    from intlcheck.diagnostics import Diagnostic

__all__ = ["NoDynamicKeys"]


class NoDynamicKeys(Rule):
    """Report every key (or namespace) that cannot be statically analyzed.

    Key-less calls such as ``t()`` are left to the type checker and not
    reported here.
    """

    meta = RuleMeta(
        name="no-dynamic-keys",
        kind="suggestion",
        description="disallow dynamic translation keys",
        recommended="warn",
    )

    def check(self, context: RuleContext) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for usage in context.resolution.dynamic_usages:
            match usage.reason:
                case DynamicReason.NON_LITERAL_KEY:
                    diagnostics.append(ErrorTemplate.dynamic_key(usage.namespace, usage.span))
                case DynamicReason.NON_LITERAL_NAMESPACE:
                    diagnostics.append(ErrorTemplate.dynamic_namespace(usage.span))
                case DynamicReason.MISSING_KEY:
                    pass
        return diagnostics
