"""Usage resolution and key reconciliation.

Resolves which translation keys the code provably uses and compares them
with the keys a message document defines.

Python 3.13+.
"""

from .reconcile import Reconciliation, delete_key, flatten_keys, reconcile, remove_key, split_key
from .resolver import (
    DynamicUsage,
    ReferenceUse,
    ResolutionResult,
    ResolverConfig,
    TranslatorBinding,
    TraversalContext,
    UsageResolver,
    UsageSite,
    classify_reference,
    qualify_key,
    resolve,
)

__all__ = [
    "DynamicUsage",
    "Reconciliation",
    "ReferenceUse",
    "ResolutionResult",
    "ResolverConfig",
    "TranslatorBinding",
    "TraversalContext",
    "UsageResolver",
    "UsageSite",
    "classify_reference",
    "delete_key",
    "flatten_keys",
    "qualify_key",
    "reconcile",
    "remove_key",
    "resolve",
    "split_key",
]
