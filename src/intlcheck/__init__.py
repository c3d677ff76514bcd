"""intlcheck - static checker for next-intl translation keys.

Finds every translation key a TypeScript/JavaScript code base provably
passes to a translator obtained from ``useTranslations`` (including
translators that are renamed, forwarded through function parameters or
passed inside object arguments), then reconciles those keys with the
source locale message document.

Public API:
    resolve - Resolve used keys and dynamic usages across a Project
    reconcile - Compare defined and used key sets
    flatten_keys - Dot paths of every leaf in a message document
    delete_key - Structural delete with ancestor pruning
    Project - Parsed source units with module resolution
    CheckConfig - Run configuration of the checker
    lint_source - Run the lint rules over a source string

Exceptions:
    IntlCheckError - Base exception class
    MessagesLoadError - Message document absent or invalid
    RuleConfigError - Invalid lint rule options

Submodules:
    intlcheck.syntax - tree-sitter source units and scope index
    intlcheck.analysis - Usage resolver and reconciler
    intlcheck.localization - Message document loading, caching and fixing
    intlcheck.rules - no-missing-keys and no-dynamic-keys lint rules
    intlcheck.diagnostics - Diagnostic codes, templates and formatting
    intlcheck.cli - Command-line entry points
"""

from .analysis import (
    DynamicUsage,
    ResolutionResult,
    ResolverConfig,
    delete_key,
    flatten_keys,
    reconcile,
    resolve,
)
from .config import CheckConfig
from .diagnostics import IntlCheckError, MessagesLoadError, RuleConfigError
from .rules import lint_source
from .syntax import Project

# Version information - Auto-populated from package metadata
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("intlcheck")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CheckConfig",
    "DynamicUsage",
    "IntlCheckError",
    "MessagesLoadError",
    "Project",
    "ResolutionResult",
    "ResolverConfig",
    "RuleConfigError",
    "__version__",
    "delete_key",
    "flatten_keys",
    "lint_source",
    "reconcile",
    "resolve",
]
