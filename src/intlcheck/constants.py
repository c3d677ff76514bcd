"""Shared constants for intlcheck.

This module provides centralized configuration constants used across
the syntax, analysis, localization and rules packages. Placing constants
here avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Hook identity: Which import produces translators
- Key paths: How hierarchical message documents map to key records
- Messages store: Where message documents live and how they are written
- Reporting: Console report limits

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Hook identity
    "HOOK_MODULE",
    "HOOK_NAME",
    "DEFAULT_NAMESPACE",
    # Key paths
    "PATH_SEPARATOR",
    # Messages store
    "DEFAULT_MESSAGES_DIR",
    "DEFAULT_SOURCE_LOCALE",
    "MESSAGES_FORMAT",
    "JSON_INDENT",
    "SETTINGS_SECTION",
    # Source discovery
    "DEFAULT_SOURCE_PATTERNS",
    "MODULE_EXTENSIONS",
    # Reporting
    "DYNAMIC_REPORT_LIMIT",
]

# ============================================================================
# HOOK IDENTITY
# ============================================================================

# Module specifier the hook must be imported from for a file to be analyzed.
HOOK_MODULE: str = "next-intl"

# Exported name of the translator-producing hook.
HOOK_NAME: str = "useTranslations"

# Display name of the namespace used when the hook is called without arguments.
# Internally the default namespace is represented as None so that a literal
# useTranslations("default") is still a real namespace.
DEFAULT_NAMESPACE: str = "default"

# ============================================================================
# KEY PATHS
# ============================================================================

# Separator joining nested property names into a key record.
PATH_SEPARATOR: str = "."

# ============================================================================
# MESSAGES STORE
# ============================================================================

DEFAULT_MESSAGES_DIR: str = "src/messages"

DEFAULT_SOURCE_LOCALE: str = "en"

# Message documents are addressed as {messages_dir}/{locale}.{MESSAGES_FORMAT}
MESSAGES_FORMAT: str = "json"

# Rewritten documents use two-space indentation plus a trailing newline.
JSON_INDENT: int = 2

# Name of the shared settings section read by the lint rules.
SETTINGS_SECTION: str = "next-intl"

# ============================================================================
# SOURCE DISCOVERY
# ============================================================================

# Glob patterns (relative to the working directory) scanned by the CLI.
DEFAULT_SOURCE_PATTERNS: tuple[str, ...] = ("src/**/*.ts", "src/**/*.tsx")

# Extensions probed, in order, when resolving an import specifier to a file.
MODULE_EXTENSIONS: tuple[str, ...] = (".ts", ".tsx", ".js", ".jsx", ".mts", ".mjs", ".cts", ".cjs")

# ============================================================================
# REPORTING
# ============================================================================

# Dynamic usages printed by the CLI before collapsing into "... and N more".
DYNAMIC_REPORT_LIMIT: int = 10
