"""Command-line entry points.

intlcheck:
    Load the source locale document, resolve key usages across the sources,
    and report missing, unused and dynamic keys. With --fix, unused keys are
    removed from every locale document.

intlcheck-lint:
    Run the lint rules over individual files and print their diagnostics.

Exit codes:
    0: No missing keys (unused keys and dynamic usages are not failures)
    1: Missing keys, or the source locale document is absent, invalid or empty
       (for intlcheck-lint: at least one error-severity diagnostic)
    2: Invalid command-line usage

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from intlcheck.analysis import reconcile, resolve
from intlcheck.config import CheckConfig
from intlcheck.constants import (
    DEFAULT_MESSAGES_DIR,
    DEFAULT_SOURCE_LOCALE,
    DEFAULT_SOURCE_PATTERNS,
    DYNAMIC_REPORT_LIMIT,
)
from intlcheck.diagnostics import (
    DiagnosticFormatter,
    ErrorTemplate,
    MessagesLoadError,
    OutputFormat,
    RuleConfigError,
)
from intlcheck.enums import CheckMode
from intlcheck.localization import MessageKeyCache, iter_fix_documents
from intlcheck.locale_utils import warn_if_unknown_locale
from intlcheck.rules import RECOMMENDED, lint_files
from intlcheck.syntax import Project, discover_sources

if TYPE_CHECKING:
    from intlcheck.analysis import DynamicUsage, Reconciliation

__all__ = ["lint_main", "main", "run_check"]

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="intlcheck",
        description="i18n Message Checker & Fixer",
    )
    parser.add_argument(
        "--dir",
        default=DEFAULT_MESSAGES_DIR,
        help=f"Path to messages directory (default: {DEFAULT_MESSAGES_DIR})",
    )
    parser.add_argument(
        "--locale",
        default=DEFAULT_SOURCE_LOCALE,
        help=f"Source locale (default: {DEFAULT_SOURCE_LOCALE})",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--check",
        dest="mode",
        action="store_const",
        const=CheckMode.CHECK,
        help="Check for unused and missing messages (default)",
    )
    mode.add_argument(
        "--fix",
        dest="mode",
        action="store_const",
        const=CheckMode.FIX,
        help="Remove unused keys from all message files",
    )
    parser.add_argument(
        "--sources",
        action="append",
        metavar="GLOB",
        help="Source glob, repeatable (default: " + ", ".join(DEFAULT_SOURCE_PATTERNS) + ")",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.set_defaults(mode=CheckMode.CHECK)
    args = parser.parse_args(argv)
    try:
        args.config = CheckConfig(
            messages_dir=args.dir,
            source_locale=args.locale,
            mode=args.mode,
            source_patterns=tuple(args.sources) if args.sources else DEFAULT_SOURCE_PATTERNS,
        )
    except ValueError as e:
        parser.error(str(e))
    return args


def _print_dynamic_usages(dynamic_usages: tuple[DynamicUsage, ...]) -> None:
    if not dynamic_usages:
        return
    print(
        f"\n[WARN] Found {len(dynamic_usages)} dynamic usages which cannot be statically analyzed:",
        file=sys.stderr,
    )
    for usage in dynamic_usages[:DYNAMIC_REPORT_LIMIT]:
        print(f"  - {usage}", file=sys.stderr)
    if len(dynamic_usages) > DYNAMIC_REPORT_LIMIT:
        print(f"  ... and {len(dynamic_usages) - DYNAMIC_REPORT_LIMIT} more.", file=sys.stderr)
    print("Be careful removing keys if they might be used dynamically.", file=sys.stderr)


def _print_missing(result: Reconciliation, config: CheckConfig) -> None:
    if not result.missing:
        print("\n[OK] No missing messages found.")
        return
    print(
        f"\n[ERROR] Found {len(result.missing)} missing messages "
        f"(used in code but not in {config.source_document_name}):",
        file=sys.stderr,
    )
    for key in result.sorted_missing():
        print(f"  - {key}", file=sys.stderr)


def _print_unused(result: Reconciliation, config: CheckConfig, document: str) -> None:
    if not result.unused:
        print("\n[OK] No unused messages found.")
        return
    unused = result.sorted_unused()
    diagnostics = [ErrorTemplate.unused_key(key, document) for key in unused]
    print(f"\n[INFO] Found {len(diagnostics)} unused messages:")
    for diagnostic in diagnostics:
        print(f"  - {diagnostic.key}")

    if config.mode != CheckMode.FIX:
        print(f"\n{diagnostics[0].hint}")
        return

    print("\nFixing... removing unused keys from message files.")
    if not config.messages_root.is_dir():
        return
    for outcome in iter_fix_documents(config.messages_root, unused):
        print(f"Processing {outcome.name}...")
        if outcome.ok:
            print(f"  Updated {outcome.name}")
        else:
            print(f"  Error processing {outcome.name}: {outcome.error}", file=sys.stderr)
    print("\nDone.")


def run_check(config: CheckConfig, *, cache: MessageKeyCache | None = None) -> int:
    """Run the checker and print its report.

    Args:
        config: Run configuration
        cache: Defined-key cache (default: a fresh cache for this run)

    Returns:
        Process exit code (0 or 1)
    """
    key_cache = cache if cache is not None else MessageKeyCache()
    print(f"Running in {config.mode} mode...")
    print(f"Messages directory: {config.messages_dir}")
    print(f"Source locale: {config.source_locale}")
    warn_if_unknown_locale(config.source_locale, context="source locale")

    document = str(Path(config.messages_dir) / config.source_document_name)
    try:
        defined = key_cache.get_or_load(config.source_document)
    except MessagesLoadError as e:
        logger.debug("Source locale document failed to load", exc_info=True)
        print(f"Found 0 defined keys in {config.source_document_name}")
        print(e.diagnostic.message if e.diagnostic is not None else str(e), file=sys.stderr)
        print(ErrorTemplate.messages_empty(document).message, file=sys.stderr)
        return 1

    print(f"Found {len(defined)} defined keys in {config.source_document_name}")
    if not defined:
        print(ErrorTemplate.messages_empty(document).message, file=sys.stderr)
        return 1

    sources = discover_sources(config.source_patterns, config.cwd)
    logger.info("Analyzing %d source files", len(sources))
    project = Project.from_paths(sources, root=config.cwd.resolve())
    resolution = resolve(project)
    print(f"Found {len(resolution.used_keys)} unique used keys in code.")

    result = reconcile(defined, resolution.used_keys)
    print("\n--- Analysis Report ---")
    _print_dynamic_usages(resolution.dynamic_usages)
    _print_missing(result, config)
    _print_unused(result, config, document)

    if result.has_errors:
        print("\nCheck failed. Please address the errors above.")
        return 1
    if not result.unused:
        print("\nAll checks passed! Great job.")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point of the ``intlcheck`` command."""
    args = _parse_args(argv)
    _configure_logging(args.verbose)
    return run_check(args.config)


def _parse_lint_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse intlcheck-lint arguments."""
    parser = argparse.ArgumentParser(
        prog="intlcheck-lint",
        description="Run translation key lint rules over source files.",
    )
    parser.add_argument("paths", nargs="+", type=Path, metavar="PATH", help="Files to lint")
    parser.add_argument("--messages-dir", help="Messages directory (rule option messagesDir)")
    parser.add_argument("--source-locale", help="Source locale (rule option sourceLocale)")
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Diagnostic output format (default: rust)",
    )
    parser.add_argument(
        "--disable",
        action="append",
        default=[],
        choices=sorted(RECOMMENDED),
        metavar="RULE",
        help="Disable a rule, repeatable",
    )
    parser.add_argument("--color", action="store_true", help="Colorize output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def lint_main(argv: list[str] | None = None) -> int:
    """Entry point of the ``intlcheck-lint`` command."""
    args = _parse_lint_args(argv)
    _configure_logging(args.verbose)

    rule_options: dict[str, str] = {}
    if args.messages_dir:
        rule_options["messagesDir"] = args.messages_dir
    if args.source_locale:
        rule_options["sourceLocale"] = args.source_locale
    levels = {name: "off" if name in args.disable else level for name, level in RECOMMENDED.items()}

    try:
        results = lint_files(
            args.paths,
            rules=levels,
            options={"no-missing-keys": rule_options},
        )
    except RuleConfigError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    formatter = DiagnosticFormatter(output_format=OutputFormat(args.format), color=args.color)
    diagnostics = [diagnostic for found in results.values() for diagnostic in found]
    if diagnostics:
        print(formatter.format_all(diagnostics))
    errors = sum(1 for diagnostic in diagnostics if diagnostic.severity == "error")
    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
