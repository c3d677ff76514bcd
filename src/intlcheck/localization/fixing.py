"""Removal of unused keys from every locale document.

Every ``*.json`` document in the messages directory is assumed to mirror the
source locale's structure. Each unused key is structurally deleted from each
document independently; a document lacking a path is left as is. A document
that cannot be read or written is reported and skipped without affecting
the others.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from intlcheck.analysis.reconcile import remove_key
from intlcheck.constants import JSON_INDENT, MESSAGES_FORMAT
from intlcheck.diagnostics import ErrorTemplate, MessagesLoadError
from intlcheck.locale_utils import warn_if_unknown_locale

from .loading import read_messages

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

__all__ = [
    "FixOutcome",
    "fix_documents",
    "iter_fix_documents",
    "locale_documents",
    "write_messages",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FixOutcome:
    """Result of rewriting one locale document.

    Attributes:
        path: Document path
        removed: Number of keys actually removed from this document
        error: Failure that prevented the rewrite (None on success)
    """

    path: Path
    removed: int = 0
    error: MessagesLoadError | None = None

    @property
    def name(self) -> str:
        """File name, as printed in the fix report."""
        return self.path.name

    @property
    def ok(self) -> bool:
        """True when the document was rewritten."""
        return self.error is None


def locale_documents(messages_dir: Path) -> list[Path]:
    """Return every message document in ``messages_dir``, sorted by name.

    A missing directory yields an empty list.
    """
    if not messages_dir.is_dir():
        logger.warning("Messages directory %s does not exist", messages_dir)
        return []
    return sorted(
        path for path in messages_dir.glob(f"*.{MESSAGES_FORMAT}") if path.is_file()
    )


def write_messages(path: Path, content: dict[str, Any]) -> None:
    """Write a message document with two-space indentation and a trailing newline.

    Raises:
        OSError: If the file cannot be written
    """
    text = json.dumps(content, indent=JSON_INDENT, ensure_ascii=False)
    path.write_text(text + "\n", encoding="utf-8")


def iter_fix_documents(messages_dir: Path, keys: Iterable[str]) -> Iterator[FixOutcome]:
    """Remove ``keys`` from every locale document, yielding one outcome per file.

    Documents are processed lazily in name order, so a caller can report
    progress as each file completes.

    Args:
        messages_dir: Directory holding the locale documents
        keys: Key records to remove

    Yields:
        FixOutcome per document
    """
    ordered = sorted(set(keys))
    for path in locale_documents(messages_dir):
        warn_if_unknown_locale(path.stem, context="locale document")
        try:
            content = read_messages(path)
        except MessagesLoadError as e:
            logger.error("Skipping %s: %s", path, e)
            yield FixOutcome(path=path, error=e)
            continue

        removed = sum(1 for key in ordered if remove_key(content, key))
        try:
            write_messages(path, content)
        except OSError as e:
            logger.error("Could not write %s: %s", path, e)
            error = MessagesLoadError(ErrorTemplate.messages_invalid(str(path), str(e)), path=str(path))
            yield FixOutcome(path=path, error=error)
            continue

        logger.info("Removed %d keys from %s", removed, path)
        yield FixOutcome(path=path, removed=removed)


def fix_documents(messages_dir: Path, keys: Iterable[str]) -> list[FixOutcome]:
    """Eager variant of iter_fix_documents."""
    return list(iter_fix_documents(messages_dir, keys))
