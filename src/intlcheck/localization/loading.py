"""Message document loading and the defined-key cache.

Message documents live at ``{messages_dir}/{locale}.json``. Loading one
yields its parsed JSON object; flattening it yields the Defined-Key Set.

Components:
    messages_path - Build (and validate) the path of a locale document
    read_messages - Parse a document, raising MessagesLoadError on failure
    MessageKeyCache - Thread-safe defined-key cache keyed by path and mtime
    default_cache - Process-wide cache shared by the lint rules
    load_defined_keys - Convenience wrapper over the default cache

Cache lifecycle:
    An entry is valid while the file's modification timestamp
    (``st_mtime_ns``) is unchanged; a mismatch reloads the document. Two
    threads missing at the same time both load and store identical values.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from threading import RLock
from typing import Any

from intlcheck.analysis.reconcile import flatten_keys
from intlcheck.constants import MESSAGES_FORMAT
from intlcheck.diagnostics import ErrorTemplate, MessagesLoadError

__all__ = [
    "MessageKeyCache",
    "default_cache",
    "load_defined_keys",
    "messages_path",
    "read_messages",
    "validate_locale_code",
]

logger = logging.getLogger(__name__)


def validate_locale_code(locale: str) -> None:
    """Reject locale codes that would escape the messages directory.

    Args:
        locale: Locale code to validate

    Raises:
        ValueError: If locale is empty or contains path components
    """
    if not locale:
        msg = "Locale code cannot be empty"
        raise ValueError(msg)
    if ".." in locale:
        msg = f"Path traversal sequences not allowed in locale: '{locale}'"
        raise ValueError(msg)
    if "/" in locale or "\\" in locale:
        msg = f"Path separators not allowed in locale: '{locale}'"
        raise ValueError(msg)


def messages_path(messages_dir: str | Path, locale: str) -> Path:
    """Return the path of the document for ``locale``.

    Example:
        >>> messages_path("src/messages", "en")
        PosixPath('src/messages/en.json')

    Raises:
        ValueError: If locale contains path components
    """
    validate_locale_code(locale)
    return Path(messages_dir) / f"{locale}.{MESSAGES_FORMAT}"


def read_messages(path: Path) -> dict[str, Any]:
    """Read and parse one message document.

    Args:
        path: Document path

    Returns:
        Parsed top-level JSON object

    Raises:
        MessagesLoadError: If the file is absent, unreadable, not valid JSON,
            or not a JSON object
    """
    document = str(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise MessagesLoadError(ErrorTemplate.messages_not_found(document), path=document) from e
    except OSError as e:
        raise MessagesLoadError(
            ErrorTemplate.messages_invalid(document, str(e)), path=document
        ) from e

    try:
        content = json.loads(text)
    except json.JSONDecodeError as e:
        raise MessagesLoadError(
            ErrorTemplate.messages_invalid(document, str(e)), path=document
        ) from e

    if not isinstance(content, dict):
        reason = f"expected a JSON object, got {type(content).__name__}"
        raise MessagesLoadError(ErrorTemplate.messages_invalid(document, reason), path=document)
    return content


@dataclass(frozen=True, slots=True)
class _CacheEntry:
    mtime_ns: int
    keys: frozenset[str]


class MessageKeyCache:
    """Thread-safe cache of defined-key sets.

    Entries are keyed by resolved absolute path and validated against the
    file's modification timestamp on every lookup.

    Attributes:
        hits: Number of lookups served from the cache
        misses: Number of lookups that (re)loaded the document
    """

    __slots__ = ("_entries", "_hits", "_lock", "_misses")

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._entries: dict[Path, _CacheEntry] = {}
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    def get_or_load(self, path: Path) -> frozenset[str]:
        """Return the defined keys of the document at ``path``.

        Args:
            path: Document path

        Returns:
            Flattened key set

        Raises:
            MessagesLoadError: If the document cannot be loaded
        """
        resolved = path.resolve()
        try:
            mtime_ns = resolved.stat().st_mtime_ns
        except FileNotFoundError as e:
            with self._lock:
                self._entries.pop(resolved, None)
            raise MessagesLoadError(
                ErrorTemplate.messages_not_found(str(path)), path=str(path)
            ) from e
        except OSError as e:
            raise MessagesLoadError(
                ErrorTemplate.messages_invalid(str(path), str(e)), path=str(path)
            ) from e

        with self._lock:
            entry = self._entries.get(resolved)
            if entry is not None and entry.mtime_ns == mtime_ns:
                self._hits += 1
                return entry.keys
            self._misses += 1

        # Parse outside the lock; racing loaders store identical values
        keys = frozenset(flatten_keys(read_messages(resolved)))
        logger.info("Loaded %d keys from %s", len(keys), resolved)
        with self._lock:
            self._entries[resolved] = _CacheEntry(mtime_ns=mtime_ns, keys=keys)
        return keys

    def invalidate(self, path: Path) -> None:
        """Drop the entry for ``path``, if any."""
        with self._lock:
            self._entries.pop(path.resolve(), None)

    def clear(self) -> None:
        """Drop every entry and reset statistics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Returns:
            Dict with size, hits, misses and hit_rate (percentage)
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
            }

    def __len__(self) -> int:
        """Number of cached documents."""
        with self._lock:
            return len(self._entries)

    @property
    def hits(self) -> int:
        """Number of cache hits."""
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses."""
        with self._lock:
            return self._misses


default_cache = MessageKeyCache()


def load_defined_keys(
    messages_dir: str | Path,
    locale: str,
    *,
    cache: MessageKeyCache | None = None,
) -> frozenset[str]:
    """Load the defined keys of one locale document through a cache.

    Args:
        messages_dir: Directory holding the locale documents
        locale: Locale whose document is read
        cache: Cache to use (default: the process-wide default_cache)

    Returns:
        Flattened key set

    Raises:
        MessagesLoadError: If the document cannot be loaded
        ValueError: If locale contains path components
    """
    active = cache if cache is not None else default_cache
    return active.get_or_load(messages_path(messages_dir, locale))
