"""Set reconciliation and structural edits on nested key documents.

A key document is a JSON object whose nested objects are namespaces and
whose non-object values are leaves (messages). Lists, numbers and strings
are all leaves: only mappings are descended into.

Functions:
    reconcile - Compare defined and used key sets
    flatten_keys - Collect the dot path of every leaf
    delete_key - Remove one leaf and prune every container it empties
    remove_key - delete_key reporting removal instead of emptiness

All functions are pure except delete_key and remove_key, which mutate the
document they are given in place.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from intlcheck.constants import PATH_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Set

__all__ = [
    "Reconciliation",
    "delete_key",
    "flatten_keys",
    "reconcile",
    "remove_key",
    "split_key",
]


@dataclass(frozen=True, slots=True)
class Reconciliation:
    """Outcome of comparing defined keys with used keys.

    Attributes:
        missing: Keys used in code but absent from the document
        unused: Keys defined in the document but never used

    The two sets are always disjoint.
    """

    missing: frozenset[str]
    unused: frozenset[str]

    @property
    def has_errors(self) -> bool:
        """True when at least one used key is undefined."""
        return bool(self.missing)

    def sorted_missing(self) -> list[str]:
        """Missing keys in report order."""
        return sorted(self.missing)

    def sorted_unused(self) -> list[str]:
        """Unused keys in report order."""
        return sorted(self.unused)


def reconcile(defined: Set[str], used: Set[str]) -> Reconciliation:
    """Compare the defined-key set with the used-key set.

    Args:
        defined: Keys present in the canonical document
        used: Keys proven used by the resolver

    Returns:
        Reconciliation with missing = used - defined and unused = defined - used

    Example:
        >>> result = reconcile({"a", "b"}, {"b", "c"})
        >>> sorted(result.missing), sorted(result.unused)
        (['c'], ['a'])
    """
    return Reconciliation(
        missing=frozenset(used) - frozenset(defined),
        unused=frozenset(defined) - frozenset(used),
    )


def split_key(key: str) -> list[str]:
    """Split a key record into its path segments."""
    return key.split(PATH_SEPARATOR)


def flatten_keys(document: Mapping[str, Any]) -> set[str]:
    """Return the dot path of every leaf in a nested document.

    Empty mappings contribute no key.

    Args:
        document: Nested key document

    Returns:
        Set of dot-joined paths

    Example:
        >>> sorted(flatten_keys({"common": {"greeting": "Hi", "bye": "Bye"}, "title": "T"}))
        ['common.bye', 'common.greeting', 'title']
    """
    keys: set[str] = set()
    stack: list[tuple[str, Mapping[str, Any]]] = [("", document)]
    while stack:
        prefix, mapping = stack.pop()
        for name, value in mapping.items():
            path = f"{prefix}{PATH_SEPARATOR}{name}" if prefix else str(name)
            if isinstance(value, Mapping):
                stack.append((path, value))
            else:
                keys.add(path)
    return keys


def _delete_path(document: MutableMapping[str, Any], key: str) -> bool:
    """Remove the value at ``key``, pruning containers it empties.

    Returns True when something was removed.
    """
    segments = split_key(key)
    trail: list[MutableMapping[str, Any]] = []
    current: MutableMapping[str, Any] = document
    for segment in segments[:-1]:
        child = current.get(segment)
        if not isinstance(child, MutableMapping):
            return False
        trail.append(current)
        current = child

    last = segments[-1]
    if last not in current:
        return False
    del current[last]

    # Prune from the deepest container upwards while containers are empty
    for parent, segment in zip(reversed(trail), reversed(segments[:-1]), strict=True):
        if parent[segment]:
            break
        del parent[segment]
    return True


def delete_key(document: MutableMapping[str, Any], key: str) -> bool:
    """Delete the value at ``key`` and prune emptied ancestor containers.

    A path that does not exist, or that runs through a leaf, leaves the
    document untouched. Deleting the same key twice is therefore harmless.

    Args:
        document: Nested key document (mutated in place)
        key: Dot path to delete

    Returns:
        True when the deletion left the top-level document empty

    Example:
        >>> doc = {"a": {"b": {"c": "x"}}, "d": "y"}
        >>> delete_key(doc, "a.b.c")
        False
        >>> doc
        {'d': 'y'}
        >>> delete_key(doc, "d")
        True
    """
    return _delete_path(document, key) and not document


def remove_key(document: MutableMapping[str, Any], key: str) -> bool:
    """Like delete_key, but report whether anything was removed."""
    return _delete_path(document, key)
