"""Tests for key reconciliation, flattening and structural delete.

Property tests cover the algebraic guarantees (disjointness, inverse,
idempotence, pruning); example tests pin the concrete behavior.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from intlcheck.analysis import Reconciliation, delete_key, flatten_keys, reconcile, remove_key
from tests.strategies import key_documents, key_paths, key_sets


def _leaves(document: dict[str, Any], prefix: str = "") -> dict[str, Any]:
    """Map every leaf path to its value."""
    leaves: dict[str, Any] = {}
    for name, value in document.items():
        path = f"{prefix}.{name}" if prefix else name
        if isinstance(value, dict):
            leaves.update(_leaves(value, path))
        else:
            leaves[path] = value
    return leaves


def _nest(leaves: dict[str, Any]) -> dict[str, Any]:
    """Rebuild a nested document from leaf paths."""
    document: dict[str, Any] = {}
    for path, value in leaves.items():
        *parents, last = path.split(".")
        current = document
        for segment in parents:
            current = current.setdefault(segment, {})
        current[last] = value
    return document


class TestReconcile:
    """Test reconcile() set arithmetic."""

    def test_missing_and_unused(self) -> None:
        """Missing is used - defined, unused is defined - used."""
        result = reconcile({"common.greeting", "common.bye"}, {"common.greeting", "auth.login"})
        assert result.missing == frozenset({"auth.login"})
        assert result.unused == frozenset({"common.bye"})
        assert result.has_errors

    def test_all_matched(self) -> None:
        """Identical sets produce no findings."""
        result = reconcile({"common.greeting"}, {"common.greeting"})
        assert result == Reconciliation(missing=frozenset(), unused=frozenset())
        assert not result.has_errors

    def test_sorted_views(self) -> None:
        """Report order is lexicographic."""
        result = reconcile({"b", "a", "c"}, {"z", "y"})
        assert result.sorted_unused() == ["a", "b", "c"]
        assert result.sorted_missing() == ["y", "z"]

    @given(sets=key_sets())
    def test_missing_and_unused_are_disjoint(self, sets: tuple[set[str], set[str]]) -> None:
        """No key is ever both missing and unused."""
        defined, used = sets
        result = reconcile(defined, used)
        assert result.missing & result.unused == frozenset()
        assert result.missing | (used & defined) == used
        assert result.unused | (used & defined) == defined


class TestFlattenKeys:
    """Test flatten_keys() structure handling."""

    def test_nested_paths(self) -> None:
        """Nested mappings join with dots."""
        document = {"common": {"greeting": "Hello", "nav": {"home": "Home"}}, "title": "T"}
        assert flatten_keys(document) == {"common.greeting", "common.nav.home", "title"}

    def test_non_mapping_values_are_leaves(self) -> None:
        """Lists, numbers, booleans and null are leaves."""
        document = {"a": [1, 2], "b": 3, "c": None, "d": False}
        assert flatten_keys(document) == {"a", "b", "c", "d"}

    def test_empty_mappings_contribute_nothing(self) -> None:
        """Empty containers define no key."""
        assert flatten_keys({"a": {}, "b": {"c": {}}}) == set()

    def test_empty_document(self) -> None:
        """Empty document yields the empty set."""
        assert flatten_keys({}) == set()

    @given(document=key_documents())
    def test_flatten_then_nest_is_inverse(self, document: dict[str, Any]) -> None:
        """Re-nesting the flattened leaves reproduces the document."""
        leaves = _leaves(document)
        event(f"leaves={min(len(leaves), 5)}")
        assert set(leaves) == flatten_keys(document)
        assert _nest(leaves) == document


class TestDeleteKey:
    """Test delete_key() and remove_key() structural edits."""

    def test_prunes_emptied_ancestors(self) -> None:
        """Deleting the only leaf removes every emptied container."""
        document = {"a": {"b": {"c": "x"}}, "d": "y"}
        assert delete_key(document, "a.b.c") is False
        assert document == {"d": "y"}

    def test_keeps_non_empty_ancestors(self) -> None:
        """Pruning stops at the first container that still holds values."""
        document = {"a": {"b": {"c": "x"}, "e": "z"}}
        delete_key(document, "a.b.c")
        assert document == {"a": {"e": "z"}}

    def test_reports_empty_document(self) -> None:
        """Return value signals the top-level document became empty."""
        document = {"common": {"greeting": "Hi"}}
        assert delete_key(document, "common.greeting") is True
        assert document == {}

    def test_missing_path_is_noop(self) -> None:
        """Absent paths leave the document untouched."""
        document = {"a": {"b": "x"}}
        assert delete_key(document, "a.c") is False
        assert delete_key(document, "z.y.x") is False
        assert document == {"a": {"b": "x"}}

    def test_path_through_leaf_is_noop(self) -> None:
        """A path that descends into a leaf is absent."""
        document = {"a": "leaf"}
        assert remove_key(document, "a.b") is False
        assert document == {"a": "leaf"}

    def test_missing_path_in_empty_document(self) -> None:
        """An already-empty document is not reported as emptied."""
        assert delete_key({}, "a") is False

    def test_remove_key_reports_removal(self) -> None:
        """remove_key returns True only when something was removed."""
        document = {"a": {"b": "x", "c": "y"}}
        assert remove_key(document, "a.b") is True
        assert remove_key(document, "a.b") is False
        assert document == {"a": {"c": "y"}}

    @given(document=key_documents(), extra=key_paths, data=st.data())
    def test_delete_is_idempotent(
        self, document: dict[str, Any], extra: str, data: st.DataObject
    ) -> None:
        """Deleting a path twice equals deleting it once."""
        keys = sorted(flatten_keys(document))
        key = data.draw(st.sampled_from(keys)) if keys else extra
        once = copy.deepcopy(document)
        delete_key(once, key)
        twice = copy.deepcopy(once)
        assert remove_key(twice, key) is False
        assert twice == once
        assert key not in flatten_keys(once)

    @given(document=key_documents())
    def test_deleting_every_leaf_leaves_no_trace(self, document: dict[str, Any]) -> None:
        """Repeated delete of all leaves prunes every container."""
        keys = sorted(flatten_keys(document))
        for key in keys:
            assert remove_key(document, key) is True
        assert document == {}

    @given(document=key_documents(), data=st.data())
    def test_delete_removes_exactly_one_leaf(self, document: dict[str, Any], data: st.DataObject) -> None:
        """Only the targeted leaf disappears from the flattened view."""
        keys = sorted(flatten_keys(document))
        if not keys:
            event("outcome=empty_document")
            return
        key = data.draw(st.sampled_from(keys))
        before = flatten_keys(document)
        delete_key(document, key)
        assert flatten_keys(document) == before - {key}


@pytest.mark.fuzz
class TestDeepDocuments:
    """Stress flatten and delete on very deep nesting."""

    @settings(max_examples=20, deadline=None)
    @given(depth=st.integers(min_value=1000, max_value=3000))
    def test_deep_chain(self, depth: int) -> None:
        """Depth beyond the recursion limit flattens and prunes fully."""
        document: dict[str, Any] = {}
        current = document
        for _ in range(depth - 1):
            current = current.setdefault("n", {})
        current["leaf"] = "x"
        key = ".".join(["n"] * (depth - 1) + ["leaf"])

        assert flatten_keys(document) == {key}
        assert delete_key(document, key) is True
        assert document == {}
