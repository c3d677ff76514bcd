"""Hypothesis strategies for intlcheck property-based testing.

Usage:
    from tests.strategies import key_documents, key_sets
"""

from .documents import key_documents, key_paths, key_sets, leaf_values, segment_names

__all__ = [
    "key_documents",
    "key_paths",
    "key_sets",
    "leaf_values",
    "segment_names",
]
