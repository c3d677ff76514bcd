"""Syntax-tree and symbol-binding provider.

Parses TypeScript/JavaScript with tree-sitter and answers the binding
questions the usage resolver needs: named imports per module, scope-aware
find-all-references, and module resolution between project files.

Python 3.13+.
"""

from .project import Project, discover_sources
from .scope import ImportBinding, ScopeIndex, exported_names, import_bindings
from .tree import NodeCategory, SourceUnit, categorize, parse_file, parse_source

__all__ = [
    "ImportBinding",
    "NodeCategory",
    "Project",
    "ScopeIndex",
    "SourceUnit",
    "categorize",
    "discover_sources",
    "exported_names",
    "import_bindings",
    "parse_file",
    "parse_source",
]
