"""Project-level view over a set of parsed source units.

A Project owns the SourceUnits under analysis, caches one ScopeIndex per
unit and resolves import specifiers between units. Module resolution is
purely a lookup among loaded units: nothing outside the project is read.

Resolution rules:
    - Relative specifiers (``./x``, ``../x``) resolve against the importing
      file's directory
    - Other specifiers resolve against the project root, when one is set
      (bare package names simply find nothing)
    - Each candidate is probed as-is, with every known extension appended,
      and as a directory ``index`` file; a ``.js``-style extension is also
      swapped for the TypeScript sources it is compiled from

Python 3.13+.
"""

from __future__ import annotations

import glob
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from intlcheck.constants import MODULE_EXTENSIONS

from .scope import ScopeIndex
from .tree import SourceUnit, parse_file, parse_source

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

__all__ = ["Project", "discover_sources"]

logger = logging.getLogger(__name__)


def discover_sources(patterns: Sequence[str], cwd: Path) -> list[Path]:
    """Expand glob patterns (``**`` supported) relative to ``cwd``.

    Args:
        patterns: Glob patterns such as ``src/**/*.tsx``
        cwd: Directory the patterns are relative to

    Returns:
        Sorted, de-duplicated absolute file paths
    """
    found: set[Path] = set()
    for pattern in patterns:
        for match in glob.glob(pattern, root_dir=cwd, recursive=True):
            candidate = (cwd / match).resolve()
            if candidate.is_file():
                found.add(candidate)
    return sorted(found)


class Project:
    """Collection of source units with module resolution.

    Example:
        >>> project = Project(root="/app")
        >>> project.add_source("export function f(t) {}", "/app/src/f.ts")
        >>> unit = project.add_source("import { f } from './f';", "/app/src/App.tsx")
        >>> project.resolve_module(unit, "./f").path
        '/app/src/f.ts'
    """

    __slots__ = ("_indexes", "_units", "root")

    def __init__(self, units: Iterable[SourceUnit] = (), *, root: str | Path | None = None) -> None:
        """Initialize project.

        Args:
            units: Initial source units
            root: Project root for non-relative specifiers (optional)
        """
        self.root = os.path.normpath(str(root)) if root is not None else None
        self._units: dict[str, SourceUnit] = {}
        self._indexes: dict[str, ScopeIndex] = {}
        for unit in units:
            self.add(unit)

    @classmethod
    def from_paths(cls, paths: Iterable[Path], *, root: str | Path | None = None) -> Project:
        """Parse files from disk into a new project.

        Unreadable files are logged and skipped.

        Args:
            paths: Source files
            root: Project root

        Returns:
            New Project
        """
        project = cls(root=root)
        for path in paths:
            try:
                project.add(parse_file(path))
            except OSError as e:
                logger.warning("Skipping unreadable source %s: %s", path, e)
        return project

    @property
    def units(self) -> tuple[SourceUnit, ...]:
        """Units in insertion order."""
        return tuple(self._units.values())

    def __len__(self) -> int:
        """Number of units."""
        return len(self._units)

    def add(self, unit: SourceUnit) -> SourceUnit:
        """Add (or replace) a unit, keyed by its normalized path."""
        key = os.path.normpath(unit.path)
        self._units[key] = unit
        self._indexes.pop(key, None)
        return unit

    def add_source(self, source: str | bytes, path: str) -> SourceUnit:
        """Parse in-memory source and add it to the project."""
        return self.add(parse_source(source, path))

    def get(self, path: str) -> SourceUnit | None:
        """Return the unit at ``path``, if loaded."""
        return self._units.get(os.path.normpath(path))

    def index(self, unit: SourceUnit) -> ScopeIndex:
        """Return the (cached) ScopeIndex of ``unit``."""
        key = os.path.normpath(unit.path)
        index = self._indexes.get(key)
        if index is None or index.unit is not unit:
            index = ScopeIndex(unit)
            self._indexes[key] = index
        return index

    def resolve_module(self, unit: SourceUnit, specifier: str) -> SourceUnit | None:
        """Resolve an import specifier used in ``unit`` to a loaded unit.

        Args:
            unit: Importing unit
            specifier: Module specifier string

        Returns:
            Target unit, or None when the module is outside the project
        """
        if specifier.startswith("."):
            base = os.path.join(os.path.dirname(unit.path), specifier)
        elif self.root is not None:
            base = os.path.join(self.root, specifier)
        else:
            return None
        for candidate in self._candidates(os.path.normpath(base)):
            target = self._units.get(candidate)
            if target is not None:
                return target
        logger.debug("Unresolved module %r imported from %s", specifier, unit.path)
        return None

    @staticmethod
    def _candidates(base: str) -> list[str]:
        candidates = [base]
        stem, suffix = os.path.splitext(base)
        if suffix in MODULE_EXTENSIONS:
            candidates.extend(stem + extension for extension in MODULE_EXTENSIONS)
        candidates.extend(base + extension for extension in MODULE_EXTENSIONS)
        candidates.extend(os.path.join(base, "index" + extension) for extension in MODULE_EXTENSIONS)
        return candidates
