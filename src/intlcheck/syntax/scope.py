"""Scope-aware binding lookup over a parsed source unit.

Builds, once per SourceUnit, a table of the names each lexical scope
declares, then answers the two questions the usage resolver asks of its
syntax provider:

- ``declaration_of(identifier)``: which binding does this identifier refer to?
- ``references(binding)``: every identifier, within the binding's scope,
  that refers to this binding (shadowed names excluded)

Scoping model:
    - Function-like nodes own their parameters (and the name of a named
      function expression)
    - ``program``, blocks, ``for`` heads, ``catch`` clauses and ``switch``
      bodies own their ``let``/``const``/``class``/``function`` declarations
    - ``var`` declarations hoist to the nearest function or ``program``
    - Imports belong to ``program``
    - The first declaration of a name in a scope wins (redeclarations and
      overload signatures do not replace it)

Lookups are by name and lexical position only; there is no type
information, so member accesses are never resolved here.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .tree import FUNCTION_TYPES, node_key, node_text, property_key_name, string_literal_value

if TYPE_CHECKING:
    from tree_sitter import Node

    from .tree import NodeKey, SourceUnit

__all__ = [
    "ImportBinding",
    "ScopeIndex",
    "exported_names",
    "function_parameters",
    "import_bindings",
    "import_bindings_for_statement",
    "parameter_pattern",
    "pattern_bindings",
]

logger = logging.getLogger(__name__)

_BLOCK_SCOPE_TYPES: frozenset[str] = frozenset(
    {
        "program",
        "statement_block",
        "for_statement",
        "for_in_statement",
        "catch_clause",
        "switch_body",
        "class_body",
    }
)

SCOPE_TYPES: frozenset[str] = _BLOCK_SCOPE_TYPES | FUNCTION_TYPES

_HOIST_TARGET_TYPES: frozenset[str] = FUNCTION_TYPES | {"program"}

_FUNCTION_DECLARATION_TYPES: frozenset[str] = frozenset(
    {"function_declaration", "generator_function_declaration"}
)

_REFERENCE_TYPES: frozenset[str] = frozenset({"identifier", "shorthand_property_identifier"})

# Identifiers under these parents name exports or imports, they are not references.
_NON_REFERENCE_PARENTS: frozenset[str] = frozenset({"import_specifier", "export_specifier"})


@dataclass(frozen=True, slots=True)
class ImportBinding:
    """One name bound by an import statement.

    Attributes:
        local_name: Name visible in the importing module
        imported_name: Exported name requested ("default" for default
            imports, "*" for namespace imports)
        module: Module specifier string
        node: Binding identifier node in the importing unit
    """

    local_name: str
    imported_name: str
    module: str
    node: Node


def pattern_bindings(pattern: Node | None) -> list[Node]:
    """Return every binding identifier introduced by a declaration pattern.

    Args:
        pattern: identifier, object/array pattern, assignment/rest pattern,
            or a TypeScript parameter node

    Returns:
        Binding nodes in source order
    """
    if pattern is None:
        return []
    found: list[Node] = []
    stack: list[Node] = [pattern]
    while stack:
        node = stack.pop()
        match node.type:
            case "identifier" | "shorthand_property_identifier_pattern":
                found.append(node)
                continue
            case "pair_pattern":
                children = [node.child_by_field_name("value")]
            case "object_assignment_pattern" | "assignment_pattern":
                children = [node.child_by_field_name("left")]
            case "required_parameter" | "optional_parameter":
                children = [node.child_by_field_name("pattern")]
            case "object_pattern" | "array_pattern" | "rest_pattern":
                children = list(node.named_children)
            case _:
                children = []
        stack.extend(reversed([child for child in children if child is not None]))
    return found


def parameter_pattern(parameter: Node) -> Node | None:
    """Return the binding pattern of a parameter (defaults stripped)."""
    pattern: Node | None = parameter
    if parameter.type in ("required_parameter", "optional_parameter"):
        pattern = parameter.child_by_field_name("pattern")
    if pattern is not None and pattern.type == "assignment_pattern":
        pattern = pattern.child_by_field_name("left")
    return pattern


def function_parameters(function: Node) -> list[Node]:
    """Return the positional parameters of a function-like node.

    TypeScript ``this`` parameters are excluded because they do not consume
    a call argument.

    Args:
        function: Function, arrow, function expression, or method node

    Returns:
        Parameter nodes in declaration order
    """
    single = function.child_by_field_name("parameter")
    if single is not None:
        return [single]
    parameters = function.child_by_field_name("parameters")
    if parameters is None:
        return []
    result: list[Node] = []
    for child in parameters.named_children:
        if child.type == "comment":
            continue
        pattern = parameter_pattern(child)
        if pattern is not None and pattern.type == "this":
            continue
        result.append(child)
    return result


def import_bindings(unit: SourceUnit) -> list[ImportBinding]:
    """Return every name bound by the unit's top-level import statements."""
    bindings: list[ImportBinding] = []
    for statement in unit.root.named_children:
        if statement.type != "import_statement":
            continue
        module = string_literal_value(statement.child_by_field_name("source"))
        if module is None:
            continue
        for clause in statement.named_children:
            if clause.type != "import_clause":
                continue
            bindings.extend(_clause_bindings(clause, module))
    return bindings


def _clause_bindings(clause: Node, module: str) -> list[ImportBinding]:
    bindings: list[ImportBinding] = []
    for part in clause.named_children:
        match part.type:
            case "identifier":
                bindings.append(ImportBinding(node_text(part), "default", module, part))
            case "namespace_import":
                for name in part.named_children:
                    if name.type == "identifier":
                        bindings.append(ImportBinding(node_text(name), "*", module, name))
            case "named_imports":
                for specifier in part.named_children:
                    if specifier.type != "import_specifier":
                        continue
                    name = specifier.child_by_field_name("name")
                    alias = specifier.child_by_field_name("alias")
                    local = alias if alias is not None else name
                    imported = property_key_name(name)
                    if local is None or imported is None:
                        continue
                    bindings.append(ImportBinding(node_text(local), imported, module, local))
    return bindings


def exported_names(unit: SourceUnit) -> dict[str, Node]:
    """Map exported names to the node that provides them.

    Values are either binding identifiers (resolved later through the
    program scope) or, for ``export default <expression>``, the exported
    expression itself. Re-exports (``export ... from``) are deliberately
    absent: import aliases are followed exactly one hop.
    """
    exports: dict[str, Node] = {}
    for statement in unit.root.named_children:
        if statement.type != "export_statement":
            continue
        if statement.child_by_field_name("source") is not None:
            continue
        is_default = any(child.type == "default" for child in statement.children)
        declaration = statement.child_by_field_name("declaration")
        value = statement.child_by_field_name("value")
        if is_default:
            target = declaration if declaration is not None else value
            if target is not None:
                exports.setdefault("default", target)
            continue
        if declaration is not None:
            for name_node in _declared_names(declaration):
                exports.setdefault(node_text(name_node), name_node)
            continue
        for clause in statement.named_children:
            if clause.type != "export_clause":
                continue
            for specifier in clause.named_children:
                if specifier.type != "export_specifier":
                    continue
                name = specifier.child_by_field_name("name")
                alias = specifier.child_by_field_name("alias")
                exported = property_key_name(alias if alias is not None else name)
                if name is not None and exported is not None:
                    exports.setdefault(exported, name)
    return exports


def _declared_names(declaration: Node) -> list[Node]:
    name = declaration.child_by_field_name("name")
    if declaration.type in _FUNCTION_DECLARATION_TYPES or declaration.type == "class_declaration":
        return [name] if name is not None else []
    if declaration.type in ("lexical_declaration", "variable_declaration"):
        names: list[Node] = []
        for declarator in declaration.named_children:
            if declarator.type == "variable_declarator":
                names.extend(pattern_bindings(declarator.child_by_field_name("name")))
        return names
    return []


class ScopeIndex:
    """Scope tables and reference lookup for one SourceUnit.

    Example:
        >>> unit = parse_source("const t = f(); t('a'); { const t = 1; t; }")
        >>> index = ScopeIndex(unit)
        >>> binding = index.program_binding("t")
        >>> len(index.references(binding))  # the inner t is shadowed
        1
    """

    __slots__ = ("_bindings", "_owners", "_tables", "unit")

    def __init__(self, unit: SourceUnit) -> None:
        """Index every declaration in ``unit``.

        Args:
            unit: Parsed source unit
        """
        self.unit = unit
        self._tables: dict[NodeKey, dict[str, Node]] = {}
        self._owners: dict[NodeKey, Node] = {}
        self._bindings: set[NodeKey] = set()
        self._build()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _build(self) -> None:
        stack: list[Node] = [self.unit.root]
        while stack:
            node = stack.pop()
            self._index_node(node)
            stack.extend(reversed(node.named_children))
        logger.debug(
            "Indexed %d bindings in %d scopes for %s",
            len(self._bindings),
            len(self._tables),
            self.unit.path,
        )

    def _index_node(self, node: Node) -> None:
        match node.type:
            case "variable_declarator":
                pattern = node.child_by_field_name("name")
                parent = node.parent
                if parent is not None and parent.type == "variable_declaration":
                    owner = self._hoist_target(node)
                else:
                    owner = self.enclosing_scope(node)
                self._declare_all(owner, pattern_bindings(pattern))
            case "function_declaration" | "generator_function_declaration":
                self._declare(self.enclosing_scope(node), node.child_by_field_name("name"))
                self._declare_parameters(node)
            case "function_expression" | "function" | "generator_function":
                self._declare(node, node.child_by_field_name("name"))
                self._declare_parameters(node)
            case "arrow_function" | "method_definition":
                self._declare_parameters(node)
            case "class_declaration":
                self._declare(self.enclosing_scope(node), node.child_by_field_name("name"))
            case "catch_clause":
                self._declare_all(node, pattern_bindings(node.child_by_field_name("parameter")))
            case "for_in_statement":
                if node.child_by_field_name("kind") is not None:
                    self._declare_all(node, pattern_bindings(node.child_by_field_name("left")))
            case "import_statement":
                for binding in import_bindings_for_statement(node):
                    self._declare(self.unit.root, binding)

    def _declare_parameters(self, function: Node) -> None:
        for parameter in function_parameters(function):
            self._declare_all(function, pattern_bindings(parameter_pattern(parameter)))

    def _declare_all(self, owner: Node | None, names: list[Node]) -> None:
        for name in names:
            self._declare(owner, name)

    def _declare(self, owner: Node | None, name: Node | None) -> None:
        if owner is None or name is None:
            return
        key = node_key(self.unit, owner)
        table = self._tables.setdefault(key, {})
        table.setdefault(node_text(name), name)
        self._bindings.add(node_key(self.unit, name))
        self._owners[node_key(self.unit, name)] = owner

    def _hoist_target(self, node: Node) -> Node | None:
        current = node.parent
        while current is not None and current.type not in _HOIST_TARGET_TYPES:
            current = current.parent
        return current

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @staticmethod
    def enclosing_scope(node: Node) -> Node | None:
        """Return the nearest scope-creating ancestor of ``node``."""
        current = node.parent
        while current is not None and current.type not in SCOPE_TYPES:
            current = current.parent
        return current

    def is_binding(self, node: Node) -> bool:
        """True when ``node`` is a declaration name rather than a reference."""
        return node_key(self.unit, node) in self._bindings

    def program_binding(self, name: str) -> Node | None:
        """Return the top-level binding called ``name``, if any."""
        return self._tables.get(node_key(self.unit, self.unit.root), {}).get(name)

    def declaration_of(self, identifier: Node) -> Node | None:
        """Resolve an identifier to the binding it refers to.

        Args:
            identifier: identifier or object-shorthand node in expression position

        Returns:
            Binding identifier node, or None for globals and unknown names
        """
        if self.is_binding(identifier):
            return identifier
        name = node_text(identifier)
        scope = self.enclosing_scope(identifier)
        while scope is not None:
            binding = self._tables.get(node_key(self.unit, scope), {}).get(name)
            if binding is not None:
                return binding
            scope = self.enclosing_scope(scope)
        return None

    def references(self, binding: Node) -> list[Node]:
        """Find every reference to ``binding`` within its declaring scope.

        Args:
            binding: Binding identifier node (as returned by declaration_of)

        Returns:
            Reference nodes in source order (the declaration itself excluded)
        """
        binding_key = node_key(self.unit, binding)
        owner = self._owners.get(binding_key)
        if owner is None:
            return []
        name = node_text(binding)
        found: list[Node] = []
        stack: list[Node] = [owner]
        while stack:
            node = stack.pop()
            if node.type in _REFERENCE_TYPES and node_text(node) == name:
                if not self.is_binding(node) and not _names_module_member(node):
                    target = self.declaration_of(node)
                    if target is not None and node_key(self.unit, target) == binding_key:
                        found.append(node)
                continue
            stack.extend(reversed(node.named_children))
        return found


def import_bindings_for_statement(statement: Node) -> list[Node]:
    """Return the local binding identifiers introduced by one import statement."""
    module = string_literal_value(statement.child_by_field_name("source"))
    if module is None:
        return []
    names: list[Node] = []
    for clause in statement.named_children:
        if clause.type == "import_clause":
            names.extend(binding.node for binding in _clause_bindings(clause, module))
    return names


def _names_module_member(node: Node) -> bool:
    parent = node.parent
    return parent is not None and parent.type in _NON_REFERENCE_PARENTS
