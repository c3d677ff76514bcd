"""Usage resolver: which translation keys does the code provably use?

Starting from every ``const t = useTranslations(namespace)`` declaration,
the resolver follows each reference to the translator binding and
classifies it:

    DIRECT               t('key'), t.rich('key')        -> key or dynamic usage
    FORWARD_POSITIONAL   render(t)                       -> parameter N of render
    FORWARD_DESTRUCTURED render({ t })                   -> { t } element of parameter N
    IGNORED              anything else                   -> dropped silently

Forwarded parameters become new translator bindings with the namespace of
the original one, so resolution continues inside the callee's body. The
callee is resolved through the scope index (following an import alias
exactly one hop) and may be a function declaration, a function or arrow
expression bound to a variable, or a method of an object literal or class.

Termination:
    Bindings are expanded from an explicit worklist and recorded in the
    visited set of the TraversalContext before expansion, so cyclic and
    self-recursive call graphs terminate and deep forwarding chains cannot
    exhaust the interpreter stack.

Failure semantics:
    The resolver never raises on tree shapes. Unresolvable references are
    ignored; unresolvable keys are recorded as dynamic usages.

Known limitations:
    - Import aliases are followed one hop; re-export chains are not
    - The first declaration of a name wins for duplicated/overloaded symbols
    - Translators passed through JSX props, spread arguments, containers or
      reassignment are not followed

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from intlcheck.constants import DEFAULT_NAMESPACE, HOOK_MODULE, HOOK_NAME, PATH_SEPARATOR
from intlcheck.enums import DynamicReason, UsageKind
from intlcheck.syntax.scope import (
    exported_names,
    function_parameters,
    import_bindings,
    parameter_pattern,
)
from intlcheck.syntax.tree import (
    NodeCategory,
    argument_nodes,
    categorize,
    field_is,
    node_key,
    node_span,
    node_text,
    property_key_name,
    same_node,
    string_literal_value,
)

if TYPE_CHECKING:
    from tree_sitter import Node

    from intlcheck.diagnostics import SourceSpan
    from intlcheck.syntax.project import Project
    from intlcheck.syntax.scope import ScopeIndex
    from intlcheck.syntax.tree import NodeKey, SourceUnit

__all__ = [
    "DynamicUsage",
    "ReferenceUse",
    "ResolutionResult",
    "ResolverConfig",
    "TranslatorBinding",
    "TraversalContext",
    "UsageResolver",
    "UsageSite",
    "classify_reference",
    "qualify_key",
    "resolve",
]

logger = logging.getLogger(__name__)

type _ResolvedFunction = tuple[SourceUnit, Node]

_FUNCTION_DECLARATION_TYPES: frozenset[str] = frozenset(
    {"function_declaration", "generator_function_declaration"}
)

_NAMED_FUNCTION_EXPRESSION_TYPES: frozenset[str] = frozenset(
    {"function_expression", "function", "generator_function"}
)


# ==============================================================================
# CONFIGURATION AND RESULT TYPES
# ==============================================================================


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable resolver configuration.

    Attributes:
        hook_module: Module the hook must be imported from
        hook_name: Exported name of the hook
        require_import: Skip units that do not import the hook. The lint
            rules disable this because they see files (and test snippets)
            where the hook may be a global.
    """

    hook_module: str = HOOK_MODULE
    hook_name: str = HOOK_NAME
    require_import: bool = True


def qualify_key(namespace: str | None, literal: str) -> str:
    """Join a namespace and a literal key into a key record.

    Example:
        >>> qualify_key("common", "greeting")
        'common.greeting'
        >>> qualify_key(None, "greeting")
        'greeting'
        >>> qualify_key("default", "greeting")
        'greeting'
    """
    if not namespace or namespace == DEFAULT_NAMESPACE:
        return literal
    return f"{namespace}{PATH_SEPARATOR}{literal}"


@dataclass(frozen=True, slots=True)
class TranslatorBinding:
    """A name bound to a translator value.

    Attributes:
        unit: Source unit declaring the binding
        node: Binding identifier (variable name, parameter, or destructured element)
        namespace: Namespace fixed at the hook call (None for the default namespace)
    """

    unit: SourceUnit
    node: Node
    namespace: str | None

    @property
    def identity(self) -> tuple[NodeKey, str | None]:
        """Identity used by the visited set.

        The namespace is part of it: one helper parameter reached from
        translators of two namespaces yields keys in both.
        """
        return node_key(self.unit, self.node), self.namespace

    @property
    def name(self) -> str:
        """Bound name as written in the source."""
        return node_text(self.node)

    def forwarded_to(self, unit: SourceUnit, node: Node) -> TranslatorBinding:
        """Create the binding a forwarding edge leads to (same namespace)."""
        return TranslatorBinding(unit=unit, node=node, namespace=self.namespace)


@dataclass(frozen=True, slots=True)
class UsageSite:
    """A call through a translator binding.

    Attributes:
        key: Fully-qualified key, or None when the key is dynamic
        namespace: Namespace of the translator (None for the default namespace)
        span: Location of the key argument (of the call when it has none)
    """

    key: str | None
    namespace: str | None
    span: SourceSpan

    @property
    def is_dynamic(self) -> bool:
        """True when the key could not be resolved to a literal."""
        return self.key is None


@dataclass(frozen=True, slots=True)
class DynamicUsage:
    """A usage whose key (or namespace) is not a string literal.

    Attributes:
        span: Location of the offending expression
        namespace: Namespace of the translator (None for default or unknown)
        reason: Why the usage is dynamic
        hook_name: Name of the hook the translator came from
    """

    span: SourceSpan
    namespace: str | None
    reason: DynamicReason
    hook_name: str = HOOK_NAME

    def __str__(self) -> str:
        """Return the diagnostic line reported by the CLI."""
        location = self.span.describe()
        if self.reason == DynamicReason.NON_LITERAL_NAMESPACE:
            return f"{location}: {self.hook_name} called with dynamic namespace"
        namespace = DEFAULT_NAMESPACE if self.namespace is None else self.namespace
        return f"{location}: t() called with dynamic key for namespace '{namespace}'"


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Immutable outcome of a resolver run.

    Attributes:
        used_keys: Keys backed by at least one literal usage site
        dynamic_usages: Usages that could not be proven static, in discovery order
        usages: Every usage site (literal and dynamic), in discovery order
    """

    used_keys: frozenset[str] = frozenset()
    dynamic_usages: tuple[DynamicUsage, ...] = ()
    usages: tuple[UsageSite, ...] = ()

    def usages_in(self, path: str) -> tuple[UsageSite, ...]:
        """Usage sites located in the unit at ``path``."""
        return tuple(usage for usage in self.usages if usage.span.path == path)

    def dynamic_usages_in(self, path: str) -> tuple[DynamicUsage, ...]:
        """Dynamic usages located in the unit at ``path``."""
        return tuple(usage for usage in self.dynamic_usages if usage.span.path == path)


@dataclass(slots=True)
class TraversalContext:
    """Mutable state threaded explicitly through one resolver run.

    Attributes:
        visited: Identities (node, namespace) of bindings already expanded
        hook_calls: Hook call expressions already scanned
        used_keys: Accumulated key records
        usages: Accumulated usage sites
        dynamic_usages: Accumulated dynamic usage records
    """

    visited: set[tuple[NodeKey, str | None]] = field(default_factory=set)
    hook_calls: set[NodeKey] = field(default_factory=set)
    used_keys: set[str] = field(default_factory=set)
    usages: list[UsageSite] = field(default_factory=list)
    dynamic_usages: list[DynamicUsage] = field(default_factory=list)

    def mark_visited(self, binding: TranslatorBinding) -> bool:
        """Record ``binding`` as expanded; False when it already was."""
        identity = binding.identity
        if identity in self.visited:
            return False
        self.visited.add(identity)
        return True

    def mark_hook_call(self, unit: SourceUnit, call: Node) -> bool:
        """Record a hook call as scanned; False when it already was."""
        key = node_key(unit, call)
        if key in self.hook_calls:
            return False
        self.hook_calls.add(key)
        return True

    def result(self) -> ResolutionResult:
        """Freeze the accumulated state."""
        return ResolutionResult(
            used_keys=frozenset(self.used_keys),
            dynamic_usages=tuple(self.dynamic_usages),
            usages=tuple(self.usages),
        )


# ==============================================================================
# REFERENCE CLASSIFICATION
# ==============================================================================


@dataclass(frozen=True, slots=True)
class ReferenceUse:
    """Classification of one reference to a translator binding.

    Attributes:
        kind: Usage category
        call: The call expression involved (None for IGNORED)
        argument_index: Position of the forwarded argument (-1 for DIRECT/IGNORED)
        property_name: Property carrying the translator (FORWARD_DESTRUCTURED only)
    """

    kind: UsageKind
    call: Node | None = None
    argument_index: int = -1
    property_name: str | None = None


_IGNORED = ReferenceUse(UsageKind.IGNORED)


def classify_reference(reference: Node) -> ReferenceUse:
    """Classify how a reference to a translator is used.

    Pure function of the syntax around ``reference``: it never consults
    scopes or other files.

    Args:
        reference: identifier (or object shorthand) referring to a translator

    Returns:
        ReferenceUse describing the usage

    Example:
        For ``t('a')`` the reference ``t`` is DIRECT; for ``render(x, t)``
        it is FORWARD_POSITIONAL with argument_index 1; for
        ``render({ t: t })`` it is FORWARD_DESTRUCTURED with property "t".
    """
    parent = reference.parent
    if parent is None:
        return _IGNORED

    match categorize(parent):
        case NodeCategory.CALL if field_is(parent, "function", reference):
            return ReferenceUse(UsageKind.DIRECT, call=parent)
        case NodeCategory.MEMBER_ACCESS if field_is(parent, "object", reference):
            call = parent.parent
            if categorize(call) == NodeCategory.CALL and field_is(call, "function", parent):
                return ReferenceUse(UsageKind.DIRECT, call=call)
            return _IGNORED
        case NodeCategory.ARGUMENT_LIST:
            return _argument_use(reference, UsageKind.FORWARD_POSITIONAL, None)
        case NodeCategory.OBJECT_LITERAL if reference.type == "shorthand_property_identifier":
            return _argument_use(parent, UsageKind.FORWARD_DESTRUCTURED, node_text(reference))
        case NodeCategory.PROPERTY_ASSIGNMENT if field_is(parent, "value", reference):
            name = property_key_name(parent.child_by_field_name("key"))
            literal = parent.parent
            if name is None or categorize(literal) != NodeCategory.OBJECT_LITERAL:
                return _IGNORED
            assert literal is not None  # narrowed by categorize()
            return _argument_use(literal, UsageKind.FORWARD_DESTRUCTURED, name)
        case _:
            return _IGNORED


def _argument_use(argument: Node, kind: UsageKind, property_name: str | None) -> ReferenceUse:
    """Locate ``argument`` in its call's argument list."""
    arguments = argument.parent
    if categorize(arguments) != NodeCategory.ARGUMENT_LIST:
        return _IGNORED
    assert arguments is not None  # narrowed by categorize()
    call = arguments.parent
    if categorize(call) != NodeCategory.CALL:
        return _IGNORED
    assert call is not None  # narrowed by categorize()
    for index, candidate in enumerate(argument_nodes(call)):
        if same_node(candidate, argument):
            return ReferenceUse(kind, call=call, argument_index=index, property_name=property_name)
    return _IGNORED


# ==============================================================================
# RESOLVER
# ==============================================================================


class UsageResolver:
    """Resolve translation-key usages across a Project.

    Example:
        >>> project = Project()
        >>> project.add_source(
        ...     "import { useTranslations } from 'next-intl';"
        ...     "function f(t) { t('x'); }"
        ...     "const t = useTranslations('ns'); f(t);",
        ...     "/app/src/App.tsx",
        ... )
        >>> sorted(UsageResolver(project).resolve().used_keys)
        ['ns.x']
    """

    __slots__ = ("_config", "_project")

    def __init__(self, project: Project, config: ResolverConfig | None = None) -> None:
        """Initialize resolver.

        Args:
            project: Parsed sources to analyze
            config: Resolver configuration (default: ResolverConfig())
        """
        self._project = project
        self._config = config if config is not None else ResolverConfig()

    def resolve(self, context: TraversalContext | None = None) -> ResolutionResult:
        """Resolve every hook binding in the project.

        Args:
            context: Traversal state to continue from (default: fresh context)

        Returns:
            Accumulated ResolutionResult
        """
        ctx = context if context is not None else TraversalContext()
        for unit in self._project.units:
            for binding in self.hook_bindings(unit, ctx):
                self.expand(binding, ctx)
        logger.debug(
            "Resolved %d keys and %d dynamic usages from %d units",
            len(ctx.used_keys),
            len(ctx.dynamic_usages),
            len(self._project),
        )
        return ctx.result()

    # ------------------------------------------------------------------
    # Hook discovery
    # ------------------------------------------------------------------

    def hook_names(self, unit: SourceUnit) -> set[str]:
        """Local names under which ``unit`` can call the hook.

        Returns an empty set when the unit does not import the hook and
        imports are required.
        """
        names = {
            binding.local_name
            for binding in import_bindings(unit)
            if binding.module == self._config.hook_module
            and binding.imported_name == self._config.hook_name
        }
        if not self._config.require_import:
            names.add(self._config.hook_name)
        return names

    def hook_bindings(self, unit: SourceUnit, context: TraversalContext) -> list[TranslatorBinding]:
        """Create the initial translator bindings of ``unit``.

        Hook calls with a non-literal namespace are recorded in ``context``
        as dynamic usages and produce no binding.

        Args:
            unit: Source unit to scan
            context: Traversal state receiving dynamic usages

        Returns:
            Bindings in source order
        """
        names = self.hook_names(unit)
        if not names:
            return []

        bindings: list[TranslatorBinding] = []
        stack: list[Node] = [unit.root]
        while stack:
            node = stack.pop()
            stack.extend(reversed(node.named_children))
            if categorize(node) != NodeCategory.CALL:
                continue
            callee = node.child_by_field_name("function")
            if callee is None or callee.type != "identifier" or node_text(callee) not in names:
                continue
            if not context.mark_hook_call(unit, node):
                continue

            arguments = argument_nodes(node)
            namespace: str | None = None
            if arguments:
                namespace = string_literal_value(arguments[0])
                if namespace is None:
                    context.dynamic_usages.append(
                        DynamicUsage(
                            span=node_span(unit, arguments[0]),
                            namespace=None,
                            reason=DynamicReason.NON_LITERAL_NAMESPACE,
                            hook_name=self._config.hook_name,
                        )
                    )
                    continue
                if namespace in ("", DEFAULT_NAMESPACE):
                    namespace = None

            bindings.extend(self._bind_hook_call(unit, node, namespace, context))
        return bindings

    def _bind_hook_call(
        self,
        unit: SourceUnit,
        call: Node,
        namespace: str | None,
        context: TraversalContext,
    ) -> list[TranslatorBinding]:
        """Bindings created by one hook call.

        ``const t = hook(ns)`` binds ``t``. A hook call passed straight into
        another call (``render(hook(ns))``) is forwarded like a reference,
        and ``hook(ns)('key')`` is a usage in its own right.
        """
        declarator = call.parent
        if categorize(declarator) == NodeCategory.VARIABLE_DECLARATOR:
            assert declarator is not None  # narrowed by categorize()
            name = declarator.child_by_field_name("name")
            if not field_is(declarator, "value", call) or name is None or name.type != "identifier":
                return []
            return [TranslatorBinding(unit=unit, node=name, namespace=namespace)]

        anonymous = TranslatorBinding(unit=unit, node=call, namespace=namespace)
        use = classify_reference(call)
        match use.kind:
            case UsageKind.DIRECT:
                assert use.call is not None
                self._record_usage(anonymous, use.call, context)
                return []
            case UsageKind.FORWARD_POSITIONAL | UsageKind.FORWARD_DESTRUCTURED:
                return self.forward(anonymous, use)
            case _:
                return []

    # ------------------------------------------------------------------
    # Expansion
    # ------------------------------------------------------------------

    def expand(self, binding: TranslatorBinding, context: TraversalContext) -> None:
        """Resolve every usage reachable from ``binding``.

        Args:
            binding: Translator binding to expand
            context: Traversal state (visited set and accumulators)
        """
        worklist: list[TranslatorBinding] = [binding]
        while worklist:
            current = worklist.pop()
            if not context.mark_visited(current):
                continue
            index = self._project.index(current.unit)
            references = index.references(current.node)
            logger.debug(
                "Expanding %s (namespace %r) in %s: %d references",
                current.name,
                current.namespace,
                current.unit.path,
                len(references),
            )
            forwarded: list[TranslatorBinding] = []
            for reference in references:
                use = classify_reference(reference)
                match use.kind:
                    case UsageKind.DIRECT:
                        assert use.call is not None
                        self._record_usage(current, use.call, context)
                    case UsageKind.FORWARD_POSITIONAL | UsageKind.FORWARD_DESTRUCTURED:
                        forwarded.extend(self.forward(current, use))
                    case UsageKind.IGNORED:
                        pass
            worklist.extend(reversed(forwarded))

    def _record_usage(
        self, binding: TranslatorBinding, call: Node, context: TraversalContext
    ) -> None:
        arguments = argument_nodes(call)
        literal = string_literal_value(arguments[0]) if arguments else None
        if literal is not None:
            key = qualify_key(binding.namespace, literal)
            context.used_keys.add(key)
            context.usages.append(
                UsageSite(key=key, namespace=binding.namespace, span=node_span(binding.unit, arguments[0]))
            )
            return

        target = arguments[0] if arguments else call
        span = node_span(binding.unit, target)
        reason = DynamicReason.NON_LITERAL_KEY if arguments else DynamicReason.MISSING_KEY
        context.usages.append(UsageSite(key=None, namespace=binding.namespace, span=span))
        context.dynamic_usages.append(
            DynamicUsage(
                span=span,
                namespace=binding.namespace,
                reason=reason,
                hook_name=self._config.hook_name,
            )
        )

    def forward(self, binding: TranslatorBinding, use: ReferenceUse) -> list[TranslatorBinding]:
        """Follow a forwarding edge to the bindings it creates in the callee.

        Args:
            binding: Translator binding being forwarded
            use: FORWARD_POSITIONAL or FORWARD_DESTRUCTURED classification

        Returns:
            New bindings (empty when the callee or parameter cannot be resolved)
        """
        if use.call is None:
            return []
        resolved = self.resolve_callee(binding.unit, use.call)
        if resolved is None:
            return []
        unit, function = resolved
        parameters = function_parameters(function)
        if use.argument_index >= len(parameters):
            return []
        pattern = parameter_pattern(parameters[use.argument_index])
        if pattern is None:
            return []

        if use.property_name is None:
            if pattern.type != "identifier":
                return []
            return [binding.forwarded_to(unit, pattern)]

        if categorize(pattern) != NodeCategory.BINDING_PATTERN:
            return []
        return [
            binding.forwarded_to(unit, element)
            for element in _destructured_elements(pattern, use.property_name)
        ]

    # ------------------------------------------------------------------
    # Callee resolution
    # ------------------------------------------------------------------

    def resolve_callee(self, unit: SourceUnit, call: Node) -> _ResolvedFunction | None:
        """Resolve the function-like declaration a call invokes.

        Args:
            unit: Unit containing the call
            call: call_expression node

        Returns:
            (unit, function node) of the callee, or None
        """
        callee = call.child_by_field_name("function")
        match categorize(callee):
            case NodeCategory.IDENTIFIER:
                assert callee is not None
                binding = self._project.index(unit).declaration_of(callee)
                if binding is None:
                    return None
                return self._function_for_binding(unit, binding, follow_imports=True)
            case NodeCategory.MEMBER_ACCESS:
                assert callee is not None
                return self._method_for_member(unit, callee)
            case _:
                return None

    def _function_for_binding(
        self, unit: SourceUnit, binding: Node, *, follow_imports: bool
    ) -> _ResolvedFunction | None:
        parent = binding.parent
        if parent is None:
            return None
        if parent.type in _FUNCTION_DECLARATION_TYPES and field_is(parent, "name", binding):
            return unit, parent
        if parent.type in _NAMED_FUNCTION_EXPRESSION_TYPES and field_is(parent, "name", binding):
            return unit, parent
        if categorize(parent) == NodeCategory.VARIABLE_DECLARATOR and field_is(parent, "name", binding):
            value = parent.child_by_field_name("value")
            if categorize(value) == NodeCategory.FUNCTION_LIKE:
                assert value is not None
                return unit, value
            return None
        if follow_imports:
            return self._imported_function(unit, binding)
        return None

    def _imported_export(self, unit: SourceUnit, binding: Node) -> tuple[SourceUnit, str] | None:
        """Target unit and imported name for an import binding, if it is one."""
        identity = node_key(unit, binding)
        for imported in import_bindings(unit):
            if node_key(unit, imported.node) != identity:
                continue
            target = self._project.resolve_module(unit, imported.module)
            if target is None:
                return None
            return target, imported.imported_name
        return None

    def _imported_function(self, unit: SourceUnit, binding: Node) -> _ResolvedFunction | None:
        """Follow an import alias exactly one hop to a function declaration."""
        imported = self._imported_export(unit, binding)
        if imported is None:
            return None
        target, name = imported
        return self._exported_function(target, name)

    def _exported_function(self, target: SourceUnit, name: str) -> _ResolvedFunction | None:
        provider = exported_names(target).get(name)
        if provider is None:
            return None
        if categorize(provider) == NodeCategory.FUNCTION_LIKE:
            return target, provider
        if categorize(provider) != NodeCategory.IDENTIFIER:
            return None
        declaration = self._project.index(target).declaration_of(provider)
        if declaration is None:
            return None
        return self._function_for_binding(target, declaration, follow_imports=False)

    def _method_for_member(self, unit: SourceUnit, member: Node) -> _ResolvedFunction | None:
        """Resolve ``object.method`` for this, object literals, classes and namespaces."""
        receiver = member.child_by_field_name("object")
        name = property_key_name(member.child_by_field_name("property"))
        if receiver is None or name is None:
            return None

        if receiver.type == "this":
            body = _enclosing_class_body(member)
            method = _member_function(body, name) if body is not None else None
            return (unit, method) if method is not None else None

        if categorize(receiver) != NodeCategory.IDENTIFIER:
            return None
        index: ScopeIndex = self._project.index(unit)
        declaration = index.declaration_of(receiver)
        if declaration is None:
            return None

        container = _member_container(declaration)
        if container is not None:
            method = _member_function(container, name)
            return (unit, method) if method is not None else None

        imported = self._imported_export(unit, declaration)
        if imported is not None and imported[1] == "*":
            return self._exported_function(imported[0], name)
        return None


def _destructured_elements(pattern: Node, property_name: str) -> list[Node]:
    """Binding nodes of ``pattern`` elements that read ``property_name``."""
    matches: list[Node] = []
    for element in pattern.named_children:
        match element.type:
            case "shorthand_property_identifier_pattern":
                if node_text(element) == property_name:
                    matches.append(element)
            case "object_assignment_pattern":
                left = element.child_by_field_name("left")
                if left is not None and node_text(left) == property_name:
                    matches.append(left)
            case "pair_pattern":
                if property_key_name(element.child_by_field_name("key")) != property_name:
                    continue
                value = element.child_by_field_name("value")
                if value is not None and value.type == "assignment_pattern":
                    value = value.child_by_field_name("left")
                if value is not None and value.type == "identifier":
                    matches.append(value)
    return matches


def _enclosing_class_body(node: Node) -> Node | None:
    current = node.parent
    while current is not None and current.type != "class_body":
        current = current.parent
    return current


def _member_container(declaration: Node) -> Node | None:
    """Object literal or class body a binding names, if any."""
    parent = declaration.parent
    if parent is None:
        return None
    if parent.type in ("class_declaration", "abstract_class_declaration"):
        return parent.child_by_field_name("body")
    if categorize(parent) == NodeCategory.VARIABLE_DECLARATOR:
        value = parent.child_by_field_name("value")
        if categorize(value) == NodeCategory.OBJECT_LITERAL:
            return value
        if value is not None and value.type == "class":
            return value.child_by_field_name("body")
    return None


def _member_function(container: Node, name: str) -> Node | None:
    """First function-like member called ``name`` in an object literal or class body."""
    for member in container.named_children:
        match member.type:
            case "method_definition":
                if property_key_name(member.child_by_field_name("name")) == name:
                    return member
            case "pair" | "public_field_definition" | "field_definition":
                key = member.child_by_field_name("key")
                if key is None:
                    key = member.child_by_field_name("name")
                value = member.child_by_field_name("value")
                if property_key_name(key) == name and categorize(value) == NodeCategory.FUNCTION_LIKE:
                    return value
    return None


def resolve(project: Project, config: ResolverConfig | None = None) -> ResolutionResult:
    """Resolve translation-key usages across ``project``.

    Convenience wrapper around UsageResolver.

    Args:
        project: Parsed sources
        config: Resolver configuration (default: ResolverConfig())

    Returns:
        ResolutionResult with used keys, dynamic usages and usage sites
    """
    return UsageResolver(project, config).resolve()
