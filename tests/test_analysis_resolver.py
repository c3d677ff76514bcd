"""Tests for the usage resolver.

Covers hook discovery, direct and rich calls, dynamic usages, positional
and destructured forwarding (in-file and across one import), traversal
termination on cycles, scope shadowing and the documented limitations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from intlcheck.analysis import (
    ResolverConfig,
    TraversalContext,
    UsageResolver,
    classify_reference,
    qualify_key,
    resolve,
)
from intlcheck.enums import DynamicReason, UsageKind
from intlcheck.syntax import Project, parse_source

if TYPE_CHECKING:
    from tree_sitter import Node

    from intlcheck.analysis import ResolutionResult

IMPORT = "import { useTranslations } from 'next-intl';"
APP = "/app/src/App.tsx"


def _lines(*lines: str) -> str:
    return "\n".join(lines)


def _resolve(project: Project, source: str, path: str = APP, **config: bool) -> ResolutionResult:
    project.add_source(source, path)
    return resolve(project, ResolverConfig(**config) if config else None)


def _named(node: Node, name: str) -> list[Node]:
    """Identifier-like nodes spelled ``name``, in source order."""
    found: list[Node] = []
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type in ("identifier", "shorthand_property_identifier") and current.text == name.encode():
            found.append(current)
        stack.extend(reversed(current.named_children))
    return found


class TestQualifyKey:
    """Test key qualification."""

    def test_namespaced(self) -> None:
        """Namespace and literal join with a dot."""
        assert qualify_key("common", "greeting") == "common.greeting"

    def test_default_namespace(self) -> None:
        """The default namespace contributes no prefix."""
        assert qualify_key(None, "greeting") == "greeting"

    def test_default_sentinel_and_empty_namespace(self) -> None:
        """'default' and the empty string contribute no prefix either."""
        assert qualify_key("default", "greeting") == "greeting"
        assert qualify_key("", "greeting") == "greeting"


class TestClassifyReference:
    """Test the pure reference classifier."""

    def test_usage_kinds(self) -> None:
        """Each syntactic position maps to one usage kind."""
        unit = parse_source(
            _lines(
                "t('a');",
                "t.rich('b');",
                "f(x, t);",
                "f({ t });",
                "f(y, { tr: t });",
                "const copy = t;",
                "t.raw;",
            )
        )
        uses = [classify_reference(node) for node in _named(unit.root, "t")]
        assert [use.kind for use in uses] == [
            UsageKind.DIRECT,
            UsageKind.DIRECT,
            UsageKind.FORWARD_POSITIONAL,
            UsageKind.FORWARD_DESTRUCTURED,
            UsageKind.FORWARD_DESTRUCTURED,
            UsageKind.IGNORED,
            UsageKind.IGNORED,
        ]
        assert uses[2].argument_index == 1
        assert (uses[3].argument_index, uses[3].property_name) == (0, "t")
        assert (uses[4].argument_index, uses[4].property_name) == (1, "tr")

    def test_object_outside_arguments_is_ignored(self) -> None:
        """An object literal that is not a call argument does not forward."""
        unit = parse_source("const bag = { t };")
        (reference,) = _named(unit.root, "t")
        assert classify_reference(reference).kind == UsageKind.IGNORED

    def test_callee_argument_is_not_direct(self) -> None:
        """Passing t to another function is not a call of t."""
        unit = parse_source("wrap(t)('a');")
        (reference,) = _named(unit.root, "t")
        use = classify_reference(reference)
        assert use.kind == UsageKind.FORWARD_POSITIONAL
        assert use.argument_index == 0


class TestHookDiscovery:
    """Test how translator bindings are found."""

    def test_namespaced_hook(self, project: Project) -> None:
        """useTranslations('common') + t('greeting') yields common.greeting."""
        source = _lines(
            IMPORT,
            "export function App() {",
            "  const t = useTranslations('common');",
            "  return <div>{t('greeting')}</div>;",
            "}",
        )
        assert _resolve(project, source).used_keys == {"common.greeting"}

    def test_default_namespace(self, project: Project) -> None:
        """A hook call without arguments uses unprefixed keys."""
        source = _lines(IMPORT, "const t = useTranslations();", "t('nested.key');")
        assert _resolve(project, source).used_keys == {"nested.key"}

    def test_namespace_named_default(self, project: Project) -> None:
        """useTranslations('default') is the default namespace."""
        source = _lines(IMPORT, "const t = useTranslations('default');", "t('title');")
        assert _resolve(project, source).used_keys == {"title"}

    def test_default_literal_shares_identity_with_no_argument(self, project: Project) -> None:
        """A helper reached from both spellings is expanded once."""
        source = _lines(
            IMPORT,
            "function Label(t) { t('title'); }",
            "const a = useTranslations();",
            "const b = useTranslations('default');",
            "Label(a);",
            "Label(b);",
        )
        project.add_source(source, APP)
        context = TraversalContext()
        result = UsageResolver(project).resolve(context)
        assert result.used_keys == {"title"}
        assert len(result.usages) == 1

    def test_unit_without_import_is_skipped(self, project: Project) -> None:
        """Files that do not import the hook contribute nothing."""
        source = _lines("const t = useTranslations('common');", "t('greeting');")
        assert _resolve(project, source).used_keys == frozenset()

    def test_import_requirement_can_be_disabled(self, project: Project) -> None:
        """With require_import=False a global hook is recognized."""
        source = _lines("const t = useTranslations('common');", "t('greeting');")
        result = _resolve(project, source, require_import=False)
        assert result.used_keys == {"common.greeting"}

    def test_hook_from_other_module_is_ignored(self, project: Project) -> None:
        """Only the configured hook module counts."""
        source = _lines(
            "import { useTranslations } from 'use-intl';",
            "const t = useTranslations('common');",
            "t('greeting');",
        )
        assert _resolve(project, source).used_keys == frozenset()

    def test_aliased_hook_import(self, project: Project) -> None:
        """import { useTranslations as useT } is honored."""
        source = _lines(
            "import { useTranslations as useT } from 'next-intl';",
            "const t = useT('common');",
            "t('greeting');",
        )
        assert _resolve(project, source).used_keys == {"common.greeting"}

    def test_custom_hook_name(self, project: Project) -> None:
        """The hook identity is configurable."""
        source = _lines(
            "import { useI18n } from '@acme/i18n';",
            "const t = useI18n('shop');",
            "t('cart');",
        )
        project.add_source(source, APP)
        result = resolve(project, ResolverConfig(hook_module="@acme/i18n", hook_name="useI18n"))
        assert result.used_keys == {"shop.cart"}

    def test_renamed_translator(self, project: Project) -> None:
        """The binding name is irrelevant."""
        source = _lines(IMPORT, "const translate = useTranslations('auth');", "translate('login');")
        assert _resolve(project, source).used_keys == {"auth.login"}

    def test_dynamic_namespace(self, project: Project) -> None:
        """A non-literal namespace creates no binding and is reported."""
        source = _lines(IMPORT, "const t = useTranslations(section);", "t('title');")
        result = _resolve(project, source)
        assert result.used_keys == frozenset()
        (usage,) = result.dynamic_usages
        assert usage.reason == DynamicReason.NON_LITERAL_NAMESPACE
        assert str(usage) == f"{APP}:2:27: useTranslations called with dynamic namespace"

    def test_dynamic_namespace_names_configured_hook(self, project: Project) -> None:
        """The dynamic-namespace line names the configured hook."""
        source = _lines("import { useI18n } from '@acme/i18n';", "const t = useI18n(section);")
        project.add_source(source, APP)
        result = resolve(project, ResolverConfig(hook_module="@acme/i18n", hook_name="useI18n"))
        (usage,) = result.dynamic_usages
        assert usage.hook_name == "useI18n"
        assert str(usage) == f"{APP}:2:19: useI18n called with dynamic namespace"

    def test_hook_call_as_argument(self, project: Project) -> None:
        """f(useTranslations('ns')) forwards straight into f's parameter."""
        source = _lines(IMPORT, "function f(t) { t('x'); }", "f(useTranslations('ns'));")
        assert _resolve(project, source).used_keys == {"ns.x"}

    def test_hook_call_invoked_directly(self, project: Project) -> None:
        """useTranslations('ns')('x') is a usage."""
        source = _lines(IMPORT, "useTranslations('ns')('x');")
        assert _resolve(project, source).used_keys == {"ns.x"}


class TestDirectUsage:
    """Test direct and rich calls."""

    def test_rich_calls(self, project: Project) -> None:
        """t.rich, t.markup and t.raw count as usages."""
        source = _lines(
            IMPORT,
            "const t = useTranslations('page');",
            "t.rich('intro', { b: (chunks) => chunks });",
            "t.markup('body');",
            "t.raw('data');",
        )
        assert _resolve(project, source).used_keys == {"page.intro", "page.body", "page.data"}

    def test_escaped_literal(self, project: Project) -> None:
        """Escape sequences in key literals are decoded."""
        source = _lines(IMPORT, "const t = useTranslations('ns');", "t('it\\'s');")
        assert _resolve(project, source).used_keys == {"ns.it's"}

    def test_usage_sites_carry_spans(self, project: Project) -> None:
        """Each usage site points at its key literal."""
        source = _lines(IMPORT, "const t = useTranslations('ns');", "t('first');", "  t('second');")
        result = _resolve(project, source)
        sites = {site.key: site.span for site in result.usages}
        assert (sites["ns.first"].line, sites["ns.first"].column) == (3, 3)
        assert (sites["ns.second"].line, sites["ns.second"].column) == (4, 5)
        assert result.usages_in(APP) == result.usages
        assert result.usages_in("/app/src/Other.tsx") == ()


class TestDynamicUsage:
    """Test keys that cannot be proven static."""

    def test_identifier_key(self, project: Project) -> None:
        """const key = 'x'; t(key) is dynamic and adds no key."""
        source = _lines(IMPORT, "const t = useTranslations('common');", "const key = 'x';", "t(key);")
        result = _resolve(project, source)
        assert result.used_keys == frozenset()
        (usage,) = result.dynamic_usages
        assert usage.reason == DynamicReason.NON_LITERAL_KEY
        assert usage.namespace == "common"
        assert str(usage) == f"{APP}:4:3: t() called with dynamic key for namespace 'common'"

    def test_non_literal_shapes(self, project: Project) -> None:
        """Template literals, concatenation and conditionals are dynamic."""
        source = _lines(
            IMPORT,
            "const t = useTranslations();",
            "t(`hello`);",
            "t('hello' + 'world');",
            "t(condition ? 'a' : 'b');",
        )
        result = _resolve(project, source)
        assert result.used_keys == frozenset()
        assert len(result.dynamic_usages) == 3
        assert all(usage.reason == DynamicReason.NON_LITERAL_KEY for usage in result.dynamic_usages)
        assert "for namespace 'default'" in str(result.dynamic_usages[0])

    def test_missing_key_argument(self, project: Project) -> None:
        """t() without arguments is dynamic."""
        source = _lines(IMPORT, "const t = useTranslations('ns');", "t();")
        result = _resolve(project, source)
        (usage,) = result.dynamic_usages
        assert usage.reason == DynamicReason.MISSING_KEY
        assert result.usages[0].is_dynamic

    def test_dynamic_usages_in_file(self, project: Project) -> None:
        """Dynamic usages can be filtered by file."""
        source = _lines(IMPORT, "const t = useTranslations('ns');", "t(k);")
        result = _resolve(project, source)
        assert len(result.dynamic_usages_in(APP)) == 1
        assert result.dynamic_usages_in("/elsewhere.tsx") == ()


class TestPositionalForwarding:
    """Test translators passed as bare arguments."""

    def test_function_declaration(self, project: Project) -> None:
        """function f(t){ t('x') } f(t) yields ns.x."""
        source = _lines(
            IMPORT,
            "function f(t) { t('x'); }",
            "const t = useTranslations('ns');",
            "f(t);",
        )
        assert _resolve(project, source).used_keys == {"ns.x"}

    def test_argument_index(self, project: Project) -> None:
        """The parameter at the argument's index receives the binding."""
        source = _lines(
            IMPORT,
            "function show(label, tr) { tr('b'); label('nope'); }",
            "const t = useTranslations('ns');",
            "show(other, t);",
        )
        assert _resolve(project, source).used_keys == {"ns.b"}

    def test_arrow_and_function_expression(self, project: Project) -> None:
        """Arrow functions and function expressions bound to variables resolve."""
        source = _lines(
            IMPORT,
            "const a = tr => tr('arrow');",
            "const b = (tr) => { tr('parens'); };",
            "const c = function (tr) { tr('expression'); };",
            "const t = useTranslations('ns');",
            "a(t); b(t); c(t);",
        )
        assert _resolve(project, source).used_keys == {"ns.arrow", "ns.parens", "ns.expression"}

    def test_typed_parameters(self, project: Project) -> None:
        """TypeScript annotations on parameters are transparent."""
        source = _lines(
            IMPORT,
            "function f(t: Translator, n: number = 1): void { t('typed'); }",
            "const t = useTranslations('ns');",
            "f(t);",
        )
        assert _resolve(project, source, "/app/src/typed.ts").used_keys == {"ns.typed"}

    def test_object_method(self, project: Project) -> None:
        """Methods of object literals resolve through the object binding."""
        source = _lines(
            IMPORT,
            "const helpers = { show(tr) { tr('method'); }, other: (tr) => tr('prop') };",
            "const t = useTranslations('ns');",
            "helpers.show(t);",
            "helpers.other(t);",
        )
        assert _resolve(project, source).used_keys == {"ns.method", "ns.prop"}

    def test_class_methods(self, project: Project) -> None:
        """this.method(t) and Class.staticMethod(t) resolve."""
        source = _lines(
            IMPORT,
            "class Format { static label(tr) { tr('label'); } }",
            "class View {",
            "  render() { const t = useTranslations('ns'); this.title(t); Format.label(t); }",
            "  title(tr) { tr('title'); }",
            "}",
        )
        assert _resolve(project, source).used_keys == {"ns.title", "ns.label"}

    def test_parameter_list_too_short(self, project: Project) -> None:
        """Forwarding past the last parameter is ignored."""
        source = _lines(IMPORT, "function f() {}", "const t = useTranslations('ns');", "f(t);")
        result = _resolve(project, source)
        assert result.used_keys == frozenset()
        assert result.dynamic_usages == ()

    def test_unresolvable_callee(self, project: Project) -> None:
        """Unknown callees are ignored without error."""
        source = _lines(IMPORT, "const t = useTranslations('ns');", "external(t);", "t('kept');")
        assert _resolve(project, source).used_keys == {"ns.kept"}

    def test_chained_forwarding(self, project: Project) -> None:
        """Forwarding is followed through several hops."""
        source = _lines(
            IMPORT,
            "function a(t) { b(t); }",
            "function b(t) { c({ t }); }",
            "function c({ t }) { t('deep'); }",
            "const t = useTranslations('ns');",
            "a(t);",
        )
        assert _resolve(project, source).used_keys == {"ns.deep"}

    def test_namespace_is_preserved_per_binding(self, project: Project) -> None:
        """One helper reached from two namespaces yields keys in both."""
        source = _lines(
            IMPORT,
            "function show(t) { t('x'); }",
            "const a = useTranslations('a');",
            "const b = useTranslations('b');",
            "show(a);",
            "show(b);",
        )
        assert _resolve(project, source).used_keys == {"a.x", "b.x"}


class TestDestructuredForwarding:
    """Test translators passed inside object-literal arguments."""

    def test_shorthand_property(self, project: Project) -> None:
        """f({ t }) with function f({ t }) yields ns.x."""
        source = _lines(
            IMPORT,
            "function Child({ t }) { return t('x'); }",
            "const t = useTranslations('ns');",
            "Child({ t });",
        )
        assert _resolve(project, source).used_keys == {"ns.x"}

    def test_explicit_property_and_renamed_pattern(self, project: Project) -> None:
        """{ translator: t } matches { translator: tr } by property name."""
        source = _lines(
            IMPORT,
            "function Child(props, { translator: tr, other }) { tr('renamed'); other('no'); }",
            "const t = useTranslations('ns');",
            "Child(null, { translator: t, other: x });",
        )
        assert _resolve(project, source).used_keys == {"ns.renamed"}

    def test_pattern_with_default(self, project: Project) -> None:
        """Defaults in the destructuring pattern are supported."""
        source = _lines(
            IMPORT,
            "function Child({ t = fallback }) { t('with_default'); }",
            "const t = useTranslations('ns');",
            "Child({ t });",
        )
        assert _resolve(project, source).used_keys == {"ns.with_default"}

    def test_property_not_destructured(self, project: Project) -> None:
        """A property the callee does not destructure is dropped."""
        source = _lines(
            IMPORT,
            "function Child({ label }) { label('no'); }",
            "const t = useTranslations('ns');",
            "Child({ t });",
        )
        assert _resolve(project, source).used_keys == frozenset()

    def test_jsx_props_are_not_followed(self, project: Project) -> None:
        """Passing t as a JSX prop is not a forwarding edge."""
        source = _lines(
            IMPORT,
            "function Child({ t }) { return <p>{t('jsx')}</p>; }",
            "export function App() {",
            "  const t = useTranslations('ns');",
            "  return <Child t={t} />;",
            "}",
        )
        assert _resolve(project, source).used_keys == frozenset()


class TestCrossFileForwarding:
    """Test callees imported from other project files."""

    def test_named_import(self, project: Project) -> None:
        """A relative named import is followed to the declaration."""
        project.add_source("export function show(t) { t('x'); }", "/app/src/helpers.ts")
        source = _lines(
            IMPORT,
            "import { show } from './helpers';",
            "const t = useTranslations('ns');",
            "show(t);",
        )
        assert _resolve(project, source).used_keys == {"ns.x"}

    def test_aliased_export_and_import(self, project: Project) -> None:
        """export { impl as show } and import { show as display } resolve."""
        project.add_source(
            "const impl = (t) => t('aliased'); export { impl as show };",
            "/app/src/lib/index.ts",
        )
        source = _lines(
            IMPORT,
            "import { show as display } from './lib';",
            "const t = useTranslations('ns');",
            "display(t);",
        )
        assert _resolve(project, source).used_keys == {"ns.aliased"}

    def test_default_import(self, project: Project) -> None:
        """A default-exported function resolves through a default import."""
        project.add_source("export default function show(t) { t('dflt'); }", "/app/src/show.tsx")
        source = _lines(
            IMPORT,
            "import show from './show';",
            "const t = useTranslations('ns');",
            "show(t);",
        )
        assert _resolve(project, source).used_keys == {"ns.dflt"}

    def test_namespace_import(self, project: Project) -> None:
        """import * as helpers; helpers.show(t) resolves the export."""
        project.add_source("export function show(t) { t('star'); }", "/app/src/helpers.ts")
        source = _lines(
            IMPORT,
            "import * as helpers from './helpers';",
            "const t = useTranslations('ns');",
            "helpers.show(t);",
        )
        assert _resolve(project, source).used_keys == {"ns.star"}

    def test_root_relative_specifier(self, project: Project) -> None:
        """Non-relative specifiers resolve against the project root."""
        project.add_source("export function show(t) { t('rooted'); }", "/app/src/utils/show.ts")
        source = _lines(
            IMPORT,
            "import { show } from 'src/utils/show';",
            "const t = useTranslations('ns');",
            "show(t);",
        )
        assert _resolve(project, source).used_keys == {"ns.rooted"}

    def test_reexport_chain_is_not_followed(self, project: Project) -> None:
        """Import aliases are followed one hop only."""
        project.add_source("export function show(t) { t('hidden'); }", "/app/src/impl.ts")
        project.add_source("export { show } from './impl';", "/app/src/barrel.ts")
        source = _lines(
            IMPORT,
            "import { show } from './barrel';",
            "const t = useTranslations('ns');",
            "show(t);",
        )
        assert _resolve(project, source).used_keys == frozenset()

    def test_module_outside_project(self, project: Project) -> None:
        """Package imports find nothing and are ignored."""
        source = _lines(
            IMPORT,
            "import { show } from 'some-package';",
            "const t = useTranslations('ns');",
            "show(t);",
        )
        assert _resolve(project, source).used_keys == frozenset()


class TestTraversal:
    """Test termination, scoping and traversal state."""

    def test_mutual_recursion_terminates(self, project: Project) -> None:
        """Cyclic forwarding terminates and collects every key once."""
        source = _lines(
            IMPORT,
            "function a(t) { t('a'); b(t); }",
            "function b(t) { t('b'); a(t); }",
            "const t = useTranslations('ns');",
            "a(t);",
        )
        assert _resolve(project, source).used_keys == {"ns.a", "ns.b"}

    def test_self_recursion_terminates(self, project: Project) -> None:
        """A function forwarding to itself terminates."""
        source = _lines(IMPORT, "function f(t) { t('x'); f(t); }", "const t = useTranslations('ns');", "f(t);")
        assert _resolve(project, source).used_keys == {"ns.x"}

    def test_deep_chain_exceeds_recursion_limit(self, project: Project) -> None:
        """Forwarding chains longer than the recursion limit resolve."""
        depth = 1500
        functions = [f"function f{i}(t) {{ f{i + 1}(t); }}" for i in range(depth)]
        functions.append(f"function f{depth}(t) {{ t('bottom'); }}")
        source = _lines(IMPORT, *functions, "const t = useTranslations('ns');", "f0(t);")
        assert _resolve(project, source).used_keys == {"ns.bottom"}

    def test_shadowed_translator(self, project: Project) -> None:
        """A nested declaration with the same name is not the translator."""
        source = _lines(
            IMPORT,
            "const t = useTranslations('ns');",
            "function inner() { const t = (k) => k; t('shadowed'); }",
            "t('visible');",
        )
        assert _resolve(project, source).used_keys == {"ns.visible"}

    def test_context_is_reusable(self, project: Project) -> None:
        """Resolving twice with one TraversalContext records nothing twice."""
        source = _lines(
            IMPORT,
            "const t = useTranslations('ns');",
            "t('x');",
            "useTranslations('other')('y');",
            "const u = useTranslations(section);",
        )
        project.add_source(source, APP)
        context = TraversalContext()
        resolver = UsageResolver(project)
        first = resolver.resolve(context)
        second = resolver.resolve(context)
        assert first == second
        assert second.used_keys == {"ns.x", "other.y"}
        assert len(second.usages) == 2
        assert len(second.dynamic_usages) == 1
        assert len(context.visited) == 1
        assert len(context.hook_calls) == 3

    def test_syntax_errors_do_not_raise(self, project: Project) -> None:
        """Broken sources still yield whatever parses."""
        source = _lines(IMPORT, "const t = useTranslations('ns');", "t('ok');", "function (( {")
        result = _resolve(project, source)
        assert "ns.ok" in result.used_keys
