"""Diagnostic message templates.

Centralized message templates for testable, consistent diagnostics.
Python 3.13+.
"""

from intlcheck.constants import DEFAULT_NAMESPACE

from .codes import Diagnostic, DiagnosticCode, SourceSpan


def _namespace_label(namespace: str | None) -> str:
    return DEFAULT_NAMESPACE if namespace is None else namespace


class ErrorTemplate:
    """Centralized diagnostic templates.

    All user-facing diagnostic messages are created here. Keeping them in
    one place provides:
        - Testable messages
        - Consistent formatting between the CLI and the lint rules
        - Documentation of every reportable condition
    """

    @staticmethod
    def missing_key(key: str, span: SourceSpan | None = None) -> Diagnostic:
        """Key used in code but absent from the source locale document.

        Args:
            key: Fully-qualified translation key
            span: Location of the key literal

        Returns:
            Diagnostic for MISSING_KEY
        """
        msg = f"Missing translation key: '{key}'"
        return Diagnostic(
            code=DiagnosticCode.MISSING_KEY,
            message=msg,
            span=span,
            hint=f"Add '{key}' to the source locale document",
            key=key,
            severity="error",
        )

    @staticmethod
    def dynamic_key(namespace: str | None, span: SourceSpan | None = None) -> Diagnostic:
        """Translator called with a key that is not a string literal.

        Args:
            namespace: Namespace of the translator (None for the default namespace)
            span: Location of the key expression (or of the call without a key)

        Returns:
            Diagnostic for DYNAMIC_KEY
        """
        return Diagnostic(
            code=DiagnosticCode.DYNAMIC_KEY,
            message="Dynamic keys cannot be statically analyzed.",
            span=span,
            hint="Pass a string literal so the key can be checked",
            namespace=_namespace_label(namespace),
            severity="warning",
        )

    @staticmethod
    def dynamic_namespace(span: SourceSpan | None = None) -> Diagnostic:
        """Hook called with a namespace that is not a string literal.

        Args:
            span: Location of the namespace expression

        Returns:
            Diagnostic for DYNAMIC_NAMESPACE
        """
        return Diagnostic(
            code=DiagnosticCode.DYNAMIC_NAMESPACE,
            message="Dynamic namespaces cannot be statically analyzed.",
            span=span,
            hint="Pass a string literal namespace so its keys can be checked",
            severity="warning",
        )

    @staticmethod
    def unused_key(key: str, document: str) -> Diagnostic:
        """Key defined in the source locale document but never used.

        Args:
            key: Fully-qualified translation key
            document: Path of the source locale document

        Returns:
            Diagnostic for UNUSED_KEY
        """
        return Diagnostic(
            code=DiagnosticCode.UNUSED_KEY,
            message=f"Unused translation key: '{key}'",
            hint="Run with --fix to remove these keys.",
            key=key,
            document=document,
            severity="info",
        )

    @staticmethod
    def messages_not_found(document: str) -> Diagnostic:
        """Message document does not exist.

        Args:
            document: Path of the expected document

        Returns:
            Diagnostic for MESSAGES_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.MESSAGES_NOT_FOUND,
            message=f"Messages file not found: {document}",
            hint="Check --dir and --locale",
            document=document,
        )

    @staticmethod
    def messages_invalid(document: str, reason: str) -> Diagnostic:
        """Message document could not be read or parsed.

        Args:
            document: Path of the document
            reason: Underlying error description

        Returns:
            Diagnostic for MESSAGES_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.MESSAGES_INVALID,
            message=f"Failed to parse messages file {document}: {reason}",
            hint="The document must be a JSON object",
            document=document,
        )

    @staticmethod
    def messages_empty(document: str) -> Diagnostic:
        """Source locale document defines no keys.

        Args:
            document: Path of the document

        Returns:
            Diagnostic for MESSAGES_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.MESSAGES_EMPTY,
            message=f"No keys found or file missing: {document}",
            document=document,
        )
