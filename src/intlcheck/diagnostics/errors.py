"""intlcheck exception hierarchy with structured diagnostics.

Exceptions optionally carry a Diagnostic for rich error information.
The resolver and reconciler never raise; these exceptions cover the
I/O and configuration boundary.

Python 3.13+.
"""

from .codes import Diagnostic


class IntlCheckError(Exception):
    """Base exception for all intlcheck errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize IntlCheckError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MessagesLoadError(IntlCheckError):
    """Message document could not be loaded.

    Raised when a locale document is absent, unreadable, not valid JSON,
    or does not hold an object at its top level.

    Fatal for the CLI canonical document; the lint rules degrade to an
    empty defined-key set; fix mode skips the affected document.

    Attributes:
        path: Path of the document that failed to load
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        """Initialize MessagesLoadError.

        Args:
            message: Error message string OR Diagnostic object
            path: Path of the document that failed to load
        """
        super().__init__(message)
        self.path = path


class RuleConfigError(IntlCheckError):
    """Invalid lint rule options or settings.

    Example:
        >>> resolve_rule_options({"messageDir": "x"}, {})
        Traceback (most recent call last):
        RuleConfigError: Unknown rule option 'messageDir'
    """
