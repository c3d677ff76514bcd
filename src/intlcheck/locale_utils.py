"""Locale code utilities.

Message documents are named after their locale (``en.json``,
``pt-BR.json``). These helpers normalize such codes and check them against
Babel's CLDR data so that a typo in ``--locale`` or a stray document in the
messages directory can be reported. An unknown locale is never fatal.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "is_known_locale",
    "normalize_locale",
    "warn_if_unknown_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to the POSIX form Babel expects.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def is_known_locale(locale_code: str) -> bool:
    """True when Babel recognizes ``locale_code``.

    Example:
        >>> is_known_locale("en")
        True
        >>> is_known_locale("xx-NOPE")
        False
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError):
        return False
    return True


def warn_if_unknown_locale(locale_code: str, *, context: str) -> bool:
    """Log a warning when ``locale_code`` is not a known locale.

    Args:
        locale_code: Locale code to check
        context: What the code names (e.g., "source locale")

    Returns:
        True when the locale is known
    """
    if is_known_locale(locale_code):
        return True
    logger.warning("Unknown %s %r: not a CLDR locale", context, locale_code)
    return False
