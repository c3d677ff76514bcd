"""Message document loading and rewriting.

Python 3.13+.
"""

from .fixing import FixOutcome, fix_documents, iter_fix_documents, locale_documents, write_messages
from .loading import (
    MessageKeyCache,
    default_cache,
    load_defined_keys,
    messages_path,
    read_messages,
    validate_locale_code,
)

__all__ = [
    "FixOutcome",
    "MessageKeyCache",
    "default_cache",
    "fix_documents",
    "iter_fix_documents",
    "load_defined_keys",
    "locale_documents",
    "messages_path",
    "read_messages",
    "validate_locale_code",
    "write_messages",
]
