"""Errors raised by dictionary fetchers.

These never escape the namespace loader: a fetch error triggers the
fallback-locale retry and, failing that, an empty dictionary.
"""


class DictionaryFetchError(Exception):
    """Base error for a dictionary resource that could not be fetched."""

    def __init__(self, locale: str, namespace: str, reason: str = ""):
        self.locale = locale
        self.namespace = namespace
        self.reason = reason
        message = f"Dictionary {namespace!r} unavailable for locale {locale!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DictionaryNotFoundError(DictionaryFetchError):
    """No resource exists for the (locale, namespace) pair."""


class DictionaryParseError(DictionaryFetchError):
    """The resource exists but is not a parseable mapping."""
