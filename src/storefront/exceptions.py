"""Storefront errors that have no counterpart in ``protean.exceptions``.

Validation failures and missing documents use Protean's own
``ValidationError`` and ``ObjectNotFoundError``.
"""


class StoreUnavailable(Exception):
    """The persistent store cannot be reached."""


class LegacySourceError(Exception):
    """The legacy product list could not be read or parsed."""
