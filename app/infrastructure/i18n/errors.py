"""Exceptions raised by the lingua i18n system.

Only startup problems are surfaced as exceptions. Anything that goes wrong
while negotiating a locale for a request is absorbed and normalized so a
request always ends up with a usable bundle.
"""


class LinguaError(Exception):
    """Base class for lingua errors."""


class ConfigurationError(LinguaError):
    """Raised when the resource store cannot be initialized.

    Covers a missing default locale or resource path, an unreadable resource
    directory, an unparseable bundle file and a missing default bundle. The
    application must not start serving when this is raised.
    """


class ResourceStoreCorruptedError(LinguaError):
    """Raised when the default bundle disappeared from a built store.

    The store validates the default bundle at construction, so this signals
    an internal consistency violation rather than a request problem.
    """
