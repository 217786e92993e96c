"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CorruptCartDataError(DomainException):
    """The persisted cart payload could not be decoded."""


class CatalogFetchError(DomainException):
    """The product or category list could not be retrieved."""


class CatalogNotReadyError(DomainException):
    """The catalog view was read before its data arrived."""


class ConfigError(DomainException):
    """An environment setting has an unusable value."""
