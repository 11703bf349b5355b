"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Request data is malformed or breaks a field-level rule."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ConflictError(DomainException):
    """The request collides with existing state (overlap, duplicate name)."""


class PersistenceError(DomainException):
    """The storage backend failed. Services pass it through untouched."""
