"""Domain-level exceptions.

Business rule violations are expressed as subclasses of DomainException
so the console session can catch them uniformly and print a plain
diagnostic before re-prompting.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
