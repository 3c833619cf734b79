"""Domain-level exceptions.

Every pricing failure is a subclass of DomainException so the CLI layer
can catch them uniformly and print a single-line error.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A pricing rule or value invariant was violated."""


class NotFoundError(DomainException):
    """A product code is not present in the catalog."""
