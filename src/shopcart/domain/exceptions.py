"""Domain-level exceptions.

All contract violations are expressed as subclasses of DomainException
so outer layers (the CLI, an HTTP handler) can catch them uniformly and
display user-friendly messages.

"Not found" is deliberately absent: removing or updating something that
is not in the cart is routine and reported with a boolean return.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An argument broke a business rule or invariant."""
