"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each error carries the human-readable reason it was raised with.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value object was given a malformed value."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class AuthorizationError(DomainException):
    """The caller lacks the role required for the operation."""


class ProductDuplicationError(DomainException):
    """A product id was registered a second time."""


class ProductQuantityError(ValidationError):
    """A product quantity is not acceptable for the operation."""


class ProductMissingError(DomainException):
    """The product was never added, or it is sold out."""


class OrderError(DomainException):
    """The customer already holds an active order for the product."""


class ReturnError(DomainException):
    """No matching active order, or the return window has elapsed."""


class PaymentError(DomainException):
    """The attached payment does not satisfy the store's payment policy."""


class InsufficientBalanceError(DomainException):
    """A token account cannot cover the requested amount."""
