"""Domain-level exceptions.

Every failure a caller can trigger is a subclass of DomainException, so the
HTTP and CLI layers can catch them uniformly and turn them into a status code
or a user-facing message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class NotFoundError(DomainException):
    """A requested entity does not exist."""


class NotAuthorizedError(DomainException):
    """The caller is known but may not perform this action."""


class AuthenticationError(DomainException):
    """No caller identity, or an identity that resolves to no user."""


class EmptyCartError(ValidationError):

    def __init__(self) -> None:
        super().__init__("Cart is empty")


class InsufficientStockError(ValidationError):
    """Raised when an order asks for more units than a product has."""

    def __init__(self, product_id: str, available: int, product_name: str | None = None) -> None:
        self.product_id = product_id
        self.available = available
        label = product_name or product_id
        super().__init__(f'Not enough stock for "{label}". Available: {available}')


class InvalidStatusError(ValidationError):

    def __init__(self, status: object) -> None:
        self.status = status
        super().__init__(f"Valid status required, got {status!r}")


class InvalidTransitionError(ValidationError):
    """An edge-validated status change that the state machine does not allow."""


class NotCancellableError(ValidationError):

    def __init__(self, status: str) -> None:
        self.status = status
        super().__init__(f"Order cannot be cancelled (current status: {status})")


class NotInCartError(NotFoundError):

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"Item not in cart: '{product_id}'")
