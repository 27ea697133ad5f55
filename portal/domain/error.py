"""Domain layer errors."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from portal.domain.value.types import Transition


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidInputError(DomainError):
    """Raised when caller-supplied input is rejected (empty text, unknown reaction)."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when an account attempts an action it is not permitted to take."""

    def __init__(self, action: str, resource: str, resource_id: str, account_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.account_id = account_id
        super().__init__(
            f"Account {account_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when an optimistic concurrency check is lost.

    Carries the transition that was being attempted (when there was one) so
    the caller can tell a duplicate delivery from a genuine race.
    """

    def __init__(
        self,
        resource: str,
        identifier: str,
        transition: Optional["Transition"] = None,
        retryable: bool = True,
    ):
        self.resource = resource
        self.identifier = identifier
        self.transition = transition
        self.retryable = retryable
        super().__init__(f"Concurrent update on {resource} {identifier}")
