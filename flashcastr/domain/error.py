"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidInputError(DomainError):
    """Caller supplied unusable input (e.g. an empty username)."""

    pass


class UpstreamError(DomainError):
    """An external service (identity or activity) failed.

    Retriable: the caller is expected to try again.
    """

    pass


class StorageError(DomainError):
    """A write or read against the linkage store failed.

    Fatal for the current attempt, retriable on the next poll.
    """

    pass


class ConsistencyError(DomainError):
    """Stored state contradicts an operation that just succeeded."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
