"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services hold business logic spanning repositories and external clients.
    Dependencies are passed in explicitly; services keep no hidden state.
    """

    pass
