"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the logic that spans a repository and its
    aggregates; they are stateless apart from injected collaborators.
    """

    pass
