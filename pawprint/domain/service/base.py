"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services hold business rules that span several aggregates or need
    repository access, such as feed assembly and tag resolution.
    """

    pass
