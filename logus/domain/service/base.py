"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold the logic that spans repositories or entities; they are
    constructed per request with the repositories they need.
    """

    pass
