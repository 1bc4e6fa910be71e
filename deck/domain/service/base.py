"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business logic that spans several entities or
    repositories, such as threading, aggregation and feed projection.
    """

    pass
