"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business logic that spans entities or aggregates
    (reactions, balances, content counters) rather than living on one of them.
    """

    pass
