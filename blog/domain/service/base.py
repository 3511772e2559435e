"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business logic that spans more than one entity,
    such as keeping a post's vote tally in step with its votes.
    """

    pass
