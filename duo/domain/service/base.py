"""Base class for domain services."""


class Service:
    """Base class for domain services.

    A service owns one part of the pairing workflow and only reaches storage
    through the repository interfaces it is constructed with.
    """
