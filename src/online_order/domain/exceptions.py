"""Domain-level exceptions.

Every error this project raises is a subclass of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidRequest(DomainException):
    """The incoming order request is missing or malformed."""


class PricingFailure(DomainException):
    """A pricing service could not price the order.

    Raised by PricingService implementations (unknown flavour, invalid
    quantity, out of stock...). The order handler never raises, inspects
    or wraps it.
    """


class ConfigurationError(DomainException):
    """The concrete pricing service could not be resolved."""
