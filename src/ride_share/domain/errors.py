# ride_share/domain/errors.py


class InvalidArgument(ValueError):
    """Raised when an entity is constructed or mutated with a value it cannot hold."""
