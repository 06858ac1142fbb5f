# ride_share/domain/validation.py
from ride_share.domain.errors import InvalidArgument


def require_positive(value: float, message: str) -> float:
    if not value > 0:
        raise InvalidArgument(message)
    return value


def require_between(value: float, lo: float, hi: float, message: str) -> float:
    # also rejects NaN
    if not lo <= value <= hi:
        raise InvalidArgument(message)
    return value


def require_instance(obj, cls: type, message: str):
    if obj is None or not isinstance(obj, cls):
        raise InvalidArgument(message)
    return obj
