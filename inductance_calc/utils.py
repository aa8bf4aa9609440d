import math

from inductance_calc.errors import DomainError


def require_positive_finite(name: str, value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise DomainError(f"{name} must be a real number, got {value!r}") from None

    if not math.isfinite(value) or value <= 0:
        raise DomainError(f"{name} must be finite and positive, got {value}")
    return value
