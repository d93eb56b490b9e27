"""Integer bounds and checked arithmetic for datestep.

Duration magnitudes and step counters are 32-bit signed integers.
Python ints never overflow, so the bounds are enforced explicitly and
every checked helper returns None once a result leaves them.
"""

# Magnitude bounds (32-bit signed)
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def in_range(value: int) -> bool:
    return INT32_MIN <= value <= INT32_MAX


def checked_int_mul(a: int, b: int) -> int | None:
    """Return a * b, or None if the product leaves the 32-bit range."""
    product = a * b
    return product if in_range(product) else None


def checked_int_add(a: int, b: int) -> int | None:
    """Return a + b, or None if the sum leaves the 32-bit range."""
    total = a + b
    return total if in_range(total) else None


def require_magnitude(value: int, name: str) -> None:
    """Validate a duration magnitude at construction time.

    Raises:
        TypeError: If value is not an int (bools are rejected too)
        ValueError: If value does not fit in 32 signed bits
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"{name} must be an int, got {type(value).__name__!r}: {value!r}\n"
            f"Example: days(3), months(-2), years(1)"
        )
    if not in_range(value):
        raise ValueError(
            f"{name} must fit in 32 signed bits "
            f"[{INT32_MIN}, {INT32_MAX}], got {value}"
        )
