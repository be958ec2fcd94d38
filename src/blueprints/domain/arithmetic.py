"""Fixed-width integer helpers."""

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def wrap_int32(value: int) -> int:
    """Wrap an arbitrary integer to signed 32-bit two's complement.

    Examples:
        >>> wrap_int32(2**31)
        -2147483648
        >>> wrap_int32(-(2**31) - 1)
        2147483647
    """
    return ((value - INT32_MIN) & 0xFFFFFFFF) + INT32_MIN
