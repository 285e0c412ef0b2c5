import re

# signed 64-bit arithmetic

min_int64 = -(1 << 63)

max_int64 = (1 << 63) - 1

mask_64 = (1 << 64) - 1

offset_64 = 1 << 63

int_literal = re.compile(r"-?[0-9]+")


def to_signed(x):
    return ((x + offset_64) & mask_64) - offset_64


def in_int64(x) -> bool:
    return min_int64 <= x <= max_int64


def add64(x, y):
    return to_signed(x + y)


def sub64(x, y):
    return to_signed(x - y)


def mul64(x, y):
    return to_signed(x * y)


def is_int_literal(token: str) -> bool:
    # ascii digits only, `\d` would also accept other unicode digits
    return int_literal.fullmatch(token) is not None
