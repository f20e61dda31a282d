from functools import reduce
from typing import Iterable


def gcd(a: int, b: int) -> int:
    """Greatest common divisor. gcd(a, 0) == a."""
    while b:
        a, b = b, a % b
    return a


def gcd_all(values: Iterable[int]) -> int:
    """Fold gcd over a sequence. Empty input gives 0."""
    return reduce(gcd, values, 0)


def mod_inverse(value: int, modulus: int) -> int:
    """
    Return x such that (value * x) % modulus == 1, using the extended
    Euclidean algorithm. Operands must be coprime; this is not checked.
    mod_inverse(v, 1) is 0.
    """
    x0, x1 = 0, 1
    a, b = value, modulus
    while a > 1 and b > 0:
        q = a // b
        a, b = b, a - q * b
        x0, x1 = x1 - q * x0, x0
    return x1 % modulus
