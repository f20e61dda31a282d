"""
64-bit fingerprints of glass levels, used as visited-set keys during search.

The mixing follows wyhash (Wang Yi, public domain,
https://github.com/wangyi-fudan/wyhash): every value is folded into the
running seed with a 64x64->128 bit multiply whose halves are xored together.
"""
from typing import Sequence

MASK_64 = (1 << 64) - 1

SECRET = (
    0xA0761D6478BD642F,
    0xE7037ED1A0B428DB,
    0x8EBC6AF09C88C6E3,
)


def mum(a: int, b: int) -> int:
    """Multiply two 64-bit words and fold the 128-bit product into 64 bits."""
    r = (a & MASK_64) * (b & MASK_64)
    return ((r >> 64) ^ r) & MASK_64


def fingerprint(levels: Sequence[int]) -> int:
    """Deterministic, order-sensitive 64-bit key for a state."""
    seed = len(levels)
    for value in levels:
        seed = mum(seed ^ SECRET[0], (value & MASK_64) ^ SECRET[1])
    return mum(seed ^ SECRET[0], seed ^ SECRET[2])
