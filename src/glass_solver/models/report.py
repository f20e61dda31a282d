from typing import List

from pydantic import BaseModel


class Mismatch(BaseModel):
    a: int
    b: int
    ta: int
    tb: int
    expected: int
    actual: int


class CrosscheckReport(BaseModel):
    max_capacity: int
    pairs: int = 0
    compared: int = 0
    mismatches: List[Mismatch] = []

    @property
    def ok(self) -> bool:
        return not self.mismatches
