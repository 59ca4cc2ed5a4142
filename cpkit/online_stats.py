"""Running mean and population variance."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class OnlineMeanVariance:
    """Mean and variance of a multiset that supports insert and erase."""

    total: float = 0
    total_squares: float = 0
    count: int = 0

    def insert(self, x: float) -> None:
        self.count += 1
        self.total += x
        self.total_squares += x * x

    def erase(self, x: float) -> None:
        if self.count == 0:
            raise ValueError("no values to erase")
        self.count -= 1
        self.total -= x
        self.total_squares -= x * x

    def mean(self) -> float:
        if self.count == 0:
            raise ValueError("mean of no values")
        return self.total / self.count

    def variance(self) -> float:
        if self.count == 0:
            raise ValueError("variance of no values")
        n = self.count
        return self.total_squares / n - self.total * self.total / n / n