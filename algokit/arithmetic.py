"""Small numeric routines: knapsack, primes, roots, sequences and a calculator."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import cycle

Number = int | float

MARS_SIGNAL = "sos"


@dataclass(frozen=True)
class Calculator:
    """Two-operand calculator whose results never go negative by ordering."""

    a: Number = 12
    b: Number = 36

    def add(self) -> Number:
        return self.a + self.b

    def sub(self) -> Number:
        """Larger operand minus the smaller one."""
        return self.a - self.b if self.a > self.b else self.b - self.a

    def multiply(self) -> Number:
        return self.a * self.b

    def divide(self) -> Number:
        """Larger operand divided by the smaller; integers truncate toward zero."""
        num, den = (self.a, self.b) if self.a > self.b else (self.b, self.a)
        if isinstance(num, int) and isinstance(den, int):
            quotient = abs(num) // abs(den)
            return quotient if (num >= 0) == (den >= 0) else -quotient
        return num / den

    def greater(self) -> Number:
        return self.a if self.a > self.b else self.b


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items fitting into *capacity* (0/1 knapsack)."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(w < 0 for w in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for cap in range(capacity, max(weight, 1) - 1, -1):
            best[cap] = max(best[cap], best[cap - weight] + value)
    return best[capacity]


def primes_up_to(n: int) -> list[int]:
    """Return every prime <= *n* using the sieve of Eratosthenes."""
    if n < 2:
        return []
    is_prime = bytearray([1]) * (n + 1)
    is_prime[0] = is_prime[1] = 0
    p = 2
    while p * p <= n:
        if is_prime[p]:
            is_prime[p * p :: p] = bytes(len(range(p * p, n + 1, p)))
        p += 1
    return [i for i, flag in enumerate(is_prime) if flag]


def integer_sqrt(x: int) -> int:
    """Return the floor of the square root of a non-negative integer."""
    if x < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(x)


def is_armstrong(n: int) -> bool:
    """Tell whether *n* equals the sum of the cubes of its digits."""
    total = 0
    remaining = n
    while remaining > 0:
        remaining, digit = divmod(remaining, 10)
        total += digit**3
    return total == n


def factorial(n: int) -> int:
    """Return n!; values below 2 give 1."""
    return math.prod(range(2, n + 1)) if n >= 2 else 1


def fibonacci(n: int) -> list[int]:
    """Return the first *n* Fibonacci numbers, starting from 0."""
    terms = []
    current, following = 0, 1
    for _ in range(n):
        terms.append(current)
        current, following = following, current + following
    return terms


def is_even(n: int) -> bool:
    return n % 2 == 0


def largest_of_three(a: Number, b: Number, c: Number) -> Number:
    return max(a, b, c)


def mars_exploration(message: str) -> int:
    """Count characters of *message* that differ from the repeated signal."""
    return sum(ch != expected for ch, expected in zip(message, cycle(MARS_SIGNAL)))