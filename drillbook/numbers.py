"""Number theory and bit-twiddling exercises on integers."""

from __future__ import annotations

import math

_MASK32 = 0xFFFFFFFF
_SIGN32 = 0x80000000

_DIGIT_WORDS = (
    "zero", "one", "two", "three", "four",
    "five", "six", "seven", "eight", "nine",
)


def is_prime(n: int) -> bool:
    """Tell whether n is prime, by trial division up to its square root."""
    if n <= 1:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def count_primes(limit: int) -> int:
    """Number of primes p with 2 <= p <= limit."""
    return sum(1 for n in range(2, limit + 1) if is_prime(n))


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's remainder method."""
    while b:
        a, b = b, a % b
    return abs(a)


def factorial(n: int) -> int:
    """n! for a non-negative n."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    return math.prod(range(1, n + 1))


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, counting fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("negative Fibonacci index")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fibonacci_series(n: int) -> list[int]:
    """0 and 1 followed by the next n Fibonacci numbers."""
    if n < 0:
        raise ValueError("negative term count")
    series = [0, 1]
    for _ in range(n):
        series.append(series[-1] + series[-2])
    return series


def power(base: int, exponent: int) -> int:
    """base raised to a non-negative exponent, by repeated squaring."""
    if exponent < 0:
        raise ValueError("negative exponent")
    if exponent == 0:
        return 1
    if exponent == 1:
        return base
    half = power(base, exponent // 2)
    return half * half if exponent % 2 == 0 else base * half * half


def to_binary(n: int) -> int:
    """An integer whose decimal digits spell the binary form of n."""
    if n < 0:
        raise ValueError("negative numbers have no plain binary form")
    return int(format(n, "b"))


def from_binary(n: int) -> int:
    """The value of an integer whose decimal digits are binary digits."""
    if n < 0:
        raise ValueError("negative binary digit string")
    digits = str(n)
    if set(digits) - {"0", "1"}:
        raise ValueError(f"{n} holds digits other than 0 and 1")
    return int(digits, 2)


def count_set_bits(n: int) -> int:
    """Number of one bits in n taken as an unsigned 32-bit value."""
    return bin(n & _MASK32).count("1")


def add_without_plus(a: int, b: int) -> int:
    """Sum of two 32-bit signed integers using only bitwise operations."""
    a &= _MASK32
    b &= _MASK32
    while b:
        carry = a & b
        a = (a ^ b) & _MASK32
        b = (carry << 1) & _MASK32
    return a - (1 << 32) if a & _SIGN32 else a


def say_digits(n: int) -> list[str]:
    """The English word for each decimal digit of n, most significant first."""
    if n < 0:
        raise ValueError("negative number")
    return [_DIGIT_WORDS[int(digit)] for digit in str(n)]