"""Number-theory helpers and integer sequences."""

from __future__ import annotations

from math import isqrt

__all__ = [
    "fibonacci",
    "fibonacci_sequence",
    "is_armstrong",
    "gcd",
    "factorial",
    "is_prime",
    "primes_up_to",
    "binomial_coefficient",
    "reverse_number",
    "is_perfect",
    "number_triangle",
    "pascal_triangle",
    "digit_sum",
    "factors",
]


def _truncated_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend (truncating division)."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; values of n below 2 are returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def fibonacci_sequence(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting from 0."""
    sequence: list[int] = []
    previous, current = 0, 1
    for _ in range(max(count, 0)):
        sequence.append(previous)
        previous, current = current, previous + current
    return sequence


def is_armstrong(num: int) -> bool:
    """Tell whether ``num`` equals the sum of its digits each raised to the digit count."""
    digits = str(abs(num)) if num else ""
    sign = -1 if num < 0 else 1
    power = len(digits)
    return sum((sign * int(digit)) ** power for digit in digits) == num


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm with truncating remainders."""
    while b != 0:
        a, b = b, _truncated_mod(a, b)
    return a


def factorial(n: int) -> int:
    """Return n! for a non-negative integer n."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is prime by trial division up to its square root."""
    if n <= 1:
        return False
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def primes_up_to(n: int) -> list[int]:
    """Return every prime not greater than ``n`` using the sieve of Eratosthenes."""
    if n < 2:
        return []
    sieve = bytearray([1]) * (n + 1)
    for p in range(2, isqrt(n) + 1):
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, n + 1, p)))
    return [p for p in range(2, n + 1) if sieve[p]]


def binomial_coefficient(n: int, k: int) -> int:
    """Return C(n, k) built row by row from Pascal's rule."""
    if n < 0 or k < 0 or k > n:
        raise ValueError(f"binomial coefficient C({n}, {k}) needs 0 <= k <= n")
    row = [1] + [0] * k
    for i in range(1, n + 1):
        for j in range(min(i, k), 0, -1):
            row[j] += row[j - 1]
    return row[k]


def reverse_number(num: int) -> int:
    """Reverse the decimal digits of ``num``, keeping its sign."""
    sign = -1 if num < 0 else 1
    return sign * int(str(abs(num))[::-1])


def is_perfect(num: int) -> bool:
    """Tell whether ``num`` equals the sum of its proper divisors."""
    if num < 2:
        return False
    total = 1
    for i in range(2, isqrt(num) + 1):
        if num % i == 0:
            partner = num // i
            total += i if partner == i else i + partner
    return total == num


def number_triangle(rows: int) -> list[list[int]]:
    """Return rows 1..rows where row i holds the numbers 1 to i."""
    return [list(range(1, i + 1)) for i in range(1, rows + 1)]


def pascal_triangle(rows: int) -> list[list[int]]:
    """Return the first ``rows`` rows of Pascal's triangle."""
    triangle: list[list[int]] = []
    for line in range(1, rows + 1):
        coefficient = 1
        row: list[int] = []
        for i in range(1, line + 1):
            row.append(coefficient)
            coefficient = coefficient * (line - i) // i
        triangle.append(row)
    return triangle


def digit_sum(num: int) -> int:
    """Sum the decimal digits of a positive number; anything else sums to 0."""
    if num <= 0:
        return 0
    return sum(int(digit) for digit in str(num))


def factors(n: int) -> list[int]:
    """Return every positive divisor of ``n`` in ascending order."""
    return [i for i in range(1, n + 1) if n % i == 0]