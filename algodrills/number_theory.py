"""Number-theory and arithmetic drills."""

from __future__ import annotations

from collections.abc import Iterable
from math import floor, gcd, isqrt

_PALINDROME_LIMIT = 10_000_000
_SEARCH_CEILING = 1_000_000_000
_SHIFT_LIMIT = 60

Point = tuple[int, int]


def _is_prime(n: int) -> bool:
    return n >= 2 and all(n % divisor for divisor in range(2, isqrt(n) + 1))


def _round_half_away(x: float) -> int:
    magnitude = floor(abs(x) + 0.5)
    return magnitude if x >= 0 else -magnitude


def count_boundary_crossings(start: Point, end: Point, planets: Iterable[tuple[int, int, int]]) -> int:
    """Count circles (a, b, r) that hold exactly one of start and end."""
    (x1, y1), (x2, y2) = start, end

    def inside(x: int, y: int, a: int, b: int, r: int) -> bool:
        return (x - a) ** 2 + (y - b) ** 2 <= r * r

    return sum(inside(x1, y1, a, b, r) != inside(x2, y2, a, b, r) for a, b, r in planets)


def tournament_meeting_round(first: int, second: int) -> int:
    """Round in which two knockout entrants, seeded first and second, would meet."""
    if first < 1 or second < 1:
        raise ValueError("seeds must be positive")
    rounds = 0
    while first != second:
        first = (first + 1) // 2
        second = (second + 1) // 2
        rounds += 1
    return rounds


def games_to_raise_rate(games: int, wins: int) -> int:
    """Fewest extra won games that raise the whole-percent win rate, or -1 if it never rises."""
    if games < 1 or not 0 <= wins <= games:
        raise ValueError("need games >= 1 and 0 <= wins <= games")
    rate = wins * 100 // games
    if rate >= 99:
        return -1
    low, high, result = 1, _SEARCH_CEILING, -1
    while low <= high:
        mid = (low + high) // 2
        if (wins + mid) * 100 // (games + mid) > rate:
            result = mid
            high = mid - 1
        else:
            low = mid + 1
    return result


def euler_phi(n: int) -> int:
    """Count of integers in 1..n coprime to n."""
    if n < 1:
        raise ValueError("n must be positive")
    result = remaining = n
    p = 2
    while p * p <= remaining:
        if remaining % p == 0:
            result -= result // p
            while remaining % p == 0:
                remaining //= p
        p += 1
    if remaining > 1:
        result -= result // remaining
    return result


def count_meeting_times(pairs: Iterable[tuple[int, int]]) -> int:
    """Number of integer offsets minimising the total clock disagreement over (a, b) pairs."""
    diffs = sorted(b - a for a, b in pairs)
    if not diffs:
        raise ValueError("pairs must not be empty")
    if len(diffs) % 2:
        return 1
    middle = len(diffs) // 2
    return diffs[middle] - diffs[middle - 1] + 1


def finger_count(finger: int, limit: int) -> int:
    """Last count reached before the given finger is used for the (limit + 1)-th time."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    even = limit % 2 == 0
    match finger:
        case 1:
            return limit * 8
        case 2:
            return limit * 4 + (1 if even else 3)
        case 3:
            return limit * 4 + 2
        case 4:
            return limit * 4 + (3 if even else 1)
        case 5:
            return limit * 8 + 4
    raise ValueError(f"finger must be 1..5, not {finger}")


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """base ** exponent modulo modulus; an exponent of 0 always gives 1."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    if exponent == 0:
        return 1
    return pow(base, exponent, modulus)


def is_palindrome(number: int) -> bool:
    """Whether the decimal digits of number read the same both ways."""
    text = str(number)
    return text == text[::-1]


def next_prime_palindrome(n: int) -> int:
    """Smallest prime palindrome not below n, up to ten million."""
    if n < 1:
        raise ValueError("n must be positive")
    for candidate in range(max(n, 2), _PALINDROME_LIMIT + 1):
        if is_palindrome(candidate) and _is_prime(candidate):
            return candidate
    raise ValueError(f"no prime palindrome between {n} and {_PALINDROME_LIMIT}")


def trimmed_mean_difficulty(opinions: Iterable[int]) -> int:
    """Rounded mean after dropping the top and bottom 15 percent of opinions."""
    ordered = sorted(opinions)
    if not ordered:
        return 0
    trim = _round_half_away(len(ordered) * 0.15)
    kept = ordered[trim : len(ordered) - trim]
    return _round_half_away(sum(kept) / len(kept))


def repunit_gcd(a: int, b: int) -> str:
    """Greatest common divisor of the repunits with a and b ones, written out."""
    if a < 1 or b < 1:
        raise ValueError("lengths must be positive")
    return "1" * gcd(a, b)


def primes_between(low: int, high: int) -> list[int]:
    """All primes p with low <= p <= high, ascending."""
    if low < 1:
        raise ValueError("low must be positive")
    if high < 2:
        return []
    sieve = bytearray([1]) * (high + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, isqrt(high) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, high + 1, i)))
    return [i for i, flag in enumerate(sieve) if flag and i >= low]


def lcm(a: int, b: int) -> int:
    """Least common multiple of two positive integers."""
    if a < 1 or b < 1:
        raise ValueError("arguments must be positive")
    return a * b // gcd(a, b)


def pinary_count(n: int) -> int:
    """Count n-digit binary strings starting with 1 and with no two adjacent ones."""
    if n < 1:
        raise ValueError("n must be positive")
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def min_sugar_bags(n: int) -> int:
    """Fewest 5 kg and 3 kg bags making exactly n kg, or -1 if impossible."""
    if n < 0:
        raise ValueError("n must not be negative")
    fives = n // 5
    rest = n - 5 * fives
    count = fives
    while rest <= n:
        if rest % 3 == 0:
            return count + rest // 3
        rest += 5
        count -= 1
    return -1


def count_exact_power_of_two_factor(n: int, k: int) -> int:
    """Count of 1..n divisible by 2**k but not by 2**(k + 1)."""
    if n < 0 or k < 0:
        raise ValueError("n and k must not be negative")
    if k > _SHIFT_LIMIT:
        return 0
    return n // (1 << k) - n // (1 << (k + 1))