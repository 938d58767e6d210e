"""Small number-theoretic helpers: totient, GCD, Josephus and bit counting."""

_WORD_MASK = (1 << 64) - 1


def euler_totient(n: int) -> int:
    """Return how many integers in ``1..n`` are co-prime with ``n``."""
    count = n
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            count -= count // divisor
            while n % divisor == 0:
                n //= divisor
        divisor += 1
    if n > 1:
        count -= count // n
    return count


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two non-negative integers."""
    while b:
        a, b = b, a % b
    return a


def josephus(n: int, k: int) -> int:
    """Return the 1-based starting position of the survivor.

    ``n`` people stand in a circle; repeatedly ``k - 1`` are skipped and the
    ``k``-th is removed.
    """
    if n < 1:
        raise ValueError("the circle must hold at least one person")
    position = 0
    for size in range(2, n + 1):
        position = (position + k) % size
    return position + 1


def count_set_bits(n: int) -> int:
    """Return the number of set bits of ``n`` as a 64-bit two's-complement word."""
    return bin(n & _WORD_MASK).count("1")