#!/usr/bin/env python3
"""
Prime table sizes for open addressing.
"""


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def prime_at_least(n: int) -> int:
    """the smallest prime >= n"""
    if n <= 2:
        return 2
    if n % 2 == 0:
        n += 1
    while not is_prime(n):
        n += 2
    return n


def next_prime(n: int) -> int:
    """the smallest prime strictly greater than n"""
    return prime_at_least(n + 1)
