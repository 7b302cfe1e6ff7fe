__all__ = [
    'Context', 'PushesAndPops',
    'is_prime', 'next_prime', 'prime_at_least',
]

from .containers import Context, PushesAndPops
from .primes import is_prime, next_prime, prime_at_least
