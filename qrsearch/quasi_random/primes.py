from typing import List


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    divisor = 3
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 2
    return True


def next_prime(n: int) -> int:
    """Smallest prime greater than or equal to n"""
    candidate = max(n, 2)
    while not is_prime(candidate):
        candidate += 1
    return candidate


def first_primes(count: int) -> List[int]:
    primes = []
    candidate = 2
    while len(primes) < count:
        if is_prime(candidate):
            primes.append(candidate)
        candidate += 1
    return primes
