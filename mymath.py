"""
Number theory helpers for the obfuscation transform: modular inverses,
primality testing and generation of fresh transform parameters.
"""
import secrets

from config import MAX_ID
from core_logic import NoInverseExists

# Deterministic Miller-Rabin witnesses for every n < 3.3 * 10**24.
_MR_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """
    Extended Euclidean Algorithm.
    Returns (gcd, x, y) such that a*x + b*y = gcd.
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def mod_inverse(a: int, modulus: int) -> int:
    """
    Returns the unique x in [0, modulus) such that (a * x) % modulus == 1.
    Raises NoInverseExists when a and modulus are not coprime.
    """
    if modulus < 2:
        raise NoInverseExists(a, modulus)
    gcd, x, _ = extended_gcd(a % modulus, modulus)
    if gcd != 1:
        raise NoInverseExists(a, modulus)
    return x % modulus


def is_probable_prime(n: int) -> bool:
    """Miller-Rabin test, deterministic for all 64-bit inputs."""
    if n < 2:
        return False
    for p in _MR_BASES:
        if n % p == 0:
            return n == p

    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for a in _MR_BASES:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def generate_prime() -> int:
    """Picks a random prime in [2**30, MAX_ID)."""
    low = 2**30
    while True:
        candidate = (low + secrets.randbelow(MAX_ID - low)) | 1
        if candidate < MAX_ID and is_probable_prime(candidate):
            return candidate


def generate_parameters() -> tuple[int, int, int]:
    """Returns a fresh (prime, mod_inverse, random) triple."""
    prime = generate_prime()
    return prime, mod_inverse(prime, MAX_ID + 1), secrets.randbelow(MAX_ID + 1)
