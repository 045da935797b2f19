"""
A simple integer obfuscation module to prevent sequential scraping of database ids.

This uses a prime multiplication and XOR to permute integers within a 31-bit space
(Knuth's multiplicative hashing). It is not cryptographically secure but is more than
sufficient to make database IDs appear random and non-sequential.

CAUTION: keep prime, mod_inverse and random secret, and use the same triple
everywhere an encoded id has to be decoded.
"""
from functools import lru_cache

import config
from config import MAX_ID
from core_logic import InvalidModularInverse, NoInverseExists, OutOfRange, logger
from mymath import mod_inverse as calc_mod_inverse

# Multiplication happens modulo 2**31, so `& MAX_ID` and `% MODULUS` agree.
MODULUS = MAX_ID + 1


def _check_range(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= MAX_ID:
        raise OutOfRange(name, value)
    return value


class Transform:
    """
    Immutable prime / modular inverse / XOR mask triple with the encode and
    decode bijection over [0, MAX_ID].

    The primality of `prime` is not verified here. A non-prime that still has
    a valid inverse works, but picking a real prime is the caller's job.
    """

    __slots__ = ("_prime", "_mod_inverse", "_random")

    def __init__(self, prime: int, mod_inverse: int, random: int):
        _check_range("prime", prime)
        _check_range("mod_inverse", mod_inverse)
        _check_range("random", random)
        if (prime * mod_inverse) % MODULUS != 1:
            raise InvalidModularInverse(prime, mod_inverse)
        object.__setattr__(self, "_prime", prime)
        object.__setattr__(self, "_mod_inverse", mod_inverse)
        object.__setattr__(self, "_random", random)

    @classmethod
    def calculated(cls, prime: int, random: int) -> "Transform":
        """Builds a Transform, computing prime's inverse modulo 2**31."""
        _check_range("prime", prime)
        _check_range("random", random)
        if prime % 2 == 0:
            raise NoInverseExists(prime, MODULUS)
        return cls(prime, calc_mod_inverse(prime, MODULUS), random)

    @property
    def prime(self) -> int:
        return self._prime

    @property
    def mod_inverse(self) -> int:
        return self._mod_inverse

    @property
    def random(self) -> int:
        return self._random

    def encode(self, n: int) -> int:
        """Scrambles a sequential integer ID to make it appear random."""
        _check_range("id", n)
        return ((n * self._prime) % MODULUS) ^ self._random

    def decode(self, n: int) -> int:
        """Reverses the scrambling to retrieve the original sequential ID."""
        _check_range("id", n)
        return ((n ^ self._random) * self._mod_inverse) % MODULUS

    def __reduce__(self):
        return (Transform, (self._prime, self._mod_inverse, self._random))

    def __setattr__(self, name, value):
        raise AttributeError("Transform is immutable")

    def __delattr__(self, name):
        raise AttributeError("Transform is immutable")

    def __eq__(self, other):
        if not isinstance(other, Transform):
            return NotImplemented
        return (self._prime, self._mod_inverse, self._random) == (other._prime, other._mod_inverse, other._random)

    def __hash__(self):
        return hash((self._prime, self._mod_inverse, self._random))

    def __repr__(self):
        # Parameters are secret; don't leak them into logs or tracebacks.
        return "Transform(prime=***, mod_inverse=***, random=***)"


def new_transform(prime: int, mod_inverse: int, random: int) -> Transform:
    return Transform(prime, mod_inverse, random)


def new_transform_calculated(prime: int, random: int) -> Transform:
    return Transform.calculated(prime, random)


def encode(transform: Transform, n: int) -> int:
    return transform.encode(n)


def decode(transform: Transform, n: int) -> int:
    return transform.decode(n)


@lru_cache()
def get_transform() -> Transform:
    """
    Returns a cached, singleton Transform built from the configured parameters.
    Call get_transform.cache_clear() after changing the configuration.
    """
    settings = config.Config
    if settings.OBFUSCATION_MOD_INVERSE is None:
        transform = Transform.calculated(settings.OBFUSCATION_PRIME, settings.OBFUSCATION_RANDOM)
    else:
        transform = Transform(settings.OBFUSCATION_PRIME, settings.OBFUSCATION_MOD_INVERSE, settings.OBFUSCATION_RANDOM)
    logger.debug("Obfuscation transform initialised")
    return transform
