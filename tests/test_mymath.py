import os
import sys

import pytest

# Add the project root to sys.path to resolve module imports correctly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config import MAX_ID
from core_logic import NoInverseExists
from mymath import extended_gcd, generate_parameters, generate_prime, is_probable_prime, mod_inverse


def test_extended_gcd():
    """Tests that the Bezout coefficients reproduce the gcd."""
    for a, b in [(240, 46), (17, 2**31), (2**31, 17), (0, 5), (12, 18)]:
        g, x, y = extended_gcd(a, b)
        assert a * x + b * y == g
    assert extended_gcd(240, 46)[0] == 2


def test_mod_inverse_known_value():
    assert mod_inverse(309779747, 2**31) == 49560203
    assert mod_inverse(1580030173, 2**31) == 59260789


def test_mod_inverse_small_moduli():
    assert mod_inverse(3, 11) == 4
    assert mod_inverse(10, 17) == 12
    # Inputs larger than the modulus are reduced first
    assert mod_inverse(14, 11) == 4


def test_mod_inverse_in_range():
    for a in (1, 3, 5, 7, 2**31 - 1):
        x = mod_inverse(a, 2**31)
        assert 0 <= x < 2**31
        assert (a * x) % 2**31 == 1


def test_mod_inverse_missing():
    """Tests that non-coprime inputs raise instead of returning garbage."""
    with pytest.raises(NoInverseExists):
        mod_inverse(2, 2**31)
    with pytest.raises(NoInverseExists):
        mod_inverse(6, 9)
    with pytest.raises(NoInverseExists):
        mod_inverse(3, 1)


def test_is_probable_prime():
    primes = [2, 3, 5, 37, 41, 309779747, 1580030173, 2147483647]
    composites = [0, 1, 4, 9, 561, 1105, 2147483649, 3215031751]
    for p in primes:
        assert is_probable_prime(p), p
    for c in composites:
        assert not is_probable_prime(c), c


def test_generate_prime():
    for _ in range(5):
        p = generate_prime()
        assert 2**30 <= p < MAX_ID
        assert is_probable_prime(p)


def test_generate_parameters():
    prime, inverse, rand = generate_parameters()
    assert is_probable_prime(prime)
    assert (prime * inverse) % (MAX_ID + 1) == 1
    assert 0 <= rand <= MAX_ID
