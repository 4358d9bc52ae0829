"""Group parameter setup for the RSA-group range proof"""

import logging
import math
import random
from dataclasses import dataclass

import gmpy2

from .constant import (
    DEFAULT_BIT_LENGTH,
    FAST_TEST_BIT_LENGTH,
    FAST_TEST_SEED,
    MIN_BIT_LENGTH,
)
from .utils import decode_int, encode_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupParameters:
    """
    Public parameters shared by prover and verifier

    Args:
        g, h: generators of the RSA group Z_n^*
        n: RSA modulus `p * q`, its factorization is discarded by setup
    """

    g: int
    h: int
    n: int

    def __iter__(self):
        return iter((self.g, self.h, self.n))

    def to_bytes(self) -> bytes:
        return encode_int(self.g) + encode_int(self.h) + encode_int(self.n)

    @classmethod
    def from_bytes(cls, s: bytes):
        g, offset = decode_int(s)
        h, offset = decode_int(s, offset)
        n, offset = decode_int(s, offset)

        if offset != len(s):
            raise ValueError("Trailing data after group parameters")
        if g <= 0 or h <= 0 or n <= 1:
            raise ValueError("Group parameters must be positive")

        return GroupParameters(g, h, n)

    def to_hex(self) -> str:
        return self.to_bytes().hex()

    @classmethod
    def from_hex(cls, s: str):
        try:
            data = bytes.fromhex(s.strip())
        except ValueError as exc:
            raise ValueError("Group parameters are not a valid hexstring") from exc
        return cls.from_bytes(data)


def _random_prime(bits: int, rand: random.Random) -> int:
    # top two bits set so that the product of two such primes keeps full length
    while True:
        candidate = rand.getrandbits(bits) | (3 << (bits - 2)) | 1
        p = int(gmpy2.next_prime(candidate))
        if p.bit_length() == bits:
            return p


def _random_generator(n: int, rand: random.Random) -> int:
    # squares of units are quadratic residues, distinct from 0 and 1
    while True:
        r = rand.randrange(2, n - 1)
        if math.gcd(r, n) != 1:
            continue
        g = r * r % n
        if g not in (0, 1):
            return g


def _generate(bit_length: int, rand: random.Random) -> GroupParameters:
    if bit_length < MIN_BIT_LENGTH:
        raise ValueError(f"Modulus must be at least {MIN_BIT_LENGTH} bits")

    p_bits = bit_length // 2
    q_bits = bit_length - p_bits

    p = _random_prime(p_bits, rand)
    q = _random_prime(q_bits, rand)
    while q == p:
        q = _random_prime(q_bits, rand)

    n = p * q
    assert n.bit_length() == bit_length, "Modulus has unexpected bit length"

    g = _random_generator(n, rand)
    h = _random_generator(n, rand)
    while h == g:
        h = _random_generator(n, rand)

    return GroupParameters(g, h, n)


def trusted_setup(bit_length: int = DEFAULT_BIT_LENGTH) -> GroupParameters:
    """
    Generate fresh group parameters with an RSA modulus of `bit_length` bits.

    The primes are drawn from the system CSPRNG and dropped once `n` is
    formed, so the caller is trusted to not have kept them.
    """
    logger.info("Running trusted setup for a %d-bit modulus", bit_length)
    return _generate(bit_length, random.SystemRandom())


def fast_test_setup(bit_length: int = FAST_TEST_BIT_LENGTH) -> GroupParameters:
    """
    Cheap reproducible parameters for testing.

    Drawn from a fixed-seed PRNG, anyone can recompute the factorization
    of `n`. Never use these outside tests.
    """
    logger.info("Running fast test setup for a %d-bit modulus", bit_length)
    return _generate(bit_length, random.Random(FAST_TEST_SEED))


def save_params(path, params: GroupParameters):
    with open(path, "w", encoding="utf-8") as f:
        f.write(params.to_hex() + "\n")


def load_params(path) -> GroupParameters:
    with open(path, "r", encoding="utf-8") as f:
        return GroupParameters.from_hex(f.read())
