"""Pedersen commitment over an RSA group"""

import gmpy2


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """
    Compute `base^exponent mod modulus` in `[0, modulus)`.

    A negative base or exponent is negated before exponentiation,
    it is not turned into a modular inverse.
    """
    if base < 0:
        base = -base
    if exponent < 0:
        exponent = -exponent
    return int(gmpy2.powmod(base, exponent, modulus))


def pedersen_commit(g: int, h: int, m: int, r: int, n: int) -> int:
    """
    Commit to `m` with blinding `r`: `g^m * h^r mod n`.

    `m` and `r` are not range checked. Commitments are additively
    homomorphic: `commit(m1, r1) * commit(m2, r2) == commit(m1 + m2, r1 + r2)`.
    """
    return mod_exp(g, m, n) * mod_exp(h, r, n) % n


class Pedersen:
    """
    Pedersen commitment scheme bound to a set of group parameters

    Args:
        g, h: generators of the RSA group Z_n^*
        n: RSA modulus
    """

    def __init__(self, g: int, h: int, n: int):
        self.g = g
        self.h = h
        self.n = n

    def commit(self, m: int, r: int) -> int:
        return pedersen_commit(self.g, self.h, m, r, self.n)

    def open(self, commitment: int, m: int, r: int) -> bool:
        """Check that `commitment` opens to `(m, r)`"""
        return self.commit(m, r) == commitment
