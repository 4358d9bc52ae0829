"""Proving module of the range proof"""

from ..commitment import Pedersen
from ..constant import HALF_BITS, MAX_RANGE_WIDTH, MAX_RETRIES, MIN_BIT_LENGTH, RANGE_BITS
from ..transcript import fiat_shamir
from ..utils import get_random_int, inner_product, powers
from .ipa import InnerProductArgument
from .serialization import Proof


def _bits(v: int, size: int):
    return [(v >> i) & 1 for i in range(size)]


def delta(y: int, z: int) -> int:
    """(z - z^2) * <1, y^n> - z^3 * <1, 2^n>"""
    sum_y = sum(powers(y, RANGE_BITS))
    sum_2 = 2**RANGE_BITS - 1
    return (z - z * z) * sum_y - z * z * z * sum_2


def cuproof_prove(
    value: int,
    blinding: int,
    lower_bound: int,
    upper_bound: int,
    g: int,
    h: int,
    n: int,
) -> Proof:
    """
    Prove that `value` committed under `blinding` lies in `[lower_bound, upper_bound)`.

    The interval can be at most `2^32` wide. A value outside of it still
    produces a proof, which fails verification.
    """
    if n <= 1 or n.bit_length() < MIN_BIT_LENGTH:
        raise ValueError(f"Modulus must be at least {MIN_BIT_LENGTH} bits")
    if g % n in (0, 1) or h % n in (0, 1):
        raise ValueError("Generators must not be 0 or 1 modulo n")
    if g % n == h % n:
        raise ValueError("Generators must be distinct modulo n")
    if upper_bound <= lower_bound:
        raise ValueError("upper_bound must be greater than lower_bound")
    if upper_bound - lower_bound > MAX_RANGE_WIDTH:
        raise ValueError(f"Range must be at most 2^{HALF_BITS} wide")

    pedersen = Pedersen(g, h, n)

    # value - a and b - 1 - value, packed into the two halves of the bit vector
    v1 = value - lower_bound
    v2 = upper_bound - 1 - value
    w = v1 + MAX_RANGE_WIDTH * v2

    a_L = _bits(v1, HALF_BITS) + _bits(v2, HALF_BITS)
    a_R = [bit - 1 for bit in a_L]
    two_n = powers(2, RANGE_BITS)

    C = pedersen.commit(value, blinding)

    for _ in range(MAX_RETRIES):
        gamma1 = get_random_int(n)
        gamma2 = get_random_int(n)

        C_v1 = pedersen.commit(v1, gamma1)
        C_v2 = pedersen.commit(v2, gamma2)
        if len({C, C_v1, C_v2}) != 3:
            continue

        alpha = get_random_int(n)
        rho = get_random_int(n)
        s_L = [get_random_int(n) for _ in range(RANGE_BITS)]
        s_R = [get_random_int(n) for _ in range(RANGE_BITS)]

        A = pedersen.commit(inner_product(a_L, two_n), alpha)
        S = pedersen.commit(inner_product(s_L, two_n), rho)

        y = fiat_shamir([A, S, C, C_v1, C_v2]) % n
        z = fiat_shamir([y]) % n
        if y != 0 and z != 0:
            break
    else:
        raise ValueError("Could not derive nonzero challenges y, z")

    y_n = powers(y, RANGE_BITS)

    # l(X) = l_0 + l_1*X, r(X) = r_0 + r_1*X
    l_0 = [bit - z for bit in a_L]
    l_1 = s_L
    r_0 = [y_i * (bit + z) + z * z * p_i for y_i, bit, p_i in zip(y_n, a_R, two_n)]
    r_1 = [y_i * s for y_i, s in zip(y_n, s_R)]

    t1 = inner_product(l_0, r_1) + inner_product(l_1, r_0)
    t2 = inner_product(l_1, r_1)

    for _ in range(MAX_RETRIES):
        tau1 = get_random_int(n)
        tau2 = get_random_int(n)

        T1 = pedersen.commit(t1, tau1)
        T2 = pedersen.commit(t2, tau2)

        x = fiat_shamir([T1, T2]) % n
        if x != 0:
            break
    else:
        raise ValueError("Could not derive a nonzero challenge x")

    # equals <l_0, r_0> only when both halves of a_L reconstruct w
    t0 = z * z * w + delta(y, z)

    l_list = [a + b * x for a, b in zip(l_0, l_1)]
    r_list = [a + b * x for a, b in zip(r_0, r_1)]
    t_hat = inner_product(l_list, r_list)

    tau_x = tau2 * x * x + tau1 * x + z * z * (gamma1 + MAX_RANGE_WIDTH * gamma2)

    ipp_proof = InnerProductArgument(pedersen).prove(l_list, r_list)

    return Proof(
        A=A,
        S=S,
        C=C,
        C_v1=C_v1,
        C_v2=C_v2,
        T1=T1,
        T2=T2,
        t0=t0,
        t1=t1,
        t2=t2,
        tau1=tau1,
        tau2=tau2,
        tau_x=tau_x,
        t_hat=t_hat,
        ipp_proof=ipp_proof,
    )
