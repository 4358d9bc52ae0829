from ..commitment import Pedersen
from ..constant import IPP_ROUNDS
from ..transcript import fiat_shamir
from ..utils import get_random_int, inner_product, is_power_of_two, split_half
from .serialization import InnerProductProof


class InnerProductArgument:
    """
    Folding argument over two integer vectors of power-of-two length

    Each round commits the cross terms of the halves, derives a challenge
    `u` from the round commitments and folds the vectors, so that a
    vector of size `2^k` is reduced in `k` rounds.

    Args:
        pedersen: commitment scheme over the group parameters
    """

    def __init__(self, pedersen: Pedersen):
        self.pedersen = pedersen

    def prove(self, a: list, b: list) -> InnerProductProof:

        assert len(a) == len(b), "Length of a and b must be equal"
        assert is_power_of_two(len(a)), "Length of a and b must be a power of two"

        n = self.pedersen.n

        L_list = []
        R_list = []

        while len(a) != 1:
            a_low, a_hi = split_half(a)
            b_low, b_hi = split_half(b)

            c_L = inner_product(a_low, b_hi)
            c_R = inner_product(a_hi, b_low)

            L = self.pedersen.commit(c_L, get_random_int(n))
            R = self.pedersen.commit(c_R, get_random_int(n))

            L_list.append(L)
            R_list.append(R)

            u = fiat_shamir([L, R]) % n
            assert u != 0, "Folding challenge must be nonzero"

            # <a', b'> = u*<a_low, b_low> + u^2*c_L + c_R + u*<a_hi, b_hi>
            a = [u * lo + hi for lo, hi in zip(a_low, a_hi)]
            b = [lo + u * hi for lo, hi in zip(b_low, b_hi)]

        return InnerProductProof(tuple(L_list), tuple(R_list))


def verify_ipp_shape(proof, g: int, h: int, n: int) -> bool:
    """
    Structural check of the folding rounds of `proof.ipp_proof`.

    Only the round count is checked, the contents of `L` and `R` are
    not verified algebraically. The group parameters are accepted so
    that an algebraic check can be swapped in with the same signature.
    """
    ipp_proof = proof.ipp_proof
    if len(ipp_proof.L) != len(ipp_proof.R):
        return False
    return len(ipp_proof.L) == IPP_ROUNDS
