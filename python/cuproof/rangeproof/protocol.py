from ..constant import DEFAULT_BIT_LENGTH, FAST_TEST_BIT_LENGTH
from ..setup import GroupParameters, fast_test_setup, trusted_setup
from .prover import cuproof_prove
from .serialization import Proof
from .verifier import batch_verify, cuproof_verify, cuproof_verify_with_range


class Cuproof:
    """
    Range proof over an RSA group

    Args:
        params: `GroupParameters` from setup, generated on `setup()` if omitted
    """

    def __init__(self, params: GroupParameters = None):
        self.params = params

    def setup(self, bit_length: int = None, fast: bool = False):
        """Generate fresh `GroupParameters`"""
        if bit_length is None:
            bit_length = FAST_TEST_BIT_LENGTH if fast else DEFAULT_BIT_LENGTH

        if fast:
            self.params = fast_test_setup(bit_length)
        else:
            self.params = trusted_setup(bit_length)
        return self.params

    def prove(self, value: int, blinding: int, lower_bound: int, upper_bound: int) -> Proof:
        """
        Prove that `value` lies in `[lower_bound, upper_bound)`
        """
        assert self.params, "GroupParameters have not been generated"
        g, h, n = self.params
        return cuproof_prove(value, blinding, lower_bound, upper_bound, g, h, n)

    def verify(self, proof: Proof, lower_bound: int = None, upper_bound: int = None) -> bool:
        assert self.params, "GroupParameters have not been generated"
        g, h, n = self.params
        if lower_bound is None and upper_bound is None:
            return cuproof_verify(proof, g, h, n)
        return cuproof_verify_with_range(proof, g, h, n, lower_bound, upper_bound)

    def batch_verify(self, proofs: list) -> list:
        assert self.params, "GroupParameters have not been generated"
        g, h, n = self.params
        return batch_verify(proofs, g, h, n)
