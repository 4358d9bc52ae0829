from .commitment import mod_exp, pedersen_commit
from .transcript import fiat_shamir
from .setup import GroupParameters, trusted_setup, fast_test_setup
from .rangeproof import (
    Cuproof,
    Proof,
    InnerProductProof,
    cuproof_prove,
    cuproof_verify,
    cuproof_verify_with_range,
    batch_verify,
)
