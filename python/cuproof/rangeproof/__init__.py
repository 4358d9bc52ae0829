"""
Range proof over an RSA group, made non-interactive with Fiat-Shamir
"""

from .protocol import Cuproof
from .prover import cuproof_prove
from .verifier import batch_verify, cuproof_verify, cuproof_verify_with_range
from .ipa import InnerProductArgument, verify_ipp_shape
from .serialization import InnerProductProof, Proof, load_proof, save_proof
