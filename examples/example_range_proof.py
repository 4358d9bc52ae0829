"""
Prove that v is in range of [a, b) without revealing the value of v itself
using Pedersen commitments over an RSA group
"""

from cuproof import Cuproof
from cuproof.utils import get_random_bits

cuproof = Cuproof()
cuproof.setup(fast=True)

lower_bound = 18
upper_bound = 130

# secret value v and its blinding factor
value = 42
blinding = get_random_bits(256)

proof = cuproof.prove(value, blinding, lower_bound, upper_bound)
assert cuproof.verify(proof)
print(f"Proof is valid: {value} is in [{lower_bound}, {upper_bound})")

# invalid secret value v
value = 7

proof = cuproof.prove(value, blinding, lower_bound, upper_bound)
assert not cuproof.verify(proof)
print(f"Proof is invalid: {value} is not in [{lower_bound}, {upper_bound})")
