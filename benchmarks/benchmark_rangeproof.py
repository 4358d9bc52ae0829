import time

from cuproof.setup import fast_test_setup, trusted_setup
from cuproof.rangeproof import cuproof_prove, cuproof_verify
from cuproof.utils import get_random_bits


def run(bit_length, fast=False):

    time_results = []

    start = time.time()
    if fast:
        g, h, n = fast_test_setup(bit_length)
    else:
        g, h, n = trusted_setup(bit_length)
    end = time.time() - start
    time_results.append(end)

    blinding = get_random_bits(256)

    start = time.time()
    proof = cuproof_prove(1337, blinding, 0, 2**32, g, h, n)
    end = time.time() - start
    time_results.append(end)

    start = time.time()
    assert cuproof_verify(proof, g, h, n)
    end = time.time() - start
    time_results.append(end)

    return time_results, len(proof.to_bytes())


if __name__ == "__main__":

    for bits in [512, 1024, 2048]:
        (setup_time, prove_time, verify_time), size = run(bits, fast=bits == 512)
        print(f"n = {bits} bits")
        print(f"  setup:  {setup_time:.2f}s")
        print(f"  prove:  {prove_time:.2f}s")
        print(f"  verify: {verify_time:.2f}s")
        print(f"  proof size: {size} bytes")
