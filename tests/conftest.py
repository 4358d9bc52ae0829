import pytest

from cuproof.setup import fast_test_setup
from cuproof.rangeproof import cuproof_prove
from cuproof.utils import get_random_bits


@pytest.fixture(scope="session")
def params():
    return fast_test_setup()


@pytest.fixture(scope="session")
def valid_proof(params):
    g, h, n = params
    blinding = get_random_bits(256)

    return cuproof_prove(1337, blinding, 1000, 2000, g, h, n)
