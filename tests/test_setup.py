import math

import gmpy2
import pytest

from cuproof.setup import (
    GroupParameters,
    fast_test_setup,
    load_params,
    save_params,
    trusted_setup,
)


def check_params(params, bit_length):
    g, h, n = params

    assert n.bit_length() == bit_length
    assert not gmpy2.is_prime(n)
    assert g % n not in (0, 1)
    assert h % n not in (0, 1)
    assert g != h
    assert math.gcd(g, n) == 1 and math.gcd(h, n) == 1


def test_fast_test_setup(params):

    check_params(params, 512)

    # reproducible
    assert fast_test_setup() == params


def test_fast_test_setup_bit_length():

    check_params(fast_test_setup(128), 128)


def test_trusted_setup():

    params = trusted_setup(256)
    check_params(params, 256)

    assert trusted_setup(256) != params


def test_trusted_setup_odd_bit_length():

    check_params(trusted_setup(129), 129)


def test_setup_too_small():

    with pytest.raises(ValueError):
        trusted_setup(32)

    with pytest.raises(ValueError):
        fast_test_setup(16)


def test_params_serialization(params):

    assert GroupParameters.from_bytes(params.to_bytes()) == params
    assert GroupParameters.from_hex(params.to_hex()) == params

    with pytest.raises(ValueError):
        GroupParameters.from_bytes(params.to_bytes() + b"\x00")

    with pytest.raises(ValueError):
        GroupParameters.from_bytes(params.to_bytes()[:-1])

    with pytest.raises(ValueError):
        GroupParameters.from_hex("not hex")


def test_save_load_params(params, tmp_path):

    path = tmp_path / "params.txt"
    save_params(path, params)

    assert load_params(path) == params
