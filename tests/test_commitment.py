import random

from cuproof.commitment import Pedersen, mod_exp, pedersen_commit


def test_mod_exp():

    assert mod_exp(3, 5, 101) == pow(3, 5, 101)
    assert mod_exp(2, 2**70, 2**61 - 1) == pow(2, 2**70, 2**61 - 1)

    # result lands in [0, modulus)
    assert mod_exp(1000, 1, 7) == 1000 % 7


def test_mod_exp_zero_exponent():

    for base in [1, 2, 1337, 2**521 - 1, -5]:
        assert mod_exp(base, 0, 101) == 1
    assert mod_exp(7, 0, 1) == 0


def test_mod_exp_negative_operands():

    # negated, not inverted
    assert mod_exp(-3, 5, 101) == pow(3, 5, 101)
    assert mod_exp(3, -5, 101) == pow(3, 5, 101)
    assert mod_exp(-3, -5, 101) == pow(3, 5, 101)
    assert mod_exp(3, -5, 101) != pow(3, -5, 101)


def test_commitment_in_range(params):
    g, h, n = params

    for _ in range(10):
        m = random.randint(0, 2**128)
        r = random.randint(0, n)
        c = pedersen_commit(g, h, m, r, n)
        assert 0 <= c < n

    assert pedersen_commit(g, h, 0, 0, n) == 1


def test_commitment_homomorphic(params):
    g, h, n = params

    m1, r1 = random.randint(0, n), random.randint(0, n)
    m2, r2 = random.randint(0, n), random.randint(0, n)

    c1 = pedersen_commit(g, h, m1, r1, n)
    c2 = pedersen_commit(g, h, m2, r2, n)

    assert c1 * c2 % n == pedersen_commit(g, h, m1 + m2, r1 + r2, n)


def test_commitment_hiding(params):
    g, h, n = params

    c1 = pedersen_commit(g, h, 42, random.randint(1, n), n)
    c2 = pedersen_commit(g, h, 42, random.randint(1, n), n)

    assert c1 != c2


def test_pedersen_open(params):
    g, h, n = params
    pedersen = Pedersen(g, h, n)

    commitment = pedersen.commit(1337, 7331)

    assert commitment == pedersen_commit(g, h, 1337, 7331, n)
    assert pedersen.open(commitment, 1337, 7331)
    assert not pedersen.open(commitment, 1338, 7331)
