import pytest

from cuproof.rangeproof import InnerProductProof, Proof, cuproof_verify, load_proof, save_proof
from cuproof.utils import decode_int, encode_int


def test_int_encoding():

    data = b""
    values = [0, 1, -1, 127, 128, -128, -129, 255, -256, 2**2048 + 17, -(2**4096)]
    for v in values:
        data += encode_int(v)

    offset = 0
    for v in values:
        decoded, offset = decode_int(data, offset)
        assert decoded == v

    assert offset == len(data)


def test_int_encoding_truncated():

    data = encode_int(2**100)

    with pytest.raises(ValueError):
        decode_int(data[:-1])

    with pytest.raises(ValueError):
        decode_int(data[:4])


def test_proof_serialization(params, valid_proof):
    g, h, n = params

    proof = Proof.from_bytes(valid_proof.to_bytes())

    assert proof == valid_proof
    assert isinstance(proof.ipp_proof, InnerProductProof)
    assert cuproof_verify(proof, g, h, n)

    assert Proof.from_hex(valid_proof.to_hex()) == valid_proof


def test_proof_serialization_malformed(valid_proof):
    data = valid_proof.to_bytes()

    with pytest.raises(ValueError):
        Proof.from_bytes(data + b"\x01")

    with pytest.raises(ValueError):
        Proof.from_bytes(data[:-3])

    with pytest.raises(ValueError):
        Proof.from_hex("zz")


def test_save_load_proof(valid_proof, tmp_path):

    path = tmp_path / "proof.txt"
    save_proof(path, valid_proof)

    assert load_proof(path) == valid_proof


def test_proof_str(valid_proof):

    s = str(valid_proof)

    assert f"t_hat = {valid_proof.t_hat}" in s
    assert "ipp_proof.L" in s
