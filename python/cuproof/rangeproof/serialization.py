from dataclasses import dataclass, fields
from typing import Tuple

from ..utils import decode_int, encode_int


@dataclass(frozen=True)
class InnerProductProof:
    """Intermediate commitments of the folding rounds, one (L, R) pair per round"""

    L: Tuple[int, ...]
    R: Tuple[int, ...]

    def to_bytes(self) -> bytes:
        assert len(self.L) == len(self.R), "Length of L and R must be equal"

        s = int.to_bytes(len(self.L), 8, "little")
        for L, R in zip(self.L, self.R):
            s += encode_int(L)
            s += encode_int(R)

        return s

    @classmethod
    def from_bytes(cls, s: bytes, offset: int = 0):
        """
        Parse InnerProductProof from serialized bytes starting at `offset`.

        Returns the proof and the offset just past it.
        """
        if len(s) < offset + 8:
            raise ValueError("Truncated inner product proof")

        rounds = int.from_bytes(s[offset : offset + 8], "little")
        offset += 8

        Ls = []
        Rs = []
        for _ in range(rounds):
            L, offset = decode_int(s, offset)
            R, offset = decode_int(s, offset)
            Ls.append(L)
            Rs.append(R)

        return InnerProductProof(tuple(Ls), tuple(Rs)), offset


@dataclass(frozen=True)
class Proof:
    """
    Range proof emitted by the prover and consumed by the verifier.

    Attributes:
        A, S: commitments to the bit vector and to the blinding vectors
        C: commitment to the value
        C_v1, C_v2: commitments to `value - lower_bound` and `upper_bound - 1 - value`
        T1, T2: commitments to `t1`, `t2`
        t0, t1, t2: coefficients of `t(X) = t0 + t1*X + t2*X^2`
        tau1, tau2, tau_x: blinding factors of `T1`, `T2` and of `t(x)`
        t_hat: evaluation of `t(X)` at the challenge `x`
        ipp_proof: folding rounds of the inner product argument
    """

    A: int
    S: int
    C: int
    C_v1: int
    C_v2: int
    T1: int
    T2: int
    t0: int
    t1: int
    t2: int
    tau1: int
    tau2: int
    tau_x: int
    t_hat: int
    ipp_proof: InnerProductProof

    def __str__(self):
        lines = []
        for f in fields(self):
            if f.name == "ipp_proof":
                continue
            lines.append(f"{f.name} = {getattr(self, f.name)}")
        lines.append(f"ipp_proof.L = {list(self.ipp_proof.L)}")
        lines.append(f"ipp_proof.R = {list(self.ipp_proof.R)}")
        return "\n".join(lines)

    def scalars(self):
        """Integer fields in serialization order"""
        return [getattr(self, f.name) for f in fields(self) if f.name != "ipp_proof"]

    def to_bytes(self) -> bytes:
        """Return bytes representation of the Proof"""
        s = b""
        for value in self.scalars():
            s += encode_int(value)
        s += self.ipp_proof.to_bytes()

        return s

    @classmethod
    def from_bytes(cls, s: bytes):
        """Parse Proof from serialized bytes"""
        names = [f.name for f in fields(cls) if f.name != "ipp_proof"]

        values = {}
        offset = 0
        for name in names:
            values[name], offset = decode_int(s, offset)

        ipp_proof, offset = InnerProductProof.from_bytes(s, offset)

        if offset != len(s):
            raise ValueError("Trailing data after proof")

        return Proof(ipp_proof=ipp_proof, **values)

    def to_hex(self) -> str:
        return self.to_bytes().hex()

    @classmethod
    def from_hex(cls, s: str):
        try:
            data = bytes.fromhex(s.strip())
        except ValueError as exc:
            raise ValueError("Proof is not a valid hexstring") from exc
        return cls.from_bytes(data)


def save_proof(path, proof: Proof):
    with open(path, "w", encoding="utf-8") as f:
        f.write(proof.to_hex() + "\n")


def load_proof(path) -> Proof:
    with open(path, "r", encoding="utf-8") as f:
        return Proof.from_hex(f.read())
