import hashlib


class FiatShamirTranscript:
    """
    Running hash of a public transcript.

    Integers are absorbed as their base-10 text with no separators,
    and challenges are read back as unsigned big-endian integers.
    """

    def __init__(self, label: bytes = b"", alg="sha256"):
        self.alg = alg
        self.label = label
        self.hasher = hashlib.new(alg, label)

    def reset(self):
        self.hasher = hashlib.new(self.alg, self.label)

    def append(self, data):

        if isinstance(data, bytes):
            self.hasher.update(data)
        elif isinstance(data, str):
            self.hasher.update(data.encode())
        elif isinstance(data, int) and not isinstance(data, bool):
            self.hasher.update(str(data).encode())
        elif isinstance(data, (list, tuple)):
            for d in data:
                self.append(d)
        else:
            raise TypeError(f"Type of {type(data)} is not supported as transcript")

    def get_challenge(self) -> bytes:
        digest = self.hasher.digest()
        return digest

    def get_challenge_scalar(self) -> int:
        return int.from_bytes(self.get_challenge(), "big")


def fiat_shamir(inputs) -> int:
    """
    Derive a challenge from an ordered sequence of integers.

    The result is not reduced; callers reduce it modulo the group
    modulus and check it against zero themselves.
    """
    transcript = FiatShamirTranscript()
    for value in inputs:
        transcript.append(value)
    return transcript.get_challenge_scalar()
