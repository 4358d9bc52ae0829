import os
import random


def get_random_int(n_max):
    """Get random integer in [1, n_max] range"""
    rand = random.SystemRandom()
    return rand.randint(1, n_max)


def get_random_bits(bits: int):
    """Get random non-negative integer of at most `bits` bits"""
    rand = random.SystemRandom()
    return rand.getrandbits(bits)


def get_n_jobs():
    """Get number of supported cores for multiprocessing if enabled"""
    check_env = os.environ.get("CUPROOF_PARALLEL_CPU")
    if check_env:
        return int(check_env)
    else:
        return -1


def split_half(data: list):
    """Split data into low and high halves"""
    mid_index = len(data) // 2
    return data[:mid_index], data[mid_index:]


def inner_product(a: list, b: list):
    """Inner product of two integer vectors, without reduction"""
    assert len(a) == len(b), "Length of vectors must be equal"
    return sum(x * y for x, y in zip(a, b))


def powers(base: int, n: int):
    """[base^0, base^1, ..., base^(n-1)]"""
    result = []
    acc = 1
    for _ in range(n):
        result.append(acc)
        acc *= base
    return result


def is_power_of_two(n):
    return n > 0 and (n & (n - 1)) == 0


def encode_int(value: int) -> bytes:
    """Length-prefixed (8 bytes, little endian) signed big-endian integer"""
    length = (value.bit_length() + 8) // 8
    return length.to_bytes(8, "little") + value.to_bytes(length, "big", signed=True)


def decode_int(s: bytes, offset: int = 0):
    """
    Read one integer written by `encode_int` starting at `offset`.

    Returns the integer and the offset just past it.
    """
    if len(s) < offset + 8:
        raise ValueError("Truncated integer length header")
    length = int.from_bytes(s[offset : offset + 8], "little")
    offset += 8
    if length == 0 or len(s) < offset + length:
        raise ValueError("Truncated integer body")
    value = int.from_bytes(s[offset : offset + length], "big", signed=True)
    return value, offset + length
