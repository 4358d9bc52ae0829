# Range width of the bit-decomposition, split into two halves of HALF_BITS
RANGE_BITS = 64
HALF_BITS = RANGE_BITS // 2

# ceil(log2(RANGE_BITS))
IPP_ROUNDS = (RANGE_BITS - 1).bit_length()

# Widest interval [a, b) a proof can cover
MAX_RANGE_WIDTH = 2**HALF_BITS

DEFAULT_BIT_LENGTH = 2048
FAST_TEST_BIT_LENGTH = 512
FAST_TEST_SEED = 0x6375_7072_6F6F_66
MIN_BIT_LENGTH = 64

# Size of the blinding factor drawn by the command line prover
BLINDING_BITS = 256

# Resampling attempts before the prover gives up on degenerate challenges
MAX_RETRIES = 64
