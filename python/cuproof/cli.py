"""Command line front end: setup, prove and verify"""

import argparse
import logging
import sys

from .constant import BLINDING_BITS, DEFAULT_BIT_LENGTH, FAST_TEST_BIT_LENGTH
from .rangeproof import cuproof_prove, cuproof_verify, cuproof_verify_with_range
from .rangeproof import load_proof, save_proof
from .setup import fast_test_setup, load_params, save_params, trusted_setup
from .utils import get_random_bits

logger = logging.getLogger(__name__)


def hex_to_int(s: str) -> int:
    """Parse a hex integer, with or without a `0x` prefix"""
    try:
        return int(s, 16)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid hex integer: {s!r}") from exc


def cmd_setup(args):
    if args.mode == "fast":
        params = fast_test_setup(args.bits or FAST_TEST_BIT_LENGTH)
    else:
        params = trusted_setup(args.bits or DEFAULT_BIT_LENGTH)

    save_params(args.params_path, params)
    print(f"Saved public parameters to {args.params_path}")
    return 0


def cmd_prove(args):
    g, h, n = load_params(args.params_path)

    # the blinding factor stays with the prover
    blinding = get_random_bits(BLINDING_BITS)
    logger.debug("Proving value in [%d, %d)", args.lower_bound, args.upper_bound)
    proof = cuproof_prove(args.value, blinding, args.lower_bound, args.upper_bound, g, h, n)

    save_proof(args.proof_path, proof)
    print(f"Saved proof to {args.proof_path}")
    return 0


def cmd_verify(args):
    g, h, n = load_params(args.params_path)
    proof = load_proof(args.proof_path)

    if args.lower is not None and args.upper is not None:
        ok = cuproof_verify_with_range(proof, g, h, n, args.lower, args.upper)
    else:
        ok = cuproof_verify(proof, g, h, n)

    print("VALID" if ok else "INVALID")
    return 0 if ok else 1


def build_parser():
    parser = argparse.ArgumentParser(
        prog="cuproof", description="Range proofs over an RSA group"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    setup = subparsers.add_parser("setup", help="Generate public parameters")
    setup.add_argument("mode", choices=["fast", "trusted"])
    setup.add_argument("params_path")
    setup.add_argument("--bits", type=int, help="Bit length of the modulus")
    setup.set_defaults(func=cmd_setup)

    prove = subparsers.add_parser("prove", help="Prove that a value lies in [a, b)")
    prove.add_argument("params_path")
    prove.add_argument("lower_bound", type=hex_to_int, metavar="a_hex")
    prove.add_argument("upper_bound", type=hex_to_int, metavar="b_hex")
    prove.add_argument("value", type=hex_to_int, metavar="v_hex")
    prove.add_argument("proof_path")
    prove.set_defaults(func=cmd_prove)

    verify = subparsers.add_parser("verify", help="Verify a proof")
    verify.add_argument("params_path")
    verify.add_argument("proof_path")
    verify.add_argument("--lower", type=hex_to_int, metavar="a_hex")
    verify.add_argument("--upper", type=hex_to_int, metavar="b_hex")
    verify.set_defaults(func=cmd_verify)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        return args.func(args)
    except (OSError, ValueError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
