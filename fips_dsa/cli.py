# File: fips_dsa/cli.py
"""
Generate verifiable DSA domain parameters from the command line.

Behavior:
 - L <= 1024 runs the FIPS 186-2 search (N = 160, SHA-1).
 - L > 1024 runs the FIPS 186-3 search with --N (default 256) and --digest.
 - Output is JSON: hex p, q, g, the hex seed and the counter.

Usage:
    fips-dsa-params --L 1024
    fips-dsa-params --L 2048 --N 224 --digest sha256 --out params.json
    fips-dsa-params --L 3072 --generator verifiable --max-attempts 500

Exit codes: 0 success, 1 attempt budget exhausted or no generator found,
2 invalid arguments.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import constants
from .crypto.digests import digest_names
from .errors import GenerationExhaustedError, InvalidParameterError, NoGeneratorFoundError
from .generators.dsa_parameters import ParameterGenerator
from .generators.generator_g import GeneratorMethod
from .logger import get_logger
from .monitoring.metrics import start_metrics_server
from .prng import DigestRandomGenerator
from .utils.serialization import serialize_parameters

logger = get_logger("fips_dsa.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fips-dsa-params", description="Generate DSA domain parameters (FIPS 186-2/186-3)")
    parser.add_argument("--L", dest="l_bits", type=int, required=True, help="bit length of p")
    parser.add_argument("--N", dest="n_bits", type=int, default=None, help="bit length of q (default: 160 for L <= 1024, else 256)")
    parser.add_argument("--certainty", type=int, default=constants.DEFAULT_CERTAINTY, help="primality confidence")
    parser.add_argument("--digest", default=constants.DEFAULT_DIGEST, choices=digest_names(), help="digest for L > 1024")
    parser.add_argument(
        "--generator",
        default=GeneratorMethod.UNVERIFIABLE.value,
        choices=[m.value for m in GeneratorMethod],
        help="how g is derived",
    )
    parser.add_argument("--index", type=int, default=constants.DEFAULT_GENERATOR_INDEX, help="index for the verifiable generator")
    parser.add_argument("--max-attempts", type=int, default=None, help="seed attempt budget")
    parser.add_argument("--seed-material", default=None, help="hex seed for a reproducible run (deterministic generator)")
    parser.add_argument("--out", type=Path, default=None, help="write JSON here instead of stdout")
    parser.add_argument("--metrics-port", type=int, default=None, help="expose Prometheus metrics on this port")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.metrics_port is not None:
        start_metrics_server(args.metrics_port)

    random = None
    if args.seed_material is not None:
        try:
            random = DigestRandomGenerator(bytes.fromhex(args.seed_material))
        except ValueError:
            print("--seed-material must be hex", file=sys.stderr)
            return 2

    options = dict(
        digest=args.digest,
        generator_method=args.generator,
        generator_index=args.index,
        max_attempts=args.max_attempts,
    )
    try:
        if args.n_bits is None:
            if args.l_bits <= constants.LEGACY_MAX_L:
                gen = ParameterGenerator.for_strength(args.l_bits, args.certainty, random, **options)
            else:
                gen = ParameterGenerator.for_lengths(
                    args.l_bits, constants.EXTENDED_DEFAULT_N, args.certainty, random, **options
                )
        else:
            gen = ParameterGenerator.for_lengths(args.l_bits, args.n_bits, args.certainty, random, **options)
    except InvalidParameterError as e:
        print(f"invalid parameters: {e}", file=sys.stderr)
        return 2

    try:
        params = gen.generate_parameters()
    except (GenerationExhaustedError, NoGeneratorFoundError) as e:
        logger.error("parameter generation failed", extra={"reason": str(e)})
        print(str(e), file=sys.stderr)
        return 1

    data = serialize_parameters(params, indent=2)
    if args.out is not None:
        args.out.write_bytes(data)
    else:
        print(data.decode("utf-8"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
