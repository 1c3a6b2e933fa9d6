"""Command line entry point for the sketch accuracy experiment."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from hllbench.experiment import ExperimentConfig, Variant, run_experiment

__all__ = ["main"]


def _parser() -> argparse.ArgumentParser:
    defaults = ExperimentConfig()
    parser = argparse.ArgumentParser(
        prog="hllbench",
        description="Measure HyperLogLog estimates against exact distinct counts.",
    )
    parser.add_argument("--bits", dest="b", type=int, default=defaults.b, help="index bits B")
    parser.add_argument("--stream-size", type=int, default=defaults.stream_size)
    parser.add_argument("--runs", type=int, default=defaults.runs)
    parser.add_argument("--step-percent", type=int, default=defaults.step_percent)
    parser.add_argument("--base-seed", type=int, default=defaults.base_seed)
    parser.add_argument("--hash-seed-base", type=int, default=defaults.hash_seed_base)
    parser.add_argument(
        "--variant",
        choices=[v.value for v in Variant],
        default=Variant.STANDARD.value,
    )
    parser.add_argument("--points", default="points.csv", help="per-run output file")
    parser.add_argument("--stats", default="stats.csv", help="per-step output file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the experiment and report where results were written."""
    args = _parser().parse_args(argv)
    config = ExperimentConfig(
        b=args.b,
        stream_size=args.stream_size,
        runs=args.runs,
        step_percent=args.step_percent,
        base_seed=args.base_seed,
        hash_seed_base=args.hash_seed_base,
    )
    run_experiment(config, args.points, args.stats, Variant(args.variant))
    print(f"Done. Files: {args.points}, {args.stats}")
    return 0