"""Runs repeated sketch experiments over random streams and writes CSV results."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike

from hllbench.checkpoints import build_checkpoints
from hllbench.hashing import HashFuncGen
from hllbench.hyperloglog import HyperLogLog, PackedHyperLogLog
from hllbench.stream import RandomStream

__all__ = [
    "Variant",
    "ExperimentConfig",
    "Point",
    "StepStats",
    "make_sketch",
    "iter_points",
    "summarize",
    "run_experiment",
]

_MASK64 = (1 << 64) - 1

POINTS_HEADER = "run,step,seen,F0,Nt"
STATS_HEADER = "step,seen,meanNt,stdNt"


class Variant(enum.Enum):
    """Which sketch the experiment measures."""

    STANDARD = "standard"
    IMPROVED = "improved"


@dataclass(frozen=True)
class ExperimentConfig:
    """Parameters of one experiment."""

    b: int = 12
    stream_size: int = 100000
    runs: int = 20
    step_percent: int = 5
    base_seed: int = 12345
    hash_seed_base: int = 999


@dataclass(frozen=True)
class Point:
    """Exact and estimated distinct counts at one checkpoint of one run."""

    run: int
    step: int
    seen: int
    f0: int
    nt: float


@dataclass(frozen=True)
class StepStats:
    """Mean and standard deviation of estimates at one checkpoint."""

    step: int
    seen: int
    mean: float
    std: float


def make_sketch(variant: Variant, b: int, hash_seed: int) -> HyperLogLog | PackedHyperLogLog:
    """Create the sketch for ``variant`` with a hash drawn from ``hash_seed``."""
    generator = HashFuncGen(hash_seed & _MASK64)
    if variant is Variant.STANDARD:
        return HyperLogLog(b, generator.make())
    return PackedHyperLogLog(b, generator.make64())


def iter_points(config: ExperimentConfig, variant: Variant = Variant.STANDARD) -> Iterator[Point]:
    """Yield a point for every checkpoint of every run, in run order."""
    checkpoints = build_checkpoints(config.stream_size, config.step_percent)
    for run in range(config.runs):
        stream = RandomStream((config.base_seed + run) & _MASK64, config.stream_size)
        sketch = make_sketch(variant, config.b, config.hash_seed_base + run)
        exact: set[str] = set()
        pending = iter(enumerate(checkpoints))
        target = next(pending, None)
        for seen, item in enumerate(stream, start=1):
            exact.add(item)
            sketch.add(item)
            if target is not None and seen == target[1]:
                yield Point(run, target[0], seen, len(exact), sketch.estimate())
                target = next(pending, None)


def summarize(points: Iterable[Point], checkpoints: list[int], runs: int) -> list[StepStats]:
    """Aggregate points into per-checkpoint mean and population standard deviation."""
    if runs <= 0:
        raise ValueError("runs must be positive")
    sums = [0.0] * len(checkpoints)
    squares = [0.0] * len(checkpoints)
    for point in points:
        sums[point.step] += point.nt
        squares[point.step] += point.nt * point.nt

    stats = []
    for step, (seen, total, total_sq) in enumerate(zip(checkpoints, sums, squares)):
        mean = total / runs
        variance = max(total_sq / runs - mean * mean, 0.0)
        stats.append(StepStats(step, seen, mean, math.sqrt(variance)))
    return stats


def _fmt(value: float) -> str:
    return format(value, "g")


def run_experiment(
    config: ExperimentConfig,
    points_path: str | PathLike[str],
    stats_path: str | PathLike[str],
    variant: Variant = Variant.STANDARD,
) -> list[StepStats]:
    """Run the experiment, writing per-run points and per-step stats as CSV."""
    if config.runs <= 0:
        raise ValueError("runs must be positive")
    checkpoints = build_checkpoints(config.stream_size, config.step_percent)

    with open(points_path, "w", encoding="utf-8") as points_file, open(
        stats_path, "w", encoding="utf-8"
    ) as stats_file:
        points_file.write(POINTS_HEADER + "\n")
        stats_file.write(STATS_HEADER + "\n")

        collected = []
        for point in iter_points(config, variant):
            points_file.write(
                f"{point.run},{point.step},{point.seen},{point.f0},{_fmt(point.nt)}\n"
            )
            collected.append(point)

        stats = summarize(collected, checkpoints, config.runs)
        for row in stats:
            stats_file.write(f"{row.step},{row.seen},{_fmt(row.mean)},{_fmt(row.std)}\n")
    return stats