# hllbench

hllbench measures how well HyperLogLog estimates the number of distinct
elements in a stream. It produces reproducible streams of random strings,
feeds each stream both to a HyperLogLog sketch and to an exact set, and
records the estimate against the true count at evenly spaced checkpoints.

There are two sketch variants:

- **standard** (`HyperLogLog`): a 32-bit hash, one byte per register.
- **improved** (`PackedHyperLogLog`): a 64-bit hash, 6-bit registers packed
  into 64-bit words.

Both use the same estimator: the harmonic-mean estimate, with linear
counting when the estimate is small and some registers are still zero,
and the large-range correction for a 2^32 hash space.

## Installation

```
pip install .
```

## Command line

```
hllbench
```

With no options the experiment uses the standard variant and runs 20
streams of 100,000 strings each. It uses `B = 12`, which gives 4096
registers, and takes a checkpoint every 5% of the stream. The stream seeds
start at 12345 and the hash seeds start at 999; run `r` uses seed
`12345 + r` for its stream and `999 + r` for its hash. It writes two files
to the current directory and then prints `Done. Files: points.csv, stats.csv`:

- `points.csv` has the columns `run,step,seen,F0,Nt`. There is one row for
  each checkpoint of each run, giving the exact distinct count `F0` and the
  estimate `Nt`.
- `stats.csv` has the columns `step,seen,meanNt,stdNt`. It gives the mean
  and the population standard deviation of the estimate over all runs at
  each checkpoint.

Estimates are written in the shortest general form with six significant
digits (as `format(value, "g")`).

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--variant {standard,improved}` | `standard` | which sketch to measure |
| `--bits` | `12` | index bits `B`; the sketch has `2**B` registers |
| `--stream-size` | `100000` | strings per stream |
| `--runs` | `20` | number of streams |
| `--step-percent` | `5` | checkpoint spacing in percent of the stream |
| `--base-seed` | `12345` | seed of the first stream |
| `--hash-seed-base` | `999` | seed of the first hash generator |
| `--points` | `points.csv` | per-run output file |
| `--stats` | `stats.csv` | per-step output file |

## Library use

```python
from hllbench.hashing import HashFuncGen
from hllbench.hyperloglog import HyperLogLog, PackedHyperLogLog
from hllbench.stream import RandomStream

sketch = HyperLogLog(12, HashFuncGen(999).make())
for item in RandomStream(12345, 10_000):
    sketch.add(item)
print(sketch.estimate(), sketch.m())

packed = PackedHyperLogLog(12, HashFuncGen(999).make64())
```

To run a whole experiment from code:

```python
from hllbench.experiment import ExperimentConfig, Variant, run_experiment

config = ExperimentConfig(b=12, stream_size=100_000, runs=20, step_percent=5,
                          base_seed=12345, hash_seed_base=999)
stats = run_experiment(config, "points.csv", "stats.csv", Variant.IMPROVED)
```

`run_experiment` returns the list of `StepStats` it wrote. `iter_points`
yields the same `Point` rows that go to the points file, and `summarize`
turns them into `StepStats`, without writing any files. `make_sketch`
builds the sketch for a variant from a hash seed.

The modules:

- `hllbench.checkpoints`: `build_checkpoints(total, step_percent)` returns
  the increasing stream positions at which estimates are recorded, always
  ending with `total`.
- `hllbench.rng`: `MT19937_64`, the 64-bit Mersenne Twister, and
  `uniform_int(rng, low, high)`, an unbiased draw from an inclusive range.
- `hllbench.hashing`: `Hash32` and `Hash64`, seeded FNV-1a hashes with
  avalanche finalizers (`fmix32`, `fmix64`) over a string's UTF-8 bytes, and
  `HashFuncGen`, which draws non-zero hash seeds from a seeded engine.
- `hllbench.stream`: `RandomStream`, an iterator of strings of 1 to 30
  characters drawn from letters, digits and `-`.
- `hllbench.hyperloglog`: the two sketches, plus `PackedRegisters`, `rho`,
  `alpha_m` and `estimate_from_registers`.
- `hllbench.experiment` and `hllbench.cli`: the experiment and the command.

Streams and hash functions are seeded with the 64-bit Mersenne Twister, so
the same seeds give the same strings, hashes and results every time.