import random

import pytest

from hllbench.hashing import Hash32, Hash64
from hllbench.hyperloglog import (
    HyperLogLog,
    PackedHyperLogLog,
    PackedRegisters,
    alpha_m,
    estimate_from_registers,
    rho,
)


def test_rho_of_zero_is_max():
    assert rho(0, 32, 33) == 33
    assert rho(0, 64, 53) == 53


@pytest.mark.parametrize("k", range(32))
def test_rho_counts_leading_zeros(k):
    assert rho(1 << k, 32, 33) == 32 - k


def test_rho_is_capped():
    assert rho(1, 64, 10) == 10
    assert rho(1 << 63, 64, 10) == 1


def test_alpha_constants():
    assert alpha_m(16) == 0.673
    assert alpha_m(32) == 0.697
    assert alpha_m(64) == 0.709


def test_alpha_grows_towards_limit():
    assert alpha_m(128) < alpha_m(4096) < 0.7213


def test_estimate_of_empty_registers_is_zero():
    assert estimate_from_registers([0] * 64) == 0.0


def test_estimate_grows_with_filled_registers():
    few = estimate_from_registers([1] * 4 + [0] * 60)
    more = estimate_from_registers([1] * 20 + [0] * 44)
    assert 0.0 < few < more


def test_estimate_requires_registers():
    with pytest.raises(ValueError):
        estimate_from_registers([])


def test_packed_registers_length_and_initial_zero():
    regs = PackedRegisters(4096)
    assert len(regs) == 4096
    assert all(v == 0 for v in regs)


@pytest.mark.parametrize("index", [9, 10, 11, 20, 21, 22, 31, 32])
def test_packed_registers_boundaries_do_not_leak(index):
    regs = PackedRegisters(64)
    regs[index] = 63
    values = list(regs)
    assert values[index] == 63
    assert sum(values) == 63


def test_packed_registers_match_list_model():
    rng = random.Random(7)
    regs = PackedRegisters(200)
    model = [0] * 200
    for _ in range(2000):
        i = rng.randrange(200)
        v = rng.randrange(64)
        regs[i] = v
        model[i] = v
    assert list(regs) == model


def test_packed_registers_mask_value():
    regs = PackedRegisters(8)
    regs[3] = 64 + 5
    assert regs[3] == 5
    assert regs[-5] == 5


def test_packed_registers_index_error():
    regs = PackedRegisters(8)
    regs[7] = 9
    with pytest.raises(IndexError):
        regs[8]
    with pytest.raises(IndexError):
        regs[8] = 1
    assert list(regs) == [0] * 7 + [9]


@pytest.mark.parametrize(
    "factory",
    [lambda: HyperLogLog(12, Hash32(12345)), lambda: PackedHyperLogLog(12, Hash64(12345))],
)
def test_sketch_accuracy(factory):
    sketch = factory()
    assert sketch.m() == 4096
    assert sketch.estimate() == 0.0
    for i in range(5000):
        sketch.add(f"item-{i}")
    estimate = sketch.estimate()
    assert abs(estimate - 5000) / 5000 < 0.1


@pytest.mark.parametrize(
    "factory",
    [lambda: HyperLogLog(8, Hash32(3)), lambda: PackedHyperLogLog(8, Hash64(3))],
)
def test_duplicates_do_not_change_estimate(factory):
    sketch = factory()
    for i in range(300):
        sketch.add(f"v{i}")
    before = sketch.estimate()
    for i in range(300):
        sketch.add(f"v{i}")
    assert sketch.estimate() == before


def test_invalid_b_rejected():
    with pytest.raises(ValueError):
        HyperLogLog(33, Hash32(1))
    with pytest.raises(ValueError):
        PackedHyperLogLog(-1, Hash64(1))


def test_standard_registers_bounded():
    sketch = HyperLogLog(4, Hash32(9))
    for i in range(1000):
        sketch.add(str(i))
    assert all(0 < r <= 33 for r in sketch.registers)