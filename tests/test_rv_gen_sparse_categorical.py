from collections import Counter

import pytest

from pyLexBayes.rv_gen_sparse_categorical import Sampler_SparseCategorical, SparseCategorical
from pyLexBayes.util_errors import InvalidArgumentError


def test_concentrated_counts() -> None:
    inst = Sampler_SparseCategorical(set_seed=20261019)
    sparse_cat = inst.sampler({0: 1000}, 0.1, 0.5)
    assert list(sparse_cat.W.keys()) == [0]
    assert sparse_cat[0] > 0.5

def test_pruned_keys_dropped() -> None:
    inst = Sampler_SparseCategorical(set_seed=20261019)
    for _ in range(50):
        sparse_cat = inst.sampler(Counter({0: 1000, 4: 1}), 0.1, 0.5)
        assert list(sparse_cat.W.keys()) == [0]
        assert sparse_cat.total_mass() < 1.0
        assert sparse_cat[4] == 0.0
        assert 4 not in sparse_cat

def test_floor_invariant() -> None:
    inst = Sampler_SparseCategorical(set_seed=20261019)
    counts = Counter([0, 0, 0, 3, 3, 7, 9, 9, 9, 9])
    for floor in [0.0, 0.01, 0.2]:
        for sparse_cat in inst.sampler_iter(30, counts, 0.5, floor):
            assert all(floor < p <= 1.0 for _, p in sparse_cat.items())
            assert sparse_cat.total_mass() <= 1.0 + 1e-12
            assert all(0 <= i < 10 for i, _ in sparse_cat.items())

def test_zero_floor_keeps_full_support() -> None:
    inst = Sampler_SparseCategorical(set_seed=20261019)
    sparse_cat = inst.sampler({1: 3, 4: 2}, 1.0, 0.0)
    assert len(sparse_cat) == 5
    assert sparse_cat.total_mass() == pytest.approx(1.0, rel=1e-9)

def test_explicit_dim() -> None:
    inst = Sampler_SparseCategorical(set_seed=20261019)
    sparse_cat = inst.sampler({1: 3}, 1.0, 0.0, dim=8)
    assert len(sparse_cat) == 8
    assert len(sparse_cat.to_dense(8)) == 8
    with pytest.raises(InvalidArgumentError):
        inst.sampler({5: 3}, 1.0, 0.0, dim=5)

@pytest.mark.parametrize("counts, alpha, floor", [
    ({}, 1.0, 0.1),
    ({0: 1}, 0, 0.1),
    ({0: 1}, -1.0, 0.1),
    ({0: 1}, 1.0, 1.0),
    ({0: 1}, 1.0, -0.1),
    ({-1: 1}, 1.0, 0.1),
    ({0: -1}, 1.0, 0.1),
    ({0: 1}, float("inf"), 0.1),
])
def test_invalid_arguments(counts, alpha, floor) -> None:
    inst = Sampler_SparseCategorical(set_seed=1)
    with pytest.raises(InvalidArgumentError):
        inst.sampler(counts, alpha, floor)

def test_sparse_categorical_container() -> None:
    sparse_cat = SparseCategorical({0: 0.6, 3: 0.3})
    assert sparse_cat[3] == 0.3
    assert sparse_cat[1] == 0.0
    assert sparse_cat.to_dense(5) == [0.6, 0.0, 0.0, 0.3, 0.0]
    assert sparse_cat.total_mass() == pytest.approx(0.9)
    assert len(SparseCategorical()) == 0

def test_tiny_pseudocount() -> None:
    inst = Sampler_SparseCategorical(set_seed=20261019)
    for _ in range(20):
        sparse_cat = inst.sampler({0: 5, 3: 1}, 1e-8, 0.01)
        assert 0 in sparse_cat
        assert set(sparse_cat.W.keys()) <= {0, 3}
        assert sparse_cat.total_mass() <= 1.0 + 1e-12
