from collections import Counter

import pytest

from pyLexBayes.rv_gen_lexical import Sampler_LexicalWeights
from pyLexBayes.util_errors import InvalidArgumentError


def _call_sequence(inst):
    return [
        inst.uniform(),
        inst.sample_index(10),
        inst.sample_dense_categorical(4),
        inst.sample_dense_categorical_from_counts([3, 0, 1], 0.5),
        inst.sample_sparse_categorical(Counter({0: 5, 2: 1}), 0.1, 0.01).W,
        inst.sample_gamma(0.4, 2),
        inst.sample_gamma(6, 0.5),
        inst.sample_dirichlet([1, 1, 1]),
        inst.sample_from_categorical([0.2, 0.3, 0.5]),
        inst.sample_multinomial(20, [1, 1]),
    ]

def test_same_seed_same_sequence() -> None:
    assert _call_sequence(Sampler_LexicalWeights(set_seed=11)) == _call_sequence(Sampler_LexicalWeights(set_seed=11))

def test_default_seed_is_fixed() -> None:
    assert _call_sequence(Sampler_LexicalWeights()) == _call_sequence(Sampler_LexicalWeights(set_seed=1))

def test_components_share_one_generator() -> None:
    inst = Sampler_LexicalWeights(set_seed=5)
    assert inst.gamma_sampler.uniform_source is inst.uniform_source
    assert inst.categorical_sampler.uniform_source is inst.uniform_source
    assert inst.dirichlet_sampler.gamma_sampler is inst.gamma_sampler
    assert inst.sparse_categorical_sampler.dirichlet_sampler is inst.dirichlet_sampler

def test_outputs() -> None:
    inst = Sampler_LexicalWeights(set_seed=20261019)
    assert 0.0 <= inst.uniform() < 1.0
    assert 0 <= inst.sample_index(3) < 3
    assert sum(inst.sample_dense_categorical(6)) == pytest.approx(1.0, rel=1e-9)
    assert sum(inst.sample_dense_categorical_from_counts([4, 0, 0, 2], 0.1)) == pytest.approx(1.0, rel=1e-9)
    assert sum(inst.sample_dirichlet([0.5, 2, 7])) == pytest.approx(1.0, rel=1e-9)
    assert inst.sample_gamma(2, 3) > 0
    assert inst.sample_from_categorical([0, 0, 5]) == 2
    assert list(inst.sample_sparse_categorical({0: 1000}, 0.1, 0.5).W.keys()) == [0]

@pytest.mark.parametrize("method, args", [
    ("sample_index", (0,)),
    ("sample_dense_categorical", (-1,)),
    ("sample_dense_categorical_from_counts", ([], 1.0)),
    ("sample_dense_categorical_from_counts", ([1, 2], 0)),
    ("sample_sparse_categorical", ({}, 1.0, 0.1)),
    ("sample_sparse_categorical", ({0: 1}, 0, 0.1)),
    ("sample_sparse_categorical", ({0: 1}, 1.0, 1.0)),
    ("sample_gamma", (0, 1)),
    ("sample_gamma", (1, 0)),
    ("sample_dirichlet", ([],)),
    ("sample_from_categorical", ([],)),
    ("sample_multinomial", (3, [])),
])
def test_error_contract(method, args) -> None:
    inst = Sampler_LexicalWeights(set_seed=1)
    with pytest.raises(InvalidArgumentError):
        getattr(inst, method)(*args)

def test_failed_call_draws_nothing() -> None:
    inst1 = Sampler_LexicalWeights(set_seed=3)
    inst2 = Sampler_LexicalWeights(set_seed=3)
    with pytest.raises(InvalidArgumentError):
        inst1.sample_dirichlet([1, 2, 0])
    assert inst1.uniform() == inst2.uniform()
