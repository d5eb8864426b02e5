from math import isfinite

from pyLexBayes.rv_gen_dirichlet import Sampler_Dirichlet
from pyLexBayes.util_errors import InvalidArgumentError


class SparseCategorical:
    "index -> probability, entries at or below the floor are left out"
    def __init__(self, W=None):
        if W is None:
            W = {}
        self.W = W

    def __getitem__(self, idx):
        return self.W.get(idx, 0.0)

    def __contains__(self, idx):
        return idx in self.W

    def __len__(self):
        return len(self.W)

    def __repr__(self):
        return "SparseCategorical(" + repr(self.W) + ")"

    def items(self):
        return self.W.items()

    def total_mass(self):
        # < 1 whenever some entry was pruned
        return sum(self.W.values())

    def to_dense(self, dim: int) -> list:
        dense = [0.0 for _ in range(dim)]
        for i, p_i in self.W.items():
            dense[i] = p_i
        return dense


class Sampler_SparseCategorical:
    def __init__(self, set_seed=None, dirichlet_sampler=None):
        if dirichlet_sampler is None:
            dirichlet_sampler = Sampler_Dirichlet(set_seed)
        self.dirichlet_sampler = dirichlet_sampler

    def _parameter_support_checker(self, counts, alpha, floor, dim):
        if len(counts)==0:
            raise InvalidArgumentError("counts should have at least one key")
        for key, cnt in counts.items():
            if key<0:
                raise InvalidArgumentError("keys of counts should be >=0")
            if cnt<0:
                raise InvalidArgumentError("counts should be >=0")
        if not (alpha>0 and isfinite(alpha)):
            raise InvalidArgumentError("alpha should be >0 and finite")
        if not 0<=floor<1:
            raise InvalidArgumentError("floor should be in [0,1)")
        if dim is not None and dim <= max(counts.keys()):
            raise InvalidArgumentError("dim should be larger than every key of counts")

    def sampler(self, counts, alpha, floor, dim=None) -> SparseCategorical:
        """
        counts: mapping index -> count (e.g. collections.Counter)
        draws from dirichlet(counts + alpha) over {0,...,dim-1} and keeps p_i > floor.
        dim defaults to max(counts)+1; the dense alpha vector costs O(dim) memory.
        """
        self._parameter_support_checker(counts, alpha, floor, dim)
        if dim is None:
            dim = max(counts.keys()) + 1

        alpha_param = [alpha for _ in range(dim)]
        for key, cnt in counts.items():
            alpha_param[key] += cnt
        dist = self.dirichlet_sampler.sampler(alpha_param)
        dist_sum = sum(dist)

        sparse_cat = SparseCategorical()
        for i in range(dim):
            val = dist[i]/dist_sum
            if val > floor:
                sparse_cat.W[i] = val
        return sparse_cat

    def sampler_iter(self, sample_size: int, counts, alpha, floor, dim=None):
        return [self.sampler(counts, alpha, floor, dim) for _ in range(sample_size)]


if __name__ == "__main__":
    from collections import Counter
    inst = Sampler_SparseCategorical(set_seed=20261019)
    counts = Counter([0, 0, 0, 3, 3, 7])
    print(inst.sampler(counts, 0.1, 0.01))
    print(inst.sampler(counts, 0.1, 0.01, dim=20))
    print(inst.sampler({0: 1000}, 0.1, 0.5))
