import numpy as np

from pyLexBayes.util_errors import InvalidArgumentError


class Sampler_Uniform:
    def __init__(self, set_seed=None):
        if set_seed is not None:
            self.random_generator = np.random.default_rng(seed=set_seed)
        else:
            self.random_generator = np.random.default_rng()

    def _parameter_support_checker(self, k):
        if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
            raise InvalidArgumentError("k should be an integer")
        if k<=0:
            raise InvalidArgumentError("k should be >0")

    def uniform(self) -> float:
        "return: u in [0,1)"
        return float(self.random_generator.random())

    def sample_index(self, k) -> int:
        "return: i in {0,...,k-1}"
        self._parameter_support_checker(k)
        return int(self.random_generator.integers(0, k))

    def sample_dense_categorical(self, k) -> list:
        # normalized uniforms. not a uniform draw on the simplex (that would be dirichlet(1,...,1))
        self._parameter_support_checker(k)
        w = [self.uniform() for _ in range(k)]
        w_sum = sum(w)
        return [x/w_sum for x in w]

    def sampler_iter(self, sample_size: int):
        return [self.uniform() for _ in range(sample_size)]


if __name__ == "__main__":
    unif_inst = Sampler_Uniform(set_seed=20261019)
    print(unif_inst.sampler_iter(5))
    print([unif_inst.sample_index(10) for _ in range(10)])
    print(unif_inst.sample_dense_categorical(4))
