from math import isfinite

from pyLexBayes.rv_gen_uniform import Sampler_Uniform
from pyLexBayes.util_errors import InvalidArgumentError

class Sampler_Categorical:
    def __init__(self, set_seed=None, uniform_source=None):
        if uniform_source is None:
            uniform_source = Sampler_Uniform(set_seed)
        self.uniform_source = uniform_source

    def _parameter_support_checker(self, weights):
        # weights need not sum to 1
        if len(weights)==0:
            raise InvalidArgumentError("weights should have at least one element")
        for w_i in weights:
            if not (w_i>=0 and isfinite(w_i)):
                print("weights: ", weights)
                raise InvalidArgumentError("w_i should be >=0 and finite")
        if not sum(weights)>0:
            print("weights: ", weights)
            raise InvalidArgumentError("weights should have a positive sum")

    def _idx_sampler_n1(self, weights):
        w_sum = 0
        for w_i in weights:
            w_sum += w_i
        val = self.uniform_source.uniform() * w_sum

        #determine class. left-closed: a zero weight is hit only when val==0 exactly
        for i in range(len(weights)-1):
            w_i = weights[i]
            if val <= w_i:
                return i
            val -= w_i
        return len(weights)-1 #floting number problem

    def sampler(self, weights) -> int:
        self._parameter_support_checker(weights)
        return self._idx_sampler_n1(weights)

    def sampler_iter(self, sample_size: int, weights):
        self._parameter_support_checker(weights)
        return [self._idx_sampler_n1(weights) for _ in range(sample_size)]


class Sampler_multinomial(Sampler_Categorical):
    def _parameter_support_checker_n(self, n_param):
        if isinstance(n_param, bool) or not isinstance(n_param, int):
            raise InvalidArgumentError("n should be an integer")
        if n_param<0:
            raise InvalidArgumentError("n should be >=0")

    def sampler(self, n_param, p_param) -> list:
        self._parameter_support_checker_n(n_param)
        self._parameter_support_checker(p_param)
        sample = [0 for _ in range(len(p_param))]
        for _ in range(n_param):
            i = self._idx_sampler_n1(p_param)
            sample[i] += 1
        return sample

    def sampler_iter(self, sample_size: int, n_param, p_param):
        return [self.sampler(n_param, p_param) for _ in range(sample_size)]


if __name__ == "__main__":
    inst = Sampler_multinomial(set_seed=20261019)
    print(inst.sampler(100, [0.1, 0.2, 0.3, 0.4]))
    print(inst.sampler(100, [0, 0.5, 0.3, 0.2]))
    print(inst.sampler(100, [0, 5, 3, 2]))

    cat_inst = Sampler_Categorical(set_seed=20261019)
    print(cat_inst.sampler_iter(20, [0, 0, 5]))
