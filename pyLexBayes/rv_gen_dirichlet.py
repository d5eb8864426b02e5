from math import isfinite

from pyLexBayes.rv_gen_gamma import Sampler_univariate_Gamma
from pyLexBayes.util_errors import InvalidArgumentError, SamplerExhaustedError

class Sampler_Dirichlet:
    def __init__(self, set_seed=None, gamma_sampler=None):
        if gamma_sampler is None:
            gamma_sampler = Sampler_univariate_Gamma(set_seed)
        self.gamma_sampler = gamma_sampler

    def _parameter_support_checker(self, alpha_param):
        if len(alpha_param)==0:
            raise InvalidArgumentError("alpha should have at least one element")
        for a in alpha_param:
            if not (a>0 and isfinite(a)):
                raise InvalidArgumentError("all elements of alpha should be >0 and finite")

    def sampler(self, alpha_param: list) -> list:
        self._parameter_support_checker(alpha_param)
        beta = 1 #any value
        gamma_samples = [self.gamma_sampler.sampler(alpha, beta) for alpha in alpha_param]
        sum_gamma_samples = sum(gamma_samples)
        if not sum_gamma_samples>0:
            raise SamplerExhaustedError("every gamma draw underflowed to 0; alpha is too small")
        dir_sample = [smpl/sum_gamma_samples for smpl in gamma_samples]
        return dir_sample

    def sampler_from_counts(self, counts: list, alpha: float) -> list:
        "dirichlet(counts + alpha): posterior draw of a dense categorical"
        if len(counts)==0:
            raise InvalidArgumentError("counts should have at least one element")
        if not (alpha>0 and isfinite(alpha)):
            raise InvalidArgumentError("alpha should be >0 and finite")
        for c in counts:
            if c<0:
                raise InvalidArgumentError("counts should be >=0")
        return self.sampler([c + alpha for c in counts])

    def sampler_iter(self, sample_size: int, alpha_param: list):
        samples = []
        for _ in range(sample_size):
            samples.append(self.sampler(alpha_param))
        return samples

if __name__ == "__main__":
    dir_sampler_inst = Sampler_Dirichlet(20261019)
    print(dir_sampler_inst.sampler_iter(5, [1,2,3,4,5]))
    print(dir_sampler_inst.sampler_iter(5, [1,1,1,1,1]))
    print(dir_sampler_inst.sampler_from_counts([10, 0, 3], 0.5))
