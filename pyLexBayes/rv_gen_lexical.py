from pyLexBayes.rv_gen_uniform import Sampler_Uniform
from pyLexBayes.rv_gen_gamma import Sampler_univariate_Gamma
from pyLexBayes.rv_gen_dirichlet import Sampler_Dirichlet
from pyLexBayes.rv_gen_categorical import Sampler_Categorical, Sampler_multinomial
from pyLexBayes.rv_gen_sparse_categorical import Sampler_SparseCategorical, SparseCategorical


class Sampler_LexicalWeights:
    """
    All samplers used by the lexical weighting model, wired to one uniform source.
    Every call advances the same generator, so a fixed set_seed and a fixed call
    sequence reproduce the same output. An instance is meant for one caller at a time.
    """
    def __init__(self, set_seed=1, max_iter=50000):
        self.uniform_source = Sampler_Uniform(set_seed)
        self.gamma_sampler = Sampler_univariate_Gamma(uniform_source=self.uniform_source, max_iter=max_iter)
        self.dirichlet_sampler = Sampler_Dirichlet(gamma_sampler=self.gamma_sampler)
        self.categorical_sampler = Sampler_Categorical(uniform_source=self.uniform_source)
        self.multinomial_sampler = Sampler_multinomial(uniform_source=self.uniform_source)
        self.sparse_categorical_sampler = Sampler_SparseCategorical(dirichlet_sampler=self.dirichlet_sampler)

    def uniform(self) -> float:
        return self.uniform_source.uniform()

    def sample_index(self, k: int) -> int:
        return self.uniform_source.sample_index(k)

    def sample_dense_categorical(self, k: int) -> list:
        return self.uniform_source.sample_dense_categorical(k)

    def sample_dense_categorical_from_counts(self, counts: list, alpha: float) -> list:
        return self.dirichlet_sampler.sampler_from_counts(counts, alpha)

    def sample_sparse_categorical(self, counts, alpha: float, floor: float, dim=None) -> SparseCategorical:
        return self.sparse_categorical_sampler.sampler(counts, alpha, floor, dim)

    def sample_gamma(self, alpha: float, lambda_rate: float) -> float:
        return self.gamma_sampler.sampler(alpha, lambda_rate)

    def sample_dirichlet(self, alphas: list) -> list:
        return self.dirichlet_sampler.sampler(alphas)

    def sample_from_categorical(self, weights: list) -> int:
        return self.categorical_sampler.sampler(weights)

    def sample_multinomial(self, n: int, weights: list) -> list:
        return self.multinomial_sampler.sampler(n, weights)


if __name__ == "__main__":
    from collections import Counter
    lex_inst = Sampler_LexicalWeights()

    # translation counts of one source word over a target vocabulary of size 6
    aligned_counts = Counter({0: 12, 2: 3, 5: 1})
    t_dist = lex_inst.sample_sparse_categorical(aligned_counts, 0.01, 0.001)
    print(t_dist, t_dist.total_mass())
    print([lex_inst.sample_from_categorical(t_dist.to_dense(6)) for _ in range(20)])
    print(lex_inst.sample_dense_categorical_from_counts([12, 0, 3, 0, 0, 1], 0.01))
