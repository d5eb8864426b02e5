class ReplayUniform:
    "uniform source replaying a fixed list of values, cycling at the end"
    def __init__(self, values):
        self.values = list(values)
        self.num_draws = 0

    def uniform(self):
        u = self.values[self.num_draws % len(self.values)]
        self.num_draws += 1
        return u


class ConstantGamma:
    "gamma sampler returning one fixed value"
    def __init__(self, value):
        self.value = value

    def sampler(self, alpha_shape, beta_rate):
        return self.value
