import time
from collections import namedtuple
from functools import lru_cache
from math import exp, isfinite, log, sqrt

from pyLexBayes.rv_gen_uniform import Sampler_Uniform
from pyLexBayes.util_errors import InvalidArgumentError, SamplerExhaustedError

# Constants of procedures GS and GD from
#   J.H. Ahrens, U. Dieter (1974): Computer methods for sampling from gamma, beta,
#       Poisson and binomial distributions, Computing 12, 223-246.
#   J.H. Ahrens, U. Dieter (1982): Generating gamma variates by a modified
#       rejection technique, Communications of the ACM 25, 47-54.
# The tables are stored lowest order first: (q1,...,q9), (a1,...,a9), (e1,...,e7).

# q0(r) = q1*r + q2*r^2 + ... + q9*r^9, r = 1/alpha
GD_Q_COEFFS = (0.0416666664, 0.0208333723, 0.0079849875,
               0.0015746717, -0.0003349403, 0.0003340332,
               0.0006053049, -0.0004701849, 0.0001710320)
# series of log(1+v) - v + v^2/2 for |v| <= 0.25, times v
GD_A_COEFFS = (0.333333333, -0.249999949, 0.199999867,
               -0.166677482, 0.142873973, -0.124385581,
               0.110368310, -0.112750886, 0.104089866)
# exp(q) - 1 for q <= 0.5
GD_E_COEFFS = (1.000000000, 0.499999994, 0.166666848,
               0.041664508, 0.008345522, 0.001353826,
               0.000247453)

GS_E_INV = 0.36787944117 # exp(-1)
GD_D_CONST = 5.656854249 # sqrt(32)
GD_T_LOWER = -0.71874483771719 # reject the double exponential deviate at or below this
GAMMA_TINY = 5e-324 # smallest positive double. draws that underflow are returned as this

AhrensDieterSetup = namedtuple("AhrensDieterSetup", ["alpha", "s", "ss", "d", "q0", "b", "si", "c"])


def _poly_times_x(coeffs, x):
    # ((c_n*x + c_{n-1})*x + ... + c_1)*x
    result = 0.0
    for coef in reversed(coeffs):
        result = result*x + coef
    return result*x

@lru_cache(maxsize=256)
def gd_setup(alpha_shape) -> AhrensDieterSetup:
    "steps 1 and 4 of procedure GD. pure function of alpha (alpha >= 1)"
    ss = alpha_shape - 0.5
    s = sqrt(ss)
    d = GD_D_CONST - 12.0*s

    q0 = _poly_times_x(GD_Q_COEFFS, 1.0/alpha_shape)
    if alpha_shape > 13.022:
        b = 1.77
        si = 0.75
        c = 0.1515/s
    elif alpha_shape > 3.686:
        b = 1.654 + 0.0076*ss
        si = 1.68/s + 0.275
        c = 0.062/s + 0.024
    else:
        b = 0.463 + s - 0.178*ss
        si = 1.235
        c = 0.195/s - 0.079 + 0.016*s
    return AhrensDieterSetup(alpha_shape, s, ss, d, q0, b, si, c)

def gd_q(setup: AhrensDieterSetup, t):
    "steps 5-6 (and 10) of GD: q(t) = log of the density quotient"
    s, ss = setup.s, setup.ss
    v = t/(s+s)
    if abs(v) > 0.25:
        return setup.q0 - s*t + 0.25*t*t + (ss+ss)*log(1.0+v)
    else:
        return setup.q0 + 0.5*t*t*_poly_times_x(GD_A_COEFFS, v)


class GammaBase:
    def __init__(self, set_seed=None, uniform_source=None, max_iter=50000):
        if uniform_source is None:
            uniform_source = Sampler_Uniform(set_seed)
        self.uniform_source = uniform_source
        self.max_iter = max_iter

    def _parameter_support_checker(self, alpha_shape, beta_rate):
        if not (alpha_shape>0 and isfinite(alpha_shape)):
            raise InvalidArgumentError("alpha should be >0 and finite")
        if not (beta_rate>0 and isfinite(beta_rate)):
            raise InvalidArgumentError("beta should be >0 and finite")

    def _uniform(self):
        return self.uniform_source.uniform()

    def _uniform_positive(self):
        "return: u in (0,1], safe for log()"
        return 1.0 - self.uniform_source.uniform()

    def _check_iter(self, num_iter, loop_name):
        if num_iter > self.max_iter:
            raise SamplerExhaustedError(loop_name + ": no acceptance after " + str(self.max_iter) + " iterations")

    def sampler(self, alpha_shape, beta_rate):
        pass

    def sampler_iter(self, sample_size: int, alpha_shape, beta_rate, verbose=False, print_iter_cycle=10000):
        start_time = time.time()
        samples = []
        for i in range(sample_size):
            samples.append(self.sampler(alpha_shape, beta_rate))
            if verbose and (i+1)%print_iter_cycle == 0:
                print("iteration", i+1, "/", sample_size)
        if verbose:
            elap_time = time.time()-start_time
            print("generating", sample_size, "samples - done! (elapsed time for execution: ", elap_time//60,"min ", elap_time%60,"sec)")
        return samples


class Sampler_univariate_Gamma(GammaBase):
    "gamma(shape=alpha, rate=beta) by Ahrens-Dieter: GS for alpha<1, GD for alpha>=1"
    def __init__(self, set_seed=None, uniform_source=None, max_iter=50000):
        super().__init__(set_seed, uniform_source, max_iter)

    def sampler(self, alpha_shape, beta_rate):
        self._parameter_support_checker(alpha_shape, beta_rate)
        if alpha_shape < 1.0:
            sample = self._sampler_gs(alpha_shape, beta_rate)
        else:
            sample = self._sampler_gd(alpha_shape, beta_rate)
        return max(sample, GAMMA_TINY)

    def _sampler_gs(self, a, beta_rate):
        # acceptance rejection. proposal: x^(a-1) on [0,1], exp(-x) on (1,inf)
        b = 1.0 + GS_E_INV*a
        num_iter = 0
        while True:
            num_iter += 1
            self._check_iter(num_iter, "gamma GS")
            p = b*self._uniform()
            if p <= 1.0:
                gds = p**(1.0/a)
                accept = log(self._uniform_positive()) <= -gds
            else:
                gds = -log((b-p)/a)
                accept = log(self._uniform_positive()) <= (a-1.0)*log(gds)
            if accept:
                return gds/beta_rate

    def _normal_deviate(self):
        # polar box-muller
        num_iter = 0
        while True:
            num_iter += 1
            self._check_iter(num_iter, "gamma GD normal deviate")
            v1 = 2.0*self._uniform() - 1.0
            v2 = 2.0*self._uniform() - 1.0
            v12 = v1*v1 + v2*v2
            if 0.0 < v12 <= 1.0:
                return v1*sqrt(-2.0*log(v12)/v12)

    def _double_exponential_deviate(self, setup: AhrensDieterSetup):
        "return: (t, e, u) with t = b + e*si*sign(u), t > GD_T_LOWER"
        num_iter = 0
        while True:
            num_iter += 1
            self._check_iter(num_iter, "gamma GD double exponential deviate")
            e = -log(self._uniform_positive())
            u = self._uniform()
            u = u + u - 1.0
            sign_u = 1.0 if u > 0 else -1.0
            t = setup.b + (e*setup.si)*sign_u
            if t > GD_T_LOWER:
                return t, e, u*sign_u

    def _sampler_gd(self, a, beta_rate):
        # acceptance complement with a normal proposal
        setup = gd_setup(a)
        s = setup.s

        t = self._normal_deviate()
        x = s + 0.5*t
        gds = x*x
        if t >= 0.0:
            # immediate acceptance
            return gds/beta_rate

        u = self._uniform()
        if setup.d*u <= t*t*t:
            # squeeze acceptance
            return gds/beta_rate

        if x > 0.0:
            q = gd_q(setup, t)
            if log(1.0-u) <= q:
                # quotient acceptance
                return gds/beta_rate

        num_iter = 0
        while True:
            num_iter += 1
            self._check_iter(num_iter, "gamma GD hat")
            t, e, abs_u = self._double_exponential_deviate(setup)
            q = gd_q(setup, t)
            if q <= 0.0:
                continue
            if q > 0.5:
                w = exp(q) - 1.0
            else:
                w = _poly_times_x(GD_E_COEFFS, q)
            if setup.c*abs_u <= w*exp(e - 0.5*t*t):
                # hat acceptance
                x = s + 0.5*t
                return x*x/beta_rate


if __name__=="__main__":
    from statistics import mean, variance
    gamma_inst = Sampler_univariate_Gamma(set_seed=20261019)
    for alpha, beta in [(0.3, 1), (1, 1), (2, 1), (5, 2), (20, 0.5)]:
        test_gamma_samples = gamma_inst.sampler_iter(100000, alpha, beta)
        print(alpha, beta, ":", mean(test_gamma_samples), alpha/beta, "\n", variance(test_gamma_samples), alpha/beta**2)
