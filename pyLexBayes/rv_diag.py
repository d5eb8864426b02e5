import numpy as np
import scipy.stats as sp_stats
import matplotlib.pyplot as plt


class Sampler_Diag:
    def __init__(self):
        self.samples = []
        self.num_dim = None

        # variable-name manager
        self.variable_names = None

        # graphical parameters
        self.graphic_hist_mean = True
        self.graphic_hist_median = True
        self.graphic_hist_95CI = True

        self.graphic_use_variable_name=False

    def set_samples_from_list(self, samples, variable_names=None):
        # scalar samples are stored as 1-dim vectors
        self.samples = [smpl if np.ndim(smpl) > 0 else [smpl] for smpl in samples]
        self.num_dim = len(self.samples[0])
        if variable_names is not None:
            self.set_variable_names(variable_names)

    def set_variable_names(self, name_list):
        if len(name_list) != self.num_dim:
            raise ValueError("check your name_list : it should have length " + str(self.num_dim))
        self.variable_names = name_list
        self.graphic_use_variable_name=True

    def _round_list(self, list_obj, round_digit):
        rounded = [round(x, round_digit) for x in list_obj]
        return rounded

    def _dim_label(self, dim_idx):
        if self.graphic_use_variable_name:
            return self.variable_names[dim_idx]
        return str(dim_idx)+"th dim"

    def get_specific_dim_samples(self, dim_idx):
        if dim_idx >= self.num_dim:
            raise ValueError("dimension index should be lower than number of dimension. note that index starts at 0")
        return [smpl[dim_idx] for smpl in self.samples]

    def get_sample_mean(self, round=None):
        mean_vec = [float(np.mean(self.get_specific_dim_samples(i))) for i in range(self.num_dim)]
        if round is not None:
            mean_vec = self._round_list(mean_vec, round)
        return mean_vec

    def get_sample_var(self, round=None):
        var_vec = [float(np.var(self.get_specific_dim_samples(i))) for i in range(self.num_dim)]
        if round is not None:
            var_vec = self._round_list(var_vec, round)
        return var_vec

    def get_sample_quantile(self, quantile_list, round=None):
        quantile_vec = []
        for i in range(self.num_dim):
            ith_dim_samples = self.get_specific_dim_samples(i)
            quantiles = [float(np.quantile(ith_dim_samples, q)) for q in quantile_list]
            quantile_vec.append(quantiles)

        if round is not None:
            quantile_vec = [self._round_list(x, round) for x in quantile_vec]
        return quantile_vec

    def print_summaries(self, round=None):
        #name/mean/var/95%CI
        mean_vec = self.get_sample_mean(round=round)
        var_vec = self.get_sample_var(round=round)
        cred95_interval_vec = self.get_sample_quantile([0.025, 0.975], round=round)

        print("param \t\t mean \t var \t 95%CI")
        for i, (mean_val, var_val, cred95_vals) in enumerate(zip(mean_vec, var_vec, cred95_interval_vec)):
            print(self._dim_label(i), "\t\t", mean_val, "\t", var_val, "\t", cred95_vals)

    def gamma_ks_test(self, alpha_shape, beta_rate, dim_idx=0):
        "kolmogorov-smirnov test against gamma(shape=alpha, rate=beta). return: (statistic, p-value)"
        ks_result = sp_stats.kstest(self.get_specific_dim_samples(dim_idx), sp_stats.gamma(alpha_shape, scale=1/beta_rate).cdf)
        return float(ks_result.statistic), float(ks_result.pvalue)

    def show_hist_specific_dim(self, dim_idx, show=False, hist_type="bar", gamma_param=None):
        hist_data = self.get_specific_dim_samples(dim_idx)

        plt.hist(hist_data, bins=100, histtype=hist_type, density=True)
        plt.ylabel(self._dim_label(dim_idx))

        if self.graphic_hist_mean:
            plt.axvline(np.mean(hist_data), color="red", linestyle="solid", linewidth=0.8)

        if self.graphic_hist_median:
            plt.axvline(np.median(hist_data), color="red", linestyle="dashed", linewidth=0.8)

        if self.graphic_hist_95CI:
            quantile_0_95 = self.get_sample_quantile([0.025, 0.975])[dim_idx]
            x_axis_pts = np.linspace(quantile_0_95[0], quantile_0_95[1], num=100)
            y_axis_pts = np.zeros(len(x_axis_pts)) + 0.01
            plt.scatter(x_axis_pts, y_axis_pts, color="red", s=10, zorder=2)

        if gamma_param is not None:
            # (alpha, beta): overlay of the target density
            grid = np.linspace(min(hist_data), max(hist_data), 500)
            plt.plot(grid, sp_stats.gamma.pdf(grid, gamma_param[0], scale=1/gamma_param[1]), c='orange')

        if show:
            plt.show()

    def show_hist(self, figure_grid_dim, choose_dims=None, show=True):
        grid_row = figure_grid_dim[0]
        grid_column= figure_grid_dim[1]
        if choose_dims is None:
            choose_dims = range(self.num_dim)

        plt.figure(figsize=(5*grid_column, 3*grid_row))
        for i, dim_idx in enumerate(choose_dims):
            plt.subplot(grid_row, grid_column, i+1)
            self.show_hist_specific_dim(dim_idx)
        if show:
            plt.show()


if __name__ == "__main__":
    from pyLexBayes.rv_gen_gamma import Sampler_univariate_Gamma
    from pyLexBayes.rv_gen_dirichlet import Sampler_Dirichlet

    gamma_inst = Sampler_univariate_Gamma(set_seed=20261019)
    diag_inst = Sampler_Diag()
    diag_inst.set_samples_from_list(gamma_inst.sampler_iter(50000, 0.4, 2))
    diag_inst.print_summaries(round=4)
    print("KS:", diag_inst.gamma_ks_test(0.4, 2))
    diag_inst.show_hist_specific_dim(0, show=True, gamma_param=(0.4, 2))

    dir_inst = Sampler_Dirichlet(20261019)
    dir_diag_inst = Sampler_Diag()
    dir_diag_inst.set_samples_from_list(dir_inst.sampler_iter(5000, [1, 2, 3]), variable_names=["p1", "p2", "p3"])
    dir_diag_inst.print_summaries(round=4)
    dir_diag_inst.show_hist((1,3))
