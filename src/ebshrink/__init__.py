"""Empirical Bayes shrinkage of log2 effect sizes on a grid

"""
from .errors import *
from .grid import Curve, check_grid, make_grid, integrate, normalize
from .nb import Feature, nb_llik, log_lik, llik_curve
from .posterior import prior_curve, posterior_curve
from .mode import ModePoint, find_mode, is_mode, mode_mask
from .validate import compare_estimates, check_consistency
from .assemble import assemble_curves
from .shrink import Outcome, feature_curves, map_curves, grid_estimates, shrink
from . import dataset
