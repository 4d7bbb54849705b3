"""Shrinkage curves for a handful of features

Each feature is an independent unit of work, which can be mapped over a
multiprocessing.Pool. Invalid inputs and numerical failures are recorded per
feature; disagreement with the model estimates is fatal for the whole run.

"""
import collections
import functools as ft
import pandas as pd

from .assemble import assemble_curves
from .errors import InvalidInput, NumericalInstability
from .grid import make_grid
from .mode import find_mode
from .nb import llik_curve
from .posterior import posterior_curve, prior_curve
from .validate import check_consistency

Outcome = collections.namedtuple('Outcome', ['key', 'lik', 'post', 'error'])

def feature_curves(feature, grid, prior):
  """Return likelihood and posterior curves for one feature"""
  lik = llik_curve(feature, grid)
  return lik, posterior_curve(lik, prior)

def _feature_outcome(feature, grid, prior):
  try:
    return Outcome(feature.key, *feature_curves(feature, grid, prior), None)
  except (InvalidInput, NumericalInstability) as e:
    return Outcome(feature.key, None, None, e)

def map_curves(features, grid, prior, pool=None):
  """Return an Outcome for each feature, in order

  features - iterable of Feature
  grid - array-like [m,]
  prior - Curve
  pool - multiprocessing.Pool

  """
  f = ft.partial(_feature_outcome, grid=grid, prior=prior)
  if pool is not None:
    return pool.map(f, features)
  else:
    return [f(x) for x in features]

def grid_estimates(outcomes):
  """Return the likelihood and posterior modes of successful features

  Returns pd.DataFrame indexed by key, with columns mle, map

  """
  result = [(o.key, find_mode(o.lik).beta, find_mode(o.post).beta)
            for o in outcomes if o.error is None]
  return (pd.DataFrame(result, columns=['key', 'mle', 'map'])
          .set_index('key'))

def shrink(features, sigma, model_est=None, lower=-1., upper=1.5, num=500,
           tol_mle=0.01, tol_map=0.07, pool=None, verbose=False):
  """Return tagged likelihood, prior, and posterior curves for each feature

  If model_est is given, the grid modes are checked against it before the
  curves are assembled, and ToleranceExceeded is raised on disagreement.

  features - iterable of Feature
  sigma - prior standard deviation
  model_est - pd.DataFrame indexed by key, with columns mle, map (unshrunken
    and shrunken estimates from the model fit)
  lower, upper, num - grid on the log2 effect size
  tol_mle, tol_map - agreement tolerances
  pool - multiprocessing.Pool

  Returns curves (see assemble_curves) and failures (pd.DataFrame with columns
  key, error)

  """
  grid = make_grid(lower, upper, num)
  prior = prior_curve(grid, sigma)
  outcomes = map_curves(features, grid, prior, pool=pool)
  failures = []
  for o in outcomes:
    if o.error is not None:
      failures.append((o.key, o.error))
      if verbose:
        print(f'shrink [{o.key}]: {type(o.error).__name__}: {o.error}')
    elif verbose:
      print(f'shrink [{o.key}]: mle={find_mode(o.lik).beta:.3g} map={find_mode(o.post).beta:.3g}')
  if model_est is not None:
    check_consistency(grid_estimates(outcomes), model_est, tol_mle=tol_mle, tol_map=tol_map)
  curves = assemble_curves(prior, [(o.key, o.lik, o.post) for o in outcomes if o.error is None])
  return curves, pd.DataFrame(failures, columns=['key', 'error'])
