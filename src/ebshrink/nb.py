"""Negative binomial likelihood of the log2 effect size

x_i ~ NB(mean = s_i 2^(intercept + b z_i), variance = mean + disp * mean^2)

The intercept and dispersion are fixed at the values estimated by the upstream
model fit, so the likelihood is a function of b alone.

"""
import collections
import numpy as np
import scipy.special as sp

from .errors import InvalidInput, NumericalInstability
from .grid import check_grid, normalize

Feature = collections.namedtuple('Feature', ['key', 'x', 's', 'z', 'disp', 'intercept'])
Feature.__doc__ = """Per-feature inputs from the upstream model fit

key - feature identifier
x - counts [n,]
s - size factors [n,]
z - condition indicator (0 = reference, 1 = treated) [n,]
disp - NB dispersion
intercept - log2 mean of the reference condition

"""

def _check_args(feature):
  try:
    x = np.asarray(feature.x, dtype=float)
    s = np.asarray(feature.s, dtype=float)
    z = np.asarray(feature.z, dtype=float)
    disp = float(feature.disp)
    intercept = float(feature.intercept)
  except (TypeError, ValueError) as e:
    raise InvalidInput(f'{feature.key}: invalid value(s) in feature ({e})') from e
  n = x.shape[0] if x.ndim == 1 else None
  if x.shape != (n,) or n == 0:
    raise InvalidInput(f'{feature.key}: counts must be a non-empty 1d array')
  if not np.isfinite(x).all() or (x < 0).any() or (x != np.floor(x)).any():
    raise InvalidInput(f'{feature.key}: counts must be non-negative integers')
  if s.shape != x.shape:
    raise InvalidInput(f'{feature.key}: shape mismatch (s): expected {x.shape}, got {s.shape}')
  if not np.isfinite(s).all() or (s <= 0).any():
    raise InvalidInput(f'{feature.key}: size factors must be positive')
  if z.shape != x.shape:
    raise InvalidInput(f'{feature.key}: shape mismatch (z): expected {x.shape}, got {z.shape}')
  if not np.isin(z, [0, 1]).all():
    raise InvalidInput(f'{feature.key}: condition indicator must be 0 or 1')
  if not np.isfinite(disp) or disp <= 0:
    raise InvalidInput(f'{feature.key}: dispersion must be positive, got {disp}')
  if not np.isfinite(intercept):
    raise InvalidInput(f'{feature.key}: invalid intercept {intercept}')
  return x, s, z, disp, intercept

def nb_llik(x, mean, inv_disp):
  """Return ln p(x | mean, inv_disp) elementwise

  The NB has variance mean + mean^2 / inv_disp.

  """
  return (x * np.log(mean / inv_disp)
          - (x + inv_disp) * np.log1p(mean / inv_disp)
          + sp.gammaln(x + inv_disp)
          - sp.gammaln(inv_disp)
          - sp.gammaln(x + 1))

def log_lik(feature, grid):
  """Return the joint log likelihood of the counts at each grid point

  feature - Feature
  grid - array-like [m,]

  Returns array [m,]

  """
  x, s, z, disp, intercept = _check_args(feature)
  grid = check_grid(grid)
  # [m, n]
  mean = s * np.exp2(intercept + np.outer(grid, z))
  return nb_llik(x, mean, 1 / disp).sum(axis=1)

def llik_curve(feature, grid):
  """Return the likelihood of b, normalized over the grid

  feature - Feature
  grid - array-like [m,]

  """
  grid = check_grid(grid)
  llik = log_lik(feature, grid)
  finite = np.isfinite(llik)
  if not finite.any():
    raise NumericalInstability(f'{feature.key}: log likelihood is not finite anywhere on the grid')
  # Important: the joint likelihood can underflow everywhere on the grid, so
  # rescale by the maximum before leaving the log domain
  density = np.where(finite, np.exp(llik - llik[finite].max()), 0)
  try:
    return normalize(grid, density)
  except NumericalInstability as e:
    raise NumericalInstability(f'{feature.key}: {e}') from e
