"""Normal prior and posterior of the log2 effect size

b ~ N(0, sigma^2)

sigma is estimated upstream from all features and shared across features.

"""
import numpy as np
import scipy.stats as st

from .errors import GridMismatch, InvalidInput, NumericalInstability
from .grid import check_grid, normalize

def prior_curve(grid, sigma):
  """Return the N(0, sigma^2) density, normalized over the grid

  The analytic normalizing constant is replaced by the trapezoidal integral
  over the grid, matching the likelihood and posterior.

  grid - array-like [m,]
  sigma - prior standard deviation

  """
  if not np.isfinite(sigma) or sigma <= 0:
    raise InvalidInput(f'sigma must be positive, got {sigma}')
  grid = check_grid(grid)
  return normalize(grid, st.norm(scale=sigma).pdf(grid))

def _check_same_grid(a, b):
  if a.beta.shape != b.beta.shape:
    raise GridMismatch(f'grid lengths differ ({a.beta.shape[0]} != {b.beta.shape[0]})')
  if not np.array_equal(a.beta, b.beta):
    raise GridMismatch('grid values differ')

def posterior_curve(lik, prior):
  """Return likelihood times prior, normalized over the grid

  lik - Curve
  prior - Curve on the same grid as lik

  """
  _check_same_grid(lik, prior)
  density = lik.density * prior.density
  if not density.any():
    raise NumericalInstability('likelihood and prior do not overlap on the grid')
  return normalize(lik.beta, density)
