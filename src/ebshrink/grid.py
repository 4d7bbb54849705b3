"""Evaluation grid and normalized curves

Every curve is normalized the same way: divide by the trapezoidal integral
over the (finite) grid. This keeps likelihood, prior and posterior comparable
on the same truncated support.

"""
import collections
import numpy as np
import scipy.integrate as si

from .errors import InvalidInput, NumericalInstability

Curve = collections.namedtuple('Curve', ['beta', 'density'])

def _freeze(a):
  a = np.array(a, dtype=float)
  a.flags.writeable = False
  return a

def check_grid(b):
  """Return b as a read-only grid

  b - array-like [m,], strictly increasing and uniformly spaced

  """
  b = np.asarray(b, dtype=float)
  if b.ndim != 1 or b.shape[0] < 2:
    raise InvalidInput(f'grid must be 1d with at least 2 points, got shape {b.shape}')
  if not np.isfinite(b).all():
    raise InvalidInput('invalid value(s) in grid')
  d = np.diff(b)
  if (d <= 0).any():
    raise InvalidInput('grid must be strictly increasing')
  if not np.isclose(d, d[0]).all():
    raise InvalidInput('grid must be uniformly spaced')
  return _freeze(b)

def make_grid(lower=-1., upper=1.5, num=500):
  """Return a uniform grid of num points on [lower, upper]"""
  if num < 2 or not lower < upper:
    raise InvalidInput(f'invalid grid ({lower}, {upper}, {num})')
  return check_grid(np.linspace(lower, upper, num))

def integrate(curve):
  """Return the trapezoidal integral of the curve over its grid"""
  return si.trapezoid(curve.density, curve.beta)

def normalize(beta, density):
  """Return a Curve with unit trapezoidal integral over beta

  beta - grid [m,]
  density - array-like [m,], non-negative

  """
  density = np.asarray(density, dtype=float)
  if density.shape != beta.shape:
    raise InvalidInput(f'shape mismatch (density): expected {beta.shape}, got {density.shape}')
  if (density < 0).any():
    raise InvalidInput('density must be non-negative')
  z = si.trapezoid(density, beta)
  if not np.isfinite(z) or z <= 0:
    raise NumericalInstability(f'curve has no mass on the grid (integral = {z})')
  return Curve(beta, _freeze(density / z))
