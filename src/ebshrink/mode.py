"""Modes of curves on a grid"""
import collections
import numpy as np

ModePoint = collections.namedtuple('ModePoint', ['index', 'beta', 'density'])

def find_mode(curve):
  """Return the ModePoint of the curve

  Ties are broken in favor of the smallest beta.

  """
  # Important: argmax returns the first occurrence of the maximum
  i = int(np.argmax(curve.density))
  return ModePoint(i, curve.beta[i], curve.density[i])

def is_mode(curve):
  """Return a boolean array which is True only at the mode"""
  res = np.zeros(curve.density.shape, dtype=bool)
  res[find_mode(curve).index] = True
  return res

def mode_mask(curve):
  """Return the density with every point except the mode masked

  The underlying data are the (unmodified) curve densities.

  """
  return np.ma.masked_array(curve.density, mask=~is_mode(curve))
