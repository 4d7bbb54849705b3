"""Simulated features"""
import numpy as np
import scipy.stats as st

from .nb import Feature

def simulate_feature(key, n0, n1, intercept, beta, disp, s=None, seed=0):
  """Return a Feature with NB counts

  n0 - number of reference samples
  n1 - number of treated samples
  intercept - log2 mean of the reference samples
  beta - log2 fold change of the treated samples
  disp - NB dispersion
  s - size factors [n0 + n1,] (default: 1)

  """
  np.random.seed(seed)
  z = np.repeat([0, 1], [n0, n1])
  if s is None:
    s = np.ones(n0 + n1)
  mean = s * np.exp2(intercept + beta * z)
  x = st.nbinom(n=1 / disp, p=1 / (1 + mean * disp)).rvs()
  return Feature(key, x, s, z, disp, intercept)

def constant_feature(key, x0, x1, n0, n1, disp):
  """Return a Feature with constant counts in each condition

  The intercept is log2(x0), so the likelihood is maximized at log2(x1 / x0).

  """
  z = np.repeat([0, 1], [n0, n1])
  x = np.repeat([x0, x1], [n0, n1])
  return Feature(key, x, np.ones(n0 + n1), z, disp, np.log2(x0))
