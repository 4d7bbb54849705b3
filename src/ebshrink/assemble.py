"""Tagged table of curves for plotting"""
import pandas as pd

from .mode import is_mode

def _rows(key, kind, curve, mark_modes):
  return pd.DataFrame({
    'key': key,
    'beta': curve.beta,
    'density': curve.density,
    'kind': kind,
    'is_mode': is_mode(curve) if mark_modes else None,
  })

def assemble_curves(prior, curves, mark_modes=True):
  """Return one long table of the prior and per-feature curves

  prior - Curve
  curves - iterable of (key, likelihood Curve, posterior Curve)
  mark_modes - flag the mode of each curve in column is_mode

  Returns pd.DataFrame with columns key, beta, density, kind, is_mode. Prior
  rows have key None.

  """
  result = [_rows(None, 'prior', prior, mark_modes)]
  for key, lik, post in curves:
    result.append(_rows(key, 'likelihood', lik, mark_modes))
    result.append(_rows(key, 'posterior', post, mark_modes))
  return pd.concat(result, ignore_index=True)
