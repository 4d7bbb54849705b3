"""Agreement between grid estimates and model estimates

The grid MLE (likelihood mode) and grid MAP (posterior mode) are computed
independently of the upstream model fit, which reports its own unshrunken and
shrunken estimates. Disagreement indicates the grid is too coarse or the two
were computed under different models.

"""
import numpy as np
import pandas as pd

from .errors import InvalidInput, ToleranceExceeded

def compare_estimates(grid_est, model_est, tol_mle=0.01, tol_map=0.07):
  """Return agreement of grid and model estimates for each feature

  grid_est - pd.DataFrame indexed by feature, with columns mle, map
  model_est - pd.DataFrame indexed by feature, with columns mle, map

  Returns pd.DataFrame with columns key, kind, grid, model, diff, tol, pass

  """
  if grid_est.index.has_duplicates or model_est.index.has_duplicates:
    raise InvalidInput('feature keys must be unique')
  missing = grid_est.index.difference(model_est.index)
  if len(missing):
    raise InvalidInput(f'missing model estimates for {list(missing)}')
  tol = {'mle': tol_mle, 'map': tol_map}
  result = []
  for key in grid_est.index:
    for kind in ('mle', 'map'):
      g = float(grid_est.loc[key, kind])
      m = float(model_est.loc[key, kind])
      d = abs(g - m)
      # Important: NaN must fail
      result.append((key, kind, g, m, d, tol[kind], bool(d < tol[kind])))
  return pd.DataFrame(result, columns=['key', 'kind', 'grid', 'model', 'diff', 'tol', 'pass'])

def check_consistency(grid_est, model_est, tol_mle=0.01, tol_map=0.07):
  """Raise ToleranceExceeded for the first disagreeing estimate, otherwise
return the comparison

  """
  res = compare_estimates(grid_est, model_est, tol_mle=tol_mle, tol_map=tol_map)
  fail = res[~res['pass']]
  if not fail.empty:
    row = fail.iloc[0]
    raise ToleranceExceeded(row['key'], row['kind'], row['diff'], row['tol'])
  return res
