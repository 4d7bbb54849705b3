import numpy as np
import pandas as pd
import pytest
import ebshrink

@pytest.fixture
def grid_est():
  return pd.DataFrame({'mle': [1., -0.5], 'map': [0.7, -0.3]}, index=['a', 'b'])

def test_compare_estimates(grid_est):
  res = ebshrink.compare_estimates(grid_est, grid_est + 0.005)
  assert res.shape == (4, 7)
  assert res['pass'].all()
  assert np.isclose(res['diff'], 0.005).all()
  assert list(res['kind']) == ['mle', 'map', 'mle', 'map']

def test_compare_estimates_fail(grid_est):
  model_est = grid_est.copy()
  model_est.loc['b', 'mle'] += 0.02
  res = ebshrink.compare_estimates(grid_est, model_est)
  assert res['pass'].sum() == 3
  fail = res[~res['pass']].iloc[0]
  assert fail['key'] == 'b'
  assert fail['kind'] == 'mle'

def test_compare_estimates_nan(grid_est):
  model_est = grid_est.copy()
  model_est.loc['a', 'map'] = np.nan
  res = ebshrink.compare_estimates(grid_est, model_est)
  assert not res.set_index(['key', 'kind']).loc[('a', 'map'), 'pass']

def test_compare_estimates_missing(grid_est):
  with pytest.raises(ebshrink.InvalidInput):
    ebshrink.compare_estimates(grid_est, grid_est.loc[['a']])

def test_check_consistency_pass(grid_est):
  model_est = grid_est.copy()
  model_est['map'] += 0.05
  res = ebshrink.check_consistency(grid_est, model_est)
  assert res['pass'].all()

def test_check_consistency_map(grid_est):
  model_est = grid_est.copy()
  model_est.loc['a', 'map'] += 0.1
  with pytest.raises(ebshrink.ToleranceExceeded) as e:
    ebshrink.check_consistency(grid_est, model_est)
  assert e.value.key == 'a'
  assert e.value.kind == 'map'
  assert np.isclose(e.value.diff, 0.1)
  assert 'a' in str(e.value)

def test_check_consistency_mle(grid_est):
  model_est = grid_est.copy()
  model_est['mle'] -= 0.02
  with pytest.raises(ebshrink.ToleranceExceeded) as e:
    ebshrink.check_consistency(grid_est, model_est)
  assert e.value.key == 'a'
  assert e.value.kind == 'mle'

def test_check_consistency_tol(grid_est):
  model_est = grid_est.copy()
  model_est['mle'] -= 0.02
  res = ebshrink.check_consistency(grid_est, model_est, tol_mle=0.05)
  assert res['pass'].all()

def test_compare_estimates_duplicate_grid(grid_est):
  est = grid_est.loc[['a', 'a']]
  with pytest.raises(ebshrink.InvalidInput):
    ebshrink.compare_estimates(est, grid_est)

def test_compare_estimates_duplicate_model(grid_est):
  with pytest.raises(ebshrink.InvalidInput):
    ebshrink.compare_estimates(grid_est, pd.concat([grid_est, grid_est]))
