import numpy as np
import pytest
import ebshrink
import ebshrink.dataset

@pytest.fixture
def grid():
  return ebshrink.make_grid(lower=-1, upper=1.5, num=500)

@pytest.fixture
def agree_feature():
  # Dispersion is small enough that the counts are nearly Poisson; the MLE is
  # log2(20 / 10) = 1
  return ebshrink.dataset.constant_feature('agree', x0=10, x1=20, n0=3, n1=4, disp=1e-6)

@pytest.fixture
def shrink_features():
  # Same intercept and MLE, different dispersion
  low = ebshrink.dataset.constant_feature('low', x0=100, x1=200, n0=3, n1=40, disp=0.05)
  high = ebshrink.dataset.constant_feature('high', x0=100, x1=200, n0=3, n1=40, disp=0.8)
  return low, high

@pytest.fixture
def simulate_features():
  return [ebshrink.dataset.simulate_feature(f'gene{i}', n0=10, n1=10, intercept=5, beta=b, disp=0.1, seed=i)
          for i, b in enumerate([-0.5, 0, 0.5])]
