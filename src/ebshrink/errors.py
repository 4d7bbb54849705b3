"""Errors raised while computing shrinkage curves"""

class InvalidInput(ValueError):
  """Malformed or misaligned inputs"""

class GridMismatch(InvalidInput):
  """Curves defined on different grids were combined"""

class NumericalInstability(RuntimeError):
  """Curve has no usable mass on the grid"""

class ToleranceExceeded(RuntimeError):
  """Grid estimate disagrees with the model estimate

  key - feature key
  kind - estimator kind ('mle' or 'map')
  diff - observed absolute discrepancy
  tol - tolerance that was exceeded

  """
  def __init__(self, key, kind, diff, tol):
    # Important: pass everything to the base class so the exception survives
    # pickling across a process pool
    super().__init__(key, kind, diff, tol)
    self.key = key
    self.kind = kind
    self.diff = diff
    self.tol = tol

  def __str__(self):
    return f'{self.key}: |grid {self.kind} - model {self.kind}| = {self.diff:.4g} >= {self.tol:.4g}'
