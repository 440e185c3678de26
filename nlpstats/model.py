"""
Model classes exposing what ExecutionStats reads from a problem
"""
import numpy as np

from .counters import Counters, NLSCounters


class Model:
    """
    Problem metadata and evaluation counters of an optimization model.

    A solver increments ``counters`` as it evaluates the problem; an
    ``ExecutionStats`` built from the model copies them once.

    Parameters
    ----------
    x0 : array_like
        Initial point. Its dtype sets the precision of default values
        in ``ExecutionStats``.
    ncon : int, optional
        Number of general constraints (default: 0)
    name : str, optional
        Problem name

    Examples
    --------
    >>> import numpy as np
    >>> from nlpstats import Model, ExecutionStats
    >>>
    >>> model = Model(np.zeros(2))
    >>> model.counters.increment('neval_obj')
    >>> stats = ExecutionStats('first_order', model, objective=0.0)
    >>> stats.primal_feas == 0
    True
    """

    def __init__(self, x0, ncon: int = 0, name: str = "Generic"):
        x0 = np.asarray(x0)
        if x0.ndim != 1:
            raise ValueError(f"x0 must be one-dimensional, got shape {x0.shape}")
        if not np.issubdtype(x0.dtype, np.floating):
            x0 = x0.astype(np.float64)
        if ncon < 0:
            raise ValueError(f"ncon must be non-negative, got {ncon}")
        self._x0 = x0
        self._ncon = int(ncon)
        self.name = name
        self.counters = Counters()

    @property
    def n(self) -> int:
        """Number of variables"""
        return self._x0.size

    @property
    def m(self) -> int:
        """Number of constraints"""
        return self._ncon

    @property
    def x0(self) -> np.ndarray:
        """Initial point (copy)"""
        return self._x0.copy()

    @property
    def dtype(self) -> np.dtype:
        """Element type of the initial point"""
        return self._x0.dtype

    def is_unconstrained(self) -> bool:
        """Check if the model has no general constraints"""
        return self._ncon == 0

    def is_least_squares(self) -> bool:
        return False

    def reset(self):
        """Reset all evaluation counters"""
        self.counters.reset()

    def __repr__(self):
        return f"<nlpstats.{type(self).__name__} {self.name!r} n={self.n} m={self.m}>"


class LeastSquaresModel(Model):
    """
    Nonlinear least-squares model: minimize ½‖F(x)‖².

    Keeps ``NLSCounters`` so residual evaluations are counted next to
    the standard ones.

    Parameters
    ----------
    x0 : array_like
        Initial point
    nequ : int
        Number of residual equations
    ncon : int, optional
        Number of general constraints (default: 0)
    name : str, optional
        Problem name
    """

    def __init__(self, x0, nequ: int, ncon: int = 0, name: str = "Generic"):
        super().__init__(x0, ncon=ncon, name=name)
        if nequ < 0:
            raise ValueError(f"nequ must be non-negative, got {nequ}")
        self._nequ = int(nequ)
        self.counters = NLSCounters()

    @property
    def nequ(self) -> int:
        """Number of residual equations"""
        return self._nequ

    def is_least_squares(self) -> bool:
        return True

    def __repr__(self):
        return (f"<nlpstats.{type(self).__name__} {self.name!r} "
                f"n={self.n} m={self.m} nequ={self.nequ}>")
