"""
Evaluation counters for objective, constraint and residual operators
"""
from typing import Dict, Any

from .log import get_logger

logger = get_logger(__name__)


class Counters:
    """
    Number of evaluations of each operator of a model.

    Attributes
    ----------
    neval_obj : int
        Objective evaluations
    neval_grad : int
        Gradient evaluations
    neval_cons : int
        Constraint evaluations
    neval_jcon : int
        Evaluations of a single constraint
    neval_jgrad : int
        Evaluations of the gradient of a single constraint
    neval_jac : int
        Constraint Jacobian evaluations
    neval_jprod : int
        Jacobian-vector products
    neval_jtprod : int
        Jacobian-transpose-vector products
    neval_hess : int
        Lagrangian Hessian evaluations
    neval_hprod : int
        Hessian-vector products
    neval_jhprod : int
        Products with the Hessian of a single constraint
    """

    FIELDS = (
        'neval_obj',
        'neval_grad',
        'neval_cons',
        'neval_jcon',
        'neval_jgrad',
        'neval_jac',
        'neval_jprod',
        'neval_jtprod',
        'neval_hess',
        'neval_hprod',
        'neval_jhprod',
    )

    def __init__(self, **counts):
        for name in self.FIELDS:
            setattr(self, name, 0)
        for name, value in counts.items():
            self._set(name, value)

    def _set(self, name, value):
        if name not in self.FIELDS:
            raise AttributeError(f"{type(self).__name__} has no counter {name!r}")
        value = int(value)
        if value < 0:
            raise ValueError(f"Counter {name} must be non-negative, got {value}")
        setattr(self, name, value)

    def increment(self, name: str, by: int = 1):
        """Add ``by`` evaluations to counter ``name``"""
        self._set(name, getattr(self, name) + by)

    def reset(self):
        """Set every counter back to zero"""
        for name in self.FIELDS:
            setattr(self, name, 0)

    def copy(self):
        return type(self).from_dict(self.to_dict())

    def sum(self) -> int:
        """Total number of evaluations"""
        return sum(getattr(self, name) for name in self.FIELDS)

    def __eq__(self, other):
        if not isinstance(other, Counters):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        nonzero = ", ".join(
            f"{name}={getattr(self, name)}"
            for name in self.FIELDS if getattr(self, name)
        )
        return f"Counters({nonzero})"

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary"""
        return {name: getattr(self, name) for name in self.FIELDS}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]):
        """Create Counters from dictionary"""
        counters = cls()
        for key, value in d.items():
            if key in cls.FIELDS:
                counters._set(key, value)
        return counters


class NLSCounters:
    """
    Evaluation counters of a nonlinear least-squares model.

    Holds the base ``Counters`` under ``counters`` and the residual
    counters alongside it. Base counter names are also readable directly
    on this object.
    """

    FIELDS = (
        'neval_residual',
        'neval_jac_residual',
        'neval_jprod_residual',
        'neval_jtprod_residual',
        'neval_hess_residual',
        'neval_jhess_residual',
        'neval_hprod_residual',
    )

    def __init__(self, counters: Counters = None, **counts):
        self.counters = counters if counters is not None else Counters()
        for name in self.FIELDS:
            setattr(self, name, 0)
        for name, value in counts.items():
            if name in Counters.FIELDS:
                self.counters._set(name, value)
            else:
                self._set(name, value)

    def __getattr__(self, name):
        # Only reached for names not set on the instance
        if name in Counters.FIELDS:
            return getattr(self.counters, name)
        raise AttributeError(f"{type(self).__name__} has no attribute {name!r}")

    def _set(self, name, value):
        if name not in self.FIELDS:
            raise AttributeError(f"{type(self).__name__} has no counter {name!r}")
        value = int(value)
        if value < 0:
            raise ValueError(f"Counter {name} must be non-negative, got {value}")
        setattr(self, name, value)

    def increment(self, name: str, by: int = 1):
        """Add ``by`` evaluations to counter ``name``"""
        if name in Counters.FIELDS:
            self.counters.increment(name, by)
        else:
            self._set(name, getattr(self, name) + by)

    def reset(self):
        """Set every counter, base and residual, back to zero"""
        self.counters.reset()
        for name in self.FIELDS:
            setattr(self, name, 0)

    def copy(self):
        return type(self).from_dict(self.to_dict())

    def sum(self) -> int:
        return self.counters.sum() + sum(getattr(self, name) for name in self.FIELDS)

    def __eq__(self, other):
        if not isinstance(other, NLSCounters):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        nonzero = ", ".join(
            f"{name}={getattr(self, name)}"
            for name in self.FIELDS if getattr(self, name)
        )
        return f"NLSCounters({self.counters!r}, {nonzero})" if nonzero \
            else f"NLSCounters({self.counters!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, base counters nested under 'counters'"""
        d = {'counters': self.counters.to_dict()}
        d.update({name: getattr(self, name) for name in self.FIELDS})
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]):
        """Create NLSCounters from dictionary (nested or flat)"""
        nls = cls(Counters.from_dict(d.get('counters', {})))
        for key, value in d.items():
            if key in cls.FIELDS:
                nls._set(key, value)
            elif key in Counters.FIELDS:
                nls.counters._set(key, value)
        return nls


def snapshot_counters(model) -> NLSCounters:
    """
    Copy the evaluation counters of ``model`` into a new ``NLSCounters``.

    Base counters are always read. Residual counters are read only when
    the model keeps ``NLSCounters``; the nested base set is not read twice.

    Parameters
    ----------
    model : object
        Any object with a ``counters`` attribute holding ``Counters`` or
        ``NLSCounters``

    Returns
    -------
    NLSCounters
        Independent copy, unaffected by later evaluations on ``model``
    """
    source = getattr(model, 'counters', None)
    if not isinstance(source, (Counters, NLSCounters)):
        raise TypeError(
            f"model must expose Counters or NLSCounters as 'counters', "
            f"got {type(source).__name__}"
        )
    snapshot = NLSCounters()
    for name in Counters.FIELDS:
        snapshot.counters._set(name, getattr(source, name))
    if isinstance(source, NLSCounters):
        for name in NLSCounters.FIELDS:
            snapshot._set(name, getattr(source, name))
    logger.debug("Counter snapshot: %r", snapshot)
    return snapshot
