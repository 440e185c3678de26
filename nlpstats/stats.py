"""
Execution statistics of an optimization solver and their tabular rendering
"""
import io
import numbers
import sys
from abc import ABC, abstractmethod
from enum import Enum
from types import MappingProxyType
from typing import Dict, Any, Iterable, Optional, Sequence

import numpy as np

from .counters import Counters, NLSCounters, snapshot_counters
from .display import format_vector, print_stats, show
from .exceptions import InvalidStatus, MissingHeaderLabel, UnknownField
from .log import get_logger
from .parameters import DisplayParameters
from .statuses import STATUSES, SOLVED_STATUSES, describe, is_valid_status

logger = get_logger(__name__)


class AbstractExecutionStats(ABC):
    """
    Base class of solver execution records.

    Subclasses provide ``status`` and ``counters``; the tabular
    functions of this module only rely on those and on the record
    fields they are asked for.
    """

    @property
    @abstractmethod
    def status(self) -> str:
        """Status key"""

    @property
    @abstractmethod
    def counters(self) -> NLSCounters:
        """Evaluation counters"""

    @property
    def status_description(self) -> str:
        """Human-readable description of the status"""
        return describe(self.status)

    def __repr__(self):
        return show(self)


def get_status(stats: AbstractExecutionStats) -> str:
    """Return the description of the status of ``stats``"""
    return stats.status_description


def _check_real(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    return value


def _same_solver_specific(a, b) -> bool:
    if a.keys() != b.keys():
        return False
    for key, value in a.items():
        other = b[key]
        if isinstance(value, np.ndarray) or isinstance(other, np.ndarray):
            if not np.array_equal(value, other):
                return False
        elif value != other:
            return False
    return True


def _seed_dtype(model) -> np.dtype:
    dtype = getattr(model, 'dtype', None)
    if dtype is None:
        dtype = np.asarray(model.x0).dtype
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.floating):
        dtype = np.dtype(np.float64)
    return dtype


class ExecutionStats(AbstractExecutionStats):
    """
    Output information of a solver.

    ``ExecutionStats`` does not compute anything, it simply stores. The
    evaluation counters of ``model`` are copied once at construction;
    later evaluations on the model do not change the record. All other
    fields are keyword arguments, and the record is read-only once built
    (use ``replace`` to derive a modified copy).

    Parameters
    ----------
    status : str
        Why the solver stopped. See ``show_statuses()`` for the full list.
    model : Model
        Model that was solved. Must expose ``counters``, ``x0`` and
        ``is_unconstrained()``.
    solution : array_like, optional
        Final approximation returned by the solver (default: empty)
    objective : float, optional
        Objective value at ``solution`` (default: inf)
    dual_feas : float, optional
        Dual feasibility norm at ``solution`` (default: inf)
    primal_feas : float, optional
        Primal feasibility norm at ``solution`` (default: 0 if the model
        is unconstrained, inf otherwise)
    iter : int, optional
        Number of iterations computed by the solver (default: -1)
    elapsed_time : float, optional
        Elapsed time in seconds (default: inf)
    solver_specific : dict, optional
        Solver specific values, kept in insertion order

    Defaults for ``solution``, ``objective``, ``dual_feas`` and
    ``primal_feas`` have the floating type of ``model.x0``.

    Raises
    ------
    InvalidStatus
        If ``status`` is not a valid status

    Examples
    --------
    >>> import numpy as np
    >>> from nlpstats import ExecutionStats, Model
    >>>
    >>> model = Model(np.zeros(2))
    >>> stats = ExecutionStats('first_order', model, objective=1.5, iter=10)
    >>> stats
    Execution stats: first-order stationary
    >>> print(stats)
    Generic Execution stats
      status: first-order stationary
      objective value: 1.50000000e+00
      ...
    """

    def __init__(
        self,
        status: str,
        model,
        *,
        solution=None,
        objective: Optional[float] = None,
        dual_feas: Optional[float] = None,
        primal_feas: Optional[float] = None,
        iter: int = -1,
        elapsed_time: float = float('inf'),
        solver_specific: Optional[Dict[str, Any]] = None,
    ):
        self._check_status(status)

        dtype = _seed_dtype(model)
        inf = dtype.type(np.inf)
        if solution is None:
            solution = np.empty(0, dtype=dtype)
        if objective is None:
            objective = inf
        if dual_feas is None:
            dual_feas = inf
        if primal_feas is None:
            primal_feas = dtype.type(0) if model.is_unconstrained() else inf

        self._assign(
            status=status,
            counters=snapshot_counters(model),
            solution=solution,
            objective=objective,
            dual_feas=dual_feas,
            primal_feas=primal_feas,
            iter=iter,
            elapsed_time=elapsed_time,
            solver_specific=solver_specific,
        )

    @staticmethod
    def _check_status(status):
        if not is_valid_status(status):
            valid = sorted(STATUSES)
            logger.error(
                "status %r is not a valid status. Use one of the following: %s",
                status, ", ".join(valid),
            )
            raise InvalidStatus(status, valid)

    def _assign(self, status, counters, solution, objective, dual_feas,
                primal_feas, iter, elapsed_time, solver_specific):
        if isinstance(iter, bool) or not isinstance(iter, numbers.Integral):
            raise TypeError(f"iter must be an integer, got {type(iter).__name__}")

        solution = np.array(solution)
        if solution.ndim != 1:
            raise ValueError(f"solution must be one-dimensional, got shape {solution.shape}")
        solution.flags.writeable = False

        self._status = status
        self._counters = counters
        self._solution = solution
        self._objective = _check_real('objective', objective)
        self._dual_feas = _check_real('dual_feas', dual_feas)
        self._primal_feas = _check_real('primal_feas', primal_feas)
        self._iter = int(iter)
        self._elapsed_time = _check_real('elapsed_time', elapsed_time)
        self._solver_specific = dict(solver_specific) if solver_specific else {}

    @property
    def status(self) -> str:
        return self._status

    @property
    def solution(self) -> np.ndarray:
        """Read-only solution vector"""
        return self._solution

    @property
    def objective(self):
        return self._objective

    @property
    def dual_feas(self):
        return self._dual_feas

    @property
    def primal_feas(self):
        return self._primal_feas

    @property
    def iter(self) -> int:
        return self._iter

    @property
    def elapsed_time(self):
        return self._elapsed_time

    @property
    def counters(self) -> NLSCounters:
        """Copy of the evaluation counters taken from the model"""
        return self._counters.copy()

    @property
    def solver_specific(self):
        """Read-only view of the solver specific values"""
        return MappingProxyType(self._solver_specific)

    def is_solved(self) -> bool:
        """Check if the solver returned a stationary or acceptable point"""
        return self._status in SOLVED_STATUSES

    def replace(self, **changes) -> 'ExecutionStats':
        """
        Return a copy of this record with some fields changed.

        The counter snapshot is kept. Accepts the keyword arguments of
        the constructor.
        """
        fields = {
            'status': self._status,
            'solution': self._solution,
            'objective': self._objective,
            'dual_feas': self._dual_feas,
            'primal_feas': self._primal_feas,
            'iter': self._iter,
            'elapsed_time': self._elapsed_time,
            'solver_specific': self._solver_specific,
        }
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"replace() got unexpected fields: {', '.join(sorted(unknown))}")
        fields.update(changes)
        self._check_status(fields['status'])
        stats = object.__new__(type(self))
        stats._assign(counters=self._counters.copy(), **fields)
        return stats

    def __eq__(self, other):
        if not isinstance(other, ExecutionStats):
            return NotImplemented
        mine, theirs = self.to_dict(), other.to_dict()
        extra, other_extra = mine.pop('solver_specific'), theirs.pop('solver_specific')
        return mine == theirs and _same_solver_specific(extra, other_extra)

    __hash__ = None

    def __str__(self):
        buf = io.StringIO()
        print_stats(self, out=buf)
        return buf.getvalue().rstrip("\n")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'status': self._status,
            'solution': self._solution.tolist(),
            'dtype': self._solution.dtype.str,
            'objective': float(self._objective),
            'dual_feas': float(self._dual_feas),
            'primal_feas': float(self._primal_feas),
            'iter': self._iter,
            'elapsed_time': float(self._elapsed_time),
            'counters': self._counters.to_dict(),
            'solver_specific': dict(self._solver_specific),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'ExecutionStats':
        """
        Create ExecutionStats from dictionary, e.g. the output of ``to_dict``.

        No model is involved: counters come from ``d['counters']``.
        Missing numeric fields default to inf (``primal_feas`` included,
        since the constraint structure is unknown).
        """
        cls._check_status(d.get('status'))
        dtype = np.dtype(d.get('dtype', 'float64'))
        inf = dtype.type(np.inf)
        stats = object.__new__(cls)
        stats._assign(
            status=d['status'],
            counters=NLSCounters.from_dict(d.get('counters', {})),
            solution=np.array(d.get('solution', []), dtype=dtype),
            objective=dtype.type(d.get('objective', inf)),
            dual_feas=dtype.type(d.get('dual_feas', inf)),
            primal_feas=dtype.type(d.get('primal_feas', inf)),
            iter=d.get('iter', -1),
            elapsed_time=d.get('elapsed_time', float('inf')),
            solver_specific=d.get('solver_specific'),
        )
        return stats


class FieldKind(Enum):
    """How a tabular field is formatted"""
    INT = 'int'
    REAL = 'real'
    TEXT = 'text'


def _record_field(name):
    return lambda stats, params: getattr(stats, name)


def _base_counter(name):
    return lambda stats, params: getattr(stats.counters, name)


def _residual_counter(name):
    return lambda stats, params: getattr(stats.counters, name)


def _build_field_table():
    table = {
        'status': (lambda stats, params: stats.status_description, FieldKind.TEXT),
        'solution': (lambda stats, params: format_vector(stats.solution, params), FieldKind.TEXT),
        'objective': (_record_field('objective'), FieldKind.REAL),
        'dual_feas': (_record_field('dual_feas'), FieldKind.REAL),
        'primal_feas': (_record_field('primal_feas'), FieldKind.REAL),
        'iter': (_record_field('iter'), FieldKind.INT),
        'elapsed_time': (_record_field('elapsed_time'), FieldKind.REAL),
    }
    for name in Counters.FIELDS:
        table[name] = (_base_counter(name), FieldKind.INT)
    for name in NLSCounters.FIELDS:
        table[name] = (_residual_counter(name), FieldKind.INT)
    return MappingProxyType(table)


FIELDS = _build_field_table()

HEADER_LABELS = MappingProxyType({
    'status': "  Status",
    'iter': "   Iter",
    'neval_obj': "   #obj",
    'neval_grad': "  #grad",
    'neval_cons': "  #cons",
    'neval_jcon': "  #jcon",
    'neval_jgrad': " #jgrad",
    'neval_jac': "   #jac",
    'neval_jprod': " #jprod",
    'neval_jtprod': "#jtprod",
    'neval_hess': "  #hess",
    'neval_hprod': " #hprod",
    'neval_jhprod': "#jhprod",
    'neval_residual': "   #res",
    'neval_jac_residual': "  #jres",
    'objective': "              f",
    'dual_feas': "           ‖∇f‖",
    'primal_feas': "            ‖c‖",
    'elapsed_time': "   Elapsed time",
})


def _check_header_labels():
    orphans = sorted(set(HEADER_LABELS) - set(FIELDS))
    if orphans:
        raise RuntimeError(f"Header labels without a field: {', '.join(orphans)}")


_check_header_labels()


def statsgetfield(stats: AbstractExecutionStats, name: str,
                  params: Optional[DisplayParameters] = None) -> str:
    """
    Fixed-width representation of one field of ``stats``.

    ``status`` gives its description, counter names give the count from
    the snapshot and other names give the record field. Integers take 7
    characters, reals are written as ``%15.8e`` and text is
    right-justified on 8 characters.

    Raises
    ------
    UnknownField
        If ``name`` is neither a counter nor a record field
    """
    try:
        accessor, kind = FIELDS[name]
    except KeyError:
        raise UnknownField(name) from None
    if params is None:
        params = DisplayParameters()
    value = accessor(stats, params)
    if kind is FieldKind.INT:
        return params.int_format(value)
    if kind is FieldKind.REAL:
        return params.real_format(value)
    return params.text_format(value)


def statshead(line: Sequence[str], params: Optional[DisplayParameters] = None) -> str:
    """
    Header matching ``statsline`` for the same field names.

    Raises
    ------
    MissingHeaderLabel
        If a field has no header label
    """
    if params is None:
        params = DisplayParameters()
    labels = []
    for name in line:
        try:
            labels.append(HEADER_LABELS[name])
        except KeyError:
            raise MissingHeaderLabel(name) from None
    return params.separator.join(labels)


def statsline(stats: AbstractExecutionStats, line: Sequence[str],
              params: Optional[DisplayParameters] = None) -> str:
    """One table row: ``statsgetfield`` of each name, joined by the separator"""
    if params is None:
        params = DisplayParameters()
    return params.separator.join(statsgetfield(stats, name, params) for name in line)


def tabulate(records: Iterable[AbstractExecutionStats], line: Sequence[str],
             out=None, params: Optional[DisplayParameters] = None):
    """
    Write a header followed by one row per record.

    Examples
    --------
    >>> tabulate(history, ['iter', 'objective', 'neval_obj'])
       Iter                f     #obj
          0   4.00000000e+00        1
          1   1.00000000e+00        2
    """
    if out is None:
        out = sys.stdout
    out.write(statshead(line, params) + "\n")
    for stats in records:
        out.write(statsline(stats, line, params) + "\n")
