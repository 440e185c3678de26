"""
Status vocabulary shared by all solvers reporting through nlpstats
"""
import sys
from types import MappingProxyType
from typing import List, Tuple

from .exceptions import InvalidStatus


STATUSES = MappingProxyType({
    'exception': 'unhandled exception',
    'first_order': 'first-order stationary',
    'acceptable': 'solved to within acceptable tolerances',
    'infeasible': 'problem may be infeasible',
    'max_eval': 'maximum number of function evaluations',
    'max_iter': 'maximum iteration',
    'max_time': 'maximum elapsed time',
    'neg_pred': 'negative predicted reduction',
    'not_desc': 'not a descent direction',
    'small_residual': 'small residual',
    'small_step': 'step too small',
    'stalled': 'stalled',
    'unbounded': 'objective function may be unbounded from below',
    'unknown': 'unknown',
    'user': 'user-requested stop',
})

# Statuses meaning the returned point is a usable solution
SOLVED_STATUSES = frozenset({'first_order', 'acceptable'})


def is_valid_status(status) -> bool:
    """Check if status belongs to the vocabulary"""
    return isinstance(status, str) and status in STATUSES


def describe(status) -> str:
    """
    Return the human-readable description of a status.

    Parameters
    ----------
    status : str
        Status key, e.g. ``'first_order'``

    Returns
    -------
    str
        Fixed description of the status

    Raises
    ------
    InvalidStatus
        If ``status`` is not a key of ``STATUSES``
    """
    if not is_valid_status(status):
        raise InvalidStatus(status, sorted(STATUSES))
    return STATUSES[status]


def list_all() -> List[Tuple[str, str]]:
    """All (key, description) pairs sorted by key"""
    return [(key, STATUSES[key]) for key in sorted(STATUSES)]


def show_statuses(out=None):
    """
    Write the list of available statuses.

    Examples
    --------
    >>> from nlpstats import show_statuses
    >>> show_statuses()
    STATUSES:
      :acceptable     => solved to within acceptable tolerances
      ...
    """
    if out is None:
        out = sys.stdout
    out.write("STATUSES:\n")
    for key, description in list_all():
        out.write(f"  :{key:<14} => {description}\n")
