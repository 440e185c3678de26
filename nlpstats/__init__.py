"""
nlpstats Python Package

Execution statistics of nonlinear optimization solvers: status vocabulary,
evaluation counter snapshots and fixed-width reporting.
"""

from .statuses import STATUSES, describe, list_all, is_valid_status, show_statuses
from .counters import Counters, NLSCounters, snapshot_counters
from .model import Model, LeastSquaresModel
from .parameters import DisplayParameters
from .exceptions import StatsError, InvalidStatus, UnknownField, MissingHeaderLabel
from .display import format_vector, format_real, disp_vector, print_stats, show
from .stats import (
    AbstractExecutionStats, ExecutionStats, FIELDS, HEADER_LABELS,
    get_status, statsgetfield, statshead, statsline, tabulate
)

__version__ = "0.1.0"

__all__ = [
    'ExecutionStats',
    'AbstractExecutionStats',
    'Model',
    'LeastSquaresModel',
    'Counters',
    'NLSCounters',
    'DisplayParameters',
    '__version__',
    # Status vocabulary
    'STATUSES',
    'describe',
    'list_all',
    'is_valid_status',
    'show_statuses',
    'get_status',
    # Reporting
    'FIELDS',
    'HEADER_LABELS',
    'statsgetfield',
    'statshead',
    'statsline',
    'tabulate',
    'format_vector',
    'format_real',
    'disp_vector',
    'print_stats',
    'show',
    'snapshot_counters',
    # Errors
    'StatsError',
    'InvalidStatus',
    'UnknownField',
    'MissingHeaderLabel',
]
