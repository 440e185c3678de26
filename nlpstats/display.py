"""
Text rendering of vectors and execution records
"""
import numbers
import sys

import numpy as np

from .parameters import DisplayParameters


def format_vector(x, params=None) -> str:
    """
    Short representation of a vector.

    An empty vector is shown as ``∅``, up to ``vector_max_len`` elements
    are shown in full and longer vectors show their first
    ``vector_head`` elements, an ellipsis and the last element.

    Examples
    --------
    >>> format_vector([])
    '∅'
    >>> format_vector([1, 2, 3])
    '[1 2 3]'
    >>> format_vector(range(1, 10))
    '[1 2 3 4 ⋯ 9]'
    """
    if params is None:
        params = DisplayParameters()
    n = len(x)
    if n == 0:
        return params.empty_glyph
    if n <= params.vector_max_len:
        return "[" + " ".join(str(v) for v in x) + "]"
    head = " ".join(str(x[i]) for i in range(params.vector_head))
    return f"[{head} {params.ellipsis_glyph} {x[n - 1]}]"


def disp_vector(out, x, params=None):
    """Write ``format_vector(x)`` to ``out``"""
    out.write(format_vector(x, params))


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, numbers.Integral)


def format_value(value, params=None) -> str:
    """Plain representation of a scalar: reals in scientific notation"""
    if params is None:
        params = DisplayParameters()
    if _is_real(value):
        return f"{float(value):.{params.real_digits}e}"
    return str(value)


def format_real(value, params=None) -> str:
    """Scientific notation for a real-valued field, integers included"""
    if params is None:
        params = DisplayParameters()
    return f"{float(value):.{params.real_digits}e}"


def show(stats) -> str:
    """One-line summary of an execution record"""
    return f"Execution stats: {stats.status_description}"


def print_stats(stats, out=None, showvec=disp_vector, params=None):
    """
    Write a multi-line report of an execution record.

    Parameters
    ----------
    stats : AbstractExecutionStats
        Record to display
    out : file-like, optional
        Text stream (default: ``sys.stdout``)
    showvec : callable, optional
        ``showvec(out, x)`` writes a vector; defaults to ``disp_vector``
    params : DisplayParameters, optional
        Formatting parameters
    """
    if out is None:
        out = sys.stdout
    if params is None:
        params = DisplayParameters()

    out.write("Generic Execution stats\n")
    out.write(f"  status: {stats.status_description}\n")
    out.write(f"  objective value: {format_real(stats.objective, params)}\n")
    out.write(f"  primal feasibility: {format_real(stats.primal_feas, params)}\n")
    out.write(f"  dual feasibility: {format_real(stats.dual_feas, params)}\n")
    out.write("  solution: ")
    showvec(out, stats.solution)
    out.write("\n")
    out.write(f"  iterations: {stats.iter}\n")
    out.write(f"  elapsed time: {format_real(stats.elapsed_time, params)}\n")

    if len(stats.solver_specific) > 0:
        out.write("  solver specific:\n")
        for key, value in stats.solver_specific.items():
            out.write(f"    {key}: ")
            if isinstance(value, (list, tuple)) or (
                    isinstance(value, np.ndarray) and value.ndim > 0):
                showvec(out, value)
            else:
                out.write(format_value(value, params))
            out.write("\n")
