import io

import numpy as np
import pytest

from nlpstats import (
    DisplayParameters, ExecutionStats, disp_vector, format_vector, print_stats, show,
)


class TestFormatVector:
    def test_empty(self):
        assert format_vector([]) == "∅"
        assert format_vector(np.array([])) == "∅"

    def test_five_elements_shown(self):
        assert format_vector([1, 2, 3, 4, 5]) == "[1 2 3 4 5]"

    def test_single_element(self):
        assert format_vector(np.array([2.5])) == "[2.5]"

    @pytest.mark.parametrize("n", [6, 7, 100])
    def test_long_vector_truncated(self, n):
        assert format_vector(list(range(1, n + 1))) == f"[1 2 3 4 ⋯ {n}]"

    def test_numpy_elements_plain(self):
        assert format_vector(np.arange(6.0)) == "[0.0 1.0 2.0 3.0 ⋯ 5.0]"

    def test_custom_parameters(self):
        params = DisplayParameters.from_dict({
            'vector_max_len': 3, 'vector_head': 2, 'ellipsis_glyph': "...",
            'empty_glyph': "[]",
        })
        assert format_vector([1, 2, 3], params) == "[1 2 3]"
        assert format_vector([1, 2, 3, 4], params) == "[1 2 ... 4]"
        assert format_vector([], params) == "[]"

    def test_disp_vector_writes(self):
        out = io.StringIO()
        disp_vector(out, [1, 2, 3, 4, 5, 6])
        assert out.getvalue() == "[1 2 3 4 ⋯ 6]"


class TestPrintStats:
    def test_full_report(self, first_order_stats):
        out = io.StringIO()
        print_stats(first_order_stats, out=out)
        assert out.getvalue().splitlines() == [
            "Generic Execution stats",
            "  status: first-order stationary",
            "  objective value: 1.50000000e+00",
            "  primal feasibility: 0.00000000e+00",
            "  dual feasibility: inf",
            "  solution: ∅",
            "  iterations: 10",
            "  elapsed time: inf",
        ]

    def test_primal_feasibility_once(self, first_order_stats):
        assert str(first_order_stats).count("primal feasibility") == 1

    def test_str_matches_print(self, first_order_stats, capsys):
        print_stats(first_order_stats)
        assert capsys.readouterr().out == str(first_order_stats) + "\n"

    def test_solver_specific_block(self, unconstrained_model):
        stats = ExecutionStats(
            'first_order', unconstrained_model,
            solution=np.arange(8.0),
            solver_specific={'radius': 0.25, 'multipliers': np.ones(2), 'restarts': 2, 'method': "tr"},
        )
        lines = str(stats).splitlines()
        assert "  solution: [0.0 1.0 2.0 3.0 ⋯ 7.0]" in lines
        start = lines.index("  solver specific:")
        assert lines[start + 1:] == [
            "    radius: 2.50000000e-01",
            "    multipliers: [1.0 1.0]",
            "    restarts: 2",
            "    method: tr",
        ]

    def test_no_solver_specific_block_when_empty(self, first_order_stats):
        assert "solver specific" not in str(first_order_stats)

    def test_custom_showvec(self, unconstrained_model):
        stats = ExecutionStats('first_order', unconstrained_model, solution=[1.0, 2.0])
        out = io.StringIO()
        print_stats(stats, out=out, showvec=lambda io_, x: io_.write(f"<{len(x)} entries>"))
        assert "  solution: <2 entries>" in out.getvalue().splitlines()


class TestShow:
    def test_one_line(self, first_order_stats):
        assert show(first_order_stats) == "Execution stats: first-order stationary"

    def test_other_status(self, first_order_stats):
        assert show(first_order_stats.replace(status='max_time')) == "Execution stats: maximum elapsed time"


class TestRealFieldsInReport:
    def test_integer_values_in_scientific_notation(self, unconstrained_model):
        stats = ExecutionStats(
            'first_order', unconstrained_model,
            objective=2, dual_feas=0, primal_feas=1, elapsed_time=5,
        )
        lines = str(stats).splitlines()
        assert "  objective value: 2.00000000e+00" in lines
        assert "  primal feasibility: 1.00000000e+00" in lines
        assert "  dual feasibility: 0.00000000e+00" in lines
        assert "  elapsed time: 5.00000000e+00" in lines

    def test_matches_statsgetfield(self, unconstrained_model):
        from nlpstats import statsgetfield
        stats = ExecutionStats('first_order', unconstrained_model, elapsed_time=5)
        assert statsgetfield(stats, 'elapsed_time').strip() in str(stats)

    def test_format_real(self):
        from nlpstats import format_real
        assert format_real(5) == "5.00000000e+00"
        assert format_real(float('inf')) == "inf"
