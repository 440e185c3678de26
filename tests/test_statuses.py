import io

import pytest

from nlpstats import STATUSES, InvalidStatus, describe, is_valid_status, list_all, show_statuses

EXPECTED_KEYS = {
    'exception', 'first_order', 'acceptable', 'infeasible', 'max_eval',
    'max_iter', 'max_time', 'neg_pred', 'not_desc', 'small_residual',
    'small_step', 'stalled', 'unbounded', 'unknown', 'user',
}


class TestVocabulary:
    def test_exact_key_set(self):
        assert set(STATUSES) == EXPECTED_KEYS

    def test_read_only(self):
        with pytest.raises(TypeError):
            STATUSES['converged'] = "converged"

    @pytest.mark.parametrize("key", sorted(EXPECTED_KEYS))
    def test_describe_non_empty(self, key):
        assert isinstance(describe(key), str)
        assert describe(key)

    def test_known_descriptions(self):
        assert describe('first_order') == "first-order stationary"
        assert describe('max_iter') == "maximum iteration"
        assert describe('user') == "user-requested stop"
        assert describe('unbounded') == "objective function may be unbounded from below"


class TestDescribeInvalid:
    @pytest.mark.parametrize("key", ["", "converged", "FIRST_ORDER", ":first_order", None, 3])
    def test_raises_invalid_status(self, key):
        with pytest.raises(InvalidStatus):
            describe(key)

    def test_is_key_error(self):
        with pytest.raises(KeyError):
            describe("nope")

    def test_message_lists_valid_keys(self):
        with pytest.raises(InvalidStatus) as excinfo:
            describe("nope")
        message = str(excinfo.value)
        assert "'nope'" in message
        assert "first_order" in message
        assert excinfo.value.valid == tuple(sorted(EXPECTED_KEYS))

    def test_is_valid_status(self):
        assert is_valid_status('stalled')
        assert not is_valid_status('stall')
        assert not is_valid_status(['stalled'])


class TestListAll:
    def test_sorted_by_key(self):
        keys = [key for key, _ in list_all()]
        assert keys == sorted(EXPECTED_KEYS)

    def test_pairs_match_describe(self):
        for key, description in list_all():
            assert describe(key) == description


class TestShowStatuses:
    def test_listing(self):
        out = io.StringIO()
        show_statuses(out)
        lines = out.getvalue().splitlines()
        assert lines[0] == "STATUSES:"
        assert len(lines) == 1 + len(EXPECTED_KEYS)
        assert lines[1] == "  :acceptable     => solved to within acceptable tolerances"
        assert "  :user           => user-requested stop" in lines

    def test_defaults_to_stdout(self, capsys):
        show_statuses()
        assert capsys.readouterr().out.startswith("STATUSES:\n")
