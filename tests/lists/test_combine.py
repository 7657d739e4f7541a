"""Tests for combining sequences."""

import logging

import pytest

from listops import lists


def test_append():
    assert lists.append([1, 2], (3,)) == (1, 2, 3)


def test_concat_flattens_one_level():
    assert lists.concat([[1, 2], [], [3, [4]]]) == (1, 2, 3, [4])


def test_concat_map():
    assert lists.concat_map(lambda n: lists.repeat(n, n), [1, 2, 3]) == (1, 2, 2, 3, 3, 3)
    assert lists.concatMap(lambda n: [], [1, 2]) == ()


class TestIntersperse:
    """Separator placement."""

    def test_empty(self):
        assert lists.intersperse(",", []) == ()

    def test_single_element_unchanged(self):
        assert lists.intersperse(",", ["a"]) == ("a",)

    def test_two_elements(self):
        assert lists.intersperse(",", ["a", "b"]) == ("a", ",", "b")

    def test_no_leading_or_trailing_separator(self):
        result = lists.intersperse(0, [1, 2, 3, 4])
        assert result == (1, 0, 2, 0, 3, 0, 4)
        assert len(result) == 2 * 4 - 1


class TestMapN:
    """Positional combination of several sequences."""

    def test_map2_pairs_by_position(self):
        assert lists.map2(lambda a, b: a + b, [1, 2, 3], [10, 20, 30]) == (11, 22, 33)

    @pytest.mark.parametrize(("left", "right"), [(3, 5), (5, 3), (0, 4), (2, 2)])
    def test_map2_truncates_to_shortest(self, left, right):
        result = lists.map2(lambda a, b: (a, b), range(left), range(right))
        assert len(result) == min(left, right)

    def test_map3(self):
        assert lists.map3(lambda a, b, c: a + b + c, "ab", "cd", "ef") == ("ace", "bdf")

    def test_map4_truncates(self):
        result = lists.map4(lambda *xs: sum(xs), [1, 1, 1], [1, 1], [1, 1, 1], [1, 1, 1])
        assert result == (4, 4)

    def test_map5(self):
        result = lists.map5(lambda *xs: xs, [1], [2], [3], [4], [5, 6])
        assert result == ((1, 2, 3, 4, 5),)

    def test_truncation_logs_debug(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.DEBUG, logger="listops.lists.combine"):
            lists.map2(lambda a, b: a, [1, 2], [1])
        assert any("truncating" in rec.message for rec in caplog.records)

    def test_equal_lengths_do_not_log(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.DEBUG, logger="listops.lists.combine"):
            lists.map2(lambda a, b: a, [1, 2], [1, 2])
        assert not caplog.records


def test_unzip_then_map2_rebuilds_pairs(pairs):
    firsts, seconds = lists.unzip(pairs)
    assert lists.map2(lambda a, b: (a, b), firsts, seconds) == pairs
