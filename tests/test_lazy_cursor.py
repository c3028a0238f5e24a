import pytest

from lazy import LazyCursor
from models import NullArgumentError, UnsupportedInfiniteSourceError


class TestLazyCursorChaining:
    """Test the chainable facade"""

    def test_deferred_execution(self):
        """Test that operations are not executed until pulled"""
        call_count = 0

        def track_calls(x):
            nonlocal call_count
            call_count += 1
            return x * 2

        lazy_cur = LazyCursor.of(range(10)).map(track_calls)
        assert call_count == 0, "Operations should not execute during definition"

        result = lazy_cur.limit(3).to_list()
        assert call_count == 3, f"Expected exactly 3 calls, got {call_count}"
        assert result == [0, 2, 4], f"Unexpected result: {result}"

    def test_basic_operations(self):
        result = LazyCursor.of([1, 2, 3, 4, 5]).map(lambda x: x * 2).filter(lambda x: x > 4).to_list()
        assert result == [6, 8, 10]

    def test_range_sources(self):
        assert LazyCursor.range(5).to_list() == [1, 2, 3, 4]
        assert LazyCursor.range(0, 3).to_list() == [0, 1, 2]
        assert LazyCursor.closed_range(3, 5).to_list() == [3, 4, 5]

    def test_infinite_chain(self):
        evens = LazyCursor.iterate(0, lambda x: x + 1).filter(lambda x: x % 2 == 0)
        assert evens.is_infinite is True
        bounded = evens.take(4)
        assert bounded.is_infinite is False
        assert bounded.to_list() == [0, 2, 4, 6]

    def test_generate(self):
        assert LazyCursor.generate(lambda: "x").limit(2).join("") == "xx"

    def test_zip_with(self):
        letters = LazyCursor.of("abc")
        result = LazyCursor.range(1, 10).zip_with(letters, lambda n, c: f"{n}{c}").to_list()
        assert result == ["1a", "2b", "3c"]

    def test_reductions(self):
        assert LazyCursor.range(1, 6).reduce(lambda a, b: a * b, 1) == 120
        assert LazyCursor.range(1, 6).count() == 5
        assert LazyCursor.range(1, 6).join() == "1, 2, 3, 4, 5"
        assert LazyCursor.range(1, 6).get(2) == 3
        assert LazyCursor.iterate(1, lambda x: x + 1).reduce_until(lambda a, b: a + b, 0, lambda acc: acc > 55) == 66

    def test_first(self):
        assert LazyCursor.of([7, 8]).first() == 7
        assert LazyCursor.of([]).first(default="none") == "none"
        assert LazyCursor.iterate(3, lambda x: x).first() == 3

    def test_equals(self):
        assert LazyCursor.of([1, 2, 3]).equals(LazyCursor.range(1, 4)) is True
        assert LazyCursor.of([1, 2]).equals([1, 2, 3]) is False

    def test_iteration(self):
        assert [x for x in LazyCursor.range(1, 4)] == [1, 2, 3]

    def test_single_pass(self):
        """Test a LazyCursor is consumed by a reduction"""
        lazy_cur = LazyCursor.range(1, 4)
        assert lazy_cur.to_list() == [1, 2, 3]
        assert lazy_cur.to_list() == []


class TestLazyCursorErrors:

    def test_infinite_reduction_refused(self):
        with pytest.raises(UnsupportedInfiniteSourceError):
            LazyCursor.generate(lambda: 1).count()

    def test_none_source(self):
        with pytest.raises(NullArgumentError):
            LazyCursor.of(None)
