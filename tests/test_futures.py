"""
Tests for gathering futures into a branch
"""

from concurrent.futures import Future, ThreadPoolExecutor

import pytest

from treelog.computation import success, failure
from treelog.futures import gather
from treelog.outcome import Failure


def resolved(dc):
    future = Future()
    future.set_result(dc)
    return future


class TestGather:
    def test_children_follow_given_order(self):
        first, second, third = Future(), Future(), Future()
        third.set_result(success(3, "three"))
        second.set_result(success(2, "two"))
        first.set_result(success(1, "one"))
        result = gather("Numbers", [first, second, third])
        assert result.value == [1, 2, 3]
        assert result.show() == "Numbers\n  one\n  two\n  three"

    def test_fold(self):
        result = gather("Total", [resolved(success(1, "one")), resolved(success(2, "two"))], fold=sum)
        assert result.value == 3

    def test_failure_fails_branch(self):
        result = gather("Numbers", [resolved(success(1, "one")), resolved(failure("two"))])
        assert result.outcome == Failure("Numbers")
        assert result.show() == "Failed: Numbers\n  one\n  Failed: two"

    def test_task_exception_propagates(self):
        future = Future()
        future.set_exception(RuntimeError("boom"))
        with pytest.raises(RuntimeError):
            gather("Numbers", [resolved(success(1, "one")), future])

    def test_with_executor(self):
        with ThreadPoolExecutor(max_workers=4) as pool:
            futures = [pool.submit(lambda x: success(x * x, f"Squared {x}"), x) for x in range(6)]
            result = gather("Squares", futures)
        assert result.value == [0, 1, 4, 9, 16, 25]
        assert [c.label.description for c in result.tree.children] == [f"Squared {x}" for x in range(6)]

    def test_no_futures(self):
        result = gather("Nothing", [])
        assert result.value == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
