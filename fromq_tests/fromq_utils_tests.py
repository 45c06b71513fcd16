import numpy as np
import suite
from fromq import from_, from_range, empty

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


@test("intersperse puts the separator between elements only")
def test_intersperse():
    assert_that(from_([1, 2, 3]).util.intersperse(0).to.list() == [1, 0, 2, 0, 3], "push path")
    assert_that(list(from_([1, 2, 3]).util.intersperse(0)) == [1, 0, 2, 0, 3], "pull path")
    assert_that(from_([1]).util.intersperse(0).to.list() == [1], "single element")
    assert_that(empty().util.intersperse(0).to.list() == [], "empty")


@test("intercalate joins sequences with a separator sequence")
def test_intercalate():
    result = from_([[1, 2], [3], [4, 5]]).util.intercalate([0, 0]).to.list()
    assert_that(result == [1, 2, 0, 0, 3, 0, 0, 4, 5], f"got {result}")
    words = ''.join(from_(['ab', 'cd']).util.intercalate(', ').to.list())
    assert_that(words == 'ab, cd', f"got {words!r}")


@test("besides runs a side effect lazily and passes elements through")
def test_besides():
    seen = []
    q = from_([1, 2, 3]).util.besides(seen.append)
    assert_that(seen == [], "nothing runs before consumption")
    assert_that(q.take(2).to.list() == [1, 2], "elements unchanged")
    assert_that(seen == [1, 2], "only pulled elements are seen")


@test("invoke and apply call sequences of functions")
def test_invoke_apply():
    funcs = from_([lambda x: x + 1, lambda x: x * 2])
    assert_that(funcs.util.invoke(3).to.list() == [4, 6], "invoke calls each with the same argument")
    assert_that(funcs.util.apply([1, 2]).to.list() == [2, 3, 2, 4], "apply is function-major")


@test("memoize evaluates the upstream at most once")
def test_memoize_once():
    calls = []
    q = from_([1, 2, 3]).select(lambda x: calls.append(x) or x * 10).util.memoize()
    assert_that(calls == [], "memoize is lazy")
    assert_that(q.to.list() == [10, 20, 30], "first traversal")
    assert_that(list(q) == [10, 20, 30], "second traversal")
    assert_that(calls == [1, 2, 3], f"selector ran once per element, got {calls}")


@test("memoize fills its cache incrementally")
def test_memoize_partial():
    calls = []
    q = from_range(0, 5).select(lambda x: calls.append(x) or x).util.memoize()
    assert_that(q.take(2).to.list() == [0, 1], "partial traversal")
    assert_that(calls == [0, 1], "only what was needed")
    assert_that(q.to.list() == [0, 1, 2, 3, 4], "later traversal completes the cache")
    assert_that(calls == [0, 1, 2, 3, 4], "cached elements are not recomputed")


@test("memoize does not keep a partial cache after an upstream error")
def test_memoize_upstream_error():
    q = from_([1, 0, 2]).select(lambda x: 10 // x).util.memoize()
    assert_raises(ZeroDivisionError, lambda: q.to.list())
    assert_raises(ZeroDivisionError, lambda: q.to.list())
    assert_raises(ZeroDivisionError, lambda: list(q))


@test("memoize evaluates the upstream again after an error")
def test_memoize_retry():
    calls = []
    failing = [True]
    def select(x):
        calls.append(x)
        if x == 2 and failing[0]:
            failing[0] = False
            raise RuntimeError("transient")
        return x * 10
    q = from_([1, 2, 3]).select(select).util.memoize()
    assert_raises(RuntimeError, lambda: q.to.list())
    assert_that(q.to.list() == [10, 20, 30], "second traversal sees the whole sequence")
    assert_that(list(q) == [10, 20, 30], "then served from the cache")
    assert_that(calls == [1, 2, 1, 2, 3], f"got {calls}")


@test("shuffle is a permutation and repeats for an int seed")
def test_shuffle():
    q = from_(range(20)).util.shuffle(random_state=42)
    first = q.to.list()
    assert_that(sorted(first) == list(range(20)), "every element exactly once")
    assert_that(list(q) == first, "the same seed gives the same order on every traversal")
    assert_that(from_([]).util.shuffle(1).to.list() == [], "empty")


@test("shuffle accepts a numpy generator")
def test_shuffle_generator():
    rng = np.random.default_rng(3)
    result = from_('abcdef').util.shuffle(rng).to.list()
    assert_that(sorted(result) == list('abcdef'), "permutation")


@test("sample picks distinct elements, clamped to the length")
def test_sample():
    picked = from_(range(10)).util.sample(3, random_state=5).to.list()
    assert_that(len(picked) == 3 and len(set(picked)) == 3, f"three distinct picks, got {picked}")
    assert_that(all(0 <= p < 10 for p in picked), "picked from the input")
    assert_that(len(from_(range(4)).util.sample(10, 5).to.list()) == 4, "clamped to the input length")
    assert_that(from_(range(4)).util.sample(-2).to.list() == [], "negative count")


@test("random draws with replacement and is not clamped")
def test_random():
    drawn = from_([1, 2]).util.random(10, random_state=9).to.list()
    assert_that(len(drawn) == 10, "exactly count draws")
    assert_that(set(drawn) <= {1, 2}, "drawn from the input")
    assert_that(empty().util.random(3, 9).to.list() == [], "nothing to draw from")
    assert_that(from_([1]).util.random(0).to.list() == [], "zero count")


if __name__ == "__main__":
    suite.main(title="fromq utility test suite")
