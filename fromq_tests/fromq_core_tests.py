import suite
from dgen import from_schema
from fromq import from_, from_range, empty, repeat, generate, Query

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# test data schemas
person_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 100}),
    'name': 'word',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'department': {'_qen_provider': 'choice', 'from': ['eng', 'sales', 'hr', 'marketing']},
    'active': ('pybool', {})
}

# helper data
numbers = from_(range(1, 11))  # 1 through 10
nested_data = from_([[1, 2], [3, 4, 5], [], [6]])


class CountingSource:
    """an endless re-iterable source that records how many elements were produced"""

    def __init__(self):
        self.pulled = 0

    def __iter__(self):
        n = 0
        while True:
            self.pulled += 1
            yield n
            n += 1


# --- from_ ---

@test("from_ wraps a list and replays it on every traversal")
def test_from_list():
    q = from_([1, 2, 3])
    assert_that(q.to.list() == [1, 2, 3], "first traversal")
    assert_that(list(q) == [1, 2, 3], "second traversal, pull path")


@test("from_ with several sources concatenates them")
def test_from_variadic():
    q = from_([1, 2], (3,), range(4, 6))
    assert_that(q.to.list() == [1, 2, 3, 4, 5], "sources should be appended in order")


@test("from_ unwraps an existing query instead of nesting it")
def test_from_query():
    inner = from_([1, 2])
    assert_that(from_(inner).source is inner.source, "the stage should be shared")


@test("from_ over a generator is single-pass")
def test_from_generator():
    q = from_(x for x in range(3))
    assert_that(q.to.list() == [0, 1, 2], "first traversal sees everything")
    assert_that(q.to.list() == [], "a generator cannot be restarted")


@test("from_ rejects non-iterables")
def test_from_rejects():
    assert_raises(TypeError, lambda: from_(42))


@test("factories produce the expected sequences")
def test_factories():
    assert_that(from_range(3, 4).to.list() == [3, 4, 5, 6], "from_range")
    assert_that(empty().to.list() == [], "empty")
    assert_that(repeat('x', 3).to.list() == ['x', 'x', 'x'], "bounded repeat")
    assert_that(repeat('x').take(2).to.list() == ['x', 'x'], "endless repeat")
    assert_that(generate(lambda: 7, 2).to.list() == [7, 7], "bounded generate")


@test("generate calls its function once per element per traversal")
def test_generate_lazy():
    calls = []
    q = generate(lambda: calls.append(1) or len(calls))
    assert_that(q.take(3).to.list() == [1, 2, 3], "values come from the function")
    assert_that(len(calls) == 3, "no extra calls")
    assert_that(len(calls) == 3 and q.take(0).to.list() == [], "take(0) calls nothing")


# --- where / select / select_many ---

@test("where filters elements correctly")
def test_where_basic():
    evens = numbers.where(lambda x: x % 2 == 0).to.list()
    assert_that(evens == [2, 4, 6, 8, 10], "should filter even numbers")


@test("where handles empty result")
def test_where_empty_result():
    assert_that(numbers.where(lambda x: x > 100).to.list() == [], "should return empty list for no matches")


@test("where with records from a schema")
def test_where_records():
    people = from_schema(person_schema, seed=42).take(30)
    engineers = people.where(lambda p: p['department'] == 'eng').to.list()
    assert_that(all(p['department'] == 'eng' for p in engineers), "only engineers should remain")
    assert_that(people.to.count() == 30, "take bounds the endless record source")


@test("select transforms every element 1:1")
def test_select_basic():
    squares = numbers.select(lambda x: x * x).to.list()
    assert_that(squares == [1, 4, 9, 16, 25, 36, 49, 64, 81, 100], "should square all numbers")


@test("select_many flattens exactly one level")
def test_select_many():
    assert_that(nested_data.select_many(lambda x: x).to.list() == [1, 2, 3, 4, 5, 6], "should flatten")
    deep = from_([[[1], [2]], [[3]]]).select_many(lambda x: x).to.list()
    assert_that(deep == [[1], [2], [3]], "inner lists should survive")


@test("select_many accepts queries as selector results")
def test_select_many_queries():
    result = from_([1, 2]).select_many(lambda n: from_range(0, n)).to.list()
    assert_that(result == [0, 0, 1], f"got {result}")


# --- concat / plus ---

@test("concat appends sequences without interleaving")
def test_concat():
    result = from_([1, 2]).concat([3], from_([4, 5])).to.list()
    assert_that(result == [1, 2, 3, 4, 5], f"got {result}")


@test("plus appends single values")
def test_plus():
    assert_that(from_([1]).plus(2, 3).to.list() == [1, 2, 3], "values should follow the sequence")


@test("concat keeps going after a stage that ends on its own")
def test_concat_after_take():
    result = from_(from_range(0, 10).take(2), [9]).to.list()
    assert_that(result == [0, 1, 9], f"take ending should not stop the concat, got {result}")
    zipped = from_(from_([1, 2, 3]).zip.zip(['a']), [(0, 'z')]).to.list()
    assert_that(zipped == [(1, 'a'), (0, 'z')], f"zip ending should not stop the concat, got {zipped}")


# --- skip / take ---

@test("skip and take slice the sequence")
def test_skip_take():
    assert_that(numbers.skip(7).to.list() == [8, 9, 10], "skip")
    assert_that(numbers.take(3).to.list() == [1, 2, 3], "take")
    assert_that(numbers.skip(2).take(2).to.list() == [3, 4], "skip then take")
    assert_that(numbers.take(0).to.list() == [], "take 0")
    assert_that(numbers.take(-1).to.list() == [], "negative take")
    assert_that(numbers.skip(20).to.list() == [], "skip past the end")


@test("take consumes exactly count upstream elements on the push path")
def test_take_short_circuit_push():
    source = CountingSource()
    assert_that(from_(source).take(3).to.list() == [0, 1, 2], "first three elements")
    assert_that(source.pulled == 3, f"expected 3 upstream pulls, got {source.pulled}")


@test("take consumes exactly count upstream elements on the pull path")
def test_take_short_circuit_pull():
    source = CountingSource()
    assert_that(list(from_(source).take(3)) == [0, 1, 2], "first three elements")
    assert_that(source.pulled == 3, f"expected 3 upstream pulls, got {source.pulled}")


@test("take stops an upstream filter and map mid-stream")
def test_take_through_pipeline():
    source = CountingSource()
    result = from_(source).where(lambda x: x % 2 == 1).select(lambda x: x * 10).take(2).to.list()
    assert_that(result == [10, 30], f"got {result}")
    assert_that(source.pulled == 4, f"expected 4 upstream pulls, got {source.pulled}")


@test("take_while and skip_while split at the first failing element")
def test_take_skip_while():
    data = from_([1, 2, 3, 1, 2])
    assert_that(data.take_while(lambda x: x < 3).to.list() == [1, 2], "take_while push")
    assert_that(list(data.take_while(lambda x: x < 3)) == [1, 2], "take_while pull")
    assert_that(data.skip_while(lambda x: x < 3).to.list() == [3, 1, 2], "skip_while push")
    assert_that(list(data.skip_while(lambda x: x < 3)) == [3, 1, 2], "skip_while pull")


@test("take_while stops an endless source")
def test_take_while_endless():
    source = CountingSource()
    assert_that(from_(source).take_while(lambda x: x < 4).to.list() == [0, 1, 2, 3], "prefix")
    assert_that(source.pulled == 5, "only the first failing element is pulled past the prefix")


@test("skip_last drops the tail")
def test_skip_last():
    assert_that(from_([1, 2, 3, 4, 5]).skip_last(2).to.list() == [1, 2, 3], "push path")
    assert_that(list(from_([1, 2, 3, 4, 5]).skip_last(2)) == [1, 2, 3], "pull path")
    assert_that(from_([1]).skip_last(2).to.list() == [], "shorter than the count")
    assert_that(from_([1, 2]).skip_last(0).to.list() == [], "non-positive count gives nothing")


@test("take_last keeps the tail")
def test_take_last():
    assert_that(from_([1, 2, 3, 4, 5]).take_last(2).to.list() == [4, 5], "last two")
    assert_that(from_([1, 2]).take_last(5).to.list() == [1, 2], "longer than the sequence")
    assert_that(from_([1, 2]).take_last(0).to.list() == [], "zero count")
    assert_that(from_([1, 2]).take_last(-3).to.list() == [], "negative count")


# --- reverse / thru ---

@test("reverse inverts order without touching the source list")
def test_reverse():
    data = [1, 2, 3]
    assert_that(from_(data).reverse().to.list() == [3, 2, 1], "reversed")
    assert_that(data == [1, 2, 3], "source list should be unchanged")


@test("thru hands a fresh list to the transformer on every traversal")
def test_thru():
    seen = []
    q = from_([3, 1, 2]).thru(lambda values: seen.append(list(values)) or sorted(values))
    assert_that(q.to.list() == [1, 2, 3], "transformer result is queried")
    assert_that(list(q) == [1, 2, 3], "and again")
    assert_that(seen == [[3, 1, 2], [3, 1, 2]], "once per traversal")


# --- composition ---

@test("operators return new queries and never mutate the original")
def test_immutability():
    base = from_([1, 2, 3])
    filtered = base.where(lambda x: x > 1)
    assert_that(isinstance(filtered, Query) and filtered is not base, "new query")
    assert_that(base.to.list() == [1, 2, 3], "base unchanged")
    assert_that(filtered.select(str).to.list() == ['2', '3'], "further composition")
    assert_that(filtered.to.list() == [2, 3], "intermediate unchanged")


@test("nothing runs until the query is consumed")
def test_laziness():
    calls = []
    q = from_([1, 2, 3]).select(lambda x: calls.append(x) or x)
    assert_that(calls == [], "building the query should not call the selector")
    q.to.first()
    assert_that(calls == [1], "first should stop after one element")


@test("selector errors propagate unchanged")
def test_error_propagation():
    q = from_([1, 0]).select(lambda x: 1 / x).order_by(lambda x: x)
    assert_raises(ZeroDivisionError, lambda: q.to.list())
    assert_raises(ZeroDivisionError, lambda: list(q))


@test("package banner keeps its backslashes")
def test_package_banner():
    import fromq
    assert_that("\\__\\_\\" in fromq.__doc__, "banner text is kept verbatim")


if __name__ == "__main__":
    suite.main(title="fromq core operations test suite")
