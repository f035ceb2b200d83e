import logging
import suite
from functools import cmp_to_key
from dgen import from_schema
from seqy import seq, seqv, seqi, empty, sort, sortc, Comparable, InvalidOperationError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


class Person:
    """a record that orders itself by age"""

    def __init__(self, name: str, age: int):
        self.name = name
        self.age = age

    def compare(self, other) -> int:
        return self.age - other.age

    def __repr__(self) -> str:
        return f"Person({self.name!r}, {self.age})"


class Animal:
    """a record with no compare() at all"""

    def __init__(self, name: str):
        self.name = name


person_schema = {
    'name': 'first_name',
    'age': {'_qen_provider': 'int', 'min': 5, 'max': 100}
}


def people(count: int, seed: int) -> list:
    return from_schema(person_schema, seed=seed, factory=lambda r: Person(**r)).take(count).to_array()


integers = [0, 5, 3, 4, 1, 9, 7, 8, 2, 5, 6, 5]


# sort()

@test("sort without comparer orders natively")
def test_sort_default():
    assert_that(seqv(5, 3, 4, 1).sort().to_array() == [1, 3, 4, 5], "should sort ascending")
    assert_that(seq(integers).sort().to_array() == sorted(integers), "should match sorted()")


@test("sort with comparer")
def test_sort_comparer():
    result = seqv(5, 3, 4, 1).sort(lambda a, b: b - a).to_array()
    assert_that(result == [5, 4, 3, 1], f"should sort descending: {result}")


@test("sort with an arbitrary comparer matches sorted with cmp_to_key")
def test_sort_arbitrary_comparer():
    comparer = lambda a, b: a * 2 + b
    result = seq(integers).sort(comparer).to_array()
    assert_that(result == sorted(integers, key=cmp_to_key(comparer)), f"unexpected order: {result}")


@test("sort is stable for equal keys")
def test_sort_stable():
    words = ['pear', 'fig', 'kiwi', 'yam', 'plum']
    result = seq(words).sort(lambda a, b: len(a) - len(b)).to_array()
    assert_that(result == ['fig', 'yam', 'pear', 'kiwi', 'plum'], f"ties should keep source order: {result}")


@test("sort takes a snapshot of the source")
def test_sort_snapshot():
    data = [3, 1, 2]
    ordered = seq(data).sort()
    data.append(0)
    assert_that(ordered.to_array() == [1, 2, 3], "later source changes should not leak into the sorted result")
    assert_that(ordered.to_array() == [1, 2, 3], "sorted sequence should be re-iterable")


@test("sort on empty sequence")
def test_sort_empty():
    assert_that(empty().sort().to_array() == [], "empty stays empty")
    assert_that(empty().sortc().to_array() == [], "empty stays empty for sortc")


@test("sorted sequence keeps composing lazily")
def test_sort_then_compose():
    result = seq(integers).sort().filter(lambda x: x > 4).take(3).to_array()
    assert_that(result == [5, 5, 5], f"sort then filter/take failed: {result}")


@test("sort default comparer refuses unorderable mixes")
def test_sort_unorderable():
    assert_raises(TypeError, lambda: seqv(1, 'a', 2).sort(), "int and str cannot be ordered")


# sortc()

@test("person records satisfy the comparable protocol")
def test_person_is_comparable():
    assert_that(isinstance(Person('x', 1), Comparable), "person should be comparable")
    assert_that(not isinstance(Animal('x'), Comparable), "animal should not be comparable")


@test("sortc sorts comparables ascending")
def test_sortc_ascending():
    crowd = people(16, seed=7)
    actual = seq(crowd).sortc().to_array()
    expected = sorted(crowd, key=lambda p: p.age)
    assert_that(actual == expected, f"ascending order mismatch: {actual}")


@test("sortc sorts comparables descending")
def test_sortc_descending():
    crowd = people(16, seed=11)
    actual = seq(crowd).sortc(True).to_array()
    expected = sorted(crowd, key=lambda p: p.age, reverse=True)
    assert_that(actual == expected, f"descending order mismatch: {actual}")


@test("sortc over a streamed, expanded source")
def test_sortc_streamed():
    provider = from_schema(person_schema, seed=3, factory=lambda r: Person(**r))
    ages = seqi(20, lambda n: seq(provider.stream()).take(n)).sortc().map(lambda p: p.age).to_array()
    assert_that(len(ages) == 20, f"should sort 20 people: {len(ages)}")
    assert_that(ages == sorted(ages), f"ages should ascend: {ages}")


@test("sortc raises for non comparable elements")
def test_sortc_not_comparable():
    e = assert_raises(InvalidOperationError, lambda: seqv(0, 3, 2, 1, 4).sortc(), "ints have no compare()")
    assert_that("compare" in str(e), f"unexpected error: {e}")
    assert_raises(InvalidOperationError, lambda: seqv(Person('a', 1), Animal('b')).sortc(),
                  "one bad element should fail the whole sort")


@test("sortc translates comparison failures")
def test_sortc_translates_errors():
    class Grumpy:
        def compare(self, other):
            raise TypeError("refusing to compare")

    e = assert_raises(InvalidOperationError, lambda: seqv(Grumpy(), Grumpy()).sortc(), "should be translated")
    assert_that(isinstance(e.__cause__, TypeError), "original error should be chained")


class RecordCollector(logging.Handler):
    """keeps every log message it receives"""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


def collect_logs(action) -> list:
    """run action with DEBUG enabled on the seqy logger tree, returning the messages"""
    seqy_logger = logging.getLogger('seqy')
    collector = RecordCollector()
    previous_level = seqy_logger.level
    seqy_logger.addHandler(collector)
    seqy_logger.setLevel(logging.DEBUG)
    try:
        action()
    finally:
        seqy_logger.removeHandler(collector)
        seqy_logger.setLevel(previous_level)
    return collector.messages


@test("sorting logs its materialization at debug level")
def test_sort_debug_logging():
    messages = collect_logs(lambda: seqv(3, 1, 2).sort())
    assert_that("materialized 3 items for sorting" in messages, f"missing sort record: {messages}")

    messages = collect_logs(lambda: seq(people(4, seed=5)).sortc())
    assert_that("materialized 4 items for sorting" in messages, f"missing sortc record: {messages}")


@test("sortc logs a translated comparison failure")
def test_sortc_failure_logging():
    class Broken:
        def compare(self, other):
            raise AttributeError("no age here")

    def failing_sort():
        try:
            seqv(Broken(), Broken()).sortc()
        except InvalidOperationError:
            pass

    messages = collect_logs(failing_sort)
    assert_that(any("comparison failed" in m and "no age here" in m for m in messages),
                f"missing translation record: {messages}")


@test("sorted stage holds only its snapshot")
def test_sorted_stage_drops_upstream():
    ordered = seq([3, 1, 2]).map(lambda x: x * 10).sort()
    assert_that(ordered.source.upstream == (), "sorted stage should not reference the upstream pipeline")
    assert_that(ordered.to_array() == [10, 20, 30], "snapshot should still be sorted")

    crowd = [Person('a', 40), Person('b', 20)]
    by_age = seq(crowd).sortc()
    assert_that(by_age.source.upstream == (), "sortc stage should not reference the upstream pipeline")
    assert_that(crowd[0].name == 'a', "sorting should not reorder the caller's list")


# free functions

@test("free sort and sortc functions")
def test_free_sort_functions():
    assert_that(sort([3, 1, 2]).to_array() == [1, 2, 3], "free sort ascending")
    assert_that(sort([3, 1, 2], lambda a, b: b - a).to_array() == [3, 2, 1], "free sort with comparer")
    crowd = [Person('a', 40), Person('b', 20), Person('c', 30)]
    assert_that([p.name for p in sortc(crowd)] == ['b', 'c', 'a'], "free sortc ascending")
    assert_that([p.name for p in sortc(crowd, descending=True)] == ['a', 'c', 'b'], "free sortc descending")


if __name__ == "__main__":
    suite.main(title="seqy sorting test suite")
