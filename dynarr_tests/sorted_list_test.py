import numpy as np
import suite
import dgen
from dynarr import SortedList, Duplicates, DuplicateItemError, natural_order, sorted_from_iterable

test = suite.test
assert_that = suite.assert_that
raises = suite.raises


def by_key(a, b):
    return natural_order(a['key'], b['key'])


def is_sorted(items, comparer=natural_order):
    return all(comparer(items[i], items[i + 1]) <= 0 for i in range(len(items) - 1))


# duplicates policy

@test("ignore keeps the first copy and returns its index")
def test_duplicates_ignore():
    lst = SortedList()
    indices = [lst.add(v) for v in (5, 3, 5, 1)]
    assert_that(lst.to.list() == [1, 3, 5], f"ignore policy failed: {lst.to.list()}")
    assert_that(indices == [0, 0, 1, 0], f"unexpected returned indices: {indices}")
    assert_that(lst.add(5) == 2, "ignored duplicate reports where the original sits")


@test("error raises and leaves the list untouched")
def test_duplicates_error():
    lst = SortedList([2, 4], duplicates=Duplicates.ERROR)
    try:
        lst.add(4)
        assert_that(False, "adding a duplicate should raise")
    except DuplicateItemError as e:
        assert_that(isinstance(e, ValueError), "duplicate errors are value errors")
        assert_that('4' in str(e), f"message should name the value: {e}")
    assert_that(lst.to.list() == [2, 4] and lst.count == 2, "list changed after a rejected add")


@test("accept inserts after the run of equal elements")
def test_duplicates_accept():
    lst = SortedList(comparer=by_key, duplicates=Duplicates.ACCEPT)
    for tag, key in (('a', 1), ('b', 2), ('c', 1), ('d', 1), ('e', 0)):
        lst.add({'tag': tag, 'key': key})
    tags = [item['tag'] for item in lst]
    assert_that(tags == ['e', 'a', 'c', 'd', 'b'], f"equal keys should keep arrival order: {tags}")


@test("accept returns the index the new copy landed on")
def test_duplicates_accept_index():
    lst = SortedList([1, 3, 3, 5], duplicates='accept')
    assert_that(lst.duplicates is Duplicates.ACCEPT, "string policy should be converted")
    assert_that(lst.add(3) == 3, "third 3 lands after the other two")
    assert_that(lst.to.list() == [1, 3, 3, 3, 5], f"unexpected contents: {lst.to.list()}")


@test("the policy can change while the list is in use")
def test_duplicates_setter():
    lst = SortedList([1, 2])
    lst.duplicates = 'error'
    with raises(DuplicateItemError):
        lst.add(1)
    lst.duplicates = Duplicates.ACCEPT
    lst.add(1)
    assert_that(lst.to.list() == [1, 1, 2], "accept after the switch")
    with raises(ValueError):
        lst.duplicates = 'sometimes'


# ordering

@test("random adds always leave the list sorted")
def test_random_adds_sorted():
    gen = dgen.Generator(99)
    for policy in Duplicates:
        lst = SortedList(duplicates=policy)
        for value in gen.integers(300, 0, 80).tolist():
            if policy is Duplicates.ERROR and value in lst:
                continue
            lst.add(value)
            assert_that(lst.count <= lst.capacity, "count exceeds capacity")
        items = lst.to.list()
        assert_that(is_sorted(items), f"{policy.name} list is out of order")
        if policy is not Duplicates.ACCEPT:
            assert_that(len(set(items)) == len(items), f"{policy.name} list holds duplicates")


@test("accept keeps every value, ignore keeps the distinct ones")
def test_policy_counts():
    values = dgen.Generator(5).integers(100, 0, 20).tolist()
    accepted = SortedList(values, duplicates=Duplicates.ACCEPT)
    ignored = SortedList(values)
    assert_that(accepted.to.list() == sorted(values), "accept should match sorted()")
    assert_that(ignored.to.list() == sorted(set(values)), "ignore should match sorted(set())")


@test("any arrival order of distinct keys gives the same list")
def test_arrival_order():
    gen = dgen.Generator(23)
    keys = list(range(64))
    for _ in range(5):
        lst = SortedList(gen.shuffled(keys))
        assert_that(lst.to.list() == keys, "shuffled input should sort back to the range")


@test("a custom comparer defines the order")
def test_descending():
    lst = sorted_from_iterable([3, 9, 1, 7], comparer=lambda a, b: natural_order(b, a))
    assert_that(lst.to.list() == [9, 7, 3, 1], f"descending order failed: {lst.to.list()}")
    assert_that(lst.binary_search(3) == (True, 2), "search uses the list comparer")
    assert_that(lst.index_of(7) == 1, "linear search uses the list comparer")


@test("words sort case-insensitively with a key comparer")
def test_case_insensitive():
    words = dgen.Generator(17).words(30)
    mixed = [w.upper() if i % 2 else w for i, w in enumerate(words)]
    def ignore_case(a, b): return natural_order(a.lower(), b.lower())
    lst = SortedList(mixed, comparer=ignore_case)
    items = lst.to.list()
    assert_that(is_sorted(items, ignore_case), "not sorted ignoring case")
    assert_that(len(items) == len({w.lower() for w in mixed}), "case variants should count as duplicates")


@test("sorted value lists use numpy buffers")
def test_value_dtype():
    lst = SortedList([2.5, -1.0, 2.5, 0.0], dtype=np.float64)
    assert_that(lst.dtype == np.float64, "dtype not kept")
    assert_that(lst.to.list() == [-1.0, 0.0, 2.5], f"value sorted list failed: {lst.to.list()}")
    assert_that(lst.binary_search(0.0) == (True, 1), "vectorized binary search failed")
    accepting = SortedList([3, 1, 3, 2], duplicates=Duplicates.ACCEPT, dtype=np.int64)
    assert_that(accepting.to.list() == [1, 2, 3, 3], "value list accepting duplicates failed")


@test("a typed sorted list rejects values its dtype would round")
def test_value_dtype_lossy():
    lst = SortedList([3], dtype=np.int64)
    with raises(ValueError):
        lst.add(3.7)
    lst.add(3.0)
    assert_that(lst.to.list() == [3], f"3.0 is the stored 3, so it is ignored: {lst.to.list()}")


@test("add_range grows the buffer before adding")
def test_add_range_capacity():
    lst = SortedList()
    lst.add_range([4, 2, 3, 1])
    assert_that(lst.capacity == 4, f"capacity should be reserved up front: {lst.capacity}")
    assert_that(lst.to.list() == [1, 2, 3, 4], "add_range should sort")


@test("removal keeps the order")
def test_removal():
    lst = SortedList(range(10))
    lst.delete(0)
    lst.delete_range(3, 2)
    lst.remove(9)
    assert_that(lst.to.list() == [1, 2, 3, 6, 7, 8], f"unexpected contents: {lst.to.list()}")
    lst.add(5)
    assert_that(lst.to.list() == [1, 2, 3, 5, 6, 7, 8], "adding after removals stays sorted")


@test("order cannot be broken from outside")
def test_no_positional_writes():
    lst = SortedList([1, 2, 3])
    for name in ('insert', 'insert_range', 'sort', 'exchange', 'move', 'reverse'):
        assert_that(not hasattr(lst, name), f"sorted list should not expose {name}")
    with raises(TypeError):
        lst[0] = 10


if __name__ == "__main__":
    suite.run(title="dynarr sorted list test suite")
