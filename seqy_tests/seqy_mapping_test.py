import suite
from seqy import get_keys, get_values, to_list_of, sort, ElementTypeError

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises


class Thing(str):
    """a str subclass, standing in for a named string type"""
    pass


# --- to_list_of ---

@test("to_list_of converts str subclasses to plain str")
def test_to_list_of_subclass():
    result = to_list_of([Thing("A"), Thing("B")])
    assert_equal(result, ["A", "B"], "values kept")
    assert_that(all(type(x) is str for x in result), "elements are plain str")


@test("to_list_of accepts tuples and generators")
def test_to_list_of_iterables():
    assert_equal(to_list_of(("a", "b")), ["a", "b"], "tuple")
    assert_equal(to_list_of(s for s in "xy"), ["x", "y"], "generator")


@test("to_list_of rejects non-container input")
def test_to_list_of_bad_container():
    assert_raises(ElementTypeError, lambda: to_list_of("abc"), "a string is not a list of strings")
    assert_raises(ElementTypeError, lambda: to_list_of(42), "an int is not iterable")
    assert_raises(ElementTypeError, lambda: to_list_of({"a": 1}), "mappings are rejected")


@test("to_list_of rejects elements of the wrong type")
def test_to_list_of_bad_element():
    error = assert_raises(ElementTypeError, lambda: to_list_of(["a", 1]))
    assert_that("element 1" in str(error), "message names the offending position")
    assert_that(isinstance(error, TypeError), "element faults are TypeErrors")


@test("to_list_of with another element type or no check")
def test_to_list_of_element_type():
    assert_equal(to_list_of([1, 2], element_type=int), [1, 2], "ints")
    assert_equal(to_list_of([1, "a"], element_type=None), [1, "a"], "no check")


# --- get_keys / get_values ---

@test("get_keys returns every key")
def test_get_keys():
    keys = get_keys({"A": 1, "b": 2})
    assert_equal(sort(keys), ["A", "b"], "keys, order unspecified")


@test("get_values returns every value")
def test_get_values():
    values = get_values({1: "a", 2: "b"})
    assert_equal(sort(values), ["a", "b"], "values, order unspecified")


@test("get_keys and get_values check element types")
def test_get_keys_values_types():
    assert_raises(ElementTypeError, lambda: get_keys({1: "a"}), "int key")
    assert_raises(ElementTypeError, lambda: get_values({"a": 1}), "int value")
    assert_equal(sort(get_keys({2: "x", 1: "y"}, element_type=int)), [1, 2], "int keys allowed")


@test("get_keys and get_values require a mapping")
def test_get_keys_values_mapping():
    assert_raises(ElementTypeError, lambda: get_keys(["a"]), "list is not a mapping")
    assert_raises(ElementTypeError, lambda: get_values("a"), "str is not a mapping")
    assert_equal(get_keys({}), [], "empty mapping")


if __name__ == "__main__":
    suite.run(title="seqy mapping test")
