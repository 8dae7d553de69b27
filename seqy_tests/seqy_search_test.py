import string
import suite
from seqy import index, contains, sorted_index, sorted_contains, sort, NOT_FOUND

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal

alphabet = list(string.ascii_lowercase)


# --- index / contains ---

@test("index finds the first match")
def test_index_first_match():
    assert_equal(index(["x", "y", "x"], "x"), 0, "first occurrence wins")
    assert_equal(index(["x", "y", "x"], "y"), 1, "middle element")


@test("index returns NOT_FOUND for a missing target")
def test_index_missing():
    assert_equal(index(alphabet, ""), NOT_FOUND, "empty string is not in the alphabet")
    assert_equal(index(alphabet, "!"), NOT_FOUND, "punctuation is not in the alphabet")
    assert_equal(NOT_FOUND, -1, "the sentinel is -1")


@test("index treats absent as empty")
def test_index_absent():
    assert_equal(index(None, "a"), NOT_FOUND, "nothing to find in None")
    assert_that(not contains(None, "a"), "contains on None is False")


@test("contains mirrors index")
def test_contains_basic():
    assert_that(contains(["a", "b"], "b"), "b is present")
    assert_that(not contains(["a", "b"], "c"), "c is absent")


# --- sorted_index ---

@test("sorted_index agrees with index on the alphabet")
def test_sorted_index_alphabet():
    for i, letter in enumerate(alphabet):
        assert_equal(index(alphabet, letter), i, f"linear index of {letter}")
        assert_equal(sorted_index(alphabet, letter), i, f"binary index of {letter}")


@test("sorted_index below the range returns NOT_FOUND")
def test_sorted_index_below_range():
    assert_equal(sorted_index(alphabet, ""), NOT_FOUND, "empty string sorts before 'a'")
    assert_equal(sorted_index(alphabet, "!"), NOT_FOUND, "'!' sorts before 'a'")


@test("sorted_index above the range does not index out of bounds")
def test_sorted_index_above_range():
    assert_equal(sorted_index(alphabet, "zz"), NOT_FOUND, "'zz' sorts after 'z'")
    assert_equal(sorted_index(alphabet, "~"), NOT_FOUND, "'~' sorts after every letter")


@test("sorted_index between elements returns NOT_FOUND")
def test_sorted_index_gap():
    assert_equal(sorted_index([1, 3, 5], 4), NOT_FOUND, "4 falls between 3 and 5")


@test("sorted_index tolerates duplicates")
def test_sorted_index_duplicates():
    data = [1, 2, 2, 2, 3]
    found = sorted_index(data, 2)
    assert_that(data[found] == 2, "the returned position must hold the target")
    assert_equal(found, 1, "the leftmost match is returned")


@test("sorted_index on empty and absent input")
def test_sorted_index_empty():
    assert_equal(sorted_index([], "a"), NOT_FOUND, "empty list")
    assert_equal(sorted_index(None, "a"), NOT_FOUND, "absent list")


@test("sorted_index matches index for numeric strings of every length")
def test_sorted_index_numeric_strings():
    for size in range(0, 60):
        unsorted = [str(j) for j in range(size)]
        ordered = sort(unsorted)
        for j in range(-1, size):
            target = str(j)
            expected = NOT_FOUND if j < 0 else ordered.index(target)
            assert_equal(sorted_index(ordered, target), expected, f"size {size}, target {target}")
            assert_equal(index(unsorted, target) != NOT_FOUND, j >= 0, f"linear search for {target}")


@test("sorted_contains mirrors sorted_index")
def test_sorted_contains():
    assert_that(sorted_contains(alphabet, "m"), "m is in the alphabet")
    assert_that(not sorted_contains(alphabet, "M"), "uppercase M is not")


if __name__ == "__main__":
    suite.run(title="seqy search test")
