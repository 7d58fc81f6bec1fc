import suite
from pyter import iterate, advance, LazySequence, Exhausted, InvalidArgument, PyterError
from pyter import Kind, kind_of, is_iterable, count
from pyter.errors import OutOfRange, NotFound, Immutable

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


class Countdown(LazySequence[int]):
    """test helper that records how often _advance runs"""

    def __init__(self, start):
        super().__init__()
        self.value = start
        self.calls = 0

    def _advance(self):
        self.calls += 1
        if self.value <= 0:
            raise Exhausted("done")
        self.value -= 1
        return self.value + 1


@test("iterate should return an iterator for any iterable")
def test_iterate_iterables():
    assert_that(list(iterate([1, 2, 3])) == [1, 2, 3], "list")
    assert_that(list(iterate("ab")) == ['a', 'b'], "string")
    assert_that(list(iterate({'k': 1})) == ['k'], "dict iterates keys")


@test("iterate should raise InvalidArgument for non-iterables")
def test_iterate_rejects():
    err = assert_raises(InvalidArgument, lambda: iterate(42))
    assert_that("int" in str(err), f"message should name the type, got {err}")
    # also catchable as the builtin
    assert_raises(TypeError, lambda: iterate(None))


@test("advance should return values then raise Exhausted")
def test_advance():
    it = iter([1, 2])
    assert_that(advance(it) == 1, "first value")
    assert_that(advance(it) == 2, "second value")
    assert_raises(Exhausted, lambda: advance(it))
    assert_raises(StopIteration, lambda: advance(it))


@test("advance should return the default once exhausted, including None")
def test_advance_default():
    it = iter([])
    assert_that(advance(it, 'fallback') == 'fallback', "string default")
    assert_that(advance(it, None) is None, "None is a real default")


@test("lazy sequences should latch exhaustion")
def test_latch():
    seq = Countdown(2)
    assert_that(list(seq) == [2, 1], "values in order")
    calls = seq.calls
    assert_that(seq.exhausted, "should report exhausted")
    assert_raises(Exhausted, lambda: next(seq))
    assert_raises(Exhausted, lambda: next(seq))
    assert_that(seq.calls == calls, "_advance must not run after exhaustion")


@test("lazy sequences should be their own iterator")
def test_self_iterator():
    seq = Countdown(3)
    assert_that(iter(seq) is seq, "iter() returns self")
    assert_that(next(seq) == 3, "next works")
    assert_that(list(seq) == [2, 1], "iteration resumes from the cursor")
    assert_that("exhausted" in repr(seq), f"repr should show state, got {seq!r}")


@test("for loops should stop cleanly on Exhausted")
def test_for_loop_termination():
    seen = []
    for value in Countdown(3):
        seen.append(value)
    assert_that(seen == [3, 2, 1], f"got {seen}")


@test("error classes should share PyterError and their builtin bases")
def test_error_taxonomy():
    assert_that(issubclass(InvalidArgument, PyterError) and issubclass(InvalidArgument, TypeError), "InvalidArgument")
    assert_that(issubclass(OutOfRange, ValueError) and issubclass(OutOfRange, IndexError), "OutOfRange")
    assert_that(issubclass(Exhausted, StopIteration), "Exhausted")
    assert_that(issubclass(Immutable, TypeError), "Immutable")
    assert_that(issubclass(NotFound, KeyError) and issubclass(NotFound, ValueError), "NotFound")
    assert_that(str(NotFound("missing thing")) == "missing thing", "NotFound message is not quoted")


@test("kind_of should classify values into capability tags")
def test_kind_of():
    cases = [
        (None, Kind.NONE),
        (True, Kind.BOOLEAN),
        (0, Kind.NUMBER),
        (2.5, Kind.NUMBER),
        ("s", Kind.STRING),
        (b"b", Kind.BYTES),
        ({'a': 1}, Kind.MAPPING),
        ([1], Kind.ITERABLE),
        (count(), Kind.ITERABLE),
        (object(), Kind.OTHER),
    ]
    for value, expected in cases:
        got = kind_of(value)
        assert_that(got is expected, f"kind_of({value!r}): expected {expected}, got {got}")


@test("is_iterable should detect iterables")
def test_is_iterable():
    assert_that(is_iterable([]) and is_iterable("") and is_iterable(range(0)), "iterables")
    assert_that(not is_iterable(5) and not is_iterable(None), "non-iterables")


if __name__ == "__main__":
    suite.run(title="pyter protocol test")
