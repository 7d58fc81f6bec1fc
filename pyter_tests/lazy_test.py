import copy
import operator
import suite
from pyter import (
    accumulate, chain, compress, count, cycle, dropwhile, filterfalse, islice,
    pairwise, repeat, starmap, takewhile, tee, zip_longest,
)
from pyter import Exhausted, InvalidArgument, OutOfRange, LazySequence

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


class Tracked:
    """iterable that records how many elements have been pulled from it"""

    def __init__(self, data):
        self.data = list(data)
        self.pulled = 0

    def __iter__(self):
        for item in self.data:
            self.pulled += 1
            yield item


# --- infinite ---

@test("count should step forever from start")
def test_count():
    result = list(islice(count(1, 2), 5))
    assert_that(result == [1, 3, 5, 7, 9], f"got {result}")
    floats = list(islice(count(0.5, 0.25), 3))
    assert_that(floats == [0.5, 0.75, 1.0], f"float steps: {floats}")
    assert_that(list(islice(count(), 3)) == [0, 1, 2], "defaults")


@test("cycle should replay saved values forever")
def test_cycle():
    result = ''.join(islice(cycle("abc"), 7))
    assert_that(result == "abcabca", f"got {result}")
    assert_that(list(cycle([])) == [], "empty source yields nothing")


@test("cycle should read its source only once")
def test_cycle_single_read():
    source = Tracked([1, 2])
    result = list(islice(cycle(source), 6))
    assert_that(result == [1, 2, 1, 2, 1, 2], f"got {result}")
    assert_that(source.pulled == 2, f"source pulled {source.pulled} times")


@test("repeat should yield an object forever or a fixed number of times")
def test_repeat():
    assert_that(list(repeat(10, 3)) == [10, 10, 10], "bounded")
    assert_that(list(islice(repeat('x'), 4)) == ['x'] * 4, "unbounded")
    assert_that(list(repeat(1, 0)) == [] and list(repeat(1, -5)) == [], "zero and negative")
    assert_that(operator.length_hint(repeat('a', 2)) == 2, "length hint")
    assert_that(bool(repeat('a')), "infinite repeat is still truthy")
    assert_raises(InvalidArgument, lambda: repeat('x', 2.5))
    assert_raises(InvalidArgument, lambda: repeat('x', True))


# --- terminating ---

@test("accumulate should produce running totals")
def test_accumulate():
    assert_that(list(accumulate([1, 2, 3, 4, 5])) == [1, 3, 6, 10, 15], "running sum")
    assert_that(list(accumulate([3, 1, 4], max)) == [3, 3, 4], "running max")
    assert_that(list(accumulate([1, 2, 3], initial=100)) == [100, 101, 103, 106], "initial first")
    assert_that(list(accumulate([])) == [], "empty without initial")
    assert_that(list(accumulate([], initial=5)) == [5], "empty with initial")
    assert_that(list(accumulate([2, 3], operator.mul)) == [2, 6], "custom func")


@test("chain should concatenate lazily")
def test_chain():
    assert_that(list(chain("ab", [1], (), range(2))) == ['a', 'b', 1, 0, 1], "mixed iterables")
    assert_that(list(chain()) == [], "no iterables")

    def outer():
        yield [1, 2]
        yield []
        yield [3]

    assert_that(list(chain.from_iterable(outer())) == [1, 2, 3], "from_iterable")
    # an infinite outer source is fine as long as consumption is bounded
    endless = chain.from_iterable(repeat("xy"))
    assert_that(list(islice(endless, 5)) == ['x', 'y', 'x', 'y', 'x'], "lazy outer source")


@test("chain should raise InvalidArgument on a non-iterable member when reached")
def test_chain_bad_member():
    chained = chain([1], 5)
    assert_that(next(chained) == 1, "first member read")
    assert_raises(InvalidArgument, lambda: next(chained))


@test("compress should keep items with truthy selectors")
def test_compress():
    result = ''.join(compress("ABCDEF", [1, 0, 1, 0, 1, 1]))
    assert_that(result == "ACEF", f"got {result}")
    assert_that(list(compress("ABC", [1])) == ['A'], "stops with the shorter input")


@test("dropwhile and takewhile should split at the first failing element")
def test_while():
    data = [1, 4, 6, 4, 1]
    dropped = list(dropwhile(lambda x: x < 5, data))
    taken = list(takewhile(lambda x: x < 5, data))
    assert_that(dropped == [6, 4, 1], f"dropwhile: {dropped}")
    assert_that(taken == [1, 4], f"takewhile: {taken}")


@test("takewhile should consume the failing element and stay finished")
def test_takewhile_consumes():
    it = iter([1, 2, 10, 3])
    taken = takewhile(lambda x: x < 5, it)
    assert_that(list(taken) == [1, 2], "taken values")
    assert_that(next(it) == 3, "the failing element was consumed")
    assert_raises(Exhausted, lambda: next(taken))


@test("filterfalse should keep rejected elements")
def test_filterfalse():
    evens = list(filterfalse(lambda x: x % 2, range(10)))
    assert_that(evens == [0, 2, 4, 6, 8], f"got {evens}")
    falsy = list(filterfalse(None, [0, 1, '', 'a', None, []]))
    assert_that(falsy == [0, '', None, []], f"None predicate: {falsy}")


@test("islice should select by position")
def test_islice():
    letters = "ABCDEFG"
    cases = [
        ((2,), "AB"),
        ((2, 4), "CD"),
        ((2, None), "CDEFG"),
        ((0, None, 2), "ACEG"),
        ((2, None, 2), "CEG"),
        ((1, 6, 2), "BDF"),
        ((0,), ""),
        ((5, 3), ""),
    ]
    for args, expected in cases:
        got = ''.join(islice(letters, *args))
        assert_that(got == expected, f"islice(letters, {args}): expected {expected!r}, got {got!r}")


@test("islice should consume the source up to stop")
def test_islice_consumption():
    it = iter(range(10))
    assert_that(list(islice(it, 1, 6, 2)) == [1, 3, 5], "selected values")
    assert_that(next(it) == 6, "source read through position 5")

    it = iter(range(10))
    assert_that(list(islice(it, 4, 2)) == [], "nothing selected")
    assert_that(next(it) == 4, "source read up to start")

    it = iter(range(10))
    assert_that(list(islice(it, 0, 4, 3)) == [0, 3], "last position below stop")
    assert_that(next(it) == 4, "drained to stop after the last pick")


@test("islice should validate its arguments")
def test_islice_errors():
    assert_raises(OutOfRange, lambda: islice("abc", -1))
    assert_raises(OutOfRange, lambda: islice("abc", 0, 2, 0))
    assert_raises(OutOfRange, lambda: islice("abc", -2, 2))
    assert_raises(InvalidArgument, lambda: islice("abc", 1.5))
    assert_raises(InvalidArgument, lambda: islice("abc", "2"))
    assert_raises(InvalidArgument, lambda: islice("abc"))
    assert_raises(InvalidArgument, lambda: islice("abc", 1, 2, 3, 4))


@test("pairwise should yield overlapping pairs")
def test_pairwise():
    pairs = [''.join(p) for p in pairwise("ABCDEFG")]
    assert_that(pairs == ["AB", "BC", "CD", "DE", "EF", "FG"], f"got {pairs}")
    assert_that(list(pairwise("A")) == [] and list(pairwise("")) == [], "short inputs")


@test("starmap should unpack argument tuples")
def test_starmap():
    result = list(starmap(pow, [(2, 5), (3, 2), (10, 3)]))
    assert_that(result == [32, 9, 1000], f"got {result}")


@test("tee should give independent cursors over one read of the source")
def test_tee():
    source = Tracked(range(5))
    a, b = tee(source)
    assert_that(list(a) == [0, 1, 2, 3, 4], "first cursor sees everything")
    assert_that(list(b) == [0, 1, 2, 3, 4], "second cursor sees everything")
    assert_that(source.pulled == 5, f"source read once, pulled {source.pulled}")


@test("tee cursors should be interleavable and copyable")
def test_tee_interleaved():
    a, b, c = tee("abcdef", 3)
    assert_that(next(a) + next(a) + next(a) == "abc", "a ahead")
    assert_that(next(b) == 'a', "b starts at the beginning")
    d = b.copy()
    e = copy.copy(b)
    assert_that(''.join(b) == "bcdef", "b continues")
    assert_that(''.join(d) == "bcdef" and ''.join(e) == "bcdef", "copies start where b was")
    assert_that(''.join(a) == "def" and ''.join(c) == "abcdef", "a and c unaffected")
    assert_that(isinstance(a, LazySequence), "cursors are lazy sequences")


@test("tee should handle n of zero and reject negative n")
def test_tee_bounds():
    assert_that(tee([1, 2], 0) == (), "n=0 gives an empty tuple")
    assert_raises(OutOfRange, lambda: tee([1], -1))


@test("zip_longest should pad shorter iterables with fillvalue")
def test_zip_longest():
    rows = [''.join(r) for r in zip_longest("ABCD", "xy", fillvalue="-")]
    assert_that(rows == ["Ax", "By", "C-", "D-"], f"got {rows}")
    padded = list(zip_longest([1], [2, 3]))
    assert_that(padded == [(1, 2), (None, 3)], f"default fill: {padded}")
    assert_that(list(zip_longest()) == [] and list(zip_longest([], [])) == [], "empty inputs")


if __name__ == "__main__":
    suite.run(title="pyter lazy sequence test")
