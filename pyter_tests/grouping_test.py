import suite
from pyter import groupby, islice, Exhausted
from pyter.lazy import GroupState

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


@test("groupby should yield one key per run of equal keys")
def test_groupby_keys():
    keys = [k for k, _ in groupby("AAAABBBCCDAABBB")]
    assert_that(keys == ['A', 'B', 'C', 'D', 'A', 'B'], f"got {keys}")


@test("groupby groups should hold the run when read before advancing")
def test_groupby_groups():
    groups = [''.join(g) for _, g in groupby("AAAABBBCCD")]
    assert_that(groups == ["AAAA", "BBB", "CC", "D"], f"got {groups}")


@test("groupby should apply the key function")
def test_groupby_key_function():
    data = [1, 3, 5, 2, 4, 7, 8]
    runs = [(k, list(g)) for k, g in groupby(data, key=lambda x: x % 2)]
    expected = [(1, [1, 3, 5]), (0, [2, 4]), (1, [7]), (0, [8])]
    assert_that(runs == expected, f"expected {expected}, got {runs}")


@test("groupby over an empty source should yield nothing")
def test_groupby_empty():
    grouped = groupby([])
    assert_that(list(grouped) == [], "no groups")
    assert_that(grouped.state is GroupState.EXHAUSTED, f"state: {grouped.state}")


@test("advancing the outer groupby should truncate earlier groups")
def test_groupby_aliasing():
    grouped = groupby("aaabbc")
    key_a, group_a = next(grouped)
    assert_that(next(group_a) == 'a', "first element of the first run")
    key_b, group_b = next(grouped)
    assert_that(key_a == 'a' and key_b == 'b', "keys")
    assert_that(group_a.stale, "first group is stale after the outer advance")
    assert_that(list(group_a) == [], "stale group yields nothing more")
    assert_that(list(group_b) == ['b', 'b'], "current group reads its run")


@test("an unread group should still be skipped by the outer cursor")
def test_groupby_skip_unread():
    grouped = groupby("xxxyyz")
    collected = []
    for key, group in grouped:
        if key == 'y':
            collected.extend(group)
    assert_that(collected == ['y', 'y'], f"got {collected}")


@test("a group that was read to its end should stay finished")
def test_groupby_group_end():
    grouped = groupby([1, 1, 2])
    _, ones = next(grouped)
    assert_that(list(ones) == [1, 1], "run values")
    assert_raises(Exhausted, lambda: next(ones))
    key, twos = next(grouped)
    assert_that(key == 2 and list(twos) == [2], "next run still available")
    assert_raises(Exhausted, lambda: next(grouped))


@test("groupby should separate non-adjacent equal keys unless sorted first")
def test_groupby_sorted():
    data = "abab"
    unsorted_keys = [k for k, _ in groupby(data)]
    sorted_runs = [(k, len(list(g))) for k, g in groupby(sorted(data))]
    assert_that(unsorted_keys == ['a', 'b', 'a', 'b'], f"unsorted: {unsorted_keys}")
    assert_that(sorted_runs == [('a', 2), ('b', 2)], f"sorted: {sorted_runs}")


@test("keys unequal to themselves should still form a single run")
def test_groupby_nan_keys():
    nan = float('nan')
    runs = [(k, list(g)) for k, g in islice(groupby([nan, nan, 1.0]), 10)]
    assert_that(len(runs) == 2, f"expected 2 runs, got {len(runs)}: {runs}")
    assert_that(runs[0][0] is nan and len(runs[0][1]) == 2, f"nan run: {runs[0]}")
    assert_that(runs[1] == (1.0, [1.0]), f"second run: {runs[1]}")


@test("the generation counter should advance once per outer step")
def test_groupby_generation():
    grouped = groupby("aab")
    assert_that(grouped.generation == 0, "no groups handed out yet")
    _, first = next(grouped)
    assert_that(grouped.generation == 1 and not first.stale, "first group is current")
    next(grouped)
    assert_that(grouped.generation == 2 and first.stale, "first group went stale")


if __name__ == "__main__":
    suite.run(title="pyter grouping test")
