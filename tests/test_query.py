from collectionboot.query import Query, from_items


def test_chaining_select_where_to_list():
    got = (
        from_items([1, 2, 3, 4, 5])
        .where(lambda n: n % 2 == 1)
        .select(lambda n: n * n)
        .to_list()
    )
    assert got == [1, 9, 25]


def test_any_all_count_first():
    q = from_items([1, 2, 3, 4])

    assert q.any(lambda n: n > 3)
    assert not q.any(lambda n: n > 10)

    assert q.all(lambda n: n < 5)
    assert not q.all(lambda n: n % 2 == 0)

    assert q.count(lambda n: n % 2 == 0) == 2

    assert q.first(lambda n: n % 2 == 0) == 2
    assert q.first(lambda n: n > 10) is None
    assert q.first(lambda n: n > 10, 0) == 0


def test_distinct_reverse_len():
    q = from_items([1, 2, 2, 3, 3, 3])
    assert q.distinct().to_list() == [1, 2, 3]
    assert q.reverse().to_list() == [3, 3, 3, 2, 2, 1]
    assert len(q) == 6


def test_set_operations():
    a = from_items([1, 2, 3])
    b = from_items([3, 4])
    assert a.union(b).to_list() == [1, 2, 3, 4]
    assert a.intersection(b).to_list() == [3]
    assert a.difference(b).to_list() == [1, 2]


def test_strings_distinct_reverse():
    got = from_items(["a", "b", "a", "c"]).distinct().reverse().to_list()
    assert got == ["c", "b", "a"]


def test_intersection_follows_other_order_and_keeps_duplicates():
    a = Query([1, 2, 3])
    b = Query([3, 2, 2, 9])
    assert a.intersection(b).to_list() == [3, 2, 2]


def test_difference_keeps_duplicates_of_first():
    assert Query([1, 1, 2, 3]).difference(Query([3])).to_list() == [1, 1, 2]


def test_union_removes_duplicates_from_both():
    assert Query([2, 2, 1]).union(Query([1, 3, 3])).to_list() == [2, 1, 3]


def test_operations_leave_original_unchanged():
    data = [3, 1, 2]
    q = Query(data)
    q.reverse()
    q.where(lambda n: n > 1)
    assert q.to_list() == [3, 1, 2]
    out = q.to_list()
    out.append(9)
    assert len(q) == 3


def test_empty_query():
    q = Query()
    assert len(q) == 0
    assert q.all(lambda n: False) is True
    assert q.any(lambda n: True) is False
    assert q.distinct().to_list() == []


def test_iteration():
    assert list(Query("abc")) == ["a", "b", "c"]