import random

import pytest

from autocompleteme.sortinglist import SortingList
from autocompleteme.term import Term, compare_by_weight


def _terms():
    weights = [5, 17, 3, 17, 9, 1, 12, 9, 0, 25]
    return [Term(f"q{i}", w) for i, w in enumerate(weights)]


def _is_descending(items):
    weights = [t.weight for t in items]
    return all(a >= b for a, b in zip(weights, weights[1:]))


def test_insert_and_len():
    sl = SortingList()
    assert len(sl) == 0
    sl.insert(Term("a", 1))
    sl.insert(Term("b", 2))
    assert len(sl) == 2
    assert sl[1] == Term("b", 2)


def test_iteration_preserves_insertion_order():
    terms = _terms()
    sl = SortingList(terms)
    assert list(sl) == terms


def test_index_out_of_range():
    sl = SortingList([1, 2, 3])
    assert sl[0] == 1
    assert sl[2] == 3
    with pytest.raises(IndexError):
        sl[3]
    with pytest.raises(IndexError):
        sl[-1]


def test_std_sort_by_query():
    sl = SortingList([Term("c"), Term("a"), Term("b")])
    sl.std_sort()
    assert [t.query for t in sl] == ["a", "b", "c"]


def test_std_sort_integers():
    values = [9, 2, 7, 1, 5]
    sl = SortingList(values)
    sl.std_sort()
    assert list(sl) == sorted(values)


@pytest.mark.parametrize("method", ["selection_sort", "bubble_sort", "merge_sort"])
def test_sorts_descending_by_weight(method):
    terms = _terms()
    sl = SortingList(terms)
    getattr(sl, method)(compare_by_weight)
    assert _is_descending(sl)
    assert sorted(sl) == sorted(terms)
    assert len(sl) == len(terms)


@pytest.mark.parametrize("method", ["selection_sort", "bubble_sort", "merge_sort"])
def test_sorts_handle_empty_and_single(method):
    empty = SortingList()
    getattr(empty, method)(compare_by_weight)
    assert list(empty) == []
    single = SortingList([Term("only", 4)])
    getattr(single, method)(compare_by_weight)
    assert list(single) == [Term("only", 4)]


@pytest.mark.parametrize("method", ["selection_sort", "bubble_sort", "merge_sort"])
def test_sorts_agree_on_weights(method):
    reference = SortingList(_terms())
    reference.selection_sort(compare_by_weight)
    sl = SortingList(_terms())
    getattr(sl, method)(compare_by_weight)
    assert [t.weight for t in sl] == [t.weight for t in reference]


def test_shuffle_keeps_items():
    values = list(range(20))
    sl = SortingList(values)
    sl.shuffle(random.Random(7))
    assert sorted(sl) == values
    assert len(sl) == 20


def test_shuffle_is_deterministic_with_seed():
    a = SortingList(range(15))
    b = SortingList(range(15))
    a.shuffle(random.Random(3))
    b.shuffle(random.Random(3))
    assert list(a) == list(b)


def test_shuffle_small_lists():
    sl = SortingList([1, 2])
    sl.shuffle(random.Random(1))
    assert list(sl) == [1, 2]


def test_render_format():
    sl = SortingList([Term("Up", 3), Term("Cars", 8)])
    assert sl.render() == "Data items in the list: \n3\tUp\n8\tCars\n\n"


def test_render_empty():
    assert SortingList().render().startswith("Data items in the list: \n")
    assert SortingList().render().count("\n") == 2