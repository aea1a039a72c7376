import pytest

from listkit.arraylist import ArrayList


def _filled(capacity, values=()):
    lst = ArrayList(capacity)
    for value in values:
        lst.insert(len(lst), value)
    return lst


def test_create():
    lst = ArrayList(3)
    assert (lst.capacity, len(lst), list(lst)) == (3, 0, [])


@pytest.mark.parametrize("capacity", [0, -1])
def test_create_rejects_non_positive_capacity(capacity):
    with pytest.raises(ValueError):
        ArrayList(capacity)


def test_insert_and_expand():
    lst = _filled(2, [10, 20])
    assert lst.capacity == 2
    lst.insert(2, 30)
    assert (lst.get_at(2), lst.capacity, list(lst)) == (30, 4, [10, 20, 30])


def test_insert_in_middle_shifts_elements():
    lst = _filled(5, [10, 30])
    lst.insert(1, 20)
    assert list(lst) == [10, 20, 30]


@pytest.mark.parametrize(
    "call",
    [
        lambda lst: lst.insert(-1, 5),
        lambda lst: lst.insert(2, 5),
        lambda lst: lst.insert(100, 5),
        lambda lst: lst.remove(-1),
        lambda lst: lst.remove(1),
        lambda lst: lst.get_at(5),
        lambda lst: lst.get_at(-1),
    ],
)
def test_out_of_range_leaves_list_unchanged(call):
    lst = _filled(3, [1])
    with pytest.raises(IndexError):
        call(lst)
    assert list(lst) == [1]


def test_remove():
    lst = _filled(3, [10, 20, 30])
    assert lst.remove(1) == 20
    assert (len(lst), lst.get_at(1)) == (2, 30)


@pytest.mark.parametrize("value, expected", [(200, 1), (999, -1), (100, 0)])
def test_search(value, expected):
    assert _filled(5, [100, 200, 300]).search(value) == expected


def test_search_returns_first_match():
    assert _filled(4, [7, 8, 7]).search(7) == 0


def test_clear_keeps_capacity():
    lst = _filled(2, [42, 84, 126])
    lst.clear()
    assert (list(lst), lst.capacity) == ([], 4)
    lst.insert(0, 42)
    assert list(lst) == [42]


def test_repr_shows_items_and_capacity():
    assert repr(_filled(2, [1])) == "ArrayList([1], capacity=2)"