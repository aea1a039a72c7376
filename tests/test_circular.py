import pytest

from listkit.circular import CircularLinkedList


@pytest.fixture
def ring():
    def make(*values):
        lst = CircularLinkedList()
        for position, value in enumerate(values):
            lst.insert(position, value)
        return lst

    return make


def test_create(ring):
    assert (len(ring()), list(ring()), ring().search(1)) == (0, [], -1)


def test_insert_and_get(ring):
    lst = ring(10, 20, 30)
    assert [lst.get_at(i) for i in range(len(lst))] == [10, 20, 30]


def test_insert_at_head_of_non_empty_list(ring):
    lst = ring(20, 30)
    lst.insert(0, 10)
    assert (list(lst), lst.get_at(2)) == ([10, 20, 30], 30)


@pytest.mark.parametrize(
    "operation",
    ["insert -1", "insert 2", "insert 100", "get_at 5", "remove 5"],
)
def test_out_of_range_rejected(ring, operation):
    lst = ring(123)
    name, position = operation.split()
    extra = (0,) if name == "insert" else ()
    with pytest.raises(IndexError):
        getattr(lst, name)(int(position), *extra)
    assert list(lst) == [123]


def test_remove_middle(ring):
    lst = ring(1, 2, 3)
    assert (lst.remove(1), list(lst)) == (2, [1, 3])


def test_remove_head_keeps_ring(ring):
    lst = ring(1, 2, 3)
    assert lst.remove(0) == 1
    assert list(lst) == [2, 3]
    lst.insert(0, 1)
    assert list(lst) == [1, 2, 3]


def test_remove_last_remaining(ring):
    lst = ring(123)
    assert (lst.remove(0), len(lst)) == (123, 0)
    lst.insert(0, 11)
    assert list(lst) == [11]


def test_search(ring):
    lst = ring(100, 200)
    assert (lst.search(100), lst.search(999)) == (0, -1)


def test_clear(ring):
    lst = ring(11, 22)
    lst.clear()
    assert (len(lst), list(lst)) == (0, [])