"""Self-checks that exercise each list type and report PASS/FAIL lines."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial
from typing import Any, Optional

from listkit.arraylist import ArrayList
from listkit.circular import CircularLinkedList
from listkit.doubly import DoublyLinkedList
from listkit.singly import SinglyLinkedList

_Checks = list[tuple[str, bool]]


@dataclass(frozen=True)
class CheckResult:
    """The outcome of one named check."""

    name: str
    passed: bool

    def __str__(self) -> str:
        return f"[{'PASS' if self.passed else 'FAIL'}] {self.name}"


def _raises(action: Callable[[], Any], exc: type[BaseException] = IndexError) -> bool:
    try:
        action()
    except exc:
        return True
    return False


def _filled(factory: Callable[[], Any], *values: Any) -> Any:
    items = factory()
    for position, value in enumerate(values):
        items.insert(position, value)
    return items


def _array_checks() -> _Checks:
    fresh = ArrayList(3)
    grown = _filled(partial(ArrayList, 2), 10, 20, 30)
    shrunk = _filled(partial(ArrayList, 3), 10, 20, 30)
    removed = shrunk.remove(1)
    searched = _filled(partial(ArrayList, 5), 100, 200, 300)
    single = _filled(partial(ArrayList, 2), 1)
    cleared = _filled(partial(ArrayList, 2), 42, 84)
    cleared.clear()
    return [
        ("Initial capacity == 3", fresh.capacity == 3),
        ("Initial length == 0", len(fresh) == 0),
        (
            "Create with non-positive capacity is rejected",
            _raises(lambda: ArrayList(0), ValueError),
        ),
        ("Insert triggers capacity expansion", grown.capacity == 4),
        ("Element count after 3 insertions == 3", len(grown) == 3),
        ("Check inserted value 30 at index 2", grown.get_at(2) == 30),
        ("Remove element at index 1", removed == 20),
        ("Element count after removal == 2", len(shrunk) == 2),
        ("Element at index 1 is now 30", shrunk.get_at(1) == 30),
        ("Search returns correct index for existing value", searched.search(200) == 1),
        ("Search returns -1 for non-existing value", searched.search(999) == -1),
        ("GetAt rejects invalid index", _raises(lambda: single.get_at(5))),
        ("List is empty after clear", len(cleared) == 0 and list(cleared) == []),
    ]


def _singly_checks() -> _Checks:
    fresh = SinglyLinkedList()
    pair = _filled(SinglyLinkedList, 10, 20)
    shrunk = _filled(SinglyLinkedList, 1, 2, 3)
    removed = shrunk.remove(1)
    searched = _filled(SinglyLinkedList, 100, 200, 300)
    cleared = _filled(SinglyLinkedList, 10, 20)
    cleared.clear()
    single = _filled(SinglyLinkedList, 10)
    return [
        ("List initialized with 0 elements", len(fresh) == 0),
        ("Element count is 2", len(pair) == 2),
        ("GetAt(0) returns 10", pair.get_at(0) == 10),
        ("GetAt(1) returns 20", pair.get_at(1) == 20),
        ("Remove node at position 1", removed == 2),
        ("Element count is 2 after removal", len(shrunk) == 2),
        ("Node at index 1 is now 3", shrunk.get_at(1) == 3),
        ("Search finds correct index for 200", searched.search(200) == 1),
        ("Search returns -1 for missing value", searched.search(999) == -1),
        ("Element count is 0 after clear", len(cleared) == 0),
        ("GetAt(0) is rejected after clear", _raises(lambda: cleared.get_at(0))),
        ("GetAt(5) is rejected for out-of-bounds", _raises(lambda: single.get_at(5))),
        ("Remove at invalid index is rejected", _raises(lambda: single.remove(3))),
    ]


def _circular_checks() -> _Checks:
    fresh = CircularLinkedList()
    triple = _filled(CircularLinkedList, 10, 20, 30)
    shrunk = _filled(CircularLinkedList, 1, 2, 3)
    shrunk.remove(1)
    searched = _filled(CircularLinkedList, 100, 200)
    cleared = _filled(CircularLinkedList, 11, 22)
    cleared.clear()
    single = _filled(CircularLinkedList, 123)
    return [
        ("Initial element count is 0", len(fresh) == 0),
        ("Initial list yields nothing", list(fresh) == []),
        ("3 elements inserted", len(triple) == 3),
        *(
            (f"GetAt({index}) == {value}", triple.get_at(index) == value)
            for index, value in enumerate((10, 20, 30))
        ),
        ("1 element removed, count = 2", len(shrunk) == 2),
        ("Remaining node at 0 is 1", shrunk.get_at(0) == 1),
        ("Remaining node at 1 is 3", shrunk.get_at(1) == 3),
        ("Search 100 returns index 0", searched.search(100) == 0),
        ("Search 999 returns -1", searched.search(999) == -1),
        ("Element count is 0 after clear", len(cleared) == 0),
        ("List yields nothing after clear", list(cleared) == []),
        ("GetAt out-of-bounds is rejected", _raises(lambda: single.get_at(5))),
        ("Remove out-of-bounds is rejected", _raises(lambda: single.remove(5))),
    ]


def _doubly_checks() -> _Checks:
    fresh = DoublyLinkedList()

    growing = _filled(DoublyLinkedList, 10)
    head_ok = growing.get_at(0) == 10
    growing.insert(1, 20)
    growing.insert(2, 30)
    tail_ok = growing.get_at(2) == 30

    shrinking = _filled(DoublyLinkedList, 1, 2, 3)
    shrinking.remove(1)
    middle_ok = shrinking.get_at(1) == 3
    shrinking.remove(0)
    first_ok = shrinking.get_at(0) == 3
    shrinking.remove(0)
    emptied = len(shrinking) == 0

    pair = _filled(DoublyLinkedList, 100, 200)
    searched = _filled(DoublyLinkedList, 10, 20, 30)
    cleared = _filled(DoublyLinkedList, 10, 20)
    cleared.clear()
    return [
        ("List created successfully", len(fresh) == 0),
        ("Insert at head (position 0)", head_ok),
        ("Insert at tail (position 2)", tail_ok),
        ("Invalid insert position -1 rejected", _raises(lambda: growing.insert(-1, 40))),
        ("Insert beyond bounds rejected", _raises(lambda: growing.insert(100, 50))),
        ("Remove middle node", middle_ok),
        ("Remove first node", first_ok),
        ("Remove last node, list now empty", emptied),
        ("Remove from empty list rejected", _raises(lambda: shrinking.remove(0))),
        ("GetAt valid index 1", pair.get_at(1) == 200),
        ("GetAt rejected negative index", _raises(lambda: pair.get_at(-1))),
        ("GetAt rejected out-of-bounds index", _raises(lambda: pair.get_at(5))),
        ("Search found correct index", searched.search(20) == 1),
        ("Search returned -1 for missing element", searched.search(99) == -1),
        (
            "Clear emptied the list and reset links",
            len(cleared) == 0 and list(cleared) == [] and list(reversed(cleared)) == [],
        ),
    ]


_SUITES: dict[str, tuple[str, Callable[[], _Checks]]] = {
    "array": ("ArrayList", _array_checks),
    "singly": ("Singly Linked List", _singly_checks),
    "circular": ("Circular Linked List", _circular_checks),
    "doubly": ("Doubly Linked List", _doubly_checks),
}


def run_checks(suite: str) -> list[CheckResult]:
    """Run the named suite ("array", "singly", "circular" or "doubly")."""
    try:
        _, checks = _SUITES[suite]
    except KeyError:
        raise ValueError(f"unknown suite {suite!r}") from None
    return [CheckResult(name, passed) for name, passed in checks()]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one suite, or all of them, printing a line per check."""
    parser = argparse.ArgumentParser(
        prog="listkit-selftest", description="Run the list self-checks."
    )
    parser.add_argument(
        "suite",
        nargs="?",
        default="doubly",
        choices=[*_SUITES, "all"],
        help="which list type to check (default: doubly)",
    )
    args = parser.parse_args(argv)
    names = list(_SUITES) if args.suite == "all" else [args.suite]

    all_passed = True
    for name in names:
        title, _ = _SUITES[name]
        print(f"===== {title} Unit Tests =====\n")
        for result in run_checks(name):
            print(result)
            all_passed = all_passed and result.passed
        print()
    print("===== Tests Completed =====")
    return 0 if all_passed else 1


if __name__ == "__main__":
    raise SystemExit(main())