# listkit

Four small list containers that share one positional interface:

- `ArrayList` (in `listkit.arraylist`) is a growable array. You give it a starting capacity, which must be positive; a non-positive value raises `ValueError`. When an insert finds the array full, the capacity doubles. You can read the current value from the `capacity` property. `clear()` keeps the capacity.
- `SinglyLinkedList` (in `listkit.singly`) is a chain of nodes linked forward from a sentinel head.
- `CircularLinkedList` (in `listkit.circular`) is a singly linked ring whose last node points back to the first.
- `DoublyLinkedList` (in `listkit.doubly`) links its nodes both ways around a sentinel. It can also be walked backwards with `reversed()`.

Every container has these methods:

| Method | Effect |
| --- | --- |
| `insert(position, data)` | Put `data` at `position`. Valid positions are `0` to `len(lst)`. |
| `remove(position)` | Remove the element at `position` and return it. Valid positions are `0` to `len(lst) - 1`. |
| `get_at(position)` | Return the element at `position`. Valid positions are `0` to `len(lst) - 1`. |
| `clear()` | Empty the list. |
| `search(data)` | Return the index of the first element equal to `data`, or `-1` if there is none. |

All four also support `len()` and iteration from first to last.

A position outside the valid range raises `IndexError`, and the list is left unchanged. Negative positions are never counted from the end.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Usage

```python
from listkit.arraylist import ArrayList
from listkit.doubly import DoublyLinkedList

numbers = ArrayList(2)
numbers.insert(0, 10)
numbers.insert(1, 20)
numbers.insert(2, 30)      # the capacity grows from 2 to 4
print(numbers.capacity)    # 4
print(list(numbers))       # [10, 20, 30]
print(numbers.search(20))  # 1
print(numbers.remove(0))   # 10

chain = DoublyLinkedList()
for position, value in enumerate([1, 2, 3]):
    chain.insert(position, value)
chain.remove(1)
print(list(chain))            # [1, 3]
print(list(reversed(chain)))  # [3, 1]

chain.get_at(5)               # raises IndexError
```

## Self-check

`listkit.selftest` holds behaviour checks for the four containers. The `listkit-selftest` command runs one suite and prints a `[PASS]` or `[FAIL]` line for each check. The suites are `array`, `singly`, `circular` and `doubly`, and `all` runs every suite. Without an argument, only the `doubly` suite runs.

```
listkit-selftest
listkit-selftest array
listkit-selftest all
```

The command exits with status 0 when every check passed and 1 when any check failed.

From Python, `listkit.selftest.run_checks(suite)` runs a suite and returns a list of `CheckResult` records. Each record has a `name` and a `passed` field. An unknown suite name raises `ValueError`.

## Running the tests

```
pip install .[test]
pytest
```