# collectionboot

Small, dependency-free helpers for everyday collection work:

- `collectionboot.tasks`: run functions in background threads and collect their results or errors.
- `collectionboot.hashset`: `HashSet`, a mutable set with explicit union, intersection and difference methods.
- `collectionboot.query`: `Query`, a chainable, order-preserving query over a sequence.

Requires Python 3.10 or later.

## Installation

```
pip install collectionboot
```

## Background tasks

```python
from collectionboot.tasks import run, wait, wait_all

task = run(lambda: 7)
value = wait(task)               # 7

first = run(lambda: "a")
second = run(lambda: "b")
values = wait_all(first, second) # ["a", "b"]
```

`run(fn)` calls `fn` with no arguments in a background daemon thread and
returns a `Task`. `Task.done()` tells whether the result is available yet,
and `Task.wait()` blocks until it is and returns the `Result`.

`wait(task)` blocks until the task finishes and returns its value, raising
the exception the function raised, if it raised one.

`wait_all(*tasks)` waits for every task, even when some of them fail, and
returns the values in the order the tasks were given. If any task failed,
the error of the first failing task to finish is raised once all the tasks
have finished.

`ready(value=None, error=None)` makes a task that has already finished with
the given outcome, which is handy in tests. A finished task holds a
`Result` with `data` and `error` fields; `Result.unwrap()` returns the value
or raises the error.

## HashSet

```python
from collectionboot.hashset import HashSet

a = HashSet.from_iterable(["a", "b"])
b = HashSet.from_iterable(["b", "c"])

a.add("d", "e")
"a" in a                       # True
a.contains_all("a", "d")       # True
len(a.union(b))                # 5
a.intersection(b).to_list()    # ["b"]
a.difference(b).contains("b")  # False
```

`HashSet(items)` also accepts any iterable, or nothing for an empty set.
`add_all(items)` inserts every item of an iterable. `remove(item)` ignores
items that are not present. `to_list()` and iteration give the items in no
particular order. `clone()` returns an independent copy, `clear()` empties
the set, and `is_empty()` tells you whether anything is left in it.
`union`, `intersection` and `difference` each return a new `HashSet` and
leave both operands unchanged.

## Query

```python
from collectionboot.query import from_items

squares = (
    from_items([1, 2, 3, 4, 5])
    .where(lambda n: n % 2 == 1)
    .select(lambda n: n * n)
    .to_list()
)                                     # [1, 9, 25]

q = from_items([1, 2, 2, 3, 3, 3])
q.distinct().to_list()                # [1, 2, 3]
q.reverse().to_list()                 # [3, 3, 3, 2, 2, 1]
q.count(lambda n: n == 3)             # 3
q.any(lambda n: n > 2)                # True
q.all(lambda n: n < 3)                # False
q.first(lambda n: n > 10, default=-1) # -1
len(q)                                # 6

a, b = from_items([1, 2, 3]), from_items([3, 4])
a.union(b).to_list()                  # [1, 2, 3, 4]
a.intersection(b).to_list()           # [3]
a.difference(b).to_list()             # [1, 2]
```

Each query step returns a new `Query`; the original is left as it was.
`first` returns `None` when nothing matches and no default is given.
`union` keeps the distinct items of the first query in order, followed by
the new distinct items of the second. `intersection` yields the items of
the second query, in its order, that also appear in the first. `difference`
keeps the items of the first query, in order, that do not appear in the
second. A `Query` can also be built directly with `Query(items)` and
iterated over like a list.

## Running the tests

```
pip install -e ".[test]"
pytest
```