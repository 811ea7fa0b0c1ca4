# algokit

A collection of classic data structures, algorithms and small simulations,
written as plain Python with no third-party dependencies.

## What is inside

Data structures

- `algokit.stacks` — `ArrayStack` (fixed capacity) and `LinkedStack`
- `algokit.queues` — `ArrayQueue`, `LinkedQueue`, `CircularArrayQueue`, `CircularLinkedQueue`
- `algokit.hashset` — `HashSet`, an open-addressing set of integers with linear probing and tombstones
- `algokit.linked_list` — `LinkedList` with merge and bubble sort, reversal, cycle detection and more
- `algokit.disjoint_set` — `DisjointSet` with path compression and union by rank
- `algokit.avl` — heights, balance factors and rotations on `AVLNode`

Algorithms

- `algokit.sorting.merge_sort`
- `algokit.tsp.nearest_neighbor_tour` — greedy travelling-salesman approximation returning a `Tour`
- `algokit.nqueens` — `solve_n_queens`, `count_solutions`, `render_board`
- `algokit.bits.BitManipulator` — set, clear, toggle and test single bits
- `algokit.happy` — `is_happy` (happy numbers via cycle detection) and `sum_of_squared_digits`
- `algokit.flood_fill` — `flood_fill` and `render_grid`
- `algokit.roman.roman_to_int`
- `algokit.palindrome` — `is_palindrome` and `first_mismatch`

Small simulations

- `algokit.lines.Line` — lines `a*x + b*y = c`: slope, parallel, perpendicular, intersection
- `algokit.clock` — `Clock` and `WorldClock`
- `algokit.weekday.Weekday`
- `algokit.dates` — `MyDate`, `is_leap_year`, `is_valid_date`
- `algokit.vending` — `CashRegister`, `Dispenser`, `sell_product`, `SingleItemMachine`, `JuiceMachine`
- `algokit.large_integer.LargeInteger` — fixed-width 100-digit arithmetic that wraps around
- `algokit.tictactoe.TicTacToe`

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algokit.roman import roman_to_int
from algokit.happy import is_happy
from algokit.disjoint_set import DisjointSet
from algokit.hashset import HashSet
from algokit.linked_list import LinkedList
from algokit.nqueens import count_solutions

roman_to_int("MCMXCIV")                                  # 1994

is_happy(19)                                             # True

sets = DisjointSet(5)
sets.union(0, 1)
sets.union(3, 4)
sets.find(1)                                             # 0
sets.find(4)                                             # 3

numbers = HashSet(10)
numbers.add(7)                                           # True
7 in numbers                                             # True

items = LinkedList([4, 2, 1, 3])
items.sort()
list(items)                                              # [1, 2, 3, 4]

count_solutions(8)                                       # 92
```

Operations that cannot be carried out — popping an empty stack, enqueuing
into a full queue, inserting into a full hash set, an invalid date, a move
onto a taken square — raise an exception named for the problem, such as
`StackEmptyError`, `QueueFullError`, `HashSetFullError`, `InvalidDateError`
or `InvalidMoveError`.

## Playing tic-tac-toe

A two-player game on the terminal:

```
algokit-tictactoe
```

Players take turns entering a row and a column between 0 and 2.

## What is not included

The package has no graph types or graph traversals (breadth-first or
depth-first search), no binary search tree or tree traversals, no knapsack
solver and no geometric shapes beyond `Line`. The AVL module offers
rotations and height bookkeeping only, not a self-balancing tree with
insertion.