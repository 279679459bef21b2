# algokit

A small collection of classic algorithms and data structures, written to be
read and experimented with. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

### `algokit.sorting`

- `bubble_sort`, `insertion_sort` and `selection_sort` return a sorted copy of
  any iterable. None of them changes its input.
- `selection_updates` counts how often selection sort finds a new smallest
  candidate.
- `bucket_index(value, interval=10)` gives the bucket a value falls into.
- `bucket_sort(values, interval=10, bucket_count=6)` sorts integers through
  fixed-width buckets. It raises `ValueError` for a value that fits no bucket.

### `algokit.arithmetic`

- `knapsack(capacity, weights, values)` gives the best value for the 0/1
  knapsack.
- `primes_up_to(n)` runs the sieve of Eratosthenes.
- `integer_sqrt(x)` gives the floor square root. It raises `ValueError` for a
  negative `x`.
- `is_armstrong(n)` tells whether `n` equals the sum of the cubes of its digits.
- `factorial(n)` returns 1 for values below 2.
- `fibonacci(n)` returns the first `n` terms, starting from 0.
- `is_even` and `largest_of_three` are the small checks their names say.
- `mars_exploration(message)` counts the characters that differ from a repeated
  `"sos"`.
- `Calculator(a=12, b=36)` works on two operands: `add`, `multiply`, `sub`
  (larger minus smaller), `divide` (larger by smaller, with integers truncated
  toward zero) and `greater`.

### `algokit.grid`

- `rotate_clockwise(matrix)` turns a rectangular matrix by 90 degrees.
- `multiplication_table(rows=10, columns=10)` returns lines such as `"3 x 4 = 12"`.
- `is_safe(field, row, col)` tells whether no orthogonal neighbour is a mine.
  A mine is a `0`.
- `shortest_safe_path(field)` gives the fewest steps from the first column to the
  last, moving right, down or up. It leaves a cell only when that cell is safe.
  It returns `None` when the last column cannot be reached.
- `LANDMINE_FIELD` is a sample 12 × 10 field.

### `algokit.containers`

- `Vector` is a growable array. Its `capacity()` doubles whenever it runs out of
  room, and `clear()` resets the capacity to one.
- `Stack` is an unbounded LIFO stack.
- `CircularQueue(capacity)` and `BoundedDeque(capacity)` are bounded queues.
- `PriorityQueue(capacity=10)` keeps `(value, priority)` pairs in ascending
  priority, so the lowest priority leaves first. Items of equal priority may not
  keep their insertion order.
- `TripleStack(size=20, middle_start=3)` holds three stacks, numbered 1, 2 and 3,
  laid out over one index range.

Adding to a full container raises `ContainerFullError`. Reading from or removing
from an empty one raises `ContainerEmptyError`.

### `algokit.expressions`

- `is_balanced(expression)` checks `()`, `[]` and `{}` nesting.
- `precedence(operator)` gives the binding strength of an operator.
- `to_postfix(expression)` converts infix expressions with single-letter
  operands, `+ - * / ^` and parentheses. The `^` operator is right associative.
  Malformed input raises `ExpressionError`.
- `Term(coeff, power)` is one polynomial term.
  - `add_polynomials(first, second)` merges two term lists given by descending
    power.
  - `format_polynomial(terms)` renders them as `"5x^2  3x^1"`.

### `algokit.patterns`

Each function returns a list of lines:

- `rectangle`, `hollow_rectangle`
- `right_triangle`, `inverted_triangle`, `right_aligned_triangle`
- `number_triangle`, `repeated_number_triangle`, `descending_count_triangle`
- `centered_number_pyramid`
- `parallelogram`, `hollow_parallelogram`
- `pyramid`

## Example

```python
from algokit.sorting import bubble_sort
from algokit.arithmetic import knapsack, primes_up_to
from algokit.containers import CircularQueue
from algokit.patterns import pyramid

print(bubble_sort([64, 34, 25, 12, 22, 11, 90]))  # [11, 12, 22, 25, 34, 64, 90]
print(knapsack(50, [10, 20, 30], [60, 100, 120]))  # 220
print(primes_up_to(30))  # [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]

queue = CircularQueue(3)
queue.enqueue(1)
queue.enqueue(2)
print(queue.dequeue(), list(queue))  # 1 [2]

print("\n".join(pyramid(3)))
```

## What it does not do

There is no command-line program and there are no interactive menus. Everything
is used as a library: functions return values and raise exceptions instead of
printing.