# algokit

Classic algorithms in plain Python, with no dependencies outside the
standard library. Every function takes ordinary Python values (ints, lists,
lists of lists) and returns a result; none of them print.

## Modules

### `algokit.numbers`

- `fibonacci(n)`, `fibonacci_sequence(count)`
- `is_armstrong(num)`, `is_perfect(num)`, `is_prime(n)`
- `gcd(a, b)`, `factorial(n)` (raises `ValueError` for negative `n`)
- `primes_up_to(n)`: sieve of Eratosthenes
- `binomial_coefficient(n, k)` (raises `ValueError` unless `0 <= k <= n`)
- `reverse_number(num)`, `digit_sum(num)`, `factors(n)`
- `number_triangle(rows)`, `pascal_triangle(rows)`: lists of rows

### `algokit.strings`

- `is_palindrome(text)`, `reverse_string(text)`
- `string_copy(text)`, `string_length(text)`: both stop at the first NUL character

### `algokit.sorting`

`selection_sort`, `bubble_sort` and `merge_sort` take any iterable and return
a new sorted list. `merge_sort` is stable.

### `algokit.searching`

- `find_largest(values)`: raises `ValueError` on empty input
- `binary_search(values, target)`, `linear_search(values, target)`: an index,
  or `None` when the target is absent
- `find_max_min(values)`: `(maximum, minimum)` by divide and conquer
- `running_min_max(values)`: yields `(minimum, maximum)` for each prefix
- `insert_at(values, position, value)`: a new list; raises `IndexError` when
  the position is out of range

### `algokit.matrix`

- `multiply(a, b)`: the product `a @ b` of two rectangular matrices
- `strassen_2x2(a, b)`: Strassen's seven-product method for 2x2 matrices
- `min_path_cost(cost)`: cheapest top-left to bottom-right path moving right,
  down or diagonally down-right

### `algokit.optimization`

- `fractional_knapsack(weights, profits, capacity)` returns a
  `KnapsackResult` with `fractions` (in input order) and `profit`
- `optimal_bst_cost(freq)`: least search cost of a binary search tree
- `tsp_cost(graph)`: cheapest tour from city 0 through every city and back
- `assign_jobs(cost_matrix)` returns an `Assignment` with `jobs` (the job
  given to each worker) and `cost`

### `algokit.graphs`

- `kruskal_mst(vertex_count, edges)`: takes `Edge(src, dest, weight)` values,
  returns the spanning-tree edges lightest first
- `floyd_warshall(graph)`: all-pairs shortest distances; mark missing edges
  with `math.inf`
- `graph_coloring(graph, colors)`: colours `1..colors` per vertex, or `None`
- `hamiltonian_cycle(graph)`: a vertex list from 0 back to 0, or `None`
- `min_cost_within_time(node_count, edges, source, destination, max_time)`:
  takes `TimedEdge(src, dest, cost, time)` values; returns the cheapest cost
  reaching the destination within the time limit, or `None`

### `algokit.backtracking`

- `solve_n_queens(n)`: an `n` by `n` board of 0/1, or `None`
- `subset_sums(values, target)`: yields every subset of non-negative values
  that sums to the target (raises `ValueError` for negative values)
- `can_load(items, containers)`: whether every item fits in the containers

## Example

```python
from algokit.numbers import fibonacci_sequence, gcd
from algokit.sorting import merge_sort
from algokit.searching import binary_search
from algokit.optimization import assign_jobs, tsp_cost

print(fibonacci_sequence(10))                # [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]
print(gcd(48, 18))                           # 6
print(merge_sort([12, 11, 13, 5, 6, 7]))     # [5, 6, 7, 11, 12, 13]
print(binary_search([2, 3, 4, 10, 40], 10))  # 3

print(tsp_cost([[0, 10, 15, 20],
                [10, 0, 35, 25],
                [15, 35, 0, 30],
                [20, 25, 30, 0]]))           # 80

result = assign_jobs([[9, 2, 7, 8],
                      [6, 4, 3, 7],
                      [5, 8, 1, 8],
                      [7, 6, 9, 4]])
print(result.jobs, result.cost)              # (1, 0, 2, 3) 13
```

## What it does not do

algokit is a library only: it has no command-line program and does not read
input from the terminal or from files. Call the functions from your own code.

## Running the tests

```
pip install -e ".[test]"
pytest
```