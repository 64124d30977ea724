# cpnotes

A collection of classic competitive-programming algorithms as plain Python
functions and classes: modular arithmetic and combinatorics, primality and
factorisation, linear recurrences, polynomial multiplication, bit tricks,
graph searches and shortest paths, binary lifting, maximum flow, job
scheduling, an order-statistics set and simple plane geometry.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `cpnotes.numbers` | `binomial`, `mod_binomial`, `pow_mod`, `ceil_div`, `extended_gcd`, `solve_diophantine`, `mod_inverse`, `totients`, `fibonacci`, `fibonacci_mod`, `identity_matrix`, `mat_mul`, `mat_pow`, `find_cycle`, `prime_sieve`, `smallest_factor_sieve`, `BinomialTable`, `CatalanTable` |
| `cpnotes.primes` | `is_prime` (deterministic Miller–Rabin for 64-bit integers), `pollard_rho`, `factorize`, `brent` |
| `cpnotes.recurrence` | `berlekamp_massey` (over the rationals), `berlekamp_massey_mod` (modulo a prime) |
| `cpnotes.polynomial` | `multiply` (FFT convolution of integer coefficient lists), `multiply_decimal` |
| `cpnotes.bits` | `set_bit`, `clear_bit`, `test_bit`, `toggle_bit`, `low_mask`, `mod_pow2`, `lowest_set_bit`, `clear_lowest_set_bit`, `set_lowest_zero`, `popcount`, `parity`, `leading_zeros`, `trailing_zeros` |
| `cpnotes.graphs` | `bfs`, `dfs`, `dijkstra`, `bellman_ford`, `floyd_warshall`, `strongly_connected_components`, `topological_sort`, `articulation_points`, `bridges` |
| `cpnotes.ancestry` | `BinaryLifting` with `depth`, `kth_ancestor` and `lca` |
| `cpnotes.flow` | `Dinic` max-flow, `unmatched_count` for bipartite matching |
| `cpnotes.scheduling` | `PenaltyJob`, `TwoMachineJob`, `DeadlineJob`, `WeightedJob`, `order_by_penalty`, `johnsons_rule`, `finish_times`, `compute_schedule`, `max_profit` |
| `cpnotes.geometry` | `Point` (comparisons with a 1e-10 tolerance), `distance`, `deg_to_rad`, `rad_to_deg`, `rotate` |
| `cpnotes.ordered_set` | `OrderedSet` with `add`, `find_by_order` and `order_of_key` |

Graphs are given either as a mapping from node to neighbours or as a list of
adjacency lists; weighted graphs use `(neighbour, cost)` pairs. Unreachable
nodes get `math.inf` as their distance, and `bellman_ford` marks nodes affected
by a negative cycle with `-math.inf`. Functions that have no answer raise:
`mod_inverse` and `solve_diophantine` raise `ValueError`, and
`topological_sort` raises `ValueError` on a cycle.

## Examples

Modular arithmetic:

```python
from cpnotes.numbers import pow_mod, ceil_div

pow_mod(2, 10, 1000)   # 24
ceil_div(7, 2)         # 4
```

Maximum flow:

```python
from cpnotes.flow import Dinic

network = Dinic(4)
network.add_edge(0, 1, 3)
network.add_edge(0, 2, 2)
network.add_edge(1, 3, 2)
network.add_edge(2, 3, 3)
network.max_flow(0, 3)   # 4
```

An order-statistics set:

```python
from cpnotes.ordered_set import OrderedSet

items = OrderedSet((value, ident) for ident in range(1, 6) for value in range(5))
items.find_by_order(0)        # (0, 1)
items.order_of_key((1, -1))   # 5
```

## Command-line tools

Two small programs are installed with the package. Both read whitespace
separated input from standard input.

`cpnotes-bigmul` multiplies large non-negative integers with FFT. The first
number is the count of cases; each case is two decimal numbers, and one
product is printed per line:

```
printf '2\n12 34\n0 999\n' | cpnotes-bigmul
```

`cpnotes-unmatched` reads a bipartite graph and prints how many right-side
nodes stay unmatched in a maximum matching. The input starts with the sizes
`n` and `m` of the left and right sides; then, for each left node, a count
`q` followed by `q` right-side node numbers (from 1 to `m`):

```
printf '2 3\n1 1\n2 1 2\n' | cpnotes-unmatched
```

## What it does not do

The package has no string algorithms: there is no suffix array, no
substring search or pattern counting, no string hashing, edit-distance or
permutation helpers.