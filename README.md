# contestlib

A collection of classic algorithms used in programming contests: polynomial
multiplication over a prime field, big integers, range sums, the convex hull
trick, sequence and string algorithms, and graph algorithms on 1-based vertices.

## Installation

```
pip install contestlib
```

For running the test suite:

```
pip install "contestlib[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `contestlib.ntt` | `NTT`: number-theoretic transform and polynomial multiplication modulo a prime |
| `contestlib.bigint` | `BigInt` (division truncates toward zero), `isqrt`, `gcd`, `lcm`, `random_bigint` |
| `contestlib.prefix_sums` | `PrefixSums`, `PrefixSums2D` (1-based, inclusive ranges) |
| `contestlib.convex_hull` | `DynamicHull`: maximum of lines `a*x + b` with lines added in any order |
| `contestlib.sequences` | `lis_length`, `lis_length_quadratic`, `longest_increasing_subsequence`, `longest_valid_parentheses` |
| `contestlib.strings` | `prefix_function`, `kmp_search`, `z_function`, `PolynomialHash` (modulo 2**64) |
| `contestlib.graph` | `Graph`, `Edge` |
| `contestlib.traversal` | `bfs`, `dfs`, `has_cycle`, `topological_order`, `BfsResult`, `DfsResult` |
| `contestlib.scc` | `strongly_connected_components`, `is_strongly_connected` |
| `contestlib.dijkstra` | `dijkstra`, `ShortestPaths` |
| `contestlib.mst` | `kruskal`, `UnionFind`, `WeightedEdge` |
| `contestlib.lca` | `LowestCommonAncestor` (also parent, depth, subtree size and tree paths) |
| `contestlib.triangles` | `count_triangles` |

## Examples

Polynomial multiplication modulo a prime:

```python
from contestlib.ntt import NTT

ntt = NTT(998244353, 3, 23)
ntt.multiply([1, 1], [1, 1])    # [1, 2, 1]
```

`NTT()` with no arguments uses the prime 786433 and lengths up to `2**18`.

Big integers:

```python
from contestlib.bigint import BigInt, isqrt

a = BigInt("123456789012345678901234567890")
b = BigInt(987654321)
print(a * b, a // b, a % b)
print(isqrt(a))

BigInt(-7) // 2                 # BigInt('-3')
BigInt(-7) % 2                  # BigInt('-1')
```

Range sums and the convex hull trick:

```python
from contestlib.prefix_sums import PrefixSums, PrefixSums2D
from contestlib.convex_hull import DynamicHull

PrefixSums([1, 2, 3, 4]).query(2, 3)                # 5
PrefixSums2D([[1, 2], [3, 4]]).query(1, 1, 2, 2)    # 10

hull = DynamicHull()
hull.add(1, 0)
hull.add(-1, 10)
hull.query(3)                   # 7
hull.query(8)                   # 8
```

For minimum queries, add `(-a, -b)` and negate the answer.

Sequences:

```python
from contestlib.sequences import (
    lis_length,
    longest_increasing_subsequence,
    longest_valid_parentheses,
)

lis_length([3, 1, 2, 5, 4])                         # 3
longest_increasing_subsequence([3, 1, 2, 5, 4])     # [1, 2, 5]
longest_valid_parentheses(")()())")                 # 4
```

Strings:

```python
from contestlib.strings import kmp_search, z_function, PolynomialHash

kmp_search("abababa", "aba")    # [0, 2, 4]
z_function("aaaaa")             # [0, 4, 3, 2, 1]

h = PolynomialHash("abcab", 31)
h.front_hash(0, 1) == h.front_hash(3, 4)   # True
```

Graphs use vertices `1..n`:

```python
from contestlib.graph import Graph
from contestlib.traversal import bfs, has_cycle
from contestlib.dijkstra import dijkstra
from contestlib.mst import kruskal

g = Graph(4, directed=False)
g.add_edge(1, 2, 5)
g.add_edge(2, 3, 1)
g.add_edge(1, 3, 7)

paths = dijkstra(g, 1)
paths.distance[3]               # 6
paths.distance[4]               # inf
has_cycle(g)                    # True
weight, tree = kruskal(4, g.edges())   # weight == 6
levels = bfs(g).level
```

Directed graphs, trees and triangles:

```python
from contestlib.graph import Graph
from contestlib.scc import strongly_connected_components
from contestlib.traversal import topological_order
from contestlib.lca import LowestCommonAncestor
from contestlib.triangles import count_triangles

d = Graph(3, directed=True)
d.add_edge(1, 2)
d.add_edge(2, 1)
d.add_edge(2, 3)
strongly_connected_components(d)    # [[1, 2], [3]]
topological_order(d)

tree = LowestCommonAncestor(5, [(1, 2), (1, 3), (3, 4), (3, 5)])
tree.lca(4, 5)                  # 3
tree.path(2, 4)                 # [2, 1, 3, 4]

count_triangles(4, [(1, 2), (2, 3), (1, 3), (3, 4)])   # 1
```

## What it does not do

- There are no standalone modular-arithmetic helpers, binomial coefficient
  tables, Fibonacci or power-sum routines, or Stirling numbers.
- Polynomial multiplication is only available modulo a prime through `NTT`;
  there is no floating-point FFT and no multiplication modulo an arbitrary
  number.
- There is no search for articulation points, bridges or biconnected
  components.
- The package is a library only; it installs no command-line program.