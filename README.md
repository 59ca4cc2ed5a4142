# cpkit

A collection of algorithms and data structures for contest-style problem
solving, written in plain Python. Its only runtime dependency is
`sortedcontainers`, which is used by `RangeSet`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is included

Each area lives in its own module under `cpkit`.

- **Data structures**
  - `cpkit.union_find.UnionFind`: disjoint sets with `find`, `merge`, `is_connected`, `size`, `leaders`, `components`.
  - `cpkit.bitset.Bitset`: fixed-size bits with `get`, `set`, `clear`, `flip`, `flip_range`, `count` (ranges are inclusive).
  - `cpkit.fenwick_tree.FenwickTree`: 1-indexed, range add and range sum (`add`, `prefix_sum`, `sum`).
  - `cpkit.sparse_table.SparseTable`: O(1) queries for an idempotent operation (`min` by default).
  - `cpkit.segment_tree.SegmentTree`: lazy range update and range query, combining `SumMonoid` or `MinMonoid` with `AddAction` or `SetAction` (`SetAction` is meant for min/max style monoids).
  - `cpkit.discretizer.Discretizer`: coordinate compression; calling it gives a value's rank.
  - `cpkit.monotone`: `MonotoneQueue` (sliding-window extremum), `MonotoneStack` (nearest earlier element), `LRMTree` (nearest element on each side), `CartesianTree`.
  - `cpkit.persistent_stack.PersistentStack`: a stack whose states can be saved and loaded by version number.
  - `cpkit.ranges.RangeSet`: disjoint integer ranges that merge when they touch; `add`, `remove`, `next`, `prev`, iteration.
  - `cpkit.skip_list.SkipList`: a sorted multiset with `insert`, `erase`, `lower_bound`, membership and iteration; takes an optional seed.
  - `cpkit.tensor`: `Tensor` and `TensorView`, flat row-major storage indexed one dimension at a time.
  - `cpkit.trie`: `Trie` of lowercase words with `build_aho_corasick`, and `Trie01` for maximum XOR queries on 31-bit integers.
- **Arithmetic**
  - `cpkit.bigint.BigInt`: non-negative decimal integers with `+`, `-`, `*` and comparisons.
  - `cpkit.modint.ModInt`: integers modulo a given modulus, with `inv`, `pow` and division.
  - `cpkit.matrix.Matrix`: `+`, `-`, `*`, `**` and an exact `determinant`.
  - `cpkit.polynomial`: `Polynomial` with FFT multiplication, plus the `fft` and `convolution` functions.
  - `cpkit.linear_basis.LinearBasis`: XOR basis with `insert`, `contains` and `xor_max`.
  - `cpkit.online_stats.OnlineMeanVariance`: running mean and population variance with insert and erase.
  - `cpkit.gray_code`: `gray` and `inverse_gray`.
  - `cpkit.bit_hacks`: `sign`, `opposite_signs`, `bit_max`, `bit_min`, `is_power_of_two`, `swap_bits`, `next_bit_permutation`.
  - `cpkit.numeric.trisect`: ternary search for the extremum of a unimodal function.
- **Number theory** (`cpkit.number_theory`): `binary_gcd`, `prime_sieve`, `modular_inverses`, `lucas`, `extgcd`, `crt`, `bsgs`, `binomial_table`, `catalan`, `iterate_subsets`, `gospers_hack`, `inclusion_exclusion`, `floyd_cycle`.
- **Geometry** (`cpkit.geometry`): points are complex numbers; `cross`, `quadrant`, `point_less`, `point_min`, `point_max`, `Segment` (`side`, `contains`, `intersect`, `sorted`), `Polygon` (`double_area`, `perimeter`, `where`), `convex_hull`, `polar_sort`.
- **Graphs**
  - `cpkit.graphs`: `is_bipartite`, `StronglyConnectedComponents`, `Bridges`, `ArticulationPoints`, `DominatorTree`, `girth`.
  - `cpkit.maxflow.MaxFlow`: Dinic's algorithm with `flow` and `min_cut`.
  - `cpkit.shortest_path`: `dijkstra`, `floyd`, `bfs01` (unreachable vertices get `INF`).
  - `cpkit.matching.max_bipartite_matching`.
  - `cpkit.topo_sort.TopoSorter`, `cpkit.transitive_closure.TransitiveClosure`, `cpkit.mst.MST` (Kruskal), `cpkit.functional_graph.FunctionalGraph` (jump tables and cycle detection).
- **Trees** (`cpkit.trees`): `LCA`, `HeavyLightDecomposition`, `prufer_encode`, `prufer_decode`, `centroids`, `Diameter`, `diameter_dp`, `all_longest_paths`, `ahu`.
- **Strings** (`cpkit.strings`): `prefix_function`, `z_function`, `StringHash`, `Manacher`, `minimum_rotation`, `suffix_array`.
- **Offline queries** (`cpkit.mo.Mo`): Mo's algorithm, driven by your own `add`, `remove` and `answer` callbacks.

Graphs and trees are given as adjacency lists: a list whose `i`-th entry
lists the neighbours of vertex `i`. Weighted graphs for `cpkit.shortest_path`
use `(neighbour, weight)` pairs.

## Examples

```python
from cpkit.union_find import UnionFind

uf = UnionFind(5)
uf.merge(0, 1)
uf.merge(3, 4)
print(uf.is_connected(0, 1))  # True
print(uf.size(4))             # 2
```

```python
from cpkit.modint import ModInt

a = ModInt(3, 7)
print(a.inv())    # 5
print(a.pow(6))   # 1
```

```python
from cpkit.maxflow import MaxFlow

g = MaxFlow(4)
g.add_edge(0, 1, 3)
g.add_edge(0, 2, 2)
g.add_edge(1, 3, 2)
g.add_edge(2, 3, 3)
print(g.flow(0, 3))  # 4
```

```python
from cpkit.strings import z_function, suffix_array

print(z_function("aabcaab"))   # [0, 1, 0, 0, 3, 1, 0]
print(suffix_array("banana"))  # [5, 3, 1, 0, 4, 2]
```

## What it does not do

`cpkit` is a library only. It has no command-line program and does no input
or output of its own: reading a problem's input and printing its answer are
left to the code that uses it.