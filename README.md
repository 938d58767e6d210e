# algokit

Classic algorithms and data structures in plain Python. It depends only on the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.number_theory` | `euler_totient`, `gcd`, `josephus`, `count_set_bits` |
| `algokit.arrays` | `find_duplicate`, `odd_frequency_element`, `can_jump`, `kth_smallest`, `trapped_rainwater`, `max_product_subarray`, `max_subarray_sum`, `two_sum`, `two_sum_sorted` |
| `algokit.settlement` | `net_balances`, `min_settlement_transactions` |
| `algokit.sequences` | `edit_distance`, `edit_distance_recursive`, `edit_distance_compact`, `lcs_length`, `lcs_length_recursive`, `lcs_length_compact`, `lis_length`, `lis_length_quadratic`, `longest_palindromic_substring`, `longest_palindromic_substring_dp`, `count_palindromic_subsequences`, `count_sentences` |
| `algokit.text` | `prefix_table`, `count_occurrences` (Knuth-Morris-Pratt) |
| `algokit.windows` | `window_maxima` |
| `algokit.optimization` | `max_coins`, `matrix_chain_cost`, `friends_pairings`, `max_non_adjacent_sum`, `max_non_adjacent_sum_dp`, `max_sum_rectangle`, `tsp_tour_cost`, `word_wrap` |
| `algokit.stacks` | `infix_to_postfix`, `largest_rectangle_area`, `next_greater_elements`, `reverse_stack`, `sort_stack` |
| `algokit.heaps` | `MinHeap` (`push`, `peek`, `pop`, `len`), `heap_sort` |
| `algokit.disjoint_set` | `DisjointSet` (`find`, `union`, `component_count`) |
| `algokit.graph` | `Graph`: `dfs`, `bfs`, `has_cycle`, `strongly_connected_components`, `shortest_cycle`, `topological_sort_bfs`, `topological_sort_dfs`, `articulation_points`, `bridges` |
| `algokit.segment_tree` | `MinSegmentTree` (`query`, `update`) |
| `algokit.weighted_graph` | `WeightedGraph`: `bellman_ford`, `dijkstra`, `floyd_warshall`, `kruskal`, `prim`; `NegativeCycleError`, `SpanningTree` |
| `algokit.caches` | `LRUCache`, `LFUCache` |
| `algokit.binary_tree` | `TreeNode`; `inorder`, `preorder`, `postorder`, `right_view`, `top_view`, `boundary_traversal`, `lowest_common_ancestor`, `build_tree`, `to_doubly_linked_list`, `count_pairs_with_sum`, `delete_node`, `max_non_adjacent_sum`, `max_path_sum`, `nodes_at_distance`, `largest_bst_size` |
| `algokit.tree_lca` | `AncestorTable` (lowest common ancestors by binary lifting) |
| `algokit.trie` | `Trie`, `XorTrie`, `find_maximum_xor` |

## Conventions

- Graph nodes are numbered `0..node_count - 1`. `Graph.add_edge` and
  `WeightedGraph.add_edge` add the reverse edge too unless `directed` is true.
- Shortest-path results use `None` for nodes that cannot be reached.
  `bellman_ford` and `floyd_warshall` raise `NegativeCycleError` (a
  `ValueError`) on a negative-weight cycle.
- `kruskal` and `prim` return a `SpanningTree` with a `weight` and a list of
  `edges`.
- `LRUCache.get` and `LFUCache.get` return `-1` for keys they do not hold.
- `DisjointSet(n)` holds nodes `0..n` so that 1-based numbers can be used
  directly; `component_count` counts the components among `1..n`.
- Stacks passed to `reverse_stack` and `sort_stack` are lists from bottom to
  top; both return new lists.
- `two_sum` returns `(later_index, earlier_index)` and `two_sum_sorted`
  returns `(i, j)` with `i < j`; both return `None` when no pair exists.
- `count_set_bits` counts the bits of its argument read as a 64-bit
  two's-complement word.

## Examples

```python
from algokit.number_theory import euler_totient, josephus
from algokit.sequences import edit_distance
from algokit.graph import Graph
from algokit.caches import LRUCache
from algokit.trie import Trie, find_maximum_xor

euler_totient(12)               # 4
josephus(7, 3)                  # 4
edit_distance("horse", "ros")   # 3

g = Graph(3)
g.add_edge(0, 1, True)
g.add_edge(1, 2, True)
g.add_edge(2, 0, True)
g.has_cycle()                   # True

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                    # 1
cache.put(3, 3)
cache.get(2)                    # -1, evicted

words = Trie()
words.insert("apple")
words.search("app")             # False
words.starts_with("app")        # True

find_maximum_xor([3, 10, 5, 25, 2, 8])  # 28
```

```python
from algokit.weighted_graph import WeightedGraph

g = WeightedGraph(3)
g.add_edge(0, 1, 4, False)
g.add_edge(1, 2, 1, False)
g.dijkstra(0)                   # [0, 4, 5]
g.kruskal().weight              # 5
```

## What it does not do

algokit is a library only. It has no command-line program and reads no input
files: every function takes ordinary Python values and returns its result.