# labstructs

Classic data structures, each with a small interactive console program
that exercises it. The programs print their menus and messages in Russian.

## Modules

- **`labstructs.queues`**: `ArrayQueue`, a fixed-capacity ring-buffer
  queue (100 000 slots by default), and `LinkedQueue`, a queue of linked
  nodes. Pushing into a full queue raises `QueueFullError`; popping from an
  empty one raises `QueueEmptyError`. `QueueStats` keeps the current and the
  average length of a queue as items enter and leave.
- **`labstructs.simulation`**: a two-queue, single-server service model.
  `simulate(kind, n, interval, t1, t2, t3, t4, rng=None, progress=None)`
  takes a `QueueKind` (`ARRAY` or `LIST`), the number of first-queue
  requests to serve, a reporting interval and four `TimeRange` values
  (arrival times of both queues, then their service times). The first queue
  has priority. It returns a `SimulationResult` whose `report_lines()` give
  the summary; `progress` receives a status block every `interval` served
  requests.
- **`labstructs.stack`**: a LIFO `Stack` (popping or peeking an empty one
  raises `EmptyStackError`) and `evaluate_expression(values)`, which
  computes `A + (B * (C + (D * (E + F) - (G - H)) + I))` for nine integers
  with two stacks, using 32-bit integer wrap-around.
- **`labstructs.expr_tree`**: `build_expression_tree(values)` builds the
  same expression as a tree of `TreeNode`; `evaluate`, `postfix_tokens`,
  the `prefix` / `infix` / `postfix` generators, `render_tree` (a sideways
  text drawing) and `to_dot` (Graphviz text). The same nodes serve as a
  plain binary search tree with `bst_insert`, `bst_find`,
  `bst_find_counted` and `bst_remove`.
- **`labstructs.avl`**: `AvlTree` with `insert`, `delete`, `search`,
  `search_counted` (also returns how many nodes were compared), the
  `preorder` / `inorder` / `postorder` traversals, `clear`, `to_dot`,
  `in` and in-order iteration.
- **`labstructs.linked_list`**: `LinkedList` with `push_front`,
  `push_back`, `pop_front`, `pop_back`, `insert_before`, `append_list`,
  `copy`, `split` and a stable merge `sort(key=None)`; `merge_sorted`
  merges two sorted lists.
- **`labstructs.hashing`**: `OpenAddressingSet`, an integer set with
  forward linear probing that doubles its table when needed, and
  `ChainedHashSet`, a separate-chaining set that grows at 80 % load and
  halves at 30 %. Both offer `find`, `find_counted`, `remove` and `in`;
  adding a present value raises `ValueError`, removing an absent one
  raises `KeyError`. `hash_of` and `bucket_index` expose the hash function.
- **`labstructs.graph`**: `AdjacencyMatrix` for undirected graphs and
  `min_disconnecting_cut(matrix)`, which tries edge sets by increasing size
  and returns the graph left after removing one that disconnects it, or
  `None`. `to_dot` writes the graph with removed edges in red;
  `render_dot` saves that text and calls Graphviz `dot` and an image viewer.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command-line programs

```
labstructs-queues
```

Menu reading from standard input: run the simulation with the array or the
linked queues (1000 first-queue requests, a report every 100), change any
of the four time ranges, or compare push/pop timings and estimated memory
use of both queue kinds. `0` quits.

```
labstructs-search [--count N]
```

Menu reading from standard input: enter the nine expression values and
evaluate them with the tree (the operator results are loaded into an AVL
tree, written to `avl_tree.dot`, and into both hash sets, which are
listed); add, remove and traverse values of an AVL tree and export it to
`tree.dot`; add, remove and find values in either hash set and list them;
and search every number `0 .. N-1` in a BST, an AVL tree and both hash
sets, reporting average time and comparisons (`N` is 10000 by default).
`19` quits.

```
labstructs-graph [--repeat N] [--viewer PROGRAM]
```

Reads the number of vertices, then pairs of vertex numbers counted from 1,
ending with `0`. It times `N` runs of the cut search (1000 by default),
writes the graph to `graph.txt` with the removed edges in red, runs
`dot -Tpng` to produce `graph.png` and opens it with the viewer (`gwenview`
by default; an empty value skips it). Invalid input ends the program with
exit code 141 (not an integer), 142 (out of range) or 151 (a vertex paired
with itself).

## Library use

```python
from labstructs.avl import AvlTree
from labstructs.hashing import ChainedHashSet
from labstructs.stack import evaluate_expression

tree = AvlTree()
for n in (5, 3, 8, 1):
    tree.insert(n)
print(list(tree.inorder()))          # [1, 3, 5, 8]

table = ChainedHashSet()
table.add(42)
print(42 in table)                   # True

print(evaluate_expression([1, 2, 3, 4, 5, 6, 7, 8, 9]))
```

## Limitations

- Nothing is stored between runs: every program starts with empty
  structures, and the only files written are the Graphviz exports named
  above.
- The memory figures printed by `labstructs-queues` and
  `labstructs-search` are fixed per-element estimates for a compact
  native layout, not measurements of the Python objects.
- Rendering the graph picture needs Graphviz `dot` installed; without it
  only `graph.txt` is written.