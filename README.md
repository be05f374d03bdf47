# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## What is in it

- **Sequences**
  - `dsakit.array.FixedArray`: a fixed number of slots (5 by default). `push`
    inserts and shifts later slots right, dropping the last one; `pop` removes
    and shifts left, leaving `None` in the freed slot; `replace` overwrites.
    Out-of-range indices raise `IndexError`.
  - `dsakit.linked_list.LinkedList` of `ListNode`s: `append`, `prepend`,
    `last`, and node-relative `push_after`, `pop_after`, `delete_after`, plus
    `clear`, `for_each` and `nodes`.
  - `dsakit.circular_list.CircularList`: doubly linked, circular around a
    sentinel, with `push_front`/`push_back`, `pop_front`/`pop_back`,
    `find` (zero-based index or -1), `position` (one-based, `ValueError` if
    missing), `in`, `reversed()` and `clear`.
- **Queues**
  - `dsakit.deque.Deque`: double-ended, with `push_front`, `push_back`,
    `pop_front`, `pop_back`, `last` and `clear`.
  - `dsakit.array_queue.ArrayQueue`: array-backed FIFO with `enqueue`, `peek`
    and `dequeue`.
  - `dsakit.linked_queue.LinkedQueue`: FIFO with `enqueue`, `dequeue` and
    `peek`.
  - Removing or peeking on an empty queue raises `IndexError`.
- **Heaps**
  - `dsakit.heap.MinHeap`: integers in a 1-based array of `capacity` slots
    (100 by default, so at most 99 keys); `push`, `pop`, and `slots()` to see
    the raw array.
  - `dsakit.array_heap.ArrayMinHeap`: holds at most `capacity` keys; `insert`,
    `delete` and `items()` in array order.
  - `dsakit.edge_heap.EdgeHeap` of `Edge(weight, from_vertex, to_vertex)`,
    with `kruskal_heap` and `prim_heap` to fill it from a graph.
  - A full heap raises `OverflowError`; an empty one raises `IndexError`.
- **Trees**
  - `dsakit.bintree.TreeNode` with `insert_left`/`insert_right`, the
    generators `preorder`, `inorder`, `postorder` and `postorder_release`, and
    `build_sample_tree()`.
  - `dsakit.bst.BinarySearchTree` with `insert`, `delete`, `minimum`, `in`,
    in-order iteration and `len`. Inserting an existing key raises
    `DuplicateKeyError`; deleting a missing key raises `KeyError`.
- **Sorting** (`dsakit.sorting`): `selection_sort`, `bubble_sort`,
  `quick_sort`, `insertion_sort`, `shell_sort`, `merge_sort`, `radix_sort`
  and `heap_sort`, plus `format_array` for display. Each returns a new list
  and leaves its input untouched. `radix_sort` handles values from 0 to 99
  only and raises `ValueError` otherwise.
- **Graphs**
  - `dsakit.graph.ArrayGraph`: an adjacency matrix over vertex ids
    `0 .. max_vertex_count - 1`, `GraphType.UNDIRECTED` or `DIRECTED`. A
    weight of 0 means no edge. Methods: `add_vertex`, `remove_vertex`,
    `add_edge`, `remove_edge`, `weight`, `neighbours`, `is_valid_vertex`,
    `is_empty`, `has_cycle_through` and `render`. Invalid vertices raise
    `GraphError`.
  - `dsakit.spanning`: `kruskal(graph)`, `prim(graph, start)` and the single
    step `kruskal_step(heap, tree)`.
  - `dsakit.shortest_path`: `dijkstra(graph, source)` returns a distance list
    with `INFINITY` for unreachable vertices, `all_pairs(graph)` returns one
    such row per vertex, and `format_distances` renders a row.
- **Maze solving** (`dsakit.maze`): `solve_maze(grid, start, goal)` walks a
  grid of 0 (open) and 1 (wall) with a stack, returning the path of `(x, y)`
  positions and the explored grid; it raises `MazeError` when the maze is
  malformed or the goal cannot be reached. `default_maze()` and `render_grid`
  help with display.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from dsakit.sorting import selection_sort, format_array

values = [80, 50, 70, 10, 60, 20, 40, 30]
print(selection_sort(values))   # [10, 20, 30, 40, 50, 60, 70, 80]
print(format_array(values))
```

```python
from dsakit.bst import BinarySearchTree, DuplicateKeyError

tree = BinarySearchTree([20, 5, 1, 15, 9])
print(list(tree))      # [1, 5, 9, 15, 20]
print(9 in tree)       # True
tree.delete(5)

try:
    tree.insert(20)
except DuplicateKeyError:
    print("already there")
```

```python
from dsakit.graph import ArrayGraph, GraphType
from dsakit.spanning import kruskal
from dsakit.shortest_path import dijkstra

graph = ArrayGraph(4, GraphType.UNDIRECTED)
for vertex in range(4):
    graph.add_vertex(vertex)
graph.add_edge(0, 1, 4)
graph.add_edge(1, 2, 2)
graph.add_edge(2, 0, 3)
graph.add_edge(2, 3, 1)

print(graph.render())
print(kruskal(graph).render())
print(dijkstra(graph, 0))
```

```python
from dsakit.deque import Deque

queue = Deque("ABC")
queue.push_back("D")
print(queue.pop_front())   # 'A'
print(list(queue))         # ['B', 'C', 'D']
```

## Command-line demos

Each command prints a short walkthrough of one structure or algorithm:

```
dsakit-heap          # push five keys into a min-heap and pop the smallest
dsakit-deque         # push and pop at both ends of a deque
dsakit-array-queue   # enqueue, peek and dequeue on an array queue
dsakit-sort          # run every sorting algorithm on a sample array
dsakit-graph         # Kruskal, Prim, single-source and all-pairs distances
dsakit-maze          # find the way out of the built-in maze
dsakit-tree          # build the sample binary tree, walk it, then release it
dsakit-bst           # build a search tree, delete a key, show its shape
```

The demos take no options and always use their built-in sample data.