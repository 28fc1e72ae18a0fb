# dsakit

A small library of classic data structures and algorithms in plain Python,
with no dependencies beyond the standard library.

## Contents

| Module | What it provides |
| --- | --- |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`: stable sorts that return a new ascending list |
| `dsakit.searching` | `binary_search`, `recursive_binary_search` (on ascending sequences), `sequential_search`, `recursive_sequential_search`; each returns an index or `None` |
| `dsakit.stack` | `Stack`, a LIFO stack with `push`, `pop`, `top`, `is_empty`, `clear` |
| `dsakit.linked_queue` | `LinkedQueue`, a FIFO queue with `enqueue`, `dequeue`, `front`, `rear`, `is_empty`, `clear` |
| `dsakit.postfix` | `priority`, `infix_to_postfix` for single-character operands and `+ - * / ^` with parentheses |
| `dsakit.hashtable` | `ChainedHashTable`, integers hashed by remainder into chained buckets (5 by default); duplicates are kept |
| `dsakit.ordered_list` | `OrderedList`, a singly linked list of unique values in ascending order |
| `dsakit.unordered_list` | `SinglyLinkedList`, with insertion and deletion at the head, at the end and at 1-based positions, `index` and in-place `reverse` |
| `dsakit.doubly_linked_list` | `SortedDoublyLinkedList`, unique ascending values, walkable from either end, with `position_from_head` / `position_from_rear` |
| `dsakit.circular_list` | `SortedCircularList`, the same interface on a circular doubly linked ring |
| `dsakit.bst` | `BinarySearchTree` with `insert`, `remove`, `preorder`, `inorder`, `postorder`, `smallest`, `largest` and `in` |
| `dsakit.graph` | `Graph`, an undirected graph with `add_vertex`, `add_edge`, `adjacency`, `breadth_first`, `depth_first` and `minimum_spanning_tree` (Prim's method), which returns a `SpanningTree` |

## Installation

```
pip install dsakit
```

## Examples

```python
from dsakit.sorting import insertion_sort
from dsakit.searching import binary_search
from dsakit.postfix import infix_to_postfix
from dsakit.bst import BinarySearchTree
from dsakit.graph import Graph

data = insertion_sort([5, 2, 9, 1])   # [1, 2, 5, 9]
binary_search(data, 9)                # 3
binary_search(data, 4)                # None

infix_to_postfix("a+b*c")             # "abc*+"

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.inorder()                        # [20, 30, 40, 50, 70]
30 in tree                            # True

g = Graph()
for name in "ABC":
    g.add_vertex(name)
g.add_edge("A", "B", 4)
g.add_edge("B", "C", 1)
g.add_edge("A", "C", 3)
g.breadth_first()                     # ['A', 'C', 'B']
tree = g.minimum_spanning_tree()
tree.edges                            # (('A', 3, 'C'), ('C', 1, 'B'))
tree.cost                             # 4
print(tree)
# A---3---C
# C---1---B
# Cost of MST = 4
```

Each vertex of a `Graph` lists its edges newest first, and the traversals
follow that order; every unvisited vertex, in the order vertices were added,
starts a new search. The spanning tree covers only the part of the graph
reachable from the first vertex.

## Errors

The containers follow Python conventions: `len()`, iteration and `in` work
where they make sense, and failures raise exceptions rather than returning a
status flag:

- taking from an empty `Stack`, `LinkedQueue` or `SinglyLinkedList` raises
  `IndexError`, as does a position outside `2..len()` for
  `SinglyLinkedList.insert_at` / `delete_at`;
- inserting a value already present in one of the sorted lists raises
  `ValueError`; removing an absent value from them, from `ChainedHashTable`
  or from `BinarySearchTree` raises `KeyError`;
- `BinarySearchTree.smallest` / `largest` on an empty tree raise `ValueError`;
- `Graph.add_vertex` with a taken name raises `ValueError`, and
  `Graph.add_edge` with an unknown vertex raises `KeyError`;
- `infix_to_postfix` raises `ValueError` on an unmatched `)`.

## What this package does not do

It is a library only: there is no command-line program and no interactive
menu for building and inspecting these structures. Nothing is stored on disk.

## Running the tests

```
pip install -e ".[test]"
pytest
```