# dslab

Classic data structures and graph algorithms. Each one can be used as a
small Python library and as an interactive command-line program that reads
whitespace-separated integers from standard input.

The package has no runtime dependencies and supports Python 3.10 and later.

## What is inside

| Module                     | Contents                                                     |
|----------------------------|--------------------------------------------------------------|
| `dslab.graphs`             | `bfs`, `dfs`, `kruskal`, `prim`, `Edge`, `SpanningTree`      |
| `dslab.disjoint_set`       | `DisjointSet` with `find`, `union` and `parents`             |
| `dslab.bitset`             | `bit_union`, `bit_intersection`, `bit_difference`            |
| `dslab.bst`                | `BinarySearchTree`                                           |
| `dslab.binary_tree`        | `BinaryTree` (level-order insertion, deepest-node deletion)  |
| `dslab.circular_queue`     | `CircularQueue`, `QueueFullError`, `QueueEmptyError`         |
| `dslab.doubly_linked_list` | `DoublyLinkedList`                                           |
| `dslab.linked_list`        | `LinkedList`                                                 |
| `dslab.stack`              | `Stack`                                                      |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

### Graphs

Graphs are square matrices given as lists of rows. Vertices are numbered
from 1, so row `i - 1` describes vertex `i`.

`bfs(adjacency, start)` and `dfs(adjacency, start)` return the vertices
reachable from `start` in the order they are visited. Only entries equal to
`1` count as edges, and neighbours are taken in ascending order. A start
vertex outside `1..n` or a matrix that is not square raises `ValueError`.

`kruskal(cost)` and `prim(cost)` take a cost matrix in which `0` means "no
edge" (weights of 999 or more are never chosen) and return a `SpanningTree`:
its `edges` is a tuple of `Edge(u, v, weight)` in the order they were
chosen, and its `cost` is their total weight. Kruskal's method repeatedly
takes the cheapest remaining edge; Prim's grows the tree outward from
vertex 1. Both raise `ValueError` when the graph is not connected.

```python
from dslab.graphs import bfs, dfs, kruskal, prim

adjacency = [
    [0, 1, 1],
    [1, 0, 0],
    [1, 0, 0],
]
print(bfs(adjacency, 1))   # [1, 2, 3]
print(dfs(adjacency, 2))   # [2, 1, 3]

cost = [
    [0, 2, 3],
    [2, 0, 1],
    [3, 1, 0],
]
tree = kruskal(cost)
print(tree.edges)  # (Edge(u=2, v=3, weight=1), Edge(u=1, v=2, weight=2))
print(tree.cost)   # 3
print(prim(cost).edges)  # (Edge(u=1, v=2, weight=2), Edge(u=2, v=3, weight=1))
```

### Disjoint sets

`DisjointSet(size)` holds the elements `1..size`, each in a set of its own.
`union(a, b)` places the representative of `b` under that of `a` and returns
`False` if they were already in the same set. `find` follows parent links
without compressing them, and `parents()` returns a mapping from each
element to its parent. Elements outside `1..size` raise `ValueError`.

```python
from dslab.disjoint_set import DisjointSet

sets = DisjointSet(5)
sets.union(1, 2)
sets.union(2, 3)
assert sets.find(3) == sets.find(1) == 1
assert sets.union(1, 3) is False
print(sets.parents())  # {1: 1, 2: 1, 3: 1, 4: 4, 5: 5}
```

### Sets as bit strings

Sets over a common universe are written as equal-length lists of bits.
Lists of different lengths raise `ValueError`.

```python
from dslab.bitset import bit_union, bit_intersection, bit_difference

a = [1, 0, 1, 1]
b = [0, 1, 1, 0]
print(bit_union(a, b))         # [1, 1, 1, 1]
print(bit_intersection(a, b))  # [0, 0, 1, 0]
print(bit_difference(a, b))    # [1, 0, 0, 1]
```

### Trees

`BinarySearchTree` is unbalanced and ignores duplicate values. It supports
`insert`, the `in` operator, and `delete`, which returns `False` when the key
is absent; a node with two children takes the value of its in-order
successor. `inorder()`, `preorder()` and `postorder()` return iterators.

`BinaryTree` places each new value in the first free child slot in level
order. `delete(key)` gives the last node in level order holding `key` the
value of the deepest, rightmost node and removes that node; it returns
`False` when the key is absent. It has the same three traversals.

```python
from dslab.bst import BinarySearchTree
from dslab.binary_tree import BinaryTree

bst = BinarySearchTree()
for value in (50, 30, 70, 20, 40):
    bst.insert(value)
assert 40 in bst
bst.delete(30)
print(list(bst.inorder()))    # [20, 40, 50, 70]
print(list(bst.preorder()))   # [50, 40, 20, 70]

tree = BinaryTree()
for value in (1, 2, 3, 4):
    tree.insert(value)
tree.delete(2)
print(list(tree.preorder()))  # [1, 4, 3]
```

### Queues, lists and stacks

`CircularQueue(capacity=5)` is a first-in first-out queue of bounded size.
`enqueue` raises `QueueFullError` (an `OverflowError`) when it is full and
`dequeue` raises `QueueEmptyError` (an `IndexError`) when it is empty.

`DoublyLinkedList` grows and shrinks at both ends with `push_front`,
`push_back`, `pop_front` and `pop_back`, and iterates in either direction.
`LinkedList` inserts and removes at its head with `push` and `pop`.
`Stack` iterates from top to bottom. Popping from any of the empty lists or
from an empty stack raises `IndexError`.

```python
from dslab.circular_queue import CircularQueue, QueueFullError
from dslab.doubly_linked_list import DoublyLinkedList
from dslab.linked_list import LinkedList
from dslab.stack import Stack

queue = CircularQueue(2)
queue.enqueue(1)
queue.enqueue(2)
try:
    queue.enqueue(3)
except QueueFullError:
    print("queue is full")
print(queue.dequeue(), len(queue))  # 1 1

items = DoublyLinkedList()
items.push_front(2)
items.push_front(1)
items.push_back(3)
print(list(items), list(reversed(items)))  # [1, 2, 3] [3, 2, 1]

singly = LinkedList()
singly.push(1)
singly.push(2)
print(list(singly), len(singly))  # [2, 1] 2

stack = Stack()
stack.push(10)
stack.push(20)
stack.pop()
print(list(stack), len(stack))  # [10] 1
```

## Command-line programs

Each program prompts for its input and reads integers separated by any
whitespace from standard input, so input can be typed or piped in.

| Command                     | What it does                                         |
|-----------------------------|------------------------------------------------------|
| `dslab-bfs`                 | Breadth-first traversal of an adjacency matrix       |
| `dslab-dfs`                 | Depth-first traversal of an adjacency matrix         |
| `dslab-kruskal`             | Minimum spanning tree by Kruskal's algorithm         |
| `dslab-prim`                | Minimum spanning tree by Prim's algorithm            |
| `dslab-bitset`              | Union, intersection and difference of bit strings    |
| `dslab-disjoint-set`        | Menu for find and union on a disjoint set            |
| `dslab-bst`                 | Menu for a binary search tree                        |
| `dslab-binary-tree`         | Menu for a level-order binary tree                   |
| `dslab-circular-queue`      | Menu for a circular queue of five items              |
| `dslab-doubly-linked-list`  | Menu for a doubly linked list                        |
| `dslab-linked-list`         | Menu for a singly linked list                        |
| `dslab-stack`               | Menu for a stack                                     |

The graph and bit-string programs read their whole input, print the result
and exit with status 0. They exit with status 1 and a message on standard
error if the input ends early, holds something that is not an integer, or is
rejected (for example a graph that is not connected).

The menu programs loop until the Exit entry is chosen or the input ends,
both of which give status 0; input that is not an integer gives status 1.

For example:

```
printf '3\n0 2 3\n2 0 1\n3 1 0\n' | dslab-prim
```

prints the prompts followed by

```
Edges in Minimum Spanning Tree:
1 - 2 : 2
2 - 3 : 1
Minimum cost = 3
```