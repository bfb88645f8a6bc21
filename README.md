# dsakit

Plain-Python implementations of classic data structures and algorithms.
It has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

Install the test extra and run the suite:

```
pip install ".[test]"
pytest
```

## What is inside

### Sorting and searching

`dsakit.sorting` has `bubble_sort` (stops early when a pass makes no swap),
`selection_sort`, `insertion_sort`, `recursive_bubble_sort`, `merge_sort`
(stable) and `quick_sort` (last element as pivot). Each takes any iterable,
leaves it untouched and returns a new ascending list.

`dsakit.searching` has `binary_search` and `recursive_binary_search`, which
return an index of the target in a sorted sequence or `None`; `contains`,
which returns a bool; and `has_pair_with_sum`, which sorts the values and
tells with two pointers whether two distinct entries add up to a target.

### Recursion and dynamic programming

`dsakit.recursion` has memoised `factorial(n)` and `fibonacci(n)` (with
`fibonacci(0) == 0`), both raising `ValueError` for negative `n`, and
`tower_of_hanoi(n, source="A", target="C", helper="B")`, which yields
`(disk, from_peg, to_peg)` moves.

`dsakit.dynamic` has:

- `knapsack_01(profits, weights, capacity)`, returning a frozen
  `KnapsackResult` with the best `value` and the 0-based `items` chosen;
- `fractional_knapsack(items, capacity)` over `(value, weight)` pairs,
  returning the greedy total as a float;
- `min_coins(coins, amount)`, the fewest coins making up `amount`, or `None`
  when it cannot be made. Values are compared in hundredths, so decimal
  amounts such as `0.25` work.

### Huffman coding and heaps

`dsakit.huffman` has `HuffmanNode`, `build_huffman_tree(frequencies)` and
`huffman_codes(frequencies)`, which maps each symbol to a string of `0`
(left branch) and `1` (right branch). Frequencies may be a mapping or an
iterable of `(symbol, frequency)` pairs.

`dsakit.heap` has `MaxHeap(capacity=1000)` with `push`, `pop` (largest
first), `len()` and iteration in array order. Pushing onto a full heap
raises `OverflowError`; popping an empty one raises `IndexError`.

### Expressions

`dsakit.expressions` has:

- `infix_to_postfix` and `infix_to_prefix` for expressions of
  single-character letter or digit operands, `+ - * / ^` and parentheses;
  `^` is right-associative in `infix_to_postfix`;
- `evaluate_postfix` and `evaluate_prefix` for single-digit operands;
  `/` truncates towards zero;
- `check_brackets`, returning a `BracketStatus` (`BALANCED`, `EXTRA_RIGHT`,
  `MISMATCH` or `EXTRA_LEFT`) whose `balanced` property is true only for
  `BALANCED`.

Malformed input raises `ValueError`; division by zero raises
`ZeroDivisionError`.

### Stacks and queues

`dsakit.stacks` has `ArrayStack(capacity=8)` (with `drain`, which pops every
value top first), `LinkedStack` (with in-place `reverse` and iteration from
top to bottom) and `QueueStack`, a stack built from two queues.

`dsakit.queues` has `ArrayQueue(capacity=100)`, whose capacity bounds the
total number of items ever enqueued, `LinkedQueue`, the ring buffer
`CircularQueue(capacity)` with `front` and `rear`, and `StackQueue`, a queue
built from two stacks.

Taking from an empty stack or queue raises `IndexError`; adding to a full
one raises `OverflowError`.

### Linked lists

`dsakit.singly.SinglyLinkedList` supports `insert_front`, `insert_back`,
`insert_at(value, position)`, `remove(value)`, `update(old, new)`, `in`,
iteration and `len()`. `dsakit.doubly` has `DoublyLinkedList` (with
`insert_after`, `insert_before`, `delete_first`, `delete_last`, `delete_at`
and `reverse`), `CircularSinglyLinkedList` and `CircularDoublyLinkedList`
(which also has `update`). Positions are 1-based; a position out of range
raises `IndexError`.

### Records

`dsakit.records` has the dataclasses `Book`, `BankAccount` (with `withdraw`)
and `Person`, each with a `describe` method returning a text line or lines,
and `find_person(people, name)`, which raises `KeyError` when nobody has that
name.

### Trees and graphs

`dsakit.trees` has `BinaryNode` with the `inorder`, `preorder` and
`postorder` functions, `BinarySearchTree` (equal values go right; `search`
and `delete` return bools) and the self-balancing `AVLTree` with `insert`,
`delete`, `preorder`, `inorder`, `height`, `in` and `len()`.

`dsakit.graphs` has `Graph`, an undirected graph whose `add_vertex` returns
the new index and whose `bfs` and `dfs` list labels reached from vertex 0,
lower indices first; `adjacency_matrix(vertices, edges)` over `(u, v,
weight)` triples, `remove_edge`, `format_matrix` (three-column entries) and
`multistage_shortest_path`, which takes a square matrix with `None` or
`math.inf` for missing edges and returns the cheapest cost from the first to
the last vertex.

## Examples

```python
from dsakit.sorting import quick_sort
from dsakit.searching import binary_search
from dsakit.dynamic import knapsack_01, min_coins
from dsakit.expressions import infix_to_postfix, evaluate_postfix
from dsakit.trees import AVLTree
from dsakit.graphs import Graph

data = quick_sort([18, 12, 6, 55, 69, 8, 23])   # [6, 8, 12, 18, 23, 55, 69]
index = binary_search(data, 55)                  # 5

print(knapsack_01([1, 2, 5, 6], [2, 3, 4, 5], 8))
# KnapsackResult(value=8, items=(1, 3))

print(min_coins([0.25, 0.10, 0.05], 0.40))        # 3

print(infix_to_postfix("a+b*c"))                 # abc*+
print(evaluate_postfix("23*5+"))                 # 11

tree = AVLTree([10, 20, 30, 40, 50, 25])
print(tree.preorder())                           # [30, 20, 10, 25, 40, 50]

graph = Graph()
for value in range(4):
    graph.add_vertex(value)
graph.add_edge(0, 1)
graph.add_edge(0, 2)
graph.add_edge(2, 3)
print(graph.bfs(), graph.dfs())                  # [0, 1, 2, 3] [0, 1, 2, 3]
```

## What it does not do

dsakit is a library only. It has no command-line program and no interactive
menus or prompts; reading input and printing results are left to the caller.