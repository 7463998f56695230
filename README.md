# dsworks

Classic data structures in plain Python: stacks, heaps and search trees.
The package also has small command-driven programs built on them and a set of
timing benchmarks. It uses the standard library only.

## Contents

| Module | Contents |
| --- | --- |
| `dsworks.stacks` | `ArrayStack`, whose `capacity` doubles when full and halves when sparse, and `LinkedStack`, a singly linked stack. Both raise `StackEmptyError` on `pop`/`top` when empty |
| `dsworks.stack_commands` | `run(text)`: a stack driven by `push`, `pop`, `back`, `size`, `clear`, `exit` |
| `dsworks.quicksort` | `quick_sort(items)`: returns a new sorted list, partitioned around the middle element |
| `dsworks.float_hash` | hashes over the bits of a 32-bit float: `float_bits`, `exponent`, `mantissa`, `multiply_hash`, each taking `(number, modulus)` |
| `dsworks.array_gen` | `generate_array(count, max_value, seed=42)` and `write_test_file(size, test_number, max_value, directory=".")` |
| `dsworks.kheap` | `KHeap`, a max-heap with any number of children per node and an optional capacity. It can be built by `insert` or by `KHeap.from_values` / `heapify`. It raises `HeapEmptyError` and `HeapFullError` |
| `dsworks.minmax_heap` | `MinMaxHeap` with `get_min`, `get_max`, `extract_min`, `extract_max`, `clear`, plus `run(text)` |
| `dsworks.indexed_heap` | `IndexedMinHeap` with `insert(value, number)`, `get_min`, `extract_min`, `decrease_key(number, delta)`, plus `run(text)` |
| `dsworks.avl` | `AVLTree` with `insert`, `delete`, `lower_bound`, `height`, membership and in-order iteration, plus `run(text)` |
| `dsworks.bst` | `BinarySearchTree`, unbalanced, with `insert`, `delete`, `minimum` |
| `dsworks.splay` | `SplayTree` with `insert`, `delete`, `search`, `root_key` |
| `dsworks.splay_map` | `SplayMap`, a string-to-string splay tree, plus `run(text)` |
| `dsworks.treap` | `Treap` with `insert(key, priority=None)`, `delete`, `successor`, `predecessor`, `kth`, `split`. It also has the module-level `merge` and `run(text, seed=None)` |
| `dsworks.benchmarks` | timing runs for the stacks, heaps and trees |

In the tree classes, `insert` and `delete` return `False` when the key was
already present or was missing.

## Installing

```
pip install .
pip install ".[test]"   # with pytest
pytest
```

## Examples

```python
from dsworks.stacks import ArrayStack, LinkedStack, StackEmptyError

stack = ArrayStack(capacity=4)
for value in range(10):
    stack.push(value)
stack.top()        # 9
stack.pop()        # 9
len(stack)         # 9

linked = LinkedStack()
try:
    linked.pop()
except StackEmptyError:
    pass
```

```python
from dsworks.kheap import KHeap
from dsworks.minmax_heap import MinMaxHeap

heap = KHeap.from_values([5, 1, 9, 3], children=3)
heap.extract_max()            # 9

mm = MinMaxHeap(capacity=100)
for value in (4, 8, 1, 6):
    mm.insert(value)
mm.get_min(), mm.get_max()    # (1, 8)
```

```python
from dsworks.avl import AVLTree
from dsworks.treap import Treap, merge

tree = AVLTree()
for key in (1, 4, 7):
    tree.insert(key)
tree.lower_bound(5)   # 7
list(tree)            # [1, 4, 7]

treap = Treap(seed=1)
for key, priority in ((10, 3), (20, 7), (30, 5)):
    treap.insert(key, priority)
treap.kth(0)          # 10
treap.successor(15)   # 20
low, high = treap.split(20)   # keys below 20, keys from 20 up
list(merge(low, high))        # [10, 20, 30]
```

The command-driven modules expose `run`. It takes the whole input as a string
and returns the text that would be printed:

```python
from dsworks.stack_commands import run

print(run("push 3\npush 5\nback\nsize\nexit\n"))   # ok, ok, 5, 2, bye
```

## Commands

| Command | What it does |
| --- | --- |
| `dsworks-stack [input] [output]` | runs stack commands. It reads from `input.txt` and writes to `output.txt` by default |
| `dsworks-sort` | reads a count and that many integers from stdin, then prints them sorted. It exits with 1 for a non-positive count and 2 for bad input |
| `dsworks-gen-array <size> <test number> <max value>` | writes `<size>_<test number>.in` in the current directory. The file holds `size` values from 0 to the max value, seeded with 42 |
| `dsworks-minmax-heap` | reads a count and that many min-max heap commands from stdin: `insert`, `get_min`, `get_max`, `extract_min`, `extract_max`, `size`, `clear` |
| `dsworks-indexed-heap` | reads a count and that many commands from stdin: `insert`, `getMin`, `extractMin`, `decreaseKey`. Elements are numbered by the command's position, from 1 |
| `dsworks-avl` | reads a count, then `+ x` / `? x` queries, from stdin. `?` prints the smallest key not below x, or -1. A `+` right after a `?` adds that answer to x, modulo 10^9 |
| `dsworks-splay-map` | reads pilot/ship pairs and then names from stdin. For each name that is found, it prints the paired name |
| `dsworks-treap [input]` | reads `insert`, `delete`, `exists`, `next`, `prev`, `kth` commands from a file, `input.txt` by default, and prints the answers |
| `dsworks-bench` | runs the timing benchmarks; see below |

### Benchmarks

```
dsworks-bench stacks {array,list} [--size N] [--repeats R] [--step S] [--seed X] [--output-dir DIR]
dsworks-bench heap-insert [--tests DIR] [--output FILE] [--from A] [--to B] [--step S] [--children K]
dsworks-bench heap-build  [--tests DIR] [--output FILE] [--from A] [--to B] [--step S] [--children K]
dsworks-bench trees {avl,bst,splay,treap} [--output-dir DIR] [--from A] [--to B] [--step S] [--repeats R] [--bamboo L] [--seed X]
```

- **`stacks`** prints the average time of three runs: churn, mixed and random. It then writes a growth profile to `res_massiv_stack.txt` or `res_list_stack.txt`.
- **`heap-insert` and `heap-build`** read `<size>_0.in` files from the tests directory. Those are the files `dsworks-gen-array` writes. Each run appends a `size seconds` line to the output file.
- **`trees`** appends timings to `<kind>_push.txt` and `<kind>_pop.txt`. For `avl` and `bst` it also runs a sequential-key pass, written to `<kind>_push_bamb.txt` and `<kind>_pop_bamb.txt`.

The same runs are available as functions:

- `churn_benchmark`, `mixed_benchmark` and `random_benchmark` return `StackRun`.
- `growth_profile` returns the profile points.
- `heap_insert_timing` and `heap_build_timing` return a `KHeap` and the seconds spent.
- `tree_benchmark` returns a list of `TreeTiming`.

## Limits

- All structures live in memory only. Nothing is saved between runs.
- The float hash functions have no command of their own; use them from Python.
- The benchmarks write plain text timing files. They do not plot them.