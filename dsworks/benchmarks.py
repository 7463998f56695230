"""Timing benchmarks for the stacks, heaps and search trees of the package."""

from __future__ import annotations

import argparse
import random
import sys
import time
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, Optional, Protocol, Sequence

from dsworks.avl import AVLTree
from dsworks.bst import BinarySearchTree
from dsworks.kheap import KHeap
from dsworks.splay import SplayTree
from dsworks.stacks import ArrayStack, LinkedStack, StackEmptyError
from dsworks.treap import Treap

STACK_SIZE = 1000000
STACK_REPEATS = 3
PROFILE_STEP = 1000
MIXED_ROUNDS = 100

HEAP_FROM = 100000
HEAP_TO = 1000000
HEAP_STEP = 100000
HEAP_TESTS_PER_SIZE = 1
HEAP_CHILDREN = 2

TREE_MIN_SIZE = 100000
TREE_MAX_SIZE = 1000000
TREE_PERIOD = 100000
TREE_REPEATS = 5
BAMBOO_LENGTH = 10000
KEY_LIMIT = 2**31


class _Stack(Protocol):
    def push(self, value: Any) -> None: ...
    def pop(self) -> Any: ...
    def __len__(self) -> int: ...


class _Tree(Protocol):
    def insert(self, key: int) -> bool: ...
    def delete(self, key: int) -> bool: ...
    def __iter__(self) -> Iterator[int]: ...


@dataclass(frozen=True)
class StackRun:
    """Average timed seconds over the repeats and the stack size left at the end."""

    seconds: float
    final_size: int


@dataclass(frozen=True)
class TreeTiming:
    """Timings of one tree run: ``size`` inserts, then ``delete_count`` deletes."""

    size: int
    insert_seconds: float
    delete_count: int
    delete_seconds: float
    remaining: int


def _check_repeats(repeats: int) -> None:
    if repeats <= 0:
        raise ValueError("repeats must be positive")


def _pop_quietly(stack: _Stack) -> None:
    with suppress(StackEmptyError):
        stack.pop()


def _fill(stack: _Stack, size: int) -> None:
    for value in range(size):
        stack.push(value)


def _shrink(stack: _Stack, floor: int) -> None:
    """Alternately pop about half and push back about a quarter until small."""
    while len(stack) > floor:
        done = 0
        while done < len(stack) // 2:
            _pop_quietly(stack)
            done += 1
        done = 0
        while done < len(stack) // 4:
            stack.push(done)
            done += 1


def _rounds(stack: _Stack, rounds: int, batch: int) -> None:
    for _ in range(rounds):
        for _ in range(batch):
            _pop_quietly(stack)
        for value in range(batch):
            stack.push(value)


def _repeat(make_stack: Callable[[], _Stack], repeats: int,
            setup: Callable[[_Stack], None],
            timed: Callable[[_Stack], None]) -> StackRun:
    _check_repeats(repeats)
    total = 0.0
    final_size = 0
    for _ in range(repeats):
        stack = make_stack()
        setup(stack)
        begin = time.process_time()
        timed(stack)
        total += time.process_time() - begin
        final_size = len(stack)
    return StackRun(total / repeats, final_size)


def churn_benchmark(make_stack: Callable[[], _Stack], repeats: int = STACK_REPEATS,
                    size: int = STACK_SIZE) -> StackRun:
    """Push ``size`` values, then shrink in pop/push waves down to a tenth."""

    def timed(stack: _Stack) -> None:
        _fill(stack, size)
        _shrink(stack, size // 10)

    return _repeat(make_stack, repeats, lambda stack: None, timed)


def mixed_benchmark(make_stack: Callable[[], _Stack], repeats: int = STACK_REPEATS,
                    size: int = STACK_SIZE) -> StackRun:
    """Push ``size`` values, then batched pop/push rounds around a shrinking phase."""
    batch = size // MIXED_ROUNDS

    def timed(stack: _Stack) -> None:
        _fill(stack, size)
        _rounds(stack, MIXED_ROUNDS, batch)
        _shrink(stack, size // 10)
        _rounds(stack, MIXED_ROUNDS, batch)

    return _repeat(make_stack, repeats, lambda stack: None, timed)


def random_benchmark(make_stack: Callable[[], _Stack], repeats: int = STACK_REPEATS,
                     size: int = STACK_SIZE, seed: Optional[int] = None) -> StackRun:
    """Fill with ``size`` values, then time ``size`` random pushes and pops."""

    def timed(stack: _Stack) -> None:
        rng = random.Random(seed)
        for _ in range(size):
            choice = rng.randrange(2) + 1
            if choice == 1:
                stack.push(choice)
            else:
                _pop_quietly(stack)

    return _repeat(make_stack, repeats, lambda stack: _fill(stack, size), timed)


def growth_profile(make_stack: Callable[[], _Stack], count: int = STACK_SIZE,
                   step: int = PROFILE_STEP) -> list[tuple[int, float]]:
    """Push ``count + 1`` values, noting the elapsed time before every ``step``-th."""
    if step <= 0:
        raise ValueError("step must be positive")
    stack = make_stack()
    points: list[tuple[int, float]] = []
    begin = time.process_time()
    for value in range(count + 1):
        if value % step == 0:
            points.append((value, time.process_time() - begin))
        stack.push(value)
    return points


def heap_insert_timing(values: Iterable[int],
                       children: int = HEAP_CHILDREN) -> tuple[KHeap, float]:
    """Insert ``values`` one by one into a fitted heap; return it and the seconds spent."""
    items = list(values)
    heap = KHeap(children, len(items))
    spent = 0.0
    for value in items:
        begin = time.process_time()
        heap.insert(value)
        spent += time.process_time() - begin
    return heap, spent


def heap_build_timing(values: Iterable[int],
                      children: int = HEAP_CHILDREN) -> tuple[KHeap, float]:
    """Build a heap over ``values`` bottom up; return it and the seconds spent."""
    items = list(values)
    begin = time.process_time()
    heap = KHeap.from_values(items, children)
    return heap, time.process_time() - begin


def tree_benchmark(make_tree: Callable[[], _Tree], sizes: Iterable[int],
                   seed: Optional[int] = None) -> list[TreeTiming]:
    """For each size, time inserting that many random keys and deleting half as many."""
    rng = random.Random(seed)
    results: list[TreeTiming] = []
    for size in sizes:
        tree = make_tree()
        insert_seconds = 0.0
        for _ in range(size):
            key = rng.randrange(KEY_LIMIT)
            begin = time.process_time()
            tree.insert(key)
            insert_seconds += time.process_time() - begin
        delete_count = size // 2
        delete_seconds = 0.0
        for _ in range(delete_count):
            key = rng.randrange(KEY_LIMIT)
            begin = time.process_time()
            tree.delete(key)
            delete_seconds += time.process_time() - begin
        remaining = sum(1 for _ in tree)
        results.append(TreeTiming(size, insert_seconds, delete_count,
                                  delete_seconds, remaining))
    return results


def _bamboo_benchmark(make_tree: Callable[[], _Tree], length: int) -> TreeTiming:
    tree = make_tree()
    begin = time.process_time()
    for key in range(length):
        tree.insert(key)
    insert_seconds = time.process_time() - begin
    delete_count = length // 2
    begin = time.process_time()
    for key in range(delete_count):
        tree.delete(key)
    delete_seconds = time.process_time() - begin
    return TreeTiming(length, insert_seconds, delete_count, delete_seconds,
                      sum(1 for _ in tree))


def _append(path: Path, line: str) -> None:
    with path.open("a", encoding="ascii") as out:
        out.write(line + "\n")


def _stacks_main(args: argparse.Namespace) -> int:
    size = args.size
    if args.kind == "array":
        def make_stack() -> _Stack:
            return ArrayStack(size + 10)

        def make_random_stack() -> _Stack:
            return ArrayStack(max(size * 3 // 2, 1))

        profile_name = "res_massiv_stack.txt"
    else:
        make_stack = make_random_stack = LinkedStack
        profile_name = "res_list_stack.txt"

    runs = (
        churn_benchmark(make_stack, args.repeats, size),
        mixed_benchmark(make_stack, args.repeats, size),
        random_benchmark(make_random_stack, args.repeats, size, args.seed),
    )
    for number, run in enumerate(runs, start=1):
        print(f"Test {number} spends {run.seconds:f} sec")

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    points = growth_profile(make_stack, size, args.step)
    with (output_dir / profile_name).open("w", encoding="ascii") as out:
        out.write("".join(f"{count} {seconds:f}\n" for count, seconds in points))
    return 0


def _read_values(path: Path, size: int) -> list[int]:
    tokens = path.read_text(encoding="ascii").split()
    if len(tokens) < size:
        raise ValueError(f"{path} holds fewer than {size} values")
    return [int(token) for token in tokens[:size]]


def _heap_main(args: argparse.Namespace,
               timing: Callable[[Sequence[int], int], tuple[KHeap, float]]) -> int:
    tests = Path(args.tests)
    output = Path(args.output)
    for size in range(args.start, args.stop, args.step):
        if size == 0:
            continue
        for number in range(HEAP_TESTS_PER_SIZE):
            path = tests / f"{size}_{number}.in"
            if not path.is_file():
                print(f"cannot open file {path}", file=sys.stderr)
                return 1
            _, seconds = timing(_read_values(path, size), args.children)
            _append(output, f"{size} {seconds:f}")
    return 0


_TREES: dict[str, Callable[[], _Tree]] = {
    "avl": AVLTree,
    "bst": BinarySearchTree,
    "splay": SplayTree,
    "treap": Treap,
}
_BAMBOO_KINDS = ("avl", "bst")


def _trees_main(args: argparse.Namespace) -> int:
    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    make_tree = _TREES[args.kind]
    push_file = output_dir / f"{args.kind}_push.txt"
    pop_file = output_dir / f"{args.kind}_pop.txt"
    sizes = range(args.start, args.stop, args.step)
    for _ in range(args.repeats):
        for record in tree_benchmark(make_tree, sizes, args.seed):
            _append(push_file, f"{record.size} {record.insert_seconds:g}")
            _append(pop_file, f"{record.delete_count} {record.delete_seconds:g}")
        if args.kind in _BAMBOO_KINDS:
            record = _bamboo_benchmark(make_tree, args.bamboo)
            _append(output_dir / f"{args.kind}_push_bamb.txt",
                    f"{record.size} {record.insert_seconds:g}")
            _append(output_dir / f"{args.kind}_pop_bamb.txt",
                    f"{record.delete_count} {record.delete_seconds:g}")
    return 0


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Time the package's data structures.")
    commands = parser.add_subparsers(dest="command", required=True)

    stacks = commands.add_parser("stacks", help="array and linked stack benchmarks")
    stacks.add_argument("kind", choices=("array", "list"))
    stacks.add_argument("--size", type=int, default=STACK_SIZE)
    stacks.add_argument("--repeats", type=int, default=STACK_REPEATS)
    stacks.add_argument("--step", type=int, default=PROFILE_STEP)
    stacks.add_argument("--seed", type=int, default=None)
    stacks.add_argument("--output-dir", default=".")

    for name, default_output in (("heap-insert", "heap_insert_res.out"),
                                 ("heap-build", "heap_line_res.out")):
        heap = commands.add_parser(name, help="heap construction timings")
        heap.add_argument("--tests", default="../tests/")
        heap.add_argument("--output", default=default_output)
        heap.add_argument("--from", dest="start", type=int, default=HEAP_FROM)
        heap.add_argument("--to", dest="stop", type=int, default=HEAP_TO)
        heap.add_argument("--step", type=int, default=HEAP_STEP)
        heap.add_argument("--children", type=int, default=HEAP_CHILDREN)

    trees = commands.add_parser("trees", help="search tree benchmarks")
    trees.add_argument("kind", choices=sorted(_TREES))
    trees.add_argument("--output-dir", default="result")
    trees.add_argument("--from", dest="start", type=int, default=TREE_MIN_SIZE)
    trees.add_argument("--to", dest="stop", type=int, default=TREE_MAX_SIZE)
    trees.add_argument("--step", type=int, default=TREE_PERIOD)
    trees.add_argument("--repeats", type=int, default=TREE_REPEATS)
    trees.add_argument("--bamboo", type=int, default=BAMBOO_LENGTH)
    trees.add_argument("--seed", type=int, default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    if args.command == "stacks":
        return _stacks_main(args)
    if args.command == "heap-insert":
        return _heap_main(args, heap_insert_timing)
    if args.command == "heap-build":
        return _heap_main(args, heap_build_timing)
    return _trees_main(args)


if __name__ == "__main__":
    raise SystemExit(main())