"""Command interpreter for a stack driven by push/pop/back/size/clear/exit."""

from __future__ import annotations

import argparse
import re
from collections import deque

from dsworks.stacks import ArrayStack, StackEmptyError

INITIAL_CAPACITY = 100
_INT_RE = re.compile(r"[+-]?\d+")


def run(text: str) -> str:
    """Execute the commands in ``text`` and return the produced output."""
    tokens = deque(text.split())
    stack = ArrayStack(INITIAL_CAPACITY)
    value = 0
    lines: list[str] = []

    while tokens:
        operation = tokens.popleft()
        if operation == "push":
            if tokens and _INT_RE.fullmatch(tokens[0]):
                value = int(tokens.popleft())
            stack.push(value)
            lines.append("ok")
        elif operation == "pop":
            try:
                lines.append(str(stack.pop()))
            except StackEmptyError:
                pass
        elif operation == "back":
            try:
                lines.append(str(stack.top()))
            except StackEmptyError:
                lines.append("error")
        elif operation == "size":
            lines.append(str(len(stack)))
        elif operation == "clear":
            stack = ArrayStack(stack.capacity)
            lines.append("ok")
        elif operation == "exit":
            lines.append("bye")
            break

    return "".join(f"{line}\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run stack commands from a file.")
    parser.add_argument("input", nargs="?", default="input.txt")
    parser.add_argument("output", nargs="?", default="output.txt")
    args = parser.parse_args(argv)

    with open(args.input, encoding="utf-8") as source:
        result = run(source.read())
    with open(args.output, "w", encoding="utf-8") as target:
        target.write(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())