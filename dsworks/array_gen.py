"""Generator of reproducible random integer arrays written to test files."""

from __future__ import annotations

import os
import sys
from collections import deque
from pathlib import Path

SEED = 42

_MODULUS = 2147483647
_DISCARD = 310


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    quotient = abs(a) // b
    if a < 0:
        quotient = -quotient
    return quotient, a - quotient * b


class _CRandom:
    """Additive feedback generator compatible with the common C library rand()."""

    def __init__(self, seed: int) -> None:
        seed &= 0xFFFFFFFF
        if seed == 0:
            seed = 1
        word = seed - (1 << 32) if seed >= 1 << 31 else seed
        table = [word]
        for _ in range(30):
            hi, lo = _trunc_divmod(word, 127773)
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += _MODULUS
            table.append(word)
        table.extend(table[:3])
        self._state = deque((value & 0xFFFFFFFF for value in table), maxlen=34)
        for _ in range(_DISCARD):
            self._advance()

    def _advance(self) -> int:
        value = (self._state[-31] + self._state[-3]) & 0xFFFFFFFF
        self._state.append(value)
        return value

    def rand(self) -> int:
        return self._advance() >> 1


def generate_array(count: int, max_value: int, seed: int = SEED) -> list[int]:
    """Return ``count`` pseudo-random integers in ``[0, max_value]``."""
    if max_value < 0:
        raise ValueError("max_value must be non-negative")
    rng = _CRandom(seed)
    return [rng.rand() % (max_value + 1) for _ in range(count)]


def write_test_file(size: int, test_number: int, max_value: int,
                    directory: str | os.PathLike = ".") -> Path:
    """Write ``<size>_<test_number>.in`` holding ``size`` values; return its path."""
    path = Path(directory) / f"{size}_{test_number}.in"
    values = generate_array(size, max_value, SEED)
    with path.open("w", encoding="ascii") as out:
        out.write("".join(f"{value} " for value in values))
        out.write("\n")
    return path


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 3:
        print(f"Usage: {Path(sys.argv[0]).name} <number of elements> <max element value>")
        return 1
    write_test_file(int(args[0]), int(args[1]), int(args[2]))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())