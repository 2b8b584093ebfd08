"""Command line front end for the two-jug solver."""

from __future__ import annotations

import argparse
import sys
import time

from waterjug.full_graph import format_solution, solve_full_graph
from waterjug.graph import State
from waterjug.on_the_fly import solve_on_the_fly

_SOLVERS = {1: solve_full_graph, 2: solve_on_the_fly}


def run(large: int, small: int, target: int, way: int, timed: bool) -> list[State] | None:
    """Solve with the chosen method, print the solution and return its path.

    ``way`` 1 builds the whole graph first, ``way`` 2 generates states on the fly.
    When ``timed`` is true the elapsed time in microseconds is printed as well.
    """
    try:
        solver = _SOLVERS[way]
    except KeyError:
        raise ValueError(f"way must be 1 or 2, not {way}") from None

    start = time.perf_counter_ns()
    path = solver(large, small, target)
    print(format_solution(path, large, small), end="")
    if timed:
        elapsed = (time.perf_counter_ns() - start) // 1000
        print(f"Function took {elapsed} microseconds.")
    return path


def _ask(prompt: str) -> int | None:
    print(prompt, end="", flush=True)
    line = sys.stdin.readline()
    try:
        return int(line.split()[0])
    except (IndexError, ValueError):
        return None


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="waterjug",
        description="Reach W units in the large jug using a large and a small jug.",
    )
    parser.add_argument("large", type=int, nargs="?", help="capacity of the large jug")
    parser.add_argument("small", type=int, nargs="?", help="capacity of the small jug")
    parser.add_argument("target", type=int, nargs="?", help="desired amount in the large jug")
    parser.add_argument("way", type=int, nargs="?", help="1 for full graph, 2 for on-the-fly")
    parser.add_argument("timed", type=int, nargs="?", help="1 to measure time, 0 not to")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Read the problem from arguments or prompts, solve it and return an exit status."""
    args = _parser().parse_args(argv)

    large = args.large if args.large is not None else _ask("Enter L (capacity of large jug): ")
    small = args.small if args.small is not None else _ask("Enter S (capacity of small jug): ")
    target = (
        args.target
        if args.target is not None
        else _ask("Enter W (desired amount in large jug): ")
    )
    if (
        large is None
        or small is None
        or target is None
        or large <= small
        or target > large
        or large < 0
        or small < 0
        or target < 0
    ):
        print("Invalid input.", file=sys.stderr)
        return 1

    way = (
        args.way
        if args.way is not None
        else _ask("Enter Way (1 for full graph, 2 for on-the-fly): ")
    )
    if way not in _SOLVERS:
        print("Invalid way choice. Must be 1 or 2.", file=sys.stderr)
        return 1

    timed = (
        args.timed
        if args.timed is not None
        else _ask("Do you want to measure time? (1 = yes, 0 = no): ")
    )
    if timed not in (0, 1):
        print("Invalid way choice. Must be 0 or 1.", file=sys.stderr)
        return 1

    print(
        f"You selected: L = {large}, S = {small}, W = {target}, "
        f"Way = {way}, Time = {'yes' if timed else 'no'}"
    )
    print("\n")
    run(large, small, target, way, bool(timed))
    return 0


if __name__ == "__main__":
    sys.exit(main())