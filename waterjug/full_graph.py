"""Shortest solution by breadth-first search over the fully built state graph."""

from __future__ import annotations

from collections import deque
from collections.abc import Mapping, Sequence
from enum import Enum

from waterjug.graph import Graph, State

START: State = (0, 0)


class Move(Enum):
    """An operation on the jugs, valued by its printed description."""

    FILL_LARGE = "Fill large jug"
    FILL_SMALL = "Fill small jug"
    EMPTY_LARGE = "Empty large jug"
    EMPTY_SMALL = "Empty small jug"
    LARGE_TO_SMALL = "Transfer from large jug to small jug"
    SMALL_TO_LARGE = "Transfer from small jug to large jug"


def describe_move(source: State, target: State, large: int, small: int) -> Move:
    """Name the operation that turns ``source`` into ``target``."""
    if source[0] != target[0] and source[1] == target[1]:
        if target[0] == large:
            return Move.FILL_LARGE
        if target[0] == 0:
            return Move.EMPTY_LARGE
        return Move.SMALL_TO_LARGE
    if source[1] != target[1] and source[0] == target[0]:
        if target[1] == small:
            return Move.FILL_SMALL
        if target[1] == 0:
            return Move.EMPTY_SMALL
        return Move.LARGE_TO_SMALL
    if source[0] > target[0] and source[1] < target[1]:
        return Move.LARGE_TO_SMALL
    return Move.SMALL_TO_LARGE


def reconstruct_path(parents: Mapping[State, State], target: State) -> list[State]:
    """Follow parent links from ``target`` back to (0, 0); return the path from the start."""
    path = [target]
    current = target
    while current != START:
        try:
            current = parents[current]
        except KeyError:
            raise ValueError(f"no parent recorded for state {current}") from None
        path.append(current)
    path.reverse()
    return path


def format_solution(path: Sequence[State] | None, large: int, small: int) -> str:
    """Render a solution path as numbered operations, or report that none exists."""
    if path is None:
        return "No solution.\n"
    lines = [f"Number of operations: {len(path) - 1}", "Operations:"]
    for number, (source, target) in enumerate(zip(path, path[1:]), start=1):
        lines.append(f"{number}. {describe_move(source, target, large, small).value}")
    return "\n".join(lines) + "\n"


def solve_full_graph(large: int, small: int, target: int) -> list[State] | None:
    """Find the shortest path from (0, 0) to (target, 0), or None if unreachable."""
    graph = Graph(large, small)
    goal = (target, 0)
    parents: dict[State, State] = {}
    visited = {START}
    queue = deque([START])
    while queue:
        state = queue.popleft()
        if state == goal:
            return reconstruct_path(parents, state)
        for neighbor in graph.neighbors(state):
            if neighbor not in visited:
                visited.add(neighbor)
                parents[neighbor] = state
                queue.append(neighbor)
    return None