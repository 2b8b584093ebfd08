"""Shortest solution by breadth-first search, generating states as they are reached."""

from __future__ import annotations

from collections import deque
from collections.abc import MutableSet

from waterjug.full_graph import START, reconstruct_path
from waterjug.graph import State


def next_states(
    state: State, large: int, small: int, visited: MutableSet[State]
) -> list[State]:
    """Return the unseen states one operation away from ``state``, sorted.

    Every state returned is added to ``visited`` as soon as it is generated.
    """
    big, little = state
    candidates: list[State] = []
    if big < large:
        candidates.append((large, little))
    if little < small:
        candidates.append((big, small))
    if big > 0:
        candidates.append((0, little))
    if little > 0:
        candidates.append((big, 0))
    if big > 0 and little < small:
        pour = min(big, small - little)
        candidates.append((big - pour, little + pour))
    if little > 0 and big < large:
        pour = min(little, large - big)
        candidates.append((big + pour, little - pour))

    fresh: list[State] = []
    for candidate in candidates:
        if candidate not in visited:
            visited.add(candidate)
            fresh.append(candidate)
    fresh.sort()
    return fresh


def solve_on_the_fly(large: int, small: int, target: int) -> list[State] | None:
    """Find the shortest path from (0, 0) to (target, 0), or None if unreachable."""
    goal = (target, 0)
    parents: dict[State, State] = {}
    visited: set[State] = {START}
    queue = deque([START])
    while queue:
        state = queue.popleft()
        if state == goal:
            return reconstruct_path(parents, state)
        for neighbor in next_states(state, large, small, visited):
            parents[neighbor] = state
            queue.append(neighbor)
    return None