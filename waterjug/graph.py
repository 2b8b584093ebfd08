"""State graph of the two-jug problem, built in full ahead of any search."""

from __future__ import annotations

from dataclasses import dataclass, field

State = tuple[int, int]


@dataclass
class Vertex:
    """One jug state and the states reachable from it by a single operation."""

    state: State
    neighbors: list[State] = field(default_factory=list)


def _format_vertex(vertex: Vertex) -> str:
    big, little = vertex.state
    targets = "".join(f"({a}, {b}) " for a, b in vertex.neighbors)
    return f"({big}, {little}) -> {targets}"


class Graph:
    """Directed graph of every state (big, small) and the legal moves between them.

    Vertices are kept in row-major order: index = big * (small + 1) + small_amount.
    """

    def __init__(self, large: int, small: int) -> None:
        self.large = large
        self.small = small
        count = (large + 1) * (small + 1)
        self.vertices: list[Vertex] = [
            Vertex(divmod(i, small + 1)) for i in range(max(count, 0))
        ]
        self._generate_all_edges()

    def _index(self, state: State) -> int | None:
        big, little = state
        if not (0 <= big <= self.large and 0 <= little <= self.small):
            return None
        return big * (self.small + 1) + little

    def find_vertex(self, state: State) -> Vertex | None:
        """Return the vertex for ``state``, or None if it is out of bounds."""
        index = self._index(state)
        return None if index is None else self.vertices[index]

    def add_edge(self, source: State, target: State) -> None:
        """Add a directed edge; ignored when ``source`` is not a vertex."""
        vertex = self.find_vertex(source)
        if vertex is not None:
            vertex.neighbors.append(tuple(target))

    def _generate_all_edges(self) -> None:
        large, small = self.large, self.small
        for vertex in self.vertices:
            big, little = state = vertex.state
            if big < large:
                self.add_edge(state, (large, little))
            if little < small:
                self.add_edge(state, (big, small))
            if big > 0:
                self.add_edge(state, (0, little))
            if little > 0:
                self.add_edge(state, (big, 0))
            if big > 0 and little < small:
                pour = min(big, small - little)
                self.add_edge(state, (big - pour, little + pour))
            if little > 0 and big < large:
                pour = min(little, large - big)
                self.add_edge(state, (big + pour, little - pour))
            vertex.neighbors.sort()

    def neighbors(self, state: State) -> list[State]:
        """Return the sorted states reachable from ``state``; empty if out of bounds."""
        vertex = self.find_vertex(state)
        return [] if vertex is None else list(vertex.neighbors)

    def format(self) -> str:
        """Render the adjacency list, one line per vertex."""
        return "".join(f"{_format_vertex(vertex)}\n" for vertex in self.vertices)

    def print_graph(self) -> None:
        """Print the adjacency list to standard output, one line per vertex."""
        for vertex in self.vertices:
            print(_format_vertex(vertex))