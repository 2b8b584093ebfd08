# waterjug

Solves the two-jug puzzle. You have a large jug with capacity `L` and a small jug
with capacity `S`, where `L` is greater than `S`. Both jugs start empty. The goal
is to end with exactly `W` units in the large jug and nothing in the small jug,
using the fewest operations.

Six operations are allowed:

- fill the large jug
- fill the small jug
- empty the large jug
- empty the small jug
- pour from the large jug into the small jug
- pour from the small jug into the large jug

The search is breadth-first, from `(0, 0)` to `(W, 0)`. Neighbouring states are
visited in lexicographic order. There are two strategies, and both find a
shortest path:

- **Way 1** (`waterjug.full_graph`): builds the full state graph first, with all
  `(L + 1) * (S + 1)` states and their moves, and then searches it.
- **Way 2** (`waterjug.on_the_fly`): creates neighbouring states while the
  search runs, and skips states it has already seen.

## Installation

```
pip install .
```

## Command line

```
waterjug [L S W WAY TIME]
```

The five values can be given as arguments:

- `L`: the large capacity
- `S`: the small capacity
- `W`: the target amount
- `WAY`: `1` for the full graph, `2` for on-the-fly
- `TIME`: `1` to time the run, `0` not to

The command prompts for any value that is not given. For example:

```
$ waterjug 3 2 1 1 0
You selected: L = 3, S = 2, W = 1, Way = 1, Time = no


Number of operations: 3
Operations:
1. Fill large jug
2. Transfer from large jug to small jug
3. Empty small jug
```

If the target cannot be reached, the command prints `No solution.` instead.

With `TIME` set to `1`, the command also prints `Function took N microseconds.`

The command rejects the input, prints a message to standard error, and exits
with status 1 in any of these cases:

- a capacity or target is negative
- `L` is not greater than `S`
- `W` is greater than `L`
- a prompted value is not an integer
- `WAY` is not 1 or 2
- `TIME` is not 0 or 1

## Library use

```python
from waterjug.full_graph import format_solution, solve_full_graph
from waterjug.on_the_fly import solve_on_the_fly
from waterjug.graph import Graph

path = solve_full_graph(3, 2, 1)   # [(0, 0), (3, 0), (1, 2), (1, 0)], or None
solve_on_the_fly(3, 2, 1)          # same result, states generated during the search
print(format_solution(path, 3, 2), end="")

graph = Graph(2, 1)
graph.neighbors((0, 0))            # [(0, 1), (2, 0)]
graph.find_vertex((5, 5))          # None: outside the state space
print(graph.format(), end="")      # adjacency list of every state
graph.print_graph()                # the same, written to standard output
```

Other public functions:

- `waterjug.full_graph.describe_move(source, target, large, small)` names the
  step between two states. It returns a `Move` enum member whose value is the
  printed description.
- `waterjug.full_graph.reconstruct_path(parents, target)` follows parent links
  back to `(0, 0)`. It raises `ValueError` if a link is missing.
- `waterjug.on_the_fly.next_states(state, large, small, visited)` returns the
  unseen neighbours of a state in sorted order. It adds each of them to
  `visited`.
- `waterjug.cli.run(large, small, target, way, timed)` runs one strategy. It
  prints the result as the command does and returns the path. It raises
  `ValueError` if `way` is not 1 or 2.

## Tests

```
pip install .[test]
pytest
```