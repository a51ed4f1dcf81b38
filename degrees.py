#!/usr/bin/env python3
"""
Degrees of Separation

Prints the number of hops on the shortest chain of relations between two
names, using a flat relationship file with one "nameA nameB" pair per line.

Output (a single line on stdout):
- 0 if both names are identical
- -1 if either name is unknown or no chain exists
- otherwise the hop count of the shortest chain

Algorithm:
- Every valid line adds both names as vertices and connects them in both
  directions, so the graph is undirected.
- A breadth-first search from the first name returns as soon as it discovers
  the second one. BFS visits vertices in non-decreasing distance order, so
  the first discovery is always via a shortest chain.

Dependencies:
- Standard Python 3 library

Usage:
    degrees-of-separation <nameA> <nameB>

Relations are always read from input.txt in the working directory.
"""

import os
import sys
from collections import deque
from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, Iterator, List, Optional, Tuple

# ----------------------------- Configuration Constants -----------------------------

DEFAULT_INPUT_FILE = "input.txt"

USAGE = "Usage: degrees-of-separation <nameA> <nameB>"

RELATION_SEPARATOR = " "
NO_RELATION = -1

# -----------------------------------------------------------------------------------


class DegreesError(Exception):
    """Base class for errors that stop a degrees-of-separation run."""


class RelationSourceError(DegreesError):
    """Raised when the relation file cannot be read."""


class RelationSourceNotFound(RelationSourceError):
    """Raised when the relation file does not exist."""

    def __init__(self, source: str) -> None:
        super().__init__(f"The file '{source}' was not found.")
        self.source = source


# -----------------------------------------------------------------------------------
# Relationship graph (adjacency list)
# -----------------------------------------------------------------------------------


class Graph:
    """
    Directed adjacency-list graph.

    A vertex exists as soon as it is added, even with no neighbors. Edges are
    only ever directed; callers model an undirected relation by connecting
    both ways. Invalid requests are reported through the return value rather
    than raised.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[Hashable, List[Hashable]] = {}

    def add_vertex(self, vertex: Hashable) -> bool:
        """Insert ``vertex`` if absent. Returns True only when it was new."""
        if vertex in self._adjacency:
            return False
        self._adjacency[vertex] = []
        return True

    def connect(self, source: Hashable, target: Hashable) -> bool:
        """
        Add the directed edge ``source -> target``.

        Returns False without changing anything when either endpoint is not
        a vertex or the edge already exists.
        """
        if source not in self._adjacency or target not in self._adjacency:
            return False
        successors = self._adjacency[source]
        if target in successors:
            return False
        successors.append(target)
        return True

    def contains(self, vertex: Hashable) -> bool:
        return vertex in self._adjacency

    def neighbors(self, vertex: Hashable) -> List[Hashable]:
        """Outgoing neighbors in insertion order; empty for unknown vertices."""
        return list(self._adjacency.get(vertex, ()))

    def edge_count(self) -> int:
        return sum(len(successors) for successors in self._adjacency.values())

    def __contains__(self, vertex: Hashable) -> bool:
        return self.contains(vertex)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._adjacency)


# -----------------------------------------------------------------------------------
# Breadth-first search
# -----------------------------------------------------------------------------------


def degree(graph: Graph, start: Hashable, target: Hashable) -> int:
    """
    Compute the degree of separation between ``start`` and ``target``.

    Args:
        graph: Relationship graph to search
        start: Name the search starts from
        target: Name being looked for

    Returns:
        0 when the names are identical (even if neither is in the graph),
        -1 when either name is unknown or unreachable, otherwise the number
        of edges on a shortest path.
    """
    if start == target:
        return 0
    if not graph.contains(start) or not graph.contains(target):
        return NO_RELATION

    # Doubles as the visited set
    distances: Dict[Hashable, int] = {start: 0}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        next_distance = distances[current] + 1

        for successor in graph.neighbors(current):
            if successor in distances:
                continue
            distances[successor] = next_distance
            if successor == target:
                return next_distance
            queue.append(successor)

    return NO_RELATION


def shortest_path(graph: Graph, start: Hashable, target: Hashable) -> Optional[List[Hashable]]:
    """
    Return one shortest chain from ``start`` to ``target`` (both inclusive).

    Uses the same guards as degree(): identical names give ``[start]``,
    unknown or unreachable names give None.
    """
    if start == target:
        return [start]
    if not graph.contains(start) or not graph.contains(target):
        return None

    parents: Dict[Hashable, Optional[Hashable]] = {start: None}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        for successor in graph.neighbors(current):
            if successor in parents:
                continue
            parents[successor] = current
            if successor == target:
                return reconstruct_path(parents, target)
            queue.append(successor)

    return None


def reconstruct_path(parents: Dict[Hashable, Optional[Hashable]], target: Hashable) -> List[Hashable]:
    """Walk parent pointers back from ``target`` to the search root."""
    path = [target]
    while parents.get(path[-1]) is not None:
        path.append(parents[path[-1]])
    path.reverse()
    return path


# -----------------------------------------------------------------------------------
# Relation loading
# -----------------------------------------------------------------------------------


@dataclass
class LoadStats:
    lines: int = 0
    relations: int = 0
    skipped: int = 0


def parse_relation(line: str) -> Optional[Tuple[str, str]]:
    """Split a relation line into its two names, or None if it is malformed."""
    names = line.rstrip("\r\n").split(RELATION_SEPARATOR)
    if len(names) != 2:
        return None
    return names[0], names[1]


def build_graph(lines: Iterable[str]) -> Tuple[Graph, LoadStats]:
    """
    Build an undirected relationship graph from relation lines.

    Malformed lines are counted in the returned stats and otherwise ignored.
    """
    graph = Graph()
    stats = LoadStats()

    for line in lines:
        stats.lines += 1
        relation = parse_relation(line)
        if relation is None:
            stats.skipped += 1
            continue

        u, v = relation
        graph.add_vertex(u)
        graph.add_vertex(v)
        graph.connect(u, v)
        graph.connect(v, u)
        stats.relations += 1

    return graph, stats


def read_relation_lines(source: str) -> List[str]:
    """
    Read every line of a local relation file.

    Bytes that are not valid UTF-8 are replaced rather than rejected, so one
    badly encoded name only spoils its own line.

    Raises:
        RelationSourceNotFound: the file does not exist
        RelationSourceError: the file exists but cannot be read
    """
    if not os.path.isfile(source):
        raise RelationSourceNotFound(source)
    try:
        with open(source, "r", encoding="utf-8", errors="replace") as fh:
            return fh.readlines()
    except OSError as e:
        raise RelationSourceError(f"Could not read '{source}': {e}") from e


# -----------------------------------------------------------------------------------
# CLI orchestration
# -----------------------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> int:
    """
    Program entry point: load the relation file, search, print the result.

    Returns the process exit code (0 on success, including the usage case).
    """
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print(USAGE)
        return 0

    person_a, person_b = args[0], args[1]

    try:
        graph, _ = build_graph(read_relation_lines(DEFAULT_INPUT_FILE))
        print(degree(graph, person_a, person_b))
        return 0

    except RelationSourceError as e:
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
