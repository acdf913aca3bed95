# src/wumplus/agent/knowledge_base.py
from enum import IntEnum

from ..utils.actions import NEIGHBOR_ORDER
from ..utils.constants import (
    MAP_SIZE,
    PERCEPT_BUMP,
    PERCEPT_SMELL,
    PERCEPT_BREEZE,
    PERCEPT_MOO,
    PERCEPT_GLITTER,
    PERCEPT_DEAD,
)


class FactKind(IntEnum):
    """Kinds of sentences the agent can hold about a cell. The value order is the dump order."""
    BUMP = 1
    SMELL = 2
    BREEZE = 4
    MOO = 8
    GLITTER = 16
    DEAD = 32
    WUMPUS = 64
    SUPMUW = 128
    PIT = 256
    SAFE = 512
    VISITED = 1024
    DESTINATION = 2048


# Percepts that are written down at the cell where they were sensed
PERCEPT_FACTS = {
    PERCEPT_BUMP: FactKind.BUMP,
    PERCEPT_SMELL: FactKind.SMELL,
    PERCEPT_BREEZE: FactKind.BREEZE,
    PERCEPT_MOO: FactKind.MOO,
    PERCEPT_GLITTER: FactKind.GLITTER,
    PERCEPT_DEAD: FactKind.DEAD,
}


class KnowledgeBase:
    """
    The agent's memory: a set of (kind, x, y) facts.

    Inserting a fact that is already known, or removing one that is not, does
    nothing. The outer wall of the map is known from the start.
    """
    def __init__(self, N=MAP_SIZE):
        self.N = N
        self._facts: set[tuple[FactKind, int, int]] = set()

        # --- Initial Knowledge ---
        for i in range(self.N):
            self.insert(FactKind.BUMP, i, 0)
            self.insert(FactKind.BUMP, i, self.N - 1)
            self.insert(FactKind.BUMP, 0, i)
            self.insert(FactKind.BUMP, self.N - 1, i)

    def insert(self, kind: FactKind, x: int, y: int):
        # A wall is never safe.
        if kind == FactKind.SAFE and self.contains(FactKind.BUMP, x, y):
            return
        if kind == FactKind.BUMP:
            self._facts.discard((FactKind.SAFE, x, y))
        self._facts.add((kind, x, y))

    def remove(self, kind: FactKind, x: int, y: int):
        self._facts.discard((kind, x, y))

    def contains(self, kind: FactKind, x: int, y: int) -> bool:
        return (kind, x, y) in self._facts

    def query_all(self, kind: FactKind) -> list[tuple[int, int]]:
        """All cells holding a fact of this kind, in no particular order."""
        return [(x, y) for k, x, y in self._facts if k == kind]

    def dump(self) -> list[tuple[FactKind, int, int]]:
        """Every fact, sorted by kind, then row, then column."""
        return sorted(self._facts, key=lambda fact: (fact[0], fact[2], fact[1]))

    def __len__(self):
        return len(self._facts)

    # --- Shorthand predicates ---
    def is_wall(self, x, y):
        return self.contains(FactKind.BUMP, x, y)

    def is_safe(self, x, y):
        return self.contains(FactKind.SAFE, x, y)

    def is_visited(self, x, y):
        return self.contains(FactKind.VISITED, x, y)

    def has_glitter(self, x, y):
        return self.contains(FactKind.GLITTER, x, y)

    def has_smell(self, x, y):
        return self.contains(FactKind.SMELL, x, y)

    def _is_valid_coord(self, x: int, y: int) -> bool:
        return 0 <= x < self.N and 0 <= y < self.N

    def get_neighbors(self, pos: tuple[int, int]) -> list[tuple[int, int]]:
        """In-bounds orthogonal neighbours, west, east, north, south."""
        neighbors = []
        for direction in NEIGHBOR_ORDER:
            nx, ny = direction.step(pos)
            if self._is_valid_coord(nx, ny):
                neighbors.append((nx, ny))
        return neighbors
