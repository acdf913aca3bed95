# src/wumplus/agent/rules.py

from abc import ABC, abstractmethod
from .knowledge_base import KnowledgeBase, FactKind

# Corners are checked north-west, north-east, south-west, south-east.
DIAGONALS = [(-1, -1), (1, -1), (-1, 1), (1, 1)]


class Rule(ABC):
    @abstractmethod
    def apply(self, kb: KnowledgeBase, pos: tuple[int, int]) -> list[tuple[FactKind, tuple[int, int]]]:
        pass


class CornerRule(Rule):
    """
    Locates a hazard from two diagonal cells that share the same clue.

    If `pos` and the diagonal cell both carry the clue (Smell, Breeze or Moo),
    the source of the clue must sit on one of the two cells touching both of
    them. When exactly one of those two cells is known to be safe, the other
    one holds the hazard. Both safe, or neither, proves nothing.
    """
    def __init__(self, clue: FactKind, hazard: FactKind):
        self.clue = clue
        self.hazard = hazard

    def apply(self, kb: KnowledgeBase, pos: tuple[int, int]) -> list[tuple[FactKind, tuple[int, int]]]:
        x, y = pos
        if not kb.contains(self.clue, x, y):
            return []

        new_facts = []
        for dx, dy in DIAGONALS:
            if not kb.contains(self.clue, x + dx, y + dy) or kb.is_wall(x + dx, y + dy):
                continue

            side_a = (x + dx, y)  # same row as pos
            side_b = (x, y + dy)  # same column as pos
            a_safe = kb.is_safe(*side_a)
            b_safe = kb.is_safe(*side_b)
            if a_safe == b_safe:
                continue

            new_facts.append((self.hazard, side_b if a_safe else side_a))
        return new_facts

    def __repr__(self):
        return f"CornerRule({self.clue.name} -> {self.hazard.name})"
