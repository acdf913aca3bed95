# src/wumplus/agent/inference_module.py
import logging

from ..utils.constants import (
    MAP_SIZE,
    PERCEPT_SMELL,
    PERCEPT_BREEZE,
    PERCEPT_MOO,
    PERCEPT_GLITTER,
    PERCEPT_DEAD,
)
from .knowledge_base import KnowledgeBase, FactKind, PERCEPT_FACTS
from .rules import Rule, CornerRule

logger = logging.getLogger(__name__)


class InferenceEngine:
    """
    Runs the corner rules once around the agent's cell and writes whatever
    they conclude back into the knowledge base.
    """
    def __init__(self, knowledge_base: KnowledgeBase):
        self.kb = knowledge_base

        self.corner_rules: list[Rule] = [
            CornerRule(FactKind.SMELL, FactKind.WUMPUS),
            CornerRule(FactKind.BREEZE, FactKind.PIT),
            CornerRule(FactKind.MOO, FactKind.SUPMUW),
        ]

    def run_inference_cycle(self, current_pos):
        """Applies every corner rule at `current_pos`. Returns the facts that were new."""
        learned = []
        for rule in self.corner_rules:
            for fact, (x, y) in rule.apply(self.kb, current_pos):
                if self.kb.contains(fact, x, y):
                    continue
                self.kb.insert(fact, x, y)
                learned.append((fact, x, y))
                logger.debug(f"{rule} at {current_pos}: inferred {fact.name} at {(x, y)}")
        return learned


class InferenceModule:
    """
    Facade over the knowledge base and the inference engine. Everything the
    agent learns, from its senses or from the world's feedback, goes through here.
    """
    def __init__(self, N=MAP_SIZE):
        self.kb = KnowledgeBase(N)
        self.engine = InferenceEngine(self.kb)

    def update_knowledge(self, current_pos, percepts):
        """Records this turn's percepts at `current_pos` and draws conclusions from them."""
        if PERCEPT_DEAD in percepts:
            logger.info(f"Agent died at {current_pos}, nothing recorded")
            return

        x, y = current_pos
        self.kb.insert(FactKind.VISITED, x, y)
        self.kb.insert(FactKind.SAFE, x, y)

        for percept in (PERCEPT_SMELL, PERCEPT_BREEZE, PERCEPT_MOO, PERCEPT_GLITTER):
            if percept in percepts:
                self.kb.insert(PERCEPT_FACTS[percept], x, y)

        # No smell and no breeze: nothing deadly next door.
        # A moo says nothing here, the supmuw alone does no harm.
        if PERCEPT_SMELL not in percepts and PERCEPT_BREEZE not in percepts:
            for nx, ny in self.kb.get_neighbors(current_pos):
                self.kb.insert(FactKind.SAFE, nx, ny)

        self.engine.run_inference_cycle(current_pos)

    def record_bump(self, wall_pos):
        """The agent walked into `wall_pos` and bounced off."""
        logger.debug(f"Wall found at {wall_pos}")
        self.kb.insert(FactKind.BUMP, *wall_pos)

    def record_kill(self, beast_pos):
        """An arrow killed whatever lived at `beast_pos`, so its smell is gone too."""
        x, y = beast_pos
        logger.info(f"Beast at {beast_pos} slain")
        self.kb.remove(FactKind.WUMPUS, x, y)
        self.kb.remove(FactKind.SUPMUW, x, y)
        for nx, ny in [(x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)]:
            self.kb.remove(FactKind.SMELL, nx, ny)

    def record_grab(self, pos):
        """The gold at `pos` was picked up."""
        self.kb.remove(FactKind.GLITTER, *pos)

    def get_known_map(self):
        """Per cell, the set of fact kinds the agent holds about it (used for display)."""
        known_map = [[set() for _ in range(self.kb.N)] for _ in range(self.kb.N)]
        for kind, x, y in self.kb.dump():
            if self.kb._is_valid_coord(x, y):
                known_map[x][y].add(kind)
        return known_map
