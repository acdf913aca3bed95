# src/wumplus/agent/destination.py
import logging

from ..utils.constants import DESTINATION_ANCHOR, START_POS
from .knowledge_base import KnowledgeBase, FactKind

logger = logging.getLogger(__name__)


class DestinationManager:
    """
    Holds the agent's single navigation goal.

    The knowledge base only keeps a marker that a destination exists, anchored
    at a fixed cell; the real coordinates are kept here. Both are always set
    and cleared together.
    """
    def __init__(self, knowledge_base: KnowledgeBase):
        self.kb = knowledge_base
        self.target = None

    def set(self, x, y):
        self.clear()
        self.kb.insert(FactKind.DESTINATION, *DESTINATION_ANCHOR)
        self.target = (x, y)
        logger.debug(f"Destination set to {self.target}")

    def clear(self):
        self.kb.remove(FactKind.DESTINATION, *DESTINATION_ANCHOR)
        self.target = None

    def has_target(self) -> bool:
        return self.kb.contains(FactKind.DESTINATION, *DESTINATION_ANCHOR)

    def at_target(self, pos) -> bool:
        return self.has_target() and pos == self.target

    def at_start(self, pos) -> bool:
        return pos == START_POS
