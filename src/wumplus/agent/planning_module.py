# src/wumplus/agent/planning_module.py
import logging

from ..utils.actions import Action, Direction, NEIGHBOR_ORDER
from ..utils.constants import START_POS
from .knowledge_base import FactKind

logger = logging.getLogger(__name__)


class ActionSelector:
    """
    Chooses the agent's action for a turn. Priorities, highest first:

    1. grab the gold when standing on it, then head home
    2. drop a destination that turned out to be a wall or unsafe
    3. shoot the wumpus when it is known to be next door
    4. walk to the destination, or to a random unvisited safe cell
    5. walk back to the start
    6. give up
    """
    def __init__(self, knowledge_base, destination, pathfinding_module, rng):
        self.kb = knowledge_base
        self.destination = destination
        self.pathfinder = pathfinding_module
        self.rng = rng

    def choose_action(self, agent):
        pos = agent.agent_pos
        x, y = pos

        if self.kb.has_glitter(x, y):
            self.destination.clear()
            self.destination.set(*START_POS)
            return Action.GRAB

        if self.destination.has_target():
            tx, ty = self.destination.target
            if self.kb.is_wall(tx, ty) or not self.kb.is_safe(tx, ty):
                logger.debug(f"Destination {self.destination.target} is no longer safe, dropping it")
                self.destination.clear()

        if self.kb.has_smell(x, y) and agent.agent_arrows:
            target = self._wumpus_nearby(pos)
            if target is not None:
                return Action.shoot(target)

        heading_somewhere = self.destination.has_target() and not self.destination.at_target(pos)
        if heading_somewhere or self._pick_unvisited_safe_square():
            return self._step_towards_destination(pos)

        if not self.destination.at_start(pos):
            self.destination.set(*START_POS)
            return self._step_towards_destination(pos)

        # Nothing left that can be reached without risk.
        return Action.QUIT

    def _wumpus_nearby(self, pos):
        """Direction of a neighbouring cell known to hold the wumpus, or None."""
        for direction in NEIGHBOR_ORDER:
            nx, ny = direction.step(pos)
            if self.kb.contains(FactKind.WUMPUS, nx, ny):
                return direction
        return None

    def _pick_unvisited_safe_square(self):
        """Makes a random safe, unvisited, non-wall cell the destination. False if there is none."""
        candidates = sorted(self.kb.query_all(FactKind.SAFE))
        self.rng.shuffle(candidates)
        for x, y in candidates:
            if not self.kb.is_visited(x, y) and not self.kb.is_wall(x, y):
                self.destination.set(x, y)
                return True
        return False

    def _step_towards_destination(self, pos):
        direction = self.pathfinder.find_direction(self.kb, pos, self.destination.target)
        if direction is Direction.NO_PATH:
            logger.warning(f"No safe path from {pos} to {self.destination.target}, giving up")
            self.destination.clear()
            return Action.QUIT
        return Action.move(direction)
