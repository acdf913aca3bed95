# src/wumplus/agent/agent.py
import logging
import random

from .inference_module import InferenceModule
from .pathfinding_module import PathfindingModule
from .planning_module import ActionSelector
from .destination import DestinationManager

from ..utils.constants import MAP_SIZE, START_POS, PERCEPT_BUMP

logger = logging.getLogger(__name__)


class WumplusAgent:
    """
    The self-playing agent. One instance lives for exactly one game and owns
    the knowledge base, the destination and the planners built on top of it.
    """
    def __init__(self, N=MAP_SIZE, rng=None):
        self.N = N
        # Exploration picks destinations at random; pass a seeded Random to replay a game.
        self.rng = rng if rng is not None else random.Random()

        # Functional modules owned by the Agent
        self.inference_module = InferenceModule(N)
        self.destination = DestinationManager(self.inference_module.kb)
        self.pathfinding_module = PathfindingModule(N)
        self.action_selector = ActionSelector(
            self.inference_module.kb,
            self.destination,
            self.pathfinding_module,
            self.rng,
        )

        # Physical state of the agent
        self.agent_pos = START_POS
        self.agent_arrows = 1
        self.agent_has_food, self.agent_has_gold = False, False
        self.steps_taken = 0
        self.score = 0

        self.last_action = None

    @property
    def kb(self):
        return self.inference_module.kb

    def update_state(self, env_state):
        """Synchronizes the agent's internal state with the environment's state."""
        self.agent_pos = env_state["agent_pos"]
        self.agent_arrows = env_state["agent_arrows"]
        self.agent_has_food = env_state["agent_has_food"]
        self.steps_taken = env_state["steps_taken"]
        self.score = env_state["score"]

        if env_state["agent_has_gold"] and not self.agent_has_gold:
            self.inference_module.record_grab(self.agent_pos)
        self.agent_has_gold = env_state["agent_has_gold"]

        if env_state.get("killed_at") is not None:
            self.inference_module.record_kill(env_state["killed_at"])

    def decide_action(self, percepts):
        """The main decision-making loop of the agent."""
        # A bump means the last move hit a wall and we are still where we were.
        if PERCEPT_BUMP in percepts and self.last_action is not None and self.last_action.is_move:
            self.inference_module.record_bump(self.last_action.direction.step(self.agent_pos))

        self.inference_module.update_knowledge(self.agent_pos, percepts)

        self.last_action = self.action_selector.choose_action(self)
        logger.debug(f"At {self.agent_pos} with {sorted(percepts)}: {self.last_action.name}")
        return self.last_action

    def has_won(self):
        return self.agent_has_gold and self.agent_pos == START_POS

    def dump_facts(self):
        """Everything the agent believes, sorted by kind, then row, then column."""
        return self.kb.dump()

    def get_known_map(self):
        return self.inference_module.get_known_map()
