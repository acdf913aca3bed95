import random

from wumplus.agent.agent import WumplusAgent
from wumplus.agent.knowledge_base import FactKind
from wumplus.environment.environment import WumplusEnvironment
from wumplus.utils.constants import (
    START_POS,
    PERCEPT_GLITTER,
    GAME_STATE_PLAYING,
)


def make_state(**overrides):
    state = {
        "agent_pos": START_POS,
        "agent_arrows": 1,
        "agent_has_food": False,
        "agent_has_gold": False,
        "score": 0,
        "steps_taken": 0,
        "game_state": GAME_STATE_PLAYING,
        "killed_at": None,
    }
    state.update(overrides)
    return state


def test_initial_state():
    agent = WumplusAgent(6)
    assert agent.agent_pos == START_POS
    assert agent.agent_arrows == 1
    assert not agent.agent_has_gold
    assert agent.kb.is_wall(5, 5)
    assert agent.kb is agent.inference_module.kb
    assert agent.destination.kb is agent.kb


def test_update_state_copies_environment():
    agent = WumplusAgent(6)
    agent.update_state(make_state(agent_pos=(2, 3), agent_arrows=0, score=-12, steps_taken=2))
    assert agent.agent_pos == (2, 3)
    assert agent.agent_arrows == 0
    assert agent.score == -12
    assert agent.steps_taken == 2


def test_grab_forgets_glitter():
    agent = WumplusAgent(6)
    agent.agent_pos = (2, 2)
    agent.decide_action({PERCEPT_GLITTER})
    assert agent.kb.has_glitter(2, 2)
    agent.update_state(make_state(agent_pos=(2, 2), agent_has_gold=True))
    assert not agent.kb.has_glitter(2, 2)
    assert agent.agent_has_gold


def test_kill_forgets_wumpus():
    agent = WumplusAgent(6)
    agent.kb.insert(FactKind.WUMPUS, 1, 2)
    agent.kb.insert(FactKind.SMELL, 1, 1)
    agent.update_state(make_state(killed_at=(1, 2)))
    assert not agent.kb.contains(FactKind.WUMPUS, 1, 2)
    assert not agent.kb.has_smell(1, 1)
    # seeing the same state again changes nothing
    agent.update_state(make_state(killed_at=(1, 2)))
    assert not agent.kb.contains(FactKind.WUMPUS, 1, 2)


def test_has_won():
    agent = WumplusAgent(6)
    assert not agent.has_won()
    agent.agent_has_gold = True
    assert agent.has_won()
    agent.agent_pos = (2, 1)
    assert not agent.has_won()


def test_dump_facts_sorted():
    agent = WumplusAgent(5)
    agent.decide_action(set())
    facts = agent.dump_facts()
    assert facts == sorted(facts, key=lambda fact: (fact[0], fact[2], fact[1]))
    assert (FactKind.VISITED, 1, 1) in facts
    assert (FactKind.DESTINATION, 0, 0) in facts


def test_known_map_shape():
    agent = WumplusAgent(5)
    known = agent.get_known_map()
    assert len(known) == 5 and all(len(column) == 5 for column in known)


def test_shot_feedback_through_environment():
    env = WumplusEnvironment.from_config({"N": 5, "wumpus_position": [1, 2]})
    agent = WumplusAgent(5, rng=random.Random(0))
    agent.kb.insert(FactKind.WUMPUS, 1, 2)
    agent.update_state(env.get_current_state())

    action = agent.decide_action(env.get_percepts())
    env.apply_action(action)
    agent.update_state(env.get_current_state())

    assert env.killed_at == (1, 2)
    assert agent.agent_arrows == 0
    assert not agent.kb.contains(FactKind.WUMPUS, 1, 2)
    assert not agent.kb.has_smell(1, 1)
