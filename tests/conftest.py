import random

import pytest

from wumplus.agent.knowledge_base import KnowledgeBase, FactKind


@pytest.fixture
def kb():
    return KnowledgeBase(5)


@pytest.fixture
def rng():
    return random.Random(1234)


def mark_safe(kb, *cells):
    for x, y in cells:
        kb.insert(FactKind.SAFE, x, y)


def open_room_config(N=5, **placements):
    """A testcase dictionary for an N x N map with nothing but the outer wall."""
    config = {
        "N": N,
        "walls": [],
        "pit_positions": [],
        "wumpus_position": None,
        "gold_position": None,
        "supmuw_position": None,
    }
    config.update(placements)
    return config
