import pytest

from wumplus.agent.inference_module import InferenceModule
from wumplus.agent.knowledge_base import FactKind
from wumplus.utils.constants import (
    PERCEPT_SMELL,
    PERCEPT_BREEZE,
    PERCEPT_MOO,
    PERCEPT_GLITTER,
    PERCEPT_DEAD,
)


@pytest.fixture
def module():
    return InferenceModule(5)


def test_quiet_cell_marks_neighbours_safe(module):
    module.update_knowledge((2, 2), set())
    kb = module.kb
    assert kb.is_visited(2, 2)
    assert kb.is_safe(2, 2)
    for cell in [(1, 2), (3, 2), (2, 1), (2, 3)]:
        assert kb.is_safe(*cell)
        assert not kb.is_visited(*cell)


def test_start_cell_does_not_mark_wall_safe(module):
    module.update_knowledge((1, 1), set())
    kb = module.kb
    assert kb.is_safe(2, 1)
    assert kb.is_safe(1, 2)
    assert not kb.is_safe(0, 1)
    assert not kb.is_safe(1, 0)


@pytest.mark.parametrize("percept", [PERCEPT_SMELL, PERCEPT_BREEZE])
def test_danger_percept_blocks_expansion(module, percept):
    module.update_knowledge((2, 2), {percept})
    kb = module.kb
    assert kb.is_safe(2, 2)
    for cell in [(1, 2), (3, 2), (2, 1), (2, 3)]:
        assert not kb.is_safe(*cell)


def test_moo_alone_still_expands(module):
    module.update_knowledge((2, 2), {PERCEPT_MOO})
    assert module.kb.contains(FactKind.MOO, 2, 2)
    assert module.kb.is_safe(3, 2)


def test_percepts_recorded_at_cell(module):
    module.update_knowledge((2, 2), {PERCEPT_BREEZE, PERCEPT_GLITTER})
    assert module.kb.contains(FactKind.BREEZE, 2, 2)
    assert module.kb.has_glitter(2, 2)
    assert not module.kb.has_smell(2, 2)


def test_dead_records_nothing(module):
    before = module.kb.dump()
    module.update_knowledge((2, 2), {PERCEPT_DEAD, PERCEPT_SMELL})
    assert module.kb.dump() == before
    assert not module.kb.is_visited(2, 2)


def test_corner_inference_through_update(module):
    kb = module.kb
    kb.insert(FactKind.SMELL, 3, 3)
    kb.insert(FactKind.SAFE, 3, 2)
    module.update_knowledge((2, 2), {PERCEPT_SMELL})
    assert kb.contains(FactKind.WUMPUS, 2, 3)
    assert not kb.contains(FactKind.WUMPUS, 3, 2)


def test_engine_reports_only_new_facts(module):
    kb = module.kb
    kb.insert(FactKind.BREEZE, 2, 2)
    kb.insert(FactKind.BREEZE, 3, 3)
    kb.insert(FactKind.SAFE, 3, 2)
    assert module.engine.run_inference_cycle((2, 2)) == [(FactKind.PIT, 2, 3)]
    assert module.engine.run_inference_cycle((2, 2)) == []


def test_record_kill_clears_beast_and_smell(module):
    kb = module.kb
    kb.insert(FactKind.WUMPUS, 2, 3)
    kb.insert(FactKind.SMELL, 2, 2)
    kb.insert(FactKind.SMELL, 3, 3)
    kb.insert(FactKind.SMELL, 1, 1)
    module.record_kill((2, 3))
    assert not kb.contains(FactKind.WUMPUS, 2, 3)
    assert not kb.has_smell(2, 2)
    assert not kb.has_smell(3, 3)
    # not next to the beast
    assert kb.has_smell(1, 1)


def test_record_bump_makes_wall(module):
    module.update_knowledge((1, 1), set())
    assert module.kb.is_safe(2, 1)
    module.record_bump((2, 1))
    assert module.kb.is_wall(2, 1)
    assert not module.kb.is_safe(2, 1)


def test_record_grab_clears_glitter(module):
    module.update_knowledge((2, 2), {PERCEPT_GLITTER})
    module.record_grab((2, 2))
    assert not module.kb.has_glitter(2, 2)


def test_known_map(module):
    module.update_knowledge((1, 1), set())
    known = module.get_known_map()
    assert len(known) == 5
    assert known[1][1] == {FactKind.SAFE, FactKind.VISITED}
    assert known[0][0] == {FactKind.BUMP}
    assert known[3][3] == set()
