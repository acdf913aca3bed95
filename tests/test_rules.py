import pytest

from wumplus.agent.knowledge_base import FactKind
from wumplus.agent.rules import CornerRule

from conftest import mark_safe


@pytest.fixture
def smell_rule():
    return CornerRule(FactKind.SMELL, FactKind.WUMPUS)


def test_one_safe_side_locates_hazard(kb, smell_rule):
    kb.insert(FactKind.SMELL, 2, 2)
    kb.insert(FactKind.SMELL, 3, 3)
    mark_safe(kb, (3, 2))
    assert smell_rule.apply(kb, (2, 2)) == [(FactKind.WUMPUS, (2, 3))]


def test_other_side_safe(kb, smell_rule):
    kb.insert(FactKind.SMELL, 2, 2)
    kb.insert(FactKind.SMELL, 3, 3)
    mark_safe(kb, (2, 3))
    assert smell_rule.apply(kb, (2, 2)) == [(FactKind.WUMPUS, (3, 2))]


def test_both_sides_safe_proves_nothing(kb, smell_rule):
    kb.insert(FactKind.SMELL, 2, 2)
    kb.insert(FactKind.SMELL, 3, 3)
    mark_safe(kb, (3, 2), (2, 3))
    assert smell_rule.apply(kb, (2, 2)) == []


def test_neither_side_safe_proves_nothing(kb, smell_rule):
    kb.insert(FactKind.SMELL, 2, 2)
    kb.insert(FactKind.SMELL, 3, 3)
    assert smell_rule.apply(kb, (2, 2)) == []


def test_no_clue_at_pos(kb, smell_rule):
    kb.insert(FactKind.SMELL, 3, 3)
    mark_safe(kb, (3, 2))
    assert smell_rule.apply(kb, (2, 2)) == []


def test_other_clue_kind_is_ignored(kb, smell_rule):
    kb.insert(FactKind.BREEZE, 2, 2)
    kb.insert(FactKind.BREEZE, 3, 3)
    mark_safe(kb, (3, 2))
    assert smell_rule.apply(kb, (2, 2)) == []


def test_north_west_corner(kb):
    rule = CornerRule(FactKind.BREEZE, FactKind.PIT)
    kb.insert(FactKind.BREEZE, 3, 3)
    kb.insert(FactKind.BREEZE, 2, 2)
    mark_safe(kb, (2, 3))
    # side in the same row is (2, 3), same column is (3, 2)
    assert rule.apply(kb, (3, 3)) == [(FactKind.PIT, (3, 2))]


def test_repr(smell_rule):
    assert repr(smell_rule) == "CornerRule(SMELL -> WUMPUS)"
