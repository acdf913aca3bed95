from wumplus.agent.knowledge_base import KnowledgeBase, FactKind


def test_outer_wall_known_from_start():
    kb = KnowledgeBase(5)
    for i in range(5):
        assert kb.is_wall(i, 0)
        assert kb.is_wall(i, 4)
        assert kb.is_wall(0, i)
        assert kb.is_wall(4, i)
    assert not kb.is_wall(1, 1)
    assert not kb.is_wall(2, 3)
    # 16 border cells, corners counted once
    assert len(kb) == 16


def test_insert_is_idempotent(kb):
    kb.insert(FactKind.SMELL, 2, 2)
    size = len(kb)
    kb.insert(FactKind.SMELL, 2, 2)
    assert len(kb) == size
    assert kb.contains(FactKind.SMELL, 2, 2)


def test_remove_missing_fact_is_noop(kb):
    size = len(kb)
    kb.remove(FactKind.PIT, 3, 3)
    assert len(kb) == size

    kb.insert(FactKind.PIT, 3, 3)
    kb.remove(FactKind.PIT, 3, 3)
    assert not kb.contains(FactKind.PIT, 3, 3)


def test_wall_is_never_safe(kb):
    kb.insert(FactKind.SAFE, 0, 2)
    assert not kb.is_safe(0, 2)

    kb.insert(FactKind.SAFE, 2, 2)
    assert kb.is_safe(2, 2)
    kb.insert(FactKind.BUMP, 2, 2)
    assert kb.is_wall(2, 2)
    assert not kb.is_safe(2, 2)


def test_query_all(kb):
    kb.insert(FactKind.BREEZE, 1, 2)
    kb.insert(FactKind.BREEZE, 3, 1)
    kb.insert(FactKind.SMELL, 2, 2)
    assert sorted(kb.query_all(FactKind.BREEZE)) == [(1, 2), (3, 1)]
    assert kb.query_all(FactKind.GLITTER) == []


def test_dump_sorted_by_kind_then_row_then_column():
    kb = KnowledgeBase(4)
    kb.insert(FactKind.VISITED, 2, 1)
    kb.insert(FactKind.SAFE, 2, 1)
    kb.insert(FactKind.SAFE, 1, 2)
    kb.insert(FactKind.SAFE, 1, 1)

    facts = kb.dump()
    kinds = [kind for kind, _, _ in facts]
    assert kinds == sorted(kinds)

    bumps = [(x, y) for kind, x, y in facts if kind == FactKind.BUMP]
    assert bumps[:4] == [(0, 0), (1, 0), (2, 0), (3, 0)]
    assert bumps[4:6] == [(0, 1), (3, 1)]

    safes = [(x, y) for kind, x, y in facts if kind == FactKind.SAFE]
    assert safes == [(1, 1), (2, 1), (1, 2)]
    assert facts[-1] == (FactKind.VISITED, 2, 1)


def test_get_neighbors_order_and_bounds(kb):
    assert kb.get_neighbors((2, 2)) == [(1, 2), (3, 2), (2, 1), (2, 3)]
    assert kb.get_neighbors((0, 0)) == [(1, 0), (0, 1)]
