import io

from wumplus.agent.knowledge_base import FactKind
from wumplus.environment.environment import WumplusEnvironment
from wumplus.utils.display import WumplusDisplay
from wumplus.utils.constants import PERCEPT_SMELL, PERCEPT_GLITTER

from conftest import open_room_config


def make_display():
    return WumplusDisplay(5, stream=io.StringIO())


def test_percept_line():
    display = make_display()
    display.print_percepts({PERCEPT_GLITTER, PERCEPT_SMELL})
    assert display.stream.getvalue() == "Percepts: [None,Smell,None,None,Glitter,None]\n"


def test_score_line():
    display = make_display()
    display.print_score(-12, 7)
    assert display.stream.getvalue() == "Score:   -12\tSteps Taken:   7/500\n"


def test_map_rows_top_down():
    env = WumplusEnvironment.from_config(open_room_config(5, gold_position=[3, 1]))
    display = make_display()
    display.print_map(env.get_true_map(), (1, 1))
    rows = display.stream.getvalue().splitlines()
    assert rows[0] == "#####"
    assert rows[1] == "#@.G#"
    assert rows[2] == "#...#"


def test_knowledge_view():
    known = [[set() for _ in range(5)] for _ in range(5)]
    known[0][1].add(FactKind.BUMP)
    known[2][1].add(FactKind.SAFE)
    known[3][1].add(FactKind.PIT)
    display = make_display()
    display.print_knowledge(known, (1, 1), destination=(1, 2))
    rows = display.stream.getvalue().splitlines()
    assert rows[1] == "#@+P?"
    assert rows[2][1] == "*"


def test_kb_dump_format():
    display = make_display()
    out = io.StringIO()
    display.print_kb_dump([(FactKind.BUMP, 0, 0), (FactKind.VISITED, 1, 1)], stream=out)
    assert out.getvalue().splitlines() == [
        "Knowledge Base Dump",
        "   1:    BUMP: ( 0,  0)",
        "   2: VISITED: ( 1,  1)",
    ]


def test_empty_message_prints_nothing():
    display = make_display()
    display.print_message("")
    assert display.stream.getvalue() == ""
